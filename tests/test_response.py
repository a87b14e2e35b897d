import pytest

from corecontracts.response import Response

CODE = "200"
DESCRIPTION = "ok"
VALUE1 = "temperature"
VALUE2 = "humidity"
EXPECTED_VALUES = [VALUE1, VALUE2]


def make_response():
    return Response(code=CODE, description=DESCRIPTION, expected_values=list(EXPECTED_VALUES))


def test_marshal_matches_string():
    r = make_response()
    assert r.to_json() == str(r)


def test_empty_marshal():
    empty = Response()
    assert empty.to_json() == str(empty)
    assert empty.to_json() == "{}"


def test_string():
    expected = (
        '{"code":"' + CODE + '"'
        + ',"description":"' + DESCRIPTION + '"'
        + ',"expectedValues":["' + VALUE1 + '","' + VALUE2 + '"]}'
    )
    assert str(make_response()) == expected


@pytest.mark.parametrize(
    "other, want",
    [
        (Response(code=CODE, description=DESCRIPTION, expected_values=list(EXPECTED_VALUES)), True),
        (Response(code="foobar", description=DESCRIPTION, expected_values=list(EXPECTED_VALUES)), False),
        (Response(code=CODE, description="foobar", expected_values=list(EXPECTED_VALUES)), False),
        (Response(code=CODE, description=DESCRIPTION, expected_values=["foo", "bar"]), False),
    ],
)
def test_equals(other, want):
    assert make_response().equals(other) is want