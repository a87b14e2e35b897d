from corecontracts.put import Put
from corecontracts.response import Response

PATH = "test/path"
CODE = "200"
DESCRIPTION = "ok"
VALUE1 = "temperature"
VALUE2 = "humidity"


def make_put():
    response = Response(code=CODE, description=DESCRIPTION, expected_values=[VALUE1, VALUE2])
    return Put(path=PATH, responses=[response], parameter_names=[VALUE1, VALUE2])


def test_marshal_matches_string():
    put = make_put()
    assert put.to_json() == str(put)


def test_string():
    expected = (
        '{"path":"' + PATH
        + '","responses":[{"code":"' + CODE
        + '","description":"' + DESCRIPTION
        + '","expectedValues":["' + VALUE1
        + '","' + VALUE2
        + '"]}],"parameterNames":["' + VALUE1 + '","' + VALUE2 + '"]}'
    )
    assert str(make_put()) == expected


def test_url_comes_last():
    assert Put(path="p", url="u").to_json() == '{"path":"p","url":"u"}'


def test_all_associated_value_descriptors():
    names = {}
    result = make_put().all_associated_value_descriptors(names)
    assert len(names) == 2
    assert result is names
    assert names == {VALUE1: VALUE1, VALUE2: VALUE2}


def test_all_associated_value_descriptors_keeps_existing():
    names = {VALUE1: "kept"}
    make_put().all_associated_value_descriptors(names)
    assert names[VALUE1] == "kept"
    assert names[VALUE2] == VALUE2