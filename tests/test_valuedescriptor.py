import dataclasses

import pytest

from corecontracts.contract import ContractInvalidError
from corecontracts.propertyvalue import E_NOTATION
from corecontracts.valuedescriptor import ValueDescriptor

TEST_MEDIA_TYPE = "application/cbor"


def make_descriptor() -> ValueDescriptor:
    return ValueDescriptor(
        created=123,
        modified=123,
        origin=123,
        name="Temperature",
        description="test description",
        min=-70,
        max=140,
        default_value=32,
        formatting="%d",
        labels=["temp", "room temp"],
        uom_label="C",
        media_type=TEST_MEDIA_TYPE,
        float_encoding=E_NOTATION,
    )


def test_value_descriptor_string():
    expected = (
        '{"created":123,"description":"test description","modified":123,"origin":123,'
        '"name":"Temperature","min":-70,"max":140,"defaultValue":32,"uomLabel":"C",'
        '"formatting":"%d","labels":["temp","room temp"],"mediaType":"application/cbor",'
        '"floatEncoding":"eNotation"}'
    )
    assert str(make_descriptor()) == expected


def test_to_json_matches_str():
    descriptor = make_descriptor()
    assert descriptor.to_json() == str(descriptor)


def test_empty_descriptor_writes_null_bounds():
    assert ValueDescriptor().to_json() == '{"min":null,"max":null,"defaultValue":null}'


def test_empty_string_min_omits_min_and_default():
    descriptor = ValueDescriptor(name="n", min="", max=5, default_value=1)
    assert descriptor.to_dict() == {"name": "n", "max": 5}


@pytest.mark.parametrize(
    "changes, expect_error",
    [
        ({}, False),
        ({"formatting": "wut?"}, True),
        ({"name": ""}, True),
    ],
)
def test_value_descriptor_validation(changes, expect_error):
    descriptor = dataclasses.replace(make_descriptor(), **changes)
    if expect_error:
        with pytest.raises(ContractInvalidError):
            descriptor.validate()
    else:
        assert descriptor.validate() is True


def test_invalid_format_message():
    with pytest.raises(ContractInvalidError, match="not a valid printf format: wut\\?"):
        ValueDescriptor(name="n", formatting="wut?").validate()


def test_from_json_round_trip():
    original = make_descriptor()
    decoded = ValueDescriptor.from_json(original.to_json())
    assert decoded == original


def test_from_json_null_bounds_stay_none():
    decoded = ValueDescriptor.from_json('{"name":"n","min":null,"labels":null}')
    assert decoded.min is None
    assert decoded.labels == []


def test_from_json_invalid_raises():
    with pytest.raises(ContractInvalidError):
        ValueDescriptor.from_json('{"description":"no name"}')


def test_from_json_bad_types_raise():
    with pytest.raises(ValueError):
        ValueDescriptor.from_json('{"name":1}')
    with pytest.raises(ValueError):
        ValueDescriptor.from_json('{"name":"n","labels":"x"}')
    with pytest.raises(ValueError):
        ValueDescriptor.from_json('"text"')