import pytest

from corecontracts.contract import ContractInvalidError
from corecontracts.enums import OperatingState
from corecontracts.operatingupdate import OperatingStateUpdateRequest


@pytest.mark.parametrize(
    "state, expect_error",
    [
        ("ENABLED", False),
        ("DISABLED", False),
        ("", True),
        ("QWERTY", True),
    ],
)
def test_update_validation(state, expect_error):
    request = OperatingStateUpdateRequest(operating_state=state)
    if expect_error:
        with pytest.raises(ContractInvalidError):
            request.validate()
    else:
        assert request.validate() is True


def test_to_json_with_state():
    request = OperatingStateUpdateRequest(operating_state=OperatingState.ENABLED)
    assert request.to_json() == '{"operatingState":"ENABLED"}'


def test_to_json_empty():
    assert OperatingStateUpdateRequest().to_json() == "{}"


def test_from_json_upper_cases_state():
    request = OperatingStateUpdateRequest.from_json('{"operatingState":"disabled"}')
    assert request.operating_state == "DISABLED"
    assert request.to_json() == '{"operatingState":"DISABLED"}'


def test_from_json_round_trip():
    original = OperatingStateUpdateRequest(operating_state="ENABLED")
    assert OperatingStateUpdateRequest.from_json(original.to_json()) == original


def test_from_json_unknown_state_raises():
    with pytest.raises(ContractInvalidError):
        OperatingStateUpdateRequest.from_json('{"operatingState":"QWERTY"}')


def test_from_json_missing_state_raises():
    with pytest.raises(ContractInvalidError):
        OperatingStateUpdateRequest.from_json("{}")


def test_from_json_non_string_state_raises():
    with pytest.raises(ValueError, match="should be a string"):
        OperatingStateUpdateRequest.from_json('{"operatingState":5}')