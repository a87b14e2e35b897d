"""A request to change the operating state of a resource."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from corecontracts.contract import Validator, marshal
from corecontracts.enums import OperatingState, parse_operating_state, validate_operating_state


@dataclass
class OperatingStateUpdateRequest(Validator):
    """Carries the new operating state; an empty state is left out of JSON."""

    operating_state: OperatingState | str = ""
    _validated: bool = field(default=False, init=False, repr=False, compare=False)

    @classmethod
    def from_json(cls, data: str | bytes) -> OperatingStateUpdateRequest:
        """Decode and validate a request; the state is matched without regard to case."""
        decoded = json.loads(data)
        if decoded is None:
            decoded = {}
        if not isinstance(decoded, dict):
            raise ValueError(
                f"cannot decode {type(decoded).__name__} into OperatingStateUpdateRequest"
            )
        raw = decoded.get("operatingState")
        state = "" if raw is None else parse_operating_state(json.dumps(raw))
        request = cls(operating_state=state)
        request._validated = request.validate()
        return request

    def to_dict(self) -> dict[str, Any]:
        if not self.operating_state:
            return {}
        return {"operatingState": str(self.operating_state)}

    def to_json(self) -> str:
        return marshal(self.to_dict())

    def validate(self) -> bool:
        """Raise ContractInvalidError unless the state is a known operating state."""
        if not self._validated:
            return validate_operating_state(str(self.operating_state))
        return True