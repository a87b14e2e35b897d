"""An operation for system management processing."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from corecontracts.contract import marshal


@dataclass
class Operation:
    """An action applied to a list of services; empty values are left out of JSON."""

    action: str = ""
    services: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: str | bytes) -> Operation:
        """Decode an operation; a missing action stays empty and services default to []."""
        decoded = json.loads(data)
        if decoded is None:
            return cls()
        if not isinstance(decoded, dict):
            raise ValueError(f"cannot decode {type(decoded).__name__} into Operation")
        action = decoded.get("action")
        if action is not None and not isinstance(action, str):
            raise ValueError("Operation action should be a string")
        services = decoded.get("services")
        if services is not None and (
            not isinstance(services, list) or not all(isinstance(s, str) for s in services)
        ):
            raise ValueError("Operation services should be a list of strings")
        return cls(action=action or "", services=list(services or []))

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.action:
            result["action"] = self.action
        if self.services:
            result["services"] = list(self.services)
        return result

    def to_json(self) -> str:
        return marshal(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()