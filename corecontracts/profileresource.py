"""A named resource of a device profile with its get and set operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from corecontracts.contract import marshal
from corecontracts.resourceoperation import ResourceOperation


@dataclass
class ProfileResource:
    """Profile resource; an empty name and empty operation lists are left out of JSON."""

    name: str = ""
    get: list[ResourceOperation] = field(default_factory=list)
    set: list[ResourceOperation] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.name:
            result["name"] = self.name
        if self.get:
            result["get"] = [op.to_dict() for op in self.get]
        if self.set:
            result["set"] = [op.to_dict() for op in self.set]
        return result

    def to_json(self) -> str:
        return marshal(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()