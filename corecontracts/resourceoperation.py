"""A single operation on a device resource, as found in device profiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from corecontracts.contract import marshal


@dataclass
class ResourceOperation:
    """One get or set step of a profile resource; empty values are left out of JSON."""

    index: str = ""
    operation: str = ""
    object: str = ""
    parameter: str = ""
    resource: str = ""
    secondary: list[str] = field(default_factory=list)
    mappings: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        items = (
            ("index", self.index),
            ("operation", self.operation),
            ("object", self.object),
            ("parameter", self.parameter),
            ("resource", self.resource),
        )
        result: dict[str, Any] = {key: value for key, value in items if value}
        if self.secondary:
            result["secondary"] = list(self.secondary)
        if self.mappings:
            result["mappings"] = dict(sorted(self.mappings.items()))
        return result

    def to_json(self) -> str:
        return marshal(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()