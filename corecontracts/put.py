"""The put command of a device profile."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from corecontracts.contract import marshal
from corecontracts.response import Response


@dataclass
class Put:
    """A put action with the names of the parameters it accepts."""

    path: str = ""
    responses: list[Response] = field(default_factory=list)
    url: str = ""
    parameter_names: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.path:
            result["path"] = self.path
        if self.responses:
            result["responses"] = [r.to_dict() for r in self.responses]
        if self.parameter_names:
            result["parameterNames"] = list(self.parameter_names)
        if self.url:
            result["url"] = self.url
        return result

    def to_json(self) -> str:
        return marshal(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()

    def all_associated_value_descriptors(self, vd_names: dict[str, str]) -> dict[str, str]:
        """Add each parameter name not yet in ``vd_names`` to it, and return it."""
        for name in self.parameter_names:
            vd_names.setdefault(name, name)
        return vd_names