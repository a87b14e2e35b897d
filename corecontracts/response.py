"""Response description for a get or put request to a service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from corecontracts.contract import marshal


@dataclass
class Response:
    """Expected response; empty values are left out of JSON."""

    code: str = ""
    description: str = ""
    expected_values: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.code:
            result["code"] = self.code
        if self.description:
            result["description"] = self.description
        if self.expected_values:
            result["expectedValues"] = list(self.expected_values)
        return result

    def to_json(self) -> str:
        return marshal(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()

    def equals(self, other: Response) -> bool:
        """Return True if code, description and expected values all match."""
        return (
            self.code == other.code
            and self.description == other.description
            and list(self.expected_values) == list(other.expected_values)
        )