"""Units of a device profile property."""

from __future__ import annotations

from dataclasses import dataclass

from corecontracts.contract import marshal


@dataclass
class Units:
    """Units description; empty strings are left out of JSON."""

    type: str = ""
    read_write: str = ""
    default_value: str = ""

    def to_dict(self) -> dict[str, str]:
        items = (
            ("type", self.type),
            ("readWrite", self.read_write),
            ("defaultValue", self.default_value),
        )
        return {key: value for key, value in items if value}

    def to_json(self) -> str:
        return marshal(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()