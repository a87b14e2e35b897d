"""A device profile property: its value description and units."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from corecontracts.contract import marshal
from corecontracts.propertyvalue import PropertyValue
from corecontracts.units import Units


@dataclass
class ProfileProperty:
    value: PropertyValue = field(default_factory=PropertyValue)
    units: Units = field(default_factory=Units)

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value.to_dict(), "units": self.units.to_dict()}

    def to_json(self) -> str:
        return marshal(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()