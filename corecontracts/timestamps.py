"""Creation, modification and origin timestamps shared by many models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from corecontracts.contract import marshal


@dataclass
class Timestamps:
    """Millisecond timestamps; zero values are left out of JSON."""

    created: int = 0
    modified: int = 0
    origin: int = 0

    def to_dict(self) -> dict[str, Any]:
        items = (("created", self.created), ("modified", self.modified), ("origin", self.origin))
        return {key: value for key, value in items if value}

    def to_json(self) -> str:
        return marshal(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()

    def compare_to(self, other: Timestamps) -> int:
        """Return 1 if ``other`` was created later than this one, else -1."""
        return 1 if other.created > self.created else -1