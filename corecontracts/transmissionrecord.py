"""A record of one attempt to transmit a notification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from corecontracts.contract import marshal
from corecontracts.enums import TransmissionStatus


@dataclass
class TransmissionRecord:
    """Outcome of a transmission; an empty response is written as null."""

    status: TransmissionStatus | str = ""
    response: str = ""
    sent: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": str(self.status),
            "response": self.response or None,
            "sent": self.sent,
        }

    def to_json(self) -> str:
        return marshal(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()