"""String-valued states: operating state, notification severity and status, transmission status."""

from __future__ import annotations

import json
from enum import Enum


class _StrEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class OperatingState(_StrEnum):
    ENABLED = "ENABLED"
    DISABLED = "DISABLED"


class NotificationsSeverity(_StrEnum):
    CRITICAL = "CRITICAL"
    NORMAL = "NORMAL"


class NotificationsStatus(_StrEnum):
    NEW = "NEW"
    PROCESSED = "PROCESSED"
    ESCALATED = "ESCALATED"


class TransmissionStatus(_StrEnum):
    FAILED = "FAILED"
    SENT = "SENT"
    ACKNOWLEDGED = "ACKNOWLEDGED"
    TRXESCALATED = "TRXESCALATED"


def _decode_string(data: str | bytes, type_name: str) -> str:
    text = data.decode("utf-8", "replace") if isinstance(data, (bytes, bytearray)) else data
    try:
        value = json.loads(data)
    except (ValueError, TypeError):
        value = None
    if not isinstance(value, str):
        raise ValueError(f"{type_name} should be a string, got {text}")
    return value


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _lookup(enum_type: type[_StrEnum], data: str | bytes) -> _StrEnum:
    value = _decode_string(data, enum_type.__name__)
    try:
        return enum_type(value)
    except ValueError:
        raise ValueError(f"invalid {enum_type.__name__} {_quote(value)}") from None


def parse_operating_state(data: str | bytes) -> str:
    """Decode a JSON string as an operating state, upper-cased but not yet validated."""
    return _decode_string(data, "OperatingState").upper()


def validate_operating_state(value: str) -> bool:
    """Return True if ``value`` names an operating state, else raise ContractInvalidError."""
    from corecontracts.contract import ContractInvalidError

    if value not in OperatingState._value2member_map_:
        raise ContractInvalidError(f"invalid OperatingState {_quote(str(value))}")
    return True


def get_operating_state(name: str) -> OperatingState | None:
    """Look up an operating state by name, ignoring case; None if unknown."""
    return OperatingState._value2member_map_.get(name.upper())


def parse_notifications_severity(data: str | bytes) -> NotificationsSeverity:
    """Decode a JSON string as a notification severity."""
    return _lookup(NotificationsSeverity, data)


def is_notifications_severity(value: str) -> bool:
    return value in NotificationsSeverity._value2member_map_


def parse_notifications_status(data: str | bytes) -> NotificationsStatus:
    """Decode a JSON string as a notification status."""
    return _lookup(NotificationsStatus, data)


def is_notifications_status(value: str) -> bool:
    return value in NotificationsStatus._value2member_map_


def parse_transmission_status(data: str | bytes) -> TransmissionStatus:
    """Decode a JSON string as a transmission status."""
    return _lookup(TransmissionStatus, data)


def is_transmission_status(value: str) -> bool:
    return value in TransmissionStatus._value2member_map_