"""A reading: one piece of data gathered from a device."""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass, field
from typing import Any

from corecontracts.contract import ContractInvalidError, Validator, marshal

_INT_FIELDS = (("pushed", "pushed"), ("created", "created"), ("origin", "origin"), ("modified", "modified"))
_STR_FIELDS = (("id", "id"), ("device", "device"), ("name", "name"), ("value", "value"))


def _optional_str(decoded: dict[str, Any], key: str) -> str | None:
    value = decoded.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"Reading {key} should be a string")
    return value


def _int(decoded: dict[str, Any], key: str) -> int:
    value = decoded.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Reading {key} should be an integer")
    return value


def _binary(decoded: dict[str, Any]) -> bytes:
    value = decoded.get("binaryValue")
    if value is None:
        return b""
    if not isinstance(value, str):
        raise ValueError("Reading binaryValue should be a base64 string")
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as err:
        raise ValueError(f"Reading binaryValue is not valid base64: {err}") from err


@dataclass
class Reading(Validator):
    """Sensor data from a device; empty and zero values are left out of JSON."""

    id: str = ""
    pushed: int = 0
    created: int = 0
    origin: int = 0
    modified: int = 0
    device: str = ""
    name: str = ""
    value: str = ""
    binary_value: bytes = b""
    _validated: bool = field(default=False, init=False, repr=False, compare=False)

    @classmethod
    def from_json(cls, data: str | bytes) -> Reading:
        """Decode and validate a reading; raises ContractInvalidError if it is invalid."""
        decoded = json.loads(data)
        if decoded is None:
            decoded = {}
        if not isinstance(decoded, dict):
            raise ValueError(f"cannot decode {type(decoded).__name__} into Reading")
        strings = {attr: _optional_str(decoded, key) or "" for attr, key in _STR_FIELDS}
        ints = {attr: _int(decoded, key) for attr, key in _INT_FIELDS}
        reading = cls(**strings, **ints, binary_value=_binary(decoded))
        reading._validated = reading.validate()
        return reading

    def to_dict(self) -> dict[str, Any]:
        items = (
            ("id", self.id),
            ("pushed", self.pushed),
            ("created", self.created),
            ("origin", self.origin),
            ("modified", self.modified),
            ("device", self.device),
            ("name", self.name),
            ("value", self.value),
        )
        result: dict[str, Any] = {key: value for key, value in items if value}
        if self.binary_value:
            result["binaryValue"] = base64.b64encode(bytes(self.binary_value)).decode("ascii")
        return result

    def to_json(self) -> str:
        return marshal(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()

    def validate(self) -> bool:
        """Require a value descriptor name and either a value or binary data."""
        if not self._validated:
            if not self.name:
                raise ContractInvalidError("name for reading's value descriptor not specified")
            if not self.value and not self.binary_value:
                raise ContractInvalidError("reading has no value")
        return True