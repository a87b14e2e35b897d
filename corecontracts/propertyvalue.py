"""Value description of a device profile property."""

from __future__ import annotations

from dataclasses import dataclass

from corecontracts.contract import marshal

BASE64_ENCODING = "Base64"
"""The float value is represented in Base64 encoding."""

E_NOTATION = "eNotation"
"""The float value is represented in e-notation."""

_JSON_KEYS = (
    ("type", "type"),
    ("read_write", "readWrite"),
    ("minimum", "minimum"),
    ("maximum", "maximum"),
    ("default_value", "defaultValue"),
    ("size", "size"),
    ("mask", "mask"),
    ("shift", "shift"),
    ("scale", "scale"),
    ("offset", "offset"),
    ("base", "base"),
    ("assertion", "assertion"),
    ("precision", "precision"),
    ("float_encoding", "floatEncoding"),
    ("media_type", "mediaType"),
)


@dataclass
class PropertyValue:
    """How a property's raw value is transformed; empty strings are left out of JSON."""

    type: str = ""
    read_write: str = ""
    minimum: str = ""
    maximum: str = ""
    default_value: str = ""
    size: str = ""
    mask: str = ""
    shift: str = ""
    scale: str = ""
    offset: str = ""
    base: str = ""
    assertion: str = ""
    precision: str = ""
    float_encoding: str = ""
    media_type: str = ""

    def to_dict(self) -> dict[str, str]:
        values = ((key, getattr(self, attr)) for attr, key in _JSON_KEYS)
        return {key: value for key, value in values if value}

    def to_json(self) -> str:
        return marshal(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()