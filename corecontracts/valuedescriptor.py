"""Value descriptor: the description of a kind of reading value."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any

from corecontracts.contract import ContractInvalidError, Validator, marshal

_FORMAT_SPECIFIER = re.compile(r"%(\d+\$)?([-#+ 0,(<]*)?(\d+)?(\.\d+)?([tT])?([a-zA-Z%])")

_STR_FIELDS = (
    ("id", "id"),
    ("description", "description"),
    ("name", "name"),
    ("type", "type"),
    ("uom_label", "uomLabel"),
    ("formatting", "formatting"),
    ("media_type", "mediaType"),
    ("float_encoding", "floatEncoding"),
)
_INT_FIELDS = (("created", "created"), ("modified", "modified"), ("origin", "origin"))
_ANY_FIELDS = (("min", "min"), ("max", "max"), ("default_value", "defaultValue"))


def _check_str(decoded: dict[str, Any], key: str) -> str | None:
    value = decoded.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"ValueDescriptor {key} should be a string")
    return value


def _check_int(decoded: dict[str, Any], key: str) -> int:
    value = decoded.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"ValueDescriptor {key} should be an integer")
    return value


def _check_labels(decoded: dict[str, Any]) -> list[str]:
    labels = decoded.get("labels")
    if labels is None:
        return []
    if not isinstance(labels, list) or not all(isinstance(label, str) for label in labels):
        raise ValueError("ValueDescriptor labels should be a list of strings")
    return list(labels)


@dataclass
class ValueDescriptor(Validator):
    """Describes the values of readings with the same name."""

    id: str = ""
    created: int = 0
    description: str = ""
    modified: int = 0
    origin: int = 0
    name: str = ""
    min: Any = None
    max: Any = None
    default_value: Any = None
    type: str = ""
    uom_label: str = ""
    formatting: str = ""
    labels: list[str] = field(default_factory=list)
    media_type: str = ""
    float_encoding: str = ""
    _validated: bool = field(default=False, init=False, repr=False, compare=False)

    @classmethod
    def from_json(cls, data: str | bytes) -> ValueDescriptor:
        """Decode and validate a value descriptor; raises ContractInvalidError if invalid."""
        decoded = json.loads(data)
        if decoded is None:
            decoded = {}
        if not isinstance(decoded, dict):
            raise ValueError(f"cannot decode {type(decoded).__name__} into ValueDescriptor")
        kwargs: dict[str, Any] = {attr: _check_str(decoded, key) or "" for attr, key in _STR_FIELDS}
        kwargs.update({attr: _check_int(decoded, key) for attr, key in _INT_FIELDS})
        kwargs.update({attr: decoded.get(key) for attr, key in _ANY_FIELDS})
        kwargs["labels"] = _check_labels(decoded)
        descriptor = cls(**kwargs)
        descriptor._validated = descriptor.validate()
        return descriptor

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}

        def put(key: str, value: Any) -> None:
            if value:
                result[key] = value

        put("id", self.id)
        put("created", self.created)
        put("description", self.description)
        put("modified", self.modified)
        put("origin", self.origin)
        put("name", self.name)
        # Min, max and default value are written, even as null, unless min/max is "".
        if self.min != "":
            result["min"] = self.min
        if self.max != "":
            result["max"] = self.max
        if self.min != "":
            result["defaultValue"] = self.default_value
        put("type", self.type)
        put("uomLabel", self.uom_label)
        put("formatting", self.formatting)
        if self.labels:
            result["labels"] = list(self.labels)
        put("mediaType", self.media_type)
        put("floatEncoding", self.float_encoding)
        return result

    def to_json(self) -> str:
        return marshal(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()

    def validate(self) -> bool:
        """Require a printf-style formatting string, if given, and a name."""
        if not self._validated:
            if self.formatting and not _FORMAT_SPECIFIER.search(self.formatting):
                raise ContractInvalidError(
                    f"format is not a valid printf format: {self.formatting}"
                )
            if not self.name:
                raise ContractInvalidError("name for value descriptor not specified")
        return True