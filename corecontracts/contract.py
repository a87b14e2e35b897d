"""Shared contract machinery: validation errors, the validator base and JSON output."""

from __future__ import annotations

import base64
import dataclasses
import json
from typing import Any

_HTML_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


class ContractInvalidError(Exception):
    """Raised when a model fails an integrity check."""


class Validator:
    """Base for models that can check their own internal state."""

    def validate(self) -> bool:
        """Validate every field that is itself a Validator; return True on success."""
        validate_fields(self)
        return True


def validate_fields(obj: Any) -> None:
    """Run ``validate`` on each field of ``obj`` that is a Validator.

    Any failure is re-raised as a ContractInvalidError carrying the same message.
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        values = (getattr(obj, field.name) for field in dataclasses.fields(obj))
    else:
        values = iter(vars(obj).values())
    for value in values:
        if isinstance(value, Validator):
            try:
                value.validate()
            except ContractInvalidError as err:
                raise ContractInvalidError(str(err)) from err


def _default(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def marshal(data: Any) -> str:
    """Encode ``data`` as compact JSON with HTML-sensitive characters escaped.

    Objects with a ``to_dict`` method are encoded through it and byte strings
    are encoded as base64 text.
    """
    text = json.dumps(data, separators=(",", ":"), ensure_ascii=False, default=_default)
    for raw, escaped in _HTML_ESCAPES:
        text = text.replace(raw, escaped)
    return text