"""JSON serialization utilities for cssbuilder value objects."""

from __future__ import annotations

import json
import math
from typing import Any

from .errors import DecodeError


def _public_attrs(obj: Any) -> dict[str, Any]:
    """Collect an object's public attributes: __slots__ first, then __dict__."""
    attrs: dict[str, Any] = {}
    for cls in reversed(type(obj).__mro__):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name.startswith("_") or name in attrs:
                continue
            if hasattr(obj, name):
                attrs[name] = getattr(obj, name)
    for name, value in getattr(obj, "__dict__", {}).items():
        if not name.startswith("_"):
            attrs[name] = value
    return attrs


def _replace_non_finite(value: Any) -> Any:
    # NaN and the infinities have no JSON spelling; write them as null
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _replace_non_finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_replace_non_finite(item) for item in value]
    return value


def _encode_default(obj: Any) -> Any:
    attrs = _public_attrs(obj)
    if not attrs and not hasattr(obj, "__dict__"):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    return _replace_non_finite(attrs)


def to_json(value: Any) -> str:
    """Return compact JSON text for value.

    Lists, dicts, strings, numbers, booleans and None map directly. Other
    objects are written as a JSON object of their public attributes.
    Non-finite floats are written as null.
    """
    return json.dumps(
        _replace_non_finite(value),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        default=_encode_default,
    )


def from_json(proto: type | None, text: str) -> Any:
    """
    Parse JSON text, optionally into an instance of proto.

    With a proto class, the payload must be a JSON object. A new instance is
    created without calling proto.__init__ and every key becomes an
    attribute, so the result carries proto's methods.

    Args:
        proto: Class to instantiate, or None for plain JSON values
        text: The JSON document

    Returns:
        The decoded value
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError("invalid-json", str(e)) from e

    if proto is None:
        return data

    if not isinstance(data, dict):
        raise DecodeError("expected-json-object", f"got {type(data).__name__}")

    obj = proto.__new__(proto)
    for key, value in data.items():
        try:
            setattr(obj, key, value)
        except (AttributeError, TypeError) as e:
            # __slots__ classes refuse unknown attributes; dunders like
            # __class__ refuse values of the wrong type
            raise DecodeError("unknown-attribute", f"{proto.__name__}.{key}") from e
    return obj
