"""JSON field mapping for configuration dataclasses.

Fields are written under the name given in their ``json`` metadata entry
(falling back to the attribute name). Fields marked ``internal`` are never
serialized or merged.
"""

from dataclasses import MISSING, Field, fields
from typing import Any, TypeVar

T = TypeVar("T")


def json_name(f: Field) -> str:
    """Get the JSON key for a dataclass field."""
    return f.metadata.get("json", f.name)


def public_fields(obj_or_cls) -> list[Field]:
    """Get the serializable, mergeable fields of a configuration dataclass."""
    return [f for f in fields(obj_or_cls) if not f.metadata.get("internal", False)]


def _default_type(f: Field) -> type | None:
    """Get the type of a field's default value, if it has one."""
    if f.default is not MISSING:
        return type(f.default)
    if f.default_factory is not MISSING:
        return type(f.default_factory())
    return None


def to_json_dict(obj) -> dict[str, Any]:
    """Convert a configuration dataclass to a JSON-ready dict.

    Args:
        obj: Configuration dataclass instance

    Returns:
        Dict keyed by JSON field names
    """
    return {json_name(f): getattr(obj, f.name) for f in public_fields(obj)}


def from_json_dict(cls: type[T], data: dict[str, Any]) -> T:
    """Build a configuration dataclass from decoded JSON.

    Keys that don't match a field are ignored, and so are null values, which
    leave the field at its zero value. Other values must have the same type
    as the field's default.

    Args:
        cls: Configuration dataclass type
        data: Decoded JSON object

    Returns:
        New instance of cls

    Raises:
        TypeError: If data is not an object or a value has the wrong type
    """
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object for {cls.__name__}, got {type(data).__name__}")

    values = {}
    for f in public_fields(cls):
        key = json_name(f)
        if key not in data:
            continue

        value = data[key]
        if value is None:
            continue

        expected = _default_type(f)
        if expected is None:
            values[f.name] = value
            continue

        # bool is an int subclass, but never a valid int setting
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise TypeError(f"{key} must be of type {expected.__name__}")
        values[f.name] = value

    return cls(**values)
