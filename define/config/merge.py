"""Layered configuration merging."""

from dataclasses import replace
from typing import TypeVar

from .serialization import public_fields

T = TypeVar("T")


def _is_zero(value) -> bool:
    return value is None or not value


def merge_configurations(*configs: T) -> T:
    """Merge configurations from highest to lowest priority.

    Each field takes the first non-zero value found, reading the arguments
    left to right. Zero means the type's empty value ("" or 0), so an
    explicit zero in a higher-priority configuration can't override a
    non-zero value further right. Internal fields are taken from the
    first configuration unchanged.

    Args:
        *configs: Dataclass instances of one type, highest priority first

    Returns:
        New merged instance

    Raises:
        ValueError: If no configurations are given
        TypeError: If the configurations are of different types

    Example:
        merged = merge_configurations(flags, file, environment, defaults)
    """
    if not configs:
        raise ValueError("at least one configuration is required")

    first = configs[0]
    for config in configs[1:]:
        if type(config) is not type(first):
            raise TypeError(
                f"cannot merge {type(config).__name__} into {type(first).__name__}"
            )

    values = {}
    for f in public_fields(first):
        for config in configs:
            value = getattr(config, f.name)
            if not _is_zero(value):
                values[f.name] = value
                break

    return replace(first, **values)
