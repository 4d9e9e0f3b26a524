"""Step-aligned increments for property values."""

from __future__ import annotations

from .device import DeviceProperty
from .errors import ArgumentError


def effective_step(increment_size: int, requested: int | None = None) -> int:
    """Return the amount to move a value by.

    Without a request the property's own increment size is used. A
    requested step that is not a multiple of the increment size is
    rounded up to the next multiple.
    """
    if requested is None:
        return increment_size
    if requested <= 0:
        raise ArgumentError(f"Step must be a positive number, got {requested}.")
    if increment_size <= 0 or requested % increment_size == 0:
        return requested
    return (requested // increment_size + 1) * increment_size


def clamp(value: int, minimum: int, maximum: int) -> int:
    return max(minimum, min(maximum, value))


def stepped_value(prop: DeviceProperty, direction: int, requested: int | None = None) -> int:
    """Current value moved by one step in ``direction`` (1 or -1), kept in range."""
    step = effective_step(prop.increment_size, requested)
    return clamp(prop.get_value() + direction * step, prop.min_value, prop.max_value)
