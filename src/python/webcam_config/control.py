"""Uniform accessor over one native control group."""

from __future__ import annotations

from dataclasses import dataclass

from .backend import NativeControl
from .constants import (
    CAMERA_CONTROL_NAMES,
    CAMERA_CONTROL_TAG,
    FLAGS_AUTO,
    FLAGS_MANUAL,
    VIDEO_PROC_AMP_NAMES,
    VIDEO_PROC_AMP_TAG,
)
from .errors import NativeCallError, PropertyAccessError, PropertyNotSupported


@dataclass(frozen=True)
class ControlGroup:
    """Name table and tag of a native control group."""

    tag: str
    property_names: tuple[str, ...]
    fallback_prefix: str

    def property_name(self, property_id: int) -> str:
        if 0 <= property_id < len(self.property_names):
            return self.property_names[property_id]
        return f"{self.fallback_prefix} {property_id}"


CAMERA_CONTROL = ControlGroup(CAMERA_CONTROL_TAG, CAMERA_CONTROL_NAMES, "CamControl")
VIDEO_PROC_AMP = ControlGroup(VIDEO_PROC_AMP_TAG, VIDEO_PROC_AMP_NAMES, "VideoProcAmp")


@dataclass(frozen=True)
class PropertyMetadata:
    """Static description of a property as reported by the driver."""

    can_auto_adapt: bool
    default_value: int
    min_value: int
    max_value: int
    step: int


class ControlAdapter:
    """Translates property ids into get/range/set calls on one control group.

    ``can_auto_adapt`` comes from the capability flags of the range query,
    while the auto state of :meth:`read` comes from the flags of the value
    query. Both test the same bit.
    """

    def __init__(self, group: ControlGroup, native: NativeControl):
        self.group = group
        self._native = native

    @property
    def tag(self) -> str:
        return self.group.tag

    def property_name(self, property_id: int) -> str:
        return self.group.property_name(property_id)

    def metadata(self, property_id: int) -> PropertyMetadata:
        try:
            minimum, maximum, step, default, caps = self._native.get_range(property_id)
        except NativeCallError as exc:
            raise PropertyNotSupported(
                f"Property {self.property_name(property_id)} is not supported."
            ) from exc
        return PropertyMetadata(
            can_auto_adapt=bool(caps & FLAGS_AUTO),
            default_value=default,
            min_value=minimum,
            max_value=maximum,
            step=step,
        )

    def read(self, property_id: int) -> tuple[int, bool]:
        """Return the live ``(value, is_auto)`` of a property."""
        try:
            value, flags = self._native.get(property_id)
        except NativeCallError as exc:
            raise PropertyAccessError(
                f"Failed to get state of {self.property_name(property_id)}"
            ) from exc
        return value, bool(flags & FLAGS_AUTO)

    def write(self, property_id: int, value: int, auto: bool) -> None:
        flags = FLAGS_AUTO if auto else FLAGS_MANUAL
        try:
            self._native.set(property_id, value, flags)
        except NativeCallError as exc:
            raise PropertyAccessError(
                f"Failed to change state of {self.property_name(property_id)}"
            ) from exc
