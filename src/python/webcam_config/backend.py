"""DirectShow backend protocols.

These are the mockable boundary for testing; the Windows implementation
lives in :mod:`webcam_config.dshow_backend`.
"""

from __future__ import annotations

from typing import NamedTuple, Protocol, runtime_checkable


@runtime_checkable
class NativeControl(Protocol):
    """One bound native control group (``IAMCameraControl`` or ``IAMVideoProcAmp``).

    Every method raises :class:`~webcam_config.errors.NativeCallError`
    when the driver returns a failing result code.
    """

    def get_range(self, property_id: int) -> tuple[int, int, int, int, int]:
        """Return ``(min, max, step, default, caps_flags)`` for a property."""
        ...

    def get(self, property_id: int) -> tuple[int, int]:
        """Return ``(value, flags)`` for a property."""
        ...

    def set(self, property_id: int, value: int, flags: int) -> None:
        """Write a value together with the auto/manual flags."""
        ...


class BoundDevice(NamedTuple):
    """Both control groups of one video input device."""

    camera_control: NativeControl
    video_proc_amp: NativeControl


@runtime_checkable
class DirectShowBackend(Protocol):
    """Protocol defining device enumeration and binding."""

    def list_device_names(self) -> list[str]:
        """Names of all video input devices, in enumeration order."""
        ...

    def bind_device(self, name: str) -> BoundDevice:
        """Bind the control interfaces of the named device.

        Raises DeviceNotFound if no device has that name and
        DeviceBindingFailed if it lacks either control interface.
        """
        ...
