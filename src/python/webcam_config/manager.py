"""Camera enumeration and lookup by name."""

from __future__ import annotations

import logging

from .backend import DirectShowBackend
from .device import CameraDevice
from .errors import DeviceBindingFailed

logger = logging.getLogger(__name__)


class CameraManager:
    """Lists and resolves connected cameras.

    Every call enumerates the hardware again and returns fresh
    :class:`CameraDevice` objects.
    """

    def __init__(self, backend: DirectShowBackend):
        self._backend = backend

    def get_list_of_available_camera_names(self) -> list[str]:
        """Names of video input devices in enumeration order."""
        return list(self._backend.list_device_names())

    def get_list_of_available_cameras(self) -> list[CameraDevice]:
        """Bind every enumerated device, skipping those without camera controls."""
        cameras = []
        for name in self._backend.list_device_names():
            try:
                cameras.append(CameraDevice(name, self._backend.bind_device(name)))
            except DeviceBindingFailed as exc:
                logger.warning("Skipping %s: %s", name, exc)
        return cameras

    def get_camera_by_name(self, name: str) -> CameraDevice:
        """Bind the camera with exactly this name.

        Raises DeviceNotFound if it is not connected and
        DeviceBindingFailed if it has no camera controls.
        """
        return CameraDevice(name, self._backend.bind_device(name))
