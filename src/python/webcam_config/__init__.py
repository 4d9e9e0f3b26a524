"""Save and restore DirectShow webcam settings."""

from .backend import BoundDevice, DirectShowBackend, NativeControl
from .controller import WebcamConfigController
from .device import CameraDevice, DeviceProperty
from .dto import CameraDto, CameraPropertyDto
from .manager import CameraManager

__all__ = [
    "BoundDevice",
    "CameraDevice",
    "CameraDto",
    "CameraManager",
    "CameraPropertyDto",
    "DeviceProperty",
    "DirectShowBackend",
    "NativeControl",
    "WebcamConfigController",
]
