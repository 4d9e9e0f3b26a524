"""Exception hierarchy for webcam settings handling."""

from __future__ import annotations


class WebcamConfigError(Exception):
    """Base class for every error the tool reports to the user."""


class NativeCallError(WebcamConfigError):
    """A native DirectShow call returned a failing result code."""

    def __init__(self, hresult: int, message: str | None = None):
        self.hresult = hresult
        super().__init__(message or f"Native call failed with result code {hresult:#010x}")


class PropertyNotSupported(WebcamConfigError):
    """The device does not implement a property id."""


class PropertyAccessError(WebcamConfigError):
    """Reading or writing the live state of a property failed."""


class DeviceBindingFailed(WebcamConfigError):
    """A video input device lacks the camera control interfaces."""


class DeviceNotFound(WebcamConfigError):
    """No connected camera carries the requested name."""


class PropertyNotFound(WebcamConfigError):
    """The camera has no property with the requested name."""


class InvalidSettingsData(WebcamConfigError):
    """Saved settings are malformed or do not match the target camera."""


class UnsupportedAutoAdaptRequest(WebcamConfigError):
    """Automatic mode was requested for a property that cannot adapt."""


class ArgumentError(WebcamConfigError):
    """The command line does not describe a runnable command."""
