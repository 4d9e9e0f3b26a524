"""DirectShow backend via comtypes (Windows only).

Unusable elsewhere; :func:`is_available` tells whether it can be built.
"""

from __future__ import annotations

import logging

from .backend import BoundDevice
from .constants import (
    CLSID_SYSTEM_DEVICE_ENUM,
    CLSID_VIDEO_INPUT_DEVICE_CATEGORY,
    IID_IBASE_FILTER,
)
from .errors import DeviceBindingFailed, DeviceNotFound, NativeCallError

logger = logging.getLogger(__name__)

_COMTYPES_AVAILABLE = False

try:
    import comtypes
    import comtypes.client

    from . import com_interfaces as _com

    _COMTYPES_AVAILABLE = True
except ImportError:
    comtypes = None  # type: ignore[assignment]
    _com = None  # type: ignore[assignment]


def is_available() -> bool:
    """Check if the comtypes DirectShow backend can be used."""
    return _COMTYPES_AVAILABLE


class ComtypesControl:
    """NativeControl over a bound ``IAMCameraControl``/``IAMVideoProcAmp`` pointer."""

    def __init__(self, interface: object) -> None:
        self._interface = interface

    def get_range(self, property_id: int) -> tuple[int, int, int, int, int]:
        return self._call("GetRange", property_id)

    def get(self, property_id: int) -> tuple[int, int]:
        return self._call("Get", property_id)

    def set(self, property_id: int, value: int, flags: int) -> None:
        self._call("Set", property_id, value, flags)

    def _call(self, method: str, *args: int):
        try:
            return getattr(self._interface, method)(*args)
        except comtypes.COMError as exc:
            raise NativeCallError(exc.hresult) from exc


class ComtypesDirectShowBackend:
    """DirectShow backend enumerating the video input device category.

    Only usable when comtypes is importable (Windows).
    """

    def __init__(self) -> None:
        if not _COMTYPES_AVAILABLE:
            raise RuntimeError(
                "DirectShow backend not available. "
                "It requires Windows and the comtypes package."
            )

    def list_device_names(self) -> list[str]:
        return [name for name, _ in self._monikers()]

    def bind_device(self, name: str) -> BoundDevice:
        for device_name, moniker in self._monikers():
            if device_name == name:
                return self._bind(device_name, moniker)
        raise DeviceNotFound(f"Camera {name} not found.")

    def _monikers(self) -> list[tuple[str, object]]:
        dev_enum = comtypes.client.CreateObject(
            comtypes.GUID(CLSID_SYSTEM_DEVICE_ENUM),
            interface=_com.ICreateDevEnum,
        )
        class_enum = dev_enum.CreateClassEnumerator(
            comtypes.GUID(CLSID_VIDEO_INPUT_DEVICE_CATEGORY), 0
        )
        # S_FALSE with a NULL enumerator means the category is empty
        if not class_enum:
            return []

        monikers = []
        moniker, fetched = class_enum.Next(1)
        while fetched == 1:
            try:
                bag = moniker.BindToStorage(
                    None, None, _com.IPropertyBag._iid_
                ).QueryInterface(_com.IPropertyBag)
                monikers.append((str(bag.Read("FriendlyName", None)), moniker))
            except comtypes.COMError as exc:
                logger.warning("Skipping video input device without a readable name: %s", exc)
            moniker, fetched = class_enum.Next(1)
        return monikers

    @staticmethod
    def _bind(name: str, moniker: object) -> BoundDevice:
        try:
            source = moniker.BindToObject(None, None, comtypes.GUID(IID_IBASE_FILTER))
        except comtypes.COMError as exc:
            raise DeviceBindingFailed(f"could not bind {name} as filter") from exc
        try:
            camera_control = source.QueryInterface(_com.IAMCameraControl)
        except comtypes.COMError as exc:
            raise DeviceBindingFailed(f"could not handle {name} as camera") from exc
        try:
            video_proc_amp = source.QueryInterface(_com.IAMVideoProcAmp)
        except comtypes.COMError as exc:
            raise DeviceBindingFailed(f"could not handle {name} as video proc amp") from exc
        logger.debug("Bound control interfaces of %s", name)
        return BoundDevice(ComtypesControl(camera_control), ComtypesControl(video_proc_amp))
