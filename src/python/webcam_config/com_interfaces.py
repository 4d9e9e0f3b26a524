"""comtypes declarations of the DirectShow interfaces used for device control.

Importing this module requires Windows and the ``comtypes`` package.
Only the leading part of each vtable that is actually called is declared.
"""

from __future__ import annotations

from ctypes import POINTER, c_int, c_long, c_ulong, c_ulonglong, c_wchar_p

from comtypes import COMMETHOD, GUID, HRESULT, IUnknown
from comtypes.automation import VARIANT

from .constants import (
    IID_IAM_CAMERA_CONTROL,
    IID_IAM_VIDEO_PROC_AMP,
    IID_ICREATE_DEV_ENUM,
    IID_IPROPERTY_BAG,
)


class IPropertyBag(IUnknown):
    _iid_ = GUID(IID_IPROPERTY_BAG)
    _methods_ = [
        COMMETHOD([], HRESULT, "Read",
                  (["in"], c_wchar_p, "pszPropName"),
                  (["out"], POINTER(VARIANT), "pVar"),
                  (["in"], POINTER(IUnknown), "pErrorLog")),
    ]


class IPersist(IUnknown):
    _iid_ = GUID("{0000010C-0000-0000-C000-000000000046}")
    _methods_ = [
        COMMETHOD([], HRESULT, "GetClassID",
                  (["out"], POINTER(GUID), "pClassID")),
    ]


class IPersistStream(IPersist):
    _iid_ = GUID("{00000109-0000-0000-C000-000000000046}")
    _methods_ = [
        COMMETHOD([], HRESULT, "IsDirty"),
        COMMETHOD([], HRESULT, "Load",
                  (["in"], POINTER(IUnknown), "pStm")),
        COMMETHOD([], HRESULT, "Save",
                  (["in"], POINTER(IUnknown), "pStm"),
                  (["in"], c_int, "fClearDirty")),
        COMMETHOD([], HRESULT, "GetSizeMax",
                  (["out"], POINTER(c_ulonglong), "pcbSize")),
    ]


class IMoniker(IPersistStream):
    _iid_ = GUID("{0000000F-0000-0000-C000-000000000046}")
    _methods_ = [
        COMMETHOD([], HRESULT, "BindToObject",
                  (["in"], POINTER(IUnknown), "pbc"),
                  (["in"], POINTER(IUnknown), "pmkToLeft"),
                  (["in"], POINTER(GUID), "riidResult"),
                  (["out"], POINTER(POINTER(IUnknown)), "ppvResult")),
        COMMETHOD([], HRESULT, "BindToStorage",
                  (["in"], POINTER(IUnknown), "pbc"),
                  (["in"], POINTER(IUnknown), "pmkToLeft"),
                  (["in"], POINTER(GUID), "riid"),
                  (["out"], POINTER(POINTER(IUnknown)), "ppvObj")),
    ]


class IEnumMoniker(IUnknown):
    _iid_ = GUID("{00000102-0000-0000-C000-000000000046}")


IEnumMoniker._methods_ = [
    COMMETHOD([], HRESULT, "Next",
              (["in"], c_ulong, "celt"),
              (["out"], POINTER(POINTER(IMoniker)), "rgelt"),
              (["out"], POINTER(c_ulong), "pceltFetched")),
    COMMETHOD([], HRESULT, "Skip",
              (["in"], c_ulong, "celt")),
    COMMETHOD([], HRESULT, "Reset"),
    COMMETHOD([], HRESULT, "Clone",
              (["out"], POINTER(POINTER(IEnumMoniker)), "ppenum")),
]


class ICreateDevEnum(IUnknown):
    _iid_ = GUID(IID_ICREATE_DEV_ENUM)
    _methods_ = [
        COMMETHOD([], HRESULT, "CreateClassEnumerator",
                  (["in"], POINTER(GUID), "clsidDeviceClass"),
                  (["out"], POINTER(POINTER(IEnumMoniker)), "ppEnumMoniker"),
                  (["in"], c_ulong, "dwFlags")),
    ]


# IAMCameraControl and IAMVideoProcAmp share the same vtable layout.
_CONTROL_METHODS = [
    COMMETHOD([], HRESULT, "GetRange",
              (["in"], c_long, "Property"),
              (["out"], POINTER(c_long), "pMin"),
              (["out"], POINTER(c_long), "pMax"),
              (["out"], POINTER(c_long), "pSteppingDelta"),
              (["out"], POINTER(c_long), "pDefault"),
              (["out"], POINTER(c_long), "pCapsFlags")),
    COMMETHOD([], HRESULT, "Set",
              (["in"], c_long, "Property"),
              (["in"], c_long, "lValue"),
              (["in"], c_long, "Flags")),
    COMMETHOD([], HRESULT, "Get",
              (["in"], c_long, "Property"),
              (["out"], POINTER(c_long), "lValue"),
              (["out"], POINTER(c_long), "Flags")),
]


class IAMCameraControl(IUnknown):
    _iid_ = GUID(IID_IAM_CAMERA_CONTROL)
    _methods_ = _CONTROL_METHODS


class IAMVideoProcAmp(IUnknown):
    _iid_ = GUID(IID_IAM_VIDEO_PROC_AMP)
    _methods_ = _CONTROL_METHODS
