"""Top-level conftest for the webcam_config test suite."""

import pytest
from unittest.mock import MagicMock

from webcam_config.backend import BoundDevice, DirectShowBackend
from webcam_config.constants import FLAGS_AUTO, FLAGS_MANUAL
from webcam_config.controller import WebcamConfigController
from webcam_config.errors import DeviceBindingFailed, DeviceNotFound, NativeCallError

# HRESULT_FROM_WIN32(ERROR_NOT_FOUND), what drivers return for unknown ids
E_PROP_ID_UNSUPPORTED = 0x80070490


# ---------------------------------------------------------------------------
# CLI options
# ---------------------------------------------------------------------------

def pytest_addoption(parser):
    parser.addoption(
        "--run-hardware",
        action="store_true",
        default=False,
        help="Run tests that require a physical DirectShow camera",
    )
    parser.addoption(
        "--camera",
        action="store",
        default=None,
        help="Camera name for hardware tests (default: first enumerated camera)",
    )


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

def pytest_configure(config):
    config.addinivalue_line("markers", "hardware: requires a physical DirectShow camera")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-hardware"):
        skip_hw = pytest.mark.skip(reason="need --run-hardware option to run")
        for item in items:
            if "hardware" in item.keywords:
                item.add_marker(skip_hw)


# ---------------------------------------------------------------------------
# In-memory DirectShow stand-ins
# ---------------------------------------------------------------------------

class FakeControl:
    """NativeControl keeping property state in a dict keyed by property id."""

    def __init__(self, properties=None):
        self.properties = {pid: dict(p) for pid, p in (properties or {}).items()}
        self.get_calls = []
        self.set_calls = []
        self.fail_access = False

    def get_range(self, property_id):
        p = self._lookup(property_id)
        return p["min"], p["max"], p["step"], p["default"], p["caps"]

    def get(self, property_id):
        p = self._lookup(property_id)
        self.get_calls.append(property_id)
        if self.fail_access:
            raise NativeCallError(0x80004005)
        return p["value"], p["flags"]

    def set(self, property_id, value, flags):
        p = self._lookup(property_id)
        if self.fail_access:
            raise NativeCallError(0x80004005)
        self.set_calls.append((property_id, value, flags))
        p["value"] = value
        p["flags"] = flags

    def _lookup(self, property_id):
        try:
            return self.properties[property_id]
        except KeyError:
            raise NativeCallError(E_PROP_ID_UNSUPPORTED) from None


class FakeBackend:
    """DirectShowBackend over a name -> BoundDevice map; None marks an unbindable device."""

    def __init__(self, devices):
        self.devices = devices
        self.bound = []

    def list_device_names(self):
        return list(self.devices)

    def bind_device(self, name):
        if name not in self.devices:
            raise DeviceNotFound(f"Camera {name} not found.")
        self.bound.append(name)
        bound = self.devices[name]
        if bound is None:
            raise DeviceBindingFailed(f"could not handle {name} as camera")
        return bound


def _prop(minimum, maximum, step, default, caps, value, flags):
    return {
        "min": minimum,
        "max": maximum,
        "step": step,
        "default": default,
        "caps": caps,
        "value": value,
        "flags": flags,
    }


def default_camera_control():
    """Exposure (id 4) and Focus (id 6), both able to adapt automatically."""
    return {
        4: _prop(-13, -1, 1, -6, FLAGS_AUTO | FLAGS_MANUAL, -5, FLAGS_AUTO),
        6: _prop(0, 250, 5, 0, FLAGS_AUTO | FLAGS_MANUAL, 100, FLAGS_MANUAL),
    }


def default_video_proc_amp():
    """Brightness (id 0), manual only."""
    return {
        0: _prop(-64, 64, 1, 0, FLAGS_MANUAL, 10, FLAGS_MANUAL),
    }


def make_bound(camera_control=None, video_proc_amp=None):
    return BoundDevice(
        FakeControl(default_camera_control() if camera_control is None else camera_control),
        FakeControl(default_video_proc_amp() if video_proc_amp is None else video_proc_amp),
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_backend():
    """Return a MagicMock that satisfies the DirectShowBackend protocol."""
    return MagicMock(spec=DirectShowBackend)


@pytest.fixture
def bound_factory():
    """Build a BoundDevice of FakeControls; defaults to Brightness, Exposure and Focus."""
    return make_bound


@pytest.fixture
def prop_factory():
    """Build a FakeControl property record."""
    return _prop


@pytest.fixture
def fake_backend():
    """Two cameras, "A" and "B", each with Brightness, Exposure and Focus."""
    return FakeBackend({"A": make_bound(), "B": make_bound()})


@pytest.fixture
def fake_backend_class():
    return FakeBackend


@pytest.fixture
def controller(fake_backend, tmp_path):
    """Return a WebcamConfigController wired to the fake backend with a temp config."""
    return WebcamConfigController(
        backend=fake_backend,
        config_path=tmp_path / "test_config",
    )
