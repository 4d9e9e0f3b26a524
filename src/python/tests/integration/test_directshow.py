"""Integration tests against a real DirectShow camera.

These tests require Windows, comtypes and a connected webcam.
Run with: pytest --run-hardware [--camera "Camera Name"]
"""

import pytest

from webcam_config.controller import WebcamConfigController
from webcam_config.dshow_backend import ComtypesDirectShowBackend


@pytest.fixture
def hw_controller(tmp_path):
    """Create a WebcamConfigController connected to real hardware."""
    return WebcamConfigController(
        backend=ComtypesDirectShowBackend(),
        config_path=tmp_path / "test_config",
    )


@pytest.fixture
def camera_name(request, hw_controller):
    name = request.config.getoption("--camera")
    if name:
        return name
    names = hw_controller.camera_names()
    if not names:
        pytest.skip("no video input device connected")
    return names[0]


@pytest.mark.hardware
class TestEnumeration:
    def test_names_no_raise(self, hw_controller):
        hw_controller.camera_names()

    def test_camera_has_sorted_properties(self, hw_controller, camera_name):
        camera = hw_controller.manager.get_camera_by_name(camera_name)
        names = [p.name for p in camera.get_properties_list()]
        assert names
        assert names == sorted(names)
        assert len(names) == len(set(names))


@pytest.mark.hardware
class TestSaveLoad:
    def test_round_trip_keeps_settings(self, hw_controller, camera_name, tmp_path):
        path = tmp_path / "cams.json"
        saved = hw_controller.save(path, camera_name)
        hw_controller.load(path, camera_name)

        camera = hw_controller.manager.get_camera_by_name(camera_name)
        assert camera.get_dto() == saved[0]

    def test_increment_then_decrement(self, hw_controller, camera_name):
        camera = hw_controller.manager.get_camera_by_name(camera_name)
        manual = [
            p for p in camera.get_properties_list()
            if not p.is_auto_adapt()
            and p.min_value + p.increment_size <= p.get_value() <= p.max_value - p.increment_size
        ]
        if not manual:
            pytest.skip("no manual property with headroom")
        prop = manual[0]
        original = prop.get_value()

        hw_controller.increment(camera_name, prop.name)
        hw_controller.decrement(camera_name, prop.name)

        assert prop.get_value() == original
