"""High-level workflows tying cameras, settings files and config together."""

from __future__ import annotations

import logging
from pathlib import Path

from .backend import DirectShowBackend
from .config import Config
from .device import CameraDevice
from .dto import CameraDto
from .errors import DeviceNotFound
from .manager import CameraManager
from .settings_file import SettingsFile
from .stepping import stepped_value

logger = logging.getLogger(__name__)


class WebcamConfigController:
    """Entry point for listing, describing, saving and restoring camera settings.

    Without an explicit *backend* the comtypes DirectShow backend is
    used, which only works on Windows.
    """

    def __init__(
        self,
        backend: DirectShowBackend | None = None,
        config_path: Path | None = None,
    ):
        self._config = Config(config_path)
        self._config.load()

        if backend is None:
            from .dshow_backend import ComtypesDirectShowBackend

            backend = ComtypesDirectShowBackend()
        self._manager = CameraManager(backend)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def manager(self) -> CameraManager:
        return self._manager

    def camera_names(self) -> list[str]:
        """Names of all connected video input devices."""
        return self._manager.get_list_of_available_camera_names()

    def describe(self, camera: str | None = None) -> list[str]:
        """Human readable lines describing every property of the selected cameras."""
        lines = []
        for device in self._selected_cameras(camera):
            lines.append(device.device_name)
            lines.extend(f"        {p.describe()}" for p in device.get_properties_list())
        return lines

    def save(self, path: Path | str, camera: str | None = None) -> list[CameraDto]:
        """Write snapshots of the selected cameras to *path*."""
        snapshots = [device.get_dto() for device in self._selected_cameras(camera)]
        SettingsFile(path).save(snapshots)
        logger.info("Saved settings of %d camera(s) to %s", len(snapshots), path)
        return snapshots

    def load(self, path: Path | str, camera: str | None = None) -> list[CameraDto]:
        """Restore snapshots from *path* in file order.

        With *camera* set only that camera's entries are applied. The
        first failing entry aborts the run. An entry without properties
        is refused before its camera is looked up.
        """
        snapshots = SettingsFile(path).load()
        if camera is not None:
            snapshots = [s for s in snapshots if s.name == camera]
            if not snapshots:
                logger.warning("%s holds no settings for %s", path, camera)
        for snapshot in snapshots:
            logger.info("Initializing %s", snapshot.describe())
            snapshot.require_properties()
            device = self._manager.get_camera_by_name(snapshot.name)
            device.restore_camera_dto(snapshot)
        return snapshots

    def increment(self, camera: str, property_name: str, step: int | None = None) -> int:
        """Raise a property by one step. Returns the value written."""
        return self._step(camera, property_name, 1, step)

    def decrement(self, camera: str, property_name: str, step: int | None = None) -> int:
        """Lower a property by one step. Returns the value written."""
        return self._step(camera, property_name, -1, step)

    def _step(self, camera: str, property_name: str, direction: int, step: int | None) -> int:
        prop = self._manager.get_camera_by_name(camera).get_property_by_name(property_name)
        value = stepped_value(prop, direction, step)
        prop.set_value(value)
        logger.info("Set %s of %s to %d", property_name, camera, value)
        return value

    def _selected_cameras(self, camera: str | None) -> list[CameraDevice]:
        if camera is not None:
            return [self._manager.get_camera_by_name(camera)]
        cameras = self._manager.get_list_of_available_cameras()
        if not cameras:
            raise DeviceNotFound("No camera device found.")
        return cameras
