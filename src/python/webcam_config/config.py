"""Configuration file management for the webcam settings tool."""

from __future__ import annotations

from pathlib import Path

from .constants import DEFAULT_CONFIG_FILENAME, DEFAULT_LOG_LEVEL


class Config:
    """Defaults loaded from ~/.webcam_config.

    Empty values mean "not set"; command line options always win.
    """

    DEFAULTS: dict[str, str] = {
        "CAMERA": "",
        "FILE": "",
        "LOG_LEVEL": DEFAULT_LOG_LEVEL,
    }

    def __init__(self, config_path: Path | None = None):
        self.path = config_path or (Path.home() / DEFAULT_CONFIG_FILENAME)
        self._data: dict[str, str] = dict(self.DEFAULTS)

    @property
    def camera(self) -> str | None:
        return self._data["CAMERA"] or None

    @property
    def settings_file(self) -> str | None:
        return self._data["FILE"] or None

    @property
    def log_level(self) -> str:
        return self._data["LOG_LEVEL"].upper()

    def load(self) -> None:
        """Load config from file. Missing file is silently ignored."""
        if not self.path.exists():
            return
        with open(self.path) as f:
            for line in f:
                line = line.strip()
                if "=" in line and not line.startswith("#"):
                    key, value = line.split("=", 1)
                    key = key.strip()
                    if key in self._data:
                        self._data[key] = value.strip()
