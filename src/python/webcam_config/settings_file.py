"""JSON settings file holding camera snapshots."""

from __future__ import annotations

import json
from pathlib import Path

from .dto import CameraDto
from .errors import InvalidSettingsData


class SettingsFile:
    """A JSON array of camera snapshots on disk."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def save(self, cameras: list[CameraDto]) -> None:
        """Write all snapshots, replacing any previous content."""
        with open(self.path, "w") as f:
            json.dump([c.to_dict() for c in cameras], f, indent=2)

    def load(self) -> list[CameraDto]:
        """Read snapshots in file order. A missing file raises FileNotFoundError."""
        with open(self.path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise InvalidSettingsData(
                    f"{self.path} could not be read as camera settings: {exc}"
                ) from exc
        if not isinstance(data, list):
            raise InvalidSettingsData(
                f"{self.path} does not contain a list of camera settings"
            )
        return [CameraDto.from_dict(entry) for entry in data]
