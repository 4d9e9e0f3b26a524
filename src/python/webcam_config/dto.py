"""Flat snapshots of camera settings as stored in settings files.

The JSON key names are the save/load file format and must not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import InvalidSettingsData


def _int_field(data: dict[str, Any], key: str, name: str) -> int:
    value = data.get(key, 0)
    # bool is an int subclass but never a valid setting
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidSettingsData(f"{key} of property {name} must be an integer, got {value!r}.")
    return value


def _bool_field(data: dict[str, Any], key: str, name: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise InvalidSettingsData(f"{key} of property {name} must be true or false, got {value!r}.")
    return value


@dataclass
class CameraPropertyDto:
    name: str
    value: int = 0
    is_automatically_adapting: bool = False
    min_value: int = 0
    max_value: int = 0
    default: int = 0
    stepping_delta: int = 0
    can_adapt_automatically: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "Name": self.name,
            "Value": self.value,
            "IsAutomaticallyAdapting": self.is_automatically_adapting,
            "MinValue": self.min_value,
            "MaxValue": self.max_value,
            "Default": self.default,
            "SteppingDelta": self.stepping_delta,
            "CanAdaptAutomatically": self.can_adapt_automatically,
        }

    @classmethod
    def from_dict(cls, data: Any) -> CameraPropertyDto:
        if not isinstance(data, dict) or not isinstance(data.get("Name"), str):
            raise InvalidSettingsData(f"Invalid property record: {data!r}")
        name = data["Name"]
        return cls(
            name=name,
            value=_int_field(data, "Value", name),
            is_automatically_adapting=_bool_field(data, "IsAutomaticallyAdapting", name),
            min_value=_int_field(data, "MinValue", name),
            max_value=_int_field(data, "MaxValue", name),
            default=_int_field(data, "Default", name),
            stepping_delta=_int_field(data, "SteppingDelta", name),
            can_adapt_automatically=_bool_field(data, "CanAdaptAutomatically", name),
        )


@dataclass
class CameraDto:
    name: str
    properties: list[CameraPropertyDto] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "Name": self.name,
            "Properties": None if self.properties is None
            else [p.to_dict() for p in self.properties],
        }

    @classmethod
    def from_dict(cls, data: Any) -> CameraDto:
        """Build a snapshot from a decoded JSON object.

        A missing or null ``Properties`` entry is kept as ``None`` so the
        restore step can report it against the camera name.
        """
        if not isinstance(data, dict) or not isinstance(data.get("Name"), str):
            raise InvalidSettingsData("Invalid camera record with unset Name.")
        raw_properties = data.get("Properties")
        if raw_properties is None:
            properties = None
        elif isinstance(raw_properties, list):
            properties = [CameraPropertyDto.from_dict(p) for p in raw_properties]
        else:
            raise InvalidSettingsData(f"Properties of {data['Name']} must be a list.")
        return cls(name=data["Name"], properties=properties)

    def require_properties(self) -> list[CameraPropertyDto]:
        """Return the property list, refusing a null or empty one."""
        if self.properties is None:
            raise InvalidSettingsData(
                f"Property list of {self.name} is null, can not restore anything."
            )
        if not self.properties:
            raise InvalidSettingsData(
                f"Property list of {self.name} is empty, can not restore anything."
            )
        return self.properties

    def describe(self) -> str:
        """One-line summary such as ``Camera A: Brightness=128, Focus=0 (auto)``."""
        if self.properties is None:
            return f"Camera {self.name}: no properties set."
        parts = []
        for prop in self.properties:
            text = f"{prop.name}={prop.value}"
            if prop.can_adapt_automatically:
                text += " (auto)" if prop.is_automatically_adapting else " (manual)"
            parts.append(text)
        return f"Camera {self.name}: " + ", ".join(parts)
