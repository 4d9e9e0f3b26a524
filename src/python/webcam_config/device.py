"""Camera devices and their hardware properties."""

from __future__ import annotations

import logging

from .backend import BoundDevice
from .constants import MAX_PROPERTY_ID
from .control import CAMERA_CONTROL, VIDEO_PROC_AMP, ControlAdapter
from .dto import CameraDto, CameraPropertyDto
from .errors import (
    InvalidSettingsData,
    PropertyNotFound,
    PropertyNotSupported,
    UnsupportedAutoAdaptRequest,
)

logger = logging.getLogger(__name__)


class DeviceProperty:
    """One supported property of one control group.

    Name and range are fetched once on construction. Value and auto
    state are always read from the device, never from a cache.
    """

    def __init__(self, adapter: ControlAdapter, property_id: int):
        self._adapter = adapter
        self._property_id = property_id
        self._name = adapter.property_name(property_id)
        self._metadata = adapter.metadata(property_id)

    @property
    def name(self) -> str:
        return self._name

    @property
    def property_id(self) -> int:
        return self._property_id

    @property
    def control_tag(self) -> str:
        return self._adapter.tag

    @property
    def min_value(self) -> int:
        return self._metadata.min_value

    @property
    def max_value(self) -> int:
        return self._metadata.max_value

    @property
    def default_value(self) -> int:
        return self._metadata.default_value

    @property
    def increment_size(self) -> int:
        return self._metadata.step

    def has_auto_adapt_capability(self) -> bool:
        return self._metadata.can_auto_adapt

    def get_value(self) -> int:
        value, _ = self._adapter.read(self._property_id)
        return value

    def set_value(self, value: int) -> None:
        """Write a value, keeping the current auto/manual mode."""
        _, is_auto = self._adapter.read(self._property_id)
        logger.debug("Setting %s to %d (auto=%s)", self._name, value, is_auto)
        self._adapter.write(self._property_id, value, is_auto)

    def is_auto_adapt(self) -> bool:
        _, is_auto = self._adapter.read(self._property_id)
        return is_auto

    def set_auto_adapt(self, auto: bool) -> None:
        """Switch between automatic and manual mode.

        Disabling automatic mode on a property that has none is a no-op;
        enabling it raises UnsupportedAutoAdaptRequest.
        """
        if not self.has_auto_adapt_capability():
            if auto:
                raise UnsupportedAutoAdaptRequest(
                    f"Property {self._name} can not adapt automatically."
                )
            return
        value, _ = self._adapter.read(self._property_id)
        logger.debug("Setting %s to %s mode", self._name, "auto" if auto else "manual")
        self._adapter.write(self._property_id, value, auto)

    def get_dto(self) -> CameraPropertyDto:
        value, is_auto = self._adapter.read(self._property_id)
        return CameraPropertyDto(
            name=self._name,
            value=value,
            is_automatically_adapting=is_auto,
            min_value=self.min_value,
            max_value=self.max_value,
            default=self.default_value,
            stepping_delta=self.increment_size,
            can_adapt_automatically=self.has_auto_adapt_capability(),
        )

    def restore_dto(self, dto: CameraPropertyDto) -> None:
        """Apply value and then mode of a saved property."""
        if not dto.name or not dto.name.strip():
            raise InvalidSettingsData("Can not restore a property without a name.")
        if dto.name != self._name:
            raise InvalidSettingsData(f"Can not restore {self._name} with data of {dto.name}.")
        self.set_value(dto.value)
        self.set_auto_adapt(dto.is_automatically_adapting)

    def describe(self) -> str:
        value, is_auto = self._adapter.read(self._property_id)
        return (
            f"{self.control_tag} Property {self._name}: "
            f"canAutoAdapt: {self.has_auto_adapt_capability()}, "
            f"default: {self.default_value}, max: {self.max_value}, "
            f"min: {self.min_value}, increment size: {self.increment_size}, "
            f"value: {value}, isAuto: {is_auto}"
        )

    def __repr__(self) -> str:
        return f"DeviceProperty({self.control_tag}, {self._property_id}, {self._name!r})"


class CameraDevice:
    """All properties of one physical camera, ordered by name.

    Instances are short-lived: create a fresh one per enumeration instead
    of holding on to it.
    """

    def __init__(self, name: str, bound: BoundDevice):
        self._name = name
        self._adapters = (
            ControlAdapter(CAMERA_CONTROL, bound.camera_control),
            ControlAdapter(VIDEO_PROC_AMP, bound.video_proc_amp),
        )
        self._properties = self._discover_properties()
        self._by_name = {p.name: p for p in self._properties}

    def _discover_properties(self) -> tuple[DeviceProperty, ...]:
        found: dict[str, DeviceProperty] = {}
        for adapter in self._adapters:
            for property_id in range(MAX_PROPERTY_ID + 1):
                try:
                    prop = DeviceProperty(adapter, property_id)
                except PropertyNotSupported:
                    continue
                if prop.name in found:
                    logger.warning(
                        "Device %s reports property %s twice, keeping the first",
                        self._name, prop.name,
                    )
                    continue
                found[prop.name] = prop
        logger.debug("Device %s has %d properties", self._name, len(found))
        return tuple(sorted(found.values(), key=lambda p: p.name))

    @property
    def device_name(self) -> str:
        return self._name

    def get_properties_list(self) -> tuple[DeviceProperty, ...]:
        return self._properties

    def get_property_by_name(self, name: str) -> DeviceProperty:
        try:
            return self._by_name[name]
        except KeyError:
            raise PropertyNotFound(
                f"Property {name} not found for device {self._name}."
            ) from None

    def get_dto(self) -> CameraDto:
        return CameraDto(
            name=self._name,
            properties=[p.get_dto() for p in self._properties],
        )

    def restore_camera_dto(self, dto: CameraDto) -> None:
        """Apply saved settings to this camera.

        The snapshot must carry this camera's name and at least one
        property. Each property gets its value first and its mode second,
        since setting the value keeps whatever mode is active.
        """
        if dto.name != self._name:
            raise InvalidSettingsData(
                f"Device {self._name} can not use data for '{dto.name}'"
            )
        properties = dto.require_properties()
        for prop_dto in properties:
            try:
                prop = self.get_property_by_name(prop_dto.name)
            except PropertyNotFound as exc:
                raise InvalidSettingsData(str(exc)) from exc
            prop.restore_dto(prop_dto)
        logger.info("Restored %d properties of %s", len(properties), self._name)

    def __repr__(self) -> str:
        return f"CameraDevice({self._name!r}, {len(self._properties)} properties)"
