from typing import Any, Dict

from homeassistant.components.binary_sensor import BinarySensorEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN, BINARY_SENSOR, ATTR_CHARACTERISTIC, ATTR_READING
from .controller import DummySensorController
from .entity import DummySensorEntity


class DummySensorBinarySensor(DummySensorEntity, BinarySensorEntity):
    """Sensor that follows the switch after the configured delay."""

    def __init__(self, entry: ConfigEntry, controller: DummySensorController):
        super().__init__(entry, controller, BINARY_SENSOR)
        self._attr_device_class = controller.config.profile.device_class

    @property
    def is_on(self) -> bool:
        return self._controller.sensor_on

    @property
    def extra_state_attributes(self) -> Dict[str, Any]:
        """Kind-specific reading, e.g. NOT_DETECTED for an open contact."""
        return {
            ATTR_CHARACTERISTIC: self._controller.config.profile.characteristic,
            ATTR_READING: self._controller.get_sensor_reading(),
        }


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback
) -> None:
    """Set up the dummy sensor readout."""
    controller: DummySensorController = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([DummySensorBinarySensor(entry, controller)])
