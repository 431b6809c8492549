from homeassistant.config_entries import ConfigEntry
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.entity import Entity

from .const import DOMAIN, MANUFACTURER, MODEL, VERSION
from .controller import DummySensorController


def device_info_for(entry: ConfigEntry, controller: DummySensorController) -> DeviceInfo:
    """Static accessory information shared by the switch and the sensor."""
    config = controller.config
    return DeviceInfo(
        identifiers={(DOMAIN, entry.entry_id)},
        name=config.name,
        manufacturer=MANUFACTURER,
        model=MODEL,
        sw_version=VERSION,
        serial_number=config.serial_number,
    )


class DummySensorEntity(Entity):
    """Base for entities that mirror a DummySensorController."""
    _attr_has_entity_name = True
    _attr_should_poll = False
    # named after the device only
    _attr_name = None

    def __init__(self, entry: ConfigEntry, controller: DummySensorController, suffix: str):
        self._controller = controller
        self._attr_unique_id = f"{entry.entry_id}_{suffix}"
        self._attr_device_info = device_info_for(entry, controller)

    async def async_added_to_hass(self):
        """Write new state whenever the controller changes."""
        self.async_on_remove(
            self._controller.async_add_listener(self.async_write_ha_state)
        )
