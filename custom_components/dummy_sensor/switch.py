from typing import Any

from homeassistant.components.switch import SwitchEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN, SWITCH
from .controller import DummySensorController
from .entity import DummySensorEntity


class DummySensorSwitch(DummySensorEntity, SwitchEntity):
    """Switch that drives the dummy sensor."""

    def __init__(self, entry: ConfigEntry, controller: DummySensorController):
        super().__init__(entry, controller, SWITCH)

    @property
    def is_on(self) -> bool:
        return self._controller.get_switch()

    async def async_turn_on(self, **kwargs: Any) -> None:
        await self._controller.async_set_switch(True)

    async def async_turn_off(self, **kwargs: Any) -> None:
        await self._controller.async_set_switch(False)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback
) -> None:
    """Set up the dummy sensor switch."""
    controller: DummySensorController = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([DummySensorSwitch(entry, controller)])
