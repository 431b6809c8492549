"""Tests for the Dummy Sensor integration."""
from datetime import timedelta
from typing import Any, Dict

from freezegun.api import FrozenDateTimeFactory
from pytest_homeassistant_custom_component.common import MockConfigEntry, async_fire_time_changed

from homeassistant.core import HomeAssistant
from homeassistant.helpers import entity_registry as er
from homeassistant.util import slugify

from custom_components.dummy_sensor.const import DOMAIN, CONF_NAME, STORAGE_KEY, STORAGE_VERSION


def mock_stored_state(hass_storage: Dict[str, Any], data: Dict[str, Any]) -> None:
    """Pretend a previous run left data in the dummy sensor store."""
    hass_storage[STORAGE_KEY] = {
        "version": STORAGE_VERSION,
        "minor_version": 1,
        "key": STORAGE_KEY,
        "data": data,
    }


def stored_state(hass_storage: Dict[str, Any]) -> Dict[str, Any]:
    return hass_storage[STORAGE_KEY]["data"]


async def setup_accessory(hass: HomeAssistant, **data: Any) -> MockConfigEntry:
    entry = MockConfigEntry(
        domain=DOMAIN,
        title=data[CONF_NAME],
        data=data,
        unique_id=slugify(data[CONF_NAME]),
    )
    entry.add_to_hass(hass)
    assert await hass.config_entries.async_setup(entry.entry_id)
    await hass.async_block_till_done()
    return entry


def entity_id_for(hass: HomeAssistant, entry: MockConfigEntry, platform: str) -> str:
    entity_id = er.async_get(hass).async_get_entity_id(platform, DOMAIN, f"{entry.entry_id}_{platform}")
    assert entity_id is not None
    return entity_id


async def advance(hass: HomeAssistant, freezer: FrozenDateTimeFactory, milliseconds: int) -> None:
    """Move the clock forward and run whatever timers became due."""
    freezer.tick(timedelta(milliseconds=milliseconds))
    async_fire_time_changed(hass)
    await hass.async_block_till_done()
