import logging
import voluptuous as vol

from homeassistant.config_entries import ConfigEntry, SOURCE_IMPORT
from homeassistant.core import HomeAssistant
from homeassistant.helpers import config_validation as cv
from homeassistant.helpers import device_registry as dr
from homeassistant.helpers.typing import ConfigType

from .const import (
    DOMAIN, PLATFORMS, DATA_STORE, CONF_NAME, CONF_TYPE, CONF_DELAY, DEFAULT_TYPE, DEFAULT_DELAY,
)
from .controller import DummySensorController
from .entity import device_info_for
from .models import DummySensorConfig, SensorKind
from .store import DummySensorStore

_LOGGER = logging.getLogger(__name__)

# delay is kept as given and coerced by parse_delay, like entry data
ACCESSORY_SCHEMA = vol.Schema({
    vol.Required(CONF_NAME): cv.string,
    vol.Optional(CONF_TYPE, default=DEFAULT_TYPE): vol.In([kind.value for kind in SensorKind]),
    vol.Optional(CONF_DELAY, default=DEFAULT_DELAY): vol.Any(int, cv.string),
})

CONFIG_SCHEMA = vol.Schema(
    {DOMAIN: vol.All(cv.ensure_list, [ACCESSORY_SCHEMA])},
    extra=vol.ALLOW_EXTRA,
)


async def _async_get_store(hass: HomeAssistant) -> DummySensorStore:
    """Shared store, loaded on first use."""
    domain_data = hass.data.setdefault(DOMAIN, {})
    if (store := domain_data.get(DATA_STORE)) is None:
        store = DummySensorStore(hass)
        await store.async_load()
        domain_data[DATA_STORE] = store
    return store


async def async_setup(hass: HomeAssistant, config: ConfigType) -> bool:
    """Load the shared store and import accessories from YAML."""
    await _async_get_store(hass)

    for accessory in config.get(DOMAIN, []):
        hass.async_create_task(
            hass.config_entries.flow.async_init(
                DOMAIN, context={"source": SOURCE_IMPORT}, data=accessory
            )
        )

    return True


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    # init the controller from the persisted state
    store: DummySensorStore = hass.data[DOMAIN][DATA_STORE]
    controller = DummySensorController(hass, DummySensorConfig.from_dict(entry.data), store)

    # store the controller in hass.data so the platforms can access it
    hass.data[DOMAIN][entry.entry_id] = controller

    dr.async_get(hass).async_get_or_create(
        config_entry_id=entry.entry_id, **device_info_for(entry, controller)
    )

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    _LOGGER.debug(
        "Dummy sensor %s set up as %s with delay %s ms",
        controller.config.name, controller.config.sensor_kind, controller.config.delay
    )
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)

    if unload_ok:
        controller: DummySensorController = hass.data[DOMAIN].pop(entry.entry_id)
        # pending sensor transitions are not persisted
        await controller.async_shutdown()

    return unload_ok


async def async_remove_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Forget the stored switch and sensor state of a removed accessory."""
    config = DummySensorConfig.from_dict(entry.data)
    # the entry may never have been set up in this run
    store = await _async_get_store(hass)
    await store.async_remove([config.switch_key, config.sensor_key])
