from typing import Any

import voluptuous as vol

from homeassistant.config_entries import ConfigFlow, ConfigFlowResult
from homeassistant.helpers import config_validation as cv
from homeassistant.util import slugify

from .const import DOMAIN, CONF_NAME, CONF_TYPE, CONF_DELAY, DEFAULT_TYPE, DEFAULT_DELAY
from .models import SensorKind

USER_SCHEMA = vol.Schema({
    vol.Required(CONF_NAME): cv.string,
    vol.Optional(CONF_TYPE, default=DEFAULT_TYPE): vol.In([kind.value for kind in SensorKind]),
    vol.Optional(CONF_DELAY, default=DEFAULT_DELAY): cv.positive_int,
})


class DummySensorConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Dummy Sensor."""
    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Handle the initial step."""
        if user_input is not None:
            # storage keys are namespaced by name, so names must be unique
            await self.async_set_unique_id(slugify(user_input[CONF_NAME]))
            self._abort_if_unique_id_configured()
            return self.async_create_entry(title=user_input[CONF_NAME], data=dict(user_input))

        return self.async_show_form(step_id="user", data_schema=USER_SCHEMA)

    async def async_step_import(self, import_data: dict[str, Any]) -> ConfigFlowResult:
        """Create an entry from YAML configuration, or refresh it on later starts."""
        await self.async_set_unique_id(slugify(import_data[CONF_NAME]))
        # changed YAML replaces the entry data and reloads the accessory
        self._abort_if_unique_id_configured(updates=dict(import_data))

        return self.async_create_entry(title=import_data[CONF_NAME], data=dict(import_data))
