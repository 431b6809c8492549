import logging
from datetime import datetime
from typing import Callable, List

from homeassistant.core import CALLBACK_TYPE, HomeAssistant, callback
from homeassistant.helpers.event import async_call_later

from .models import DummySensorConfig
from .store import DummySensorStore

_LOGGER = logging.getLogger(__name__)


class DummySensorController:
    """Keep the switch and sensor state of one accessory.

    The switch is persisted as soon as it is set; the sensor follows it after
    the configured delay (never delayed when turning off). Only one pending
    transition exists at a time, and a new switch value replaces it.
    """

    def __init__(self, hass: HomeAssistant, config: DummySensorConfig, store: DummySensorStore):
        self.hass = hass
        self.config = config
        self._store = store
        self._listeners: List[Callable[[], None]] = []
        # handle of the pending sensor transition
        self._unsub_transition: CALLBACK_TYPE | None = None

    @property
    def switch_on(self) -> bool:
        return self._store.get(self.config.switch_key)

    @property
    def sensor_on(self) -> bool:
        return self._store.get(self.config.sensor_key)

    @property
    def transition_pending(self) -> bool:
        return self._unsub_transition is not None

    def get_switch(self) -> bool:
        """Current switch value, as reported to the switch entity."""
        _LOGGER.debug("Triggered GET On for %s", self.config.name)
        return self.switch_on

    def get_sensor_reading(self) -> str | bool:
        """Current sensor value translated into its kind-specific label."""
        profile = self.config.profile
        _LOGGER.debug("Triggered GET %s for %s", profile.characteristic, self.config.name)
        return profile.reading(self.sensor_on)

    async def async_set_switch(self, value: bool) -> None:
        """Persist the switch value and (re)schedule the sensor to follow it."""
        _LOGGER.debug("Triggered SET On for %s: %s", self.config.name, value)

        # repeated sets neither write nor restart the delay
        if self.switch_on == value:
            return

        await self._store.async_set(self.config.switch_key, value)

        delay = self.config.delay if value else 0
        self._cancel_transition()
        self._unsub_transition = async_call_later(
            self.hass, delay / 1000, self._async_on_transition(value, delay)
        )

        self._async_notify_listeners()

    @callback
    def _async_on_transition(self, value: bool, delay: int):
        async def _async_transition(now: datetime):
            self._unsub_transition = None
            _LOGGER.debug("Sensor %s changed after delay (ms): %s", self.config.name, delay)
            await self._store.async_set(self.config.sensor_key, value)
            self._async_notify_listeners()
        return _async_transition

    def _cancel_transition(self) -> None:
        if self._unsub_transition:
            self._unsub_transition()
            self._unsub_transition = None

    @callback
    def async_add_listener(self, update_callback: Callable[[], None]) -> CALLBACK_TYPE:
        """Listen for switch or sensor changes; returns the unsubscribe callback."""
        self._listeners.append(update_callback)

        @callback
        def remove_listener() -> None:
            self._listeners.remove(update_callback)

        return remove_listener

    @callback
    def _async_notify_listeners(self) -> None:
        for update_callback in list(self._listeners):
            update_callback()

    async def async_shutdown(self) -> None:
        """Drop the pending transition; it is not persisted."""
        self._cancel_transition()
