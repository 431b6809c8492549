import logging
from typing import Any, Dict, Iterable

from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.storage import Store

from .const import STORAGE_KEY, STORAGE_VERSION

_LOGGER = logging.getLogger(__name__)


class DummySensorStore:
    """Versioned key-value storage shared by every dummy sensor accessory."""

    def __init__(self, hass: HomeAssistant):
        """Initialize the store."""
        self._store = Store(hass, STORAGE_VERSION, STORAGE_KEY)
        self._data: Dict[str, Any] = {}

    async def async_load(self) -> None:
        """Load all keys from storage, treating a corrupted record as empty."""
        try:
            data = await self._store.async_load()
        except HomeAssistantError as err:
            _LOGGER.warning("Discarding unreadable %s storage: %s", STORAGE_KEY, err)
            data = None

        if data is not None and not isinstance(data, dict):
            _LOGGER.warning("Discarding malformed %s storage: %r", STORAGE_KEY, data)
            data = None

        self._data = data or {}

    def get(self, key: str) -> bool:
        """Stored boolean for key; missing or malformed values read as False."""
        value = self._data.get(key)
        return value if isinstance(value, bool) else False

    async def async_set(self, key: str, value: bool) -> None:
        """Write a value and wait for it to reach disk."""
        self._data[key] = value
        await self._store.async_save(self._data)

    async def async_remove(self, keys: Iterable[str]) -> None:
        """Delete keys, saving only if something was removed."""
        removed = False
        for key in keys:
            if key in self._data:
                del self._data[key]
                removed = True

        if removed:
            await self._store.async_save(self._data)
