import logging
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Dict

from homeassistant.components.binary_sensor import BinarySensorDeviceClass

from .const import (
    CONF_NAME, CONF_TYPE, CONF_DELAY, DEFAULT_TYPE, DEFAULT_DELAY,
    SWITCH_SUFFIX, SENSOR_SUFFIX, SERIAL_PREFIX,
)

_LOGGER = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_WHITESPACE = re.compile(r"\s")


class SensorKind(StrEnum):
    CONTACT = "contact"
    LEAK = "leak"
    OCCUPANCY = "occupancy"
    MOTION = "motion"


@dataclass(frozen=True)
class SensorProfile:
    """How a sensor kind reports its detected / not detected state."""
    characteristic: str
    on_label: str | bool
    off_label: str | bool
    device_class: BinarySensorDeviceClass

    def reading(self, sensor_on: bool) -> str | bool:
        return self.on_label if sensor_on else self.off_label


# contact is inverted: an "on" sensor is an open contact, i.e. NOT_DETECTED
SENSOR_PROFILES: Dict[SensorKind, SensorProfile] = {
    SensorKind.CONTACT: SensorProfile(
        "ContactSensorState", "NOT_DETECTED", "DETECTED", BinarySensorDeviceClass.OPENING
    ),
    SensorKind.LEAK: SensorProfile(
        "LeakDetected", "LEAK_DETECTED", "LEAK_NOT_DETECTED", BinarySensorDeviceClass.MOISTURE
    ),
    SensorKind.OCCUPANCY: SensorProfile(
        "OccupancyDetected", "OCCUPANCY_DETECTED", "OCCUPANCY_NOT_DETECTED",
        BinarySensorDeviceClass.OCCUPANCY
    ),
    SensorKind.MOTION: SensorProfile(
        "MotionDetected", True, False, BinarySensorDeviceClass.MOTION
    ),
}


def parse_delay(value: Any) -> int:
    """Parse a delay in milliseconds, coercing anything unusable to 0.

    Leading digits are enough ("250ms" is 250). Booleans, negative numbers
    and values with no leading integer all become 0.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_DELAY
    if isinstance(value, int):
        delay = value
    elif isinstance(value, float):
        # nan / inf
        try:
            delay = int(value)
        except (ValueError, OverflowError):
            return DEFAULT_DELAY
    elif (match := _LEADING_INT.match(str(value))) is not None:
        delay = int(match.group(1))
    else:
        _LOGGER.warning("Ignoring unparsable delay %r, using 0", value)
        return DEFAULT_DELAY
    return max(delay, DEFAULT_DELAY)


def parse_sensor_kind(value: Any) -> SensorKind:
    try:
        return SensorKind(value or DEFAULT_TYPE)
    except ValueError:
        _LOGGER.warning("Unknown sensor type %r, falling back to %s", value, DEFAULT_TYPE)
        return SensorKind(DEFAULT_TYPE)


@dataclass(frozen=True)
class DummySensorConfig:
    name: str                           # Accessory name, also the storage key namespace
    sensor_kind: SensorKind = SensorKind.CONTACT
    delay: int = DEFAULT_DELAY          # Milliseconds before the sensor follows an "on" switch

    @property
    def profile(self) -> SensorProfile:
        return SENSOR_PROFILES[self.sensor_kind]

    @property
    def switch_key(self) -> str:
        return f"{self.name}-{SWITCH_SUFFIX}"

    @property
    def sensor_key(self) -> str:
        return f"{self.name}-{SENSOR_SUFFIX}"

    @property
    def serial_number(self) -> str:
        return SERIAL_PREFIX + _WHITESPACE.sub("-", self.name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for config entry data"""
        return {
            CONF_NAME: self.name,
            CONF_TYPE: str(self.sensor_kind),
            CONF_DELAY: self.delay,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DummySensorConfig":
        """Create instance from config entry data, coercing bad values to defaults."""
        return cls(
            name=data[CONF_NAME],
            sensor_kind=parse_sensor_kind(data.get(CONF_TYPE)),
            delay=parse_delay(data.get(CONF_DELAY)),
        )
