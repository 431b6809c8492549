DOMAIN = "dummy_sensor"
VERSION = "1.0.0"

##### config constants
CONF_NAME = "name"
CONF_TYPE = "type"
CONF_DELAY = "delay"

DEFAULT_TYPE = "contact"
DEFAULT_DELAY = 0

# storage key suffixes, namespaced by accessory name
SWITCH_SUFFIX = "switch"
SENSOR_SUFFIX = "sensor"


##### device info constants
MANUFACTURER = "Home Assistant"
MODEL = "Dummy Sensor"
SERIAL_PREFIX = "Dummy-"


##### HA constants
SWITCH = "switch"
BINARY_SENSOR = "binary_sensor"
PLATFORMS = [SWITCH, BINARY_SENSOR]
DATA_STORE = "store"
STORAGE_KEY = f"{DOMAIN}.storage"
STORAGE_VERSION = 1

# extra state attributes of the sensor entity
ATTR_CHARACTERISTIC = "characteristic"
ATTR_READING = "reading"
