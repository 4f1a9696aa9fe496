"""Constants for the Trådfri codec."""

# Wire states
STATE_ON = "ON"
STATE_OFF = "OFF"

# Wire fields
ATTR_STATE = "state"
ATTR_BRIGHTNESS = "brightness"
ATTR_COLOR_TEMP = "color_temp"
ATTR_COLOR = "color"

# Brightness scaling between 0-100 and the bulb's 0-254 range
BRIGHTNESS_SCALE = 2.54
MAX_BRIGHTNESS_PCT = 100
MAX_WIRE_BRIGHTNESS = 254

# Luma weights, http://www.w3.org/TR/AERT#color-contrast
LUMA_RED = 0.299
LUMA_GREEN = 0.587
LUMA_BLUE = 0.114

# Default configuration values
DEFAULT_MIN_COLOR_TEMP = 140  # Device-native (mired-like) range
DEFAULT_MAX_COLOR_TEMP = 500
DEFAULT_MIN_VENDOR_COLOR_TEMP = 250  # Trådfri range
DEFAULT_MAX_VENDOR_COLOR_TEMP = 454

# Configuration keys
CONF_MIN_COLOR_TEMP = "min_color_temp"
CONF_MAX_COLOR_TEMP = "max_color_temp"
CONF_MIN_VENDOR_COLOR_TEMP = "min_vendor_color_temp"
CONF_MAX_VENDOR_COLOR_TEMP = "max_vendor_color_temp"
