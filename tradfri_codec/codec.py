"""Encode/decode functions between accessory properties and Trådfri payloads."""
from __future__ import annotations

import logging
import math
import re
from typing import Any, Callable, NamedTuple

from .color import cie_to_rgb, round_half_up
from .const import (
    ATTR_BRIGHTNESS,
    BRIGHTNESS_SCALE,
    LUMA_BLUE,
    LUMA_GREEN,
    LUMA_RED,
    MAX_BRIGHTNESS_PCT,
    MAX_WIRE_BRIGHTNESS,
    STATE_OFF,
    STATE_ON,
)
from .models import CodecConfig, MessageInfo, Property, WireMessage, is_set

_LOGGER = logging.getLogger(__name__)

# Numeric string literals accepted by JavaScript's Number()
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_RADIX_LITERAL = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


class PropertyCodec(NamedTuple):
    """Encode/decode pair for a single property."""

    encode: Callable[[Any], str]
    decode: Callable[[str | bytes], Any]


def _to_number(text: str) -> int | float:
    """Parse a number the way the transport's producers do, NaN when unparseable."""
    text = text.strip()
    if not text:
        return 0
    if _RADIX_LITERAL.fullmatch(text):
        return int(text, 0)
    if not _DECIMAL_LITERAL.fullmatch(text):
        return math.nan
    value = float(text)
    return int(value) if value.is_integer() else value


def _coerce(value: Any) -> int | float:
    """Coerce an incoming value to a number, NaN when it is not one."""
    if isinstance(value, str):
        return _to_number(value)
    if isinstance(value, (int, float)):
        return value
    return math.nan


def _wire_number(value: Any) -> int | float | None:
    """Return a wire field as a number, or None when it does not carry one."""
    if not is_set(value) or isinstance(value, bool):
        return None
    number = _coerce(value)
    return number if math.isfinite(number) else None


def _state_for(level: float) -> str:
    """Return the wire state for a brightness level."""
    if level and not math.isnan(level):
        return STATE_ON
    return STATE_OFF


class TradfriCodec:
    """Translates accessory property values to and from Trådfri payloads."""

    def __init__(
        self,
        config: CodecConfig,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        """Initialize the codec for one accessory."""
        self.config = config
        self._logger = logger or _LOGGER
        self.properties: dict[Property, PropertyCodec] = {
            Property.ON: PropertyCodec(self.encode_on, self.decode_on),
            Property.BRIGHTNESS: PropertyCodec(
                self.encode_brightness, self.decode_brightness
            ),
            Property.COLOR_TEMPERATURE: PropertyCodec(
                self.encode_color_temperature, self.decode_color_temperature
            ),
            Property.RGB: PropertyCodec(self.encode_rgb, self.decode_rgb),
        }

        self._logger.info("Trådfri codec initialized with %s.", config.name)

    def encode(self, message: Any, info: MessageInfo, output: Callable[[Any], None]) -> None:
        """Pass a message to be published through unchanged."""
        self._logger.debug(
            "encode() called for topic [%s], property [%s] with message [%s]",
            info.topic,
            info.property,
            message,
        )
        output(message)

    def decode(self, message: Any, info: MessageInfo, output: Callable[[Any], None]) -> None:
        """Pass a received message through unchanged."""
        self._logger.debug(
            "decode() called for topic [%s], property [%s] with message [%s]",
            info.topic,
            info.property,
            message,
        )
        output(message)

    def get_property_codec(self, name: str | Property) -> PropertyCodec | None:
        """Return the codec pair for a property, or None to use the generic pair."""
        try:
            return self.properties[Property(name)]
        except ValueError:
            return None

    def encode_on(self, value: Any) -> str:
        return WireMessage(state=STATE_ON if value else STATE_OFF).to_json()

    def decode_on(self, message: str | bytes) -> bool | None:
        msg = WireMessage.from_json(message)
        if is_set(msg.state):
            return msg.state == STATE_ON
        return None

    def encode_brightness(self, value: float) -> str:
        # Scale up to the 0-254 range
        brightness = round_half_up(_coerce(value) * BRIGHTNESS_SCALE)
        return WireMessage(state=_state_for(brightness), brightness=brightness).to_json()

    def decode_brightness(self, message: str | bytes) -> int | None:
        brightness = _wire_number(WireMessage.from_json(message).brightness)
        if brightness is None:
            return None
        # Scale down to the 0-100 range
        brightness = round_half_up(brightness / BRIGHTNESS_SCALE)
        return int(max(0, min(MAX_BRIGHTNESS_PCT, brightness)))

    def encode_color_temperature(self, value: float) -> str:
        """Rescale a device-native color temperature into the bulb's range."""
        config = self.config
        color_temp = round_half_up(
            (_coerce(value) - config.min_color_temp)
            * config.vendor_color_temp_range
            / config.color_temp_range
            + config.min_vendor_color_temp
        )
        return WireMessage(color_temp=color_temp).to_json()

    def decode_color_temperature(self, message: str | bytes) -> int | None:
        """Rescale the bulb's color temperature back into the device-native range."""
        color_temp = _wire_number(WireMessage.from_json(message).color_temp)
        if color_temp is None:
            return None

        config = self.config
        return int(
            round_half_up(
                (color_temp - config.min_vendor_color_temp)
                * config.color_temp_range
                / config.vendor_color_temp_range
                + config.min_color_temp
            )
        )

    def encode_rgb(self, value: str) -> str:
        """
        Encode an "r,g,b" string.

        The bulb takes the raw channels under ``color`` and the perceived
        luma as brightness. Non-numeric channels are passed through as NaN.
        """
        self._logger.debug("RGB encode request: %s", value)

        parts = str(value).split(",")
        red, green, blue = (
            _to_number(parts[index]) if index < len(parts) else math.nan
            for index in range(3)
        )
        brightness = round_half_up(LUMA_RED * red + LUMA_GREEN * green + LUMA_BLUE * blue)

        response = WireMessage(
            state=_state_for(brightness),
            brightness=brightness,
            color={"r": red, "g": green, "b": blue},
        ).to_json()

        self._logger.debug("RGB encode response: %s", response)
        return response

    def decode_rgb(self, message: str | bytes) -> str | None:
        self._logger.debug("RGB decode request: %s", message)

        msg = WireMessage.from_json(message)
        if msg.color is None:
            return None

        # A missing key is undefined: NaN for coordinates, full brightness
        rgb = cie_to_rgb(
            msg.color.get("x", math.nan),
            msg.color.get("y", math.nan),
            msg.brightness if ATTR_BRIGHTNESS in msg.present else MAX_WIRE_BRIGHTNESS,
        )
        return ",".join(str(channel) for channel in rgb)
