"""Data models for the Trådfri codec."""
from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from homeassistant.const import CONF_NAME

from .const import (
    ATTR_BRIGHTNESS,
    ATTR_COLOR,
    ATTR_COLOR_TEMP,
    ATTR_STATE,
    CONF_MAX_COLOR_TEMP,
    CONF_MAX_VENDOR_COLOR_TEMP,
    CONF_MIN_COLOR_TEMP,
    CONF_MIN_VENDOR_COLOR_TEMP,
    DEFAULT_MAX_COLOR_TEMP,
    DEFAULT_MAX_VENDOR_COLOR_TEMP,
    DEFAULT_MIN_COLOR_TEMP,
    DEFAULT_MIN_VENDOR_COLOR_TEMP,
)


def is_set(value: Any) -> bool:
    """Return whether a wire field carries a value.

    Missing, null, false, zero, NaN and empty-string fields all mean "no update".
    Objects and arrays count as set even when empty.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def _json_safe(value: Any) -> Any:
    """Write NaN and infinities as null, the way JSON.stringify does."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    return value


class InvalidMessageError(ValueError):
    """Raised when a payload parses to null, which has no fields to read."""


class Property(str, Enum):
    """Accessory properties with a dedicated codec."""

    ON = "on"
    BRIGHTNESS = "brightness"
    COLOR_TEMPERATURE = "colorTemperature"
    RGB = "RGB"


@dataclass(frozen=True)
class MessageInfo:
    """Context the host passes along with a message."""

    topic: str
    property: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessageInfo:
        """Create from dictionary."""
        return cls(topic=data["topic"], property=data["property"])


@dataclass
class WireMessage:
    """A Trådfri JSON payload. A field set to None is absent from the wire."""

    state: str | None = None
    brightness: Any = None  # 0-254
    color_temp: Any = None
    color: dict[str, Any] | None = None  # {x, y} inbound, {r, g, b} outbound
    present: frozenset[str] = field(default_factory=frozenset, repr=False, compare=False)

    @classmethod
    def from_json(cls, payload: str | bytes) -> WireMessage:
        """Parse a payload received from the transport."""
        data = json.loads(payload)
        if data is None:
            raise InvalidMessageError(f"Cannot read fields from {payload!r}")
        # Numbers, strings and arrays carry none of the fields
        if not isinstance(data, dict):
            data = {}

        color = data.get(ATTR_COLOR)
        return cls(
            state=data.get(ATTR_STATE),
            brightness=data.get(ATTR_BRIGHTNESS),
            color_temp=data.get(ATTR_COLOR_TEMP),
            color=color if isinstance(color, dict) else ({} if is_set(color) else None),
            present=frozenset(data),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, leaving out absent fields."""
        fields = {
            ATTR_STATE: self.state,
            ATTR_BRIGHTNESS: self.brightness,
            ATTR_COLOR_TEMP: self.color_temp,
            ATTR_COLOR: self.color,
        }
        return {key: _json_safe(value) for key, value in fields.items() if value is not None}

    def to_json(self) -> str:
        """Serialize for publishing."""
        return json.dumps(self.to_dict(), separators=(",", ":"), allow_nan=False)


@dataclass
class CodecConfig:
    """Configuration for a single accessory's codec."""

    name: str
    min_color_temp: int = DEFAULT_MIN_COLOR_TEMP
    max_color_temp: int = DEFAULT_MAX_COLOR_TEMP
    min_vendor_color_temp: int = DEFAULT_MIN_VENDOR_COLOR_TEMP
    max_vendor_color_temp: int = DEFAULT_MAX_VENDOR_COLOR_TEMP

    @property
    def color_temp_range(self) -> int:
        return self.max_color_temp - self.min_color_temp

    @property
    def vendor_color_temp_range(self) -> int:
        return self.max_vendor_color_temp - self.min_vendor_color_temp

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            CONF_NAME: self.name,
            CONF_MIN_COLOR_TEMP: self.min_color_temp,
            CONF_MAX_COLOR_TEMP: self.max_color_temp,
            CONF_MIN_VENDOR_COLOR_TEMP: self.min_vendor_color_temp,
            CONF_MAX_VENDOR_COLOR_TEMP: self.max_vendor_color_temp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CodecConfig:
        """Create from dictionary."""
        return cls(
            name=data[CONF_NAME],
            min_color_temp=data.get(CONF_MIN_COLOR_TEMP, DEFAULT_MIN_COLOR_TEMP),
            max_color_temp=data.get(CONF_MAX_COLOR_TEMP, DEFAULT_MAX_COLOR_TEMP),
            min_vendor_color_temp=data.get(
                CONF_MIN_VENDOR_COLOR_TEMP, DEFAULT_MIN_VENDOR_COLOR_TEMP
            ),
            max_vendor_color_temp=data.get(
                CONF_MAX_VENDOR_COLOR_TEMP, DEFAULT_MAX_VENDOR_COLOR_TEMP
            ),
        )
