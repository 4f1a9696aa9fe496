"""Trådfri codec: translates accessory properties to and from Trådfri MQTT payloads."""
from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol
from homeassistant.const import CONF_NAME
from homeassistant.helpers import config_validation as cv

from .codec import PropertyCodec, TradfriCodec
from .color import cie_to_rgb
from .const import (
    CONF_MAX_COLOR_TEMP,
    CONF_MAX_VENDOR_COLOR_TEMP,
    CONF_MIN_COLOR_TEMP,
    CONF_MIN_VENDOR_COLOR_TEMP,
    DEFAULT_MAX_COLOR_TEMP,
    DEFAULT_MAX_VENDOR_COLOR_TEMP,
    DEFAULT_MIN_COLOR_TEMP,
    DEFAULT_MIN_VENDOR_COLOR_TEMP,
)
from .models import CodecConfig, InvalidMessageError, MessageInfo, Property, WireMessage

__all__ = [
    "CONFIG_SCHEMA",
    "CodecConfig",
    "InvalidMessageError",
    "MessageInfo",
    "Property",
    "PropertyCodec",
    "TradfriCodec",
    "WireMessage",
    "cie_to_rgb",
    "init",
]

_LOGGER = logging.getLogger(__name__)


def _ordered_range(min_key: str, max_key: str):
    """Validate that a configured range is not empty."""

    def validate(config: dict[str, Any]) -> dict[str, Any]:
        if config[min_key] >= config[max_key]:
            raise vol.Invalid(
                f"{min_key} ({config[min_key]}) must be lower than "
                f"{max_key} ({config[max_key]})"
            )
        return config

    return validate


CONFIG_SCHEMA = vol.All(
    vol.Schema(
        {
            vol.Required(CONF_NAME): cv.string,
            vol.Optional(CONF_MIN_COLOR_TEMP, default=DEFAULT_MIN_COLOR_TEMP): cv.positive_int,
            vol.Optional(CONF_MAX_COLOR_TEMP, default=DEFAULT_MAX_COLOR_TEMP): cv.positive_int,
            vol.Optional(
                CONF_MIN_VENDOR_COLOR_TEMP, default=DEFAULT_MIN_VENDOR_COLOR_TEMP
            ): cv.positive_int,
            vol.Optional(
                CONF_MAX_VENDOR_COLOR_TEMP, default=DEFAULT_MAX_VENDOR_COLOR_TEMP
            ): cv.positive_int,
        },
        extra=vol.ALLOW_EXTRA,
    ),
    _ordered_range(CONF_MIN_COLOR_TEMP, CONF_MAX_COLOR_TEMP),
    _ordered_range(CONF_MIN_VENDOR_COLOR_TEMP, CONF_MAX_VENDOR_COLOR_TEMP),
)


def init(
    config: dict[str, Any] | CodecConfig,
    log: logging.Logger | logging.LoggerAdapter | None = None,
) -> TradfriCodec:
    """
    Create the codec for an accessory.

    Args:
        config: Accessory configuration, at least a name
        log: Logger to report through, the package logger when omitted

    Returns:
        Codec exposing the generic encode/decode pair and per-property pairs
    """
    if not isinstance(config, CodecConfig):
        config = CodecConfig.from_dict(CONFIG_SCHEMA(config))

    _LOGGER.debug("Creating codec for %s", config.name)
    return TradfriCodec(config, log)
