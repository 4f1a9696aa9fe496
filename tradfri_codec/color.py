"""CIE 1931 chromaticity to RGB conversion for Trådfri bulbs."""
from __future__ import annotations

import math

from .const import MAX_WIRE_BRIGHTNESS

# Wide gamut D65 XYZ -> linear RGB
_XYZ_TO_RGB = (
    (1.656492, -0.354851, -0.255038),
    (-0.707196, 1.655397, 0.036152),
    (0.051713, -0.121364, 1.011530),
)

_GAMMA_THRESHOLD = 0.0031308


def round_half_up(value: float) -> float:
    """Round to the nearest integer with halves going up, passing NaN through."""
    if math.isnan(value) or math.isinf(value):
        return value
    return math.floor(value + 0.5)


def _gamma_correct(channel: float) -> float:
    """Apply sRGB companding to a linear channel value."""
    if channel <= _GAMMA_THRESHOLD:
        return 12.92 * channel
    return (1.0 + 0.055) * math.pow(channel, 1.0 / 2.4) - 0.055


def _normalize(red: float, green: float, blue: float) -> tuple[float, float, float]:
    """Scale channels down when the strictly largest one exceeds 1.0."""
    if red > blue and red > green and red > 1.0:
        return 1.0, green / red, blue / red
    if green > blue and green > red and green > 1.0:
        return red / green, 1.0, blue / green
    if blue > red and blue > green and blue > 1.0:
        return red / blue, green / blue, 1.0
    return red, green, blue


def _to_byte(channel: float) -> int:
    value = round_half_up(channel * 255)
    if math.isnan(value):
        return 0
    return int(max(0, min(255, value)))


def cie_to_rgb(
    x: float | None,
    y: float | None,
    brightness: float | None = MAX_WIRE_BRIGHTNESS,
) -> tuple[int, int, int]:
    """
    Convert a chromaticity coordinate pair to an 8-bit RGB triple.

    None for any argument counts as 0, as a JSON null does on the wire.

    Args:
        x: CIE x coordinate (0.0-1.0)
        y: CIE y coordinate (0.0-1.0)
        brightness: Bulb brightness (0-254)

    Returns:
        Tuple of red, green and blue channels, each 0-255
    """
    x, y, brightness = (0 if value is None else value for value in (x, y, brightness))

    try:
        x = float(x)
        y = float(y)
        luminance = round(float(brightness) / MAX_WIRE_BRIGHTNESS, 2)
    except (TypeError, ValueError):
        return 0, 0, 0

    if y == 0 or math.isnan(y):
        return 0, 0, 0

    z = 1.0 - x - y
    tristimulus = (luminance / y * x, luminance, luminance / y * z)

    red, green, blue = (
        sum(coefficient * value for coefficient, value in zip(row, tristimulus))
        for row in _XYZ_TO_RGB
    )
    red, green, blue = (_gamma_correct(c) for c in _normalize(red, green, blue))

    return _to_byte(red), _to_byte(green), _to_byte(blue)
