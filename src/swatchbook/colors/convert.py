"""Conversions between RGB, 6-digit hex strings and integer HSL.

All functions are pure. Hex strings are always produced in the canonical
``#rrggbb`` lowercase form; parsing returns ``None`` for anything that is not
exactly six hex digits (with an optional leading ``#``).
"""

import math
import re

from .spaces import HslColor, RgbColor

HEX_PATTERN = re.compile(r"#?[0-9a-fA-F]{6}")


def _round(value: float) -> int:
    """Round half up to the nearest integer."""
    return int(math.floor(value + 0.5))


def rgb_to_hex(rgb: RgbColor) -> str:
    """
    Convert an RGB color to a ``#rrggbb`` string.

    Example:
        >>> rgb_to_hex(RgbColor(r=255, g=8, b=0))
        '#ff0800'
    """
    return f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"


def hex_to_rgb(hex_color: str) -> RgbColor | None:
    """
    Parse a hex color string.

    Args:
        hex_color: ``rrggbb`` or ``#rrggbb``, any letter case

    Returns:
        The parsed color, or None if the string is malformed
    """
    if not isinstance(hex_color, str) or not HEX_PATTERN.fullmatch(hex_color):
        return None

    digits = hex_color.removeprefix("#")
    return RgbColor(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def normalize_hex(hex_color: str) -> str | None:
    """Return the canonical ``#rrggbb`` form of a hex string, or None if invalid."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hex(rgb)


def rgb_to_hsl(rgb: RgbColor) -> HslColor:
    """
    Convert RGB to integer HSL.

    Hue is taken from whichever channel holds the maximum, normalized to
    [0, 360) and then rounded to the nearest degree. Achromatic colors have
    hue and saturation 0.
    """
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2
    hue = 0.0
    saturation = 0.0

    if high != low:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)

        if high == r:
            hue = (g - b) / delta + (6 if g < b else 0)
        elif high == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4

        hue = (hue * 60) % 360

    return HslColor(h=_round(hue), s=_round(saturation * 100), l=_round(lightness * 100))


def hsl_to_rgb(hsl: HslColor) -> RgbColor:
    """
    Convert integer HSL to RGB.

    Uses the chroma / intermediate / match decomposition over six 60 degree
    sectors.

    Example:
        >>> hsl_to_rgb(HslColor(h=120, s=100, l=50))
        RgbColor(r=0, g=255, b=0)
    """
    h = hsl.h
    s = hsl.s / 100
    l = hsl.l / 100  # noqa: E741

    chroma = (1 - abs(2 * l - 1)) * s
    x = chroma * (1 - abs((h / 60) % 2 - 1))
    m = l - chroma / 2

    if h < 60:
        r, g, b = chroma, x, 0.0
    elif h < 120:
        r, g, b = x, chroma, 0.0
    elif h < 180:
        r, g, b = 0.0, chroma, x
    elif h < 240:
        r, g, b = 0.0, x, chroma
    elif h < 300:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return RgbColor(
        r=_round((r + m) * 255),
        g=_round((g + m) * 255),
        b=_round((b + m) * 255),
    )
