"""Color spaces and the conversions between them.

Three representations are used across swatchbook:

- ``RgbColor``: 8-bit channels, the interchange form for sampled colors
- hex string: ``#rrggbb`` lowercase, the display and storage form
- ``HslColor``: integer degrees/percent, derived for display and editing

RGB and hex are in one-to-one correspondence. HSL is lossy.
"""

from .convert import HEX_PATTERN, hex_to_rgb, hsl_to_rgb, normalize_hex, rgb_to_hex, rgb_to_hsl
from .spaces import HslColor, RgbColor

__all__ = [
    "HEX_PATTERN",
    "HslColor",
    "RgbColor",
    "hex_to_rgb",
    "hsl_to_rgb",
    "normalize_hex",
    "rgb_to_hex",
    "rgb_to_hsl",
]
