"""
HueWheel Colors Module

Provides hex parsing/encoding, RGB <-> HSL conversion, and harmony palette
generation from a single base color.
"""

from .conversions import HSL, RGB, hsl_to_rgb, rgb_to_hsl
from .errors import InvalidColorError, InvalidInputError, InvalidSchemeError
from .hex_codec import encode_hex, is_valid_hex, parse_color
from .harmony import Color, SchemeType, create_color, generate_palette, normalize_hue

__version__ = "1.0.0"

__all__ = [
    "HSL", "RGB", "Color", "SchemeType",
    "parse_color", "encode_hex", "is_valid_hex",
    "rgb_to_hsl", "hsl_to_rgb",
    "create_color", "generate_palette", "normalize_hue",
    "InvalidInputError", "InvalidColorError", "InvalidSchemeError",
]
