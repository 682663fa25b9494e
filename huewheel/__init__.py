"""
HueWheel

Color conversion (hex, RGB, HSL) and harmony palette generation, with a
small FastAPI service around the pure pipeline.
"""

from huewheel.services.colors import (
    Color, SchemeType, encode_hex, generate_palette,
    hsl_to_rgb, parse_color, rgb_to_hsl,
)

__version__ = "1.0.0"
