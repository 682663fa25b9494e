"""
HueWheel Hex Codec

Parses #RRGGBB strings into RGB channels and encodes channels back into
lowercase hex. Parsing falls back to black on malformed input unless the
caller asks for strict validation.
"""

import re

from loguru import logger

from .conversions import RGB
from .errors import InvalidColorError

_HEX_COLOR_RE = re.compile(
    r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE | re.ASCII
)

FALLBACK_RGB = RGB(0, 0, 0)


def is_valid_hex(hex_color: str) -> bool:
    """Return True when hex_color is exactly six hex digits with optional '#'."""
    return isinstance(hex_color, str) and _HEX_COLOR_RE.fullmatch(hex_color) is not None


def parse_color(hex_color: str, strict: bool = False) -> RGB:
    """
    Parse a hex color string into RGB channels.

    Accepts an optional leading '#' followed by exactly six case-insensitive
    hex digits. Anything else (3-digit shorthand, wrong length, non-hex
    characters, empty string) yields black.

    Args:
        hex_color: Color in format #RRGGBB or RRGGBB
        strict: Raise InvalidColorError instead of falling back to black

    Returns:
        RGB with each channel in [0, 255]
    """
    match = _HEX_COLOR_RE.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        if strict:
            raise InvalidColorError(hex_color)
        logger.bind(hex_color=repr(hex_color)).debug("Unparseable hex color, using black")
        return FALLBACK_RGB

    return RGB(
        r=int(match.group(1), 16),
        g=int(match.group(2), 16),
        b=int(match.group(3), 16),
    )


def encode_hex(r: int, g: int, b: int) -> str:
    """
    Encode RGB channels as a lowercase '#rrggbb' string.

    Channels are not clamped: values above 255 render with more than two
    hex digits.
    """
    return f"#{r:02x}{g:02x}{b:02x}"
