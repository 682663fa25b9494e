"""
HueWheel Color Harmony Engine

Derives palettes from a single base color using the classic color-wheel
schemes. Every entry keeps the base saturation; schemes differ only in the
hue offsets (or, for monochromatic, the lightness steps) they apply.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from ..conversions import HSL, RGB, hsl_to_rgb, rgb_to_hsl
from ..errors import InvalidSchemeError
from ..hex_codec import encode_hex, parse_color


class SchemeType(str, Enum):
    """Supported harmony schemes, in canonical listing order."""
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"
    TETRADIC = "tetradic"
    MONOCHROMATIC = "monochromatic"


@dataclass(frozen=True)
class Color:
    """A single palette entry expressed in hex, RGB and HSL."""
    hex: str
    rgb: RGB
    hsl: HSL

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hex": self.hex,
            "rgb": {"r": self.rgb.r, "g": self.rgb.g, "b": self.rgb.b},
            "hsl": {"h": self.hsl.h, "s": self.hsl.s, "l": self.hsl.l},
        }


# Hue offsets in output order. A zero offset reuses the base hue untouched.
HUE_OFFSETS: Dict[SchemeType, List[int]] = {
    SchemeType.COMPLEMENTARY: [0, 180],
    SchemeType.ANALOGOUS: [-30, 0, 30],
    SchemeType.TRIADIC: [0, 120, 240],
    SchemeType.SPLIT_COMPLEMENTARY: [0, 150, 210],
    SchemeType.TETRADIC: [0, 90, 180, 270],
}

MONOCHROMATIC_STEPS = [-20, -10, 0, 10, 20]
MONOCHROMATIC_MIN_L = 10
MONOCHROMATIC_MAX_L = 90


def normalize_hue(hue: int) -> int:
    """
    Wrap any hue into [0, 360) using floored modulo.

    Args:
        hue: Hue in degrees, possibly negative or >= 360

    Returns:
        Equivalent hue in [0, 360)
    """
    return ((hue % 360) + 360) % 360


def list_schemes() -> List[str]:
    """Return the supported scheme identifiers in listing order."""
    return [scheme.value for scheme in SchemeType]


def resolve_scheme(scheme: Union[str, SchemeType, None]) -> Optional[SchemeType]:
    """Map a scheme identifier to SchemeType, or None if unrecognized."""
    if isinstance(scheme, SchemeType):
        return scheme
    try:
        return SchemeType(scheme)
    except ValueError:
        return None


def create_color(h: int, s: int, l: int) -> Color:
    """
    Build a Color record from HSL.

    The HSL values are stored as given; RGB and hex are derived from them.
    """
    rgb = hsl_to_rgb(h, s, l)
    return Color(hex=encode_hex(rgb.r, rgb.g, rgb.b), rgb=rgb, hsl=HSL(h=h, s=s, l=l))


def _clamp_lightness(l: int) -> int:
    return max(MONOCHROMATIC_MIN_L, min(MONOCHROMATIC_MAX_L, l))


def generate_monochromatic(h: int, s: int, l: int) -> List[Color]:
    """
    Five tones of the base hue running darkest to lightest.

    Lightness steps of -20, -10, 0, +10, +20 are clamped to [10, 90]. The
    hue is passed through without normalization.
    """
    return [create_color(h, s, _clamp_lightness(l + step)) for step in MONOCHROMATIC_STEPS]


def generate_hue_rotations(h: int, s: int, l: int, offsets: List[int]) -> List[Color]:
    """
    One color per hue offset at the base saturation and lightness.

    Args:
        h: Base hue in degrees
        s: Base saturation in percent
        l: Base lightness in percent
        offsets: Hue offsets in degrees, in output order

    Returns:
        List of colors in offset order
    """
    colors = []
    for offset in offsets:
        hue = h if offset == 0 else normalize_hue(h + offset)
        colors.append(create_color(hue, s, l))
    return colors


def generate_palette(
    base_color: str,
    scheme: Union[str, SchemeType],
    strict: bool = False
) -> List[Color]:
    """
    Generate a palette for a base color and harmony scheme.

    An unrecognized scheme yields a single-color palette holding the base
    color; an unparseable base color is treated as black.

    Args:
        base_color: Base color in format #RRGGBB or RRGGBB
        scheme: Scheme identifier (SchemeType or its string value)
        strict: Raise InvalidColorError / InvalidSchemeError instead of
            falling back

    Returns:
        Ordered list of Color records
    """
    rgb = parse_color(base_color, strict=strict)
    hsl = rgb_to_hsl(rgb.r, rgb.g, rgb.b)
    h, s, l = hsl.h, hsl.s, hsl.l

    resolved = resolve_scheme(scheme)
    if resolved is None:
        if strict:
            raise InvalidSchemeError(scheme, list_schemes())
        logger.bind(scheme=repr(scheme)).debug("Unknown scheme, returning base color only")
        return [create_color(h, s, l)]

    if resolved is SchemeType.MONOCHROMATIC:
        return generate_monochromatic(h, s, l)

    return generate_hue_rotations(h, s, l, HUE_OFFSETS[resolved])
