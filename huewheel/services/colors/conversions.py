"""
HueWheel Color Space Conversions

RGB (0-255 channels) <-> HSL (hue in degrees, saturation/lightness in
percent). Both directions round once, at the very end, and never clamp or
validate their inputs.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class RGB:
    """Red/green/blue channel triple, each in [0, 255]."""
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class HSL:
    """Hue (degrees), saturation and lightness (percent)."""
    h: int
    s: int
    l: int


def round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """
    Convert RGB channels to HSL.

    Args:
        r: Red [0, 255]
        g: Green [0, 255]
        b: Blue [0, 255]

    Returns:
        HSL with h in degrees [0, 360] and s, l in percent [0, 100]
    """
    r_n = r / 255.0
    g_n = g / 255.0
    b_n = b / 255.0

    max_c = max(r_n, g_n, b_n)
    min_c = min(r_n, g_n, b_n)
    h = 0.0
    s = 0.0
    l = (max_c + min_c) / 2

    if max_c != min_c:
        d = max_c - min_c
        s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)

        # Ordered dispatch: on ties red wins over green, green over blue
        if max_c == r_n:
            h = ((g_n - b_n) / d + (6 if g_n < b_n else 0)) / 6
        elif max_c == g_n:
            h = ((b_n - r_n) / d + 2) / 6
        elif max_c == b_n:
            h = ((r_n - g_n) / d + 4) / 6

    return HSL(
        h=round_half_up(h * 360),
        s=round_half_up(s * 100),
        l=round_half_up(l * 100),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    # Single wrap, not a modulo
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: int, s: int, l: int) -> RGB:
    """
    Convert HSL to RGB channels.

    Args:
        h: Hue in degrees
        s: Saturation in percent
        l: Lightness in percent

    Returns:
        RGB with each channel rounded to the nearest integer
    """
    h_n = h / 360.0
    s_n = s / 100.0
    l_n = l / 100.0

    if s_n == 0:
        r = g = b = l_n
    else:
        q = l_n * (1 + s_n) if l_n < 0.5 else l_n + s_n - l_n * s_n
        p = 2 * l_n - q

        r = _hue_to_channel(p, q, h_n + 1 / 3)
        g = _hue_to_channel(p, q, h_n)
        b = _hue_to_channel(p, q, h_n - 1 / 3)

    return RGB(
        r=round_half_up(r * 255),
        g=round_half_up(g * 255),
        b=round_half_up(b * 255),
    )
