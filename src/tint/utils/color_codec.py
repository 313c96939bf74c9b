"""Packing of normalized RGB triples into opaque 32-bit ARGB values."""
from __future__ import annotations

from typing import Tuple

from tint.constants import NEUTRAL_EPSILON

RGB = Tuple[float, float, float]

ALPHA_MASK = 0xFF000000


def clamp01(value: float) -> float:
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def pack(r: float, g: float, b: float) -> int:
    """Quantize to 8 bits per channel with alpha fixed at 255.

    Out-of-range channels are clamped, never rejected. NaN reads as 0.
    Channels are truncated, not rounded, so every pack of a noisy value
    loses half a level on average; blending then drifting an offspring
    color sits about one level below its parents.
    """
    red = _quantize(r)
    green = _quantize(g)
    blue = _quantize(b)
    return ALPHA_MASK | (red << 16) | (green << 8) | blue


def _quantize(channel: float) -> int:
    if channel != channel:
        return 0
    # The epsilon keeps unpack() -> pack() exact for every 8-bit level.
    return min(255, max(0, int(clamp01(channel) * 255.0 + 1e-9)))


def unpack(argb: int) -> RGB:
    return (
        ((argb >> 16) & 0xFF) / 255.0,
        ((argb >> 8) & 0xFF) / 255.0,
        (argb & 0xFF) / 255.0,
    )


def alpha(argb: int) -> int:
    return (argb >> 24) & 0xFF


def is_neutral(argb: int) -> bool:
    r, g, b = unpack(argb)
    return abs(r - g) < NEUTRAL_EPSILON and abs(g - b) < NEUTRAL_EPSILON


def hsl_to_rgb(hue_deg: float, saturation: float, lightness: float) -> RGB:
    chroma = (1.0 - abs(2.0 * lightness - 1.0)) * saturation
    sector = (hue_deg % 360.0) / 60.0
    x = chroma * (1.0 - abs((sector % 2.0) - 1.0))
    m = lightness - chroma / 2.0

    if sector < 1.0:
        rr, gg, bb = chroma, x, 0.0
    elif sector < 2.0:
        rr, gg, bb = x, chroma, 0.0
    elif sector < 3.0:
        rr, gg, bb = 0.0, chroma, x
    elif sector < 4.0:
        rr, gg, bb = 0.0, x, chroma
    elif sector < 5.0:
        rr, gg, bb = x, 0.0, chroma
    else:
        rr, gg, bb = chroma, 0.0, x
    return clamp01(rr + m), clamp01(gg + m), clamp01(bb + m)


def to_hex(argb: int) -> str:
    return f"#{argb & 0xFFFFFF:06X}"
