"""Initial style and color for creatures that inherit nothing."""
from __future__ import annotations

import random

from tint.components.tint_state import NEUTRAL_STYLES, Style
from tint.config import TintConfig
from tint.utils.color_codec import clamp01, hsl_to_rgb, pack


def rand_range(rng: random.Random, low: float, high: float) -> float:
    return low + rng.random() * (high - low)


def pick_arctic_style(config: TintConfig, rng: random.Random) -> Style:
    roll = rng.random()
    if roll < config.arctic_white_chance:
        return Style.WHITE
    if roll < config.arctic_white_chance + config.arctic_dark_chance:
        return Style.DARK
    return Style.GRAY


def pick_style(config: TintConfig, rng: random.Random, *, arctic: bool = False) -> Style:
    """Weighted style draw.

    Non-arctic weights are raw cumulative thresholds in SoftHue, Gray, Dark,
    White order; White absorbs whatever the first three leave over.
    """
    if arctic:
        return pick_arctic_style(config, rng)
    roll = rng.random()
    if roll < config.weight_soft_hue:
        return Style.SOFT_HUE
    roll -= config.weight_soft_hue
    if roll < config.weight_gray:
        return Style.GRAY
    roll -= config.weight_gray
    if roll < config.weight_dark:
        return Style.DARK
    return Style.WHITE


def generate_neutral(config: TintConfig, style: Style, rng: random.Random) -> int:
    if style == Style.WHITE:
        band = config.white
    elif style == Style.DARK:
        band = config.dark
    else:
        band = config.gray
    value = clamp01(rand_range(rng, band.min, band.max))
    return pack(value, value, value)


def generate_soft_hue(config: TintConfig, rng: random.Random) -> int:
    soft = config.soft_hue
    hue = rand_range(rng, -soft.hue_jitter_deg, soft.hue_jitter_deg)
    if hue < 0.0:
        hue += 360.0
    saturation = rand_range(rng, soft.s_min, soft.s_max)
    lightness = min(rand_range(rng, soft.l_min, soft.l_max), config.white.max)
    r, g, b = hsl_to_rgb(hue, saturation, lightness)
    # Muted wildlife coloring never drops below near-neutral gray.
    floor = config.gray.min * 0.9
    return pack(max(r, floor), max(g, floor), max(b, floor))


def generate_color(config: TintConfig, style: Style, rng: random.Random, *, arctic: bool = False) -> int:
    if style in NEUTRAL_STYLES or arctic:
        return generate_neutral(config, style, rng)
    return generate_soft_hue(config, rng)


def assign_spawn_tint(config: TintConfig, rng: random.Random, *, arctic: bool = False) -> tuple[Style, int]:
    style = pick_style(config, rng, arctic=arctic)
    return style, generate_color(config, style, rng, arctic=arctic)
