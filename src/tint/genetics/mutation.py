"""Rare color mutations and the contrast boosts carried by mutant lineages."""
from __future__ import annotations

import random
from enum import IntEnum
from typing import Sequence

from tint.config import TintConfig
from tint.genetics.spawn_assigner import rand_range
from tint.utils.color_codec import clamp, clamp01, pack, unpack

POST_MUTATION_DRIFT_FACTOR = 1.4


class Mutation(IntEnum):
    PURPLE = 0
    BLUE = 1
    PINK = 2
    GREEN = 3
    DEEP_BLACK = 4
    PURE_WHITE = 5


def pick_mutation(weights: Sequence[float], rng: random.Random) -> Mutation:
    """Walk the weight vector as a cumulative distribution.

    Falls back to the first kind when the weights never exhaust the roll.
    """
    roll = rng.random()
    for index, weight in enumerate(weights[: len(Mutation)]):
        roll -= weight
        if roll <= 0:
            return Mutation(index)
    return Mutation.PURPLE


def _channel_factors(kind: Mutation) -> tuple[tuple[str, float, float], ...]:
    # ("hi", a, b) scales by [a, b] * intensity; ("lo", a, b) by [a, b] / intensity.
    if kind == Mutation.PURPLE:
        return (("hi", 1.15, 1.35), ("lo", 0.55, 0.80), ("hi", 1.20, 1.40))
    if kind == Mutation.BLUE:
        return (("lo", 0.55, 0.80), ("lo", 0.85, 0.98), ("hi", 1.25, 1.45))
    if kind == Mutation.PINK:
        return (("hi", 1.25, 1.45), ("lo", 0.85, 0.98), ("hi", 1.05, 1.20))
    if kind == Mutation.GREEN:
        return (("lo", 0.55, 0.80), ("hi", 1.25, 1.45), ("lo", 0.85, 0.98))
    raise ValueError(f"Mutation {kind!r} has no channel factors")


def apply_mutation(argb: int, kind: Mutation, rng: random.Random, config: TintConfig) -> int:
    r, g, b = unpack(argb)
    neutral = max(config.gray.min, (r + g + b) / 3.0)
    intensity = config.mutation_intensity

    if kind == Mutation.DEEP_BLACK:
        r = g = b = rand_range(rng, 0.15, 0.28)
    elif kind == Mutation.PURE_WHITE:
        high = min(config.white.max + 0.12, config.breed_high_clamp)
        r = g = b = clamp01(rand_range(rng, config.white.min + 0.08, high))
    else:
        channels = []
        for direction, low, high in _channel_factors(kind):
            if direction == "hi":
                factor = rand_range(rng, low * intensity, high * intensity)
            else:
                factor = rand_range(rng, low / intensity, high / intensity)
            channels.append(clamp01(neutral * factor))
        r, g, b = channels

    # Lineages intensify slowly from one generation to the next.
    drift = config.breed_drift * POST_MUTATION_DRIFT_FACTOR
    low, high = config.breed_low_clamp, config.breed_high_clamp
    r = clamp(r * (1.0 + (rng.random() * 2.0 - 1.0) * drift), low, high)
    g = clamp(g * (1.0 + (rng.random() * 2.0 - 1.0) * drift), low, high)
    b = clamp(b * (1.0 + (rng.random() * 2.0 - 1.0) * drift), low, high)
    return pack(r, g, b)


def amplify_hue(argb: int, rng: random.Random, amount: float) -> int:
    """Push channels away from their mean, plus a little jitter."""
    if amount <= 0:
        return argb
    r, g, b = unpack(argb)
    mean = (r + g + b) / 3.0
    r = mean + (r - mean) * (1.0 + amount)
    g = mean + (g - mean) * (1.0 + amount)
    b = mean + (b - mean) * (1.0 + amount)

    jitter = amount * 0.25
    r *= 1.0 + (rng.random() * 2.0 - 1.0) * jitter
    g *= 1.0 + (rng.random() * 2.0 - 1.0) * jitter
    b *= 1.0 + (rng.random() * 2.0 - 1.0) * jitter
    return pack(clamp01(r), clamp01(g), clamp01(b))
