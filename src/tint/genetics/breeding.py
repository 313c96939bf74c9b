"""Breeding inheritance: parent discovery, blending, drift and mutation gating.

Offspring color is a noisy interpolation between the two nearest adult
parents of the same species family. Each generation drifts a little, and a
rare roll turns the offspring into a mutant. Mutant parents bias their
non-mutant offspring toward higher contrast.
"""
from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

from esper import World

from tint.components.tint_state import Style
from tint.config import TintConfig
from tint.constants import MAX_PARENTS, PARENT_SEARCH_RADIUS
from tint.genetics.mutation import amplify_hue, apply_mutation, pick_mutation
from tint.genetics.spawn_assigner import assign_spawn_tint, generate_neutral
from tint.genetics.style_classifier import clamp_arctic_style, classify
from tint.utils.color_codec import clamp, lerp, pack, unpack
from tint.utils import creatures

ParentTint = Tuple[Style, int]


def _signed_unit(rng: random.Random) -> float:
    return rng.random() * 2.0 - 1.0


def overshoot(child: float, parent_a: float, parent_b: float, amount: float, rng: random.Random) -> float:
    spread = max(abs(parent_a - parent_b), 0.05)
    return child + _signed_unit(rng) * amount * spread


def blend_with_noise(a: int, b: int, rng: random.Random, mix_noise: float, overshoot_amount: float) -> int:
    ar, ag, ab = unpack(a)
    br, bg, bb = unpack(b)

    t = clamp(0.5 + _signed_unit(rng) * mix_noise, 0.0, 1.0)
    rr = overshoot(lerp(ar, br, t), ar, br, overshoot_amount, rng)
    rg = overshoot(lerp(ag, bg, t), ag, bg, overshoot_amount, rng)
    rb = overshoot(lerp(ab, bb, t), ab, bb, overshoot_amount, rng)
    return pack(rr, rg, rb)


def drift_color(argb: int, rng: random.Random, config: TintConfig) -> int:
    r, g, b = unpack(argb)
    drift = config.breed_drift
    low, high = config.breed_low_clamp, config.breed_high_clamp
    r = clamp(r * (1.0 + _signed_unit(rng) * drift), low, high)
    g = clamp(g * (1.0 + _signed_unit(rng) * drift), low, high)
    b = clamp(b * (1.0 + _signed_unit(rng) * drift), low, high)
    return pack(r, g, b)


def arctic_override(style: Style, color: int, config: TintConfig, rng: random.Random, *, mutated: bool) -> ParentTint:
    """Arctic offspring stay neutral unless they are mutants and that is allowed."""
    if mutated and config.allow_arctic_mutations:
        return style, color
    clamped = clamp_arctic_style(style)
    return clamped, generate_neutral(config, clamped, rng)


def inherit(
    parents: Sequence[ParentTint],
    config: TintConfig,
    rng: random.Random,
    *,
    arctic: bool = False,
) -> ParentTint:
    """Resolve offspring style and color from one or two parent tints."""
    if not parents:
        raise ValueError("inherit() needs at least one parent tint")
    first = parents[0][1]
    second = parents[1][1] if len(parents) > 1 else first
    color = blend_with_noise(first, second, rng, config.breed_mix_noise, config.breed_overshoot)
    color = drift_color(color, rng, config)

    mutant_lineage = any(style == Style.MUTANT for style, _ in parents)
    mutated = config.server_enable_breeding_mutations and rng.random() < config.breeding_mutation_chance
    if mutated:
        kind = pick_mutation(config.mutation_weights, rng)
        color = apply_mutation(color, kind, rng, config)
        if mutant_lineage:
            color = amplify_hue(color, rng, config.mutant_amplify)
        style = Style.MUTANT
    else:
        if mutant_lineage:
            color = amplify_hue(color, rng, config.inherit_mutant_bias)
        style = classify(color, config)

    if arctic:
        style, color = arctic_override(style, color, config, rng, mutated=mutated)
    return style, color


def find_nearby_adults(world: World, child: int, radius: float = PARENT_SEARCH_RADIUS) -> List[int]:
    """Up to two nearest same-family adults within ``radius``, nearest first."""
    key = creatures.creature_species_key(world, child)
    cx, cy, cz = creatures.read_position(world, child)
    radius_sq = radius * radius
    candidates: List[Tuple[float, int]] = []
    for entity in creatures.loaded_creatures(world):
        if entity == child or creatures.is_player(world, entity):
            continue
        if creatures.creature_species_key(world, entity) != key:
            continue
        if not creatures.is_adult(world, entity):
            continue
        x, y, z = creatures.read_position(world, entity)
        dist_sq = (x - cx) ** 2 + (y - cy) ** 2 + (z - cz) ** 2
        if dist_sq <= radius_sq:
            candidates.append((dist_sq, entity))
    candidates.sort(key=lambda item: item[0])
    return [entity for _, entity in candidates[:MAX_PARENTS]]


def try_breeding_inheritance(
    world: World,
    child: int,
    config: TintConfig,
    rng: random.Random,
) -> Optional[ParentTint]:
    parent_tints: List[ParentTint] = []
    for parent in find_nearby_adults(world, child):
        tint = creatures.read_tint(world, parent)
        if tint.has:
            parent_tints.append((tint.style, tint.color))
    if not parent_tints:
        return None
    return inherit(parent_tints, config, rng, arctic=creatures.is_arctic(world, child))


def roll_orphan_tint(config: TintConfig, rng: random.Random, *, arctic: bool = False) -> ParentTint:
    """Fresh spawn tint with a separately capped chance of mutating."""
    style, color = assign_spawn_tint(config, rng, arctic=arctic)
    mutated = config.server_enable_breeding_mutations and rng.random() < config.fallback_mutation_chance
    if mutated:
        color = apply_mutation(color, pick_mutation(config.mutation_weights, rng), rng, config)
        style = Style.MUTANT
    else:
        style = classify(color, config)
    if arctic:
        style, color = arctic_override(style, color, config, rng, mutated=mutated)
    return style, color


def try_orphan_fallback(
    world: World,
    child: int,
    config: TintConfig,
    rng: random.Random,
) -> Optional[ParentTint]:
    """Only for juveniles with no adult of their family nearby, and only when enabled."""
    if not creatures.is_juvenile(world, child):
        return None
    if not config.enable_juvenile_fallback_mutation:
        return None
    if find_nearby_adults(world, child):
        return None
    return roll_orphan_tint(config, rng, arctic=creatures.is_arctic(world, child))
