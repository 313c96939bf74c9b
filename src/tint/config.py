"""Tint configuration snapshot and its JSON persistence.

The configuration is loaded once when a session starts and never mutated
afterwards. Malformed values are coerced to the field defaults rather than
rejected; a missing or unreadable file simply yields the defaults.
"""
from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, Tuple

from tint.constants import FALLBACK_MUTATION_CAP

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "tint_config.json"
MUTATION_KIND_COUNT = 6


@dataclass(frozen=True, slots=True)
class NeutralRange:
    min: float
    max: float


@dataclass(frozen=True, slots=True)
class SoftHueRange:
    hue_jitter_deg: float = 16.0
    s_min: float = 0.06
    s_max: float = 0.22
    l_min: float = 0.55
    l_max: float = 1.05


@dataclass(frozen=True, slots=True)
class TintConfig:
    # Spawn weights, consumed as raw cumulative thresholds
    weight_soft_hue: float = 0.45
    weight_gray: float = 0.30
    weight_dark: float = 0.15
    weight_white: float = 0.10

    # Arctic natural spawn
    arctic_dark_chance: float = 0.22
    arctic_white_chance: float = 0.18

    # Neutral bands
    gray: NeutralRange = field(default_factory=lambda: NeutralRange(0.70, 1.05))
    dark: NeutralRange = field(default_factory=lambda: NeutralRange(0.36, 0.62))
    white: NeutralRange = field(default_factory=lambda: NeutralRange(1.05, 1.18))

    soft_hue: SoftHueRange = field(default_factory=SoftHueRange)

    # Genetics
    server_enable_breeding_mutations: bool = True
    breeding_mutation_chance: float = 0.025

    # Parentless juveniles, off by default
    enable_juvenile_fallback_mutation: bool = False
    juvenile_fallback_mutation_chance: float = 0.001

    breed_mix_noise: float = 0.20
    breed_overshoot: float = 0.05
    breed_drift: float = 0.035
    breed_low_clamp: float = 0.08
    breed_high_clamp: float = 1.30

    # Mutation vividness and compounding
    mutation_intensity: float = 1.08
    mutant_amplify: float = 0.10
    inherit_mutant_bias: float = 0.05

    mutation_weights: Tuple[float, ...] = (1 / 6.0,) * MUTATION_KIND_COUNT
    allow_arctic_mutations: bool = True

    # Kill switches
    server_disable_all: bool = False
    client_disable_all: bool = False

    @property
    def fallback_mutation_chance(self) -> float:
        """Orphan fallback chance clamped into [0, 0.10]; NaN and negatives read as 0."""
        chance = self.juvenile_fallback_mutation_chance
        if math.isnan(chance) or chance < 0.0:
            return 0.0
        return min(chance, FALLBACK_MUTATION_CAP)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "TintConfig":
        defaults = cls()
        values: dict[str, Any] = {}
        for f in fields(cls):
            default = getattr(defaults, f.name)
            if f.name not in payload:
                values[f.name] = default
                continue
            raw = payload[f.name]
            if isinstance(default, bool):
                values[f.name] = _coerce_bool(raw, default)
            elif isinstance(default, float):
                values[f.name] = _coerce_float(raw, default)
            elif isinstance(default, NeutralRange):
                values[f.name] = _coerce_range(raw, default)
            elif isinstance(default, SoftHueRange):
                values[f.name] = _coerce_soft_hue(raw, default)
            elif f.name == "mutation_weights":
                values[f.name] = _coerce_weights(raw, default)
            else:
                values[f.name] = default
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["mutation_weights"] = list(self.mutation_weights)
        return payload


def _coerce_float(raw: Any, default: float) -> float:
    if isinstance(raw, bool):
        return default
    try:
        return float(raw)
    except (TypeError, ValueError):
        return default


def _coerce_bool(raw: Any, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in ("true", "yes", "on", "1"):
            return True
        if lowered in ("false", "no", "off", "0"):
            return False
    return default


def _coerce_range(raw: Any, default: NeutralRange) -> NeutralRange:
    if not isinstance(raw, Mapping):
        return default
    low = _coerce_float(raw.get("min", default.min), default.min)
    high = _coerce_float(raw.get("max", default.max), default.max)
    if math.isnan(low) or math.isnan(high):
        return default
    return NeutralRange(low, high)


def _coerce_soft_hue(raw: Any, default: SoftHueRange) -> SoftHueRange:
    if not isinstance(raw, Mapping):
        return default
    values = {}
    for f in fields(SoftHueRange):
        fallback = getattr(default, f.name)
        values[f.name] = _coerce_float(raw.get(f.name, fallback), fallback)
    return SoftHueRange(**values)


def _coerce_weights(raw: Any, default: Tuple[float, ...]) -> Tuple[float, ...]:
    if isinstance(raw, (str, bytes)) or not hasattr(raw, "__iter__"):
        return default
    weights = []
    for item in raw:
        value = _coerce_float(item, float("nan"))
        if math.isnan(value):
            return default
        weights.append(value)
    return tuple(weights)


def default_config_path() -> Path:
    return Path(__file__).resolve().parents[2] / "data" / DEFAULT_CONFIG_NAME


def load_config(path: Path | str | None = None, *, write_back: bool = True) -> TintConfig:
    """Read the configuration file, falling back to defaults on any failure."""

    config_path = Path(path) if path is not None else default_config_path()
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError:
        logger.info("No tint config at %s, using defaults", config_path)
        config = TintConfig()
    except (OSError, ValueError) as exc:
        logger.error("Failed to load %s, using defaults: %s", config_path, exc)
        config = TintConfig()
    else:
        if isinstance(payload, Mapping):
            config = TintConfig.from_dict(payload)
        else:
            logger.error("Tint config %s is not an object, using defaults", config_path)
            config = TintConfig()
    if write_back:
        store_config(config, config_path)
    return config


def store_config(config: TintConfig, path: Path | str | None = None) -> bool:
    config_path = Path(path) if path is not None else default_config_path()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with config_path.open("w", encoding="utf-8") as handle:
            json.dump(config.to_dict(), handle, indent=2)
    except OSError as exc:
        logger.debug("Could not write tint config to %s: %s", config_path, exc)
        return False
    return True
