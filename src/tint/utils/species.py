"""Species family keys and life-stage classification from codes and variants."""
from __future__ import annotations

from typing import Mapping

from tint.constants import ARCTIC_TYPES, LIFECYCLE_VARIANTS

JUVENILE_HINTS = (
    "baby", "juvenile", "child", "young", "adolescent", "foal", "whelp", "gosling", "kitten", "puppy",
    "calf", "cub", "kit", "fawn", "lamb", "kid", "pup", "offspring", "cygnet", "joey", "piglet", "cria",
    "eyas", "leveret", "chick", "puggle", "puggles", "squab", "owlet", "spiderling", "hatchling", "duckling",
    "poult", "pullet", "cockerel",
)

# (family, root names, path fragments) checked in order; first hit wins.
_FAMILIES = (
    ("chicken", ("hen", "rooster", "chick"), ("chicken", "hen-", "rooster")),
    ("duck", ("duckling",), ("duck",)),
    ("goose", ("gosling",), ("goose",)),
    ("turkey", ("poult",), ("turkey",)),
    ("goat", ("kid",), ("goat",)),
    ("cow", ("calf",), ("cow", "cattle", "bull")),
    ("sheep", ("lamb",), ("sheep", "ram", "ewe")),
    ("deer", ("fawn",), ("deer",)),
    ("pig", ("piglet",), ("pig",)),
    ("wolf", ("pup",), ("wolf",)),
    ("fox", ("kit",), ("fox",)),
    ("bear", ("cub",), ("bear",)),
)


def canonical_root(root: str, full_path: str) -> str:
    """Collapse life-stage and gender names onto one family (hen/rooster/chick -> chicken)."""

    path = (full_path or "").lower()
    name = (root or "").lower()
    for family, roots, fragments in _FAMILIES:
        if name in roots or any(fragment in path for fragment in fragments):
            return family
    return name


def species_key(domain: str, path: str) -> str:
    path = path or ""
    root = path
    idx = path.find("-")
    if idx > 0:
        root = path[:idx]
    return f"{domain or 'game'}:{canonical_root(root, path)}"


def _lifecycle_values(variants: Mapping[str, str]) -> list[str]:
    return [(variants.get(name) or "").lower() for name in LIFECYCLE_VARIANTS]


def looks_like_juvenile(path: str, variants: Mapping[str, str]) -> bool:
    values = _lifecycle_values(variants)
    if "adult" in values:
        return False
    if any(values):
        return True
    # Whole tokens only, so "chicken-hen" is not read as a chick.
    tokens = (path or "").lower().replace("_", "-").split("-")
    return any(token in JUVENILE_HINTS for token in tokens)


def looks_like_adult(path: str, variants: Mapping[str, str]) -> bool:
    values = _lifecycle_values(variants)
    if "adult" in values:
        return True
    if any(values):
        return False
    return not looks_like_juvenile(path, variants)


def is_arctic_variant(type_variant: str) -> bool:
    if not type_variant:
        return False
    return type_variant.lower() in ARCTIC_TYPES
