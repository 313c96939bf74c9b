import random

from esper import World

from tint.components.tint_state import Style
from tint.config import TintConfig
from tint.factories.creatures import create_creature
from tint.genetics.breeding import roll_orphan_tint, try_orphan_fallback
from tint.utils.color_codec import is_neutral
from tests.helpers import make_config, tinted_creature


def test_fallback_chance_clamping():
    assert make_config(juvenile_fallback_mutation_chance=2.0).fallback_mutation_chance == 0.10
    assert make_config(juvenile_fallback_mutation_chance=-1).fallback_mutation_chance == 0.0
    assert make_config(juvenile_fallback_mutation_chance=float("nan")).fallback_mutation_chance == 0.0
    assert make_config(juvenile_fallback_mutation_chance=0.05).fallback_mutation_chance == 0.05


def _rolls(config, seed):
    rng = random.Random(seed)
    return [roll_orphan_tint(config, rng) for _ in range(3000)]


def test_invalid_fallback_chances_behave_like_their_clamped_values():
    assert _rolls(make_config(juvenile_fallback_mutation_chance=2.0), 1) == _rolls(
        make_config(juvenile_fallback_mutation_chance=0.10), 1
    )
    zero = _rolls(make_config(juvenile_fallback_mutation_chance=0.0), 2)
    assert _rolls(make_config(juvenile_fallback_mutation_chance=-1), 2) == zero
    assert _rolls(make_config(juvenile_fallback_mutation_chance=float("nan")), 2) == zero
    assert all(style != Style.MUTANT for style, _ in zero)


def test_capped_fallback_mutates_rarely():
    rolls = _rolls(make_config(juvenile_fallback_mutation_chance=2.0), 3)
    mutants = sum(1 for style, _ in rolls if style == Style.MUTANT)
    assert 200 < mutants < 420


def test_fallback_only_for_enabled_orphan_juveniles():
    world = World()
    rng = random.Random(4)
    enabled = make_config(enable_juvenile_fallback_mutation=True)
    orphan = create_creature(world, "piglet", variants={"age": "baby"}, position=(0, 0, 0))
    adult_pig = create_creature(world, "pig-wild-male", variants={"age": "adult"}, position=(100, 0, 0))

    assert try_orphan_fallback(world, orphan, TintConfig(), rng) is None
    assert try_orphan_fallback(world, adult_pig, enabled, rng) is None
    assert try_orphan_fallback(world, orphan, enabled, rng) is not None

    tinted_creature(world, "pig-wild-female", Style.GRAY, 0xFFB0B0B0, variants={"age": "adult"}, position=(3, 0, 0))
    assert try_orphan_fallback(world, orphan, enabled, rng) is None


def test_arctic_orphans_stay_neutral_unless_mutant():
    rng = random.Random(5)
    config = make_config(juvenile_fallback_mutation_chance=0.0)
    for _ in range(200):
        style, color = roll_orphan_tint(config, rng, arctic=True)
        assert style in (Style.GRAY, Style.DARK, Style.WHITE)
        assert is_neutral(color)
