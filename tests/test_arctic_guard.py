import random

from esper import World

from tint.components.tint_state import Style
from tint.factories.creatures import create_creature
from tint.genetics.arctic_guard import enforce_arctic_rule
from tint.utils.color_codec import is_neutral, pack
from tint.utils.creatures import read_tint
from tests.helpers import make_config, tinted_creature

POLAR = {"type": "polar", "age": "adult"}
ROSY = pack(0.9, 0.7, 0.65)


def test_colored_arctic_creature_is_made_neutral():
    world = World()
    rng = random.Random(1)
    bear = tinted_creature(world, "bear-polar-adult", Style.SOFT_HUE, ROSY, variants=POLAR)

    assert enforce_arctic_rule(world, bear, make_config(), rng) is True
    tint = read_tint(world, bear)
    assert tint.style in (Style.GRAY, Style.DARK, Style.WHITE)
    assert is_neutral(tint.color)


def test_guard_is_idempotent():
    world = World()
    rng = random.Random(2)
    bear = tinted_creature(world, "bear-polar-adult", Style.SOFT_HUE, ROSY, variants=POLAR)
    config = make_config()

    enforce_arctic_rule(world, bear, config, rng)
    first = read_tint(world, bear)
    assert enforce_arctic_rule(world, bear, config, rng) is False
    assert read_tint(world, bear) == first


def test_arctic_mutant_kept_when_allowed():
    world = World()
    bear = tinted_creature(world, "bear-polar-adult", Style.MUTANT, ROSY, variants=POLAR)

    assert enforce_arctic_rule(world, bear, make_config(), random.Random(3)) is False
    assert read_tint(world, bear).color == ROSY


def test_arctic_mutant_rerolled_when_not_allowed():
    world = World()
    bear = tinted_creature(world, "bear-polar-adult", Style.MUTANT, ROSY, variants=POLAR)

    assert enforce_arctic_rule(world, bear, make_config(allow_arctic_mutations=False), random.Random(4)) is True
    assert is_neutral(read_tint(world, bear).color)


def test_non_arctic_creature_untouched():
    world = World()
    bear = tinted_creature(world, "bear-brown-adult", Style.SOFT_HUE, ROSY, variants={"type": "brown"})

    assert enforce_arctic_rule(world, bear, make_config(), random.Random(5)) is False
    assert read_tint(world, bear).color == ROSY


def test_untinted_arctic_creature_untouched():
    world = World()
    fox = create_creature(world, "fox-arctic", variants={"type": "arctic"})
    assert enforce_arctic_rule(world, fox, make_config(), random.Random(6)) is False
    assert not read_tint(world, fox).has
