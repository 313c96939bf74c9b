import logging

from tint.components.saved_tint import SavedTint
from tint.components.tint_state import Style
from tint.constants import SIDE_SERVER
from tint.events.bus import EVENT_TICK, EventBus
from tint.factories.creatures import create_creature
from tint.utils.color_codec import alpha, is_neutral, pack
from tint.utils.creatures import has_tint, read_tint
from tint.world import create_world
from tests.helpers import make_config, tinted_creature


def test_sweep_tints_creatures_the_hooks_missed():
    bus = EventBus()
    world = create_world(bus, config=make_config(), seed=1)
    goat = create_creature(world, "goat-billy", position=(3, 0, 3))
    player = create_creature(world, "player", player=True)

    stats = world.tint_session.reconciliation_system.sweep()
    assert stats["assigned"] == 1
    assert alpha(read_tint(world, goat).color) == 255
    assert not has_tint(world, player)


def test_sweep_runs_every_five_seconds():
    bus = EventBus()
    world = create_world(bus, config=make_config(), seed=2)
    goat = create_creature(world, "goat-billy")

    bus.emit(EVENT_TICK, dt=4.5)
    assert not has_tint(world, goat)
    bus.emit(EVENT_TICK, dt=0.5)
    assert has_tint(world, goat)


def test_sweep_rerolls_colored_arctic_creatures():
    bus = EventBus()
    world = create_world(bus, config=make_config(), seed=3)
    fox = tinted_creature(world, "fox-arctic", Style.SOFT_HUE, pack(0.9, 0.6, 0.5), variants={"type": "arctic"})

    stats = world.tint_session.reconciliation_system.sweep()
    assert stats["arctic_rerolled"] == 1
    assert is_neutral(read_tint(world, fox).color)


def test_sweep_respects_kill_switch():
    bus = EventBus()
    world = create_world(bus, config=make_config(server_disable_all=True), seed=4)
    goat = create_creature(world, "goat-billy")

    bus.emit(EVENT_TICK, dt=5.0)
    assert not has_tint(world, goat)


def test_broken_creature_does_not_stop_the_sweep(caplog):
    bus = EventBus()
    world = create_world(bus, config=make_config(), seed=5)
    # A non-string type variant makes every tint roll for this creature raise.
    broken = create_creature(world, "bear-polar-adult", variants={"type": 5})
    goat = create_creature(world, "goat-billy")
    sweeper = world.tint_session.reconciliation_system
    failures = world.tint_session.context.failures

    with caplog.at_level(logging.ERROR):
        first = sweeper.sweep()
        second = sweeper.sweep()

    assert first["failed"] == 1
    assert second["failed"] == 1
    assert has_tint(world, goat)
    assert failures.has_logged(SIDE_SERVER)
    assert failures.suppressed(SIDE_SERVER) == 1
    errors = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert len(errors) == 1
    assert not has_tint(world, broken)


def test_legacy_style_on_parent_does_not_block_offspring():
    bus = EventBus()
    world = create_world(bus, config=make_config(), seed=6)
    hen = create_creature(world, "chicken-hen", variants={"age": "adult"}, position=(0, 0, 0))
    world.add_component(hen, SavedTint(has=True, style=9, color=pack(0.8, 0.75, 0.7)))
    chick = create_creature(world, "chick", variants={"age": "baby"}, position=(1, 0, 0))

    stats = world.tint_session.reconciliation_system.sweep()

    assert stats["failed"] == 0
    assert read_tint(world, hen).style == Style.SOFT_HUE
    chick_tint = read_tint(world, chick)
    assert chick_tint.has
    assert alpha(chick_tint.color) == 255


def test_legacy_style_on_juvenile_still_leaves_a_beacon():
    bus = EventBus()
    world = create_world(bus, config=make_config(), seed=7)
    chick = create_creature(world, "chick", variants={"age": "baby"})
    world.add_component(chick, SavedTint(has=True, style=9, color=pack(0.8, 0.75, 0.7)))

    assert world.tint_session.beacon_system.refresh() == 1
    assert world.tint_session.context.failures.has_logged(SIDE_SERVER) is False
