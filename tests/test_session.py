import pytest
from esper import World

from tint.constants import SIDE_CLIENT, SIDE_SERVER
from tint.events.bus import EVENT_SESSION_STARTED, EVENT_SESSION_STOPPED, EVENT_TICK, EventBus
from tint.factories.creatures import spawn_creature
from tint.session import TintSession
from tint.utils.creatures import has_tint
from tint.world import create_world
from tests.helpers import make_config


def test_session_announces_start_and_stop():
    bus = EventBus()
    events = []
    bus.subscribe(EVENT_SESSION_STARTED, lambda sender, **kw: events.append(("started", kw["side"])))
    bus.subscribe(EVENT_SESSION_STOPPED, lambda sender, **kw: events.append(("stopped", kw["side"])))

    world = create_world(bus, config=make_config(), seed=1)
    world.tint_session.stop()

    assert events == [("started", "both"), ("stopped", "both")]


def test_stopped_session_no_longer_reacts():
    bus = EventBus()
    world = create_world(bus, config=make_config(), seed=2)
    session = world.tint_session
    scheduler = session.context.scheduler
    session.stop()

    wolf = spawn_creature(world, bus, "wolf-male")
    bus.emit(EVENT_TICK, dt=10.0)
    assert not session.running
    assert not has_tint(world, wolf)
    assert scheduler.names() == []


def test_restart_starts_from_clean_state():
    bus = EventBus()
    world = create_world(bus, config=make_config(), seed=3)
    session = world.tint_session
    session.context.beacons.record("game:wolf", (0, 0, 0), 1, 0xFFAAAAAA, 0)
    session.stop()

    context = session.start()
    assert len(context.beacons) == 0
    assert sorted(context.scheduler.names()) == ["tint_beacons", "tint_reapply", "tint_sweep"]


def test_sessions_do_not_share_state():
    first_bus, second_bus = EventBus(), EventBus()
    first = create_world(first_bus, config=make_config(), seed=4)
    second = create_world(second_bus, config=make_config(), seed=4)
    first.tint_session.context.beacons.record("game:wolf", (0, 0, 0), 1, 0xFFAAAAAA, 0)
    first_bus.emit(EVENT_TICK, dt=2.0)

    assert len(second.tint_session.context.beacons) == 0
    assert second.tint_session.context.now_ms == 0
    assert first.tint_session.context.now_ms == 2000


def test_side_selects_systems():
    server = create_world(EventBus(), side=SIDE_SERVER, config=make_config(), seed=5).tint_session
    client = create_world(EventBus(), side=SIDE_CLIENT, config=make_config(), seed=5).tint_session

    assert server.assignment_system is not None and server.render_system is None
    assert client.assignment_system is None and client.render_system is not None
    assert client.context.scheduler.names() == ["tint_reapply"]


def test_unknown_side_is_rejected():
    with pytest.raises(ValueError):
        TintSession(World(), EventBus(), side="observer")


def test_tick_without_dt_uses_a_frame():
    bus = EventBus()
    world = create_world(bus, config=make_config(), seed=6)
    bus.emit(EVENT_TICK)
    assert world.tint_session.context.now_ms == pytest.approx(1000 / 60)


def test_session_loads_config_from_path(tmp_path):
    path = tmp_path / "tint.json"
    path.write_text('{"weight_gray": 0.9}', encoding="utf-8")
    session = TintSession(World(), EventBus(), config_path=path, seed=7)

    context = session.start()
    assert context.config.weight_gray == 0.9
    session.stop()
