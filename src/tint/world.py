import random

from esper import World
from .config import TintConfig
from .events.bus import EventBus
from .session import SIDE_BOTH, TintSession


def create_world(
    event_bus: EventBus,
    *,
    side: str = SIDE_BOTH,
    config: TintConfig | None = None,
    rng: random.Random | None = None,
    seed: int | None = None,
    start_session: bool = True,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random(seed))

    # One tint session per world; tests reach it through world.tint_session.
    session = TintSession(world, event_bus, side=side, config=config, seed=seed)
    setattr(world, "tint_session", session)
    if start_session:
        session.start()
    return world
