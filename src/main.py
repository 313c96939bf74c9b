"""Entry point for a headless creature tint demo.

Sets up the ECS world, event bus and tint session, spawns a few animal
families, lets juveniles grow up and prints the resulting tints.
"""
import argparse
import logging

from tint.components.creature_code import CreatureCode
from tint.config import load_config
from tint.events.bus import EVENT_TICK, EventBus
from tint.factories.creatures import mature_creature, spawn_creature
from tint.utils.color_codec import to_hex
from tint.utils.creatures import loaded_creatures, read_tint, read_variant
from tint.world import create_world

TICK_SECONDS = 0.5


def populate(world, event_bus):
    """Adults first so their offspring find parents nearby."""
    spawn_creature(world, event_bus, "chicken-rooster", variants={"age": "adult"}, position=(0, 0, 0))
    spawn_creature(world, event_bus, "chicken-hen", variants={"age": "adult"}, position=(2, 0, 1))
    spawn_creature(world, event_bus, "wolf-male", variants={"age": "adult"}, position=(40, 0, 0))
    spawn_creature(world, event_bus, "bear-polar-adult", variants={"type": "polar", "age": "adult"}, position=(80, 0, 0))
    spawn_creature(world, event_bus, "player", position=(5, 0, 5), player=True)
    return [
        (spawn_creature(world, event_bus, "chick", variants={"age": "baby"}, position=(1, 0, 1)), "chicken-hen"),
        (spawn_creature(world, event_bus, "wolf-pup", variants={"age": "pup"}, position=(41, 0, 1)), "wolf-female"),
        (spawn_creature(world, event_bus, "bear-polar-cub", variants={"type": "polar", "age": "cub"}, position=(81, 0, 0)), "bear-polar-adult"),
    ]


def run(seconds: float, seed: int | None, config_path: str | None) -> None:
    event_bus = EventBus()
    config = load_config(config_path, write_back=False) if config_path else None
    world = create_world(event_bus, seed=seed, config=config)
    juveniles = populate(world, event_bus)

    elapsed = 0.0
    matured = False
    while elapsed < seconds:
        event_bus.emit(EVENT_TICK, dt=TICK_SECONDS)
        elapsed += TICK_SECONDS
        if not matured and elapsed >= seconds / 2:
            for juvenile, adult_path in juveniles:
                mature_creature(world, event_bus, juvenile, adult_path)
            matured = True

    for entity in sorted(loaded_creatures(world)):
        code = world.component_for_entity(entity, CreatureCode)
        tint = read_tint(world, entity)
        if not tint.has:
            print(f"{entity:>3} {code.path:<20} (no tint)")
            continue
        kind = read_variant(world, entity, "type") or "-"
        print(f"{entity:>3} {code.path:<20} {kind:<7} {tint.style.name:<9} {to_hex(tint.color)}")
    world.tint_session.stop()


def main():
    parser = argparse.ArgumentParser(description="Headless creature tint demo")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--seconds", type=float, default=6.0)
    parser.add_argument("--config", default=None, help="path to a tint config JSON file")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    run(args.seconds, args.seed, args.config)


if __name__ == "__main__":
    main()
