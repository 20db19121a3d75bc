"""A berry patch and a grape vine growing, being harvested and broken.

Demonstrates:
- Registering plant types from static definition data
- Timed growth driven by the engine loop
- Sustainable harvest (regrowth) vs. one-shot harvest (removal + seeds)
- Vine buds and what happens to them when the vine is broken
- Listening for produce_created signals

Run: python examples/berry_patch.py
"""

import logging

from tick_farming import (
    PRODUCE_CREATED,
    Engine,
    Farm,
    Inventory,
    Item,
    PlantDefinition,
    PlantInstance,
)

PLANTS = [
    {
        "name": "berry",
        "produce": "berry",
        "seed": "berry_seed",
        "sustainable": True,
        "stages": {
            "berry:sprout": {"min": 3, "max": 5},
            "berry:bush": {"min": 3, "max": 5},
            "berry:ripe": {"min": 0, "max": 0},
        },
    },
    {
        "name": "melon",
        "produce": "melon",
        "seed": "melon_seed",
        "sustainable": False,
        "seed_drop_weights": [1, 2, 1],
        "stages": {
            "melon:sprout": {"min": 4, "max": 6},
            "melon:ripe": {"min": 0, "max": 0},
        },
    },
    {
        "name": "grape",
        "produce": "grape",
        "seed": "grape_seed",
        "stages": {
            "grape:bud": {"min": 2, "max": 2},
            "grape:ripe": {"min": 0, "max": 0},
        },
    },
]


def describe(farm: Farm, position) -> str:
    eid = farm.blocks.entity_at(position)
    if eid is None or not farm.world.has(eid, PlantInstance):
        return farm.blocks.block_at(position)
    stage = farm.world.get(eid, PlantInstance).current_stage
    return f"{farm.blocks.block_at(position)} (stage {stage})"


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    engine = Engine(tps=10, seed=7)
    farm = Farm(engine)
    for data in PLANTS:
        farm.register(PlantDefinition.from_dict(data))

    def on_produce(name, data):
        prefab = farm.world.get(data["item"], Item).prefab
        print(f"  [tick {engine.tick_number}] produce: {prefab}")

    farm.bus.subscribe(PRODUCE_CREATED, on_produce)

    player = engine.world.spawn()
    engine.world.attach(player, Inventory(capacity=10))

    berry, melon = (0, 0, 0), (2, 0, 0)
    farm.plant(berry, "berry")
    farm.plant(melon, "melon")
    vine = farm.place_vine((0, 0, 4), "grape:stem")
    for x in (-1, 1):
        farm.sprout_bud(vine, (x, 0, 4), "grape")

    engine.run(12)
    print(f"berry: {describe(farm, berry)}   melon: {describe(farm, melon)}")

    farm.harvest(farm.blocks.entity_at(berry), player)
    farm.harvest(farm.blocks.entity_at(melon), player)
    engine.step()
    print(f"berry: {describe(farm, berry)}   melon: {describe(farm, melon)}")

    farm.break_block((0, 0, 4))
    engine.step()
    row = [farm.blocks.block_at((x, 0, 4)) for x in (-1, 0, 1)]
    print(f"vine row after breaking the stem: {row}")

    inv = engine.world.get(player, Inventory)
    print(f"inventory: {[engine.world.get(i, Item).prefab for i in inv.items]}")


if __name__ == "__main__":
    main()
