"""HarvestEngine - produce from mature plants, then regrow or remove them."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tick_farming.blocks import Block
from tick_farming.components import PlantInstance
from tick_farming.config import FarmingConfig
from tick_farming.inventory import InventoryHelper
from tick_farming.physics import apply_impulse, drop_at, random_impulse
from tick_farming.signals import PRODUCE_CREATED

if TYPE_CHECKING:
    from tick_farming.blocks import BlockGrid
    from tick_farming.destruction import DestructionHandler
    from tick_farming.items import ItemRegistry
    from tick_farming.lifecycle import LifecycleEngine
    from tick_farming.signals import SignalBus
    from tick_farming.types import EntityId
    from tick_farming.world import World

logger = logging.getLogger(__name__)


@dataclass
class Activation:
    """An instigator using (activating) a target entity.

    Attributes:
        target: The entity being used, e.g. a plant block.
        instigator: The actor doing it.
        location: Point where the interaction hit, if known.
        consumed: Set once a handler has acted on the activation.
    """

    target: int
    instigator: int
    location: tuple[float, float, float] | None = None
    consumed: bool = False


def is_plant_interaction(world: World, target: EntityId, instigator: EntityId) -> bool:
    """Both entities exist and the target is a placed plant."""
    return (
        world.alive(target)
        and world.alive(instigator)
        and world.has(target, PlantInstance)
        and world.has(target, Block)
    )


class HarvestEngine:
    def __init__(
        self,
        world: World,
        blocks: BlockGrid,
        items: ItemRegistry,
        lifecycle: LifecycleEngine,
        destruction: DestructionHandler,
        bus: SignalBus,
        rng: random.Random,
        config: FarmingConfig | None = None,
    ) -> None:
        self._world = world
        self._blocks = blocks
        self._items = items
        self._lifecycle = lifecycle
        self._destruction = destruction
        self._bus = bus
        self._rng = rng
        self._config = config or FarmingConfig()

    def harvest(self, activation: Activation) -> bool:
        """Harvest a fully grown plant. Returns True if anything happened."""
        target, harvester = activation.target, activation.instigator
        if activation.consumed or not is_plant_interaction(self._world, target, harvester):
            return False
        instance = self._world.get(target, PlantInstance)
        if not instance.in_last_stage:
            logger.debug("Plant %d is not ready for harvest", target)
            return False

        position = self._world.get(target, Block).position
        item = self._give_produce(instance.produce, activation, harvester, target)
        self._bus.publish(PRODUCE_CREATED, plant=target, item=item)

        if instance.sustainable:
            self._lifecycle.advance(position, target, -1)
        else:
            self._destruction.destroy(target)
            self._blocks.set_block(position, self._config.empty_block)
            if self._world.alive(target):
                self._world.despawn(target)
        activation.consumed = True
        logger.debug("Harvested %s from plant at %s", instance.produce, position)
        return True

    def _give_produce(
        self,
        produce: str,
        activation: Activation,
        harvester: EntityId,
        target: EntityId,
    ) -> EntityId:
        item = self._items.create(self._world, produce)
        if InventoryHelper.give(self._world, harvester, target, item):
            return item
        if activation.location is not None:
            x, y, z = activation.location
        else:
            x, y, z = self._world.get(target, Block).position
        drop_at(self._world, item, (float(x), float(y) + self._config.drop_height, float(z)))
        apply_impulse(
            self._world, item, random_impulse(self._rng, self._config.drop_impulse)
        )
        return item
