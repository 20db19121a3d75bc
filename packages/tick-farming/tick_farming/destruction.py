"""DestructionHandler - seed drops and vine bookkeeping when plants are removed."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from tick_farming.components import PlantInstance, VineStem
from tick_farming.config import FarmingConfig
from tick_farming.physics import apply_impulse, drop_at, random_impulse
from tick_farming.seeds import weighted_seed_count
from tick_farming.signals import PRODUCE_CREATED

if TYPE_CHECKING:
    from tick_farming.blocks import BlockGrid
    from tick_farming.items import ItemRegistry
    from tick_farming.signals import SignalBus
    from tick_farming.types import Coord, EntityId
    from tick_farming.world import World

logger = logging.getLogger(__name__)


class DestructionHandler:
    def __init__(
        self,
        world: World,
        blocks: BlockGrid,
        items: ItemRegistry,
        bus: SignalBus,
        rng: random.Random,
        config: FarmingConfig | None = None,
    ) -> None:
        self._world = world
        self._blocks = blocks
        self._items = items
        self._bus = bus
        self._rng = rng
        self._config = config or FarmingConfig()

    def destroy(self, entity: EntityId, parent_dead: bool = False) -> list[EntityId]:
        """Drop seeds for a plant that is being removed. Returns the drops.

        A bush only yields seeds when it is fully grown. A bud always drops
        one seed, clears its own block and detaches from its vine unless the
        vine is the one being destroyed (*parent_dead*).
        """
        if not self._world.has(entity, PlantInstance):
            return []
        position = self._blocks.position_of(entity)
        if position is None:
            return []
        instance = self._world.get(entity, PlantInstance)

        if not instance.is_bud:
            if not instance.in_last_stage:
                logger.debug("Bush at %s destroyed before maturity", position)
                return []
            count = weighted_seed_count(instance.seed_drop_weights, self._rng)
            return self.drop_items(count, instance.drop_item, position, entity)

        if not parent_dead:
            self.remove_bud(instance.parent, position)
        self._blocks.set_block(position, self._config.empty_block)
        return self.drop_items(1, instance.drop_item, position, entity)

    def remove_bud(self, vine: EntityId, position: Coord) -> bool:
        """Detach the bud at *position* from *vine*. False if nothing to do."""
        if not self._world.has(vine, VineStem):
            logger.debug("Bud at %s has no live vine %d", position, vine)
            return False
        stem = self._world.get(vine, VineStem)
        if position not in stem.buds:
            return False
        stem.buds.remove(position)
        return True

    def destroy_vine(self, vine: EntityId) -> list[EntityId]:
        """Destroy every bud of *vine*, then the vine's own block."""
        if not self._world.has(vine, VineStem):
            return []
        stem = self._world.get(vine, VineStem)
        dropped: list[EntityId] = []
        for bud_position in list(stem.buds):
            bud = self._blocks.entity_at(bud_position)
            if bud is not None:
                dropped.extend(self.destroy(bud, parent_dead=True))
        stem.buds.clear()

        position = self._blocks.position_of(vine)
        if position is not None:
            self._blocks.set_block(position, self._config.empty_block)
        else:
            self._world.despawn(vine)
        return dropped

    def drop_items(
        self, count: int, prefab: str, position: Coord, source: EntityId
    ) -> list[EntityId]:
        """Create *count* items of *prefab* and scatter them above *position*."""
        x, y, z = position
        spawn_at = (float(x), float(y) + self._config.drop_height, float(z))
        dropped = []
        for _ in range(count):
            item = self._items.create(self._world, prefab)
            drop_at(self._world, item, spawn_at)
            apply_impulse(
                self._world, item, random_impulse(self._rng, self._config.drop_impulse)
            )
            self._bus.publish(PRODUCE_CREATED, plant=source, item=item)
            dropped.append(item)
        if dropped:
            logger.debug("Dropped %d x %s at %s", count, prefab, position)
        return dropped
