"""LifecycleEngine - growth stage transitions for bushes and vine buds."""
from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Callable

from tick_farming.components import PlantInstance
from tick_farming.schedule import GrowthScheduler, GrowthTimer

if TYPE_CHECKING:
    from tick_farming.blocks import BlockGrid
    from tick_farming.stages import PlantDefinition
    from tick_farming.types import Coord, EntityId, TickContext
    from tick_farming.world import World

logger = logging.getLogger(__name__)

RetainHook = Callable[["World", "EntityId"], None]
TransferHook = Callable[["World", "EntityId", "EntityId"], None]


class LifecycleEngine:
    """Moves plants between growth stages.

    Every transition places a new block, so the plant's entity is replaced
    each time. The ``PlantInstance`` is copied onto the new block entity and
    the old entity is discarded. Hooks let other systems carry their own
    state across the swap: retain hooks run on the old entity before the
    block changes and on the new one before the plant is attached to it.
    Transfer hooks receive ``(old, new)`` afterwards.
    """

    def __init__(
        self, world: World, blocks: BlockGrid, scheduler: GrowthScheduler
    ) -> None:
        self._world = world
        self._blocks = blocks
        self._scheduler = scheduler
        self._retain_hooks: list[RetainHook] = []
        self._transfer_hooks: list[TransferHook] = []

    def on_retain(self, hook: RetainHook) -> None:
        self._retain_hooks.append(hook)

    def on_transfer(self, hook: TransferHook) -> None:
        self._transfer_hooks.append(hook)

    def plant(
        self,
        position: Coord,
        definition: PlantDefinition,
        parent: EntityId | None = None,
    ) -> EntityId | None:
        """Plant *definition* at *position* and place its first stage."""
        # Any block entity (plant, vine stem) owns its position.
        if self._blocks.entity_at(position) is not None:
            logger.debug("Cannot plant %s at %s: occupied", definition.name, position)
            return None
        seed = self._world.spawn()
        self._world.attach(seed, PlantInstance.from_definition(definition, parent))
        return self.advance(position, seed, 1)

    def advance(
        self, position: Coord, entity: EntityId, delta: int
    ) -> EntityId | None:
        """Grow the plant on *entity* by *delta* stages (negative un-grows).

        Returns the entity now carrying the plant. Forward growth from the
        final stage is a no-op that returns *entity* unchanged.
        """
        if not self._world.has(entity, PlantInstance):
            return entity
        instance = self._world.get(entity, PlantInstance)
        if instance.in_last_stage and delta >= 0:
            return entity

        for hook in self._retain_hooks:
            hook(self._world, entity)

        table = instance.stages
        next_index = max(0, min(table.last_index, instance.current_stage + delta))
        stage = table.stage_at(next_index)
        migrated = dataclasses.replace(instance, current_stage=next_index)

        new_entity = self._blocks.set_block(position, stage.representation_id)
        if new_entity is None:
            logger.warning(
                "Stage %d places the empty block %r; plant at %s removed",
                next_index, stage.representation_id, position,
            )
            if self._world.alive(entity):
                self._world.despawn(entity)
            return None

        for hook in self._retain_hooks:
            hook(self._world, new_entity)
        self._world.attach(new_entity, migrated)

        if stage.timed:
            self._scheduler.arm(new_entity, stage.min_duration, stage.max_duration)

        for transfer in self._transfer_hooks:
            transfer(self._world, entity, new_entity)

        # Seed entities used for planting are not blocks; drop them here.
        if self._world.alive(entity):
            self._world.despawn(entity)

        logger.debug(
            "Plant at %s: stage %d -> %d (%s), entity %d -> %d",
            position, instance.current_stage, next_index,
            stage.representation_id, entity, new_entity,
        )
        return new_entity

    def force(self, entity: EntityId, delta: int) -> EntityId | None:
        """Grow or un-grow a placed plant immediately, ignoring its timer."""
        position = self._blocks.position_of(entity)
        if position is None or not self._world.has(entity, PlantInstance):
            return None
        return self.advance(position, entity, delta)

    def on_timer(
        self, world: World, ctx: TickContext, entity: EntityId, timer: GrowthTimer
    ) -> None:
        """Growth timer callback for ``make_timer_system``."""
        self.force(entity, 1)
