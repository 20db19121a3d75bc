"""Farm - wires the farming systems onto an Engine and exposes entry points."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_farming.blocks import BlockGrid
from tick_farming.components import CheatGrowth, PlantInstance, VineStem
from tick_farming.config import FarmingConfig
from tick_farming.destruction import DestructionHandler
from tick_farming.harvest import Activation, HarvestEngine, is_plant_interaction
from tick_farming.items import ItemRegistry
from tick_farming.lifecycle import LifecycleEngine
from tick_farming.schedule import GrowthScheduler, make_timer_system
from tick_farming.signals import SignalBus, make_signal_system
from tick_farming.stages import PlantDefinition

if TYPE_CHECKING:
    from tick_farming.engine import Engine
    from tick_farming.types import Coord, EntityId

logger = logging.getLogger(__name__)


class Farm:
    """All farming state for one engine.

    Adds two systems to *engine*: the growth timer system and a signal flush,
    in that order, so ``produce_created`` signals raised during a tick reach
    subscribers in the same tick.
    """

    def __init__(
        self,
        engine: Engine,
        config: FarmingConfig | None = None,
        items: ItemRegistry | None = None,
    ) -> None:
        self.config = config or FarmingConfig()
        self.world = engine.world
        rng = engine.random
        self.blocks = BlockGrid(self.world, self.config.empty_block)
        self.items = items if items is not None else ItemRegistry()
        self.bus = SignalBus()
        self.scheduler = GrowthScheduler(self.world, rng, self.config.timer_prefix)
        self.lifecycle = LifecycleEngine(self.world, self.blocks, self.scheduler)
        self.destruction = DestructionHandler(
            self.world, self.blocks, self.items, self.bus, rng, self.config
        )
        self.harvesting = HarvestEngine(
            self.world, self.blocks, self.items, self.lifecycle,
            self.destruction, self.bus, rng, self.config,
        )
        self._definitions: dict[str, PlantDefinition] = {}

        engine.add_system(make_timer_system(self.lifecycle.on_timer))
        engine.add_system(make_signal_system(self.bus))

    # --- Plant types ---

    def register(self, definition: PlantDefinition) -> None:
        """Register a plant type. Overwrites if name exists."""
        self._definitions[definition.name] = definition

    def definition(self, name: str) -> PlantDefinition:
        """Look up a plant type. Raises KeyError if not registered."""
        return self._definitions[name]

    def _resolve(self, plant: str | PlantDefinition) -> PlantDefinition:
        if isinstance(plant, PlantDefinition):
            return plant
        return self._definitions[plant]

    # --- Entry points ---

    def plant(self, position: Coord, plant: str | PlantDefinition) -> EntityId | None:
        """Plant a standalone bush. Returns its block entity."""
        return self.lifecycle.plant(position, self._resolve(plant))

    def place_vine(self, position: Coord, block_id: str) -> EntityId:
        """Place a vine stem block that buds can be sprouted from."""
        vine = self.blocks.set_block(position, block_id)
        if vine is None:
            raise ValueError(f"cannot place a vine as the empty block {block_id!r}")
        self.world.attach(vine, VineStem())
        return vine

    def sprout_bud(
        self, vine: EntityId, position: Coord, plant: str | PlantDefinition
    ) -> EntityId | None:
        """Grow a bud of *vine* at *position*. None if the vine is gone."""
        if not self.world.has(vine, VineStem):
            logger.debug("Cannot sprout bud at %s: vine %d is gone", position, vine)
            return None
        bud = self.lifecycle.plant(position, self._resolve(plant), parent=vine)
        if bud is not None and self.world.has(vine, VineStem):
            self.world.get(vine, VineStem).buds.append(position)
        return bud

    def activate(self, activation: Activation, item: EntityId | None = None) -> bool:
        """Handle *instigator* using *item* (or an empty hand) on *target*."""
        if item is not None and self.world.has(item, CheatGrowth):
            if activation.consumed or not is_plant_interaction(
                self.world, activation.target, activation.instigator
            ):
                return False
            cheat = self.world.get(item, CheatGrowth)
            self.force_growth(activation.target, -1 if cheat.causes_ungrowth else 1)
            activation.consumed = True
            return True
        return self.harvesting.harvest(activation)

    def harvest(
        self,
        target: EntityId,
        harvester: EntityId,
        location: tuple[float, float, float] | None = None,
    ) -> bool:
        return self.harvesting.harvest(Activation(target, harvester, location))

    def force_growth(self, target: EntityId, delta: int) -> EntityId | None:
        return self.lifecycle.force(target, delta)

    def break_block(self, position: Coord) -> list[EntityId]:
        """External destruction of whatever block is at *position*.

        Returns the seed items dropped.
        """
        target = self.blocks.entity_at(position)
        if target is None:
            return []
        if self.world.has(target, VineStem):
            return self.destroy_vine(target)
        dropped: list[EntityId] = []
        if self.world.has(target, PlantInstance):
            dropped = self.destruction.destroy(target)
        self.blocks.set_block(position, self.config.empty_block)
        return dropped

    def destroy_vine(self, vine: EntityId) -> list[EntityId]:
        return self.destruction.destroy_vine(vine)
