"""tick-farming - Bush and vine growth, harvest and seed drops for the tick engine."""

from tick_farming.blocks import Block, BlockGrid
from tick_farming.components import CheatGrowth, PlantInstance, VineStem
from tick_farming.config import FarmingConfig
from tick_farming.destruction import DestructionHandler
from tick_farming.engine import Engine
from tick_farming.farm import Farm
from tick_farming.harvest import Activation, HarvestEngine
from tick_farming.inventory import HeldBy, Inventory, InventoryHelper
from tick_farming.items import Item, ItemRegistry
from tick_farming.lifecycle import LifecycleEngine
from tick_farming.physics import KinematicBody
from tick_farming.schedule import GrowthScheduler, GrowthTimer, make_timer_system
from tick_farming.seeds import weighted_seed_count
from tick_farming.signals import PRODUCE_CREATED, SignalBus, make_signal_system
from tick_farming.stages import GrowthStage, GrowthStageTable, PlantDefinition
from tick_farming.types import Coord, DeadEntityError, EntityId, TickContext
from tick_farming.world import World

__all__ = [
    "Activation",
    "Block",
    "BlockGrid",
    "CheatGrowth",
    "Coord",
    "DeadEntityError",
    "DestructionHandler",
    "Engine",
    "EntityId",
    "Farm",
    "FarmingConfig",
    "GrowthScheduler",
    "GrowthStage",
    "GrowthStageTable",
    "GrowthTimer",
    "HarvestEngine",
    "HeldBy",
    "Inventory",
    "InventoryHelper",
    "Item",
    "ItemRegistry",
    "KinematicBody",
    "LifecycleEngine",
    "PRODUCE_CREATED",
    "PlantDefinition",
    "PlantInstance",
    "SignalBus",
    "TickContext",
    "VineStem",
    "World",
    "make_signal_system",
    "make_timer_system",
    "weighted_seed_count",
]
