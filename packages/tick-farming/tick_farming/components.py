"""Plant, vine and debug-item components."""
from __future__ import annotations

from dataclasses import dataclass, field

from tick_farming.stages import GrowthStageTable, PlantDefinition
from tick_farming.types import Coord


@dataclass
class PlantInstance:
    """Per-plant growth state, carried by the plant's current block entity.

    ``current_stage`` is -1 until the plant is first placed. ``parent`` is
    the vine stem entity for a bud and None for a standalone bush.
    """

    current_stage: int
    stages: GrowthStageTable
    produce: str
    seed: str | None = None
    sustainable: bool = True
    seed_drop_weights: tuple[int, ...] = (0, 1)
    parent: int | None = None

    @classmethod
    def from_definition(
        cls, definition: PlantDefinition, parent: int | None = None
    ) -> PlantInstance:
        return cls(
            current_stage=-1,
            stages=definition.stages,
            produce=definition.produce,
            seed=definition.seed,
            sustainable=definition.sustainable,
            seed_drop_weights=definition.seed_drop_weights,
            parent=parent,
        )

    @property
    def is_bud(self) -> bool:
        return self.parent is not None

    @property
    def in_last_stage(self) -> bool:
        return self.stages.is_last(self.current_stage)

    @property
    def drop_item(self) -> str:
        """Prefab dropped when the plant is destroyed."""
        return self.seed if self.seed is not None else self.produce


@dataclass
class VineStem:
    """A vine that grows buds. Tracks bud positions for detachment."""

    buds: list[Coord] = field(default_factory=list)

    @property
    def bud_count(self) -> int:
        return len(self.buds)


@dataclass
class CheatGrowth:
    """Debug item that grows (or un-grows) the plant it is used on."""

    causes_ungrowth: bool = False
