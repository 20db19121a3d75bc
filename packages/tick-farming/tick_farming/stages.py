"""Growth stage descriptors and plant type definitions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping


@dataclass(frozen=True)
class GrowthStage:
    """One step of a plant's growth.

    Attributes:
        representation_id: Block id placed while the plant is in this stage.
        min_duration: Minimum ticks before advancing (0 for no timer).
        max_duration: Maximum ticks before advancing (0 for no timer).
    """

    representation_id: str
    min_duration: int = 0
    max_duration: int = 0

    def __post_init__(self) -> None:
        if not self.representation_id:
            raise ValueError("representation_id must be non-empty")
        if self.min_duration < 0:
            raise ValueError(f"min_duration must be >= 0, got {self.min_duration}")
        if self.min_duration > self.max_duration:
            raise ValueError(
                f"min_duration {self.min_duration} exceeds "
                f"max_duration {self.max_duration}"
            )

    @property
    def timed(self) -> bool:
        return self.min_duration > 0 and self.max_duration > 0


class GrowthStageTable:
    """Ordered, read-only sequence of growth stages shared by a plant type."""

    __slots__ = ("_stages",)

    def __init__(self, stages: list[GrowthStage] | tuple[GrowthStage, ...]) -> None:
        if not stages:
            raise ValueError("a growth stage table needs at least one stage")
        self._stages = tuple(stages)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GrowthStageTable:
        """Build from block id -> (min, max) or {"min": .., "max": ..}.

        Stage order is the mapping's iteration order.
        """
        stages = []
        for block_id, bounds in data.items():
            if isinstance(bounds, Mapping):
                lo, hi = bounds.get("min", 0), bounds.get("max", 0)
            else:
                lo, hi = bounds
            stages.append(GrowthStage(block_id, int(lo), int(hi)))
        return cls(stages)

    def stage_at(self, index: int) -> GrowthStage:
        """Stage at *index*, saturating at both ends."""
        return self._stages[min(len(self._stages) - 1, max(0, index))]

    @property
    def last_index(self) -> int:
        return len(self._stages) - 1

    def is_last(self, index: int) -> bool:
        return index == self.last_index

    def __len__(self) -> int:
        return len(self._stages)

    def __iter__(self) -> Iterator[GrowthStage]:
        return iter(self._stages)

    def __repr__(self) -> str:
        ids = ", ".join(s.representation_id for s in self._stages)
        return f"GrowthStageTable([{ids}])"


@dataclass(frozen=True)
class PlantDefinition:
    """Static description of a plant type, shared by every planted instance.

    Attributes:
        name: Plant type identifier.
        stages: Growth stages in order; the last one is harvestable.
        produce: Item prefab given on harvest.
        seed: Item prefab dropped on destruction (produce is used if None).
        sustainable: Regrow one stage after harvest instead of being removed.
        seed_drop_weights: Index i is the relative weight of dropping i seeds.
    """

    name: str
    stages: GrowthStageTable
    produce: str
    seed: str | None = None
    sustainable: bool = True
    seed_drop_weights: tuple[int, ...] = (0, 1)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("PlantDefinition name must be non-empty")
        if not self.produce:
            raise ValueError(f"{self.name}: produce must be non-empty")
        if any(w < 0 for w in self.seed_drop_weights):
            raise ValueError(
                f"{self.name}: seed_drop_weights must be >= 0, "
                f"got {self.seed_drop_weights}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PlantDefinition:
        return cls(
            name=data["name"],
            stages=GrowthStageTable.from_mapping(data["stages"]),
            produce=data["produce"],
            seed=data.get("seed"),
            sustainable=data.get("sustainable", True),
            seed_drop_weights=tuple(data.get("seed_drop_weights", (0, 1))),
        )
