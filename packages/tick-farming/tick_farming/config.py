"""Farming configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FarmingConfig:
    """Immutable tuning values shared by the farming systems.

    Attributes:
        drop_impulse: Maximum single-axis impulse for seed and produce drops.
        drop_height: Vertical offset above the block where drops appear.
        empty_block: Block id written when a plant is removed.
        timer_prefix: Prefix of growth timer names ("<prefix>:<eid>").
    """

    drop_impulse: float = 22.0
    drop_height: float = 0.5
    empty_block: str = "air"
    timer_prefix: str = "growth"

    def __post_init__(self) -> None:
        if self.drop_impulse < 0:
            raise ValueError(f"drop_impulse must be >= 0, got {self.drop_impulse}")
        if not self.empty_block:
            raise ValueError("empty_block must be non-empty")
