"""Growth timers: one-shot countdowns keyed by the entity that owns them."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tick_farming.types import EntityId, TickContext
    from tick_farming.world import World


@dataclass
class GrowthTimer:
    """One-shot countdown. Fires when remaining reaches 0, then auto-detaches."""

    name: str
    remaining: int


class GrowthScheduler:
    """Arms randomized growth timers.

    An entity holds at most one timer, so arming replaces the previous one and
    despawning the entity cancels it.
    """

    def __init__(self, world: World, rng: random.Random, prefix: str = "growth") -> None:
        self._world = world
        self._rng = rng
        self._prefix = prefix

    def arm(self, entity: EntityId, min_ticks: int, max_ticks: int) -> int:
        """Schedule *entity* to fire after randint(min, max) ticks."""
        duration = self._rng.randint(min_ticks, max_ticks)
        self._world.attach(
            entity, GrowthTimer(name=f"{self._prefix}:{entity}", remaining=duration)
        )
        return duration

    def remaining(self, entity: EntityId) -> int | None:
        if not self._world.has(entity, GrowthTimer):
            return None
        return self._world.get(entity, GrowthTimer).remaining


def make_timer_system(
    on_fire: Callable[[World, TickContext, int, GrowthTimer], None],
) -> Callable[[World, TickContext], None]:
    """Return a system that decrements GrowthTimers and fires callbacks at zero."""

    def timer_system(world: World, ctx: TickContext) -> None:
        for eid, (timer,) in list(world.query(GrowthTimer)):
            # An earlier callback this tick may have replaced the entity.
            if not world.alive(eid):
                continue
            timer.remaining -= 1
            if timer.remaining <= 0:
                world.detach(eid, GrowthTimer)
                on_fire(world, ctx, eid, timer)

    return timer_system
