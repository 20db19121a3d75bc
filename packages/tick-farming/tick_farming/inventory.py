"""Inventory component and helper functions."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tick_farming.types import EntityId
    from tick_farming.world import World


@dataclass
class Inventory:
    """Item entities carried by an actor.

    Attributes:
        items: Item entity ids, in the order they were received.
        capacity: Maximum number of items (-1 for unlimited).
    """

    items: list[int] = field(default_factory=list)
    capacity: int = -1


@dataclass
class HeldBy:
    """Back-reference from an item to the actor carrying it."""

    owner: int
    source: int | None = None


class InventoryHelper:
    """Pure functions for inventory manipulation."""

    @staticmethod
    def has_room(inv: Inventory) -> bool:
        return inv.capacity == -1 or len(inv.items) < inv.capacity

    @staticmethod
    def give(
        world: World, actor: EntityId, source: EntityId | None, item: EntityId
    ) -> bool:
        """Move *item* into *actor*'s inventory. Returns False if it cannot."""
        if not world.alive(item) or not world.has(actor, Inventory):
            return False
        inv = world.get(actor, Inventory)
        if not InventoryHelper.has_room(inv):
            return False
        inv.items.append(item)
        world.attach(item, HeldBy(owner=actor, source=source))
        return True
