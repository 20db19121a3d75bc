"""Item component and the ItemRegistry prefab store."""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tick_farming.types import EntityId
    from tick_farming.world import World

logger = logging.getLogger(__name__)


@dataclass
class Item:
    """Marks an entity as an item created from the prefab *prefab*."""

    prefab: str


class ItemRegistry:
    """Stores item prefabs. Prefabs map component type keys to field dicts.

    Component keys use ``module.QualName`` and must be registered on the
    world (``World.register_component``) before ``create`` is called.
    """

    def __init__(self) -> None:
        self._prefabs: dict[str, dict[str, dict[str, Any]]] = {}

    def define(
        self, name: str, components: dict[str, dict[str, Any]] | None = None
    ) -> None:
        """Define a named prefab. Overwrites if name exists."""
        if not name:
            raise ValueError("prefab name must be non-empty")
        self._prefabs[name] = components or {}

    def has(self, name: str) -> bool:
        return name in self._prefabs

    def create(self, world: World, name: str) -> EntityId:
        """Spawn an item entity for *name*.

        Undefined prefabs still yield a bare item so drops are never lost.
        """
        eid = world.spawn()
        world.attach(eid, Item(prefab=name))
        if name not in self._prefabs:
            logger.warning("Creating item from undefined prefab %r", name)
            return eid
        for comp_name, fields in copy.deepcopy(self._prefabs[name]).items():
            ctype = world.component_type(comp_name)
            world.attach(eid, ctype(**fields))
        return eid
