"""World - entity and component storage for blocks, plants and items.

Block entities, plant data, growth timers and item drops all live here as
plain components keyed by type. A plant's entity is replaced on every
growth step, so callers look entities up again instead of holding them.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, TypeVar, cast

from tick_farming.types import DeadEntityError, EntityId

T = TypeVar("T")

# Called as (world, entity, component) after a component leaves an entity.
DetachHook = Callable[["World", EntityId, Any], None]


class World:
    def __init__(self) -> None:
        self._stores: dict[type, dict[EntityId, Any]] = {}
        self._living: set[EntityId] = set()
        self._last_id: EntityId = -1
        self._types_by_name: dict[str, type] = {}
        self._detach_hooks: dict[type, list[DetachHook]] = {}

    def spawn(self) -> EntityId:
        self._last_id += 1
        self._living.add(self._last_id)
        return self._last_id

    def despawn(self, entity_id: EntityId) -> None:
        """Remove *entity_id* and every component on it. Dead ids are ignored."""
        if entity_id not in self._living:
            return
        self._living.remove(entity_id)
        for ctype in list(self._stores):
            self._drop(entity_id, ctype)

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._living

    def entities(self) -> frozenset[EntityId]:
        return frozenset(self._living)

    def register_component(self, ctype: type) -> None:
        """Make *ctype* resolvable by its dotted name (item prefabs use it)."""
        self._types_by_name[f"{ctype.__module__}.{ctype.__qualname__}"] = ctype

    def component_type(self, name: str) -> type:
        """Resolve a registered component name. Raises KeyError if unknown."""
        return self._types_by_name[name]

    def attach(self, entity_id: EntityId, component: Any) -> None:
        """Set the component of its type on *entity_id*, replacing any old one."""
        ctype = type(component)
        if entity_id not in self._living:
            raise DeadEntityError(
                entity_id,
                f"Cannot attach {ctype.__name__} to dead entity {entity_id}",
            )
        self.register_component(ctype)
        self._stores.setdefault(ctype, {})[entity_id] = component

    def detach(self, entity_id: EntityId, component_type: type) -> None:
        self._drop(entity_id, component_type)

    def _drop(self, entity_id: EntityId, ctype: type) -> None:
        component = self._stores.get(ctype, {}).pop(entity_id, None)
        if component is None:
            return
        for hook in self._detach_hooks.get(ctype, ()):
            hook(self, entity_id, component)

    def get(self, entity_id: EntityId, component_type: type[T]) -> T:
        if entity_id not in self._living:
            raise DeadEntityError(entity_id, f"Entity {entity_id} is not alive")
        try:
            return cast(T, self._stores[component_type][entity_id])
        except KeyError:
            raise KeyError(
                f"Entity {entity_id} has no {component_type.__name__} component"
            ) from None

    def has(self, entity_id: EntityId, component_type: type) -> bool:
        return (
            entity_id in self._living
            and entity_id in self._stores.get(component_type, ())
        )

    def query(self, *ctypes: type) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Yield (entity, components) for living entities holding every type.

        Entities are snapshotted first, so systems may despawn or replace
        entities while iterating.
        """
        if not ctypes:
            return
        first = self._stores.get(ctypes[0])
        if not first:
            return
        for eid in list(first):
            if eid not in self._living:
                continue
            found = [self._stores.get(ctype, {}).get(eid) for ctype in ctypes]
            if all(c is not None for c in found):
                yield eid, tuple(found)

    def on_detach(self, ctype: type, hook: DetachHook) -> None:
        """Call *hook* whenever a *ctype* component is removed, including on despawn."""
        self._detach_hooks.setdefault(ctype, []).append(hook)
