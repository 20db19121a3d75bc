"""Tests for entity CRUD, component attach/detach, queries and detach hooks."""

from dataclasses import dataclass

import pytest

from tick_farming import DeadEntityError, World


@dataclass
class Position:
    x: float
    y: float


@dataclass
class Health:
    hp: int


def test_entity_ids_are_sequential():
    world = World()
    e0 = world.spawn()
    e1 = world.spawn()
    assert e1 == e0 + 1
    assert world.entities() == frozenset({e0, e1})


def test_despawn_removes_components():
    world = World()
    eid = world.spawn()
    world.attach(eid, Health(10))
    world.despawn(eid)
    assert not world.alive(eid)
    assert not world.has(eid, Health)


def test_despawn_twice_is_noop():
    world = World()
    eid = world.spawn()
    world.despawn(eid)
    world.despawn(eid)
    assert not world.alive(eid)


def test_attach_to_dead_entity_raises():
    world = World()
    eid = world.spawn()
    world.despawn(eid)
    with pytest.raises(DeadEntityError) as exc:
        world.attach(eid, Health(1))
    assert exc.value.entity_id == eid


def test_get_missing_component_raises_key_error():
    world = World()
    eid = world.spawn()
    with pytest.raises(KeyError):
        world.get(eid, Health)


def test_attach_replaces_same_type():
    world = World()
    eid = world.spawn()
    world.attach(eid, Health(1))
    world.attach(eid, Health(5))
    assert world.get(eid, Health).hp == 5


def test_query_requires_all_types():
    world = World()
    a = world.spawn()
    b = world.spawn()
    world.attach(a, Position(0, 0))
    world.attach(a, Health(3))
    world.attach(b, Position(1, 1))
    result = list(world.query(Position, Health))
    assert [eid for eid, _ in result] == [a]
    assert result[0][1][1].hp == 3


def test_query_no_args_yields_nothing():
    assert list(World().query()) == []


def test_detach_hook_fires_on_despawn():
    world = World()
    detached = []
    world.on_detach(Health, lambda w, eid, comp: detached.append((eid, comp.hp)))
    eid = world.spawn()
    world.attach(eid, Health(7))
    world.despawn(eid)
    assert detached == [(eid, 7)]


def test_detach_hook_fires_once_on_explicit_detach():
    world = World()
    detached = []
    world.on_detach(Health, lambda w, eid, comp: detached.append(eid))
    eid = world.spawn()
    world.attach(eid, Health(1))
    world.detach(eid, Health)
    world.detach(eid, Health)
    world.despawn(eid)
    assert detached == [eid]


def test_query_skips_entities_despawned_mid_iteration():
    world = World()
    a, b = world.spawn(), world.spawn()
    world.attach(a, Health(1))
    world.attach(b, Health(2))
    seen = []
    for eid, _ in world.query(Health):
        seen.append(eid)
        world.despawn(b)
    assert seen == [a]


def test_component_type_resolves_registered_name():
    world = World()
    world.register_component(Health)
    assert world.component_type(f"{Health.__module__}.Health") is Health
    with pytest.raises(KeyError):
        world.component_type("nope.Missing")
