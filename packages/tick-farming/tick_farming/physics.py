"""Vector helpers and physical item drops."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tick_farming.types import EntityId
    from tick_farming.world import World

Vec = tuple[float, ...]


def add(a: Vec, b: Vec) -> Vec:
    return tuple(ai + bi for ai, bi in zip(a, b, strict=True))


def scale(v: Vec, s: float) -> Vec:
    return tuple(vi * s for vi in v)


def random_impulse(rng: random.Random, magnitude: float, dimensions: int = 3) -> Vec:
    """Each axis drawn independently from [-magnitude, magnitude]."""
    return tuple(rng.uniform(-magnitude, magnitude) for _ in range(dimensions))


@dataclass
class KinematicBody:
    """A loose physical object in the world."""

    position: tuple[float, ...]
    velocity: tuple[float, ...]
    mass: float = 1.0


def drop_at(world: World, entity: EntityId, position: Vec) -> None:
    """Release *entity* into the world at rest at *position*."""
    world.attach(
        entity,
        KinematicBody(position=tuple(position), velocity=(0.0,) * len(position)),
    )


def apply_impulse(world: World, entity: EntityId, impulse: Vec) -> None:
    """Change the velocity of a dropped entity by impulse / mass."""
    if not world.has(entity, KinematicBody):
        return
    body = world.get(entity, KinematicBody)
    body.velocity = add(body.velocity, scale(impulse, 1.0 / body.mass))
