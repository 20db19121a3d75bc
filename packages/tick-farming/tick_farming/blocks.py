"""BlockGrid - sparse block storage where every placed block owns an entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tick_farming.types import Coord, EntityId

if TYPE_CHECKING:
    from tick_farming.world import World


@dataclass
class Block:
    """Attached to the entity that represents a placed block."""

    position: Coord
    block_id: str


class BlockGrid:
    """Maps coordinates to block ids and their block entities.

    Setting a block always despawns the entity previously at that position
    and spawns a fresh one, so entity identity changes with every placement.
    The empty block has no entity.
    """

    def __init__(self, world: World, empty_block: str = "air") -> None:
        self._world = world
        self._empty = empty_block
        self._blocks: dict[Coord, str] = {}
        self._entities: dict[Coord, EntityId] = {}
        world.on_detach(Block, self._forget)

    @property
    def empty_block(self) -> str:
        return self._empty

    def _forget(self, world: World, eid: EntityId, block: Block) -> None:
        if self._entities.get(block.position) == eid:
            del self._entities[block.position]

    @staticmethod
    def _check_coord(coord: Coord) -> None:
        if len(coord) != 3:
            raise ValueError(f"block coordinates are 3D, got {coord!r}")

    def set_block(self, coord: Coord, block_id: str) -> EntityId | None:
        """Place *block_id* at *coord*. Returns the new block entity."""
        self._check_coord(coord)
        old = self._entities.pop(coord, None)
        if old is not None:
            self._world.despawn(old)
        if block_id == self._empty:
            self._blocks.pop(coord, None)
            return None
        eid = self._world.spawn()
        self._blocks[coord] = block_id
        self._entities[coord] = eid
        self._world.attach(eid, Block(position=coord, block_id=block_id))
        return eid

    def block_at(self, coord: Coord) -> str:
        return self._blocks.get(coord, self._empty)

    def entity_at(self, coord: Coord) -> EntityId | None:
        return self._entities.get(coord)

    def position_of(self, eid: EntityId) -> Coord | None:
        if not self._world.has(eid, Block):
            return None
        return self._world.get(eid, Block).position
