"""A single square of the board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

TILE_SIZE = 40


@dataclass(eq=False)
class Tile:
    """A board square with a centre position, a texture and an optional occupant."""

    x: int = 0
    y: int = 0
    texture: str = ""
    rotation: int = 0
    tile_id: int = 0
    width: int = TILE_SIZE
    height: int = TILE_SIZE
    pawn: Optional[Any] = None

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def contains(self, px: float, py: float) -> bool:
        """Tell whether the point lies inside the tile's bounds (right and bottom edges excluded)."""
        left = self.x - self.width / 2
        top = self.y - self.height / 2
        return left <= px < left + self.width and top <= py < top + self.height

    def is_free(self) -> bool:
        """Tell whether no pawn stands on this tile."""
        return self.pawn is None