"""A playing piece: movement along its team's route, deploying, striking."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .board import (
    BASE_FIRST_ID,
    BASE_SIZE,
    LAST_TILE,
    TARGET_FIRST_ID,
    TARGET_LAST_ID,
    Board,
)
from .tile import Tile

if TYPE_CHECKING:
    from .team import Team

DEPLOY_FACES = (1, 6)


class Pawn:
    """One of a team's four pieces, standing on exactly one tile at a time."""

    def __init__(self, pawn_id: int, team: "Team", tile: Tile) -> None:
        self.pawn_id = pawn_id
        self.team = team
        self.current_tile = tile
        self.at_base = True
        self.at_target = False
        self.target_visible = False
        self.possible_visible = False
        tile.pawn = self

    def __repr__(self) -> str:
        return f"Pawn(id={self.pawn_id}, tile={self.current_tile.tile_id})"

    @property
    def texture(self) -> str:
        return self.team.texture

    @property
    def _start_id(self) -> int:
        return self.team.starting_tile.tile_id

    def place(self, tile: Tile) -> None:
        """Put the pawn on the tile, freeing the one it stood on."""
        if self.current_tile.pawn is self:
            self.current_tile.pawn = None
        self.current_tile = tile
        tile.pawn = self

    def handle_click(self, dice: int, board: Board) -> bool:
        """Deploy or advance the pawn by the throw; tell whether it moved."""
        if self.at_base:
            return self._deploy(dice, board)
        if self.can_move_further(dice, board):
            desired = self.target_tile(dice, board)
            if desired is not None and self._move(desired, board):
                return True
        return False

    def target_tile(self, dice: int, board: Board) -> Optional[Tile]:
        """Return the tile the pawn would reach with this throw."""
        next_id = self.current_tile.tile_id
        for _ in range(dice):
            next_id = self.next_tile_id(next_id)
        return board.tile_by_id(next_id)

    def send_to_base(self, board: Board) -> None:
        """Return the pawn to the first free square of its team's base."""
        first = self._start_id + BASE_FIRST_ID
        for tile_id in range(first, first + BASE_SIZE):
            tile = board.tile_by_id(tile_id)
            if tile is not None and self._move(tile, board):
                break
        self.at_base = True

    def can_move(self, dice: int, board: Board) -> bool:
        """Tell whether this throw lets the pawn deploy or advance."""
        if self.at_base:
            return dice in DEPLOY_FACES and self.can_move_further(1, board)
        return self.can_move_further(dice, board)

    def can_move_further(self, steps: int, board: Board) -> bool:
        """Tell whether the pawn can go this many steps without overshooting or landing on a teammate."""
        next_id = self.current_tile.tile_id
        for _ in range(steps):
            next_id = self.next_tile_id(next_id)
        if next_id > self._start_id + TARGET_LAST_ID:
            return False
        tile = board.tile_by_id(next_id)
        if tile is not None and tile.pawn is not None and tile.pawn.team is self.team:
            return False
        return True

    def distance_from_start(self) -> int:
        """Count the steps from the team's starting tile; a pawn at base counts as furthest."""
        if self.at_base:
            return LAST_TILE + 1
        tile_id = self._start_id
        current = self.current_tile.tile_id
        for distance in range(2 * LAST_TILE):
            if tile_id == current:
                return distance
            tile_id = self.next_tile_id(tile_id)
        raise ValueError(f"tile {current} is not on the route of this pawn")

    def next_tile_id(self, current_id: int) -> int:
        """Return the id of the tile that follows current_id on this pawn's route."""
        start = self._start_id
        if self.at_base:
            return start
        if current_id == start - 1 or (start == 1 and current_id == LAST_TILE):
            return start + TARGET_FIRST_ID
        if current_id == LAST_TILE:
            return 1
        return current_id + 1

    def contains(self, px: float, py: float) -> bool:
        """Tell whether the point lies on the pawn."""
        return self.current_tile.contains(px, py)

    def _move(self, tile: Tile, board: Board) -> bool:
        occupant = tile.pawn
        if occupant is not None and occupant is not self:
            if occupant.team is self.team:
                return False
            occupant.send_to_base(board)
        self.place(tile)
        self._update_target()
        return True

    def _deploy(self, dice: int, board: Board) -> bool:
        if dice in DEPLOY_FACES and self._move(self.team.starting_tile, board):
            self.at_base = False
            return True
        return False

    def _update_target(self) -> None:
        start = self._start_id
        tile_id = self.current_tile.tile_id
        self.at_target = start + TARGET_FIRST_ID <= tile_id <= start + TARGET_LAST_ID