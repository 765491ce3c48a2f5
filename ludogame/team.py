"""A player: name, starting tile, four pawns and an optional computer brain."""

from __future__ import annotations

import random
from typing import Iterable, Optional

from .ai import Ai
from .board import Board
from .pawn import Pawn
from .tile import Tile

PAWNS_PER_TEAM = 4


class Team:
    """A player's side of the game."""

    def __init__(
        self,
        team_id: int,
        name: str,
        starting_tile: Tile,
        texture: str,
        board: Board,
        is_ai: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.team_id = team_id
        self.name = name
        self.starting_tile = starting_tile
        self.texture = texture
        self.is_ai = is_ai
        self.standing = 0
        self.pawns: tuple[Pawn, ...] = ()
        self.ai: Optional[Ai] = Ai(self, board, rng) if is_ai else None

    def __repr__(self) -> str:
        return f"Team(id={self.team_id}, name={self.name!r}, ai={self.is_ai})"

    def set_pawns(self, pawns: Iterable[Pawn]) -> None:
        """Give the team its pawns; there must be exactly four."""
        pawns = tuple(pawns)
        if len(pawns) != PAWNS_PER_TEAM:
            raise ValueError(f"a team needs {PAWNS_PER_TEAM} pawns, got {len(pawns)}")
        self.pawns = pawns

    def single_movable_pawn(self, dice: int, board: Board) -> Optional[int]:
        """Return the id of the only pawn that can move, or None when none or several can."""
        movable = [pawn for pawn in self.pawns if pawn.can_move(dice, board)]
        if len(movable) == 1:
            return movable[0].pawn_id
        return None

    def is_win(self) -> bool:
        """Tell whether every pawn has reached the target lane."""
        return bool(self.pawns) and all(pawn.at_target for pawn in self.pawns)

    def all_obstructed(self, dice: int, board: Board) -> bool:
        """Tell whether no pawn can move with this throw."""
        return not any(pawn.can_move(dice, board) for pawn in self.pawns)