"""Move choice for a computer-controlled team."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Optional, Sequence

from .board import Board
from .dice import roll
from .pawn import DEPLOY_FACES

if TYPE_CHECKING:
    from .team import Team


class Ai:
    """Picks a pawn to move: strike first, then deploy, then the furthest pawn."""

    def __init__(self, team: "Team", board: Board, rng: Optional[random.Random] = None) -> None:
        self.team = team
        self.board = board
        self.rng = rng

    def move(self, dice: int) -> bool:
        """Choose and move a pawn; tell whether a pawn moved."""
        index = self.decide(dice)
        if index is None:
            return False
        return self.team.pawns[index].handle_click(dice, self.board)

    def decide(self, dice: int) -> Optional[int]:
        """Return the index of the pawn to move, or None when no pawn can move."""
        possible = self.possible_moves(dice)
        if not possible:
            return None
        pawns = self.team.pawns

        strikes = []
        for index in possible:
            desired = pawns[index].target_tile(dice, self.board)
            if desired is not None and desired.pawn is not None and desired.pawn.team is not self.team:
                strikes.append(index)
        if strikes:
            return self._pick(strikes)

        if dice in DEPLOY_FACES:
            at_base = [index for index in possible if pawns[index].at_base]
            if at_base:
                return self._pick(at_base)

        return max(possible, key=lambda index: pawns[index].distance_from_start())

    def possible_moves(self, dice: int) -> list[int]:
        """Return the indices of the team's pawns that can move with this throw."""
        return [
            index
            for index, pawn in enumerate(self.team.pawns)
            if pawn.can_move(dice, self.board)
        ]

    def _pick(self, options: Sequence[int]) -> int:
        return options[roll(0, len(options) - 1, self.rng)]