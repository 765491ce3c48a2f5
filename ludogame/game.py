"""The game loop: turns, dice throws, input handling and drawing."""

from __future__ import annotations

import argparse
import random
import time
from typing import NamedTuple, Optional, Sequence

import pygame

from .board import Board
from .dice import roll
from .pawn import DEPLOY_FACES, Pawn
from .team import PAWNS_PER_TEAM, Team
from .tile import Tile
from .widgets import BLACK, Color, Dial, TossButton, _load_image

WINDOW_SIZE = (900, 900)
TITLE = "Team NeuraLink"
BASE_DELAY = 1000
FRAME_RATE = 60

_TILE_OUTLINE: Color = (90, 90, 90)
_TARGET_MARK: Color = (240, 220, 40)
_POSSIBLE_MARK: Color = (255, 255, 255)
_PAWN_RADIUS = 14


class _PlayerSpec(NamedTuple):
    name: str
    start_id: int
    base_id: int
    texture: str
    is_ai: bool
    colour: Color


_PLAYERS = (
    _PlayerSpec("Red", 1, 101, "Rpawn.png", False, (210, 30, 30)),
    _PlayerSpec("Blue", 11, 111, "BpawnAI.png", True, (30, 60, 210)),
)


class Game:
    """One match of a human (Red) against the computer (Blue)."""

    def __init__(
        self,
        screen: pygame.Surface,
        rng: Optional[random.Random] = None,
        delay_ms: int = BASE_DELAY,
    ) -> None:
        self.screen = screen
        self.rng = rng
        self.delay_ms = delay_ms
        self.board = Board(*screen.get_size())
        self.toss_button = TossButton("RZUT", *self.board.toss_button_pos)
        self.dial = Dial("Welcome to the game", *self.board.dial_pos)
        self.dice = 0
        self.current_team_id = 0
        self.free_podium_place = 1
        self.running = True
        self.restart = False
        self.teams: list[Team] = []
        self.pawns: list[Pawn] = []
        self._colours: dict[int, Color] = {}
        self._targets: dict[int, Tile] = {}
        self._clock = pygame.time.Clock()

        self._create_players()
        self.current_team_id = roll(0, len(self.teams) - 1, self.rng)
        self._set_next_team(self.dice)
        self._pause(self.delay_ms)

    @property
    def current_team(self) -> Team:
        return self.teams[self.current_team_id]

    def _create_players(self) -> None:
        for team_id, spec in enumerate(_PLAYERS):
            team = Team(
                team_id,
                spec.name,
                self.board.tile_by_id(spec.start_id),
                spec.texture,
                self.board,
                is_ai=spec.is_ai,
                rng=self.rng,
            )
            first = team_id * PAWNS_PER_TEAM
            pawns = [
                Pawn(first + k, team, self.board.tile_by_id(spec.base_id + k))
                for k in range(PAWNS_PER_TEAM)
            ]
            team.set_pawns(pawns)
            self.teams.append(team)
            self.pawns.extend(pawns)
            self._colours[team_id] = spec.colour

    def update(self) -> None:
        """Process pending input and let the computer play its turn."""
        self._poll_events()
        if self.running and self.current_team.is_ai:
            self._handle_ai_move()

    def render(self) -> None:
        """Draw the whole scene onto the screen."""
        surface = self.screen
        surface.fill(BLACK)
        board = self.board
        self._blit("bg.png", board.center_x, board.center_y)
        self._blit(board.dice_texture, *board.dice_pos, scale=2.0)
        self._blit("logo.png", *board.logo_pos, scale=0.3)
        self.dial.draw(surface)
        for tile in board.tiles:
            if not self._blit(tile.texture, tile.x, tile.y, rotation=tile.rotation):
                rect = pygame.Rect(0, 0, tile.width, tile.height)
                rect.center = tile.position
                pygame.draw.rect(surface, _TILE_OUTLINE, rect, 1)
        for index, pawn in enumerate(self.pawns):
            self._draw_pawn(index, pawn)
        if self.toss_button.can_toss:
            self.toss_button.draw(surface)
        if pygame.display.get_init() and pygame.display.get_surface() is surface:
            pygame.display.flip()

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one input event."""
        if event.type == pygame.QUIT:
            self.restart = False
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_RETURN and self.toss_button.can_toss:
                self.toss()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            px, py = event.pos
            for index, pawn in enumerate(self.pawns):
                if pawn.contains(px, py) and not pawn.team.is_ai:
                    self.click_pawn(index)

        pos = getattr(event, "pos", None)
        for index, pawn in enumerate(self.pawns):
            if pos is not None and pawn.contains(*pos) and not pawn.team.is_ai:
                self._mouse_over(index)
            else:
                pawn.target_visible = False
        for pawn in self.pawns:
            if not pawn.team.is_ai:
                pawn.possible_visible = (
                    pawn.can_move(self.dice, self.board)
                    and pawn.team.team_id == self.current_team_id
                )

    def toss(self) -> int:
        """Throw the dice for the human player and return the value thrown."""
        thrown = self.toss_button.roll(self.board, self.rng)
        self.dice = thrown
        team = self.current_team
        auto = team.single_movable_pawn(self.dice, self.board)
        if auto is not None:
            self.click_pawn(auto)
            return thrown
        self.dial.set_text(f"Player's turn: {team.name}")
        self.toss_button.can_toss = False
        if team.all_obstructed(self.dice, self.board):
            self._all_obstructed()
        return thrown

    def click_pawn(self, pawn_index: int) -> bool:
        """Try to move the pawn with the current throw; tell whether it moved."""
        pawn = self.pawns[pawn_index]
        if pawn.team.team_id != self.current_team_id:
            self.dial.set_text(f"Error! Now it's player {self.current_team.name}'s turn")
            return False
        if not pawn.handle_click(self.dice, self.board):
            return False
        self.toss_button.can_toss = False
        if self.current_team.is_win():
            self._single_win()
        thrown, self.dice = self.dice, 0
        self._set_next_team(thrown)
        return True

    def _handle_ai_move(self) -> None:
        team = self.current_team
        self.dice = self.toss_button.roll(self.board, self.rng)
        self._pause(self.delay_ms)
        if team.ai is None or not team.ai.move(self.dice):
            self.dial.set_text("Player blocked")
            self._pause(self.delay_ms // 2)
        if team.is_win():
            self._single_win()
        thrown, self.dice = self.dice, 0
        self._set_next_team(thrown)
        self._pause(self.delay_ms // 2)

    def _mouse_over(self, index: int) -> None:
        pawn = self.pawns[index]
        if pawn.team.team_id != self.current_team_id or self.dice == 0:
            return
        if not pawn.at_base or self.dice in DEPLOY_FACES:
            destination = pawn.target_tile(self.dice, self.board)
            if destination is not None:
                self._targets[index] = destination
                pawn.target_visible = True

    def _set_next_team(self, thrown: int) -> None:
        won = sum(team.is_win() for team in self.teams)
        if won == len(self.teams) - 1:
            self._game_end()
            return
        if thrown == 6:
            self._select_player()
            self.dial.set_text(f"Another roll for player {self.current_team.name}")
            self._pause(self.delay_ms)
            return
        team_id = self.current_team_id
        for _ in range(len(self.teams)):
            team_id = (team_id + 1) % len(self.teams)
            if not self.teams[team_id].is_win():
                break
        self.current_team_id = team_id
        self._select_player()
        self.dial.set_text(f"Player's roll: {self.current_team.name}")
        self._pause(self.delay_ms)

    def _select_player(self) -> None:
        self.toss_button.can_toss = not self.current_team.is_ai

    def _all_obstructed(self) -> None:
        self.dial.set_text("Player blocked")
        self._pause(self.delay_ms)
        self._set_next_team(self.dice)

    def _single_win(self) -> None:
        team = self.current_team
        team.standing = self.free_podium_place
        self.free_podium_place += 1
        self._pause(self.delay_ms * 2, f"Player {team.name} wins!")

    def _game_end(self) -> None:
        self.toss_button.can_toss = False
        self._pause(self.delay_ms * 2, f"Game over! {self.current_team.name} wins!")
        self.restart = True
        self.running = False

    def _pause(self, ms: int, message: str = "") -> None:
        """Keep drawing and handling input for the given time."""
        start = time.monotonic()
        while self.running and (time.monotonic() - start) * 1000 < ms:
            if message:
                self.dial.set_text(message)
            self.render()
            self._poll_events()
            self._clock.tick(FRAME_RATE)

    def _poll_events(self) -> None:
        if not pygame.display.get_init():
            return
        for event in pygame.event.get():
            self.handle_event(event)

    def _blit(self, name: str, x: float, y: float, scale: float = 1.0, rotation: int = 0) -> bool:
        image = _load_image(name)
        if image is None:
            return False
        if scale != 1.0 or rotation:
            image = pygame.transform.rotozoom(image, -rotation, scale)
        self.screen.blit(image, image.get_rect(center=(round(x), round(y))))
        return True

    def _draw_pawn(self, index: int, pawn: Pawn) -> None:
        x, y = pawn.current_tile.position
        if not self._blit(pawn.texture, x, y):
            pygame.draw.circle(self.screen, self._colours[pawn.team.team_id], (x, y), _PAWN_RADIUS)
        if pawn.target_visible and index in self._targets:
            tx, ty = self._targets[index].position
            if not self._blit("target.png", tx, ty):
                pygame.draw.circle(self.screen, _TARGET_MARK, (tx, ty), _PAWN_RADIUS + 4, 2)
        if pawn.possible_visible and not self._blit("possible.png", x, y):
            pygame.draw.circle(self.screen, _POSSIBLE_MARK, (x, y), _PAWN_RADIUS + 4, 2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(
        prog="ludogame", description="Ludo: one human player against the computer."
    )
    parser.add_argument(
        "--delay", type=int, default=BASE_DELAY, help="pause between moves, in milliseconds"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")

    rng = random.Random(args.seed)
    pygame.init()
    try:
        while True:
            screen = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(TITLE)
            icon = _load_image("logo.png")
            if icon is not None:
                pygame.display.set_icon(icon)
            clock = pygame.time.Clock()
            game = Game(screen, rng, args.delay)
            while game.running:
                game.update()
                game.render()
                clock.tick(FRAME_RATE)
            if not game.restart:
                break
    finally:
        pygame.quit()
    return 0