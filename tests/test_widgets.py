import random

import pygame
import pytest

from ludogame.board import Board
from ludogame.widgets import DEFAULT_BUTTON_SIZE, WHITE, Button, Dial, TossButton


@pytest.fixture(autouse=True)
def _no_assets(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


class _Scripted:
    def __init__(self, *values):
        self._values = list(values)

    def randint(self, low, high):
        value = self._values.pop(0)
        assert low <= value <= high
        return value


def test_button_without_texture_uses_default_size():
    button = Button("OK", "button1.png", 100, 100)
    assert (button.width, button.height) == DEFAULT_BUTTON_SIZE


def test_button_contains_centre_and_left_edge_but_not_right_edge():
    button = Button("OK", "button1.png", 100, 100)
    left = 100 - button.width / 2
    assert button.contains(100, 100)
    assert button.contains(left, 100)
    assert not button.contains(left + button.width, 100)
    assert not button.contains(100, 100 + button.height)


def test_button_draw_paints_inside_bounds_only():
    surface = pygame.Surface((300, 200))
    surface.fill((0, 0, 0))
    button = Button("OK", "button1.png", 150, 100)
    button.draw(surface)
    inside = surface.get_at((int(150 - button.width / 2) + 1, int(100 - button.height / 2) + 1))
    assert sum(inside[:3]) > 0
    assert surface.get_at((2, 2))[:3] == (0, 0, 0)


def test_dial_set_text_defaults_to_white():
    dial = Dial("Welcome to the game", 10, 10)
    dial.set_text("Player blocked", (255, 0, 0))
    assert dial.color == (255, 0, 0)
    dial.set_text("Player's roll: Red")
    assert dial.text == "Player's roll: Red"
    assert dial.color == WHITE


def test_dial_draw_writes_white_text():
    surface = pygame.Surface((200, 100))
    surface.fill((0, 0, 0))
    Dial("Hello", 100, 50).draw(surface)
    bright = sum(
        1
        for x in range(200)
        for y in range(100)
        if surface.get_at((x, y))[0] > 200
    )
    assert bright > 0


def test_toss_button_starts_tossable():
    button = TossButton("RZUT", 450, 810)
    assert button.can_toss is True
    assert button.text == "RZUT"


def test_toss_button_roll_sets_dice_face():
    board = Board(900, 900)
    button = TossButton("RZUT", 450, 810)
    assert button.roll(board, _Scripted(4)) == 4
    assert board.dice_face == 4
    assert board.dice_texture == "4dice.png"


def test_toss_button_roll_stays_in_dice_range():
    board = Board(900, 900)
    button = TossButton("RZUT", 450, 810)
    rng = random.Random(7)
    for _ in range(50):
        value = button.roll(board, rng)
        assert 1 <= value <= 6
        assert board.dice_face == value