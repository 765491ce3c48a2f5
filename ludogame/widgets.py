"""On-screen controls: buttons, the message dial and the dice toss button."""

from __future__ import annotations

import os
import random
from functools import lru_cache
from typing import Optional

import pygame

from .board import TEXTURE_DIR, Board
from .dice import roll as roll_dice

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
BUTTON_FACE: Color = (200, 200, 200)

FONT_FILE = "arial.ttf"
BUTTON_FONT_SIZE = 16
DIAL_FONT_SIZE = 20
DEFAULT_BUTTON_SIZE = (120, 40)
TOSS_TEXTURE = "button1.png"


@lru_cache(maxsize=None)
def _load_path(path: str) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError):
        return None


def _load_image(name: str) -> Optional[pygame.Surface]:
    """Load an image from the texture directory, or None when it cannot be read."""
    return _load_path(os.path.abspath(os.path.join(TEXTURE_DIR, name)))


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.Font(FONT_FILE, size)
    except (OSError, pygame.error):
        return pygame.font.Font(None, size)


def _blit_centered(surface: pygame.Surface, image: pygame.Surface, x: float, y: float) -> None:
    surface.blit(image, image.get_rect(center=(round(x), round(y))))


class Button:
    """A textured, labelled rectangle centred on a point."""

    def __init__(self, text: str, texture: str, x: int, y: int) -> None:
        self.text = text
        self.texture = texture
        self.x = x
        self.y = y
        self.text_offset = -5
        image = _load_image(texture)
        self.width, self.height = image.get_size() if image is not None else DEFAULT_BUTTON_SIZE

    @property
    def rect(self) -> pygame.Rect:
        rect = pygame.Rect(0, 0, self.width, self.height)
        rect.center = (self.x, self.y)
        return rect

    def contains(self, px: float, py: float) -> bool:
        """Tell whether the point lies inside the button (right and bottom edges excluded)."""
        left = self.x - self.width / 2
        top = self.y - self.height / 2
        return left <= px < left + self.width and top <= py < top + self.height

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the button face and its label."""
        image = _load_image(self.texture)
        if image is not None:
            _blit_centered(surface, image, self.x, self.y)
        else:
            pygame.draw.rect(surface, BUTTON_FACE, self.rect)
        label = _font(BUTTON_FONT_SIZE).render(self.text, True, BLACK)
        _blit_centered(surface, label, self.x, self.y + self.text_offset)


class Dial:
    """A line of centred status text."""

    def __init__(self, text: str, x: int, y: int) -> None:
        self.text = text
        self.color: Color = WHITE
        self.x = x
        self.y = y

    def set_text(self, text: str, color: Color = WHITE) -> None:
        """Show a new message in the given colour."""
        self.text = text
        self.color = color

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the message centred on the dial's position."""
        label = _font(DIAL_FONT_SIZE).render(self.text, True, self.color)
        _blit_centered(surface, label, self.x, self.y)


class TossButton(Button):
    """The button that throws the dice."""

    def __init__(self, text: str, x: int, y: int) -> None:
        super().__init__(text, TOSS_TEXTURE, x, y)
        self.text_offset = -3
        self.can_toss = True

    def roll(self, board: Board, rng: Optional[random.Random] = None) -> int:
        """Throw the dice, show the face on the board and return the value."""
        value = roll_dice(1, 6, rng)
        board.set_dice_face(value)
        return value