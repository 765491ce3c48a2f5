"""The cross-shaped board: tile layout, tile ids and dice face."""

from __future__ import annotations

from typing import Iterator, Optional

from .tile import TILE_SIZE, Tile

TEXTURE_DIR = "images"

TILES_AMOUNT = 72
BASE_FIRST_ID = 100
BASE_SIZE = 4
LAST_TILE = 40
TARGET_FIRST_ID = 50
TARGET_LAST_ID = 53

_PLAIN = "tile.png"

# Layout index of each main-route tile, in route order: ids 1..40.
_ROUTE = (
    12, 9, 6, 3, 0, 32, 35, 38, 40, 41,
    42, 37, 34, 31, 15, 18, 21, 24, 27, 28,
    29, 25, 22, 19, 16, 44, 47, 50, 55, 54,
    53, 51, 48, 45, 1, 4, 7, 10, 14, 13,
)

# Target lanes and base squares, keyed by their first id.
_TARGETS = {
    51: (11, 8, 5, 2),
    61: (39, 36, 33, 30),
    71: (26, 23, 20, 17),
    81: (52, 49, 46, 43),
}
_BASES = {
    101: (70, 71, 68, 69),
    111: (56, 57, 59, 58),
    121: (61, 60, 62, 63),
    131: (66, 67, 65, 64),
}

# Arrow tiles marking each team's starting square: layout index -> (texture, rotation).
_ARROWS = {
    12: ("Rarrow.png", 0),
    42: ("Barrow.png", 90),
    29: ("Garrow.png", 180),
    53: ("Yarrow.png", 270),
}

_Cell = tuple[int, int, str]


def _vertical_arm(sign: int, colour: str) -> Iterator[_Cell]:
    for i in range(1, 5):
        yield (-1, sign * i, _PLAIN)
        yield (1, sign * i, _PLAIN)
        yield (0, sign * i, colour)
    for i in (-1, 0, 1):
        yield (i, sign * 5, _PLAIN)


def _horizontal_arm(sign: int, colour: str) -> Iterator[_Cell]:
    yield (sign, 0, colour)
    for i in range(2, 5):
        yield (sign * i, -1, _PLAIN)
        yield (sign * i, 1, _PLAIN)
        yield (sign * i, 0, colour)
    for i in (-1, 0, 1):
        yield (sign * 5, -i, _PLAIN)


def _base(sx: int, sy: int, colour: str) -> Iterator[_Cell]:
    for ux, uy in ((5, 5), (4, 5), (4, 4), (5, 4)):
        yield (sx * ux, sy * uy, colour)


def _layout() -> Iterator[_Cell]:
    yield from _vertical_arm(1, "tileRed.png")
    yield from _vertical_arm(-1, "tileGreen.png")
    yield from _horizontal_arm(-1, "tileBlue.png")
    yield from _horizontal_arm(1, "tileYellow.png")
    yield from _base(-1, -1, "tileBlue.png")
    yield from _base(1, -1, "tileGreen.png")
    yield from _base(1, 1, "tileYellow.png")
    yield from _base(-1, 1, "tileRed.png")


def _ids_by_index() -> dict[int, int]:
    ids = {index: number for number, index in enumerate(_ROUTE, start=1)}
    for group in (_TARGETS, _BASES):
        for first, indices in group.items():
            ids.update({index: first + offset for offset, index in enumerate(indices)})
    return ids


class Board:
    """The board geometry and its 72 numbered tiles, centred in a window of the given size."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.center_x = width // 2
        self.center_y = height // 2
        self.dice_face = 0
        self.tiles: list[Tile] = self._build_tiles()
        self._by_id = {tile.tile_id: tile for tile in self.tiles}

        step = TILE_SIZE
        self.toss_button_pos = (self.center_x, self.center_y + step * 9)
        self.dial_pos = (self.center_x, self.center_y + step * 6)
        self.dice_pos = (self.center_x + step * 9, self.center_y)
        self.logo_pos = (self.center_x, self.center_y - step * 9)

    def _build_tiles(self) -> list[Tile]:
        ids = _ids_by_index()
        tiles = []
        for index, (ux, uy, texture) in enumerate(_layout()):
            texture, rotation = _ARROWS.get(index, (texture, 0))
            tiles.append(
                Tile(
                    x=self.center_x + ux * TILE_SIZE,
                    y=self.center_y + uy * TILE_SIZE,
                    texture=texture,
                    rotation=rotation,
                    tile_id=ids[index],
                )
            )
        return tiles

    @property
    def dice_texture(self) -> str:
        return f"{self.dice_face}dice.png"

    def tile_by_id(self, tile_id: int) -> Optional[Tile]:
        """Return the tile with this id, or None when no tile carries it."""
        return self._by_id.get(tile_id)

    def set_dice_face(self, value: int) -> None:
        """Show the given dice face; 0 is the blank face shown before any throw."""
        if not 0 <= value <= 6:
            raise ValueError(f"dice face must be between 0 and 6, got {value}")
        self.dice_face = value