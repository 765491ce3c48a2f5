import pytest

from ludogame.board import (
    BASE_FIRST_ID,
    BASE_SIZE,
    LAST_TILE,
    TARGET_FIRST_ID,
    TARGET_LAST_ID,
    TILES_AMOUNT,
    Board,
)
from ludogame.tile import TILE_SIZE


@pytest.fixture
def board():
    return Board(900, 900)


def _expected_ids():
    ids = set(range(1, LAST_TILE + 1))
    for start in (1, 11, 21, 31):
        ids |= set(range(start + TARGET_FIRST_ID, start + TARGET_LAST_ID + 1))
        base = start + BASE_FIRST_ID
        ids |= set(range(base, base + BASE_SIZE))
    return ids


def test_board_has_all_tiles(board):
    assert len(board.tiles) == TILES_AMOUNT


def test_tile_ids_are_unique_and_complete(board):
    ids = [tile.tile_id for tile in board.tiles]
    assert len(set(ids)) == len(ids)
    assert set(ids) == _expected_ids()


def test_positions_are_distinct(board):
    positions = {tile.position for tile in board.tiles}
    assert len(positions) == TILES_AMOUNT


def test_center(board):
    assert board.center_x * 2 == 900
    assert board.center_y * 2 == 900


def test_tile_by_id_returns_matching_tile(board):
    for tile_id in _expected_ids():
        assert board.tile_by_id(tile_id).tile_id == tile_id


@pytest.mark.parametrize("missing", [0, LAST_TILE + 1, 999, -1])
def test_tile_by_id_missing(board, missing):
    assert board.tile_by_id(missing) is None


def test_route_is_a_closed_loop_of_adjacent_tiles(board):
    route = [board.tile_by_id(i) for i in range(1, LAST_TILE + 1)]
    steps = [
        sorted((abs(current.x - following.x), abs(current.y - following.y)))
        for current, following in zip(route, route[1:] + route[:1])
    ]
    assert steps == [[0, TILE_SIZE]] * LAST_TILE


@pytest.mark.parametrize("start", [1, 11, 21, 31])
def test_target_lane_leads_from_route(board, start):
    turning_id = LAST_TILE if start == 1 else start - 1
    path = [board.tile_by_id(turning_id)] + [
        board.tile_by_id(start + offset)
        for offset in range(TARGET_FIRST_ID, TARGET_LAST_ID + 1)
    ]
    steps = [
        sorted((abs(current.x - following.x), abs(current.y - following.y)))
        for current, following in zip(path, path[1:])
    ]
    assert steps == [[0, TILE_SIZE]] * (TARGET_LAST_ID - TARGET_FIRST_ID + 1)


@pytest.mark.parametrize(
    "tile_id, texture, rotation",
    [
        (1, "Rarrow.png", 0),
        (11, "Barrow.png", 90),
        (21, "Garrow.png", 180),
        (31, "Yarrow.png", 270),
    ],
)
def test_start_tiles_carry_arrows(board, tile_id, texture, rotation):
    tile = board.tile_by_id(tile_id)
    assert tile.texture == texture
    assert tile.rotation == rotation


@pytest.mark.parametrize(
    "first_id, texture",
    [
        (101, "tileRed.png"),
        (111, "tileBlue.png"),
        (121, "tileGreen.png"),
        (131, "tileYellow.png"),
        (51, "tileRed.png"),
        (61, "tileBlue.png"),
        (71, "tileGreen.png"),
        (81, "tileYellow.png"),
    ],
)
def test_bases_and_targets_are_coloured(board, first_id, texture):
    for offset in range(BASE_SIZE):
        assert board.tile_by_id(first_id + offset).texture == texture


def test_all_tiles_start_free(board):
    assert all(tile.is_free() for tile in board.tiles)


def test_dice_face(board):
    assert board.dice_texture == "0dice.png"
    board.set_dice_face(6)
    assert board.dice_face == 6
    assert board.dice_texture == "6dice.png"


@pytest.mark.parametrize("value", [-1, 7])
def test_invalid_dice_face(board, value):
    with pytest.raises(ValueError):
        board.set_dice_face(value)
    assert board.dice_face == 0


def test_widget_positions_are_around_center(board):
    assert board.dial_pos[0] == board.center_x
    assert board.toss_button_pos[0] == board.center_x
    assert board.center_y < board.dial_pos[1] < board.toss_button_pos[1]
    assert board.logo_pos[1] < board.center_y
    assert board.dice_pos[0] > board.center_x
    assert board.dice_pos[1] == board.center_y