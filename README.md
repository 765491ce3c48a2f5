# ludogame

A small desktop Ludo game. You play the red team against a computer-controlled blue team. The board is cross-shaped, with 40 route tiles, and each colour has a home base of four squares and a lane of four target tiles.

## Installing

```
pip install .
```

This also installs `pygame`, which draws the window.

## Playing

```
ludogame [--delay MS] [--seed N]
```

- `--delay MS` sets the pause between moves in milliseconds. The default is 1000 and the value may not be negative.
- `--seed N` seeds the dice so that a game can be replayed.

The window is 900×900 pixels and its title is "Team NeuraLink".

- When the toss button is shown, press **Enter** to roll the die.
- A pawn leaves its base only on a roll of 1 or 6.
- To move one of your pawns by the number rolled, click it. Hover over a pawn to see where it would land. Pawns that can move are highlighted.
- If only one of your pawns can move, it moves by itself.
- Landing on an opponent's pawn sends that pawn back to its base. You cannot land on one of your own pawns.
- A pawn cannot move past the end of its target lane.
- After a roll of 6 the same player rolls again.
- A team wins when all four of its pawns stand in its target lane. The game then ends and a new one starts. Closing the window quits.

The blue player picks its move in this order:

1. It takes a strike if one is available, choosing at random among the strikes.
2. Otherwise, on a 1 or 6, it brings a pawn out of its base.
3. Otherwise it advances the pawn that has gone furthest from its starting tile.

## Images and fonts

The game looks for its pictures in an `images/` directory under the current working directory. These pictures are `bg.png`, `logo.png`, the tile, arrow and pawn textures, `0dice.png` to `6dice.png`, `button1.png`, `target.png` and `possible.png`. It looks for the font file `arial.ttf` in the same working directory.

The package does not include any of these files. If an image is missing, the game draws tile outlines and coloured circles for the pawns instead. If the font is missing, it uses pygame's default font.

## Using the pieces from code

You can use the board model without a window:

```python
import random

from ludogame.board import Board
from ludogame.dice import roll

board = Board(900, 900)
start = board.tile_by_id(1)      # red starting tile
print(start.x, start.y, start.is_free())

board.set_dice_face(roll(1, 6, random.Random(42)))
print(board.dice_texture)
```

The modules are:

- `ludogame.tile.Tile`: one board square, with a position, a texture and an optional occupant.
- `ludogame.board.Board`: the 72 numbered tiles, looked up with `tile_by_id`.
- `ludogame.pawn.Pawn`: the movement rules (`can_move`, `target_tile`, `handle_click`, `send_to_base`, `distance_from_start`).
- `ludogame.team.Team`: a team's four pawns and its win check.
- `ludogame.ai.Ai`: the computer's choice of move.
- `ludogame.widgets`: the `Button`, `Dial` and `TossButton` controls.
- `ludogame.game.Game`: ties the pieces to a pygame surface.

`ludogame.dice.roll(low, high, rng)` returns an inclusive random integer from the `random.Random` you supply. It raises `ValueError` when the range is empty.

## Limits

The game is always two players: one human on red and the computer on blue. The board's green and yellow areas are drawn but no one plays them. There is no setting for the number of players, no network play and no saved games.

## Running the tests

```
pip install .[test]
pytest
```