# arkanoid

A brick-breaking arcade game. You bounce a ball off a racket to clear walls of coloured bricks. Some bricks release power-ups that fall towards the racket.

## Installing

```
pip install .
```

This installs the `arkanoid` command. The game uses pygame for its window, drawing and input.

## Playing

```
arkanoid --levels path/to/levels
```

Options:

- `--levels DIR`: the directory that holds the level and best-score files. The default is `levels`, relative to the current directory.
- `--frames N`: stop after `N` frames. The default is `0`, which runs until you leave the game or close the window.

The command returns exit status 1 if the game window cannot be opened.

The game opens on a welcome screen. Press any key to start. The ball rests on the racket and follows it until you press space.

By default the mouse moves the racket. Press `K` to switch to the left and right arrow keys, and press it again to switch back.

| Key      | Action                                       |
|----------|----------------------------------------------|
| Space    | Release the ball, or fire a laser when armed |
| K        | Toggle mouse or keyboard racket control      |
| R        | Reset the best score of the current level    |
| 0 to 3   | Restart the game on that level               |
| L        | Leave the game                               |

Keys are read once per frame while they are held down, so holding `K` or `R` repeats its action on every frame.

You win a level when every brick except the gold ones is gone. A victory screen follows, and the next level is loaded. After the last level the game returns to level 0. You start with one life, and an extra-life power-up adds more. While you still have a spare life, losing the ball costs a life and puts the ball back on the racket. If you lose your last ball, the game is over and the level restarts from scratch.

## Bricks

Each colour is worth a fixed number of points:

| Colour  | Points |
|---------|--------|
| White   | 50     |
| Orange  | 60     |
| Cyan    | 70     |
| Green   | 80     |
| Red     | 90     |
| Blue    | 100    |
| Magenta | 110    |
| Yellow  | 120    |

A silver brick takes two hits. It is worth 200 points once it has been cracked. Gold bricks cannot be destroyed.

## Power-ups

The letter printed on a brick names the power-up it drops. A power-up only takes effect if the racket catches it.

| Letter | Effect                                                        |
|--------|---------------------------------------------------------------|
| L      | Laser: space fires a shot, up to three shots                  |
| R      | The racket grows; it shrinks back a little on each bounce     |
| C      | Catch: the next time the ball hits the racket, it stays there until you press space |
| S      | Slow down the ball, down to a minimum speed                   |
| I      | Interruption: the ball splits into three. No power-ups drop until only one ball is left |
| P      | Extra life                                                    |

Catching a power-up cancels any laser, catch or racket growth that was still active.

## Level files

A level is a plain text file with one row of bricks per line. Spaces are ignored, and lines with no bricks are skipped. Each brick is written as two characters:

1. The colour: a digit from `0` (white) to `9` (gold), or `x` for an empty cell. The digits follow the order of the points table, then `8` for silver and `9` for gold.
2. The power-up: a digit from `0` (none) to `6`, using the order of the table above (L=1, R=2, C=3, S=4, I=5, P=6).

For example, the line below holds one white brick with no power-up, one silver brick that drops a laser, and one empty cell:

```
00 81 x0
```

An unknown colour or power-up raises `ValueError`.

The files for levels 0 to 3 are named `level_1` to `level_4` inside the levels directory. Best scores are stored next to them in `best_score_1` to `best_score_4`. Each best-score file holds a single integer. A missing best-score file counts as 0. When a game ends or a level is won, the score is written only if it beats the stored best.

## What is not included

The package does not ship any level files. Point `--levels` at a directory that holds `level_1` to `level_4`. If a level file is missing or cannot be read, an error is logged and that level has no bricks.

## Using it as a library

The game logic does not depend on the display, so it can be driven from code:

```python
from arkanoid.board import Board
from arkanoid.controller import GameControl, InputState, Key
from arkanoid.levels import parse_level

board = Board(parse_level("00 81 x0\n"), 0)
control = GameControl(board=board, directory="levels")

control.process_inputs(InputState.pressed(Key.OTHER))   # leave the welcome screen
control.process_inputs(InputState())                    # put the ball on the racket
control.process_inputs(InputState.pressed(Key.SPACE, mouse_x=560))
print(control.state, control.stats.score, control.stats.lives)
```

`GameControl.process_inputs` advances the game by one frame. It takes an `InputState` that describes the keys held down and the pointer's x position. Other useful pieces:

- `arkanoid.levels`: `parse_level`, `load_level`, `load_score` and `save_score`.
- `arkanoid.board.Board`: `change_level` and `reset`. Iterating over a board yields `(row, column, brick)`.
- `arkanoid.collisions`: the pure geometry functions, such as `ball_brick_collision`, `racket_bounce_direction` and `has_won`.
- `arkanoid.screen.GameScreen`: draws a `GameControl` with pygame and reads input from the window.

## Running the tests

```
pip install ".[test]"
pytest
```