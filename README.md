# lightsgrid

Two small terminal toys and a few helpers:

- a turn-based **Lights Out** puzzle on a 3×3 grid of buttons, drawn with
  the standard library's `curses`, and
- a loop-based **canvas animation** drawn with half-block characters and
  24-bit ANSI colour codes,

plus a pair of factorial functions and a byte-summing helper.

No third-party packages are needed. The puzzle needs a terminal where
Python's `curses` module is available (POSIX systems); the animation needs
a terminal that understands ANSI escape sequences and true colour.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
lightsgrid --turn_based       # play the puzzle
lightsgrid --loop_based       # watch the animated canvas (the default)
lightsgrid --version          # print the version (0.0.1) and exit
```

`--turn_based` and `--loop_based` exclude each other. With neither given,
the canvas animation runs. `-m/--message` is accepted by the parser, but
its value is not printed or otherwise used.

### The puzzle

The board begins scrambled by 100 random presses from the fixed seed 42,
so every game starts from the same position. Pressing a cell flips it and
its orthogonal neighbours between `ON` and `OFF`. The goal is to turn every
cell `ON`.

Move the focus with the arrow keys, Tab or Shift-Tab, and press Enter or
Space to press the focused button. The quit button at the bottom shows the
number of moves made, plus `Solved!` once the board is complete; after
that, presses no longer change the board. Pressing the quit button (or
Ctrl-C) ends the game.

### The animation

A 50×50 canvas fills with sweeping red and green bands while a small 6×6
canvas beside it flickers; the frame counter and the measured frames per
second are shown next to it. It redraws about 30 times a second until
interrupted with Ctrl-C.

## Library use

```python
from lightsgrid.board import GameBoard, quit_text
from lightsgrid.factorials import factorial, factorial_recursive
from lightsgrid.fuzz import describe_input, sum_values

board = GameBoard(3, 3)      # every cell starts ON
board.press(1, 1)            # flips the centre and its four neighbours
board.solved()               # False
quit_text(board)             # "Quit (1 moves)"

factorial(10)                # 3628800
factorial(-5)                # 1: values below 1 give 1
factorial_recursive(3)       # 6; a negative argument raises ValueError

sum_values(bytes([1, 2]))    # 3000: each byte scaled by 1000
describe_input(b"\x01")      # "Value sum: 1000, len1"
```

`GameBoard` also offers `get`, `set`, `toggle`, `label` (the `" ON"` /
`"OFF"` text shown on a cell), `move_count` and
`scramble(seed=42, iterations=100)`, which presses random cells and then
resets the move counter. Coordinates outside the board raise `IndexError`.

`lightsgrid.bitmap` provides:

- `Color`, an RGB value whose channels wrap modulo 256; `add(channel, amount=1)`
  takes `"r"`, `"g"` or `"b"` (or a `Channel` member);
- `Bitmap(width, height)`, a grid of colours with `at(x, y)`, `min_size`
  (the character cells needed to draw it) and `halfblock_rows()`, which pairs
  the top and bottom colour of each character cell;
- `CanvasAnimation`, whose `step(elapsed_ns)` advances the animation by one
  frame and updates `fps`.

`lightsgrid.tui` holds `board_rows(board)` (the button labels of a board)
and `run_turn_based` and `run_loop_based`, which the command line starts.
`lightsgrid.cli.main(argv=None)` is the command itself.