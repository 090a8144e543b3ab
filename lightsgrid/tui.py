"""Terminal front ends: the turn-based lights puzzle and the animated canvas."""

from __future__ import annotations

import sys
import time

from lightsgrid.bitmap import Bitmap, CanvasAnimation
from lightsgrid.board import GameBoard, quit_text

_FRAME_INTERVAL = 1.0 / 30.0
_HALF_BLOCK = "\u2584"
_RESET = "\x1b[0m"


def board_rows(board: GameBoard) -> list[list[str]]:
    """Return the button labels, one row per column index ``x``."""
    return [[board.label(x, y) for y in range(board.height)] for x in range(board.width)]


def _activate(board: GameBoard, x: int, y: int) -> None:
    if not board.solved():
        board.press(x, y)


def _turn_based_loop(screen, board: GameBoard) -> None:
    import curses

    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.keypad(True)
    cells = [(x, y) for x in range(board.width) for y in range(board.height)]
    count = len(cells) + 1
    focus = 0
    while True:
        screen.erase()
        for x, row in enumerate(board_rows(board)):
            for y, label in enumerate(row):
                index = x * board.height + y
                attr = curses.A_REVERSE if index == focus else curses.A_NORMAL
                screen.addstr(x, y * 6, f"[{label}]", attr)
        quit_attr = curses.A_REVERSE if focus == len(cells) else curses.A_NORMAL
        screen.addstr(board.width, 0, f"[{quit_text(board)}]", quit_attr)
        screen.refresh()

        key = screen.getch()
        if key in (curses.KEY_RIGHT, ord("\t")):
            focus = (focus + 1) % count
        elif key in (curses.KEY_LEFT, curses.KEY_BTAB):
            focus = (focus - 1) % count
        elif key == curses.KEY_DOWN:
            focus = min(focus + board.height, count - 1)
        elif key == curses.KEY_UP:
            focus = max(focus - board.height, 0)
        elif key in (curses.KEY_ENTER, 10, 13, ord(" ")):
            if focus == len(cells):
                return
            _activate(board, *cells[focus])


def run_turn_based() -> None:
    """Play a scrambled 3x3 lights puzzle in the terminal."""
    import curses

    board = GameBoard(3, 3)
    board.scramble()
    try:
        curses.wrapper(_turn_based_loop, board)
    except KeyboardInterrupt:
        pass


def _bitmap_lines(bitmap: Bitmap) -> list[str]:
    lines = []
    for row in bitmap.halfblock_rows():
        cells = "".join(
            f"\x1b[48;2;{top.r};{top.g};{top.b}m\x1b[38;2;{bottom.r};{bottom.g};{bottom.b}m{_HALF_BLOCK}"
            for top, bottom in row
        )
        lines.append(cells + _RESET)
    return lines


def _bordered(lines: list[str], inner_width: int) -> list[str]:
    return (
        ["\u250c" + "\u2500" * inner_width + "\u2510"]
        + [f"\u2502{line}\u2502" for line in lines]
        + ["\u2514" + "\u2500" * inner_width + "\u2518"]
    )


def _compose_frame(animation: CanvasAnimation, counter: int) -> str:
    canvas = animation.canvas
    left = _bordered(_bitmap_lines(canvas), canvas.width)
    right = [f"Frame: {counter}", f"FPS: {animation.fps:f}"]
    right += _bordered(_bitmap_lines(animation.small), animation.small.width)
    blank = " " * (canvas.width + 2)
    height = max(len(left), len(right))
    left += [blank] * (height - len(left))
    right += [""] * (height - len(right))
    return "".join(f"{l}{r}\x1b[K\n" for l, r in zip(left, right))


def run_loop_based() -> None:
    """Animate the canvas at about 30 frames per second until interrupted."""
    animation = CanvasAnimation()
    out = sys.stdout
    counter = 0
    last = time.monotonic_ns()
    out.write("\x1b[?25l\x1b[2J")
    try:
        while True:
            now = time.monotonic_ns()
            counter += 1
            animation.step(now - last)
            last = now
            out.write("\x1b[H" + _compose_frame(animation, counter))
            out.flush()
            time.sleep(_FRAME_INTERVAL)
    except KeyboardInterrupt:
        pass
    finally:
        out.write(_RESET + "\x1b[?25h\n")
        out.flush()