"""The lights puzzle board: pressing a cell flips it and its neighbours."""

from __future__ import annotations

import random

ON_LABEL = " ON"
OFF_LABEL = "OFF"


class GameBoard:
    """A grid of lights, indexed by column ``x`` and row ``y``, all on at first."""

    def __init__(self, width: int = 3, height: int = 3) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"board size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.move_count = 0
        self._values = [[True] * height for _ in range(width)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.width}x{self.height} board")

    def get(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self._values[x][y]

    def set(self, x: int, y: int, value: bool) -> None:
        self._check(x, y)
        self._values[x][y] = bool(value)

    def label(self, x: int, y: int) -> str:
        """Return the text shown on the cell's button."""
        return ON_LABEL if self.get(x, y) else OFF_LABEL

    def toggle(self, x: int, y: int) -> None:
        self.set(x, y, not self.get(x, y))

    def press(self, x: int, y: int) -> None:
        """Count a move and flip the cell and its orthogonal neighbours."""
        self._check(x, y)
        self.move_count += 1
        self.toggle(x, y)
        if x > 0:
            self.toggle(x - 1, y)
        if y > 0:
            self.toggle(x, y - 1)
        if x < self.width - 1:
            self.toggle(x + 1, y)
        if y < self.height - 1:
            self.toggle(x, y + 1)

    def solved(self) -> bool:
        return all(all(column) for column in self._values)

    def scramble(self, seed: int = 42, iterations: int = 100) -> None:
        """Press random cells, then reset the move counter."""
        rng = random.Random(seed)
        for _ in range(iterations):
            self.press(rng.randrange(self.width), rng.randrange(self.height))
        self.move_count = 0


def quit_text(board: GameBoard) -> str:
    """Return the label of the quit button for the board's state."""
    text = f"Quit ({board.move_count} moves)"
    if board.solved():
        text += " Solved!"
    return text