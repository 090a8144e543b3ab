"""A character-cell bitmap and the animation drawn on it."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class Channel(str, enum.Enum):
    R = "r"
    G = "g"
    B = "b"


@dataclass
class Color:
    """An RGB colour whose channels wrap around modulo 256."""

    r: int = 0
    g: int = 0
    b: int = 0

    def add(self, channel: Channel | str, amount: int = 1) -> None:
        """Add ``amount`` to one channel, wrapping like an 8-bit integer."""
        name = Channel(channel).value
        setattr(self, name, (getattr(self, name) + amount) % 256)


class Bitmap:
    """A width x height grid of colours, drawn two pixels per character cell."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"bitmap size must not be negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = [Color() for _ in range(width * height)]

    def at(self, x: int, y: int) -> Color:
        index = self.width * y + x
        if x < 0 or y < 0 or index >= len(self.pixels):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} bitmap")
        return self.pixels[index]

    @property
    def min_size(self) -> tuple[int, int]:
        """Character cells needed to draw the bitmap: (columns, rows)."""
        return self.width, self.height // 2

    def halfblock_rows(self) -> list[list[tuple[Color, Color]]]:
        """Return, per character row, the (top, bottom) colour pair of each column."""
        return [
            [(self.at(x, row * 2), self.at(x, row * 2 + 1)) for x in range(self.width)]
            for row in range(self.height // 2)
        ]


class CanvasAnimation:
    """Sweeping red and green bands on a large canvas and a flickering small one."""

    CANVAS_SIZE = 50
    SMALL_SIZE = 6
    SMALL_STEP = 11

    def __init__(self) -> None:
        self.canvas = Bitmap(self.CANVAS_SIZE, self.CANVAS_SIZE)
        self.small = Bitmap(self.SMALL_SIZE, self.SMALL_SIZE)
        self.fps = 0.0
        self.max_row = 0
        self.max_col = 0

    def step(self, elapsed_ns: int) -> None:
        """Advance the animation by one frame that took ``elapsed_ns`` nanoseconds."""
        micros = elapsed_ns // 1000
        self.fps = 1_000_000 / micros if micros else math.inf

        for row in range(self.max_row):
            for col in range(self.canvas.width):
                self.canvas.at(col, row).add(Channel.R)
        for row in range(self.canvas.height):
            for col in range(self.max_col):
                self.canvas.at(col, row).add(Channel.G)

        pixel = self.small.pixels[elapsed_ns % len(self.small.pixels)]
        channel = (Channel.R, Channel.G, Channel.B)[elapsed_ns % 3]
        pixel.add(channel, self.SMALL_STEP)

        self.max_row += 1
        if self.max_row >= self.canvas.height:
            self.max_row = 0
        self.max_col += 1
        if self.max_col >= self.canvas.width:
            self.max_col = 0