"""Pixel values, holes and the in-place filters that work on pixel grids.

A pixel grid is a list of rows, each row a list of :class:`Pixel` values.
Filters replace entries of the grid in place and return nothing.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterable, List, Sequence

Grid = List[List["Pixel"]]

_CHANNEL_MIN = 0
_CHANNEL_MAX = 255
_CHEESE_TINT = 65

_NEIGHBOUR_OFFSETS = (
    (0, 0),
    (1, 1),
    (1, -1),
    (1, 0),
    (-1, 1),
    (-1, -1),
    (-1, 0),
    (0, 1),
    (0, -1),
)


def _clamp(value: int) -> int:
    return max(_CHANNEL_MIN, min(_CHANNEL_MAX, value))


@dataclass(frozen=True)
class Pixel:
    """One 24-bit pixel, stored in the file's blue, green, red order."""

    blue: int = 0
    green: int = 0
    red: int = 0

    def __post_init__(self) -> None:
        for name in ("blue", "green", "red"):
            value = getattr(self, name)
            if not _CHANNEL_MIN <= value <= _CHANNEL_MAX:
                raise ValueError(f"{name} channel out of range: {value}")

    def shifted(self, r_shift: int, g_shift: int, b_shift: int) -> "Pixel":
        """Return this pixel with each channel shifted and clamped to 0..255."""
        return Pixel(
            blue=_clamp(self.blue + b_shift),
            green=_clamp(self.green + g_shift),
            red=_clamp(self.red + r_shift),
        )


BLACK = Pixel(0, 0, 0)


@dataclass(frozen=True)
class Hole:
    """A circular hole punched by the swiss cheese filter."""

    x: int
    y: int
    radius: int

    def contains(self, row: int, column: int) -> bool:
        """Whether the grid position lies strictly inside the hole."""
        return math.hypot(self.x - row, self.y - column) < self.radius


def color_shift_pixels(pixels: Grid, r_shift: int, g_shift: int, b_shift: int) -> None:
    """Shift every pixel's channels, clamping each to 0..255."""
    for row in pixels:
        row[:] = [pixel.shifted(r_shift, g_shift, b_shift) for pixel in row]


def _blur_at(pixels: Grid, i: int, j: int, row_limit: int, col_limit: int) -> Pixel:
    """Average the pixel at (i, j) with its neighbours as currently stored."""
    total_r = total_g = total_b = count = 0
    for di, dj in _NEIGHBOUR_OFFSETS:
        r, c = i + di, j + dj
        if r < 0 or c < 0 or r >= row_limit or c >= col_limit:
            continue
        if r >= len(pixels) or c >= len(pixels[r]):
            continue
        neighbour = pixels[r][c]
        total_r += neighbour.red
        total_g += neighbour.green
        total_b += neighbour.blue
        count += 1
    return Pixel(blue=total_b // count, green=total_g // count, red=total_r // count)


def box_blur(pixels: Grid, width: int, height: int) -> None:
    """Blur the whole grid in one pass, updating pixels as it goes.

    The first grid index runs up to ``width`` and the second up to ``height``.
    """
    for i in range(width):
        for j in range(height):
            pixels[i][j] = _blur_at(pixels, i, j, width, height)


def blur_columns(pixels: Grid, start: int, end: int, width: int, height: int) -> None:
    """Blur the columns ``start`` to ``end`` (exclusive) of every row."""
    for i in range(height):
        for j in range(start, end):
            pixels[i][j] = _blur_at(pixels, i, j, width, height)


def _in_any(holes: Iterable[Hole], row: int, column: int) -> bool:
    return any(hole.contains(row, column) for hole in holes)


def swiss_cheese(pixels: Grid, holes: Sequence[Hole], width: int, height: int) -> None:
    """Blacken every pixel that falls inside one of the holes."""
    for i in range(width):
        for j in range(height):
            if _in_any(holes, i, j):
                pixels[i][j] = BLACK


def swiss_cheese_columns(
    pixels: Grid, holes: Sequence[Hole], start: int, end: int, height: int
) -> None:
    """Tint the columns ``start`` to ``end`` yellow and blacken their holes."""
    for i in range(height):
        for j in range(start, end):
            if _in_any(holes, i, j):
                pixels[i][j] = BLACK
            else:
                pixels[i][j] = pixels[i][j].shifted(_CHEESE_TINT, _CHEESE_TINT, 0)


def create_holes(
    hole_count: int,
    average_radius: int,
    width: int,
    height: int,
    rng: random.Random,
) -> list[Hole]:
    """Place holes at random: half of average size, the rest bigger or smaller."""
    normal = hole_count // 2
    bigger = (hole_count - normal) // 2
    smaller = hole_count - normal - bigger
    big_radius = int(average_radius * 1.25)
    small_radius = average_radius // 2

    radii = [average_radius] * normal + [big_radius] * bigger + [small_radius] * smaller
    return [Hole(rng.randrange(width), rng.randrange(height), radius) for radius in radii]