import random

import pytest

from bmpfilters.pixels import (
    Hole,
    Pixel,
    blur_columns,
    box_blur,
    color_shift_pixels,
    create_holes,
    swiss_cheese,
    swiss_cheese_columns,
)


def _uniform(rows, cols, pixel):
    return [[pixel for _ in range(cols)] for _ in range(rows)]


def _gradient(rows, cols):
    return [
        [Pixel(blue=(r * 7 + c) % 256, green=(r * 13 + c * 3) % 256, red=(r + c * 11) % 256)
         for c in range(cols)]
        for r in range(rows)
    ]


def test_pixel_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Pixel(blue=256)
    with pytest.raises(ValueError):
        Pixel(red=-1)


def test_shifted_clamps_to_channel_bounds():
    pixel = Pixel(blue=10, green=100, red=250)
    assert pixel.shifted(50, -200, -20) == Pixel(blue=0, green=0, red=255)


def test_shifted_within_range_adds():
    pixel = Pixel(blue=10, green=100, red=200)
    result = pixel.shifted(5, -10, 20)
    assert (result.red, result.green, result.blue) == (200 + 5, 100 - 10, 10 + 20)


def test_shifted_returns_new_pixel():
    pixel = Pixel(1, 2, 3)
    pixel.shifted(10, 10, 10)
    assert pixel == Pixel(1, 2, 3)


def test_hole_contains_is_strict():
    hole = Hole(x=5, y=5, radius=3)
    assert hole.contains(5, 5)
    assert hole.contains(7, 5)
    assert not hole.contains(8, 5)
    assert not hole.contains(5, 8)


def test_zero_radius_hole_contains_nothing():
    assert not Hole(2, 2, 0).contains(2, 2)


def test_color_shift_pixels_updates_every_pixel():
    grid = _gradient(3, 4)
    original = [row[:] for row in grid]
    color_shift_pixels(grid, 30, -30, 300)
    for row, before_row in zip(grid, original):
        for after, before in zip(row, before_row):
            assert after == before.shifted(30, -30, 300)
            assert after.blue == 255


def test_box_blur_keeps_uniform_image():
    grid = _uniform(4, 4, Pixel(40, 80, 120))
    box_blur(grid, 4, 4)
    assert grid == _uniform(4, 4, Pixel(40, 80, 120))


def test_box_blur_single_pixel_unchanged():
    grid = [[Pixel(9, 8, 7)]]
    box_blur(grid, 1, 1)
    assert grid == [[Pixel(9, 8, 7)]]


def test_box_blur_uses_already_blurred_neighbours():
    grid = [[Pixel(red=0), Pixel(red=30), Pixel(red=90)]]
    box_blur(grid, 1, 3)
    assert [p.red for p in grid[0]] == [15, 45, 67]


def test_box_blur_values_stay_within_input_range():
    grid = _gradient(5, 5)
    low = min(p.red for row in grid for p in row)
    high = max(p.red for row in grid for p in row)
    box_blur(grid, 5, 5)
    assert all(low <= p.red <= high for row in grid for p in row)


def test_blur_columns_leaves_other_columns_alone():
    grid = _gradient(6, 6)
    original = [row[:] for row in grid]
    blur_columns(grid, 2, 4, 6, 6)
    for row, before in zip(grid, original):
        assert row[:2] == before[:2]
        assert row[4:] == before[4:]


def test_blur_columns_full_range_matches_box_blur_on_square():
    first = _gradient(5, 5)
    second = [row[:] for row in first]
    blur_columns(first, 0, 5, 5, 5)
    box_blur(second, 5, 5)
    assert first == second


def test_swiss_cheese_blackens_inside_holes_only():
    grid = _uniform(6, 6, Pixel(100, 100, 100))
    hole = Hole(2, 2, 2)
    swiss_cheese(grid, [hole], 6, 6)
    for i in range(6):
        for j in range(6):
            expected = Pixel(0, 0, 0) if hole.contains(i, j) else Pixel(100, 100, 100)
            assert grid[i][j] == expected


def test_swiss_cheese_without_holes_changes_nothing():
    grid = _gradient(4, 4)
    original = [row[:] for row in grid]
    swiss_cheese(grid, [], 4, 4)
    assert grid == original


def test_swiss_cheese_columns_tints_red_and_green_only():
    grid = _uniform(3, 4, Pixel(blue=10, green=100, red=200))
    swiss_cheese_columns(grid, [], 0, 4, 3)
    for row in grid:
        for p in row:
            assert p.blue == 10
            assert p.green == 100 + 65
            assert p.red == 255


def test_swiss_cheese_columns_respects_range_and_holes():
    grid = _uniform(5, 5, Pixel(20, 20, 20))
    hole = Hole(0, 2, 2)
    swiss_cheese_columns(grid, [hole], 1, 3, 5)
    for i in range(5):
        for j in range(5):
            if not 1 <= j < 3:
                assert grid[i][j] == Pixel(20, 20, 20)
            elif hole.contains(i, j):
                assert grid[i][j] == Pixel(0, 0, 0)
            else:
                assert grid[i][j] == Pixel(20, 20, 20).shifted(65, 65, 0)


def test_create_holes_radius_distribution():
    holes = create_holes(10, 4, 50, 60, random.Random(1))
    assert [h.radius for h in holes] == [4] * 5 + [5] * 2 + [2] * 3


def test_create_holes_positions_within_bounds():
    holes = create_holes(25, 6, 30, 12, random.Random(7))
    assert len(holes) == 25
    assert all(0 <= h.x < 30 and 0 <= h.y < 12 for h in holes)


def test_create_holes_is_deterministic_for_seed():
    first = create_holes(8, 3, 40, 40, random.Random(42))
    second = create_holes(8, 3, 40, 40, random.Random(42))
    assert first == second


def test_create_holes_zero_count_is_empty():
    assert create_holes(0, 5, 10, 10, random.Random(0)) == []


def test_create_holes_zero_width_raises():
    with pytest.raises(ValueError):
        create_holes(3, 2, 0, 10, random.Random(0))