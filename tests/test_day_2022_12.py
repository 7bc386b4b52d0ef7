import pytest

from aocpuzzles.y2022.day_12 import (
    ElevationPathFinder,
    HeightMap,
    Pos,
    char_to_elevation,
    parse_height_map,
    part_one,
    part_two,
)

EXAMPLE = """Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi
"""


def test_part_one():
    assert part_one(EXAMPLE) == 31


def test_part_two():
    assert part_two(EXAMPLE) == 29


def test_a_0():
    assert char_to_elevation("a") == 0


def test_uppercase_s_is_a_0():
    assert char_to_elevation("S") == 0


def test_uppercase_e_is_z():
    assert char_to_elevation("E") == 25


def test_digit_is_invalid():
    with pytest.raises(ValueError):
        char_to_elevation("5")


def test_shortest_same_start_end():
    pathfinder = ElevationPathFinder(HeightMap(("a",) * 9, 3))
    assert pathfinder.shortest(Pos(1, 1), Pos(1, 1)) == [Pos(1, 1)]


def test_shortest_zero_to_center():
    pathfinder = ElevationPathFinder(HeightMap(("a",) * 9, 3))
    assert pathfinder.shortest(Pos(0, 0), Pos(1, 1)) == [Pos(0, 0), Pos(0, 1), Pos(1, 1)]


def test_shortest_zero_to_bottom_right():
    pathfinder = ElevationPathFinder(HeightMap(tuple("abcfedghi"), 3))
    assert pathfinder.shortest(Pos(0, 0), Pos(2, 2)) == [
        Pos(0, 0),
        Pos(0, 1),
        Pos(0, 2),
        Pos(1, 2),
        Pos(1, 1),
        Pos(1, 0),
        Pos(2, 0),
        Pos(2, 1),
        Pos(2, 2),
    ]


def test_unreachable_returns_none():
    pathfinder = ElevationPathFinder(HeightMap(tuple("az"), 2))
    assert pathfinder.shortest(Pos(0, 0), Pos(0, 1)) is None


def test_path_steps_are_adjacent():
    grid, start, end = parse_height_map(EXAMPLE)
    path = ElevationPathFinder(grid).shortest(start, end)
    assert path[0] == start and path[-1] == end
    assert all(a.distance(b) == 1 for a, b in zip(path, path[1:]))


def test_parse_finds_start_and_end():
    grid, start, end = parse_height_map(EXAMPLE)
    assert (grid.rows, grid.columns) == (5, 8)
    assert start == Pos(0, 0)
    assert end == Pos(2, 5)


def test_parse_without_end():
    with pytest.raises(ValueError):
        parse_height_map("Sab\nabc")


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        HeightMap(tuple("abcde"), 2)


def test_from_index_round_trips_with_get():
    grid = HeightMap(tuple("abcdef"), 3)
    for index, cell in enumerate(grid):
        pos = Pos.from_index(grid.columns, index)
        assert grid.get(pos.row, pos.col) == cell


def test_elevation_outside_grid_is_none():
    grid = HeightMap(tuple("ab"), 2)
    assert Pos(1, 0).elevation(grid) is None
    assert Pos(0, 1).elevation(grid) == 1