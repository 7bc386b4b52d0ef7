import itertools

import pytest

from aocpuzzles.y2022.day_08 import (
    Direction,
    Tree,
    VisibilityCheck,
    main,
    part_one,
    part_two,
    scenic_score,
)
from aocpuzzles.y2022.day_08_grid import UGrid

EXAMPLE = "30373\n25512\n65332\n33549\n35390\n"


def _tree(forest, index):
    position = forest.index_to_coord(index)
    return Tree(position, forest[position])


def _scores(forest):
    checker = VisibilityCheck(forest)
    return [scenic_score(checker, _tree(forest, i)) for i in range(len(forest.values))]


def test_part_one():
    assert part_one(EXAMPLE) == 21


def test_part_two():
    assert part_two(EXAMPLE) == 8


def test_single_tree():
    assert part_one("5") == 1
    assert part_two("5") == 0


def test_direction_order():
    forest = UGrid.parse(EXAMPLE)
    checker = VisibilityCheck(forest)
    tree = _tree(forest, 11)  # the 5 at (1, 2)
    counts = {d: checker.count_visible_trees(tree, d) for d in Direction}
    assert list(counts) == [Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT]
    assert counts == {
        Direction.UP: 1,
        Direction.LEFT: 1,
        Direction.DOWN: 2,
        Direction.RIGHT: 3,
    }


def test_tree_looking():
    tree = Tree((2, 3), 5)
    assert list(tree.looking_up()) == [2, 1, 0]
    assert list(tree.looking_left()) == [1, 0]
    assert list(itertools.islice(tree.looking_down(), 3)) == [4, 5, 6]
    assert list(itertools.islice(tree.looking_right(), 3)) == [3, 4, 5]


def test_best_1x1():
    assert _scores(UGrid.parse("5")) == [0]


def test_best_3x3():
    forest = UGrid.parse("533\n                           \n354\n                           \n539")
    assert _scores(forest)[:8] == [0, 0, 0, 0, 1, 0, 0, 0]


def test_best_5x5():
    forest = UGrid.parse(EXAMPLE)
    assert _scores(forest) == [
        0, 0, 0, 0, 0,
        0, 1, 4, 1, 0,
        0, 6, 1, 2, 0,
        0, 1, 8, 3, 0,
        0, 0, 0, 0, 0,
    ]


def test_center_visible_3x3():
    forest = UGrid.parse("123\n495\n678")
    checker = VisibilityCheck(forest)
    tree = _tree(forest, 4)
    assert [checker.is_visible_from_outside(tree, d) for d in Direction] == [True] * 4


def test_center_not_visible_3x3():
    forest = UGrid.parse("123\n405\n678")
    checker = VisibilityCheck(forest)
    tree = _tree(forest, 4)
    assert [checker.is_visible_from_outside(tree, d) for d in Direction] == [False] * 4


def test_x_visible_3x3():
    forest = UGrid.parse("551\n533\n354")
    checker = VisibilityCheck(forest)
    tree = _tree(forest, 4)
    assert [checker.is_visible_from_outside(tree, d) for d in Direction] == [
        False,
        False,
        False,
        False,
    ]


def test_count_visible_trees_stops_at_blocking_tree():
    forest = UGrid.parse(EXAMPLE)
    checker = VisibilityCheck(forest)
    tree = _tree(forest, 17)  # the 5 at (2, 3)
    assert [checker.count_visible_trees(tree, d) for d in Direction] == [2, 2, 1, 2]


def test_main_reads_directory(tmp_path, capsys):
    (tmp_path / "input.txt").write_text(EXAMPLE, encoding="utf-8")
    assert main([str(tmp_path)]) == 0
    output = capsys.readouterr().out
    assert "21 " in output
    assert "8 " in output


def test_main_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path)])