from aocpuzzles.y2023.day_05 import main, part_one, part_two

EXAMPLE = "seeds: 79 14 55 13\n\nseed-to-soil map:\n50 98 2\n"


def test_part_one_example_unsolved():
    assert part_one(EXAMPLE) is None


def test_part_two_example_unsolved():
    assert part_two(EXAMPLE) is None


def test_numbers_round_trip():
    assert part_one("79") == 79
    assert part_two("120") == 21


def test_main_reports_not_solved(tmp_path, capsys):
    (tmp_path / "input.txt").write_text(EXAMPLE, encoding="utf-8")
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert out.count("not solved.") == 2