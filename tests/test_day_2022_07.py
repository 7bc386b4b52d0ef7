import pytest

from aocpuzzles.y2022.day_07 import (
    CdIn,
    CdOut,
    CdRoot,
    Directory,
    File,
    Ls,
    ParseError,
    directory_sizes,
    parse_terminal_output,
    part_one,
    part_two,
)

EXAMPLE = """$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


def test_part_one_example():
    assert part_one(EXAMPLE) == 95437


def test_part_two_example():
    assert part_two(EXAMPLE) == 24_933_642


def test_parse_commands():
    text = "$ cd /\n$ cd ..\n$ cd abc\n$ ls\ndir x\n12 f.txt"
    assert parse_terminal_output(text) == [
        CdRoot(),
        CdOut(),
        CdIn("abc"),
        Ls((Directory("x"), File("f.txt", 12))),
    ]


def test_parse_error():
    with pytest.raises(ParseError):
        parse_terminal_output("garbage")


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        part_one("not a command")


def test_sizes_of_nested_directories_add_up():
    text = "$ cd /\n$ ls\ndir a\n5 x\n$ cd a\n$ ls\n7 y"
    sizes = directory_sizes(parse_terminal_output(text))
    assert list(sizes) == ["/", "/a"]
    assert sizes["/a"] == 7
    assert sizes["/"] == sizes["/a"] + 5


def test_root_size_is_sum_of_all_files():
    sizes = directory_sizes(parse_terminal_output(EXAMPLE))
    files = [
        entry.size
        for command in parse_terminal_output(EXAMPLE)
        if isinstance(command, Ls)
        for entry in command.contents
        if isinstance(entry, File)
    ]
    assert sizes["/"] == sum(files)
    assert all(size <= sizes["/"] for size in sizes.values())


def test_cd_out_of_root_stays_at_root():
    sizes = directory_sizes(parse_terminal_output("$ cd ..\n$ ls\n100 a.txt"))
    assert sizes == {"/": 100}


def test_trailing_newline_does_not_matter():
    assert part_one(EXAMPLE) == part_one(EXAMPLE.rstrip("\n"))


def test_part_two_disk_overfull():
    with pytest.raises(ValueError):
        part_two("$ cd /\n$ ls\n80000000 big")