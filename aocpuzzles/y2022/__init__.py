"""Solutions to the 2022 Advent of Code puzzles, days 0 to 12."""