"""The 2023 Advent of Code puzzles: a placeholder for day 5."""