"""Advent of Code puzzle solutions and tools to fetch, scaffold and time them."""

__version__ = "0.1.0"