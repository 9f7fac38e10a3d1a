"""Campsite - Advent of Code 2022 day 1 and day 2 solvers."""

from campsite.input_reader import read_puzzle_input
from campsite.solver import solve_calories, solve_strategy_guide

__all__ = ["read_puzzle_input", "solve_calories", "solve_strategy_guide"]
