"""Advent of Code 2022 puzzle logic: parsing, decoding and scoring."""
