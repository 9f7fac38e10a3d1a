"""Stage A: Split raw puzzle input into groups or token pairs. No scoring here."""

import re

INTEGER_LINE = re.compile(r"-?[0-9]+")


class InputParseError(ValueError):
    """Raised when a line of puzzle input cannot be parsed."""

    def __init__(self, line_no: int, line: str, reason: str):
        super().__init__(f"Line {line_no}: {reason}: {line!r}")
        self.line_no = line_no
        self.line = line
        self.reason = reason


def split_groups(text: str) -> list[list[int]]:
    """
    Split text into blank-line-separated groups of integers, one per line.
    Runs of blank lines count as a single separator; leading/trailing blanks are ignored.
    """
    groups: list[list[int]] = []
    current: list[int] = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            if current:
                groups.append(current)
                current = []
            continue
        if not INTEGER_LINE.fullmatch(line):
            raise InputParseError(line_no, raw, "expected an integer")
        current.append(int(line))
    if current:
        groups.append(current)
    return groups


def split_rounds(text: str) -> list[tuple[int, str, str]]:
    """
    Split text into (line_no, left, right) token pairs, one per non-blank line.
    Line numbers are kept so decoding errors can point back at the input.
    """
    pairs = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        tokens = raw.split()
        if not tokens:
            continue
        if len(tokens) != 2:
            raise InputParseError(line_no, raw, f"expected 2 tokens, got {len(tokens)}")
        pairs.append((line_no, tokens[0], tokens[1]))
    return pairs
