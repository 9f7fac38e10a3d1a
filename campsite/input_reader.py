"""Reading puzzle input files."""

from pathlib import Path


def read_puzzle_input(input_path: str | Path) -> str:
    """
    Read a puzzle input file.

    Args:
        input_path: Path to the input text file.

    Returns:
        File contents as text, unmodified.

    Raises:
        FileNotFoundError: the file does not exist.
    """
    path = Path(input_path)
    if not path.exists():
        raise FileNotFoundError(f"Puzzle input not found: {path}")
    return path.read_text(encoding="utf-8")
