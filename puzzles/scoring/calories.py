"""Day 1: Calorie Counting. Totals per elf, maximum and top-N."""


class EmptyInventoryError(ValueError):
    """Raised when the input holds no elf inventories."""


def calorie_totals(groups: list[list[int]]) -> list[int]:
    """Sum of calories carried by each elf, in input order."""
    return [sum(group) for group in groups]


def max_calories(totals: list[int]) -> int:
    """Part one: calories carried by the elf with the most."""
    if not totals:
        raise EmptyInventoryError("No elf inventories in input")
    return max(totals)


def top_calories(totals: list[int], count: int = 3) -> list[int]:
    """
    Part two: the `count` largest totals, largest first.
    Fewer elves than `count` returns all of them.
    """
    if not totals:
        raise EmptyInventoryError("No elf inventories in input")
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    return sorted(totals, reverse=True)[:count]
