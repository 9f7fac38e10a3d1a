#!/usr/bin/env python3
"""
Example harness: solve the published puzzle examples and compare with the known answers.
Exits 0 if every answer matches, 1 otherwise. Prints a mismatch report on failure.

Usage: python scripts/example_check.py [--runs 3]

--runs repeats each solve and also fails if two runs of the same example disagree.
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from campsite.solver import solve_calories, solve_strategy_guide

CALORIES_EXAMPLE = """1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
"""

STRATEGY_GUIDE_EXAMPLE = """A Y
B X
C Z
"""

# (label, solve, expected answer)
CASES = [
    ("calories part 1", lambda: solve_calories(CALORIES_EXAMPLE), 24000),
    ("calories part 2", lambda: solve_calories(CALORIES_EXAMPLE, top=3), 45000),
    ("rps part 1", lambda: solve_strategy_guide(STRATEGY_GUIDE_EXAMPLE), 15),
    ("rps part 2", lambda: solve_strategy_guide(STRATEGY_GUIDE_EXAMPLE, strategy="outcome"), 12),
]


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=1)
    args = parser.parse_args()

    mismatches = []
    for label, solve, expected in CASES:
        results = [solve() for _ in range(args.runs)]
        first = results[0]
        if first["answer"] != expected:
            mismatches.append((label, f"answer {first['answer']} != expected {expected}"))
        for i, r in enumerate(results[1:], start=2):
            if r != first:
                mismatches.append((label, f"run {i} differs from run 1"))
        print(f"  {label}: {first['answer']}")

    if mismatches:
        print("\n=== MISMATCH REPORT ===\n")
        for label, detail in mismatches:
            print(f"  {label}: {detail}")
        print("\nExample check FAILED.")
        sys.exit(1)

    print("\nPASS: Example check passed.")
    sys.exit(0)


if __name__ == "__main__":
    main()
