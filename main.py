#!/usr/bin/env python3
"""CLI for the Advent of Code 2022 day 1 and day 2 solvers."""

import argparse
import json
import os
import sys
from pathlib import Path

import jsonschema
from dotenv import load_dotenv

load_dotenv()

from campsite import read_puzzle_input, solve_calories, solve_strategy_guide
from campsite.audit import audit_log, log_puzzle_result, setup_app_logging
from puzzles.pipeline import STRATEGIES
from puzzles.run_report import write_run_report
from puzzles.utils import new_run_id

DEFAULT_INPUT = "input.txt"


def _solve(args: argparse.Namespace, action: str, solve) -> dict:
    """Read input, solve, record. Any failure aborts the run with exit status 1."""
    log = setup_app_logging()
    run_id = new_run_id()
    input_path = str(args.input)

    try:
        text = read_puzzle_input(args.input)
        result = solve(text)
        if args.report_dir:
            report_path = Path(args.report_dir) / f"run_report_{run_id}.json"
            write_run_report(report_path, run_id, input_path, result)
            log.info("Run report: %s", report_path)
    except (OSError, ValueError, jsonschema.ValidationError) as e:
        log.error("%s failed for %s: %s", action, input_path, e)
        audit_log(action, "error", run_id=run_id, input_path=input_path, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    log_puzzle_result(
        run_id=run_id,
        result=result,
        input_path=input_path,
        input_char_count=len(text),
    )
    audit_log(action, "ok", run_id=run_id, input_path=input_path, answer=result["answer"])
    log.info("%s part %d answer=%d (run_id=%s)", result["puzzle"], result["part"], result["answer"], run_id)
    return result


def cmd_calories(args: argparse.Namespace) -> None:
    """Day 1: most calories carried by one elf, or the sum of the top N."""
    result = _solve(args, "calories", lambda text: solve_calories(text, top=args.top))

    if args.json:
        print(json.dumps(result, indent=2))
    elif args.top == 1:
        print(result["answer"])
    else:
        print(result["top_totals"])
        print(result["answer"])


def cmd_rps(args: argparse.Namespace) -> None:
    """Day 2: total score and win/loss/draw counts for a strategy guide."""
    result = _solve(
        args, "rock_paper_scissors", lambda text: solve_strategy_guide(text, strategy=args.strategy)
    )

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print(f"Wins: {result['wins']}")
        print(f"Losses: {result['losses']}")
        print(f"Draws: {result['draws']}")
        print(f"Total Score: {result['total_score']}")


def main(argv: list[str] | None = None) -> None:
    default_input = Path(os.environ.get("CAMPSITE_INPUT", DEFAULT_INPUT))

    parser = argparse.ArgumentParser(description="Advent of Code 2022 solvers (days 1 and 2)")
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=default_input,
        help=f"Path to puzzle input (default: {default_input}, or CAMPSITE_INPUT env)",
    )
    common.add_argument("--report-dir", type=Path, default=None, help="Directory for run_report.json")
    common.add_argument("--json", action="store_true", help="Output JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    # calories
    p_cal = sub.add_parser("calories", parents=[common], help="Day 1: Calorie Counting")
    p_cal.add_argument("--top", type=int, default=1, help="Sum the N largest totals (default: 1)")
    p_cal.set_defaults(func=cmd_calories)

    # rps
    p_rps = sub.add_parser("rps", parents=[common], help="Day 2: Rock Paper Scissors")
    p_rps.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default="hand",
        help="Read the second column as the hand to play or the outcome to reach (default: hand)",
    )
    p_rps.set_defaults(func=cmd_rps)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
