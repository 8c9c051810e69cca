"""Command line entry point for contest-kit."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .checker import CheckConfig, check_cases
from .problems import PROBLEMS
from .runner import run_problem


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run and check competitive programming solvers.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List the registered problems")

    run_parser = commands.add_parser("run", help="Solve one problem from stdin to stdout")
    run_parser.add_argument("problem", help="Problem id, e.g. abc185_f")
    run_parser.add_argument("--input", type=Path, help="Read the input from this file instead of stdin")

    check_parser = commands.add_parser("check", help="Judge a problem against its sample cases")
    check_parser.add_argument("problem", help="Problem id, e.g. abc185_f")
    check_parser.add_argument(
        "--cases-dir",
        type=Path,
        help="Directory holding <problem>/<case>.in and .out files (default: $CONTEST_KIT_CASES_DIR or samples)",
    )
    check_parser.add_argument(
        "--time-limit",
        type=float,
        help="Seconds a case may take before it is judged TLE (default: $CONTEST_KIT_TIME_LIMIT or 2.0)",
    )
    check_parser.add_argument("--report", type=Path, help="Write the verdict table to a .csv or .json file")
    check_parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars",
    )
    check_parser.add_argument("--quiet", action="store_true", help="Only print errors")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    if args.command == "list":
        for problem in PROBLEMS.values():
            suffix = " (interactive)" if problem.interactive else ""
            print(f"{problem.id}\t{problem.title}{suffix}")
        return 0

    if args.command == "run":
        if args.input is None:
            return run_problem(args.problem)
        try:
            with args.input.open(encoding="utf-8") as stream:
                return run_problem(args.problem, stream)
        except FileNotFoundError:
            print(f"ERROR: Input file not found at '{args.input}'.", file=sys.stderr)
            return 1

    try:
        config = CheckConfig(
            cases_dir=args.cases_dir,
            time_limit_seconds=args.time_limit,
            use_tqdm=not args.disable_tqdm,
            verbose=not args.quiet,
        )
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    result = check_cases(args.problem, config, args.report)
    if result is None:
        return 2
    return 0 if result.stats.all_accepted else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
