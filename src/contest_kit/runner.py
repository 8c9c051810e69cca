"""Convenience helpers for running a solver end-to-end."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .problems import PROBLEMS, Problem
from .scanner import Scanner


def get_problem(problem_id: str) -> Problem:
    """Return the registered problem for `problem_id`."""

    key = problem_id.strip().lower().replace("-", "_")
    if key not in PROBLEMS:
        raise KeyError(f"Problem '{problem_id}' is not registered")
    return PROBLEMS[key]


def run_problem(
    problem_id: str,
    input_stream: Optional[TextIO] = None,
    output_stream: Optional[TextIO] = None,
) -> int:
    """Solve `problem_id` reading `input_stream` and writing `output_stream`.

    Returns a process exit code: 0 on success, 1 for malformed or missing
    input (any ``ValueError``, which includes ``ScanError``) and 2 for an
    unknown problem.
    """

    input_stream = input_stream if input_stream is not None else sys.stdin
    output_stream = output_stream if output_stream is not None else sys.stdout

    try:
        problem = get_problem(problem_id)
    except KeyError:
        print(
            f"ERROR: Unknown problem '{problem_id}'. Available problems: {', '.join(sorted(PROBLEMS))}",
            file=sys.stderr,
        )
        return 2

    try:
        problem.solve(Scanner(input_stream), output_stream)
    except ValueError as exc:
        print(f"ERROR: Bad input for '{problem.id}': {exc}", file=sys.stderr)
        return 1
    return 0
