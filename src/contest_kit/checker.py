"""Run solvers against sample cases and tabulate verdicts."""

from __future__ import annotations

import io
import os
import time
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd
from tqdm import tqdm

from .runner import get_problem
from .scanner import Scanner

ACCEPTED = "AC"
WRONG_ANSWER = "WA"
RUNTIME_ERROR = "RE"
TIME_LIMIT_EXCEEDED = "TLE"

_DEFAULT_CASES_DIR = "samples"
_DEFAULT_TIME_LIMIT = 2.0


@dataclass
class CheckConfig:
    """Configuration for :class:SampleChecker."""

    cases_dir: str | Path | None = None
    time_limit_seconds: float | None = None
    use_tqdm: bool = True
    verbose: bool = True

    def __post_init__(self) -> None:
        if not self.cases_dir:
            self.cases_dir = os.getenv("CONTEST_KIT_CASES_DIR", _DEFAULT_CASES_DIR)
        self.cases_dir = Path(self.cases_dir)
        if self.time_limit_seconds is None:
            raw = os.getenv("CONTEST_KIT_TIME_LIMIT", str(_DEFAULT_TIME_LIMIT))
            try:
                self.time_limit_seconds = float(raw)
            except ValueError as exc:
                raise ValueError(f"CONTEST_KIT_TIME_LIMIT must be a number, got '{raw}'") from exc
        if self.time_limit_seconds <= 0:
            raise ValueError("time_limit_seconds must be positive")


@dataclass
class CheckStats:
    """Summary metrics for a checker run."""

    total_cases: int
    verdict_counts: Dict[str, int]
    runtime_seconds: float

    @property
    def all_accepted(self) -> bool:
        return self.total_cases > 0 and self.verdict_counts.get(ACCEPTED, 0) == self.total_cases


@dataclass
class CheckResult:
    """Result bundle returned by :class:SampleChecker."""

    problem_id: str
    dataframe: pd.DataFrame
    stats: CheckStats


def discover_cases(directory: str | Path) -> List[Tuple[str, Path, Path]]:
    """Return ``(name, input_path, expected_path)`` for each ``*.in`` with a matching ``*.out``."""

    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Case directory '{directory}' does not exist")
    cases = []
    for input_path in sorted(directory.glob("*.in")):
        expected_path = input_path.with_suffix(".out")
        if expected_path.is_file():
            cases.append((input_path.stem, input_path, expected_path))
    return cases


def compare_output(expected: str, actual: str) -> bool:
    """Compare outputs token by token, ignoring how whitespace is laid out."""

    return expected.split() == actual.split()


class SampleChecker:
    """Judge a registered problem against its sample cases."""

    def __init__(self, config: CheckConfig | None = None) -> None:
        self.config = config or CheckConfig()

    def check(self, problem_id: str, report_path: str | Path | None = None) -> CheckResult:
        """Run every case for `problem_id`, optionally save the verdicts, and return them."""

        problem = get_problem(problem_id)
        if problem.interactive:
            raise ValueError(f"Problem '{problem.id}' is interactive and cannot be checked against samples")

        verbose = self.config.verbose
        overall_start_time = time.time()
        case_dir = Path(self.config.cases_dir) / problem.id
        if verbose:
            print(f"--- Checking {problem.id} ({problem.title}) ---")
            print(f"1. Discovering cases in '{case_dir}'...")
        cases = discover_cases(case_dir)
        if verbose:
            print(f"   Found {len(cases)} cases.")
            if not cases:
                print("   WARNING: no cases found; the run will not count as accepted.")
            print("2. Running cases...")

        iterator: Iterable[Tuple[str, Path, Path]] = cases
        if cases and self.config.use_tqdm:
            iterator = tqdm(cases, desc="   Cases", unit="case")

        rows = []
        for name, input_path, expected_path in iterator:
            rows.append(self._run_case(problem.solve, name, input_path, expected_path))

        df = pd.DataFrame(rows, columns=["case", "verdict", "elapsed_seconds", "expected", "actual"])
        counts = Counter(df["verdict"])

        if verbose:
            print("\n--- Results Summary ---")
            for row in rows:
                print(f"   [{row['verdict']:>3}] {row['case']} ({row['elapsed_seconds']:.3f}s)")
            print(f"   Verdicts: {dict(counts)}")

        if report_path is not None:
            self._save_dataframe(df, report_path)
            if verbose:
                print(f"   Report saved to '{report_path}'")

        elapsed = time.time() - overall_start_time
        stats = CheckStats(
            total_cases=len(rows),
            verdict_counts=dict(counts),
            runtime_seconds=elapsed,
        )
        if verbose:
            print(f"\n--- Finished in {elapsed:.2f} seconds ---")
        return CheckResult(problem_id=problem.id, dataframe=df, stats=stats)

    def _run_case(self, solve, name: str, input_path: Path, expected_path: Path) -> Dict[str, object]:
        expected = expected_path.read_text(encoding="utf-8")
        output = io.StringIO()
        t0 = time.perf_counter()
        error: Optional[str] = None
        with input_path.open(encoding="utf-8") as stream:
            try:
                solve(Scanner(stream), output)
            except Exception as exc:  # judged as a runtime error
                error = f"{type(exc).__name__}: {exc}"
        elapsed = time.perf_counter() - t0

        actual = output.getvalue()
        if error is not None:
            verdict = RUNTIME_ERROR
            actual = error
        elif not compare_output(expected, actual):
            verdict = WRONG_ANSWER
        elif elapsed > self.config.time_limit_seconds:
            verdict = TIME_LIMIT_EXCEEDED
        else:
            verdict = ACCEPTED
        return {
            "case": name,
            "verdict": verdict,
            "elapsed_seconds": elapsed,
            "expected": expected.strip(),
            "actual": actual.strip(),
        }

    @staticmethod
    def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
        path = Path(output_path)
        suffix = path.suffix.lower()
        if suffix == ".csv":
            dataframe.to_csv(path, index=False)
            return
        if suffix == ".json":
            dataframe.to_json(path, orient="records", indent=2)
            return
        raise ValueError(f"Unsupported report file format: '{suffix}'")


def check_cases(
    problem_id: str,
    config: Optional[CheckConfig] = None,
    report_path: str | Path | None = None,
) -> CheckResult | None:
    """Run the checker and report setup problems instead of raising."""

    checker = SampleChecker(config)
    try:
        return checker.check(problem_id, report_path)
    except KeyError:
        print(f"ERROR: Unknown problem '{problem_id}'.")
        return None
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}. Please check the cases directory.")
        return None
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None


__all__ = [
    "CheckConfig",
    "CheckResult",
    "CheckStats",
    "SampleChecker",
    "check_cases",
    "compare_output",
    "discover_cases",
]
