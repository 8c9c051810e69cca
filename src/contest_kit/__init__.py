"""contest-kit library initialization."""

from .structures import SegmentTree, UnionFind, UnionResult
from .scanner import EndOfInput, InputDecodeError, ScanError, Scanner, TokenParseError
from .problems import PROBLEMS, Problem
from .runner import get_problem, run_problem
from .checker import CheckConfig, CheckResult, CheckStats, SampleChecker, check_cases

__all__ = [
    "SegmentTree",
    "UnionFind",
    "UnionResult",
    "EndOfInput",
    "InputDecodeError",
    "ScanError",
    "Scanner",
    "TokenParseError",
    "PROBLEMS",
    "Problem",
    "get_problem",
    "run_problem",
    "CheckConfig",
    "CheckResult",
    "CheckStats",
    "SampleChecker",
    "check_cases",
]
