"""Solvers for individual contest problems.

Every problem exposes a pure function holding the algorithm and a
``solve(scanner, output)`` that speaks the judge's input and output format.
"""

from __future__ import annotations

import operator
from collections import deque
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TextIO, Tuple

import numpy as np

from .scanner import ScanError, Scanner
from .structures import SegmentTree, UnionFind

SolveFn = Callable[[Scanner, TextIO], None]

_NEIGHBOURS = ((1, 0), (0, 1), (-1, 0), (0, -1))


@dataclass(frozen=True)
class Problem:
    """A registered problem and its stream solver."""

    id: str
    title: str
    solve: SolveFn
    interactive: bool = False


# ABC085 C - Otoshidama


def find_bill_combination(count: int, total: int) -> Optional[Tuple[int, int, int]]:
    """Return how many 10000, 5000 and 1000 yen bills make `total` with `count` bills."""

    for tens in range(count + 1):
        for fives in range(count - tens + 1):
            ones = count - tens - fives
            if tens * 10_000 + fives * 5_000 + ones * 1_000 == total:
                return tens, fives, ones
    return None


def _solve_abc085_c(scanner: Scanner, output: TextIO) -> None:
    count, total = scanner.scan_tuple(int, int)
    answer = find_bill_combination(count, total) or (-1, -1, -1)
    print(*answer, file=output)


# ABC151 D - Maze Master


def longest_shortest_path(maze: Sequence[str]) -> int:
    """Return the largest BFS distance between two road cells of `maze`.

    Road cells are ``.``; anything else is a wall. Moves are to the four
    orthogonal neighbours.
    """

    if not maze:
        return 0
    width = len(maze[0])
    if any(len(row) != width for row in maze):
        raise ValueError("maze rows must all have the same width")

    roads = np.array([[cell == "." for cell in row] for row in maze], dtype=bool)
    best = 0
    for row, col in zip(*np.nonzero(roads)):
        distances = _bfs_distances(roads, (int(row), int(col)))
        best = max(best, int(distances.max()))
    return best


def _bfs_distances(roads: np.ndarray, start: Tuple[int, int]) -> np.ndarray:
    height, width = roads.shape
    distances = np.full(roads.shape, -1, dtype=np.int64)
    distances[start] = 0
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        steps = distances[row, col] + 1
        for d_row, d_col in _NEIGHBOURS:
            next_row, next_col = row + d_row, col + d_col
            if not (0 <= next_row < height and 0 <= next_col < width):
                continue
            if not roads[next_row, next_col] or distances[next_row, next_col] != -1:
                continue
            distances[next_row, next_col] = steps
            queue.append((next_row, next_col))
    return distances


def _solve_abc151_d(scanner: Scanner, output: TextIO) -> None:
    height, width = scanner.scan_tuple(int, int)
    maze = scanner.collect(height)
    for row in maze:
        if len(row) != width:
            raise ScanError(f"maze row {row!r} does not have width {width}")
    print(longest_shortest_path(maze), file=output)


# ABC177 D - Friends


def largest_group(n: int, pairs: Iterable[Tuple[int, int]]) -> int:
    """Return the size of the largest friend group given 1-based `pairs`."""

    friends = UnionFind(n)
    for left, right in pairs:
        friends.union(left - 1, right - 1)
    return max((friends.set_size(person) for person in range(n)), default=0)


def _solve_abc177_d(scanner: Scanner, output: TextIO) -> None:
    n, m = scanner.scan_tuple(int, int)
    pairs = [scanner.scan_tuple(int, int) for _ in range(m)]
    print(largest_group(n, pairs), file=output)


# ABC185 F - Range Xor Query


def process_xor_queries(values: Sequence[int], queries: Iterable[Tuple[int, int, int]]) -> List[int]:
    """Apply 1-based xor queries to `values` and collect the range answers.

    ``(1, x, y)`` replaces ``A[x]`` with ``A[x] ^ y``; ``(2, x, y)`` yields
    ``A[x] ^ ... ^ A[y]``.
    """

    tree = SegmentTree.from_values(values, 0, operator.xor)
    answers: List[int] = []
    for kind, x, y in queries:
        if kind == 1:
            tree.update(x - 1, tree.get(x - 1) ^ y)
        elif kind == 2:
            answers.append(tree.query(x - 1, y))
        else:
            raise ValueError(f"unknown query type {kind}")
    return answers


def _solve_abc185_f(scanner: Scanner, output: TextIO) -> None:
    n, q = scanner.scan_tuple(int, int)
    values = scanner.collect(n, int)
    queries = [scanner.scan_tuple(int, int, int) for _ in range(q)]
    for answer in process_xor_queries(values, queries):
        print(answer, file=output)


# ABC195 B - Many Oranges


def count_mandarins(low: int, high: int, kilograms: int) -> Optional[Tuple[int, int]]:
    """Return the fewest and most mandarins weighing `low`..`high` grams that total `kilograms`."""

    grams = kilograms * 1000
    fewest = -(-grams // high)
    most = grams // low
    if fewest > most:
        return None
    return fewest, most


def _solve_abc195_b(scanner: Scanner, output: TextIO) -> None:
    low, high, kilograms = scanner.scan_tuple(int, int, int)
    answer = count_mandarins(low, high, kilograms)
    if answer is None:
        print("UNSATISFIABLE", file=output)
    else:
        print(*answer, file=output)


# ABC278 A - Shift


def shift_left(values: Sequence[int], k: int) -> List[int]:
    """Drop the head of `values` `k` times, appending a zero each time."""

    kept = list(values[k:])
    return kept + [0] * (len(values) - len(kept))


def _solve_abc278_a(scanner: Scanner, output: TextIO) -> None:
    n, k = scanner.scan_tuple(int, int)
    values = scanner.collect(n, int)
    print(*shift_left(values, k), file=output)


# ABC278 B - Misjudge the Time


@dataclass
class Clock:
    hour: int
    minute: int

    def swapped(self) -> "Clock":
        """Swap the tens digit of the minute with the ones digit of the hour."""

        return Clock(
            (self.hour // 10) * 10 + self.minute // 10,
            (self.hour % 10) * 10 + self.minute % 10,
        )

    def is_valid(self) -> bool:
        return 0 <= self.hour <= 23 and 0 <= self.minute <= 59

    def is_confusing(self) -> bool:
        return self.swapped().is_valid()

    def tick(self) -> None:
        self.minute += 1
        if self.minute == 60:
            self.minute = 0
            self.hour = (self.hour + 1) % 24


def next_confusing_time(hour: int, minute: int) -> Tuple[int, int]:
    """Return the first time at or after ``hour:minute`` that stays valid when swapped."""

    clock = Clock(hour, minute)
    if not clock.is_valid():
        raise ValueError(f"invalid time {hour}:{minute:02d}")
    while not clock.is_confusing():
        clock.tick()
    return clock.hour, clock.minute


def _solve_abc278_b(scanner: Scanner, output: TextIO) -> None:
    hour, minute = scanner.scan_tuple(int, int)
    print(*next_confusing_time(hour, minute), file=output)


# practice contest B - Interactive Sorting


def sort_with_oracle(count: int, is_lighter: Callable[[str, str], bool]) -> List[str]:
    """Order balls ``A``, ``B``, ... by weight using binary insertion.

    `is_lighter(x, y)` answers whether ball `x` is lighter than ball `y`.
    Each distinct pair is asked at most once.
    """

    cache: Dict[Tuple[str, str], bool] = {}

    def lighter(left: str, right: str) -> bool:
        if (left, right) in cache:
            return cache[(left, right)]
        if (right, left) in cache:
            return not cache[(right, left)]
        answer = is_lighter(left, right)
        cache[(left, right)] = answer
        return answer

    ordered: List[str] = []
    for index in range(count):
        ball = chr(ord("A") + index)
        start, end = 0, len(ordered)
        while start < end:
            middle = (start + end) // 2
            if lighter(ordered[middle], ball):
                start = middle + 1
            else:
                end = middle
        ordered.insert(start, ball)
    return ordered


def _solve_practice_b(scanner: Scanner, output: TextIO) -> None:
    count, _query_limit = scanner.scan_tuple(int, int)

    def ask(left: str, right: str) -> bool:
        print(f"? {left} {right}", file=output, flush=True)
        reply = scanner.read_line()
        if reply == "<":
            return True
        if reply == ">":
            return False
        raise ScanError(f"unexpected judge reply {reply!r}")

    order = sort_with_oracle(count, ask)
    print(f"! {''.join(order)}", file=output, flush=True)


PROBLEMS: Dict[str, Problem] = {
    problem.id: problem
    for problem in (
        Problem("abc085_c", "Otoshidama", _solve_abc085_c),
        Problem("abc151_d", "Maze Master", _solve_abc151_d),
        Problem("abc177_d", "Friends", _solve_abc177_d),
        Problem("abc185_f", "Range Xor Query", _solve_abc185_f),
        Problem("abc195_b", "Many Oranges", _solve_abc195_b),
        Problem("abc278_a", "Shift", _solve_abc278_a),
        Problem("abc278_b", "Misjudge the Time", _solve_abc278_b),
        Problem("practice_b", "Interactive Sorting", _solve_practice_b, interactive=True),
    )
}


__all__ = [
    "Clock",
    "PROBLEMS",
    "Problem",
    "count_mandarins",
    "find_bill_combination",
    "largest_group",
    "longest_shortest_path",
    "next_confusing_time",
    "process_xor_queries",
    "shift_left",
    "sort_with_oracle",
]
