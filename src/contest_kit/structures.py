"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Generic, Iterable, List, TypeVar

T = TypeVar("T")


class UnionResult(Enum):
    """Outcome of :meth:`UnionFind.union`."""

    UNIFIED = "unified"
    ALREADY_UNIFIED = "already_unified"


@dataclass
class UnionFind:
    """Union-find over ``0..n-1`` with union by size.

    A root is an element whose parent is itself. ``sizes`` is only
    meaningful at roots.
    """

    n: int
    parent: List[int] = field(init=False, repr=False)
    sizes: List[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError("n must be non-negative")
        self.parent = list(range(self.n))
        self.sizes = [1] * self.n

    def union(self, x: int, y: int) -> UnionResult:
        """Merge the sets containing `x` and `y`."""

        self._check(x)
        self._check(y)
        if x == y:
            return UnionResult.ALREADY_UNIFIED

        root_x = self._find(x)
        root_y = self._find(y)
        if root_x == root_y:
            return UnionResult.ALREADY_UNIFIED

        if self.sizes[root_x] >= self.sizes[root_y]:
            large, small = root_x, root_y
        else:
            large, small = root_y, root_x
        self.parent[small] = large
        self.sizes[large] += self.sizes[small]
        return UnionResult.UNIFIED

    def equiv(self, x: int, y: int) -> bool:
        """Return True when `x` and `y` belong to the same set."""

        return self.root(x) == self.root(y)

    def root(self, x: int) -> int:
        """Return the representative of `x` without touching the forest."""

        self._check(x)
        current = x
        while self.parent[current] != current:
            current = self.parent[current]
        return current

    def size(self, x: int) -> int:
        self._check(x)
        return self.sizes[x]

    def set_size(self, x: int) -> int:
        return self.sizes[self.root(x)]

    def groups(self) -> Dict[int, List[int]]:
        result: Dict[int, List[int]] = {}
        for index in range(self.n):
            result.setdefault(self.root(index), []).append(index)
        return result

    def _find(self, x: int) -> int:
        # path halving
        parent = self.parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def _check(self, x: int) -> None:
        if not 0 <= x < self.n:
            raise IndexError(f"element {x} out of range for {self.n} elements")


def next_power_of_two(value: int) -> int:
    if value <= 1:
        return 1
    return 1 << (value - 1).bit_length()


class SegmentTree(Generic[T]):
    """Iterative segment tree folding an associative `combine`.

    The tree lives in a flat list of ``2 * size`` slots where ``size`` is the
    requested length rounded up to a power of two. Leaves occupy
    ``[size, 2 * size)`` and node ``i`` always equals
    ``combine(tree[2 * i], tree[2 * i + 1])``. Slot 0 is unused.

    `init` fills padding leaves and seeds every fold, so it should be the
    neutral element of `combine` (0 for sum or xor, ``float("inf")`` for min).
    """

    def __init__(self, size: int, init: T, combine: Callable[[T, T], T]) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = next_power_of_two(size)
        self.init = init
        self.combine = combine
        self.tree: List[T] = [init] * (2 * self.size)

    @classmethod
    def from_values(cls, values: Iterable[T], init: T, combine: Callable[[T, T], T]) -> "SegmentTree[T]":
        """Build a tree over `values` in one bottom-up pass."""

        leaves = list(values)
        tree = cls(len(leaves), init, combine)
        size = tree.size
        tree.tree[size : size + len(leaves)] = leaves
        for index in range(size - 1, 0, -1):
            tree.tree[index] = combine(tree.tree[2 * index], tree.tree[2 * index + 1])
        return tree

    def update(self, index: int, value: T) -> None:
        """Overwrite leaf `index` and recombine its ancestors."""

        self._check(index)
        node = index + self.size
        self.tree[node] = value
        while node > 1:
            node //= 2
            self.tree[node] = self.combine(self.tree[2 * node], self.tree[2 * node + 1])

    def query(self, start: int, end: int) -> T:
        """Fold the leaves in ``[start, end)`` from left to right."""

        if not 0 <= start <= end <= self.size:
            raise IndexError(f"range [{start}, {end}) out of bounds for {self.size} leaves")

        result = self.init
        right_nodes: List[T] = []
        left = start + self.size
        right = end + self.size
        while left < right:
            if left % 2 == 1:
                result = self.combine(result, self.tree[left])
                left += 1
            if right % 2 == 1:
                right -= 1
                right_nodes.append(self.tree[right])
            left //= 2
            right //= 2
        for value in reversed(right_nodes):
            result = self.combine(result, value)
        return result

    def get(self, index: int) -> T:
        self._check(index)
        return self.tree[index + self.size]

    def __len__(self) -> int:
        return self.size

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"leaf {index} out of range for {self.size} leaves")


__all__ = [
    "SegmentTree",
    "UnionFind",
    "UnionResult",
    "next_power_of_two",
]
