"""Weighted quick-union disjoint-set structure."""

from __future__ import annotations


class WeightedQuickUnionUF:
    """Union-find over the integers ``0..n-1``, linking smaller trees under larger ones."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._parent = list(range(n))
        self._size = [1] * n
        self._count = n

    def __len__(self) -> int:
        return len(self._parent)

    def count(self) -> int:
        """Return the number of disjoint components."""
        return self._count

    def _validate(self, p: int) -> None:
        n = len(self._parent)
        if not 0 <= p < n:
            raise IndexError(f"index {p} is not between 0 and {n - 1}")

    def find(self, p: int) -> int:
        """Return the root of the component containing ``p``."""
        self._validate(p)
        parent = self._parent
        while p != parent[p]:
            p = parent[p]
        return p

    def connected(self, p: int, q: int) -> bool:
        """Return whether ``p`` and ``q`` are in the same component."""
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """Merge the components containing ``p`` and ``q``."""
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return
        if self._size[root_p] < self._size[root_q]:
            self._parent[root_p] = root_q
            self._size[root_q] += self._size[root_p]
        else:
            self._parent[root_q] = root_p
            self._size[root_p] += self._size[root_q]
        self._count -= 1