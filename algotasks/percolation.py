"""Percolation on an n-by-n grid and Monte Carlo threshold estimation."""

from __future__ import annotations

import math
import random
import re
import statistics
import sys
from collections.abc import Sequence

from .unionfind import WeightedQuickUnionUF

_CONFIDENCE_Z = 1.96
_UNSIGNED = re.compile(r"\+?[0-9]+")


class Percolation:
    """An n-by-n grid of sites that can be opened one at a time."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"grid size must be non-negative, got {n}")
        self._size = n
        self._grid = [[False] * n for _ in range(n)]
        self._top = n * n
        self._bottom = n * n + 1
        self._uf = WeightedQuickUnionUF(n * n + 2)

    @property
    def size(self) -> int:
        return self._size

    def _valid(self, i: int, j: int) -> bool:
        return 0 <= i < self._size and 0 <= j < self._size

    def _site(self, i: int, j: int) -> int:
        return i * self._size + j

    def open(self, i: int, j: int) -> None:
        """Open site (i, j); indices outside the grid are ignored."""
        if not self._valid(i, j):
            return
        self._grid[i][j] = True
        current = self._site(i, j)
        if i == 0:
            self._uf.union(current, self._top)
        if i == self._size - 1:
            self._uf.union(current, self._bottom)
        for ni, nj in ((i - 1, j), (i + 1, j), (i, j - 1), (i, j + 1)):
            if self.is_open(ni, nj):
                self._uf.union(current, self._site(ni, nj))

    def is_open(self, i: int, j: int) -> bool:
        """Return whether site (i, j) is open; False outside the grid."""
        return self._valid(i, j) and self._grid[i][j]

    def is_full(self, i: int, j: int) -> bool:
        """Return whether site (i, j) is open and connected to the top row."""
        return self.is_open(i, j) and self._uf.connected(self._site(i, j), self._top)

    def percolates(self) -> bool:
        """Return whether the top row is connected to the bottom row."""
        return self._uf.connected(self._top, self._bottom)


class PercolationStats:
    """Percolation threshold estimated over repeated random trials."""

    def __init__(self, n: int, trials: int, rng: random.Random | None = None) -> None:
        if n < 1:
            raise ValueError(f"grid size must be positive, got {n}")
        if trials < 1:
            raise ValueError(f"number of trials must be positive, got {trials}")
        rng = random.Random() if rng is None else rng
        self.n = n
        self.trials = trials
        self.thresholds = [self._run_trial(n, rng) for _ in range(trials)]

    @staticmethod
    def _run_trial(n: int, rng: random.Random) -> float:
        perc = Percolation(n)
        opened = 0
        while not perc.percolates():
            while True:
                i = rng.randrange(n)
                j = rng.randrange(n)
                if not perc.is_open(i, j):
                    break
            perc.open(i, j)
            opened += 1
        return opened / (n * n)

    def mean(self) -> float:
        """Sample mean of the thresholds."""
        return statistics.fmean(self.thresholds)

    def stddev(self) -> float:
        """Sample standard deviation of the thresholds (0 for a single trial)."""
        if self.trials == 1:
            return 0.0
        return statistics.stdev(self.thresholds)

    def _half_width(self) -> float:
        return _CONFIDENCE_Z * self.stddev() / math.sqrt(self.trials)

    def confidence_lo(self) -> float:
        """Lower end of the 95% confidence interval."""
        return self.mean() - self._half_width()

    def confidence_hi(self) -> float:
        """Upper end of the 95% confidence interval."""
        return self.mean() + self._half_width()


def _parse_unsigned(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(text)
    return int(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation for ``n trials`` given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 2:
            raise ValueError("expected two arguments")
        n = _parse_unsigned(args[0])
        trials = _parse_unsigned(args[1])
        stats = PercolationStats(n, trials)
    except ValueError:
        print("IllegalArgumentException", file=sys.stderr)
        return 1
    print(f"均值 = {stats.mean():.6f}")
    print(f"标准差 = {stats.stddev():.6f}")
    print(f"95% 置信区间 = [{stats.confidence_lo():.6f}, {stats.confidence_hi():.6f}]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())