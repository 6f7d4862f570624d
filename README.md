# algotasks

A small collection of classic algorithms, packaged as a library and a set of
command-line tools:

- `algotasks.unionfind`: weighted quick-union (`WeightedQuickUnionUF`) with
  `find`, `connected`, `union` and `count`.
- `algotasks.percolation`: a percolation grid (`Percolation`) and Monte Carlo
  threshold estimation (`PercolationStats`, with `mean`, `stddev`,
  `confidence_lo` and `confidence_hi`).
- `algotasks.sorting`: `insertion_sort`, `merge_sort`, `bottom_up_merge_sort`,
  `random_quicksort` and `quick_sort_3way`. Each returns a sorted copy of its
  input. The module also has `parse_numbers` and `read_numbers` for number files,
  which raise `DataFormatError` on malformed input.
- `algotasks.dijkstra`: a shortest-path query engine (`DijkstraOptimizer`)
  that reuses distances from its previous query.
- `algotasks.astar`: A* search over points in the plane (`AStarSearcher`,
  `euclidean_distance`).
- `algotasks.aho_corasick`: an Aho-Corasick automaton (`ACAutomaton`) that
  reports where each pattern first occurs, either as a character offset
  (`search_char`) or as a 1-based word number (`search_character`).

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Command-line use

Estimate the percolation threshold of a 200×200 grid over 100 trials. The
mean, standard deviation and 95% confidence interval are printed. Missing or
non-numeric arguments print `IllegalArgumentException` and exit with status 1.

```
algotasks-percolation 200 100
```

Sort the numbers in a file. The first line of the file holds a count, and the
second line holds that many whitespace-separated 32-bit integers:

```
algotasks-sort data.txt
algotasks-sort data.txt --algorithm quick3way --time
```

`-a/--algorithm` picks one of `insertion` (the default), `merge`, `bottom-up`,
`random-quick` or `quick3way`. `-t/--time` also prints the elapsed time in
milliseconds.

Run the shortest-path and A* demonstrations on their built-in sample graphs:

```
algotasks-dijkstra
algotasks-astar
```

Find each line of a query file in a corpus. For every pattern, the word
number of its first match is printed, or `--` if it does not occur:

```
algotasks-ac corpus.txt queries.txt
```

## Library use

```python
import random

from algotasks.sorting import merge_sort, quick_sort_3way
from algotasks.dijkstra import DijkstraOptimizer
from algotasks.aho_corasick import ACAutomaton

print(merge_sort([5, 3, 9, 1]))
print(quick_sort_3way([2, 2, 1, 3], random.Random(0)))

graph = {0: [(1, 4), (2, 2)], 1: [(3, 5)], 2: [(1, 1), (3, 8)], 3: []}
print(DijkstraOptimizer(graph).query(0, 3))

patterns = ["he", "she", "his"]
automaton = ACAutomaton()
for index, pattern in enumerate(patterns):
    automaton.insert(pattern, index)
automaton.build_failures()
print(automaton.search_char("ushers", patterns))
```

`PercolationStats`, `random_quicksort` and `quick_sort_3way` take an optional
`random.Random` instance, so results can be reproduced.

## Running the tests

```
pip install ".[test]"
pytest
```