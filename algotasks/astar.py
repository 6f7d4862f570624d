"""A* search on a graph whose vertices have planar coordinates."""

from __future__ import annotations

import argparse
import heapq
import itertools
import math
from collections.abc import Iterable, Mapping, Sequence

Point = tuple[float, float]
Graph = Mapping[int, tuple[Point, Iterable[tuple[int, float]]]]


def euclidean_distance(a: Point, b: Point) -> float:
    """Return the straight-line distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


class AStarSearcher:
    """Finds paths with A* using straight-line distance to the goal as heuristic.

    A vertex already waiting in the open set is not pushed again when a
    better path to it is found; its priority keeps its first value.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph: dict[int, tuple[Point, list[tuple[int, float]]]] = {
            vertex: (point, list(edges)) for vertex, (point, edges) in graph.items()
        }
        self._g_scores: dict[int, float] = {}
        self._came_from: dict[int, int] = {}

    def search(self, start: int, goal: int) -> tuple[list[int], float] | None:
        """Return the path from ``start`` to ``goal`` and its cost, or None."""
        self._g_scores.clear()
        self._came_from.clear()

        if goal not in self._graph or start not in self._graph:
            return None
        goal_point = self._graph[goal][0]

        order = itertools.count()
        self._g_scores[start] = 0.0
        open_heap = [
            (euclidean_distance(self._graph[start][0], goal_point), next(order), start)
        ]
        in_open = {start}

        while open_heap:
            _, _, current = heapq.heappop(open_heap)
            if current == goal:
                return self.reconstruct_path(goal), self._g_scores[goal]
            in_open.discard(current)

            node = self._graph.get(current)
            if node is None:
                return None
            for neighbor, edge_dist in node[1]:
                tentative = self._g_scores[current] + edge_dist
                if tentative < self._g_scores.get(neighbor, math.inf):
                    self._came_from[neighbor] = current
                    self._g_scores[neighbor] = tentative
                    neighbor_node = self._graph.get(neighbor)
                    if neighbor_node is None:
                        return None
                    f_score = tentative + euclidean_distance(neighbor_node[0], goal_point)
                    if neighbor not in in_open:
                        heapq.heappush(open_heap, (f_score, next(order), neighbor))
                        in_open.add(neighbor)
        return None

    def reconstruct_path(self, goal: int) -> list[int]:
        """Return the path ending at ``goal`` recorded by the last search."""
        path = [goal]
        current = goal
        while current in self._came_from:
            current = self._came_from[current]
            path.append(current)
        path.reverse()
        return path


def _sample_graph() -> dict[int, tuple[Point, list[tuple[int, float]]]]:
    points: dict[int, Point] = {
        0: (0.0, 0.0),
        1: (2.0, 2.0),
        2: (2.0, -2.0),
        3: (5.0, 0.0),
        4: (7.0, 2.0),
        5: (7.0, -2.0),
    }
    edges = [
        (0, 1), (1, 0), (0, 2), (2, 0), (1, 2), (2, 1),
        (1, 3), (3, 1), (2, 3), (3, 2), (3, 4), (4, 3),
        (3, 5), (5, 3), (4, 5), (5, 4), (1, 4), (2, 5),
    ]
    graph: dict[int, tuple[Point, list[tuple[int, float]]]] = {
        vertex: (point, []) for vertex, point in points.items()
    }
    for u, v in edges:
        graph[u][1].append((v, euclidean_distance(points[u], points[v])))
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Search a sample graph from vertex 0 to vertex 5 and print the result."""
    parser = argparse.ArgumentParser(description="A* search on a sample graph.")
    parser.parse_args(argv)

    result = AStarSearcher(_sample_graph()).search(0, 5)
    if result is None:
        print("未找到路径")
    else:
        path, cost = result
        print(f"找到路径: {path}")
        print(f"总成本: {cost:.3f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())