#!/usr/bin/env python3
"""
Single-source single-target shortest path over edge weights (Dijkstra).
"""

import heapq
import itertools
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..graph.model import WordGraph
from .membership import VertexMembership, word_in_graph

logger = logging.getLogger(__name__)

PATH_ARROW = " → "


class PathStatus(Enum):
    FOUND = "found"
    ABSENT = "absent"           # an endpoint is not in the graph
    UNREACHABLE = "unreachable"


@dataclass
class ShortestPathResult:
    """Shortest path between two words and its total weight."""
    source: str
    target: str
    status: PathStatus
    path: List[str] = field(default_factory=list)
    length: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.status is PathStatus.FOUND

    @property
    def hops(self) -> Optional[int]:
        """Number of edges on the path."""
        return len(self.path) - 1 if self.path else None

    @property
    def message(self) -> str:
        if self.status is PathStatus.ABSENT:
            return f"No path: {self.source} or {self.target} not in graph!"
        if self.status is PathStatus.UNREACHABLE:
            return f"No path from {self.source} to {self.target}!"
        return f"Shortest path: {PATH_ARROW.join(self.path)} (length: {self.length})"

    def __str__(self) -> str:
        return self.message


def _dijkstra(graph: WordGraph, source: str, target: Optional[str] = None):
    # every vertex, targets included, starts at infinity
    distances: Dict[str, float] = {vertex: math.inf for vertex in graph.vertices()}
    previous: Dict[str, str] = {}
    distances[source] = 0

    counter = itertools.count()
    queue = [(0, next(counter), source)]
    settled = set()

    while queue:
        distance, _, current = heapq.heappop(queue)
        if current in settled:
            continue
        settled.add(current)
        if current == target:
            break

        for neighbor, weight in graph.out_edges(current).items():
            candidate = distance + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                previous[neighbor] = current
                heapq.heappush(queue, (candidate, next(counter), neighbor))

    return distances, previous


def calc_shortest_path(graph: WordGraph, source: str, target: str,
                       membership: VertexMembership = VertexMembership.ALL) -> ShortestPathResult:
    """
    Find one minimum-weight directed path from ``source`` to ``target``.

    Args:
        graph: Word graph to search
        source: Start word
        target: End word
        membership: Rule deciding whether an endpoint is in the graph

    Returns:
        ShortestPathResult; ties between equal-weight paths resolve to any
        one of them
    """
    if not word_in_graph(graph, source, membership) or not word_in_graph(graph, target, membership):
        return ShortestPathResult(source, target, PathStatus.ABSENT)

    if source == target:
        return ShortestPathResult(source, target, PathStatus.FOUND, [source], 0)

    distances, previous = _dijkstra(graph, source, target)

    if math.isinf(distances[target]):
        logger.debug(f"No path from {source!r} to {target!r}")
        return ShortestPathResult(source, target, PathStatus.UNREACHABLE)

    path = [target]
    while path[-1] != source:
        path.append(previous[path[-1]])
    path.reverse()

    length = int(distances[target])
    logger.debug(f"Shortest path {source!r} -> {target!r}: {len(path)} vertices, length {length}")
    return ShortestPathResult(source, target, PathStatus.FOUND, path, length)
