#!/usr/bin/env python3
"""
Self-terminating random walk.

The walk starts at a uniformly chosen word with outgoing edges and follows
uniformly chosen out-edges, ignoring weights. It stops at a word with no
out-edges, or when the chosen edge was already taken earlier in the walk;
in that case the repeated edge is not taken and its target is not recorded.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Set, Tuple, Union

from ..graph.model import WordGraph

logger = logging.getLogger(__name__)

EMPTY_GRAPH_MESSAGE = "The graph is empty, cannot walk."


class WalkStop(Enum):
    EMPTY_GRAPH = "empty_graph"
    DEAD_END = "dead_end"
    REPEATED_EDGE = "repeated_edge"


@dataclass
class RandomWalkResult:
    """Visited words in order and why the walk stopped."""
    path: List[str] = field(default_factory=list)
    stop: WalkStop = WalkStop.EMPTY_GRAPH

    @property
    def text(self) -> str:
        if self.stop is WalkStop.EMPTY_GRAPH:
            return EMPTY_GRAPH_MESSAGE
        return " ".join(self.path)

    def __str__(self) -> str:
        return self.text


def random_walk(graph: WordGraph, rng: Optional[random.Random] = None,
                start: Optional[str] = None) -> RandomWalkResult:
    """
    Walk the graph from a random source word until a dead end or a repeat.

    Args:
        graph: Word graph
        rng: Random source; a fresh unseeded one when omitted
        start: Fixed start word instead of a random source word

    Returns:
        RandomWalkResult
    """
    rng = rng or random.Random()

    if start is None:
        sources = graph.sources()
        if not sources:
            logger.debug("Random walk requested on an empty graph")
            return RandomWalkResult(stop=WalkStop.EMPTY_GRAPH)
        start = rng.choice(sources)
    elif not graph.has_vertex(start):
        raise ValueError(f"Start word not in graph: {start}")

    path = [start]
    visited: Set[Tuple[str, str]] = set()
    current = start

    while True:
        targets = list(graph.out_edges(current))
        if not targets:
            stop = WalkStop.DEAD_END
            break

        following = rng.choice(targets)
        edge = (current, following)
        if edge in visited:
            stop = WalkStop.REPEATED_EDGE
            break
        visited.add(edge)

        path.append(following)
        current = following

    logger.debug(f"Random walk of {len(path)} words stopped: {stop.value}")
    return RandomWalkResult(path=path, stop=stop)


def write_walk(result: RandomWalkResult, file_path: Union[str, Path]) -> Path:
    """Write the walk text to ``file_path``, replacing previous content."""
    path = Path(file_path)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(result.text)
    logger.info(f"Random walk written to {path}")
    return path
