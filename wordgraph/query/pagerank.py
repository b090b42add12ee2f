#!/usr/bin/env python3
"""
PageRank over the word graph.

The default iteration reproduces the classic text-graph variant:

    PR'(v) = (1 - d) + d * sum(PR(u) / out_degree(u) for u -> v)

run for a fixed number of rounds with no convergence test. The teleport
term is not divided by N and dangling vertices leak their mass, so scores
do not sum to one. ``normalized=True`` selects the textbook variant with a
(1 - d) / N teleport term and dangling mass spread evenly.
"""

import logging
from typing import Dict

from ..graph.model import WordGraph
from .membership import VertexMembership, participating_vertices

logger = logging.getLogger(__name__)

DEFAULT_DAMPING = 0.85
DEFAULT_ITERATIONS = 100


def page_rank_scores(graph: WordGraph, damping: float = DEFAULT_DAMPING,
                     iterations: int = DEFAULT_ITERATIONS,
                     membership: VertexMembership = VertexMembership.ALL,
                     normalized: bool = False) -> Dict[str, float]:
    """
    Compute PageRank for every participating vertex.

    Args:
        graph: Word graph
        damping: Damping factor d
        iterations: Number of update rounds
        membership: ALL ranks every vertex; SOURCES ranks only words with
            outgoing edges, leaving pure targets out of the iteration
        normalized: Use the (1 - d) / N teleport term and redistribute
            dangling mass

    Returns:
        Mapping of vertex to score
    """
    if not 0.0 < damping < 1.0:
        raise ValueError(f"damping must be between 0 and 1, got: {damping}")
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got: {iterations}")

    vertices = participating_vertices(graph, membership)
    count = len(vertices)
    if count == 0:
        return {}

    incoming = graph.predecessors()
    out_degree = {vertex: graph.out_degree(vertex) for vertex in vertices}
    dangling = [vertex for vertex in vertices if out_degree[vertex] == 0]
    teleport = (1 - damping) / count if normalized else (1 - damping)

    scores = {vertex: 1.0 / count for vertex in vertices}
    for _ in range(iterations):
        leaked = sum(scores[vertex] for vertex in dangling) / count if normalized else 0.0
        updated = {}
        for vertex in vertices:
            total = 0.0
            for predecessor in incoming.get(vertex, ()):
                if predecessor in scores:
                    total += scores[predecessor] / out_degree[predecessor]
            updated[vertex] = teleport + damping * (total + leaked)
        scores = updated

    logger.debug(f"PageRank computed for {count} vertices over {iterations} iterations")
    return scores


def page_rank(graph: WordGraph, word: str, damping: float = DEFAULT_DAMPING,
              iterations: int = DEFAULT_ITERATIONS,
              membership: VertexMembership = VertexMembership.ALL,
              normalized: bool = False) -> float:
    """PageRank of ``word``; 0.0 when it does not take part in the iteration."""
    scores = page_rank_scores(graph, damping, iterations, membership, normalized)
    return scores.get(word, 0.0)
