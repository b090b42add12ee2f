#!/usr/bin/env python3
"""
Query engine over a built word graph.

Owns the frozen graph, one random generator and the query settings, and
exposes the five analytic operations as methods.
"""

import logging
import random
from typing import Dict, Optional, Any

from ..graph.model import WordGraph
from .bridge import BridgeResult, find_bridge_words
from .membership import VertexMembership
from .pagerank import DEFAULT_DAMPING, DEFAULT_ITERATIONS, page_rank_scores
from .random_walk import RandomWalkResult, random_walk
from .shortest_path import ShortestPathResult, calc_shortest_path
from .text_generator import generate_new_text

logger = logging.getLogger(__name__)


class QueryEngine:
    """
    Read-only analytics over a WordGraph.

    Settings are read from the ``graph``, ``pagerank`` and ``random``
    configuration sections. Passing ``rng`` overrides ``random.seed``.
    """

    def __init__(self, graph: WordGraph, config: Optional[Dict[str, Any]] = None,
                 rng: Optional[random.Random] = None):
        self.graph = graph
        self.config = config or {}

        graph_config = self.config.get('graph', {})
        self.membership = VertexMembership.parse(graph_config.get('vertex_membership', 'all'))

        pagerank_config = self.config.get('pagerank', {})
        self.damping = pagerank_config.get('damping', DEFAULT_DAMPING)
        self.iterations = pagerank_config.get('iterations', DEFAULT_ITERATIONS)
        self.normalized = pagerank_config.get('normalized', False)

        if rng is None:
            seed = self.config.get('random', {}).get('seed')
            rng = random.Random(seed)
        self.rng = rng

        self._page_ranks: Optional[Dict[str, float]] = None

        if not graph.frozen:
            logger.warning("QueryEngine created over a graph that is not frozen")

    def query_bridge_words(self, word1: str, word2: str) -> BridgeResult:
        return find_bridge_words(self.graph, word1, word2, self.membership)

    def generate_new_text(self, text: str) -> str:
        return generate_new_text(self.graph, text, self.rng, self.membership)

    def calc_shortest_path(self, word1: str, word2: str) -> ShortestPathResult:
        return calc_shortest_path(self.graph, word1, word2, self.membership)

    def page_ranks(self) -> Dict[str, float]:
        """Scores of all participating vertices; computed once per engine."""
        if self._page_ranks is None:
            self._page_ranks = page_rank_scores(
                self.graph,
                damping=self.damping,
                iterations=self.iterations,
                membership=self.membership,
                normalized=self.normalized
            )
        return dict(self._page_ranks)

    def page_rank(self, word: str) -> float:
        return self.page_ranks().get(word, 0.0)

    def random_walk(self, start: Optional[str] = None) -> RandomWalkResult:
        return random_walk(self.graph, self.rng, start)
