#!/usr/bin/env python3
"""
Bridge-word query.

A bridge word from w1 to w2 is any w3 with edges (w1, w3) and (w3, w2).
The query returns a structured result; the user-facing sentences are
rendered from it on demand.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ..graph.model import WordGraph
from .membership import VertexMembership, word_in_graph

logger = logging.getLogger(__name__)


class BridgeStatus(Enum):
    """Outcome of a bridge-word query."""
    ABSENT = "absent"       # an endpoint is not in the graph
    EMPTY = "empty"         # both present, no bridge
    FOUND = "found"


@dataclass
class BridgeResult:
    """Bridge words between two words, in out-edge order of ``word1``."""
    word1: str
    word2: str
    status: BridgeStatus
    bridges: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.status is BridgeStatus.FOUND

    @property
    def message(self) -> str:
        if self.status is BridgeStatus.ABSENT:
            return f"No {self.word1} or {self.word2} in the graph!"
        if self.status is BridgeStatus.EMPTY:
            return f"No bridge words from {self.word1} to {self.word2}!"
        return (f"The bridge words from {self.word1} to {self.word2} are: "
                f"{', '.join(self.bridges)}.")

    def __str__(self) -> str:
        return self.message


def find_bridge_words(graph: WordGraph, word1: str, word2: str,
                      membership: VertexMembership = VertexMembership.ALL) -> BridgeResult:
    """
    Find every bridge word from ``word1`` to ``word2``.

    Args:
        graph: Word graph to query
        word1: Start word
        word2: End word
        membership: Rule deciding whether an endpoint is in the graph

    Returns:
        BridgeResult with status ABSENT, EMPTY or FOUND
    """
    if not word_in_graph(graph, word1, membership) or not word_in_graph(graph, word2, membership):
        logger.debug(f"Bridge query endpoint missing: {word1!r}, {word2!r}")
        return BridgeResult(word1, word2, BridgeStatus.ABSENT)

    bridges = [middle for middle in graph.out_edges(word1)
               if graph.has_edge(middle, word2)]

    status = BridgeStatus.FOUND if bridges else BridgeStatus.EMPTY
    logger.debug(f"Bridge query {word1!r} -> {word2!r}: {len(bridges)} bridge(s)")
    return BridgeResult(word1, word2, status, bridges)
