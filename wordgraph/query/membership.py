#!/usr/bin/env python3
"""
Vertex membership rules shared by the query operations.
"""

from enum import Enum
from typing import List, Union

from ..graph.model import WordGraph


class VertexMembership(Enum):
    """Which words count as "in the graph" for endpoint checks."""
    ALL = "all"             # sources and edge targets
    SOURCES = "sources"     # only words with outgoing edges

    @classmethod
    def parse(cls, value: Union[str, 'VertexMembership']) -> 'VertexMembership':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = [m.value for m in cls]
            raise ValueError(f"Invalid vertex membership '{value}'. Valid: {valid}") from None


def word_in_graph(graph: WordGraph, word: str,
                  membership: VertexMembership = VertexMembership.ALL) -> bool:
    if membership is VertexMembership.SOURCES:
        return graph.is_source(word)
    return graph.has_vertex(word)


def participating_vertices(graph: WordGraph,
                           membership: VertexMembership = VertexMembership.ALL) -> List[str]:
    """Vertices visible to whole-graph computations, in first-appearance order."""
    if membership is VertexMembership.SOURCES:
        return graph.sources()
    return graph.ordered_vertices()
