#!/usr/bin/env python3
"""
Graph Module for the word graph toolkit

- WordGraph: weighted directed word-adjacency graph
- GraphBuilder: populates a WordGraph from a token sequence
"""

from .model import WordGraph
from .builder import GraphBuilder, GraphBuildResult

__all__ = [
    'WordGraph',
    'GraphBuilder',
    'GraphBuildResult'
]
