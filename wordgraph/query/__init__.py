#!/usr/bin/env python3
"""
Query operations over a word graph.

All operations are read-only; randomised ones take an explicit
``random.Random`` so sessions and tests can be reproduced from a seed.
"""

from .membership import VertexMembership, word_in_graph
from .bridge import BridgeResult, BridgeStatus, find_bridge_words
from .text_generator import generate_new_text
from .shortest_path import ShortestPathResult, PathStatus, calc_shortest_path
from .pagerank import page_rank, page_rank_scores
from .random_walk import RandomWalkResult, WalkStop, random_walk, write_walk
from .engine import QueryEngine

__all__ = [
    'VertexMembership',
    'word_in_graph',
    'BridgeResult',
    'BridgeStatus',
    'find_bridge_words',
    'generate_new_text',
    'ShortestPathResult',
    'PathStatus',
    'calc_shortest_path',
    'page_rank',
    'page_rank_scores',
    'RandomWalkResult',
    'WalkStop',
    'random_walk',
    'write_walk',
    'QueryEngine'
]
