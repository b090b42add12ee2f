"""Shared fixtures for the word graph tests."""

from __future__ import annotations

import logging
import random

import pytest

from wordgraph.core.tokenizer import tokenize
from wordgraph.graph.builder import GraphBuilder
from wordgraph.graph.model import WordGraph


def build(text: str) -> WordGraph:
    result = GraphBuilder().build_graph(tokenize(text))
    assert result.success
    return result.graph


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def abc_graph() -> WordGraph:
    """Edges a->b (2), b->c, c->a, b->d."""
    return build("a b c a b d")


@pytest.fixture
def fox_graph() -> WordGraph:
    return build("the quick brown fox jumps over the lazy dog")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
