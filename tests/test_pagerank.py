from __future__ import annotations

import pytest

from wordgraph.graph.model import WordGraph
from wordgraph.query.membership import VertexMembership
from wordgraph.query.pagerank import page_rank, page_rank_scores

from .conftest import build


def test_single_edge_scores_without_teleport_normalization() -> None:
    graph = build("x y")
    assert page_rank(graph, "x") == pytest.approx(0.15)
    assert page_rank(graph, "y") == pytest.approx(0.15 + 0.85 * 0.15)


def test_sources_membership_leaves_pure_targets_at_zero() -> None:
    graph = build("x y")
    scores = page_rank_scores(graph, membership=VertexMembership.SOURCES)
    assert scores == {"x": pytest.approx(0.15)}
    assert page_rank(graph, "y", membership=VertexMembership.SOURCES) == 0.0


def test_unknown_word_scores_zero(abc_graph) -> None:
    assert page_rank(abc_graph, "zebra") == 0.0


def test_scores_are_deterministic(abc_graph) -> None:
    assert page_rank_scores(abc_graph) == page_rank_scores(abc_graph)


def test_cycle_scores_are_equal() -> None:
    graph = build("a b c a")
    scores = page_rank_scores(graph)
    # a symmetric cycle converges to the fixed point 1.0 for every vertex
    assert scores["a"] == pytest.approx(scores["b"])
    assert scores["b"] == pytest.approx(scores["c"])
    assert scores["a"] == pytest.approx(1.0)


def test_better_linked_word_ranks_higher(abc_graph) -> None:
    scores = page_rank_scores(abc_graph)
    assert scores["b"] > scores["c"]
    assert scores["b"] > scores["d"]


def test_normalized_variant_sums_to_one(abc_graph) -> None:
    scores = page_rank_scores(abc_graph, normalized=True)
    assert sum(scores.values()) == pytest.approx(1.0)


def test_empty_graph() -> None:
    graph = WordGraph().freeze()
    assert page_rank_scores(graph) == {}
    assert page_rank(graph, "a") == 0.0


def test_invalid_damping(abc_graph) -> None:
    with pytest.raises(ValueError):
        page_rank_scores(abc_graph, damping=1.5)


def test_iteration_count_is_respected() -> None:
    graph = build("x y")
    # after one round y has seen the initial 1/N share of x
    assert page_rank(graph, "y", iterations=1) == pytest.approx(0.15 + 0.85 * 0.5)
