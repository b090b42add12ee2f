from __future__ import annotations

from collections import Counter

import pytest

from wordgraph.core.tokenizer import tokenize
from wordgraph.graph.builder import GraphBuilder
from wordgraph.graph.model import WordGraph

from .conftest import build


def test_fox_sentence_edges(fox_graph) -> None:
    assert fox_graph.weight("the", "quick") == 1
    assert fox_graph.weight("the", "lazy") == 1
    assert fox_graph.out_degree("the") == 2


def test_repeated_pairs_accumulate_weight(abc_graph) -> None:
    assert abc_graph.to_dict() == {
        "a": {"b": 2},
        "b": {"c": 1, "d": 1},
        "c": {"a": 1},
    }


def test_weights_match_adjacent_pair_counts() -> None:
    text = "to be or not to be that is the question to be"
    tokens = tokenize(text)
    graph = build(text)
    expected = Counter(zip(tokens, tokens[1:]))
    assert {(s, t): w for s, t, w in graph.edges()} == dict(expected)


def test_target_only_word_is_a_vertex(abc_graph) -> None:
    assert not abc_graph.is_source("d")
    assert abc_graph.has_vertex("d")
    assert "d" in abc_graph
    assert abc_graph.vertices() == {"a", "b", "c", "d"}
    assert abc_graph.sources() == ["a", "b", "c"]


def test_missing_source_has_empty_out_edges(abc_graph) -> None:
    assert dict(abc_graph.out_edges("d")) == {}
    assert dict(abc_graph.out_edges("zebra")) == {}
    assert abc_graph.out_degree("zebra") == 0


def test_self_loop_from_repeated_word() -> None:
    graph = build("very very very good")
    assert graph.weight("very", "very") == 2
    assert graph.weight("very", "good") == 1


def test_graph_is_frozen_after_build(abc_graph) -> None:
    assert abc_graph.frozen
    with pytest.raises(RuntimeError):
        abc_graph.add_edge("a", "z")


def test_out_edges_are_read_only(abc_graph) -> None:
    with pytest.raises(TypeError):
        abc_graph.out_edges("a")["z"] = 1  # type: ignore[index]


def test_add_edge_rejects_non_positive_increment() -> None:
    graph = WordGraph()
    with pytest.raises(ValueError):
        graph.add_edge("a", "b", 0)


def test_single_token_gives_empty_graph() -> None:
    graph = build("alone")
    assert graph.is_empty()
    assert graph.vertex_count == 0


def test_build_statistics(abc_graph) -> None:
    result = GraphBuilder().build_graph(tokenize("a b c a b d"), source_name="inline")
    assert result.statistics == {
        "tokens": 6,
        "vertices": 4,
        "sources": 3,
        "edges": 4,
        "total_weight": 5,
        "max_weight": 2,
        "self_loops": 0,
    }
    assert result.metadata["source"] == "inline"


def test_build_from_file(tmp_path) -> None:
    source = tmp_path / "text.txt"
    source.write_text("A b.\nC a, b d!", encoding="utf-8")
    result = GraphBuilder().build_from_file(source)
    assert result.success
    assert result.graph.weight("a", "b") == 2
    assert result.token_count == 6
