from __future__ import annotations

import random

import pytest

from wordgraph.graph.model import WordGraph
from wordgraph.query.random_walk import (
    EMPTY_GRAPH_MESSAGE,
    WalkStop,
    random_walk,
    write_walk,
)

from .conftest import build


def test_walk_from_c_follows_the_only_edges(abc_graph) -> None:
    for seed in range(20):
        result = random_walk(abc_graph, random.Random(seed), start="c")
        assert result.path[:3] == ["c", "a", "b"]
        assert result.text in ("c a b d", "c a b c")


def test_repeated_edge_target_is_not_appended(abc_graph) -> None:
    # c a b c then c->a again: the walk stops before recording the repeat
    stops = set()
    for seed in range(40):
        result = random_walk(abc_graph, random.Random(seed), start="c")
        stops.add(result.stop)
        if result.stop is WalkStop.REPEATED_EDGE:
            assert result.path == ["c", "a", "b", "c"]
        else:
            assert result.stop is WalkStop.DEAD_END
            assert result.path == ["c", "a", "b", "d"]
    assert stops == {WalkStop.REPEATED_EDGE, WalkStop.DEAD_END}


def test_self_loop_walk() -> None:
    graph = build("ha ha")
    result = random_walk(graph, random.Random(0))
    assert result.path == ["ha", "ha"]
    assert result.stop is WalkStop.REPEATED_EDGE


def test_walk_edges_never_repeat(fox_graph) -> None:
    for seed in range(10):
        result = random_walk(fox_graph, random.Random(seed))
        pairs = list(zip(result.path, result.path[1:]))
        assert len(pairs) == len(set(pairs))
        for source, target in pairs:
            assert fox_graph.has_edge(source, target)


def test_start_is_a_source_word(abc_graph) -> None:
    starts = {random_walk(abc_graph, random.Random(seed)).path[0] for seed in range(50)}
    assert starts <= {"a", "b", "c"}


def test_seeded_walk_is_reproducible(fox_graph) -> None:
    first = random_walk(fox_graph, random.Random(99))
    second = random_walk(fox_graph, random.Random(99))
    assert first == second


def test_empty_graph() -> None:
    result = random_walk(WordGraph().freeze(), random.Random(0))
    assert result.stop is WalkStop.EMPTY_GRAPH
    assert result.path == []
    assert result.text == EMPTY_GRAPH_MESSAGE


def test_unknown_start_word(abc_graph) -> None:
    with pytest.raises(ValueError):
        random_walk(abc_graph, random.Random(0), start="zebra")


def test_write_walk_overwrites(tmp_path, abc_graph) -> None:
    target = tmp_path / "random_walk.txt"
    target.write_text("old content that is longer", encoding="utf-8")
    result = random_walk(abc_graph, random.Random(3), start="c")
    write_walk(result, target)
    assert target.read_text(encoding="utf-8") == result.text
