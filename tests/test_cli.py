from __future__ import annotations

import random

import click
import pytest
from click.testing import CliRunner

from wordgraph.cli.main import cli
from wordgraph.cli.menu import InteractiveMenu
from wordgraph.query.engine import QueryEngine
from wordgraph.render.dot_renderer import DotRenderer


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input.txt").write_text("A b c.\nA b d!", encoding="utf-8")
    return tmp_path


def _run(*choices: str, extra_args=()):
    runner = CliRunner()
    return runner.invoke(
        cli,
        ["input.txt", "--no-render", "--seed", "3", *extra_args],
        input="\n".join(choices) + "\n",
    )


def test_missing_argument_prints_usage() -> None:
    result = CliRunner().invoke(cli, [])
    assert result.exit_code != 0
    assert "Usage" in result.output


def test_missing_input_file(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["nothing.txt"])
    assert result.exit_code == 1
    assert "File read error" in result.output


def test_menu_lists_operations_and_exits(workdir) -> None:
    result = _run("7")
    assert result.exit_code == 0
    for label in ("1: Show directed graph", "4: Calculate shortest path", "7: Exit"):
        assert label in result.output
    assert "Goodbye." in result.output


def test_bridge_query_from_menu(workdir) -> None:
    result = _run("2", "A", "c", "7")
    assert "The bridge words from a to c are: b." in result.output


def test_new_text_from_menu(workdir) -> None:
    result = _run("3", "a c", "7")
    assert "Generated text: a b c" in result.output


def test_shortest_path_from_menu(workdir) -> None:
    result = _run("4", "a", "d", "4", "d", "a", "7")
    assert "Shortest path: a → b → d (length: 3)" in result.output
    assert "No path from d to a!" in result.output


def test_page_rank_table_is_sorted(workdir) -> None:
    result = _run("5", "7")
    lines = [line.strip() for line in result.output.splitlines() if line.startswith("  ")]
    words = [line.split(":")[0] for line in lines]
    assert words == sorted(words) == ["a", "b", "c", "d"]


def test_random_walk_is_saved(workdir) -> None:
    result = _run("6", "7")
    assert result.exit_code == 0
    saved = (workdir / "random_walk.txt").read_text(encoding="utf-8")
    assert f"Random walk: {saved}" in result.output


def test_show_graph_writes_dot_file(workdir) -> None:
    result = _run("1", "7")
    assert "a → b (weight: 2)" in result.output
    assert "DOT file written: graph.dot" in result.output
    assert (workdir / "graph.dot").read_text(encoding="utf-8").startswith("digraph G {")


def test_invalid_choices_keep_the_loop_running(workdir) -> None:
    result = _run("abc", "9", "", "2", "a", "zebra", "7")
    assert result.exit_code == 0
    assert result.output.count("Invalid choice") == 3
    assert "No a or zebra in the graph!" in result.output


def test_end_of_input_ends_session(workdir) -> None:
    result = CliRunner().invoke(cli, ["input.txt", "--no-render"], input="2\na\n")
    assert result.exit_code == 0


def test_config_error_exit_code(workdir) -> None:
    (workdir / "bad.yaml").write_text("pagerank:\n  damping: 2\n", encoding="utf-8")
    result = _run("7", extra_args=("--config", "bad.yaml"))
    assert result.exit_code == 2
    assert "Configuration error" in result.output


def test_walk_write_failure_is_reported(tmp_path, abc_graph) -> None:
    config = {"random_walk": {"output_file": str(tmp_path / "no" / "such" / "walk.txt")}}
    engine = QueryEngine(abc_graph, config, rng=random.Random(0))
    menu = InteractiveMenu(engine, DotRenderer(config), config)

    runner = CliRunner()
    result = runner.invoke(_menu_command(menu), input="6\n7\n")
    assert "Failed to save random walk" in result.output
    assert "Goodbye." in result.output


def _menu_command(menu: InteractiveMenu):
    @click.command()
    def run_menu():
        menu.run()

    return run_menu
