#!/usr/bin/env python3
"""
Interactive text menu over a built word graph.

Reads numbered selections from standard input, runs the matching query and
prints the result. Every query failure is reported in place and the loop
continues; end of input or selection 7 ends the session.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Any

import click

from ..query.engine import QueryEngine
from ..query.random_walk import WalkStop, write_walk
from ..render.dot_renderer import DotRenderer, format_edge_listing

logger = logging.getLogger(__name__)

MENU_ITEMS = [
    (1, "Show directed graph"),
    (2, "Query bridge words"),
    (3, "Generate new text"),
    (4, "Calculate shortest path"),
    (5, "Calculate PageRank"),
    (6, "Random walk"),
    (7, "Exit"),
]

EXIT_CHOICE = 7


class InteractiveMenu:
    """Dispatches numbered menu selections to the query engine."""

    def __init__(self, engine: QueryEngine, renderer: Optional[DotRenderer] = None,
                 config: Optional[Dict[str, Any]] = None):
        self.engine = engine
        self.config = config or {}
        self.renderer = renderer or DotRenderer(self.config)

        walk_config = self.config.get('random_walk', {})
        self.walk_output = Path(walk_config.get('output_file', 'random_walk.txt'))

        self._actions: Dict[int, Callable[[], None]] = {
            1: self.show_graph,
            2: self.bridge_words,
            3: self.new_text,
            4: self.shortest_path,
            5: self.page_rank,
            6: self.random_walk,
        }

    def print_menu(self):
        click.echo("Graph built. Choose an operation:")
        for number, label in MENU_ITEMS:
            click.echo(f"{number}: {label}")

    def run(self) -> int:
        """Run the menu loop until exit or end of input."""
        self.print_menu()
        while True:
            try:
                raw = click.prompt("Enter choice", default="", show_default=False)
            except click.Abort:
                click.echo()
                logger.debug("Input closed, leaving menu")
                return 0

            choice = self._parse_choice(raw)
            if choice is None:
                click.echo(f"Invalid choice: {raw.strip() or '(empty)'}")
                continue

            if choice == EXIT_CHOICE:
                click.echo("Goodbye.")
                return 0

            try:
                self._actions[choice]()
            except click.Abort:
                click.echo()
                return 0

    def _parse_choice(self, raw: str) -> Optional[int]:
        try:
            choice = int(raw.strip())
        except ValueError:
            return None
        if choice != EXIT_CHOICE and choice not in self._actions:
            return None
        return choice

    def _prompt_word(self, label: str) -> str:
        return click.prompt(label, default="", show_default=False).strip().lower()

    def show_graph(self):
        graph = self.engine.graph
        click.echo("Directed graph:")
        for line in format_edge_listing(graph):
            click.echo(f"  {line}")

        result = self.renderer.render(graph)
        if result.dot_file is not None:
            click.echo(f"DOT file written: {result.dot_file}")
        if result.success and result.image_file is not None:
            click.echo(f"Graph image written: {result.image_file}")
        elif not result.success:
            click.echo(f"Rendering failed: {result.error_message}")
            if result.output:
                click.echo(result.output.rstrip(), err=True)

    def bridge_words(self):
        word1 = self._prompt_word("Enter word1")
        word2 = self._prompt_word("Enter word2")
        click.echo(self.engine.query_bridge_words(word1, word2).message)

    def new_text(self):
        text = click.prompt("Enter new text", default="", show_default=False)
        click.echo(f"Generated text: {self.engine.generate_new_text(text)}")

    def shortest_path(self):
        word1 = self._prompt_word("Enter word1")
        word2 = self._prompt_word("Enter word2")
        click.echo(self.engine.calc_shortest_path(word1, word2).message)

    def page_rank(self):
        scores = self.engine.page_ranks()
        if not scores:
            click.echo("The graph is empty, no PageRank to compute.")
            return
        click.echo("PageRank values:")
        for word in sorted(scores):
            click.echo(f"  {word}: {scores[word]}")

    def random_walk(self):
        result = self.engine.random_walk()
        if result.stop is WalkStop.EMPTY_GRAPH:
            click.echo(result.text)
            return

        click.echo(f"Random walk: {result.text}")
        try:
            path = write_walk(result, self.walk_output)
        except OSError as e:
            logger.error(f"Could not write random walk: {e}")
            click.echo(f"Failed to save random walk to {self.walk_output}: {e}")
            return
        click.echo(f"Random walk saved to {path}")
