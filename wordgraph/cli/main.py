#!/usr/bin/env python3
"""
Command-line entry point for the word graph toolkit

Usage: wordgraph <input-file> [--config <file>] [--seed <n>] [--no-render]
"""

import sys
import logging
import click
from typing import Optional

from .. import __version__, setup_logging
from ..errors import ConfigurationError, InputFileError
from ..graph.builder import GraphBuilder
from ..query.engine import QueryEngine
from ..render.dot_renderer import DotRenderer
from .config import load_config
from .menu import InteractiveMenu

logger = logging.getLogger(__name__)


def _build_overrides(seed: Optional[int], no_render: bool, verbose: bool):
    overrides = {}
    if seed is not None:
        overrides['random'] = {'seed': seed}
    if no_render:
        overrides['render'] = {'enabled': False}
    if verbose:
        overrides['logging'] = {'level': 'DEBUG'}
    return overrides


@click.command()
@click.argument('input_file', type=click.Path(dir_okay=False))
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              help='YAML configuration file')
@click.option('--seed', type=int, default=None,
              help='Seed for bridge-word choice and random walks')
@click.option('--no-render', is_flag=True, help='Write the DOT file but skip Graphviz')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.version_option(version=__version__, prog_name='wordgraph')
def cli(input_file, config_path, seed, no_render, verbose):
    """
    Build a word graph from a text file and explore it interactively.

    INPUT_FILE: Path to an English text file
    """
    try:
        config = load_config(config_path, _build_overrides(seed, no_render, verbose))
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}")
        sys.exit(2)

    logging_config = config.get('logging', {})
    setup_logging(logging_config.get('level', 'WARNING'), logging_config.get('file'))

    try:
        result = GraphBuilder(config).build_from_file(input_file)
    except InputFileError as e:
        logger.error(str(e))
        click.echo(f"File read error: {e.reason} ({e.path})")
        sys.exit(1)

    if not result.success:
        click.echo(f"Graph building failed: {result.error_message}")
        sys.exit(1)

    logger.info(f"Graph statistics: {result.statistics}")

    engine = QueryEngine(result.graph, config)
    menu = InteractiveMenu(engine, DotRenderer(config), config)
    sys.exit(menu.run())


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
