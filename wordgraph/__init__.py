#!/usr/bin/env python3
"""
Word Graph Toolkit

Builds a weighted directed word-adjacency graph from English prose and runs
graph analytics over it: bridge words, bridge-based text expansion, shortest
paths, PageRank and random walks.
"""

__version__ = "0.1.0"
__description__ = "Word adjacency graph analytics for English prose"

import logging
import sys
from typing import Optional

# Get package logger
logger = logging.getLogger(__name__)

# Version info
VERSION_INFO = tuple(map(int, __version__.split('.')))

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_version() -> str:
    """Get the current version string."""
    return __version__


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """Setup logging configuration."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )

    logger.info(f"Logging configured at {level} level")


from .errors import WordGraphError, InputFileError, ConfigurationError
from .core.tokenizer import tokenize
from .core.reader import read_tokens
from .graph.model import WordGraph
from .graph.builder import GraphBuilder, GraphBuildResult
from .query.engine import QueryEngine

__all__ = [
    'WordGraph',
    'GraphBuilder',
    'GraphBuildResult',
    'QueryEngine',
    'tokenize',
    'read_tokens',
    'WordGraphError',
    'InputFileError',
    'ConfigurationError',
    'get_version',
    'setup_logging',
    '__version__'
]
