#!/usr/bin/env python3
"""
DOT Renderer Module for the word graph toolkit

Writes the graph as a Graphviz ``digraph`` and runs the ``dot`` executable
to rasterize it. A missing or failing Graphviz install is reported through
the returned RenderResult, never raised.
"""

import subprocess
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Any

from ..graph.model import WordGraph

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Outcome of writing and rasterizing the graph."""
    dot_file: Optional[Path] = None
    image_file: Optional[Path] = None
    success: bool = False
    exit_code: Optional[int] = None
    output: str = ""
    error_message: Optional[str] = None


def _quote(word: str) -> str:
    return '"' + word.replace('\\', '\\\\').replace('"', '\\"') + '"'


def to_dot(graph: WordGraph) -> str:
    """Return the graph in DOT syntax, one labelled edge per line."""
    lines = ["digraph G {"]
    for source, target, weight in graph.edges():
        lines.append(f'  {_quote(source)} -> {_quote(target)} [label="{weight}"];')
    lines.append("}")
    return "\n".join(lines) + "\n"


def format_edge_listing(graph: WordGraph) -> List[str]:
    """Human-readable edge lines for console display."""
    return [f"{source} → {target} (weight: {weight})"
            for source, target, weight in graph.edges()]


class DotRenderer:
    """
    Exports a WordGraph to DOT and rasterizes it with Graphviz.

    Reads the ``render`` configuration section: ``dot_file``, ``image_file``,
    ``format``, ``executable``, ``timeout`` and ``enabled``.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize renderer with configuration."""
        self.config = config or {}

        render_config = self.config.get('render', {})
        self.enabled = render_config.get('enabled', True)
        self.dot_file = Path(render_config.get('dot_file', 'graph.dot'))
        self.image_file = Path(render_config.get('image_file', 'output_graph.png'))
        self.image_format = render_config.get('format', 'png')
        self.executable = render_config.get('executable', 'dot')
        self.timeout = render_config.get('timeout', 60)

    def write_dot(self, graph: WordGraph, dot_file: Optional[Path] = None) -> Path:
        """Write the DOT description; OSError propagates to the caller."""
        target = Path(dot_file or self.dot_file)
        with open(target, 'w', encoding='utf-8') as f:
            f.write(to_dot(graph))
        logger.info(f"DOT file written: {target} ({graph.edge_count} edges)")
        return target

    def render(self, graph: WordGraph) -> RenderResult:
        """
        Write the DOT file and, when enabled, rasterize it.

        Returns:
            RenderResult; ``success`` is False when the DOT file could not be
            written or Graphviz failed
        """
        try:
            dot_path = self.write_dot(graph)
        except OSError as e:
            error_msg = f"Could not write DOT file {self.dot_file}: {e}"
            logger.error(error_msg)
            return RenderResult(success=False, error_message=error_msg)

        if not self.enabled:
            logger.info("Rasterization disabled, DOT file only")
            return RenderResult(dot_file=dot_path, success=True)

        return self._rasterize(dot_path)

    def _rasterize(self, dot_path: Path) -> RenderResult:
        cmd = [
            self.executable,
            f'-T{self.image_format}',
            str(dot_path),
            '-o', str(self.image_file)
        ]
        logger.info(f"Running Graphviz: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                timeout=self.timeout
            )
        except FileNotFoundError:
            error_msg = f"Graphviz executable '{self.executable}' not found. Is Graphviz installed?"
            logger.warning(error_msg)
            return RenderResult(dot_file=dot_path, success=False, error_message=error_msg)
        except subprocess.TimeoutExpired:
            error_msg = f"Graphviz timed out after {self.timeout} seconds"
            logger.warning(error_msg)
            return RenderResult(dot_file=dot_path, success=False, error_message=error_msg)
        except OSError as e:
            error_msg = f"Graphviz execution error: {e}"
            logger.warning(error_msg)
            return RenderResult(dot_file=dot_path, success=False, error_message=error_msg)

        output = result.stdout or ""
        if result.returncode != 0:
            error_msg = f"Graphviz failed with code {result.returncode}"
            logger.warning(f"{error_msg}: {output.strip()}")
            return RenderResult(
                dot_file=dot_path,
                success=False,
                exit_code=result.returncode,
                output=output,
                error_message=error_msg
            )

        logger.info(f"Graph image written: {self.image_file}")
        return RenderResult(
            dot_file=dot_path,
            image_file=self.image_file,
            success=True,
            exit_code=0,
            output=output
        )
