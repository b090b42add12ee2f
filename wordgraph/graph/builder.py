#!/usr/bin/env python3
"""
Graph Builder Module for the word graph toolkit

Consumes a token sequence and populates a WordGraph with one weighted edge
per adjacent token pair, then freezes the graph for querying.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Any, Sequence, Union
from dataclasses import dataclass, field

from ..core.reader import read_tokens
from .model import WordGraph

logger = logging.getLogger(__name__)


@dataclass
class GraphBuildResult:
    """Complete graph build result."""
    graph: WordGraph = field(default_factory=WordGraph)
    token_count: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)
    statistics: Dict[str, Any] = field(default_factory=dict)
    success: bool = False
    error_message: Optional[str] = None


class GraphBuilder:
    """
    Builds a frozen WordGraph from tokens.

    For every position i the edge (token[i], token[i + 1]) gains one unit of
    weight; the last token contributes no outgoing edge.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize graph builder with configuration."""
        self.config = config or {}

        graph_config = self.config.get('graph', {})
        self.include_metadata = graph_config.get('include_metadata', True)
        self.generate_stats = graph_config.get('generate_statistics', True)

    def build_graph(self, tokens: Sequence[str], source_name: Optional[str] = None) -> GraphBuildResult:
        """
        Build a word graph from an ordered token sequence.

        Args:
            tokens: Normalized tokens in text order
            source_name: Optional label of where the tokens came from

        Returns:
            GraphBuildResult holding the frozen graph and statistics
        """
        try:
            logger.debug(f"Building word graph from {len(tokens)} tokens")

            graph = WordGraph()
            for source, target in zip(tokens, tokens[1:]):
                if source and target:
                    graph.add_edge(source, target)
            graph.freeze()

            result = GraphBuildResult(
                graph=graph,
                token_count=len(tokens),
                success=True
            )

            if self.include_metadata:
                result.metadata = self._generate_metadata(source_name)

            if self.generate_stats:
                result.statistics = self._generate_statistics(result)

            logger.info(f"Graph built successfully: {graph.vertex_count} vertices, "
                        f"{graph.edge_count} edges from {len(tokens)} tokens")
            return result

        except Exception as e:
            logger.error(f"Graph building failed: {e}")
            return GraphBuildResult(success=False, error_message=str(e))

    def build_from_file(self, file_path: Union[str, Path]) -> GraphBuildResult:
        """
        Read, tokenize and build in one step.

        Raises:
            InputFileError: if the file cannot be read
        """
        tokens = read_tokens(file_path)
        return self.build_graph(tokens, source_name=str(file_path))

    def _generate_metadata(self, source_name: Optional[str]) -> Dict[str, Any]:
        return {
            'source': source_name,
            'built_at': datetime.now().isoformat(),
        }

    def _generate_statistics(self, result: GraphBuildResult) -> Dict[str, Any]:
        graph = result.graph
        weights: List[int] = [weight for _, _, weight in graph.edges()]
        return {
            'tokens': result.token_count,
            'vertices': graph.vertex_count,
            'sources': graph.source_count,
            'edges': graph.edge_count,
            'total_weight': sum(weights),
            'max_weight': max(weights, default=0),
            'self_loops': sum(1 for source, target, _ in graph.edges() if source == target),
        }
