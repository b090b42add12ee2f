"""
Configuration validation for the word graph toolkit.
Checks every section before a session starts so bad values fail early.
"""

import logging
from typing import Dict, List, Tuple, Any

logger = logging.getLogger(__name__)

VALID_MEMBERSHIP = ['all', 'sources']
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class ConfigurationValidator:
    """Validates configuration to prevent runtime errors."""

    def __init__(self):
        self.errors = []
        self.warnings = []

    def validate(self, config: Dict[str, Any]) -> Tuple[bool, List[str]]:
        """
        Validate a complete configuration.

        Returns:
            Tuple of (is_valid, list_of_issues)
        """
        self.errors = []
        self.warnings = []

        self._validate_graph_config(config.get('graph', {}))
        self._validate_pagerank_config(config.get('pagerank', {}))
        self._validate_random_config(config.get('random', {}))
        self._validate_render_config(config.get('render', {}))
        self._validate_random_walk_config(config.get('random_walk', {}))
        self._validate_logging_config(config.get('logging', {}))

        all_issues = self.errors + self.warnings
        is_valid = len(self.errors) == 0

        return is_valid, all_issues

    def _validate_graph_config(self, graph_config: Dict[str, Any]):
        membership = graph_config.get('vertex_membership', 'all')
        if membership not in VALID_MEMBERSHIP:
            self.errors.append(f"Invalid vertex_membership '{membership}'. Valid: {VALID_MEMBERSHIP}")

    def _validate_pagerank_config(self, pagerank_config: Dict[str, Any]):
        damping = pagerank_config.get('damping', 0.85)
        if isinstance(damping, bool) or not isinstance(damping, (int, float)) or not (0.0 < damping < 1.0):
            self.errors.append(f"damping must be between 0.0 and 1.0 (exclusive), got: {damping}")

        iterations = pagerank_config.get('iterations', 100)
        if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations <= 0:
            self.errors.append(f"iterations must be a positive integer, got: {iterations}")
        elif iterations > 10000:
            self.warnings.append(f"iterations is very large ({iterations}); PageRank may be slow")

        normalized = pagerank_config.get('normalized', False)
        if not isinstance(normalized, bool):
            self.errors.append(f"normalized must be boolean, got: {normalized}")

    def _validate_random_config(self, random_config: Dict[str, Any]):
        seed = random_config.get('seed')
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            self.errors.append(f"seed must be an integer or null, got: {seed}")

    def _validate_render_config(self, render_config: Dict[str, Any]):
        enabled = render_config.get('enabled', True)
        if not isinstance(enabled, bool):
            self.errors.append(f"render.enabled must be boolean, got: {enabled}")

        for key in ('dot_file', 'image_file', 'format', 'executable'):
            value = render_config.get(key)
            if value is not None and (not isinstance(value, str) or not value.strip()):
                self.errors.append(f"render.{key} must be a non-empty string, got: {value!r}")

        timeout = render_config.get('timeout', 60)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            self.errors.append(f"render.timeout must be a positive number, got: {timeout}")

    def _validate_random_walk_config(self, walk_config: Dict[str, Any]):
        output_file = walk_config.get('output_file', 'random_walk.txt')
        if not isinstance(output_file, str) or not output_file.strip():
            self.errors.append(f"random_walk.output_file must be a non-empty string, got: {output_file!r}")

    def _validate_logging_config(self, logging_config: Dict[str, Any]):
        level = logging_config.get('level', 'WARNING')
        if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
            self.errors.append(f"Invalid logging level '{level}'. Valid: {VALID_LOG_LEVELS}")

        log_file = logging_config.get('file')
        if log_file is not None and not isinstance(log_file, str):
            self.errors.append(f"logging.file must be a string or null, got: {log_file!r}")
