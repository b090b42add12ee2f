#!/usr/bin/env python3
"""
Exception types raised by the word graph toolkit.

Query outcomes such as a missing word or an unreachable target are not
errors; they are reported through result objects. Exceptions are reserved
for conditions that end a session: an unreadable input file or a broken
configuration.
"""


class WordGraphError(Exception):
    """Base exception for word graph errors."""
    pass


class InputFileError(WordGraphError):
    """Input text file is missing or cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read input file {path}: {reason}")


class ConfigurationError(WordGraphError):
    """Configuration file is malformed or holds invalid values."""
    pass
