#!/usr/bin/env python3
"""
Tokenizer for the word graph.

Reduces raw prose to a flat sequence of lowercase ASCII words. Anything that
is not an ASCII letter or whitespace becomes a space, so punctuation and
digits split words and line breaks carry no meaning.
"""

import re
from typing import List

_NON_ALPHA = re.compile(r'[^A-Za-z\s]')
_WHITESPACE = re.compile(r'\s+')


def normalize_text(text: str) -> str:
    """Replace non-letters with spaces, fold whitespace and lowercase."""
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    text = _NON_ALPHA.sub(' ', text)
    text = _WHITESPACE.sub(' ', text)
    return text.lower().strip()


def tokenize(text: str) -> List[str]:
    """Return the ordered list of lowercase word tokens in ``text``."""
    normalized = normalize_text(text)
    if not normalized:
        return []
    return [token for token in normalized.split(' ') if token]
