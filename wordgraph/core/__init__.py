#!/usr/bin/env python3
"""
Core text handling: tokenization and input loading.
"""

from .tokenizer import tokenize, normalize_text
from .reader import read_tokens

__all__ = [
    'tokenize',
    'normalize_text',
    'read_tokens'
]
