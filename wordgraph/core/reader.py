#!/usr/bin/env python3
"""
Input file loading.

The file handle is held only while the text is read and tokenized; callers
receive a plain token list.
"""

import logging
from pathlib import Path
from typing import List, Union

from ..errors import InputFileError
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def read_tokens(file_path: Union[str, Path], encoding: str = 'utf-8') -> List[str]:
    """
    Read a text file and return its tokens.

    Args:
        file_path: Path to the input text file
        encoding: Text encoding; undecodable bytes are replaced and then
            discarded by the tokenizer like any other non-letter

    Returns:
        Ordered token list

    Raises:
        InputFileError: if the file does not exist or cannot be read
    """
    path = Path(file_path)
    if not path.is_file():
        raise InputFileError(str(path), "file not found")

    tokens: List[str] = []
    try:
        with open(path, 'r', encoding=encoding, errors='replace') as f:
            for line in f:
                tokens.extend(tokenize(line))
    except OSError as e:
        raise InputFileError(str(path), e.strerror or str(e)) from e

    logger.info(f"Read {len(tokens)} tokens from {path}")
    return tokens
