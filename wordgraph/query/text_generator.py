#!/usr/bin/env python3
"""
Bridge-based text expansion.

Each adjacent word pair of the input is kept in order; when the graph holds
bridge words for the pair, one of them is chosen uniformly at random and
inserted between the two.
"""

import logging
import random
from typing import List, Optional

from ..core.tokenizer import tokenize
from ..graph.model import WordGraph
from .bridge import find_bridge_words
from .membership import VertexMembership

logger = logging.getLogger(__name__)


def generate_new_text(graph: WordGraph, text: str, rng: Optional[random.Random] = None,
                      membership: VertexMembership = VertexMembership.ALL) -> str:
    """
    Expand ``text`` by inserting bridge words between adjacent words.

    The input is normalized with the same rules as the source text, so the
    result is lowercase and free of punctuation.
    """
    rng = rng or random.Random()
    words = tokenize(text)
    if not words:
        return ""

    output: List[str] = []
    inserted = 0
    for current, following in zip(words, words[1:]):
        output.append(current)
        result = find_bridge_words(graph, current, following, membership)
        if result.found:
            output.append(rng.choice(result.bridges))
            inserted += 1
    output.append(words[-1])

    logger.debug(f"Generated text with {inserted} bridge word(s) from {len(words)} input words")
    return " ".join(output)
