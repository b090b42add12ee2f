#!/usr/bin/env python3
"""
Word graph data model.

Vertices are distinct words; an edge (u, v) with weight w records that v
directly followed u w times in the source text. Only words with outgoing
edges are stored as adjacency keys; words that only ever appear as a
target are vertices too and are discovered through the edge maps.
"""

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Set, Tuple

_EMPTY: Mapping[str, int] = MappingProxyType({})


class WordGraph:
    """
    Weighted directed graph over word tokens.

    The graph is filled through ``add_edge`` and then frozen; after
    ``freeze`` every accessor is read-only and ``add_edge`` raises.
    """

    def __init__(self):
        self._adjacency: Dict[str, Dict[str, int]] = {}
        self._targets: Dict[str, None] = {}
        self._frozen = False

    def add_edge(self, source: str, target: str, count: int = 1) -> None:
        """Increment the weight of (source, target), creating it at ``count``."""
        if self._frozen:
            raise RuntimeError("WordGraph is frozen and cannot be modified")
        if count < 1:
            raise ValueError(f"Edge weight increment must be positive, got: {count}")
        edges = self._adjacency.setdefault(source, {})
        edges[target] = edges.get(target, 0) + count
        self._targets.setdefault(target, None)

    def freeze(self) -> 'WordGraph':
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def out_edges(self, word: str) -> Mapping[str, int]:
        """Outgoing edges of ``word`` as target -> weight; empty if none."""
        edges = self._adjacency.get(word)
        if edges is None:
            return _EMPTY
        return MappingProxyType(edges)

    def weight(self, source: str, target: str) -> Optional[int]:
        return self._adjacency.get(source, {}).get(target)

    def has_edge(self, source: str, target: str) -> bool:
        return target in self._adjacency.get(source, {})

    def out_degree(self, word: str) -> int:
        """Number of distinct targets of ``word`` (weights ignored)."""
        return len(self._adjacency.get(word, {}))

    def is_source(self, word: str) -> bool:
        """True if ``word`` has at least one outgoing edge."""
        return word in self._adjacency

    def has_vertex(self, word: str) -> bool:
        """True if ``word`` is a source or the target of any edge."""
        return word in self._adjacency or word in self._targets

    def sources(self) -> List[str]:
        """Words with outgoing edges, in order of first appearance."""
        return list(self._adjacency)

    def vertices(self) -> Set[str]:
        return set(self._adjacency) | set(self._targets)

    def ordered_vertices(self) -> List[str]:
        """All vertices in order of first appearance as source or target."""
        seen: Dict[str, None] = dict.fromkeys(self._adjacency)
        for edges in self._adjacency.values():
            for target in edges:
                seen.setdefault(target, None)
        return list(seen)

    def edges(self) -> Iterator[Tuple[str, str, int]]:
        """Iterate over (source, target, weight) triples."""
        for source, targets in self._adjacency.items():
            for target, weight in targets.items():
                yield source, target, weight

    def predecessors(self) -> Dict[str, List[str]]:
        """Map each target to the sources with an edge into it."""
        incoming: Dict[str, List[str]] = {}
        for source, targets in self._adjacency.items():
            for target in targets:
                incoming.setdefault(target, []).append(source)
        return incoming

    @property
    def vertex_count(self) -> int:
        return len(self.vertices())

    @property
    def source_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adjacency.values())

    def is_empty(self) -> bool:
        return not self._adjacency

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        """Plain-dict copy of the adjacency mapping."""
        return {source: dict(targets) for source, targets in self._adjacency.items()}

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.has_vertex(word)

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return (f"WordGraph(vertices={self.vertex_count}, sources={self.source_count}, "
                f"edges={self.edge_count})")
