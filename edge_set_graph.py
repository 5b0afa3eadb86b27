"""
Concrete weighted directed graph backed by a vertex set and an edge list.

Implements the Graph interface; edges are separate immutable Edge values.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from edge import Edge
from graph import Graph, L, RepInvariantError, check_label, check_weight
from graph_logging import get_logger
from graph_settings import DEFAULT_SETTINGS, GraphSettings

log = get_logger("edge_set")


class EdgeSetGraph(Graph[L]):
    """
    Directed, weighted graph stored as a set of labels plus a list of edges.

    Abstraction function:
        AF(vertices, edges) = the graph whose vertex set is ``vertices`` and
        which has an edge s -> t of weight w for every Edge(s, t, w) in
        ``edges``.

    Representation invariant:
        - every edge endpoint is in ``vertices``
        - no two edges share (source, target)
        - every edge weight is positive

    Rep exposure:
        both containers are private and only copies leave the class.
    """

    def __init__(self, settings: Optional[GraphSettings] = None) -> None:
        self._settings = settings or DEFAULT_SETTINGS
        self._vertices: Set[L] = set()
        self._edges: List[Edge[L]] = []
        self._check_rep()

    def _check_rep(self) -> None:
        if not self._settings.check_rep:
            return
        seen = set()
        for edge in self._edges:
            problem = None
            if edge.source not in self._vertices:
                problem = "edge source is not a vertex"
            elif edge.target not in self._vertices:
                problem = "edge target is not a vertex"
            elif edge.key in seen:
                problem = "duplicate edge"
            elif edge.weight <= 0:
                problem = "non-positive edge weight"
            if problem is not None:
                log.error("rep_invariant_violated", problem=problem, edge=str(edge))
                raise RepInvariantError(f"{problem}: {edge}")
            seen.add(edge.key)

    def _index_of(self, source: L, target: L) -> int:
        for i, edge in enumerate(self._edges):
            if edge.source == source and edge.target == target:
                return i
        return -1

    # --- Mutation ------------------------------------------------------------

    def add(self, vertex: L) -> bool:
        check_label(vertex)
        self._check_rep()
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        log.debug("vertex_added", vertex=vertex)
        self._check_rep()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        check_weight(weight)
        check_label(source)
        check_label(target)
        self._check_rep()
        previous = 0
        i = self._index_of(source, target)
        if i != -1:
            previous = self._edges[i].weight
            if weight == 0:
                del self._edges[i]
            else:
                self._edges[i] = self._edges[i].with_weight(weight)
        elif weight != 0:
            # Endpoints join the vertex set together with the edge.
            self._vertices.add(source)
            self._vertices.add(target)
            self._edges.append(Edge(source, target, weight))
        log.debug(
            "edge_set", source=source, target=target, weight=weight, previous=previous
        )
        self._check_rep()
        return previous

    def remove(self, vertex: L) -> bool:
        self._check_rep()
        if vertex not in self._vertices:
            return False
        self._vertices.remove(vertex)
        before = len(self._edges)
        self._edges = [e for e in self._edges if not e.touches(vertex)]
        log.debug("vertex_removed", vertex=vertex, edges_removed=before - len(self._edges))
        self._check_rep()
        return True

    # --- Queries -------------------------------------------------------------

    def vertices(self) -> Set[L]:
        self._check_rep()
        return set(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        self._check_rep()
        return {e.source: e.weight for e in self._edges if e.target == target}

    def targets(self, source: L) -> Dict[L, int]:
        self._check_rep()
        return {e.target: e.weight for e in self._edges if e.source == source}

    def __str__(self) -> str:
        self._check_rep()
        vertices = ", ".join(str(v) for v in sorted(self._vertices))
        edges = ", ".join(str(e) for e in sorted(self._edges, key=lambda e: e.key))
        return f"Vertices: [{vertices}]\nEdges: [{edges}]"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}"
            f"(vertices={len(self._vertices)}, edges={len(self._edges)})"
        )
