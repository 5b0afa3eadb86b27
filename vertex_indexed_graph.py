"""
Concrete weighted directed graph backed by a list of vertex records.

Implements the Graph interface; each Vertex owns its outgoing edges and
there is no global edge collection.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from graph import Graph, L, RepInvariantError, check_label, check_weight
from graph_logging import get_logger
from graph_settings import DEFAULT_SETTINGS, GraphSettings
from vertex import Vertex

log = get_logger("vertex_indexed")


class VertexIndexedGraph(Graph[L]):
    """
    Directed, weighted graph stored as vertex records in insertion order.

    Abstraction function:
        AF(records) = the graph whose vertices are the record labels and
        which has an edge s -> t of weight w whenever the record labelled s
        maps t to w.

    Representation invariant:
        - labels are unique across records
        - every outgoing key is the label of some record
        - every stored weight is positive

    Rep exposure:
        records never leave the class; queries return new dicts and sets.
    """

    def __init__(self, settings: Optional[GraphSettings] = None) -> None:
        self._settings = settings or DEFAULT_SETTINGS
        self._records: List[Vertex[L]] = []
        self._check_rep()

    def _check_rep(self) -> None:
        if not self._settings.check_rep:
            return
        labels = set()
        for record in self._records:
            if record.label in labels:
                self._fail("duplicate vertex label", record)
            labels.add(record.label)
        for record in self._records:
            for target, weight in record.targets().items():
                if target not in labels:
                    self._fail("edge target is not a vertex", record)
                if weight <= 0:
                    self._fail("non-positive edge weight", record)

    @staticmethod
    def _fail(problem: str, record: Vertex) -> None:
        log.error("rep_invariant_violated", problem=problem, vertex=repr(record))
        raise RepInvariantError(f"{problem}: {record!r}")

    def _find(self, label: L) -> Optional[Vertex[L]]:
        for record in self._records:
            if record.label == label:
                return record
        return None

    def _find_or_create(self, label: L) -> Vertex[L]:
        record = self._find(label)
        if record is None:
            record = Vertex(label)
            self._records.append(record)
        return record

    # --- Mutation ------------------------------------------------------------

    def add(self, vertex: L) -> bool:
        check_label(vertex)
        self._check_rep()
        if self._find(vertex) is not None:
            return False
        self._records.append(Vertex(vertex))
        log.debug("vertex_added", vertex=vertex)
        self._check_rep()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        check_weight(weight)
        check_label(source)
        check_label(target)
        self._check_rep()
        if weight == 0:
            record = self._find(source)
            previous = record.remove_target(target) if record is not None else 0
        else:
            record = self._find_or_create(source)
            self._find_or_create(target)
            previous = record.set_target(target, weight)
        log.debug(
            "edge_set", source=source, target=target, weight=weight, previous=previous
        )
        self._check_rep()
        return previous

    def remove(self, vertex: L) -> bool:
        self._check_rep()
        record = self._find(vertex)
        if record is None:
            return False
        self._records.remove(record)
        for other in self._records:
            other.remove_target(vertex)
        log.debug("vertex_removed", vertex=vertex)
        self._check_rep()
        return True

    # --- Queries -------------------------------------------------------------

    def vertices(self) -> Set[L]:
        self._check_rep()
        return {record.label for record in self._records}

    def sources(self, target: L) -> Dict[L, int]:
        self._check_rep()
        result: Dict[L, int] = {}
        for record in self._records:
            weight = record.weight_to(target)
            if weight != 0:
                result[record.label] = weight
        return result

    def targets(self, source: L) -> Dict[L, int]:
        self._check_rep()
        record = self._find(source)
        return record.targets() if record is not None else {}

    def __str__(self) -> str:
        self._check_rep()
        records = sorted(self._records, key=lambda r: r.label)
        return f"Vertices: [{', '.join(str(r) for r in records)}]"

    def __repr__(self) -> str:
        edges = sum(len(record) for record in self._records)
        return f"{type(self).__name__}(vertices={len(self._records)}, edges={edges})"
