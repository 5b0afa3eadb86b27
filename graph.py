"""
Directed, weighted graph abstraction over opaque labels.

Vertices are hashable, comparable labels (strings in practice).
Edges are directed: source -> target with a positive int weight.
A weight of 0 means "no edge" on read and "delete" on write.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Generic, Hashable, Set, TypeVar

L = TypeVar("L", bound=Hashable)


class RepInvariantError(AssertionError):
    """Internal representation is inconsistent (an implementation bug)."""


def check_weight(weight: int) -> int:
    """
    Validate an edge weight supplied by a caller.

    Raises:
        TypeError: weight is not an int (bool is rejected too).
        ValueError: weight is negative.
    """
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise TypeError(f"Edge weight must be an int, got {type(weight).__name__}")
    if weight < 0:
        raise ValueError(f"Edge weight must be non-negative, got {weight}")
    return weight


def check_label(label: L) -> L:
    """Raise TypeError if label is unhashable and so cannot name a vertex."""
    hash(label)
    return label


class Graph(ABC, Generic[L]):
    """
    Mutable weighted directed graph with labelled vertices.

    Every query returns a fresh collection; callers may mutate it freely
    without touching the graph, and later graph mutation never changes a
    snapshot already handed out.
    """

    @staticmethod
    def empty() -> "Graph":
        """Return a new empty graph of the default representation."""
        from graph_registry import empty_graph

        return empty_graph()

    @abstractmethod
    def add(self, vertex: L) -> bool:
        """
        Add a vertex.

        Returns: True if the vertex was added, False if it was already present
        (the graph is left unchanged).
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, source: L, target: L, weight: int) -> int:
        """
        Add, change, or remove the directed edge source -> target.

        A non-zero weight creates or updates the edge, adding either endpoint
        that is not yet a vertex. A zero weight removes the edge if present
        and otherwise does nothing.

        Returns: the previous weight of the edge, or 0 if there was none.
        Raises: ValueError for a negative weight, before any mutation.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, vertex: L) -> bool:
        """
        Remove a vertex and every edge incident to it.

        Returns: True if the vertex was present.
        """
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> Set[L]:
        """Return a copy of the vertex set."""
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: L) -> Dict[L, int]:
        """
        Vertices with an edge into target, mapped to that edge's weight.

        Returns: dict[L, int]; empty if target has no incoming edges or is
        not in the graph.
        """
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: L) -> Dict[L, int]:
        """
        Vertices reachable over one edge from source, mapped to its weight.

        Returns: dict[L, int]; empty if source has no outgoing edges or is
        not in the graph.
        """
        raise NotImplementedError
