"""
Immutable directed edge value used by the edge-set representation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Tuple

from graph import L, check_weight


@dataclass(frozen=True)
class Edge(Generic[L]):
    """
    Directed edge source -> target carrying a weight.

    Equality and hashing use the endpoints only, so an edge with the same
    endpoints but a different weight is the same edge.
    """

    source: L
    target: L
    weight: int = field(compare=False)

    def __post_init__(self) -> None:
        check_weight(self.weight)

    @property
    def key(self) -> Tuple[L, L]:
        return (self.source, self.target)

    def with_weight(self, weight: int) -> "Edge[L]":
        """Return a copy of this edge carrying ``weight``."""
        return Edge(self.source, self.target, weight)

    def touches(self, vertex: L) -> bool:
        return vertex == self.source or vertex == self.target

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"
