"""
Vertex record used by the vertex-indexed representation.

A record owns the outgoing edges of one vertex as a
target -> weight mapping. Zero weights are never stored.
"""

from __future__ import annotations

from typing import Dict, Generic

from graph import L, check_weight


class Vertex(Generic[L]):
    """Mutable vertex record: a label plus its outgoing edges."""

    __slots__ = ("_label", "_out")

    def __init__(self, label: L) -> None:
        self._label = label
        self._out: Dict[L, int] = {}

    @property
    def label(self) -> L:
        return self._label

    def targets(self) -> Dict[L, int]:
        return dict(self._out)  # defensive copy

    def weight_to(self, target: L) -> int:
        """Weight of the edge to target, 0 if there is none."""
        return self._out.get(target, 0)

    def set_target(self, target: L, weight: int) -> int:
        """
        Set the weight of the edge to target; 0 removes the edge.

        Returns: the previous weight, 0 if there was no edge.
        """
        check_weight(weight)
        if weight == 0:
            return self._out.pop(target, 0)
        previous = self._out.get(target, 0)
        self._out[target] = weight
        return previous

    def remove_target(self, target: L) -> int:
        return self._out.pop(target, 0)

    def __len__(self) -> int:
        return len(self._out)

    def __str__(self) -> str:
        if not self._out:
            return str(self._label)
        out = ", ".join(f"{t}: {w}" for t, w in sorted(self._out.items()))
        return f"{self._label} -> {{{out}}}"

    def __repr__(self) -> str:
        return f"Vertex({self._label!r}, {self._out!r})"
