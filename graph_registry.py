"""
Registry of interchangeable graph representations.

Lets callers pick a representation by name at construction time while
depending only on the Graph interface.
"""

from __future__ import annotations

from typing import Callable, Mapping, MutableMapping, Optional

from edge_set_graph import EdgeSetGraph
from graph import Graph
from graph_settings import GraphSettings
from vertex_indexed_graph import VertexIndexedGraph

GraphFactory = Callable[..., Graph]

DEFAULT_REPRESENTATION = "edges"


class GraphRegistry:
    """Maps representation names to constructors of empty graphs.

    Each factory is called as ``factory(settings=...)`` where ``settings`` is
    a :class:`graph_settings.GraphSettings` or ``None``, and must return a
    new, empty :class:`graph.Graph`. The graph classes themselves satisfy
    this, so they are registered directly.
    """

    def __init__(self) -> None:
        self._factories: MutableMapping[str, GraphFactory] = {}

    def register(self, name: str, factory: GraphFactory) -> None:
        """Make ``factory`` selectable as ``name``; names cannot be rebound.

        Raises :class:`ValueError` if ``name`` already has a factory.
        """

        if name in self._factories:
            raise ValueError(f"Graph representation '{name}' is already registered.")
        self._factories[name] = factory

    def get(self, name: str) -> GraphFactory:
        """Factory for ``name``; :class:`KeyError` for an unknown representation."""

        return self._factories[name]

    def all(self) -> Mapping[str, GraphFactory]:
        """Snapshot of name -> factory; editing it leaves the registry alone."""

        return dict(self._factories)


REGISTRY = GraphRegistry()
REGISTRY.register("edges", EdgeSetGraph)
REGISTRY.register("vertices", VertexIndexedGraph)


def empty_graph(
    name: str = DEFAULT_REPRESENTATION, settings: Optional[GraphSettings] = None
) -> Graph:
    """Build a new empty graph of the representation registered as ``name``."""
    return REGISTRY.get(name)(settings=settings)
