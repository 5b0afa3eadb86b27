"""
Shared fixtures: every contract test runs once per graph representation.
"""

import pytest

from edge_set_graph import EdgeSetGraph
from vertex_indexed_graph import VertexIndexedGraph

REPRESENTATIONS = [EdgeSetGraph, VertexIndexedGraph]


@pytest.fixture(params=REPRESENTATIONS, ids=lambda cls: cls.__name__)
def empty_instance(request):
    """A new empty graph of the representation under test."""
    return request.param()
