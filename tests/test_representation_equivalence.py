"""
Both representations must agree on every observation for the same script.
"""

import pytest

from edge_set_graph import EdgeSetGraph
from vertex_indexed_graph import VertexIndexedGraph

LABELS = ["A", "B", "C", "D"]

SCRIPTS = {
    "build_and_update": [
        ("add", "A"),
        ("add", "B"),
        ("set", "A", "B", 5),
        ("set", "A", "B", 10),
        ("set", "B", "C", 2),
        ("add", "A"),
    ],
    "delete_by_zero": [
        ("set", "A", "B", 5),
        ("set", "A", "B", 0),
        ("set", "A", "B", 0),
        ("set", "C", "D", 0),
        ("set", "B", "A", 1),
    ],
    "cascade": [
        ("set", "A", "B", 1),
        ("set", "B", "C", 2),
        ("set", "C", "A", 3),
        ("set", "D", "B", 4),
        ("remove", "B"),
        ("remove", "B"),
        ("add", "B"),
        ("set", "B", "B", 7),
    ],
    "remove_everything": [
        ("set", "A", "B", 1),
        ("set", "B", "A", 1),
        ("remove", "A"),
        ("remove", "B"),
        ("remove", "C"),
    ],
}


def _run(graph, script):
    """Apply script to graph and return every value the graph produced."""
    results = []
    for op, *args in script:
        results.append(getattr(graph, op)(*args))
    return results


def _observe(graph):
    return (
        graph.vertices(),
        {label: graph.sources(label) for label in LABELS},
        {label: graph.targets(label) for label in LABELS},
    )


@pytest.mark.parametrize("script", list(SCRIPTS.values()), ids=list(SCRIPTS))
def test_representations_agree(script):
    edges = EdgeSetGraph()
    vertices = VertexIndexedGraph()

    assert _run(edges, script) == _run(vertices, script)
    assert _observe(edges) == _observe(vertices)
    assert repr(edges).split("(")[1] == repr(vertices).split("(")[1]
