"""
Unit tests specific to EdgeSetGraph.
"""

import pytest

from edge import Edge
from edge_set_graph import EdgeSetGraph
from graph import RepInvariantError
from graph_settings import GraphSettings


def test_str_empty_graph():
    assert str(EdgeSetGraph()) == "Vertices: []\nEdges: []"


def test_str_non_empty_graph():
    g = EdgeSetGraph()
    g.add("C")
    g.set("B", "A", 2)
    g.set("A", "B", 5)
    assert str(g) == "Vertices: [A, B, C]\nEdges: [A -> B (5), B -> A (2)]"


def test_str_independent_of_insertion_order():
    g1 = EdgeSetGraph()
    g1.set("A", "B", 1)
    g1.set("C", "A", 2)

    g2 = EdgeSetGraph()
    g2.set("C", "A", 2)
    g2.set("A", "B", 1)

    assert str(g1) == str(g2)


def test_update_replaces_edge_in_place():
    g = EdgeSetGraph()
    g.set("A", "B", 1)
    g.set("A", "C", 2)
    g.set("A", "B", 7)
    assert g._edges == [Edge("A", "B", 7), Edge("A", "C", 2)]
    assert g._edges[0].weight == 7


def test_zero_weight_is_never_stored():
    g = EdgeSetGraph()
    g.set("A", "B", 3)
    g.set("A", "B", 0)
    g.set("A", "C", 0)
    assert g._edges == []


def test_rep_check_detects_dangling_edge():
    g = EdgeSetGraph(settings=GraphSettings(check_rep=True))
    g._edges.append(Edge("X", "Y", 1))
    with pytest.raises(RepInvariantError):
        g.vertices()


def test_rep_check_detects_duplicate_edge():
    g = EdgeSetGraph(settings=GraphSettings(check_rep=True))
    g.set("A", "B", 1)
    g._edges.append(Edge("A", "B", 2))
    with pytest.raises(RepInvariantError):
        g.targets("A")


def test_rep_check_can_be_disabled():
    g = EdgeSetGraph(settings=GraphSettings(check_rep=False))
    g._edges.append(Edge("X", "Y", 1))
    # no check, so the corrupted rep is visible rather than reported
    assert g.targets("X") == {"Y": 1}


def test_rep_check_detects_dangling_target():
    g = EdgeSetGraph(settings=GraphSettings(check_rep=True))
    g.add("A")
    g._edges.append(Edge("A", "ghost", 1))
    with pytest.raises(RepInvariantError, match="edge target is not a vertex"):
        g.sources("ghost")


def test_rep_check_detects_zero_weight_edge():
    g = EdgeSetGraph(settings=GraphSettings(check_rep=True))
    g.add("A")
    g.add("B")
    g._edges.append(Edge("A", "B", 0))
    with pytest.raises(RepInvariantError, match="non-positive edge weight"):
        g.targets("A")
