import networkx as nx

from eulerian.check import edges_from_trail, has_eulerian_walk, verify_trail
from eulerian.graph import build_graph


def test_valid_trail_passes():
    g = build_graph([(1, 2), (2, 3)])
    assert verify_trail(g, [3, 2, 1]) == (True, "ok")


def test_repeated_edge_fails():
    g = build_graph([(1, 2), (2, 3), (3, 1)])
    ok, msg = verify_trail(g, [1, 2, 1, 3])
    assert not ok
    assert "2-1" in msg


def test_missing_edges_fail():
    g = build_graph([(1, 2), (2, 1), (1, 3), (3, 1)])
    ok, msg = verify_trail(g, [1, 2, 1])
    assert not ok
    assert msg == "2 edge(s) never walked"


def test_self_loop_trail_and_empty_trail():
    g = build_graph([(1, 1)])
    assert verify_trail(g, [1, 1]) == (True, "ok")
    assert not verify_trail(g, [])[0]


def test_has_eulerian_walk():
    assert not has_eulerian_walk(nx.MultiGraph())
    assert has_eulerian_walk(build_graph([(1, 2), (2, 3)]).to_networkx())
    assert not has_eulerian_walk(build_graph([(1, 2), (3, 4)]).to_networkx())


def test_edges_from_trail():
    assert edges_from_trail([1, 2, 3]) == [(1, 2), (2, 3)]
    assert edges_from_trail([]) == []


def test_open_trail_between_odd_nodes_passes():
    g = build_graph([(1, 2), (2, 3), (3, 1), (1, 4)])
    assert verify_trail(g, [4, 1, 2, 3, 1]) == (True, "ok")
    assert verify_trail(g, [1, 2, 3, 1, 4]) == (True, "ok")
    ok, msg = verify_trail(g, [2, 3, 1, 4])
    assert not ok
    assert msg == "1 edge(s) never walked"
