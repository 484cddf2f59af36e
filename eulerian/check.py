# check.py
'''
Independent checks of a computed trail on a networkx MultiGraph.
'''
from typing import List, Optional, Tuple

import networkx as nx

from eulerian.graph import Graph


def has_eulerian_walk(G: nx.MultiGraph) -> bool:
    '''
    True iff G has an Eulerian circuit or trail, as decided by networkx.
    '''
    if G.number_of_nodes() == 0:
        return False
    return nx.has_eulerian_path(G)


def verify_trail(graph: Graph, trail: Optional[List[int]]) -> Tuple[bool, str]:
    '''
    Check that ``trail`` (node identifiers) walks every edge of ``graph``
    exactly once, and is closed iff every degree is even.

    Returns (ok, message).
    '''
    G = graph.to_networkx()
    if not trail:
        return False, "empty trail"
    if trail[0] not in G:
        return False, f"unknown start node {trail[0]}"
    odd = [u for u, d in G.degree() if d % 2 == 1]
    # consume edges of the copy as the trail walks them
    for u, v in zip(trail, trail[1:]):
        if not G.has_edge(u, v):
            return False, f"edge {u}-{v} is walked more often than it exists"
        G.remove_edge(u, v)
    if G.number_of_edges():
        return False, f"{G.number_of_edges()} edge(s) never walked"
    if not odd and trail[0] != trail[-1]:
        return False, "all degrees are even but the walk is not closed"
    if odd and {trail[0], trail[-1]} != set(odd):
        return False, f"walk ends at {trail[0]} and {trail[-1]}, odd nodes are {sorted(odd)}"
    return True, "ok"


def edges_from_trail(trail: List) -> List[Tuple]:
    '''
    Convert trail of nodes to list of edges (u,v).
    '''
    return [(trail[i], trail[i+1]) for i in range(len(trail)-1)]
