# validate.py
'''
Feasibility checks run before any walk is built: degree parity and
connectivity.
'''
import logging
from typing import List, Optional, Tuple

from eulerian.graph import Graph

CIRCUIT = "circuit"
TRAIL = "trail"


class Verdict:
    ''' Outcome of validating a graph.

    Attributes
    ----------
    solvable : bool
        True iff an Eulerian circuit or trail exists.
    kind : Optional[str]
        ``CIRCUIT`` (no odd node), ``TRAIL`` (two odd nodes) or None.
    endpoints : Optional[Tuple[int, int]]
        Arena indices of the two odd nodes for a trail, in discovery order.
    required_visits : int
        Node visits of a full Eulerian walk, ``sum(degree) // 2 + 1``.
    odd_count, visited_count : int
        Counters gathered by the two passes.
    reason : Optional[str]
        Why the instance is not solvable.
    '''

    def __init__(self, solvable: bool, kind: Optional[str] = None,
                 endpoints: Optional[Tuple[int, int]] = None, required_visits: int = 0,
                 odd_count: int = 0, visited_count: int = 0, reason: Optional[str] = None):
        self.solvable = solvable
        self.kind = kind
        self.endpoints = endpoints
        self.required_visits = required_visits
        self.odd_count = odd_count
        self.visited_count = visited_count
        self.reason = reason

    def __eq__(self, other):
        if not isinstance(other, Verdict):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        if not self.solvable:
            return f"Verdict(unsolvable: {self.reason})"
        return f"Verdict({self.kind}, required_visits={self.required_visits})"


def count_odd_degrees(graph: Graph) -> int:
    '''
    Parity scan: number of nodes with odd degree.
    '''
    return sum(1 for n in graph.nodes if n.degree % 2 == 1)


def connectivity_scan(graph: Graph) -> Tuple[int, int]:
    '''
    Depth-first traversal from the first node.

    Each newly visited node gets ``remaining = degree``, its degree is summed
    into the visit counter and, if odd, it is appended to ``graph.odd_nodes``.
    Visiting order is the preorder of a recursive DFS over adjacency lists.

    Returns (number of visited nodes, required visits).
    '''
    for n in graph.nodes:
        n.visited = False
    graph.odd_nodes = []
    if not graph.nodes:
        return 0, 1

    total, visited = 0, 0

    def visit(idx: int):
        nonlocal total, visited
        node = graph.nodes[idx]
        node.visited = True
        node.remaining = node.degree
        total += node.degree
        if node.degree % 2 == 1:
            graph.odd_nodes.append(idx)
        visited += 1

    visit(0)
    # stack of (node index, position in its adjacency list)
    stack: List[List[int]] = [[0, 0]]
    while stack:
        frame = stack[-1]
        adj = graph.nodes[frame[0]].adj
        if frame[1] >= len(adj):
            stack.pop()
            continue
        v = adj[frame[1]].neighbor
        frame[1] += 1
        if not graph.nodes[v].visited:
            visit(v)
            stack.append([v, 0])
    return visited, total // 2 + 1


def validate_graph(graph: Graph) -> Verdict:
    '''
    Decide whether ``graph`` has an Eulerian circuit or trail.

        0 odd-degree nodes -> circuit.
        2 odd-degree nodes -> trail between them.
        1 or > 2 odd-degree nodes, no node at all, or more than one
        connected component -> no solution.

    A single odd node cannot happen in an undirected graph; it is rejected
    anyway so corrupted degrees never reach the walk.
    '''
    if not graph.nodes:
        return Verdict(False, reason="graph is empty")

    odd = count_odd_degrees(graph)
    logging.debug(f"Parity scan: {odd} odd-degree node(s)")
    if odd == 1 or odd > 2:
        return Verdict(False, odd_count=odd, reason=f"{odd} nodes of odd degree")
    kind = CIRCUIT if odd == 0 else TRAIL

    visited, required = connectivity_scan(graph)
    logging.debug(f"Connectivity scan: visited {visited}/{graph.node_count}, required visits {required}")
    if visited != graph.node_count:
        return Verdict(False, odd_count=odd, visited_count=visited, required_visits=required,
                       reason=f"graph is not connected ({visited} of {graph.node_count} nodes reachable)")

    endpoints = None
    if kind == TRAIL:
        endpoints = (graph.odd_nodes[0], graph.odd_nodes[1])
    return Verdict(True, kind=kind, endpoints=endpoints, required_visits=required,
                   odd_count=odd, visited_count=visited)
