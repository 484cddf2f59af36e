# graph.py
'''
Undirected multigraph on integer node identifiers.

Nodes live in an arena (``Graph.nodes``) and are addressed by their index,
adjacency entries store indices, and the "used" flag of an edge is kept on
the edge itself so both of its entries always agree.
'''
from typing import Dict, Iterator, List, Optional, Tuple

import networkx as nx

from eulerian.errors import EdgeAlreadyUsedError


class Edge:
    ''' One undirected edge between two node indices.

    Attributes
    ----------
    u, v : int
        Arena indices of the endpoints (equal for a self-loop).
    used : bool
        Whether a walk already consumed this edge.
    '''
    __slots__ = ("u", "v", "used")

    def __init__(self, u: int, v: int):
        self.u = u
        self.v = v
        self.used = False

    def is_loop(self) -> bool:
        return self.u == self.v


class AdjEntry:
    ''' Adjacency entry: the neighbour reached and the edge walked to reach it. '''
    __slots__ = ("neighbor", "edge")

    def __init__(self, neighbor: int, edge: int):
        self.neighbor = neighbor
        self.edge = edge


class Node:
    ''' Node record.

    Attributes
    ----------
    id : int
        Caller supplied identifier.
    degree : int
        Incident edge endpoints, a self-loop counts twice.
    remaining : int
        Degree not yet consumed by a walk. Set to ``degree`` by the
        connectivity pass of the validator.
    visited : bool
        Set by the connectivity pass.
    adj : List[AdjEntry]
        Entries in the order the edges were added.
    '''
    __slots__ = ("id", "degree", "remaining", "visited", "adj")

    def __init__(self, node_id: int):
        self.id = node_id
        self.degree = 0
        self.remaining = 0
        self.visited = False
        self.adj: List[AdjEntry] = []

    def __repr__(self):
        return f"Node({self.id}, degree={self.degree}, remaining={self.remaining})"


class Graph:
    ''' Undirected multigraph with self-loops.

    Attributes
    ----------
    nodes : List[Node]
        Arena of nodes, in order of first appearance.
    edges : List[Edge]
        Every edge, in input order.
    odd_nodes : List[int]
        Indices of odd-degree nodes in discovery order, filled by the validator.

    Methods
    -------
    get_or_create_node(node_id) -> int
        Index of the node with that identifier, created on first use.
    add_edge(id1, id2) -> int
        Adds an undirected edge and returns its index.
    mark_used(u, entry)
        Consumes the edge behind ``entry`` walked from node ``u``.
    '''

    def __init__(self):
        self.nodes: List[Node] = []
        self.edges: List[Edge] = []
        self.odd_nodes: List[int] = []
        self._index: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def find(self, node_id: int) -> Optional[int]:
        return self._index.get(node_id)

    def node(self, node_id: int) -> Node:
        '''
        Node record for identifier ``node_id``. Raises KeyError if unknown.
        '''
        return self.nodes[self._index[node_id]]

    def get_or_create_node(self, node_id: int) -> int:
        '''
        Return the arena index of ``node_id``, creating an isolated node
        with degree 0 if the identifier was never seen.
        '''
        idx = self._index.get(node_id)
        if idx is None:
            idx = len(self.nodes)
            self.nodes.append(Node(node_id))
            self._index[node_id] = idx
        return idx

    def add_edge(self, id1: int, id2: int) -> int:
        '''
        Add an undirected edge between ``id1`` and ``id2``.
        A self-loop gets a single adjacency entry and adds 2 to the degree.
        '''
        a = self.get_or_create_node(id1)
        b = self.get_or_create_node(id2)
        e = len(self.edges)
        edge = Edge(a, b)
        self.edges.append(edge)
        if edge.is_loop():
            self.nodes[a].adj.append(AdjEntry(a, e))
            self.nodes[a].degree += 2
        else:
            self.nodes[a].adj.append(AdjEntry(b, e))
            self.nodes[b].adj.append(AdjEntry(a, e))
            self.nodes[a].degree += 1
            self.nodes[b].degree += 1
        return e

    def is_used(self, entry: AdjEntry) -> bool:
        return self.edges[entry.edge].used

    def mark_used(self, u: int, entry: AdjEntry):
        '''
        Mark the edge of ``entry`` used in both directions and take it off the
        remaining degree of both endpoints (twice for a self-loop).
        '''
        edge = self.edges[entry.edge]
        if edge.used:
            raise EdgeAlreadyUsedError(
                f"edge {self.nodes[u].id}-{self.nodes[entry.neighbor].id} consumed twice"
            )
        edge.used = True
        self.nodes[u].remaining -= 1
        self.nodes[entry.neighbor].remaining -= 1

    def degrees(self) -> Iterator[Tuple[int, int]]:
        for n in self.nodes:
            yield n.id, n.degree

    def adjacency_ids(self, idx: int) -> List[int]:
        return [self.nodes[a.neighbor].id for a in self.nodes[idx].adj]

    # ============================================================
    # Diagnostics
    # ============================================================
    def describe_nodes(self) -> str:
        return "Node list: " + " ".join(f"{n.id} ({n.degree})." for n in self.nodes)

    def describe_adjacency(self) -> List[str]:
        lines = []
        for i, n in enumerate(self.nodes):
            lines.append(f"{n.id} : " + "".join(f"{v} -> " for v in self.adjacency_ids(i)))
        return lines

    def to_networkx(self) -> nx.MultiGraph:
        '''
        Same nodes and edges as a networkx MultiGraph (edge keys are the
        edge indices of this graph).
        '''
        G = nx.MultiGraph()
        for n in self.nodes:
            G.add_node(n.id, degree=n.degree)
        for e, edge in enumerate(self.edges):
            G.add_edge(self.nodes[edge.u].id, self.nodes[edge.v].id, key=e)
        return G


def build_graph(edges: List[Tuple[int, int]]) -> Graph:
    '''
    Build a Graph from (u, v) identifier pairs, in order.
    '''
    g = Graph()
    for u, v in edges:
        g.add_edge(u, v)
    return g
