# circuit.py
'''
Greedy sub-circuit construction and trail assembly.

The root walk goes from the first node back to itself (circuit) or from one
odd node to the other (trail). Every node left with unused edges while a
walk passes through it is queued as a candidate; each candidate then roots a
closed sub-circuit that is spliced into the trail where the candidate first
occurs, until the trail has ``required_visits`` entries.
'''
from collections import deque
from typing import Deque, List, Optional, Set

from eulerian.errors import InternalConsistencyError, WalkStalledError
from eulerian.graph import Graph
from eulerian.validate import CIRCUIT, Verdict


class CandidateList:
    ''' FIFO of nodes that still have unused edges after a walk went through them.

    A node is pending at most once. Taking it off the queue lets a later walk
    register it again.
    '''

    def __init__(self):
        self._queue: Deque[int] = deque()
        self._pending: Set[int] = set()
        self.registered = 0

    def __len__(self) -> int:
        return len(self._queue)

    def __contains__(self, idx: int) -> bool:
        return idx in self._pending

    def __iter__(self):
        return iter(self._queue)

    def register(self, graph: Graph, idx: int) -> bool:
        '''
        Queue ``idx`` if more than one of its edges is unused and it is not
        already pending. Returns True if it was queued.
        '''
        if graph.nodes[idx].remaining <= 1 or idx in self._pending:
            return False
        self._queue.append(idx)
        self._pending.add(idx)
        self.registered += 1
        return True

    def pop(self) -> Optional[int]:
        if not self._queue:
            return None
        idx = self._queue.popleft()
        self._pending.discard(idx)
        return idx


def build_sub_circuit(graph: Graph, start: int, end: Optional[int] = None,
                      candidates: Optional[CandidateList] = None) -> List[int]:
    '''
    Walk unused edges from ``start`` until ``end`` (default ``start``) is reached.

    At every node the first adjacency entry, in insertion order, whose edge is
    unused and whose neighbour has remaining degree is taken; the scan then
    restarts at the neighbour. Every node reached is offered to
    ``candidates``. Raises WalkStalledError if a node has no usable entry
    before ``end`` is reached.

    Returns the node indices of the walk, ``start`` and ``end`` included.
    '''
    if end is None:
        end = start
    if candidates is None:
        candidates = CandidateList()
    nodes = graph.nodes

    sub = [start]
    if nodes[start].remaining > 2:
        candidates.register(graph, start)

    cur = start
    while True:
        for entry in nodes[cur].adj:
            if not graph.is_used(entry) and nodes[entry.neighbor].remaining > 0:
                break
        else:
            raise WalkStalledError(nodes[start].id, nodes[end].id, nodes[cur].id)
        nxt = entry.neighbor
        sub.append(nxt)
        graph.mark_used(cur, entry)
        candidates.register(graph, nxt)
        if nxt == end:
            return sub
        cur = nxt


def splice_sub_circuit(trail: List[int], sub: List[int]) -> int:
    '''
    Insert the closed walk ``sub`` into ``trail`` right after the first
    occurrence of its root. The duplicate root at the head of ``sub`` is
    dropped, so the trail grows by ``len(sub) - 1``.

    Returns the position of the root in the trail.
    '''
    try:
        at = trail.index(sub[0])
    except ValueError:
        raise InternalConsistencyError(f"sub-circuit root {sub[0]} does not occur in the trail") from None
    trail[at + 1:at + 1] = sub[1:]
    return at


def root_walk(graph: Graph, verdict: Verdict, candidates: CandidateList) -> List[int]:
    '''
    First walk of a run: a closed walk from the first node for a circuit,
    otherwise the walk between the two odd nodes.
    '''
    if verdict.kind == CIRCUIT:
        if not graph.edges:
            return [0]
        return build_sub_circuit(graph, 0, None, candidates)
    s, t = verdict.endpoints
    return build_sub_circuit(graph, s, t, candidates)

