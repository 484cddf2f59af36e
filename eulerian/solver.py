# solver.py
'''
One run of the solver: build the graph, validate it, assemble the trail.

All state of a run is held by a RunContext created by ``solve``; nothing is
shared between runs.

    INIT -> VALIDATED -> ROOT_WALK_BUILT -> SPLICING* -> COMPLETE
    INIT -> NO_SOLUTION    (node count, parity or connectivity)
'''
import logging
import time
from typing import Dict, List, Optional, Tuple

from tqdm import tqdm

from eulerian.circuit import CandidateList, build_sub_circuit, root_walk, splice_sub_circuit
from eulerian.errors import IncompleteTrailError, InternalConsistencyError, ResourceExhaustedError
from eulerian.graph import Graph
from eulerian.validate import Verdict, validate_graph

INIT = "init"
VALIDATED = "validated"
NO_SOLUTION = "no_solution"
ROOT_WALK_BUILT = "root_walk_built"
SPLICING = "splicing"
COMPLETE = "complete"

_TRANSITIONS = {
    INIT: (VALIDATED, NO_SOLUTION),
    VALIDATED: (ROOT_WALK_BUILT,),
    ROOT_WALK_BUILT: (SPLICING, COMPLETE),
    SPLICING: (SPLICING, COMPLETE),
}


class RunContext:
    ''' State of a single run.

    Attributes
    ----------
    graph : Graph
        The instance.
    declared_nodes : Optional[int]
        Node count announced by the input, if any.
    verdict : Optional[Verdict]
        Set once the graph was validated.
    candidates : CandidateList
        Nodes queued for further sub-circuits.
    trail : Optional[List[int]]
        Node indices of the trail, None while unknown or if there is none.
    state : str
        Current step of the run.
    reason : Optional[str]
        Why the instance has no solution.
    stats, timings_sec : Dict
        Bookkeeping counters and step timings.
    '''

    def __init__(self, graph: Optional[Graph] = None, declared_nodes: Optional[int] = None):
        self.graph = graph if graph is not None else Graph()
        self.declared_nodes = declared_nodes
        self.verdict: Optional[Verdict] = None
        self.candidates = CandidateList()
        self.trail: Optional[List[int]] = None
        self.state = INIT
        self.reason: Optional[str] = None
        self.stats: Dict[str, int] = {"sub_circuits_built": 0, "sub_circuits_spliced": 0}
        self.timings_sec: Dict[str, float] = {}

    def advance(self, state: str):
        if state not in _TRANSITIONS.get(self.state, ()):
            raise InternalConsistencyError(f"invalid run transition {self.state} -> {state}")
        logging.debug(f"Run state: {self.state} -> {state}")
        self.state = state

    def reject(self, reason: str):
        self.reason = reason
        self.advance(NO_SOLUTION)
        logging.warning(f"This instance is not solvable: {reason}")

    @property
    def solved(self) -> bool:
        return self.state == COMPLETE

    @property
    def required_visits(self) -> int:
        return self.verdict.required_visits if self.verdict else 0

    def trail_ids(self) -> Optional[List[int]]:
        '''
        The trail as node identifiers, or None if there is no solution.
        '''
        if self.trail is None:
            return None
        return [self.graph.nodes[i].id for i in self.trail]

    def collect_stats(self) -> Dict[str, int]:
        '''
        Counters of the objects the run created.
        '''
        return {
            "nodes": self.graph.node_count,
            "adjacency_entries": sum(len(n.adj) for n in self.graph.nodes),
            "edges": self.graph.edge_count,
            "candidates_registered": self.candidates.registered,
            "candidates_pending": len(self.candidates),
            **self.stats,
        }

    def meta(self) -> Dict:
        '''
        Summary of the run, in the shape written by the exporter.
        '''
        verdict = self.verdict
        return {
            "mode": verdict.kind if verdict and verdict.solvable else None,
            "solved": self.solved,
            "reason": self.reason,
            "declared_nodes": self.declared_nodes,
            "nodes": self.graph.node_count,
            "edges": self.graph.edge_count,
            "k": verdict.odd_count if verdict else None,
            "required_visits": self.required_visits,
            "trail_length": len(self.trail) if self.trail is not None else 0,
            "sub_circuits_spliced": self.stats["sub_circuits_spliced"],
            "timings_sec": dict(self.timings_sec),
        }


# ============================================================
# Steps
# ============================================================
def check_node_count(ctx: RunContext) -> bool:
    '''
    Compare the declared node count with the nodes actually found.
    Any mismatch means the instance is not solvable.
    '''
    declared, found = ctx.declared_nodes, ctx.graph.node_count
    if declared is None or declared == found:
        return True
    logging.warning(f"Warning, bad node number: {found} nodes found although {declared} nodes specified")
    ctx.reject(f"{declared} nodes declared but {found} found")
    return False


def validate(ctx: RunContext) -> bool:
    t0 = time.time()
    ctx.verdict = validate_graph(ctx.graph)
    ctx.timings_sec["validate_sec"] = round(time.time() - t0, 3)
    if not ctx.verdict.solvable:
        ctx.reject(ctx.verdict.reason)
        return False
    ctx.advance(VALIDATED)
    logging.info(f"Instance type: {ctx.verdict.kind} ({ctx.verdict.odd_count} odd-degree nodes)")
    return True


def assemble(ctx: RunContext, progress: bool = False):
    '''
    Root walk, then splice sub-circuits rooted at the queued candidates until
    the trail holds every edge.
    '''
    graph, required = ctx.graph, ctx.required_visits
    t0 = time.time()
    trail = root_walk(graph, ctx.verdict, ctx.candidates)
    ctx.stats["sub_circuits_built"] += 1
    ctx.trail = trail
    ctx.advance(ROOT_WALK_BUILT)
    logging.info(f"Root walk: {len(trail)}/{required} node visits")

    if len(trail) < required:
        with tqdm(total=required, initial=len(trail), desc="Splicing", disable=not progress) as bar:
            while len(trail) < required:
                idx = ctx.candidates.pop()
                if idx is None:
                    raise IncompleteTrailError(len(trail), required)
                if graph.nodes[idx].remaining == 0:
                    continue
                sub = build_sub_circuit(graph, idx, None, ctx.candidates)
                ctx.stats["sub_circuits_built"] += 1
                ctx.advance(SPLICING)
                at = splice_sub_circuit(trail, sub)
                ctx.stats["sub_circuits_spliced"] += 1
                bar.update(len(sub) - 1)
                logging.debug(f"Spliced {len(sub)}-visit sub-circuit at node {graph.nodes[idx].id} (position {at})")
    ctx.timings_sec["assemble_sec"] = round(time.time() - t0, 3)
    ctx.advance(COMPLETE)


# ============================================================
# Entry points
# ============================================================
def solve_graph(graph: Graph, declared_nodes: Optional[int] = None, progress: bool = False) -> RunContext:
    '''
    Run the whole algorithm on an already built graph.
    Returns the RunContext; ``ctx.trail_ids()`` is None if there is no solution.
    '''
    ctx = RunContext(graph, declared_nodes)
    try:
        if check_node_count(ctx) and validate(ctx):
            assemble(ctx, progress=progress)
    except MemoryError as exc:
        raise ResourceExhaustedError("Out of memory.") from exc
    return ctx


def solve(edges: List[Tuple[int, int]], declared_nodes: Optional[int] = None,
          progress: bool = False) -> RunContext:
    '''
    Build the graph from (u, v) identifier pairs and run the algorithm.
    '''
    t0 = time.time()
    try:
        graph = Graph()
        for u, v in edges:
            graph.add_edge(u, v)
    except MemoryError as exc:
        raise ResourceExhaustedError("Out of memory.") from exc
    build_sec = round(time.time() - t0, 3)
    logging.info(f"Graph: {graph.node_count} nodes, {graph.edge_count} edges")
    ctx = solve_graph(graph, declared_nodes, progress=progress)
    ctx.timings_sec = {"build_graph_sec": build_sec, **ctx.timings_sec}
    return ctx


def eulerian_trail(edges: List[Tuple[int, int]]) -> Optional[List[int]]:
    '''
    Eulerian circuit or trail of the multigraph ``edges`` as node identifiers,
    or None if there is none.
    '''
    return solve(edges).trail_ids()
