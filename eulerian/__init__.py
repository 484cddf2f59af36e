'''
Eulerian trails and circuits of undirected multigraphs.
'''
from eulerian.errors import (
    EulerianError,
    IncompleteTrailError,
    InputFormatError,
    InternalConsistencyError,
    ResourceExhaustedError,
    WalkStalledError,
)
from eulerian.graph import Graph, build_graph
from eulerian.input import parse_file, parse_text
from eulerian.solver import RunContext, eulerian_trail, solve, solve_graph
from eulerian.validate import CIRCUIT, TRAIL, Verdict, validate_graph

__version__ = "1.0.0"
