import logging
import random
from pathlib import Path
from typing import List, Tuple

import pytest

from eulerian.graph import Graph, build_graph


@pytest.fixture(autouse=True)
def restore_logging():
    '''Drop handlers installed by configure_logging once a test is over.'''
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if type(h) is logging.StreamHandler and h not in handlers:
            root.removeHandler(h)
    root.setLevel(level)


@pytest.fixture
def instance_file(tmp_path: Path):
    '''Write an instance file and return its path.'''
    def _write(text: str, name: str = "graph.txt") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


def ids(graph: Graph, indices: List[int]) -> List[int]:
    return [graph.nodes[i].id for i in indices]


# two triangles sharing node 3
BOWTIE_EDGES = [(1, 2), (2, 3), (3, 1), (3, 4), (4, 5), (5, 3)]


def bowtie() -> Graph:
    return build_graph(BOWTIE_EDGES)


def random_walk_edges(rng: random.Random, n_nodes: int, length: int, closed: bool) -> List[Tuple[int, int]]:
    '''
    Edges of a random walk over nodes 1..n_nodes. A closed walk gives a
    connected graph with even degrees, an open walk between two distinct
    nodes gives a connected graph with exactly those two odd.
    '''
    walk = [rng.randint(1, n_nodes)]
    for _ in range(length - 1):
        walk.append(rng.randint(1, n_nodes))
    if closed:
        walk.append(walk[0])
    else:
        end = rng.randint(1, n_nodes)
        while end == walk[0]:
            end = rng.randint(1, n_nodes)
        walk.append(end)
    edges = list(zip(walk, walk[1:]))
    rng.shuffle(edges)
    return edges
