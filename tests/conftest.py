import itertools

import networkx as nx
import pytest
from networkx.algorithms import bipartite

from CliqueCover.graph.model import Graph


def brute_force_cliques(graph: Graph) -> set[frozenset[int]]:
    """Every non-empty clique, by checking all subsets."""
    n = graph.node_count
    cliques = set()
    for size in range(1, n + 1):
        for nodes in itertools.combinations(range(n), size):
            if all(graph.adjacency[u][v] for u, v in itertools.combinations(nodes, 2)):
                cliques.add(frozenset(nodes))
    return cliques


def brute_force_cover_size(graph: Graph) -> int:
    n = graph.node_count
    edges = graph.edges()
    for size in range(n + 1):
        for nodes in itertools.combinations(range(n), size):
            chosen = set(nodes)
            if all(u in chosen or v in chosen for u, v in edges):
                return size
    return n


def covers_every_edge(graph: Graph, nodes) -> bool:
    chosen = set(nodes)
    return all(u in chosen or v in chosen for u, v in graph.edges())


@pytest.fixture
def four_cycle() -> Graph:
    return Graph.from_edges(4, [(0, 1), (1, 2), (2, 3), (3, 0)])


@pytest.fixture
def k4() -> Graph:
    return Graph.from_edges(4, list(itertools.combinations(range(4), 2)))


@pytest.fixture
def empty5() -> Graph:
    return Graph.from_edges(5, [])


@pytest.fixture
def star() -> Graph:
    return Graph.from_edges(4, [(0, 1), (0, 2), (0, 3)])


@pytest.fixture
def no_vertices() -> Graph:
    return Graph(adjacency=[])


@pytest.fixture
def directed() -> Graph:
    return Graph.from_edges(3, [(0, 1), (1, 2)], directed=True)


@pytest.fixture
def random_graphs() -> list[Graph]:
    graphs = []
    for seed in range(12):
        n = 1 + seed % 9
        p = (0.2, 0.5, 0.8)[seed % 3]
        graphs.append(Graph.from_networkx(nx.gnp_random_graph(n, p, seed=seed)))
    return graphs


@pytest.fixture
def random_bipartite_graphs() -> list[Graph]:
    graphs = []
    for seed in range(10):
        a = 1 + seed % 4
        b = 2 + seed % 5
        graphs.append(
            Graph.from_networkx(bipartite.random_graph(a, b, 0.4, seed=seed))
        )
    return graphs
