from typing import List, Sequence

import numpy as np
from CliqueCover.graph.model import Graph


def _valid_members(graph: Graph, nodes: Sequence[int]) -> bool:
    node_set = set(nodes)
    # Duplicates or out-of-range nodes
    if len(node_set) != len(nodes):
        return False
    return node_set.issubset(range(graph.node_count))


def _induced(graph: Graph, nodes: Sequence[int]) -> np.ndarray:
    index = np.array(list(nodes), dtype=int)
    return graph.to_numpy()[np.ix_(index, index)]


def is_clique(graph: Graph, nodes: Sequence[int]) -> bool:
    """
    True if every pair of `nodes` is adjacent. The empty set only counts on
    a graph without vertices.
    """
    if len(nodes) == 0:
        return graph.node_count == 0
    if not _valid_members(graph, nodes):
        return False
    sub = _induced(graph, nodes)
    off_diagonal = ~np.eye(len(nodes), dtype=bool)
    return bool(np.all(sub[off_diagonal]))


def is_maximal_clique(graph: Graph, nodes: Sequence[int]) -> bool:
    if not is_clique(graph, nodes):
        return False
    if len(nodes) == 0:
        return True
    adjacency = graph.to_numpy()
    outside = np.ones(graph.node_count, dtype=bool)
    members = np.array(list(nodes), dtype=int)
    outside[members] = False
    # A vertex adjacent to every member would extend the clique.
    extends = np.all(adjacency[:, members], axis=1) & outside
    return not bool(np.any(extends))


def is_independent_set(graph: Graph, nodes: Sequence[int]) -> bool:
    if len(nodes) == 0:
        return graph.node_count == 0
    if not _valid_members(graph, nodes):
        return False
    return not bool(np.any(_induced(graph, nodes)))


def is_vertex_cover(graph: Graph, nodes: Sequence[int]) -> bool:
    """True if every edge has at least one endpoint in `nodes`."""
    if not _valid_members(graph, nodes):
        return False
    adjacency = graph.to_numpy()
    if adjacency.size == 0:
        return True
    inside = np.zeros(graph.node_count, dtype=bool)
    inside[np.array(list(nodes), dtype=int)] = True
    uncovered = adjacency & ~inside[:, None] & ~inside[None, :]
    return not bool(np.any(uncovered))


class CoverScoreCalculator:
    def __init__(self, graph: Graph, responses: List[List[int]]):
        """
        Initializes the scoring calculator.

        Args:
        - graph (Graph): The graph to validate against.
        - responses (List[List[int]]): Candidate vertex covers, e.g. one per strategy.
        """
        self.graph = graph
        self.responses = responses

    def validity(self) -> np.ndarray:
        return np.array(
            [1 if is_vertex_cover(self.graph, r) else 0 for r in self.responses],
            dtype=int,
        )

    def optimality(self) -> tuple[np.ndarray, np.ndarray]:
        """
        Ratio of the smallest valid cover to each response, and that ratio
        normalised by its maximum. Invalid responses score 0.
        """
        val = self.validity()
        zeros = np.zeros(len(self.responses))
        if len(self.responses) == 0 or not np.any(val):
            return zeros, zeros

        size = np.array([len(r) for r in self.responses], dtype=float)
        best = np.min(size[val == 1])
        ratio = np.zeros(len(self.responses))
        for i, valid in enumerate(val):
            if valid:
                ratio[i] = 1.0 if size[i] == 0 else best / size[i]

        max_ratio = np.max(ratio)
        rel = ratio / max_ratio if max_ratio > 0 else ratio
        return rel, ratio

    def get_scores(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        rel, ratio = self.optimality()
        return self.validity(), rel, ratio
