from typing import List, Optional, Tuple

import bittensor as bt
import networkx as nx
import numpy as np
from pydantic import BaseModel, field_validator, model_validator


class Graph(BaseModel):
    """
    Adjacency-matrix graph over the vertices 0..n-1. The diagonal is always
    False and an undirected matrix is symmetric.

    The solvers only read `adjacency`; transforms build a new Graph.
    """

    adjacency: list[list[bool]]
    is_directed: bool = False
    allow_bidirectional: bool = False

    @field_validator("adjacency")
    @classmethod
    def _check_square(cls, adjacency: list[list[bool]]) -> list[list[bool]]:
        n = len(adjacency)
        for i, row in enumerate(adjacency):
            if len(row) != n:
                raise ValueError(
                    f"Adjacency row {i} has {len(row)} entries, expected {n}"
                )
        return adjacency

    @model_validator(mode="after")
    def _check_simple(self) -> "Graph":
        adjacency = self.adjacency
        n = len(adjacency)
        for i in range(n):
            if adjacency[i][i]:
                raise ValueError(f"Self loop on vertex {i}")
            if self.is_directed:
                continue
            for j in range(i + 1, n):
                if adjacency[i][j] != adjacency[j][i]:
                    raise ValueError(
                        f"Undirected adjacency is not symmetric at ({i},{j})"
                    )
        return self

    @property
    def node_count(self) -> int:
        return len(self.adjacency)

    def has_edge(self, u: int, v: int) -> bool:
        return self.adjacency[u][v]

    def neighbors(self, v: int) -> List[int]:
        row = self.adjacency[v]
        return [u for u in range(self.node_count) if row[u]]

    def degree(self, v: int) -> int:
        return sum(1 for u in range(self.node_count) if self.adjacency[v][u] and u != v)

    def edges(self) -> List[Tuple[int, int]]:
        n = self.node_count
        if self.is_directed:
            return [
                (u, v) for u in range(n) for v in range(n) if u != v and self.adjacency[u][v]
            ]
        return [
            (u, v) for u in range(n) for v in range(u + 1, n) if self.adjacency[u][v]
        ]

    @staticmethod
    def from_edges(
        n: int, edges: List[Tuple[int, int]], directed: bool = False
    ) -> "Graph":
        adjacency = [[False] * n for _ in range(n)]
        for u, v in edges:
            if u == v:
                continue
            if not (0 <= u < n and 0 <= v < n):
                raise ValueError(f"Edge ({u},{v}) out of bounds for n={n}")
            adjacency[u][v] = True
            if not directed:
                adjacency[v][u] = True
        return Graph(adjacency=adjacency, is_directed=directed)

    @staticmethod
    def from_adjacency_list(adjacency_list: List[List[int]]) -> "Graph":
        n = len(adjacency_list)
        # One-sided entries still produce an undirected edge.
        edges = [(u, v) for u in range(n) for v in adjacency_list[u]]
        return Graph.from_edges(n, edges)

    @staticmethod
    def from_networkx(graph: nx.Graph) -> "Graph":
        """
        Nodes are relabelled 0..n-1 following the graph's node order.
        """
        index = {node: i for i, node in enumerate(graph.nodes)}
        edges = [(index[u], index[v]) for u, v in graph.edges]
        return Graph.from_edges(len(index), edges, directed=graph.is_directed())

    def to_networkx(self) -> nx.Graph:
        graph = nx.DiGraph() if self.is_directed else nx.Graph()
        graph.add_nodes_from(range(self.node_count))
        graph.add_edges_from(self.edges())
        return graph

    def to_numpy(self) -> np.ndarray:
        if self.node_count == 0:
            return np.zeros((0, 0), dtype=bool)
        return np.array(self.adjacency, dtype=bool)


def check_undirected(graph: Optional[Graph], operation: str) -> bool:
    """
    Returns True if `graph` can be handed to the undirected solvers, logging
    the reason otherwise.
    """
    if graph is None:
        bt.logging.warning(f"{operation}: no graph given")
        return False
    if graph.is_directed:
        bt.logging.warning(f"{operation}: directed graphs are not supported")
        return False
    return True
