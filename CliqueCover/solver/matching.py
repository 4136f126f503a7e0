"""
Maximum bipartite matching by layered augmenting paths (Hopcroft–Karp).

Each phase labels the left vertices with their BFS distance from the free
left vertices, then augments along vertex-disjoint paths that follow those
layers. A phase that sees no free right vertex ends the search; the matching
is then maximum. Runs in O(E·√V) on the bipartite subgraph.
"""

from collections import deque
from typing import List, Optional, Tuple

import bittensor as bt
from CliqueCover.graph.model import Graph
from pydantic import BaseModel


class Matching(BaseModel):
    """
    Positions in `pair_left` / `pair_right` index `left_nodes` / `right_nodes`;
    None marks an unmatched vertex.
    """

    left_nodes: list[int]
    right_nodes: list[int]
    pair_left: list[Optional[int]]
    pair_right: list[Optional[int]]
    size: int

    def edges(self) -> List[Tuple[int, int]]:
        """Matched pairs as (left vertex, right vertex) in original indices."""
        return [
            (self.left_nodes[i], self.right_nodes[j])
            for i, j in enumerate(self.pair_left)
            if j is not None
        ]


class BipartiteMatcher:
    def __init__(self, G: Graph, left_nodes: List[int], right_nodes: List[int]):
        self.G = G
        self.left_nodes = list(left_nodes)
        self.right_nodes = list(right_nodes)
        # Right positions adjacent to each left position, in right order.
        self.adj = [
            [j for j, v in enumerate(self.right_nodes) if G.adjacency[u][v]]
            for u in self.left_nodes
        ]
        self.pair_left: List[Optional[int]] = [None] * len(self.left_nodes)
        self.pair_right: List[Optional[int]] = [None] * len(self.right_nodes)
        self.distance: List[Optional[int]] = [None] * len(self.left_nodes)
        self.phases = 0

    def maximum_matching(self) -> Matching:
        size = 0
        if self.left_nodes and self.right_nodes:
            while self._layer():
                self.phases += 1
                for u in range(len(self.left_nodes)):
                    if self.pair_left[u] is None and self._augment(u):
                        size += 1
        bt.logging.debug(f"Matching of size {size} after {self.phases} phases")
        return Matching(
            left_nodes=self.left_nodes,
            right_nodes=self.right_nodes,
            pair_left=list(self.pair_left),
            pair_right=list(self.pair_right),
            size=size,
        )

    def _layer(self) -> bool:
        """
        BFS from every free left vertex. Returns True if some layer reaches a
        free right vertex, i.e. an augmenting path exists.
        """
        queue = deque()
        for u in range(len(self.left_nodes)):
            if self.pair_left[u] is None:
                self.distance[u] = 0
                queue.append(u)
            else:
                self.distance[u] = None
        found_free = False
        while queue:
            u = queue.popleft()
            for j in self.adj[u]:
                partner = self.pair_right[j]
                if partner is None:
                    found_free = True
                elif self.distance[partner] is None:
                    self.distance[partner] = self.distance[u] + 1
                    queue.append(partner)
        return found_free

    def _augment(self, u: int) -> bool:
        for j in self.adj[u]:
            partner = self.pair_right[j]
            if partner is None or (
                self.distance[partner] == self.distance[u] + 1 and self._augment(partner)
            ):
                self.pair_left[u] = j
                self.pair_right[j] = u
                return True
        # Dead end for the rest of this phase.
        self.distance[u] = None
        return False


def maximum_bipartite_matching(
    graph: Graph, left_nodes: List[int], right_nodes: List[int]
) -> Matching:
    return BipartiteMatcher(graph, left_nodes, right_nodes).maximum_matching()
