from collections import deque
from typing import List, Optional

import bittensor as bt
from CliqueCover.graph.model import Graph, check_undirected
from pydantic import BaseModel


class BipartitePartition(BaseModel):
    left_mask: list[bool]
    right_mask: list[bool]

    @property
    def left_nodes(self) -> List[int]:
        return [i for i, inside in enumerate(self.left_mask) if inside]

    @property
    def right_nodes(self) -> List[int]:
        return [i for i, inside in enumerate(self.right_mask) if inside]


def partition_bipartite(graph: Optional[Graph]) -> Optional[BipartitePartition]:
    """
    2-colour the graph breadth-first, one component at a time in index order.

    Each component root goes to the left side, so isolated vertices end up
    on the left. Returns None if an edge joins two vertices of the same
    colour.
    """
    if not check_undirected(graph, "partition_bipartite"):
        return None
    n = graph.node_count
    # None = uncoloured, True = left, False = right
    color: List[Optional[bool]] = [None] * n
    for root in range(n):
        if color[root] is not None:
            continue
        color[root] = True
        queue = deque([root])
        while queue:
            u = queue.popleft()
            row = graph.adjacency[u]
            for v in range(n):
                if not row[v]:
                    continue
                if color[v] is None:
                    color[v] = not color[u]
                    queue.append(v)
                elif color[v] == color[u]:
                    bt.logging.debug(f"Graph is not bipartite: edge ({u},{v}) joins one side")
                    return None
    left_mask = [c is not False for c in color]
    right_mask = [c is False for c in color]
    return BipartitePartition(left_mask=left_mask, right_mask=right_mask)


def is_bipartite(graph: Optional[Graph]) -> bool:
    return partition_bipartite(graph) is not None
