from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import bittensor as bt
from CliqueCover.graph.model import Graph, check_undirected
from CliqueCover.graph.vertex_set import VertexSet
from CliqueCover.solver.bipartite import partition_bipartite
from CliqueCover.solver.independent_set import minimum_vertex_cover
from CliqueCover.solver.matching import Matching, maximum_bipartite_matching


class VertexCoverMethod(str, Enum):
    EXACT = "exact"
    KONIG = "konig"
    APPROX = "approx"


@dataclass(frozen=True)
class Left:
    index: int


@dataclass(frozen=True)
class Right:
    index: int


def vertex_cover_exact_via_mis(graph: Optional[Graph]) -> Optional[VertexSet]:
    """Optimal cover as the complement of a maximum independent set. Exponential."""
    if not check_undirected(graph, "vertex_cover_exact_via_mis"):
        return None
    return minimum_vertex_cover(graph)


def vertex_cover_approx(graph: Optional[Graph]) -> Optional[VertexSet]:
    """
    Endpoints of a greedy maximal matching.

    No edge is left between two unmatched vertices, so every edge is covered,
    and any cover needs one vertex per matched edge, so the result is at most
    twice the optimum.
    """
    if not check_undirected(graph, "vertex_cover_approx"):
        return None
    n = graph.node_count
    matched = [False] * n
    cover = VertexSet(n)
    for u in range(n):
        if matched[u]:
            continue
        row = graph.adjacency[u]
        for v in range(n):
            if v != u and row[v] and not matched[v]:
                matched[u] = matched[v] = True
                cover.add(u)
                cover.add(v)
                break
    return cover


def cover_from_matching(graph: Graph, matching: Matching) -> VertexSet:
    """
    König construction of a minimum cover from a maximum matching.

    Alternating search from the free left vertices: left to right along
    non-matching edges, right to left along matching edges. The cover is
    the unvisited left vertices plus the visited right vertices.
    """
    left_nodes = matching.left_nodes
    right_nodes = matching.right_nodes
    visited_left = [False] * len(left_nodes)
    visited_right = [False] * len(right_nodes)

    queue = deque()
    for i in range(len(left_nodes)):
        if matching.pair_left[i] is None:
            visited_left[i] = True
            queue.append(Left(i))

    while queue:
        node = queue.popleft()
        if isinstance(node, Left):
            u = left_nodes[node.index]
            for j, v in enumerate(right_nodes):
                if not graph.adjacency[u][v] or visited_right[j]:
                    continue
                if matching.pair_left[node.index] != j:
                    visited_right[j] = True
                    queue.append(Right(j))
        else:
            partner = matching.pair_right[node.index]
            if partner is not None and not visited_left[partner]:
                visited_left[partner] = True
                queue.append(Left(partner))

    cover = VertexSet(graph.node_count)
    for i, v in enumerate(left_nodes):
        if not visited_left[i]:
            cover.add(v)
    for j, v in enumerate(right_nodes):
        if visited_right[j]:
            cover.add(v)
    return cover


def vertex_cover_bipartite_konig(graph: Optional[Graph]) -> Optional[VertexSet]:
    """
    Minimum cover of a bipartite graph via maximum matching and König's
    theorem. Returns None if the graph is not bipartite.
    """
    if not check_undirected(graph, "vertex_cover_bipartite_konig"):
        return None
    partition = partition_bipartite(graph)
    if partition is None:
        return None
    matching = maximum_bipartite_matching(
        graph, partition.left_nodes, partition.right_nodes
    )
    cover = cover_from_matching(graph, matching)
    bt.logging.debug(f"König cover of size {len(cover)}, matching size {matching.size}")
    return cover


def find_vertex_cover(
    graph: Optional[Graph], method: VertexCoverMethod = VertexCoverMethod.EXACT
) -> Optional[VertexSet]:
    method = VertexCoverMethod(method)
    if method == VertexCoverMethod.EXACT:
        return vertex_cover_exact_via_mis(graph)
    if method == VertexCoverMethod.KONIG:
        return vertex_cover_bipartite_konig(graph)
    return vertex_cover_approx(graph)
