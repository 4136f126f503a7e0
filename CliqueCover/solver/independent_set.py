from typing import Optional

import bittensor as bt
from CliqueCover.graph.model import Graph, check_undirected
from CliqueCover.graph.transform import complement_graph
from CliqueCover.graph.vertex_set import VertexSet
from CliqueCover.solver.clique_solver import find_maximum_clique


def maximum_independent_set(graph: Optional[Graph]) -> Optional[VertexSet]:
    """
    Maximum independent set, found as a maximum clique of the complement.
    """
    if not check_undirected(graph, "maximum_independent_set"):
        return None
    complement = complement_graph(graph)
    independent = find_maximum_clique(complement)
    bt.logging.debug(f"Maximum independent set of size {len(independent)}")
    return independent


def minimum_vertex_cover(graph: Optional[Graph]) -> Optional[VertexSet]:
    """
    Minimum vertex cover as V minus a maximum independent set.

    Any edge with both endpoints outside the cover would join two members of
    the independent set.
    """
    if not check_undirected(graph, "minimum_vertex_cover"):
        return None
    independent = maximum_independent_set(graph)
    if independent is None:
        return None
    in_set = [False] * graph.node_count
    for v in independent:
        if 0 <= v < graph.node_count:
            in_set[v] = True
    cover = VertexSet(graph.node_count)
    for v in range(graph.node_count):
        if not in_set[v]:
            cover.add(v)
    independent.destroy()
    return cover
