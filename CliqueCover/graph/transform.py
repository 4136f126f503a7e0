from typing import Optional

from CliqueCover.graph.model import Graph, check_undirected


def complement_graph(graph: Optional[Graph]) -> Optional[Graph]:
    """
    Edge complement of an undirected graph, without self loops.

    Vertex indices are preserved, so cliques of the complement are
    independent sets of `graph` under the same numbering. Returns None for
    directed graphs.
    """
    if not check_undirected(graph, "complement_graph"):
        return None
    n = graph.node_count
    adjacency = [
        [i != j and not graph.adjacency[i][j] for j in range(n)] for i in range(n)
    ]
    return Graph(adjacency=adjacency, is_directed=False, allow_bidirectional=False)
