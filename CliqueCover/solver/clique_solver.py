import time
from enum import Enum
from typing import List, Optional

import bittensor as bt
from CliqueCover.graph.model import Graph, check_undirected
from CliqueCover.graph.vertex_set import VertexSet
from pydantic import BaseModel


class CliqueAlgorithm(str, Enum):
    BACKTRACKING = "backtracking"
    BRANCH_AND_BOUND = "branch-and-bound"


class CliqueAnalysis(BaseModel):
    algorithm: CliqueAlgorithm
    maximum_clique_size: int
    clique_count: int
    non_trivial_cliques: list[list[int]]


class CliqueSolver:
    """
    Clique search over an undirected graph using the (C, P, S) protocol:
    C is the clique being grown, P the candidates that extend it and S the
    vertices already explored from this branch.
    """

    def __init__(self, G: Graph):
        self.G = G
        self.n = G.node_count
        self.adj = G.adjacency
        self.nodes_expanded = 0

    def _initial_sets(self):
        C = VertexSet(self.n)
        P = VertexSet(self.n)
        S = VertexSet(self.n)
        for v in range(self.n):
            P.add(v)
        return C, P, S

    def _restrict(self, source: VertexSet, v: int) -> VertexSet:
        # source ∩ N(v) without v, in source order
        row = self.adj[v]
        out = VertexSet(self.n)
        for w in source:
            if w != v and row[w]:
                out.add(w)
        return out

    def _backtrack(self, C: VertexSet, frames: list) -> None:
        # The branch on the last vertex of C is done: move it from P to S.
        v = C[-1]
        C.remove_last()
        P, S = frames[-1][:2]
        P.discard(v)
        S.add(v)

    def all_cliques(self) -> List[VertexSet]:
        """
        Plain backtracking, always branching on the first vertex left in P.
        Frames are kept on an explicit stack rather than the call stack.
        """
        self.nodes_expanded = 1
        out: List[VertexSet] = []
        C, P, S = self._initial_sets()
        frames = [(P, S)]
        while frames:
            P, S = frames[-1]
            if len(P) == 0:
                frames.pop()
                P.destroy()
                S.destroy()
                if frames:
                    self._backtrack(C, frames)
                continue
            v = P[0]
            C.add(v)
            out.append(C.copy())
            self.nodes_expanded += 1
            frames.append((self._restrict(P, v), self._restrict(S, v)))
        return out

    def _choose_pivot(self, P: VertexSet, S: VertexSet) -> Optional[int]:
        """Vertex of P ∪ S with the most neighbours in P; P is scanned first."""
        pivot = None
        best = -1
        for sel in (P, S):
            for u in sel:
                row = self.adj[u]
                score = sum(1 for w in P if w != u and row[w])
                if score > best:
                    best = score
                    pivot = u
        return pivot

    def _maximal_frame(self, C: VertexSet, P: VertexSet, S: VertexSet, out: List[VertexSet]):
        self.nodes_expanded += 1
        if len(P) == 0 and len(S) == 0:
            out.append(C.copy())
            return P, S, iter(())
        u = self._choose_pivot(P, S)
        return P, S, iter([v for v in P if v == u or not self.adj[u][v]])

    def maximal_cliques(self) -> List[VertexSet]:
        self.nodes_expanded = 0
        out: List[VertexSet] = []
        C, P, S = self._initial_sets()
        frames = [self._maximal_frame(C, P, S, out)]
        while frames:
            P, S, candidates = frames[-1]
            v = next(candidates, None)
            if v is None:
                frames.pop()
                P.destroy()
                S.destroy()
                if frames:
                    self._backtrack(C, frames)
                continue
            C.add(v)
            frames.append(
                self._maximal_frame(C, self._restrict(P, v), self._restrict(S, v), out)
            )
        return out

    def maximum_clique(self) -> VertexSet:
        # At least one clique is recorded, the empty one when n = 0.
        return max(self.maximal_cliques(), key=len)


def find_all_cliques(graph: Optional[Graph]) -> Optional[List[VertexSet]]:
    """
    Every non-empty clique reachable by plain backtracking, maximal or not.
    Results are not deduplicated.
    """
    if not check_undirected(graph, "find_all_cliques"):
        return None
    solver = CliqueSolver(graph)
    cliques = solver.all_cliques()
    bt.logging.debug(
        f"Backtracking found {len(cliques)} cliques, expanded {solver.nodes_expanded} nodes"
    )
    return cliques


def find_maximal_cliques(graph: Optional[Graph]) -> Optional[List[VertexSet]]:
    """Maximal cliques by Bron–Kerbosch with pivoting."""
    if not check_undirected(graph, "find_maximal_cliques"):
        return None
    solver = CliqueSolver(graph)
    cliques = solver.maximal_cliques()
    bt.logging.debug(
        f"Bron-Kerbosch found {len(cliques)} maximal cliques, expanded {solver.nodes_expanded} nodes"
    )
    return cliques


def find_maximum_clique(graph: Optional[Graph]) -> Optional[VertexSet]:
    """
    First maximal clique of the largest size. A single vertex counts as a
    clique; the graph without vertices gives the empty set.
    """
    if not check_undirected(graph, "find_maximum_clique"):
        return None
    start_time = time.perf_counter()
    solver = CliqueSolver(graph)
    clique = solver.maximum_clique()
    bt.logging.debug(
        f"Maximum clique of size {len(clique)} in {time.perf_counter() - start_time:.3f}s"
    )
    return clique


def analyze_cliques(
    graph: Optional[Graph], algorithm: CliqueAlgorithm = CliqueAlgorithm.BRANCH_AND_BOUND
) -> Optional[CliqueAnalysis]:
    if algorithm == CliqueAlgorithm.BACKTRACKING:
        cliques = find_all_cliques(graph)
    else:
        cliques = find_maximal_cliques(graph)
    if cliques is None:
        return None
    return CliqueAnalysis(
        algorithm=algorithm,
        maximum_clique_size=max((len(c) for c in cliques), default=0),
        clique_count=len(cliques),
        non_trivial_cliques=[c.to_list() for c in cliques if len(c) >= 3],
    )
