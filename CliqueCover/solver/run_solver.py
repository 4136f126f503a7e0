import json
import time
from typing import List, Optional, Tuple

import bittensor as bt
from CliqueCover import solver_version
from CliqueCover.graph.model import Graph
from CliqueCover.graph.vertex_set import VertexSet
from CliqueCover.scoring.cover_scoring import (
    is_clique,
    is_independent_set,
    is_vertex_cover,
)
from CliqueCover.solver.bipartite import partition_bipartite
from CliqueCover.solver.clique_solver import (
    find_all_cliques,
    find_maximal_cliques,
    find_maximum_clique,
)
from CliqueCover.solver.independent_set import maximum_independent_set
from CliqueCover.solver.vertex_cover import VertexCoverMethod, find_vertex_cover
from common.utils.config import add_args, check_config, config


def load_edge_list(path) -> Tuple[int, List[Tuple[int, int]]]:
    edges = []
    n = 0
    with open(path, "r") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.replace(",", " ").split()
            if len(parts) < 2:
                continue
            u, v = int(parts[0]), int(parts[1])
            edges.append((u, v))
            n = max(n, u + 1, v + 1)
    return n, edges


def _set_report(graph: Graph, result: Optional[VertexSet], check) -> dict:
    if result is None:
        return {"size": None, "vertices": None, "valid": False}
    vertices = result.to_list()
    return {"size": len(vertices), "vertices": vertices, "valid": check(graph, vertices)}


def solve(graph: Graph, task: str, method: str = "exact") -> dict:
    t0 = time.perf_counter()
    report = {"task": task, "number_of_nodes": graph.node_count, "number_of_edges": len(graph.edges())}
    if task == "all-cliques":
        cliques = find_all_cliques(graph) or []
        report["cliques"] = [c.to_list() for c in cliques]
    elif task == "maximal-cliques":
        cliques = find_maximal_cliques(graph) or []
        report["cliques"] = [c.to_list() for c in cliques]
    elif task == "maximum-clique":
        report.update(_set_report(graph, find_maximum_clique(graph), is_clique))
    elif task == "independent-set":
        report.update(_set_report(graph, maximum_independent_set(graph), is_independent_set))
    elif task == "vertex-cover":
        report["method"] = VertexCoverMethod(method).value
        report.update(_set_report(graph, find_vertex_cover(graph, method), is_vertex_cover))
    elif task == "bipartite":
        partition = partition_bipartite(graph)
        report["bipartite"] = partition is not None
        report["left"] = partition.left_nodes if partition else None
        report["right"] = partition.right_nodes if partition else None
    else:
        raise ValueError(f"Unknown task: {task}")
    report["runtime_sec"] = time.perf_counter() - t0
    return report


class SolverRunner:
    @classmethod
    def add_args(cls, parser):
        add_args(cls, parser)

    @classmethod
    def check_config(cls, config: "bt.Config"):
        check_config(cls, config)

    @classmethod
    def config(cls, args=None):
        return config(cls, args=args)

    def __init__(self, config=None):
        self.config = config or self.config()
        self.check_config(self.config)

    def run(self) -> dict:
        n, edges = load_edge_list(self.config.edges)
        bt.logging.info(f"CliqueCover {solver_version}: loaded graph from {self.config.edges}: {n} vertices, {len(edges)} edges")
        graph = Graph.from_edges(n, edges)
        result = solve(graph, self.config.task, self.config.method)
        bt.logging.info(f"Task {self.config.task} completed in {result['runtime_sec']:.3f}s")
        return result


def main(args=None):
    runner = SolverRunner(SolverRunner.config(args=args))
    print(json.dumps(runner.run(), indent=2))


if __name__ == "__main__":
    main()
