import argparse

import bittensor as bt

TASKS = (
    "all-cliques",
    "maximal-cliques",
    "maximum-clique",
    "independent-set",
    "vertex-cover",
    "bipartite",
)
METHODS = ("exact", "konig", "approx")


def add_args(cls, parser: argparse.ArgumentParser):
    """
    Adds the solver arguments to the parser.
    """
    parser.add_argument(
        "--edges",
        type=str,
        required=True,
        help="Path to edge list file: each line 'u v' (0-indexed).",
    )
    parser.add_argument(
        "--task",
        type=str,
        choices=TASKS,
        default="vertex-cover",
        help="What to compute on the graph.",
    )
    parser.add_argument(
        "--method",
        type=str,
        choices=METHODS,
        default="exact",
        help="Vertex cover strategy, used by the vertex-cover task.",
    )


def check_config(cls, config: "bt.Config"):
    bt.logging.set_config(config=config.logging)
    if config.task != "vertex-cover" and config.method != "exact":
        bt.logging.warning(f"--method {config.method} is ignored by task {config.task}")


def config(cls, args=None) -> "bt.Config":
    """
    Returns the configuration object specific to this solver run.
    """
    parser = argparse.ArgumentParser(
        description="Cliques, independent sets and vertex covers of an undirected graph."
    )
    bt.logging.add_args(parser)
    cls.add_args(parser)
    return bt.Config(parser, args=args)
