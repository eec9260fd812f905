"""
Depth computation module for ledger statistics.
"""

from collections import Counter
from typing import Dict

import networkx as nx

from ledgerstats.config import ROOT_ID
from ledgerstats.graph import Graph
from ledgerstats.transaction import TxId


def compute_depths(graph: Graph) -> Dict[TxId, int]:
    """
    Compute every node's minimum approval distance to the root.

    An edge (i, j) means i approves j, so the nodes one hop away from j are
    its approvers. A breadth-first search from the root over the reversed
    graph therefore visits nodes in non-decreasing depth, and the first
    discovery of a node is its shortest path of approvals down to the root.

    Args:
        graph: Approval graph covering ids [1, size]

    Returns:
        dict: node id -> depth, with exactly one entry per node

    Raises:
        RuntimeError: if some node cannot reach the root
    """
    G = graph.to_networkx()
    G_reverse = G.reverse(copy=False)

    depths = nx.single_source_shortest_path_length(G_reverse, ROOT_ID)

    unreachable = sorted(set(G.nodes()) - set(depths))
    if unreachable:
        raise RuntimeError(
            f"{len(unreachable)} node(s) cannot reach the root: {unreachable[:10]}"
        )

    return dict(sorted(depths.items()))


def depth_histogram(depths: Dict[TxId, int]) -> Dict[int, int]:
    """Number of nodes at each depth, ordered by depth."""
    counts = Counter(depths.values())
    return {depth: counts[depth] for depth in sorted(counts)}
