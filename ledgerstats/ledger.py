"""
Ledger module: owns the parsed transactions, their approval graph and the
depth of every node, and derives the aggregate statistics from them.
"""

from typing import Dict, Optional

import numpy as np

from ledgerstats.depth import compute_depths
from ledgerstats.graph import Graph
from ledgerstats.transaction import Transactions, TxId


class Ledger:
    def __init__(self, transactions: Transactions, strict: Optional[bool] = None):
        self._transactions = dict(transactions)
        self._graph = Graph(self._transactions, strict=strict)
        self._depths = compute_depths(self._graph)

    @property
    def transactions(self) -> Transactions:
        return dict(self._transactions)

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def depths(self) -> Dict[TxId, int]:
        return dict(self._depths)

    @property
    def size(self) -> int:
        return self._graph.size()

    def avg_dag_depth(self) -> float:
        """Average depth of the DAG, root included."""
        depths = np.fromiter(self._depths.values(), dtype=np.int64)
        return float(depths.sum() / self.size)

    def avg_txs_per_depth(self) -> float:
        """Average number of transactions per depth (depth 0 is not included)."""
        depths = np.fromiter(self._depths.values(), dtype=np.int64)
        max_depth = depths.max()

        if max_depth == 0:
            return 0.0
        return float(np.count_nonzero(depths) / max_depth)

    def avg_ref(self) -> float:
        """Average number of in-references per node."""
        return float(self._graph.total_references() / self.size)

    def avg_txs_per_ts(self) -> float:
        """Average number of transactions per timestamp (the root is not included)."""
        if not self._transactions:
            return 0.0

        timestamps = np.array([tx.timestamp for tx in self._transactions.values()], dtype=np.uint64)
        return float(len(timestamps) / len(np.unique(timestamps)))

    def statistics(self) -> Dict[str, float]:
        return {
            'avg_dag_depth': self.avg_dag_depth(),
            'avg_txs_per_depth': self.avg_txs_per_depth(),
            'avg_ref': self.avg_ref(),
            'avg_txs_per_ts': self.avg_txs_per_ts(),
        }
