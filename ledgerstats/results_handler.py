"""
Results handling module for ledger statistics.
Handles console rendering of a built ledger and saving reports to disk.
"""

import json
import time
from pathlib import Path
from typing import Dict, Optional, Union

import pandas as pd

from ledgerstats.config import DEPTHS_FILE, EDGES_FILE, STATS_FILE
from ledgerstats.depth import depth_histogram
from ledgerstats.ledger import Ledger

FRAME_WIDTH = 32


def _banner(title: str = "") -> str:
    if not title:
        return "-" * FRAME_WIDTH
    return f" {title} ".center(FRAME_WIDTH, "-")


def format_transactions(ledger: Ledger) -> str:
    transactions = ledger.transactions
    lines = ["Transactions:", str(len(transactions))]
    for tx_id in sorted(transactions):
        tx = transactions[tx_id]
        lines.append(f"{tx_id} - {tx.left} {tx.right} {tx.timestamp}")
    return "\n".join(lines)


def format_graph(ledger: Ledger) -> str:
    """Adjacency matrix of reference counts, '-' where there is no edge."""
    graph = ledger.graph
    size = graph.size()
    rows = [str(size)]
    for i in range(1, size + 1):
        cells = []
        for j in range(1, size + 1):
            element = graph.get(i, j)
            cells.append(str(element.references) if element is not None else "-")
        rows.append(" ".join(cells))
    return "\n".join(rows)


def format_ledger(ledger: Ledger) -> str:
    return "\n".join([
        _banner("Ledger"),
        format_transactions(ledger),
        "",
        format_graph(ledger),
        _banner(),
    ])


def format_statistics(ledger: Ledger) -> str:
    stats = ledger.statistics()
    return "\n".join([
        _banner("Stats"),
        f"AVG DAG DEPTH: {stats['avg_dag_depth']}",
        f"AVG TXS PER DEPTH: {stats['avg_txs_per_depth']}",
        f"AVG REF: {stats['avg_ref']}",
        f"AVG TXS PER TS: {stats['avg_txs_per_ts']}",
        _banner(),
    ])


def save_results(ledger: Ledger, output_dir: Union[str, Path], source: Optional[str] = None) -> Dict[str, Path]:
    """
    Save the statistics report, per-node depths and edge list.

    Args:
        ledger: Built ledger
        output_dir: Directory to write into (created if missing)
        source: Optional description of the input database

    Returns:
        dict: Output kind -> written path
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    depths = ledger.depths
    histogram = depth_histogram(depths)

    report = {
        "timestamp_utc": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "source_dataset": source,
        "summary": {
            "total_nodes": ledger.size,
            "total_transactions": len(ledger.transactions),
            "total_edges": ledger.graph.number_of_edges(),
            "max_depth": max(depths.values()),
        },
        "statistics": ledger.statistics(),
        "depth_distribution": [
            {"depth": depth, "count": count} for depth, count in histogram.items()
        ],
    }

    stats_path = output_dir / STATS_FILE
    with open(stats_path, 'w', encoding='utf-8') as f:
        json.dump(report, f, indent=2)
    print(f"[INFO] Saved statistics report to {stats_path}")

    depths_df = pd.DataFrame(
        [{"node": node, "depth": depth} for node, depth in depths.items()],
        columns=["node", "depth"],
    )
    depths_path = output_dir / DEPTHS_FILE
    depths_df.to_csv(depths_path, index=False)
    print(f"[INFO] Saved node depths to {depths_path}")

    edges_df = pd.DataFrame(
        [{"source": i, "target": j, "references": e.references} for i, j, e in ledger.graph.edges()],
        columns=["source", "target", "references"],
    )
    edges_df = edges_df.sort_values(["source", "target"]).reset_index(drop=True)
    edges_path = output_dir / EDGES_FILE
    edges_df.to_csv(edges_path, index=False)
    print(f"[INFO] Saved edge list to {edges_path}")

    return {"stats": stats_path, "depths": depths_path, "edges": edges_path}
