#!/usr/bin/env python3
"""
Ledger Statistics: structural metrics of a tangle-style transaction DAG.

Reads a ledger database (a declared record count followed by
"<left> <right> <timestamp>" records), builds the approval graph rooted at
the genesis transaction and prints:
  - AVG DAG DEPTH: mean approval distance to genesis
  - AVG TXS PER DEPTH: transactions per non-zero depth level
  - AVG REF: mean in-references per node
  - AVG TXS PER TS: transactions sharing a timestamp

Optionally saves a JSON/CSV report and a depth distribution plot.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ledgerstats.config import CONFIG, DEFAULT_DATABASE, RESULTS_DIR
from ledgerstats.data_loader import load_ledger
from ledgerstats.errors import LedgerError
from ledgerstats.results_handler import format_ledger, format_statistics, save_results
from ledgerstats.visualization import plot_depth_distribution


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Structural statistics of a transaction DAG ledger")

    parser.add_argument(
        "database",
        nargs="?",
        type=Path,
        default=DEFAULT_DATABASE,
        help=f"Ledger database file (default: {DEFAULT_DATABASE})",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help=f"Directory to write the JSON/CSV report and plot (default with --plot: {RESULTS_DIR})",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Save a depth distribution plot to the output directory",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Silently drop transactions that reference nodes outside the ledger",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the transactions and adjacency matrix",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while parsing large databases",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    strict = CONFIG['strict_references'] and not args.lenient

    try:
        ledger = load_ledger(args.database, strict=strict, progress=args.progress)
    except FileNotFoundError:
        print(f"[ERROR] Could not find {args.database}")
        sys.exit(1)
    except LedgerError as e:
        print(f"[ERROR] Invalid ledger database {args.database}: {e}")
        sys.exit(1)

    print()
    print(args.database.name)
    print()

    if not args.quiet:
        print(format_ledger(ledger))
        print()

    print(format_statistics(ledger))

    if args.output_dir is not None or args.plot:
        output_dir = args.output_dir if args.output_dir is not None else RESULTS_DIR
        save_results(ledger, output_dir, source=str(args.database))
        if args.plot:
            plot_depth_distribution(ledger, output_dir)

    return 0


if __name__ == "__main__":
    sys.exit(main())
