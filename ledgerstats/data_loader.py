"""
Data loading module for ledger statistics.
Handles reading the ledger database and parsing it into transactions.
"""

from pathlib import Path
from typing import Optional, Union

from tqdm import tqdm

from ledgerstats.config import CONFIG, FIRST_TX_ID
from ledgerstats.errors import (
    DeclaredCountParseError,
    EmptyDatabaseError,
    FieldCountMismatch,
    FieldParseError,
    IntegerParseError,
    MalformedRecordError,
    RecordCountMismatchError,
)
from ledgerstats.ledger import Ledger
from ledgerstats.transaction import Transactions, parse_transaction, parse_unsigned


def parse_database(database: str, progress: bool = False) -> Transactions:
    """
    Parse the ledger database text into transactions.

    The first line declares the number of records; every following line is
    one "<left> <right> <timestamp>" record. Records get ids 2, 3, ... in
    file order. Lines end at a newline (a trailing carriage return is
    dropped); other whitespace inside a record only separates fields.
    Trailing blank lines are ignored.

    Args:
        database: Full database text
        progress: Show a tqdm bar for large databases

    Returns:
        dict: Transaction id -> Transaction
    """
    lines = [line[:-1] if line.endswith("\r") else line for line in database.split("\n")]
    while lines and not lines[-1].strip():
        lines.pop()

    if not lines:
        raise EmptyDatabaseError()

    header, records = lines[0], lines[1:]

    try:
        declared = parse_unsigned(header.strip())
    except ValueError as e:
        raise DeclaredCountParseError(header) from e

    if declared != len(records):
        raise RecordCountMismatchError(declared, len(records))

    show_bar = progress and len(records) > CONFIG['progress_threshold']
    transactions = {}

    for offset, line in enumerate(tqdm(records, desc="   Parsing records", disable=not show_bar)):
        line_number = offset + 2
        try:
            tx = parse_transaction(line)
        except FieldCountMismatch as e:
            raise MalformedRecordError(line_number, e) from e
        except IntegerParseError as e:
            raise FieldParseError(line_number, e) from e
        transactions[FIRST_TX_ID + offset] = tx

    return transactions


def read_database(path: Union[str, Path]) -> str:
    """Read the raw database text"""
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def load_ledger(path: Union[str, Path], strict: Optional[bool] = None, progress: Optional[bool] = None) -> Ledger:
    """Read, parse and build the ledger, reporting each phase"""
    if progress is None:
        progress = CONFIG['show_progress']

    print(f"[INFO] Loading ledger database from {path}...")
    database = read_database(path)

    transactions = parse_database(database, progress=progress)
    print(f"[INFO] Parsed {len(transactions):,} transactions.")

    print("[INFO] Building approval graph and computing depths...")
    ledger = Ledger(transactions, strict=strict)

    graph = ledger.graph
    print(f"[INFO] Graph built: {graph.size():,} nodes, {graph.number_of_edges():,} edges.")
    print(f"[INFO] Max depth: {max(ledger.depths.values())}")

    return ledger
