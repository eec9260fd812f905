"""Structural statistics of a tangle-style transaction DAG ledger."""

from ledgerstats.data_loader import load_ledger, parse_database, read_database
from ledgerstats.errors import (
    DeclaredCountParseError,
    EmptyDatabaseError,
    FieldCountMismatch,
    FieldParseError,
    IntegerParseError,
    InvalidReferenceError,
    LedgerError,
    MalformedRecordError,
    ParseTxError,
    RecordCountMismatchError,
)
from ledgerstats.graph import Element, Graph
from ledgerstats.ledger import Ledger
from ledgerstats.transaction import Transaction, Transactions, parse_transaction

__version__ = "0.1.0"
