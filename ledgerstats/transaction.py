"""
Transaction records and the single-line record parser.

A record is "<left> <right> <timestamp>": the two parents the transaction
approves and the time it was issued.
"""

import re
from typing import Dict, NamedTuple

from ledgerstats.config import EXPECTED_FIELDS_NUMBER, MAX_UINT64
from ledgerstats.errors import FieldCountMismatch, IntegerParseError

TxId = int
Timestamp = int

_UNSIGNED = re.compile(r"\+?[0-9]+")


class Transaction(NamedTuple):
    left: TxId
    right: TxId
    timestamp: Timestamp

    @classmethod
    def from_str(cls, line: str) -> "Transaction":
        return parse_transaction(line)


Transactions = Dict[TxId, Transaction]


def parse_unsigned(value: str) -> int:
    """Parse an ASCII decimal that fits in an unsigned 64-bit integer."""
    if not _UNSIGNED.fullmatch(value):
        raise ValueError(f"invalid digit found in {value!r}")
    number = int(value)
    if number > MAX_UINT64:
        raise ValueError(f"number too large to fit in target type: {value!r}")
    return number


def parse_transaction(line: str) -> Transaction:
    fields = line.split()

    if len(fields) != EXPECTED_FIELDS_NUMBER:
        raise FieldCountMismatch(EXPECTED_FIELDS_NUMBER, len(fields))

    values = []
    for index, field in enumerate(fields):
        try:
            values.append(parse_unsigned(field))
        except ValueError as e:
            raise IntegerParseError(index, field) from e

    return Transaction(*values)
