"""
Error types raised while parsing a ledger database and building its graph.

Single-record failures derive from ParseTxError; whole-database failures
derive from LedgerError and wrap the record error that caused them.
"""


class ParseTxError(ValueError):
    """A single transaction record could not be parsed."""


class FieldCountMismatch(ParseTxError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"wrong fields number: expected '{expected}', actual '{actual}'")


class IntegerParseError(ParseTxError):
    def __init__(self, field: int, value: str):
        self.field = field
        self.value = value
        super().__init__(f"parse int error: field {field} is not an unsigned integer: {value!r}")


class LedgerError(Exception):
    """The ledger database is unusable; no ledger is built from it."""


class EmptyDatabaseError(LedgerError):
    def __init__(self):
        super().__init__("the database is empty")


class DeclaredCountParseError(LedgerError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"parse int error: declared transactions number {value!r} is not an unsigned integer")


class RecordCountMismatchError(LedgerError):
    def __init__(self, declared: int, actual: int):
        self.declared = declared
        self.actual = actual
        super().__init__(f"wrong transactions number: expected '{declared}', actual '{actual}'")

    def __eq__(self, other):
        if not isinstance(other, RecordCountMismatchError):
            return NotImplemented
        return (self.declared, self.actual) == (other.declared, other.actual)

    def __hash__(self):
        return hash((self.declared, self.actual))


class MalformedRecordError(LedgerError):
    def __init__(self, line_number: int, cause: FieldCountMismatch):
        self.line_number = line_number
        self.cause = cause
        super().__init__(f"line {line_number}: {cause}")


class FieldParseError(LedgerError):
    def __init__(self, line_number: int, cause: IntegerParseError):
        self.line_number = line_number
        self.cause = cause
        super().__init__(f"line {line_number}: {cause}")


class InvalidReferenceError(LedgerError):
    """Raised in strict mode when a transaction points outside [1, size]."""

    def __init__(self, tx_id: int, parent: int, size: int):
        self.tx_id = tx_id
        self.parent = parent
        self.size = size
        super().__init__(f"transaction {tx_id} references node {parent} outside [1, {size}]")
