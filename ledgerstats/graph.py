"""
Graph construction module for ledger statistics.
Builds the approval adjacency structure from parsed transactions.
"""

from typing import Dict, Iterator, Optional, Tuple

import networkx as nx

from ledgerstats.config import CONFIG, ROOT_ID
from ledgerstats.errors import InvalidReferenceError
from ledgerstats.transaction import Transactions, TxId


class Element:
    """An approval edge; references counts the parent slots pointing at it."""

    __slots__ = ("references",)

    def __init__(self, references: int = 0):
        self.references = references

    def __eq__(self, other):
        if not isinstance(other, Element):
            return NotImplemented
        return self.references == other.references

    def __repr__(self):
        return f"Element(references={self.references})"


class Graph:
    """
    Approval graph of a ledger.

    Edge (i, j) means transaction i approves parent j. Nodes are the dense
    range [1, size] where size = len(transactions) + 1, so edges live in a
    list of per-node dicts: slot i - 1 holds node i's outgoing edges.
    """

    def __init__(self, transactions: Transactions, strict: Optional[bool] = None):
        if strict is None:
            strict = CONFIG['strict_references']

        self._size = len(transactions) + 1
        self._edges = [{} for _ in range(self._size)]

        for tx_id, tx in transactions.items():
            self._add(tx_id, tx.left, tx.right, strict)

    def _add(self, tx_id: TxId, left: TxId, right: TxId, strict: bool):
        invalid = [i for i in (tx_id, left, right) if not self.is_valid_index(i)]
        if invalid:
            if strict:
                raise InvalidReferenceError(tx_id, invalid[0], self._size)
            return

        entry = self._edges[tx_id - 1]
        for parent in (left, right):
            if parent not in entry:
                entry[parent] = Element()
            entry[parent].references += 1

    def is_valid_index(self, index: TxId) -> bool:
        return ROOT_ID <= index <= self._size

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size

    def get(self, i: TxId, j: TxId) -> Optional[Element]:
        if not self.is_valid_index(i) or not self.is_valid_index(j):
            return None
        return self._edges[i - 1].get(j)

    def successors(self, i: TxId) -> Dict[TxId, Element]:
        if not self.is_valid_index(i):
            return {}
        return dict(self._edges[i - 1])

    def edges(self) -> Iterator[Tuple[TxId, TxId, Element]]:
        for index, entry in enumerate(self._edges):
            for to, element in entry.items():
                yield index + 1, to, element

    def number_of_edges(self) -> int:
        return sum(len(entry) for entry in self._edges)

    def total_references(self) -> int:
        return sum(element.references for _, _, element in self.edges())

    def to_networkx(self) -> nx.DiGraph:
        """Return a DiGraph over [1, size] with a 'references' edge attribute."""
        G = nx.DiGraph()
        G.add_nodes_from(range(ROOT_ID, self._size + 1))
        G.add_edges_from(
            (i, j, {'references': element.references}) for i, j, element in self.edges()
        )
        return G
