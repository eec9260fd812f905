"""
Unit tests for ledger statistics.
"""

import pytest

from ledgerstats.errors import InvalidReferenceError
from ledgerstats.ledger import Ledger
from ledgerstats.transaction import Transaction


def test_sample_statistics(sample_transactions):
    ledger = Ledger(sample_transactions)

    assert ledger.avg_dag_depth() == pytest.approx(1.3333334, rel=1e-6)
    assert ledger.avg_txs_per_depth() == pytest.approx(2.5)
    assert ledger.avg_ref() == pytest.approx(1.6666666, rel=1e-6)
    assert ledger.avg_txs_per_ts() == pytest.approx(1.25)


def test_empty_txs_list_statistics():
    ledger = Ledger({})

    assert ledger.size == 1
    assert ledger.depths == {1: 0}
    assert ledger.avg_dag_depth() == 0.0
    assert ledger.avg_txs_per_depth() == 0.0
    assert ledger.avg_ref() == 0.0
    assert ledger.avg_txs_per_ts() == 0.0


def test_graph_with_zero_timestamps_statistics():
    transactions = {i: Transaction(i - 1, i - 1, 0) for i in range(2, 8)}
    ledger = Ledger(transactions)

    assert ledger.avg_dag_depth() == pytest.approx(3.0)
    assert ledger.avg_txs_per_depth() == pytest.approx(1.0)
    assert ledger.avg_ref() == pytest.approx(1.7142857, rel=1e-6)
    assert ledger.avg_txs_per_ts() == pytest.approx(6.0)


def test_one_more_graph_statistics():
    transactions = {
        2: Transaction(1, 1, 1),
        3: Transaction(1, 1, 1),
        4: Transaction(2, 2, 3),
        5: Transaction(2, 2, 3),
        6: Transaction(3, 3, 5),
        7: Transaction(3, 3, 5),
    }
    ledger = Ledger(transactions)

    assert ledger.avg_dag_depth() == pytest.approx(1.4285715, rel=1e-6)
    assert ledger.avg_txs_per_depth() == pytest.approx(3.0)
    assert ledger.avg_ref() == pytest.approx(1.7142857, rel=1e-6)
    assert ledger.avg_txs_per_ts() == pytest.approx(2.0)


def test_statistics_are_plain_floats(sample_transactions):
    stats = Ledger(sample_transactions).statistics()
    assert set(stats) == {'avg_dag_depth', 'avg_txs_per_depth', 'avg_ref', 'avg_txs_per_ts'}
    assert all(type(value) is float for value in stats.values())


def test_size_invariant(sample_transactions):
    ledger = Ledger(sample_transactions)
    assert ledger.size == len(sample_transactions) + 1
    assert ledger.depths[1] == 0


def test_accessors_do_not_expose_internal_state(sample_transactions):
    ledger = Ledger(sample_transactions)
    ledger.transactions.clear()
    ledger.depths.clear()
    assert len(ledger.transactions) == 5
    assert len(ledger.depths) == 6


def test_ledger_copies_input(sample_transactions):
    ledger = Ledger(sample_transactions)
    sample_transactions.clear()
    assert ledger.size == 6


def test_strict_is_default():
    with pytest.raises(InvalidReferenceError):
        Ledger({2: Transaction(1, 5, 0)})


def test_lenient_drop_leaves_unreachable_node():
    with pytest.raises(RuntimeError):
        Ledger({2: Transaction(1, 5, 0)}, strict=False)
