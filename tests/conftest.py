import pytest

from ledgerstats.transaction import Transaction


SAMPLE_DATABASE = """5
1 1 0
1 2 0
2 2 1
3 3 2
3 4 3
"""


@pytest.fixture
def sample_transactions():
    return {
        2: Transaction(1, 1, 0),
        3: Transaction(1, 2, 0),
        4: Transaction(2, 2, 1),
        5: Transaction(3, 3, 2),
        6: Transaction(3, 4, 3),
    }


@pytest.fixture
def sample_database():
    return SAMPLE_DATABASE


@pytest.fixture
def sample_db_file(tmp_path):
    path = tmp_path / "database.txt"
    path.write_text(SAMPLE_DATABASE, encoding="utf-8")
    return path
