import pytest

from dstructs.hashtable import HashTable, next_prime


@pytest.mark.parametrize(
    "n, expected",
    [(0, 53), (53, 53), (54, 97), (1543, 1543), (5_000_000_000, 4294967291)],
)
def test_next_prime(n, expected):
    assert next_prime(n) == expected


def test_bucket_count_follows_next_prime():
    assert HashTable(10).bucket_count() == 53
    assert HashTable(100).bucket_count() == 193


def test_insert_and_contains():
    table = HashTable(10)
    values = [1, 54, 107, -3, 0, 999]
    for v in values:
        assert table.insert(v) is True
    assert len(table) == len(values)
    assert all(v in table for v in values)
    assert 2 not in table


def test_duplicate_insert_rejected():
    table = HashTable(10)
    assert table.insert(7)
    assert table.insert(7) is False
    assert len(table) == 1


def test_erase():
    table = HashTable(10)
    for v in (1, 54, 107):
        table.insert(v)
    assert table.erase(54) is True
    assert 54 not in table
    assert 1 in table and 107 in table
    assert table.erase(54) is False
    assert len(table) == 2


def test_clear():
    table = HashTable(10)
    for v in range(100):
        table.insert(v)
    table.clear()
    assert len(table) == 0
    assert 5 not in table
    assert table.insert(5) is True


def test_round_trip_many_values():
    table = HashTable(50)
    values = list(range(-200, 200, 7))
    for v in values:
        table.insert(v)
    for v in values[::2]:
        assert table.erase(v)
    assert sorted(v for v in values if v in table) == values[1::2]
    assert len(table) == len(values[1::2])