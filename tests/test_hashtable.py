import pytest

from dsalgo.hashtable import HashTable

NUM_CHAINS = 31
FRUITS = [
    "Apple", "Apricots", "Avocado", "Banana", "Blackberries",
    "Blackcurrant", "Blueberries", "Breadfruit", "Cantaloupe",
    "Carambola", "Cherimoya", "Cherries", "Clementine",
]


def char_sum(text):
    return sum(ord(c) for c in text) % NUM_CHAINS


@pytest.fixture
def fruit_table():
    table = HashTable(NUM_CHAINS, char_sum)
    for index, fruit in enumerate(FRUITS):
        table.insert(fruit, index)
    return table


def test_get_returns_inserted_values(fruit_table):
    for index, fruit in enumerate(FRUITS):
        assert fruit_table.get(fruit) == index
    assert fruit_table.get("Carambola") == FRUITS.index("Carambola")


def test_missing_key(fruit_table):
    assert fruit_table.get("Beans") is None
    assert "Beans" not in fruit_table
    assert "Apple" in fruit_table


def test_insert_overwrites(fruit_table):
    fruit_table.insert("Apple", 100)
    assert fruit_table.get("Apple") == 100
    assert len(fruit_table) == len(FRUITS)


def test_slot_sizes_cover_all_keys(fruit_table):
    sizes = fruit_table.slot_sizes()
    assert len(sizes) == NUM_CHAINS
    assert sum(sizes) == len(FRUITS)
    assert sizes[char_sum("Apple")] >= 1


def test_report_summary_line(fruit_table):
    sizes = fruit_table.slot_sizes()
    report = fruit_table.report()
    assert report.startswith(f"Slot sizes: min: {min(sizes)}, max: {max(sizes)}")
    assert "\n" not in report


def test_report_with_details_on_single_chain():
    table = HashTable(2, lambda key: 0)
    for key in ["a", "b", "c"]:
        table.insert(key, key.upper())
    assert table.slot_sizes() == [3, 0]
    lines = table.report(details=True).splitlines()
    assert lines[0] == "Slot 0 contains 'c' 'b' 'a' (3)"
    assert lines[1] == "Slot 1 contains (0)"
    assert lines[2] == "Slot sizes: min: 0, max: 3, average: 1.5"


def test_default_hash_function():
    table = HashTable(7)
    for number in range(20):
        table.insert(number, number * number)
    assert [table.get(n) for n in range(20)] == [n * n for n in range(20)]


def test_non_positive_chain_count_rejected():
    with pytest.raises(ValueError):
        HashTable(0)