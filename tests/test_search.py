import pytest

from arrayalgos.search import (
    binary_search,
    ceil_value,
    floor_value,
    last_occurrence,
    search_insert,
    search_rotated,
)

SORTED = [-8, -3, 0, 2, 5, 9, 14, 21]
WITH_DUPLICATES = [3, 4, 13, 13, 13, 20, 40]


def test_binary_search_finds_every_element():
    for index, value in enumerate(SORTED):
        assert binary_search(SORTED, value) == index


@pytest.mark.parametrize("target", [-9, 1, 6, 22])
def test_binary_search_missing(target):
    assert binary_search(SORTED, target) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None


def test_binary_search_with_duplicates_hits_matching_value():
    index = binary_search(WITH_DUPLICATES, 13)
    assert WITH_DUPLICATES[index] == 13


@pytest.mark.parametrize("target", range(-10, 24))
def test_ceil_value_matches_brute_force(target):
    expected = min((v for v in SORTED if v >= target), default=None)
    assert ceil_value(SORTED, target) == expected


@pytest.mark.parametrize("target", range(-10, 24))
def test_floor_value_matches_brute_force(target):
    expected = max((v for v in SORTED if v <= target), default=None)
    assert floor_value(SORTED, target) == expected


def test_ceil_and_floor_out_of_range():
    assert ceil_value(SORTED, 100) is None
    assert floor_value(SORTED, -100) is None


@pytest.mark.parametrize("key", [3, 4, 13, 20, 40])
def test_last_occurrence_is_last(key):
    index = last_occurrence(WITH_DUPLICATES, key)
    assert WITH_DUPLICATES[index] == key
    assert key not in WITH_DUPLICATES[index + 1:]


def test_last_occurrence_example():
    assert last_occurrence(WITH_DUPLICATES, 13) == 4


@pytest.mark.parametrize("key", [0, 5, 41])
def test_last_occurrence_missing(key):
    assert last_occurrence(WITH_DUPLICATES, key) is None


@pytest.mark.parametrize("target", range(0, 45))
def test_search_insert_partitions(target):
    index = search_insert(WITH_DUPLICATES, target)
    assert 0 <= index <= len(WITH_DUPLICATES)
    assert all(v < target for v in WITH_DUPLICATES[:index])
    assert all(v >= target for v in WITH_DUPLICATES[index:])


def test_search_insert_empty():
    assert search_insert([], 5) == 0


def test_search_rotated_example():
    assert search_rotated([4, 5, 6, 7, 0, 1, 2], 0) == 4


@pytest.mark.parametrize("shift", range(len(SORTED)))
def test_search_rotated_every_rotation(shift):
    rotated = SORTED[shift:] + SORTED[:shift]
    for index, value in enumerate(rotated):
        assert search_rotated(rotated, value) == index
    assert search_rotated(rotated, 1) is None
    assert search_rotated(rotated, 100) is None


def test_search_rotated_empty():
    assert search_rotated([], 1) is None