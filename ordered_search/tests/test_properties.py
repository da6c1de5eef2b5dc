import random

import pytest

from ordered_search import (
    binary_search,
    binary_search_insertion_point,
    binary_search_with_comparator,
    natural_comparator,
)


def _sorted_samples(seed, count=200):
    rng = random.Random(seed)
    for _ in range(count):
        size = rng.randint(0, 40)
        yield sorted(rng.randint(-20, 20) for _ in range(size)), rng.randint(-25, 25)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_present_targets_are_found(seed):
    for data, _ in _sorted_samples(seed):
        for target in set(data):
            index = binary_search(data, target)
            assert index is not None
            assert data[index] == target


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_absent_targets_are_not_found(seed):
    for data, target in _sorted_samples(seed):
        if target not in data:
            assert binary_search(data, target) is None


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_insertion_point_preserves_order(seed):
    for data, target in _sorted_samples(seed):
        index = binary_search_insertion_point(data, target)
        assert 0 <= index <= len(data)
        updated = data[:index] + [target] + data[index:]
        assert all(a <= b for a, b in zip(updated, updated[1:]))


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_insertion_point_matches_found_index(seed):
    for data, target in _sorted_samples(seed):
        found = binary_search(data, target)
        if found is not None:
            assert binary_search_insertion_point(data, target) == found


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_comparator_search_agrees_with_natural_order(seed):
    for data, target in _sorted_samples(seed):
        assert binary_search_with_comparator(data, target, natural_comparator) == binary_search(data, target)


def test_boundaries_of_strictly_increasing_sequences():
    rng = random.Random(7)
    for _ in range(100):
        data = sorted(rng.sample(range(1000), rng.randint(1, 50)))
        assert binary_search(data, data[0]) == 0
        assert binary_search(data, data[-1]) == len(data) - 1


def test_large_range_sequence():
    data = range(0, 10 ** 18, 3)
    assert binary_search(data, 3 * 12345678901) == 12345678901
    assert binary_search(data, 3 * 12345678901 + 1) is None
    assert binary_search_insertion_point(data, 3 * 12345678901 + 1) == 12345678902
