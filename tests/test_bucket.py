import random

import pytest

from sortbench.bucket import BucketSort


def _random_values(seed, count, low=-1000, high=1000):
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(count)]


@pytest.mark.parametrize("workers", [1, 2, 3, 4, 7])
@pytest.mark.parametrize("count", [0, 1, 5, 100, 257])
def test_sorts_random_data(workers, count):
    values = _random_values(workers * 1000 + count, count)
    outcome = BucketSort(workers).sort(values)
    assert outcome.data == sorted(values)


def test_fewer_values_than_workers():
    outcome = BucketSort(4).sort([7, 5])
    assert outcome.data == [5, 7]


def test_all_equal_values():
    values = [9] * 20
    assert BucketSort(3).sort(values).data == values


def test_negative_values_only():
    values = _random_values(11, 50, low=-500, high=-1)
    assert BucketSort(5).sort(values).data == sorted(values)


def test_input_is_not_modified():
    values = [3, 1, 2, 0]
    BucketSort(2).sort(values)
    assert values == [3, 1, 2, 0]


def test_accepts_any_iterable():
    assert BucketSort(2).sort(iter([4, 2, 3, 1])).data == [1, 2, 3, 4]


def test_comm_time_is_not_negative():
    assert BucketSort(3).sort(_random_values(3, 300)).comm_time >= 0.0


def test_name():
    assert BucketSort(2).name == "BucketSort"