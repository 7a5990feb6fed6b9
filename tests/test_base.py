import pytest

from sortbench.base import SortOutcome, SortingAlgorithm, split_counts
from sortbench.bucket import BucketSort


def test_split_counts_spreads_remainder_to_first_parts():
    assert split_counts(10, 3) == [4, 3, 3]


@pytest.mark.parametrize("total,parts", [(0, 1), (0, 4), (7, 7), (100, 6), (3, 8)])
def test_split_counts_invariants(total, parts):
    counts = split_counts(total, parts)
    assert len(counts) == parts
    assert sum(counts) == total
    assert max(counts) - min(counts) <= 1
    assert counts == sorted(counts, reverse=True)


def test_split_counts_rejects_zero_parts():
    with pytest.raises(ValueError):
        split_counts(5, 0)


def test_split_counts_rejects_negative_total():
    with pytest.raises(ValueError):
        split_counts(-1, 2)


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        SortingAlgorithm(2)


def test_workers_must_be_positive():
    with pytest.raises(ValueError):
        BucketSort(0)


def test_subclass_outcome_carries_data_and_time():
    outcome = BucketSort(3).sort([3, 1, 2])
    assert outcome.data == [1, 2, 3]
    assert outcome.comm_time >= 0.0


def test_comm_time_resets_between_sorts():
    sorter = BucketSort(1)
    first = sorter.sort(list(range(1000, 0, -1)))
    assert first.data == list(range(1, 1001))
    second = sorter.sort([2, 1])
    assert second.data == [1, 2]
    assert second.comm_time < 1.0


def test_outcome_is_frozen():
    outcome = SortOutcome(data=[1], comm_time=0.0)
    assert outcome.data == [1]
    assert outcome.comm_time == 0.0
    with pytest.raises(AttributeError):
        outcome.comm_time = 1.0
    assert outcome.comm_time == 0.0


def test_workers_are_stored():
    assert BucketSort(5).workers == 5