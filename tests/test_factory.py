import pytest

from sortbench.bucket import BucketSort
from sortbench.factory import create_sort_algorithm
from sortbench.odd_even import OddEvenSort
from sortbench.rank_sort import RankSort
from sortbench.selection import SelectionSort
from sortbench.shell import ShellSort


@pytest.mark.parametrize(
    "name, cls",
    [
        ("SelectionSort", SelectionSort),
        ("BucketSort", BucketSort),
        ("OddEvenSort", OddEvenSort),
        ("ShellSort", ShellSort),
        ("RankSort", RankSort),
    ],
)
def test_creates_named_algorithm(name, cls):
    sorter = create_sort_algorithm(name, 3)
    assert isinstance(sorter, cls)
    assert sorter.name == name
    assert sorter.workers == 3


def test_default_single_worker():
    assert create_sort_algorithm("ShellSort").workers == 1


def test_unknown_name_raises():
    with pytest.raises(ValueError, match="Unknown sorting algorithm: QuickSort"):
        create_sort_algorithm("QuickSort", 2)


def test_invalid_worker_count_raises():
    with pytest.raises(ValueError):
        create_sort_algorithm("BucketSort", 0)