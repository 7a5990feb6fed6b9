"""Look up a sorting algorithm by name."""

from __future__ import annotations

from sortbench.base import SortingAlgorithm
from sortbench.bucket import BucketSort
from sortbench.odd_even import OddEvenSort
from sortbench.rank_sort import RankSort
from sortbench.selection import SelectionSort
from sortbench.shell import ShellSort

ALGORITHMS: dict[str, type[SortingAlgorithm]] = {
    algorithm.name: algorithm
    for algorithm in (SelectionSort, BucketSort, OddEvenSort, ShellSort, RankSort)
}


def create_sort_algorithm(name: str, workers: int = 1) -> SortingAlgorithm:
    """Build the algorithm called ``name`` for ``workers`` simulated workers."""
    try:
        algorithm = ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"Unknown sorting algorithm: {name}") from None
    return algorithm(workers)