"""Shell sort on per-worker blocks, finished by a shell sort at the root."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable

from sortbench.base import SortOutcome, SortingAlgorithm, split_counts


def _is_sorted(items: list[int]) -> bool:
    return all(left <= right for left, right in pairwise(items))


def shell_sort(values: Iterable[int]) -> list[int]:
    """Return ``values`` sorted with gaps halving from half the length.

    Stops early once a pass leaves the list sorted.
    """
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for index in range(gap, len(items)):
            current = items[index]
            slot = index
            while slot >= gap and items[slot - gap] > current:
                items[slot] = items[slot - gap]
                slot -= gap
            items[slot] = current
        if _is_sorted(items):
            break
        gap //= 2
    return items


class ShellSort(SortingAlgorithm):
    """Workers shell-sort equal blocks; the root gathers and shell-sorts the whole.

    The root lays out regions sized by an even split with the remainder going to
    the first workers; each worker fills only its equal block, so the slots it
    leaves unfilled hold zero.
    """

    name = "ShellSort"

    def sort(self, data: Iterable[int]) -> SortOutcome:
        self._begin()
        values = list(data)
        workers = self.workers
        block = len(values) // workers

        blocks = [
            shell_sort(values[rank * block:(rank + 1) * block]) for rank in range(workers)
        ]

        with self._communicating():
            counts = split_counts(len(values), workers)
            gathered = [
                value
                for part, count in zip(blocks, counts)
                for value in part + [0] * (count - len(part))
            ]

        return self._finish(shell_sort(gathered))