"""Rank (counting) sort: each value's position is the number of smaller values."""

from __future__ import annotations

from typing import Iterable

from sortbench.base import SortOutcome, SortingAlgorithm


class RankSort(SortingAlgorithm):
    """Every worker ranks its block against the whole input; the root places the values.

    Equal values receive the same rank, so the slots after them are left at zero.
    """

    name = "RankSort"

    def sort(self, data: Iterable[int]) -> SortOutcome:
        self._begin()
        values = list(data)
        workers = self.workers
        count = len(values)
        block, leftover = divmod(count, workers)
        if leftover:
            raise ValueError(
                f"{count} values cannot be split evenly between {workers} workers"
            )

        with self._communicating():
            blocks = [values[rank * block:(rank + 1) * block] for rank in range(workers)]

        local_ranks = [
            [sum(other < value for other in values) for value in part] for part in blocks
        ]

        with self._communicating():
            ranks = [rank for part in local_ranks for rank in part]

        placed = [0] * count
        for value, rank in zip(values, ranks):
            placed[rank] = value
        return self._finish(placed)