"""Odd-even transposition sort over blocks held by simulated workers."""

from __future__ import annotations

from typing import Iterable

from sortbench.base import SortOutcome, SortingAlgorithm


class OddEvenSort(SortingAlgorithm):
    """Each worker sorts an equal block, then neighbours merge-split for workers-1 phases.

    Values beyond the last whole block are left where they are.
    """

    name = "OddEvenSort"

    def sort(self, data: Iterable[int]) -> SortOutcome:
        self._begin()
        values = list(data)
        workers = self.workers
        block = len(values) // workers

        blocks = [
            sorted(values[rank * block:(rank + 1) * block]) for rank in range(workers)
        ]

        for phase in range(workers - 1):
            first = phase % 2
            for low in range(first, workers - 1, 2):
                high = low + 1
                with self._communicating():
                    mine, theirs = list(blocks[low]), list(blocks[high])
                merged = sorted(mine + theirs)
                blocks[low], blocks[high] = merged[:block], merged[block:]

        with self._communicating():
            result = [value for part in blocks for value in part]
        result.extend(values[block * workers:])
        return self._finish(result)