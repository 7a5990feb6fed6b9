"""Bucket sort where each simulated worker owns one value range."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable

from sortbench.base import SortOutcome, SortingAlgorithm, split_counts


class BucketSort(SortingAlgorithm):
    """Scatter, route every value to the worker owning its range, sort, gather."""

    name = "BucketSort"

    def sort(self, data: Iterable[int]) -> SortOutcome:
        self._begin()
        values = list(data)
        workers = self.workers

        with self._communicating():
            counts = split_counts(len(values), workers)
            starts = [0, *accumulate(counts)]
            chunks = [values[start:end] for start, end in zip(starts, starts[1:])]

        # An empty chunk reports 0 for both its minimum and maximum.
        lows = [min(chunk) if chunk else 0 for chunk in chunks]
        highs = [max(chunk) if chunk else 0 for chunk in chunks]
        with self._communicating():
            global_min = min(lows)
            global_max = max(highs)

        width = (global_max - global_min + 1) / workers
        outgoing: list[list[list[int]]] = []
        for chunk in chunks:
            buckets: list[list[int]] = [[] for _ in range(workers)]
            for value in chunk:
                if value == global_max:
                    index = workers - 1
                else:
                    index = int((value - global_min) / width)
                buckets[index].append(value)
            outgoing.append(buckets)

        with self._communicating():
            received = [
                [value for buckets in outgoing for value in buckets[owner]]
                for owner in range(workers)
            ]

        for bucket in received:
            bucket.sort()

        with self._communicating():
            result = [value for bucket in received for value in bucket]

        return self._finish(result)