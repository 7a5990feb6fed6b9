"""Selection sort on per-worker sections, merged by the root with a heap."""

from __future__ import annotations

import heapq
from itertools import accumulate
from typing import Iterable

from sortbench.base import SortOutcome, SortingAlgorithm, split_counts


def merge_sorted(sections: Iterable[Iterable[int]]) -> list[int]:
    """Merge already sorted sections into one sorted list."""
    return list(heapq.merge(*sections))


def _selection_sort(values: list[int]) -> list[int]:
    items = list(values)
    for position in range(len(items) - 1):
        smallest = min(range(position, len(items)), key=items.__getitem__)
        if smallest != position:
            items[position], items[smallest] = items[smallest], items[position]
    return items


class SelectionSort(SortingAlgorithm):
    """Each worker selection-sorts its section; the root merges the sections."""

    name = "SelectionSort"

    def sort(self, data: Iterable[int]) -> SortOutcome:
        self._begin()
        values = list(data)
        counts = split_counts(len(values), self.workers)
        starts = [0, *accumulate(counts)]
        sections = [
            _selection_sort(values[start:end]) for start, end in zip(starts, starts[1:])
        ]

        with self._communicating():
            gathered = [list(section) for section in sections]

        merged = merge_sorted(gathered)

        with self._communicating():
            result = list(merged)

        return self._finish(result)