"""Common interface shared by the simulated distributed sorting algorithms."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator


@dataclass(frozen=True)
class SortOutcome:
    """The sorted values and the seconds spent exchanging data between workers."""

    data: list[int]
    comm_time: float


def split_counts(total: int, parts: int) -> list[int]:
    """Split ``total`` items into ``parts`` counts, the first ones taking the remainder."""
    if parts < 1:
        raise ValueError(f"parts must be at least 1, got {parts}")
    if total < 0:
        raise ValueError(f"total must not be negative, got {total}")
    base, remainder = divmod(total, parts)
    return [base + 1 if index < remainder else base for index in range(parts)]


class SortingAlgorithm(ABC):
    """A sort that simulates ``workers`` cooperating processes."""

    name: ClassVar[str] = "SortingAlgorithm"

    def __init__(self, workers: int = 1) -> None:
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.workers = workers
        self._comm_time = 0.0

    @abstractmethod
    def sort(self, data: Iterable[int]) -> SortOutcome:
        """Sort ``data`` and report how long the data exchanges took."""

    def _begin(self) -> None:
        self._comm_time = 0.0

    @contextmanager
    def _communicating(self) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            self._comm_time += time.perf_counter() - start

    def _finish(self, data: list[int]) -> SortOutcome:
        return SortOutcome(data=data, comm_time=self._comm_time)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(workers={self.workers})"