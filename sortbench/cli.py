"""Command line: read numbers, sort them with a chosen algorithm, log the timings."""

from __future__ import annotations

import argparse
import re
import sys
import time
from itertools import pairwise
from pathlib import Path

from sortbench.factory import create_sort_algorithm
from sortbench.results import ResultLog

DEFAULT_ALGORITHM = "SelectionSort"
DEFAULT_DATA_PATH = "../../Data/1m_data.txt"
RESULTS_FILE = "sort_results.json"

_INTEGER = re.compile(r"[+-]?\d+")


def read_data(path: str | Path) -> list[int]:
    """Read whitespace-separated integers, stopping at the first that is not one.

    A file that cannot be opened is reported on stderr and yields no values.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        print(f"Error opening file: {path}", file=sys.stderr)
        return []
    numbers: list[int] = []
    for token in text.split():
        match = _INTEGER.match(token)
        if match is None:
            break
        numbers.append(int(match.group()))
        if match.end() < len(token):
            break
    return numbers


def first_unsorted_index(data: list[int]) -> int | None:
    """Index of the first value smaller than the one before it, or None if sorted."""
    for index, (before, current) in enumerate(pairwise(data), start=1):
        if before > current:
            return index
    return None


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sortbench", description="Time a simulated distributed sort."
    )
    parser.add_argument("algorithm", nargs="?", default=DEFAULT_ALGORITHM)
    parser.add_argument("path", nargs="?", default=DEFAULT_DATA_PATH)
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--output", default=RESULTS_FILE)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    data_size = 10_000_000 if "10" in args.path else 1_000_000

    try:
        sorter = create_sort_algorithm(args.algorithm, args.workers)

        data = read_data(args.path)
        if not data:
            print(f"Error reading data from file: {args.path}", file=sys.stderr)
            return 1
        print("Data done reading\n")

        start = time.perf_counter()
        data = list(data)
        comm_time = time.perf_counter() - start

        start_total = time.perf_counter()
        outcome = sorter.sort(data)
        elapsed = time.perf_counter() - start_total

        result = outcome.data
        problem = first_unsorted_index(result)
        print(f"Array is {'correctly' if problem is None else 'not'} sorted.")
        if problem is not None:
            print(f"The problem happened at index: {problem}")
            print(" ".join(str(value) for value in result[max(0, problem - 2):problem + 3]))
            return 1

        print("Saving Info", end="")
        with ResultLog(args.output) as log:
            log.add_entry(
                sorter.name,
                args.workers,
                data_size,
                elapsed,
                comm_time + outcome.comm_time,
                elapsed - outcome.comm_time,
            )
    except (OSError, ValueError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0