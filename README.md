# sortbench

A small benchmark of sorting algorithms that split their input between a
number of workers, sort the parts, and bring the results back together.
The workers are simulated inside one Python process: each algorithm carries
out the partitioning and the data exchanges itself and times the exchange
steps separately. A run reports the total time, the time spent exchanging
data, and the time spent sorting, and appends the figures to a JSON log.

## Algorithms

| Name            | How it works                                                                 |
|-----------------|------------------------------------------------------------------------------|
| `SelectionSort` | each worker selection-sorts its slice; the slices are heap-merged            |
| `BucketSort`    | values are routed to value-range buckets, one per worker, then sorted        |
| `OddEvenSort`   | workers sort equal blocks, then neighbours merge and split them in phases    |
| `ShellSort`     | each worker shell-sorts an equal block; the gathered array is shell-sorted   |
| `RankSort`      | every value is placed at the position given by the count of smaller values   |

Slices are sized as evenly as possible, with the first workers taking one
extra value where the input does not divide evenly (`sortbench.base.split_counts`).
Some algorithms keep the limits of their block layout:

- `OddEvenSort` works on equal blocks of `len(data) // workers` values; any
  values beyond the last whole block are appended unsorted.
- `ShellSort` has each worker sort an equal block, while the gathered array is
  laid out with the remainder going to the first workers; slots no worker
  fills hold `0` before the final sort.
- `RankSort` raises `ValueError` if the input cannot be split evenly between
  the workers. Equal values get the same rank, so the positions after a run of
  duplicates are left at `0`.

When one of these leaves the result out of order or altered, the command
below detects and reports it.

## Installing

```
pip install .
```

## Running a benchmark

The input is a text file of whitespace-separated integers. Reading stops at
the first token that is not an integer.

```
sortbench BucketSort numbers.txt --workers 4
```

Arguments and options:

- `algorithm` — the algorithm name (default `SelectionSort`)
- `path` — the data file (default `../../Data/1m_data.txt`)
- `--workers N` — number of simulated workers (default `1`)
- `--output FILE` — the JSON log to append to (default `sort_results.json`)

After sorting, the result is checked. If it is not in order the command prints
the first offending index and the values around it, and exits with status 1.
An unknown algorithm name, an unreadable or empty data file, or an input the
algorithm rejects also give status 1. On success an entry is appended to the
log:

```json
[
    {
        "algorithm": "BucketSort",
        "numCpus": 4,
        "dataSize": 1000000,
        "totalTime": 0.41,
        "commTime": 0.02,
        "sortTime": 0.39
    }
]
```

`dataSize` is not counted from the file: it is `10000000` when the data path
contains `10` and `1000000` otherwise. An existing log that is missing,
unreadable or not a JSON array is started afresh.

## Using it from Python

```python
from sortbench.factory import create_sort_algorithm
from sortbench.results import ResultLog

sorter = create_sort_algorithm("ShellSort", 4)
outcome = sorter.sort([5, 3, 9, 1, 7, 2, 8, 4])
print(outcome.data)       # [1, 2, 3, 4, 5, 7, 8, 9]
print(outcome.comm_time)  # seconds spent in the exchange steps

with ResultLog("sort_results.json") as log:
    log.add_entry("ShellSort", 4, 8, 0.01, 0.0, 0.01)
```

Every algorithm is a `sortbench.base.SortingAlgorithm` with a `name` and a
`workers` count, and its `sort` returns a `SortOutcome`. `create_sort_algorithm`
raises `ValueError` for an unknown name, and a worker count below 1 raises
`ValueError` too. `ResultLog` writes the file with four-space indentation when
`save()` is called or its `with` block ends.

Helpers that can be used on their own:

- `sortbench.selection.merge_sorted(sections)` — merge sorted sections
- `sortbench.shell.shell_sort(values)` — shell sort with halving gaps
- `sortbench.cli.read_data(path)` — read the integers of a data file
- `sortbench.cli.first_unsorted_index(data)` — index of the first value out of
  order, or `None`

## What it does not do

The workers are not separate processes or machines: nothing runs in parallel,
and the exchange times measure in-process copying rather than network traffic.

## Tests

```
pip install .[test]
pytest
```