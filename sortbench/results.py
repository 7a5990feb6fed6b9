"""A JSON log of benchmark runs, appended to across program runs."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


class ResultLog:
    """Holds the entries of a JSON array file and writes them back on save."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self.entries: list[Any] = self._load()

    def _load(self) -> list[Any]:
        try:
            with self.path.open(encoding="utf-8") as stream:
                content = json.load(stream)
        except (OSError, ValueError):
            return []
        return content if isinstance(content, list) else []

    def add_entry(
        self,
        algorithm: str,
        num_cpus: int,
        data_size: int,
        total_time: float,
        comm_time: float,
        sort_time: float,
    ) -> None:
        """Append the figures of one run."""
        self.entries.append(
            {
                "algorithm": algorithm,
                "numCpus": num_cpus,
                "dataSize": data_size,
                "totalTime": total_time,
                "commTime": comm_time,
                "sortTime": sort_time,
            }
        )

    def save(self) -> None:
        """Overwrite the file with every entry, indented by four spaces."""
        with self.path.open("w", encoding="utf-8") as stream:
            stream.write(json.dumps(self.entries, indent=4))

    def __enter__(self) -> ResultLog:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.save()