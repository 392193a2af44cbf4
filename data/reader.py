from pathlib import Path
from typing import Iterator, List, Optional, Union

from src.data_structures.directory import Directory


class LineReader:
    """Reads a text file into memory as a list of non-empty lines."""

    kind = "Input"

    def __init__(self, filepath: Union[str, Path], limit: Optional[int] = None):
        self.filepath = Path(filepath)

        if not self.filepath.exists():
            raise FileNotFoundError(f"{self.kind} file not found: {self.filepath}")

        if limit is not None and limit < 0:
            raise ValueError("Limit must be non-negative or None")

        self.limit = limit
        self._lines = self._load_lines()

    def _load_lines(self) -> List[str]:
        with open(self.filepath, "r", encoding="utf-8") as f:
            return [line.rstrip("\r\n") for line in f if line.strip()]

    def __len__(self) -> int:
        return len(self.lines())

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines())

    def lines(self) -> List[str]:
        """Return the loaded lines, capped at the limit when one is set."""
        return self._lines[: self.limit]


class DirectoryReader(LineReader):
    """Reader for phone book files with one "<number> <name>" record per line."""

    kind = "Directory"

    def to_directory(self) -> Directory:
        return Directory.from_lines(self.lines())


class QueryReader(LineReader):
    """Reader for query files with one name per line."""

    kind = "Query"
