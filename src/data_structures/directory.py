from typing import Iterable, Iterator, List

from .entry import Entry, parse_entry


class Directory:
    """
    Mutable, ordered collection of phone book entries.

    The only mutation is swap(), so sorting can reorder entries but never
    add, drop or duplicate them. Every benchmark phase works on the same
    instance, which means a phase observes the ordering left by the previous one.
    """

    def __init__(self, entries: Iterable[Entry] = ()):
        self._entries: List[Entry] = list(entries)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Directory":
        """Build a directory by parsing raw "<number> <name>" lines."""
        return cls(parse_entry(line) for line in lines)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Entry:
        return self._entries[index]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def swap(self, i: int, j: int) -> None:
        """Exchange the entries at positions i and j."""
        self._entries[i], self._entries[j] = self._entries[j], self._entries[i]

    def keys(self) -> List[str]:
        return [entry.key for entry in self._entries]

    def raw_lines(self) -> List[str]:
        return [entry.raw for entry in self._entries]

    def is_sorted(self) -> bool:
        """Check that entries are non-decreasing by key."""
        return all(
            self._entries[i].key <= self._entries[i + 1].key
            for i in range(len(self._entries) - 1)
        )

    def __repr__(self) -> str:
        return f"Directory(size={len(self._entries)})"
