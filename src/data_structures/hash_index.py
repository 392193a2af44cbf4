from typing import Dict, Iterator

from .directory import Directory

NOT_FOUND = -1


class HashIndex:
    """Exact-match index mapping an entry key to its position in a directory."""

    def __init__(self):
        self._positions: Dict[str, int] = {}

    @classmethod
    def build(cls, directory: Directory) -> "HashIndex":
        """
        Index every entry of the directory in its current order.

        When a key occurs more than once, the later position wins.
        """
        index = cls()
        for position, entry in enumerate(directory):
            index.add(entry.key, position)
        return index

    def add(self, key: str, position: int) -> None:
        self._positions[key] = position

    def get(self, key: str) -> int:
        """Return the indexed position of key, or -1 when absent."""
        return self._positions.get(key, NOT_FOUND)

    def __contains__(self, key: object) -> bool:
        return key in self._positions

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[str]:
        return iter(self._positions)
