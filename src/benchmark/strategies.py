from enum import Enum
from typing import Optional, Union

from ..algorithms.algorithm import Algorithm
from ..algorithms.binary_search import BinarySearch
from ..algorithms.hash_table_search import HashTableSearch
from ..algorithms.jump_search import JumpSearch
from ..algorithms.linear_search import LinearSearch
from ..data_structures.directory import Directory
from ..data_structures.hash_index import HashIndex
from ..sorting.bubble_sort import BubbleSort
from ..sorting.quick_sort import QuickSort
from ..sorting.sorter import Sorter


class SortStrategy(Enum):
    BUBBLE = "bubble"
    QUICK = "quick"

    @classmethod
    def from_name(cls, name: Union[str, "SortStrategy"]) -> "SortStrategy":
        """Resolve a strategy name, rejecting anything outside the enumeration."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown sort strategy: {name}") from None


class SearchStrategy(Enum):
    LINEAR = "linear"
    JUMP = "jump"
    BINARY = "binary"
    HASH = "hash"

    @classmethod
    def from_name(cls, name: Union[str, "SearchStrategy"]) -> "SearchStrategy":
        """Resolve a strategy name, rejecting anything outside the enumeration."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown search strategy: {name}") from None

    @property
    def requires_sorted(self) -> bool:
        return self in (SearchStrategy.JUMP, SearchStrategy.BINARY)


def create_sorter(strategy: SortStrategy) -> Sorter:
    if strategy is SortStrategy.BUBBLE:
        return BubbleSort()
    elif strategy is SortStrategy.QUICK:
        return QuickSort()
    else:
        raise ValueError(f"Unknown sort strategy: {strategy}")


def create_search(
    strategy: SearchStrategy,
    directory: Directory,
    hash_index: Optional[HashIndex] = None,
) -> Algorithm:
    """
    Instantiate the search algorithm for a strategy over a directory.

    Raises:
        ValueError: For HASH without a built index, or an unknown strategy
    """
    if strategy is SearchStrategy.LINEAR:
        return LinearSearch(directory)
    elif strategy is SearchStrategy.JUMP:
        return JumpSearch(directory)
    elif strategy is SearchStrategy.BINARY:
        return BinarySearch(directory)
    elif strategy is SearchStrategy.HASH:
        if hash_index is None:
            raise ValueError("Hash table search requires a built HashIndex")
        return HashTableSearch(directory, hash_index)
    else:
        raise ValueError(f"Unknown search strategy: {strategy}")
