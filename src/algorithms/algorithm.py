from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List

from ..data_structures.directory import Directory
from ..data_structures.entry import Entry


@dataclass
class SearchResult:
    """
    Result of a search operation.

    Attributes:
        found: Whether the item was found
        index: Index of the item in the directory if found, -1 otherwise
        comparisons: Number of comparisons performed
        time_taken: Time taken for the search in seconds
        hash_operations: Number of hash lookups performed (hash-based algorithms)
    """

    found: bool
    index: int
    comparisons: int
    time_taken: float
    hash_operations: int = 0


class Algorithm(ABC):
    """
    Abstract base class for phone book search algorithms.

    This class defines the interface that all search algorithms must implement
    to look up a query in a directory of entries.
    """

    def __init__(self, directory: Directory):
        """
        Initialize the algorithm with a directory.

        Args:
            directory: The directory to search. Algorithms that require
                       sorted input do not sort it themselves.
        """
        self.directory = directory

    @abstractmethod
    def search(self, target: str) -> SearchResult:
        """
        Search for the target in the directory.

        Args:
            target: The name (or, for linear search, substring) to look up

        Returns:
            A SearchResult object containing the search outcome
        """
        pass

    @abstractmethod
    def get_algorithm_name(self) -> str:
        """
        Get the name of the algorithm.

        Returns:
            A string representing the algorithm name
        """
        pass

    def find_all(self, queries: Iterable[str]) -> List[Entry]:
        """
        Search every query and collect the matching entries.

        Queries that are not found are skipped, so the result holds at most
        one entry per query, in query order.
        """
        hits = []
        for query in queries:
            result = self.search(query)
            if result.found:
                hits.append(self.directory[result.index])
        return hits

    def validate_target(self, target: str) -> bool:
        """
        Validate that the target is a non-empty string.

        Args:
            target: The query to validate

        Returns:
            True if target is valid, False otherwise
        """
        return isinstance(target, str) and len(target.strip()) > 0

    def __str__(self) -> str:
        """String representation of the algorithm."""
        return f"{self.get_algorithm_name()}"
