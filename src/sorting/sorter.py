from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from ..data_structures.directory import Directory
from .time_budget import TimeBudget


class SortStatus(Enum):
    """Outcome of a budgeted sort."""

    COMPLETED = "completed"
    ABORTED = "aborted"


class Sorter(ABC):
    """
    Abstract base class for in-place directory sorts.

    Sorts compare entries by key and check the time budget before every
    comparison. An aborted sort leaves the directory partially ordered but
    still a permutation of its input.
    """

    def __init__(self):
        self.comparisons = 0
        self.swaps = 0

    def sort(
        self,
        directory: Directory,
        budget: TimeBudget,
        start_time: Optional[float] = None,
    ) -> SortStatus:
        """
        Sort the directory in place by key.

        Args:
            directory: Directory to reorder
            budget: Time budget checked before every comparison
            start_time: Start of the sort phase from ``budget.now()``;
                        taken at call time when omitted

        Returns:
            SortStatus.COMPLETED, or SortStatus.ABORTED if the budget ran out
        """
        if start_time is None:
            start_time = budget.now()
        self.comparisons = 0
        self.swaps = 0
        return self._sort(directory, budget, start_time)

    @abstractmethod
    def _sort(
        self, directory: Directory, budget: TimeBudget, start_time: float
    ) -> SortStatus:
        pass

    @abstractmethod
    def get_algorithm_name(self) -> str:
        pass

    def _swap(self, directory: Directory, i: int, j: int) -> None:
        directory.swap(i, j)
        self.swaps += 1

    def __str__(self) -> str:
        return f"{self.get_algorithm_name()}"
