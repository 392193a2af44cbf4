from typing import Optional

from ..data_structures.directory import Directory
from .sorter import Sorter, SortStatus
from .time_budget import TimeBudget


class QuickSort(Sorter):
    """
    Recursive quicksort with a Lomuto partition on the last entry of the range.

    An abort detected inside any partition is returned through every
    enclosing call, so no further partitioning happens once the budget is
    exceeded. Recursion goes into the smaller side and the larger side is
    handled by the loop, which keeps the stack depth logarithmic even on
    already sorted input.
    """

    def _sort(
        self, directory: Directory, budget: TimeBudget, start_time: float
    ) -> SortStatus:
        return self._quick_sort(directory, budget, start_time, 0, len(directory) - 1)

    def _quick_sort(
        self,
        directory: Directory,
        budget: TimeBudget,
        start_time: float,
        low: int,
        high: int,
    ) -> SortStatus:
        while low < high:
            pivot_index = self._partition(directory, budget, start_time, low, high)
            if pivot_index is None:
                return SortStatus.ABORTED

            if pivot_index - low < high - pivot_index:
                status = self._quick_sort(
                    directory, budget, start_time, low, pivot_index - 1
                )
                low = pivot_index + 1
            else:
                status = self._quick_sort(
                    directory, budget, start_time, pivot_index + 1, high
                )
                high = pivot_index - 1

            if status is SortStatus.ABORTED:
                return status

        return SortStatus.COMPLETED

    def _partition(
        self,
        directory: Directory,
        budget: TimeBudget,
        start_time: float,
        low: int,
        high: int,
    ) -> Optional[int]:
        """Partition [low, high] around directory[high]; None means over budget."""
        pivot = directory[high].key
        boundary = low - 1

        # The pivot is compared last and ends up on the final boundary
        for i in range(low, high + 1):
            if budget.is_over_budget(start_time):
                return None
            self.comparisons += 1
            if directory[i].key <= pivot:
                boundary += 1
                if i != boundary:
                    self._swap(directory, boundary, i)

        return boundary

    def get_algorithm_name(self) -> str:
        return "Quick Sort"
