from ..data_structures.directory import Directory
from .sorter import Sorter, SortStatus
from .time_budget import TimeBudget


class BubbleSort(Sorter):
    """
    Adjacent-swap bubble sort.

    Each pass moves the largest remaining key to the end, so the scanned
    range shrinks by one per pass. A pass without swaps ends the sort early;
    an already sorted directory is left untouched.
    """

    def _sort(
        self, directory: Directory, budget: TimeBudget, start_time: float
    ) -> SortStatus:
        size = len(directory)

        for iteration in range(size - 1):
            swapped = False
            for i in range(size - 1 - iteration):
                if budget.is_over_budget(start_time):
                    return SortStatus.ABORTED
                self.comparisons += 1
                if directory[i].key > directory[i + 1].key:
                    self._swap(directory, i, i + 1)
                    swapped = True
            if not swapped:
                break

        return SortStatus.COMPLETED

    def get_algorithm_name(self) -> str:
        return "Bubble Sort"
