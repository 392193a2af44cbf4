import time

from ..data_structures.directory import Directory
from .algorithm import Algorithm, SearchResult


class BinarySearch(Algorithm):
    """Binary search by exact key on a directory sorted ascending by key."""

    def __init__(self, directory: Directory):
        super().__init__(directory)

    def search(self, target: str) -> SearchResult:
        """Search for target using binary search."""
        if not self.validate_target(target):
            return SearchResult(found=False, index=-1, comparisons=0, time_taken=0.0)

        start_time = time.perf_counter()
        comparisons = 0

        left, right = 0, len(self.directory) - 1
        result_index = -1

        while left <= right:
            mid = (left + right) // 2
            comparisons += 1

            mid_key = self.directory[mid].key

            if mid_key == target:
                result_index = mid
                break
            elif mid_key < target:
                left = mid + 1
            else:
                right = mid - 1

        time_taken = time.perf_counter() - start_time

        return SearchResult(
            found=result_index != -1,
            index=result_index,
            comparisons=comparisons,
            time_taken=time_taken,
        )

    def get_algorithm_name(self) -> str:
        return "Binary Search"
