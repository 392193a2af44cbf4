import math
import time

from ..data_structures.directory import Directory
from .algorithm import Algorithm, SearchResult


class JumpSearch(Algorithm):
    """
    Recursive jump search by exact key on a directory sorted ascending by key.

    The active range is walked in blocks of floor(sqrt(size)). When a block
    boundary overshoots the target, the search recurses into the entries
    skipped by the last jump. Bounds are always absolute directory positions,
    so a match found in a sub-range needs no translation. Close to the end of
    the range, where a full jump would leave it, the walk steps one entry at
    a time.

    Time Complexity: O(sqrt(n))
    """

    def __init__(self, directory: Directory):
        super().__init__(directory)
        self._comparisons = 0

    def search(self, target: str) -> SearchResult:
        if not self.validate_target(target):
            return SearchResult(found=False, index=-1, comparisons=0, time_taken=0.0)

        start_time = time.perf_counter()
        self._comparisons = 0

        result_index = self._search_range(target, 0, len(self.directory))

        time_taken = time.perf_counter() - start_time

        return SearchResult(
            found=result_index != -1,
            index=result_index,
            comparisons=self._comparisons,
            time_taken=time_taken,
        )

    def _search_range(self, target: str, low: int, high: int) -> int:
        """Search positions [low, high) and return the match position or -1."""
        size = high - low
        if size <= 0:
            return -1

        jump = math.isqrt(size)
        previous = low - 1
        i = low

        while i < high:
            key = self.directory[i].key
            self._comparisons += 1

            if key == target:
                return i
            if key > target:
                # Sub-range excludes i, so it is strictly smaller than this one
                return self._search_range(target, previous + 1, i)

            previous = i
            i += jump if i + jump < high else 1

        return -1

    def get_algorithm_name(self) -> str:
        return "Jump Search"
