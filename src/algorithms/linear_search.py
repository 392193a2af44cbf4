import time

from .algorithm import Algorithm, SearchResult


class LinearSearch(Algorithm):
    """
    Linear Search Algorithm Implementation

    Scans the directory front to back and returns the first entry whose full
    record contains the target. Matching is by substring against the raw
    line, not by key equality, so it needs no ordering and also works as the
    fallback when a sort was abandoned.

    Time Complexity: O(n) - worst case, best case O(1), average case O(n/2)
    Space Complexity: O(1) - constant extra space
    """

    def search(self, target: str) -> SearchResult:
        """
        Search for the first entry containing target.

        Unlike plain substring matching, an empty or whitespace-only target
        is rejected by validate_target and never found.

        Args:
            target: Name or substring to search for

        Returns:
            A SearchResult object containing the search outcome
        """
        if not self.validate_target(target):
            return SearchResult(found=False, index=-1, comparisons=0, time_taken=0.0)

        start_time = time.perf_counter()
        comparisons = 0

        for i, entry in enumerate(self.directory):
            comparisons += 1
            if target in entry.raw:
                return SearchResult(
                    found=True,
                    index=i,
                    comparisons=comparisons,
                    time_taken=time.perf_counter() - start_time,
                )

        # Element not found
        return SearchResult(
            found=False,
            index=-1,
            comparisons=comparisons,
            time_taken=time.perf_counter() - start_time,
        )

    def get_algorithm_name(self) -> str:
        return "Linear Search"
