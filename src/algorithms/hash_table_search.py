import time

from ..data_structures.directory import Directory
from ..data_structures.hash_index import HashIndex
from .algorithm import Algorithm, SearchResult


class HashTableSearch(Algorithm):
    """
    Exact key lookup against a prebuilt HashIndex.

    The index must have been built over this directory in its current order;
    positions it returns are read straight back from the directory.
    """

    def __init__(self, directory: Directory, hash_index: HashIndex):
        super().__init__(directory)
        self.hash_index = hash_index

    def search(self, target: str) -> SearchResult:
        if not self.validate_target(target):
            return SearchResult(found=False, index=-1, comparisons=0, time_taken=0.0)

        start_time = time.perf_counter()
        index = self.hash_index.get(target)
        time_taken = time.perf_counter() - start_time

        return SearchResult(
            found=index != -1,
            index=index,
            comparisons=0,
            time_taken=time_taken,
            hash_operations=1,
        )

    def get_algorithm_name(self) -> str:
        return "Hash Table"
