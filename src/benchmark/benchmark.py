import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

import psutil

from ..algorithms.hash_table_search import HashTableSearch
from ..algorithms.linear_search import LinearSearch
from ..data_structures.directory import Directory
from ..data_structures.hash_index import HashIndex
from ..sorting.sorter import SortStatus
from ..sorting.time_budget import TimeBudget
from .strategies import SearchStrategy, SortStrategy, create_search, create_sorter

DEFAULT_SORT_TO_SEARCH_RATIO = 10
DEFAULT_RUNS: List[Tuple[str, str]] = [("bubble", "jump"), ("quick", "binary")]

LINEAR_RUN_NAME = "linear search"
HASH_RUN_NAME = "hash table"

RunSpec = Tuple[Union[str, SortStrategy], Union[str, SearchStrategy]]


def describe_run(sort: SortStrategy, search: SearchStrategy) -> str:
    return f"{sort.value} sort + {search.value} search"


def resolve_run(run: RunSpec) -> Tuple[SortStrategy, SearchStrategy]:
    """
    Resolve a (sort, search) pair of names for a sort-then-search run.

    Raises:
        ValueError: On unknown names, or when hash search is requested
    """
    sort_name, search_name = run
    sort = SortStrategy.from_name(sort_name)
    search = SearchStrategy.from_name(search_name)
    if search is SearchStrategy.HASH:
        raise ValueError(
            "Hash table search cannot follow a sort; use the hash table run instead"
        )
    return sort, search


@dataclass
class BenchmarkConfig:
    """Configuration for a phone book benchmark suite"""

    directory_path: Union[str, Path] = "data/directory.txt"
    find_path: Union[str, Path] = "data/find.txt"
    sort_to_search_ratio: float = DEFAULT_SORT_TO_SEARCH_RATIO
    runs: List[RunSpec] = field(default_factory=lambda: list(DEFAULT_RUNS))
    hash_table: bool = True
    limit: Optional[int] = None
    plot_name: str = "phonebook-benchmark"
    show_plots: bool = False
    save_plot: bool = False
    measure_memory: bool = True

    def __post_init__(self):
        if self.sort_to_search_ratio < 0:
            raise ValueError("Sort to search ratio must be non-negative")
        if self.limit is not None and self.limit < 0:
            raise ValueError("Limit must be non-negative or None")
        self.runs = [resolve_run(run) for run in self.runs]


@dataclass
class RunResult:
    """
    Outcome of a single benchmark run.

    setup_time_ms is the sort phase for sort-then-search runs and the index
    build phase for the hash table run; the baseline linear run has none.
    search_strategy is the search that actually ran, which is linear search
    when the paired sort was aborted.
    """

    name: str
    hits: List[str]
    total_queries: int
    search_time_ms: float
    total_time_ms: float
    search_strategy: SearchStrategy
    requested_search: Optional[SearchStrategy] = None
    sort_strategy: Optional[SortStrategy] = None
    sort_status: Optional[SortStatus] = None
    setup_time_ms: Optional[float] = None
    setup_phase: Optional[str] = None
    sort_comparisons: int = 0
    sort_swaps: int = 0
    memory_usage: Optional[float] = None

    @property
    def found(self) -> int:
        return len(self.hits)

    @property
    def fell_back(self) -> bool:
        return self.sort_status is SortStatus.ABORTED


class PhoneBookBenchmark:
    """
    Runs search strategies over one shared directory and times each phase.

    The directory is reordered in place by every sort, and later runs see
    whatever order the previous run left behind. The time budget is owned
    here: it is fixed by the first linear search and then passed to every sort.

    Args:
        directory: Entries to search, mutated by sort runs
        queries: Names to look up, never mutated
        sort_to_search_ratio: Budget multiplier applied to the baseline duration
        clock: Monotonic clock in seconds used for all timings
        measure_memory: Whether to sample process RSS after each run
    """

    def __init__(
        self,
        directory: Directory,
        queries: Sequence[str],
        sort_to_search_ratio: float = DEFAULT_SORT_TO_SEARCH_RATIO,
        clock: Callable[[], float] = time.perf_counter,
        measure_memory: bool = True,
    ):
        if sort_to_search_ratio < 0:
            raise ValueError("Sort to search ratio must be non-negative")
        self.directory = directory
        self.queries: Tuple[str, ...] = tuple(queries)
        self.sort_to_search_ratio = sort_to_search_ratio
        self.budget = TimeBudget(clock)
        self.measure_memory = measure_memory
        self.results: List[RunResult] = []

    @classmethod
    def from_lines(
        cls, directory_lines: Iterable[str], query_lines: Iterable[str], **kwargs
    ) -> "PhoneBookBenchmark":
        return cls(Directory.from_lines(directory_lines), list(query_lines), **kwargs)

    def linear_search_first_run(self) -> RunResult:
        """
        Run the unsorted linear search baseline and fix the sort time budget.

        Raises:
            RuntimeError: If the baseline already ran
        """
        if self.budget.is_set:
            raise RuntimeError("Baseline linear search already ran")

        start_time = self.budget.now()
        hits = LinearSearch(self.directory).find_all(self.queries)
        elapsed = self.budget.elapsed_ms(start_time)
        self.budget.set_budget(elapsed, self.sort_to_search_ratio)

        return self._record(
            RunResult(
                name=LINEAR_RUN_NAME,
                hits=[entry.raw for entry in hits],
                total_queries=len(self.queries),
                search_time_ms=elapsed,
                total_time_ms=elapsed,
                search_strategy=SearchStrategy.LINEAR,
                requested_search=SearchStrategy.LINEAR,
            )
        )

    def sort_then_search(
        self,
        sorter: Union[str, SortStrategy],
        searcher: Union[str, SearchStrategy],
    ) -> RunResult:
        """
        Sort the directory within the budget, then search it.

        If the sort is aborted the requested search is replaced by linear
        search over the partially sorted directory.

        Raises:
            ValueError: For unknown strategies or a hash search request
        """
        sort_strategy, search_strategy = resolve_run((sorter, searcher))

        start_time = self.budget.now()
        sort_impl = create_sorter(sort_strategy)
        status = sort_impl.sort(self.directory, self.budget, start_time)
        sort_time = self.budget.elapsed_ms(start_time)

        used_search = (
            SearchStrategy.LINEAR if status is SortStatus.ABORTED else search_strategy
        )
        search_start = self.budget.now()
        hits = create_search(used_search, self.directory).find_all(self.queries)
        search_time = self.budget.elapsed_ms(search_start)

        return self._record(
            RunResult(
                name=describe_run(sort_strategy, search_strategy),
                hits=[entry.raw for entry in hits],
                total_queries=len(self.queries),
                search_time_ms=search_time,
                total_time_ms=self.budget.elapsed_ms(start_time),
                search_strategy=used_search,
                requested_search=search_strategy,
                sort_strategy=sort_strategy,
                sort_status=status,
                setup_time_ms=sort_time,
                setup_phase="sort",
                sort_comparisons=sort_impl.comparisons,
                sort_swaps=sort_impl.swaps,
            )
        )

    def hash_table_search(self) -> RunResult:
        """Build a HashIndex over the directory as it is now, then search it."""
        start_time = self.budget.now()
        hash_index = HashIndex.build(self.directory)
        build_time = self.budget.elapsed_ms(start_time)

        search_start = self.budget.now()
        hits = HashTableSearch(self.directory, hash_index).find_all(self.queries)
        search_time = self.budget.elapsed_ms(search_start)

        return self._record(
            RunResult(
                name=HASH_RUN_NAME,
                hits=[entry.raw for entry in hits],
                total_queries=len(self.queries),
                search_time_ms=search_time,
                total_time_ms=self.budget.elapsed_ms(start_time),
                search_strategy=SearchStrategy.HASH,
                requested_search=SearchStrategy.HASH,
                setup_time_ms=build_time,
                setup_phase="build",
            )
        )

    def run_suite(
        self,
        runs: Optional[Iterable[RunSpec]] = None,
        hash_table: bool = True,
        on_start: Optional[Callable[[str], None]] = None,
        on_result: Optional[Callable[[RunResult], None]] = None,
    ) -> List[RunResult]:
        """
        Run the baseline, every (sort, search) pair in order, then the hash table.

        All run specs are resolved before anything executes, so a bad name
        fails before the directory is touched.
        """
        if runs is None:
            runs = DEFAULT_RUNS
        resolved = [resolve_run(run) for run in runs]

        steps: List[Tuple[str, Callable[[], RunResult]]] = [
            (LINEAR_RUN_NAME, self.linear_search_first_run)
        ]
        for sort, search in resolved:
            steps.append(
                (
                    describe_run(sort, search),
                    lambda sort=sort, search=search: self.sort_then_search(
                        sort, search
                    ),
                )
            )
        if hash_table:
            steps.append((HASH_RUN_NAME, self.hash_table_search))

        suite_results = []
        for name, step in steps:
            if on_start is not None:
                on_start(name)
            result = step()
            if on_result is not None:
                on_result(result)
            suite_results.append(result)
        return suite_results

    def _record(self, result: RunResult) -> RunResult:
        if self.measure_memory:
            process = psutil.Process(os.getpid())
            result.memory_usage = process.memory_info().rss / 1024 / 1024  # MB
        self.results.append(result)
        return result
