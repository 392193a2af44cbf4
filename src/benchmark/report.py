"""
Console and plot reporting for phone book benchmark runs.

The benchmark core only returns RunResult objects; everything that is
printed or drawn is produced here.
"""

from typing import List, Sequence

import matplotlib.pyplot as plt

from .benchmark import RunResult

STOPPED_SUFFIX = " - STOPPED, moved to linear search"


def format_duration(duration_ms: float) -> str:
    """Format milliseconds as "MM min. SS sec. LLL ms."."""
    total_ms = int(duration_ms)
    minutes, remainder = divmod(total_ms, 60_000)
    seconds, millis = divmod(remainder, 1000)
    return f"{minutes:02d} min. {seconds:02d} sec. {millis:03d} ms."


def format_start(name: str) -> str:
    return f"Start searching ({name})..."


def format_found(result: RunResult) -> str:
    return (
        f"Found {result.found} / {result.total_queries} entries. "
        f"Time taken: {format_duration(result.total_time_ms)}"
    )


def format_run_result(result: RunResult) -> List[str]:
    """Render the report lines for one run, without the start line."""
    lines = [format_found(result)]

    if result.setup_phase == "sort":
        sort_line = f"Sorting time: {format_duration(result.setup_time_ms)}"
        if result.fell_back:
            sort_line += STOPPED_SUFFIX
        lines.append(sort_line)
    elif result.setup_phase == "build":
        lines.append(f"Creating time: {format_duration(result.setup_time_ms)}")

    if result.setup_phase is not None:
        lines.append(f"Searching time: {format_duration(result.search_time_ms)}")

    return lines


def print_start(name: str) -> None:
    print(f"\n{format_start(name)}")


def print_run_result(result: RunResult) -> None:
    for line in format_run_result(result):
        print(line)


def print_summary(results: Sequence[RunResult]) -> None:
    """Print a table of all runs"""
    print("\nPhone Book Benchmark Results")
    print("=" * 80)

    header = (
        f"{'Run':<28} {'Found':<12} {'Setup (ms)':<12} "
        f"{'Search (ms)':<12} {'Memory (MB)':<12}"
    )
    print(header)
    print("-" * len(header))

    for result in results:
        found = f"{result.found}/{result.total_queries}"
        setup = (
            f"{result.setup_time_ms:<12.2f}"
            if result.setup_time_ms is not None
            else f"{'N/A':<12}"
        )
        memory = (
            f"{result.memory_usage:<12.2f}"
            if result.memory_usage is not None
            else f"{'N/A':<12}"
        )
        name = result.name + (" *" if result.fell_back else "")
        print(
            f"{name:<28} {found:<12} {setup} {result.search_time_ms:<12.2f} {memory}"
        )

    if any(result.fell_back for result in results):
        print("* sort stopped over budget, searched linearly")


def plot_results(
    results: Sequence[RunResult],
    plot_name: str,
    show_plots: bool = False,
    save_plot: bool = True,
) -> None:
    """Draw setup and search time per run as stacked bars"""
    names = [result.name for result in results]
    setup_times = [result.setup_time_ms or 0.0 for result in results]
    search_times = [result.search_time_ms for result in results]
    positions = range(len(results))

    plt.figure(figsize=(12, 8))
    plt.bar(positions, setup_times, color="orange", label="Sort / build")
    plt.bar(
        positions, search_times, bottom=setup_times, color="blue", label="Search"
    )

    plt.xticks(list(positions), names, rotation=15)
    plt.ylabel("Time (ms)")
    plt.title(f"{plot_name} - Phase Time")
    plt.legend()
    plt.grid(True, axis="y", alpha=0.3)
    plt.tight_layout()

    if save_plot:
        filename = f"{plot_name}.png"
        plt.savefig(filename, dpi=300, bbox_inches="tight")

    if show_plots:
        plt.show()
    else:
        plt.close()
