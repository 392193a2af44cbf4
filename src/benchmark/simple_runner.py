"""
Phone book search benchmark runner.

Usage examples:
    python -m src.benchmark.simple_runner
    python -m src.benchmark.simple_runner --directory data/directory.txt --find data/find.txt
    python -m src.benchmark.simple_runner --runs bubble:jump,quick:binary --ratio 10 --plot
"""

import argparse
import sys
from typing import List, Optional, Tuple

from data.reader import DirectoryReader, QueryReader
from src.benchmark.benchmark import BenchmarkConfig, PhoneBookBenchmark
from src.benchmark.report import (
    plot_results,
    print_run_result,
    print_start,
    print_summary,
)


def parse_runs(value: str) -> List[Tuple[str, str]]:
    """Parse "sort:search,sort:search" into (sort, search) name pairs."""
    runs = []
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        sort_name, separator, search_name = item.partition(":")
        if not separator:
            raise ValueError(f"Run must look like sort:search, got: {item}")
        runs.append((sort_name.strip(), search_name.strip()))
    return runs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark phone book searches")
    parser.add_argument(
        "--directory", default="data/directory.txt", help="Path to directory file"
    )
    parser.add_argument("--find", default="data/find.txt", help="Path to query file")
    parser.add_argument(
        "--runs",
        default="bubble:jump,quick:binary",
        help="Comma-separated sort:search pairs run after the linear baseline",
    )
    parser.add_argument(
        "--ratio",
        type=float,
        default=10,
        help="Sort budget as a multiple of the baseline linear search time",
    )
    parser.add_argument(
        "--limit", type=int, default=None, help="Only load the first N entries"
    )
    parser.add_argument(
        "--no-hash", action="store_true", help="Skip the hash table run"
    )
    parser.add_argument(
        "--summary", action="store_true", help="Print a summary table at the end"
    )
    parser.add_argument("--plot", action="store_true", help="Save a phase time plot")
    parser.add_argument(
        "--plot-name", default="phonebook-benchmark", help="Prefix for plot file"
    )
    parser.add_argument("--show-plots", action="store_true", help="Show the plot")
    return parser


def run(config: BenchmarkConfig, summary: bool = False) -> PhoneBookBenchmark:
    reader = DirectoryReader(config.directory_path, limit=config.limit)
    directory = reader.to_directory()
    queries = QueryReader(config.find_path).lines()
    print(f"Loaded {len(directory):,} entries and {len(queries):,} queries")

    benchmark = PhoneBookBenchmark(
        directory,
        queries,
        sort_to_search_ratio=config.sort_to_search_ratio,
        measure_memory=config.measure_memory,
    )
    results = benchmark.run_suite(
        config.runs,
        hash_table=config.hash_table,
        on_start=print_start,
        on_result=print_run_result,
    )

    if summary:
        print_summary(results)
    if config.save_plot or config.show_plots:
        plot_results(
            results,
            config.plot_name,
            show_plots=config.show_plots,
            save_plot=config.save_plot,
        )
        if config.save_plot:
            print(f"\nPlot saved as {config.plot_name}.png")

    return benchmark


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)

    try:
        config = BenchmarkConfig(
            directory_path=args.directory,
            find_path=args.find,
            sort_to_search_ratio=args.ratio,
            runs=parse_runs(args.runs),
            hash_table=not args.no_hash,
            limit=args.limit,
            plot_name=args.plot_name,
            show_plots=args.show_plots,
            save_plot=args.plot,
        )
        run(config, summary=args.summary)

    except FileNotFoundError as e:
        print(f"Error: {e}")
        print("Make sure the data files exist. You may need to generate them first.")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
