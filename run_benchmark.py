import sys
import argparse
from tabulate import tabulate

from phone_book.benchmark import format_result, run_benchmark, summarize_runs
from phone_book.data_loader import load_directory, load_queries
from phone_book.strategies import STRATEGIES
from phone_book.timing import format_duration, print_measured
from phone_book.utils import MalformedEntryError

def run_phone_book(directory_path: str = None, find_path: str = None, num_entries: int = 1000,
                   num_queries: int = 100, miss_ratio: float = 0.0, seed: int = None,
                   strategies: list[str] = None, repeats: int = 1) -> int:
    """
    Loads the directory and the names to find, runs every selected strategy,
    and prints the per-strategy report and an averaged summary table.
    Returns the process exit status.
    """
    print("--- Phone Book Search Benchmark ---")

    # 1. Load inputs, from files or generated, timing each one
    try:
        directory = print_measured(
            "Reading data file..." if directory_path is not None else "Generating directory...",
            lambda: load_directory(directory_path, num_entries=num_entries, seed=seed),
        )
        queries = print_measured(
            "Reading findings file..." if find_path is not None else "Picking names to find...",
            lambda: load_queries(directory, find_path, num_queries=num_queries,
                                 miss_ratio=miss_ratio, seed=seed),
        )
    except (FileNotFoundError, MalformedEntryError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Loaded {len(directory)} directory entries and {len(queries)} names to find.")

    # 2. Run the strategies, one full pass per repeat
    def announce(name, index, total):
        print(f"\nStart searching ({name})...")

    runs = []
    for run in range(repeats):
        if repeats > 1:
            print(f"\nRun {run+1}/{repeats}...")
        try:
            results = run_benchmark(directory, queries, strategies=strategies, progress_callback=announce)
        except MalformedEntryError as e:
            print(f"Error: {e}")
            return 1
        for result in results:
            for line in format_result(result):
                print(line)
        runs.append(results)

    # 3. Summary table
    summary = summarize_runs(runs)
    print(f"\n\n--- Benchmark Summary (averaged over {repeats} run{'s' if repeats > 1 else ''}) ---")

    headers = ["Strategy", "Found", "Build (ms)", "Search (ms)", "Total (ms)", "Time Taken"]
    table_data = []
    for result in summary:
        build_ms = result.total_ms - result.phase_ms("searching")
        table_data.append([
            result.strategy_name,
            f"{result.matches_found} / {result.total_queries}",
            f"{build_ms:.2f}",
            f"{result.phase_ms('searching'):.2f}",
            f"{result.total_ms:.2f}",
            format_duration(result.total_ms),
        ])

    print(tabulate(table_data, headers=headers, tablefmt="grid"))

    counts = {result.matches_found for result in summary}
    if len(counts) > 1:
        print("\nNote: strategies disagree on match counts. Linear search matches substrings of whole")
        print("entries while the other strategies only match exact names.")
    print("-" * 80)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Benchmark linear, jump, binary and hash lookups on a phone book.")
    parser.add_argument("--directory", default=None,
                        help="Path to the directory file, one '<number> <name>' entry per line. "
                             "Generated when omitted.")
    parser.add_argument("--find", default=None,
                        help="Path to the file of names to find, one per line. Picked from the directory when omitted.")
    parser.add_argument("--entries", type=int, default=1000,
                        help="Number of generated directory entries (ignored with --directory).")
    parser.add_argument("--queries", type=int, default=100,
                        help="Number of generated names to find (ignored with --find).")
    parser.add_argument("--miss-ratio", type=float, default=0.0,
                        help="Share of generated names that are absent from the directory.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for generated inputs.")
    parser.add_argument("--strategies", nargs="+", choices=list(STRATEGIES), default=None,
                        help="Strategies to run, in order. Defaults to all of them.")
    parser.add_argument("--repeats", type=int, default=1,
                        help="Number of benchmark passes to average the timings over.")
    args = parser.parse_args()

    if args.repeats < 1:
        parser.error("--repeats must be at least 1")

    try:
        status = run_phone_book(args.directory, args.find, num_entries=args.entries, num_queries=args.queries,
                                miss_ratio=args.miss_ratio, seed=args.seed, strategies=args.strategies,
                                repeats=args.repeats)
    except ValueError as e:
        parser.error(str(e))
    sys.exit(status)
