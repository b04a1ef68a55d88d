#!/usr/bin/env python3
"""Rank candidate engines against an opponent panel.

Usage:
    # Engines from files
    python scripts/rank_engines.py \
        --candidates candidates.txt \
        --opponents panel.txt \
        --sort min-wins --min-wins 5

    # Enter engines interactively (one per line, "." to stop)
    python scripts/rank_engines.py --sort never-loses

Settings not given on the command line come from ENGINE_RANKER_*
environment variables (optionally loaded from a .env file).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import ConfigError, RankingConfig
from core.engine_io import EngineList, read_engine_codes, read_engine_file, write_results
from simulation.dispatcher import BatchProgress, ParallelEvaluator
from simulation.ranking import SortOption, rank_results

SORT_CHOICES = {
    "all": SortOption.ALL,
    "never-loses": SortOption.NEVER_LOSES,
    "min-wins": SortOption.NEVER_LOSES_MIN_WINS,
}


def load_engines(path: str | None, prompt: str) -> EngineList:
    """Read engines from a file, or from stdin when no file is given."""
    if path:
        engines = read_engine_file(path)
    else:
        print(prompt)
        engines = read_engine_codes(sys.stdin)

    for text in engines.rejected:
        print(f"Invalid engine code '{text}'. Must be 12 digits (1-5) or 13 symbols (W, V, A, L, D).")
    return engines


def print_progress(progress: BatchProgress) -> None:
    print(
        f"Progress: {progress.completed} / {progress.total} matches "
        f"({progress.completion_rate * 100:.2f}%), "
        f"speed: {progress.comparisons_per_second / 1000:.1f}k matches/s"
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Rank candidate engines against an opponent panel")
    parser.add_argument("--candidates", help="File with candidate engine codes (default: stdin)")
    parser.add_argument("--opponents", help="File with opponent engine codes (default: stdin)")
    parser.add_argument(
        "--sort",
        choices=sorted(SORT_CHOICES),
        default="all",
        help="all: every engine; never-loses: only undefeated engines; "
        "min-wins: undefeated with at least --min-wins wins",
    )
    parser.add_argument("--min-wins", type=int, default=0, help="Minimum wins for --sort min-wins")
    parser.add_argument("--output", help="Output file (default: sorted_engines.txt)")
    parser.add_argument("--workers", type=int, help="Number of parallel workers (default: 16)")
    parser.add_argument("--threads", action="store_true", help="Use threads instead of processes")
    parser.add_argument("--env-file", help="Environment file to load (default: .env if present)")
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.min_wins < 0:
        print("Invalid minimum number of wins.")
        return 1

    try:
        env_file = args.env_file or (".env" if Path(".env").exists() else None)
        config = RankingConfig.from_env(env_file)
        if args.workers is not None:
            config.num_workers = args.workers
        if args.output:
            config.output_path = args.output
        if args.threads:
            config.use_processes = False
        config = RankingConfig.from_dict(config.to_dict())
    except ConfigError as e:
        print(f"Configuration error: {e}")
        return 1

    candidates = load_engines(
        args.candidates,
        "Enter candidate engine codes to rank (one per line, '.' to stop):",
    )
    if not candidates.engines:
        print("No candidate engine codes entered. Stopped.")
        return 1

    opponents = load_engines(
        args.opponents,
        "Enter opponent engine codes to play against (one per line, '.' to stop):",
    )
    if not opponents.engines:
        print("No opponent engine codes entered. Stopped.")
        return 1

    evaluator = ParallelEvaluator(
        num_workers=config.num_workers,
        use_processes=config.use_processes,
        progress_interval=config.progress_interval,
    )
    run = evaluator.run(candidates.engines, opponents.engines, callback=print_progress)

    ranked = rank_results(run.results, SORT_CHOICES[args.sort], args.min_wins)
    output = write_results(ranked, config.output_path)

    print(f"Sorted engines saved to '{output}' from {run.total_comparisons} matches.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
