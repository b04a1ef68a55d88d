"""Filtering and ordering of evaluation results."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

from simulation.evaluator import EvaluationResult


class SortOption(IntEnum):
    """Which results to keep before sorting by score."""

    ALL = 1  # Every candidate
    NEVER_LOSES = 2  # Only candidates that never lost a match
    NEVER_LOSES_MIN_WINS = 3  # Never lost and won at least min_wins matches


def filter_results(
    results: Iterable[EvaluationResult],
    option: SortOption = SortOption.ALL,
    min_wins: int = 0,
) -> list[EvaluationResult]:
    """Keep the results selected by the sort option."""
    if min_wins < 0:
        raise ValueError(f"min_wins must not be negative, got {min_wins}")

    if option == SortOption.ALL:
        return list(results)
    if option == SortOption.NEVER_LOSES:
        return [r for r in results if r.never_loses]
    return [r for r in results if r.never_loses and r.wins >= min_wins]


def rank_results(
    results: Iterable[EvaluationResult],
    option: SortOption = SortOption.ALL,
    min_wins: int = 0,
) -> list[EvaluationResult]:
    """Filter, then sort by score (highest first).

    The sort is stable, so candidates with equal scores keep the order in
    which they were collected.
    """
    return sorted(filter_results(results, option, min_wins), key=lambda r: r.score, reverse=True)
