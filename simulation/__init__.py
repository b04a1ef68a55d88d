"""Candidate evaluation and ranking."""

from simulation.dispatcher import (
    BatchProgress,
    DispatchResult,
    ParallelEvaluator,
    ProgressCounter,
    partition,
)
from simulation.evaluator import (
    LOSS_PENALTY,
    WIN_BONUS,
    EvaluationResult,
    evaluate_batch,
    evaluate_candidate,
)
from simulation.ranking import SortOption, filter_results, rank_results

__all__ = [
    # evaluator
    "EvaluationResult",
    "evaluate_candidate",
    "evaluate_batch",
    "WIN_BONUS",
    "LOSS_PENALTY",
    # dispatcher
    "ParallelEvaluator",
    "ProgressCounter",
    "BatchProgress",
    "DispatchResult",
    "partition",
    # ranking
    "SortOption",
    "filter_results",
    "rank_results",
]
