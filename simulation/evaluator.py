"""Batch evaluation of candidate engines against an opponent panel.

Each candidate plays one match against every opponent. A win adds the round
differential plus WIN_BONUS, a loss adds the (negative) differential minus
LOSS_PENALTY, and a tie adds the candidate's own round score.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from element_engine.game import simulate_game

WIN_BONUS = 10
LOSS_PENALTY = 10


@dataclass(frozen=True)
class EvaluationResult:
    """Aggregate result of one candidate against the whole panel.

    Attributes:
        engine: Candidate engine code.
        score: Accumulated weighted score.
        never_loses: True if no valid match was lost.
        wins: Matches won outright.
        losses: Matches lost.
        ties: Matches tied.
        matches_played: Valid matches (invalid pairings are skipped).
    """

    engine: str
    score: int
    never_loses: bool
    wins: int
    losses: int = 0
    ties: int = 0
    matches_played: int = 0

    def as_tuple(self) -> tuple[str, int, bool, int]:
        """(engine, score, never_loses, wins), as handed to ranking."""
        return (self.engine, self.score, self.never_loses, self.wins)

    def to_dict(self) -> dict:
        return {
            "engine": self.engine,
            "score": self.score,
            "never_loses": self.never_loses,
            "wins": self.wins,
            "losses": self.losses,
            "ties": self.ties,
            "matches_played": self.matches_played,
        }


def evaluate_candidate(
    candidate: str,
    opponents: Sequence[str],
    on_match_done: Callable[[str, tuple[int, int]], None] | None = None,
) -> EvaluationResult:
    """Play a candidate against every opponent and score the results.

    Args:
        candidate: Engine code being evaluated.
        opponents: Opponent panel.
        on_match_done: Optional callback(opponent, scores) after each
            valid match.

    Returns:
        EvaluationResult for the candidate.
    """
    score = 0
    never_loses = True
    wins = 0
    losses = 0
    ties = 0

    for opponent in opponents:
        own, other = simulate_game(candidate, opponent)
        if own < 0 or other < 0:
            continue

        diff = own - other
        if own > other:
            score += diff + WIN_BONUS
            wins += 1
        elif own < other:
            score += diff - LOSS_PENALTY
            losses += 1
            never_loses = False
        else:
            score += own
            ties += 1

        if on_match_done:
            on_match_done(opponent, (own, other))

    return EvaluationResult(
        engine=candidate,
        score=score,
        never_loses=never_loses,
        wins=wins,
        losses=losses,
        ties=ties,
        matches_played=wins + losses + ties,
    )


def evaluate_batch(batch: Sequence[str], opponents: Sequence[str]) -> list[EvaluationResult]:
    """Evaluate a slice of candidates sequentially."""
    return [evaluate_candidate(candidate, opponents) for candidate in batch]
