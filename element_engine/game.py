"""Match simulation between two engines.

A match is 13 simultaneous rounds. Depending on the encodings involved it
runs in one of three modes:

- adaptive vs adaptive: both sides derive each move from the opponent's
  previous move, drawing from their own inventory;
- fixed vs fixed: both move lists are played literally;
- mixed: the adaptive side's moves are derived against the literal moves of
  the fixed side, then both lists are played as in fixed vs fixed.

Malformed engines never raise here: they produce the invalid sentinel
score pair so that batch evaluation can skip them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from element_engine.adjudicator import Outcome, resolve
from element_engine.elements import Element, element_at, rotate
from element_engine.engines import EngineKind, engine_kind
from element_engine.inventory import (
    NoLegalMoveError,
    PlayerState,
    choose_available,
    choose_forced,
)

logger = logging.getLogger(__name__)

INVALID_SCORES = (-1, -1)


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Result of a single match.

    Attributes:
        scores: Rounds won by (A, B), or INVALID_SCORES.
        moves: The concrete moves played by A and B.
        outcomes: Winner of each round.
    """

    scores: tuple[int, int]
    moves: tuple[tuple[Element, ...], tuple[Element, ...]] = ((), ())
    outcomes: tuple[Outcome, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.scores != INVALID_SCORES

    @property
    def winner(self) -> int | None:
        """0 if A won, 1 if B won, None for a tie or an invalid match."""
        if not self.is_valid or self.scores[0] == self.scores[1]:
            return None
        return 0 if self.scores[0] > self.scores[1] else 1

    @property
    def ties(self) -> int:
        return sum(1 for o in self.outcomes if o == Outcome.TIE)

    @classmethod
    def invalid(cls) -> MatchResult:
        return cls(scores=INVALID_SCORES)


def _depths(code: str) -> list[int]:
    return [int(c) for c in code]


def _next_desired(round_num: int, depth: int, opponent_moves: list[Element] | tuple[Element, ...]) -> Element:
    if round_num == 0:
        return element_at(depth)
    return rotate(opponent_moves[round_num - 1], depth)


def _adjudicate(moves_a: tuple[Element, ...], moves_b: tuple[Element, ...]) -> MatchResult:
    score_a = 0
    score_b = 0
    outcomes = []
    for move_a, move_b in zip(moves_a, moves_b):
        outcome = resolve(move_a, move_b)
        if outcome == Outcome.A_WINS:
            score_a += 1
        elif outcome == Outcome.B_WINS:
            score_b += 1
        outcomes.append(outcome)
    return MatchResult(
        scores=(score_a, score_b),
        moves=(moves_a, moves_b),
        outcomes=tuple(outcomes),
    )


def _parse_fixed(code: str) -> tuple[Element, ...]:
    return tuple(Element.from_symbol(c) for c in code)


def derive_moves(adaptive: str, fixed_opponent: str) -> tuple[Element, ...]:
    """Turn an adaptive engine into concrete moves against a fixed engine.

    Args:
        adaptive: 12-digit adaptive engine code.
        fixed_opponent: 13-symbol fixed engine code.

    Returns:
        The 13 moves the adaptive engine plays in this match.

    Raises:
        ValueError: If either code is malformed.
        NoLegalMoveError: If the inventory runs dry before 13 moves.
    """
    if engine_kind(adaptive) is not EngineKind.ADAPTIVE:
        raise ValueError(f"Not an adaptive engine: {adaptive!r}")
    if engine_kind(fixed_opponent) is not EngineKind.FIXED:
        raise ValueError(f"Not a fixed engine: {fixed_opponent!r}")

    opponent_moves = _parse_fixed(fixed_opponent)
    player = PlayerState()
    for round_num, depth in enumerate(_depths(adaptive)):
        desired = _next_desired(round_num, depth, opponent_moves)
        player.take(choose_available(desired, player.available))
    player.take(choose_forced(player.available))
    return tuple(player.moves)


def _play_adaptive(engine_a: str, engine_b: str) -> MatchResult:
    a = PlayerState()
    b = PlayerState()
    for round_num, (depth_a, depth_b) in enumerate(zip(_depths(engine_a), _depths(engine_b))):
        desired_a = _next_desired(round_num, depth_a, b.moves)
        desired_b = _next_desired(round_num, depth_b, a.moves)
        a.take(choose_available(desired_a, a.available))
        b.take(choose_available(desired_b, b.available))
    a.take(choose_forced(a.available))
    b.take(choose_forced(b.available))
    return _adjudicate(tuple(a.moves), tuple(b.moves))


def play_match(engine_a: str, engine_b: str) -> MatchResult:
    """Play a full match between two engine codes.

    Args:
        engine_a: Engine code for player A.
        engine_b: Engine code for player B.

    Returns:
        MatchResult with both move lists and the score pair, or an invalid
        result when either code is malformed or move generation stalls.
    """
    kind_a = engine_kind(engine_a)
    kind_b = engine_kind(engine_b)
    if kind_a is None or kind_b is None:
        return MatchResult.invalid()

    try:
        if kind_a is EngineKind.ADAPTIVE and kind_b is EngineKind.ADAPTIVE:
            return _play_adaptive(engine_a, engine_b)
        if kind_a is EngineKind.FIXED and kind_b is EngineKind.FIXED:
            return _adjudicate(_parse_fixed(engine_a), _parse_fixed(engine_b))
        if kind_a is EngineKind.ADAPTIVE:
            return _adjudicate(derive_moves(engine_a, engine_b), _parse_fixed(engine_b))
        return _adjudicate(_parse_fixed(engine_a), derive_moves(engine_b, engine_a))
    except NoLegalMoveError as e:
        logger.error(f"Move generation stalled for {engine_a} vs {engine_b}: {e}")
        return MatchResult.invalid()


def simulate_game(engine_a: str, engine_b: str) -> tuple[int, int]:
    """Score pair for a match, or INVALID_SCORES."""
    return play_match(engine_a, engine_b).scores
