"""Round adjudication for the element game."""

from __future__ import annotations

import logging
from enum import IntEnum

from element_engine.elements import BEATS, Element

logger = logging.getLogger(__name__)


class Outcome(IntEnum):
    """Winner of a single round."""

    TIE = 0
    A_WINS = 1
    B_WINS = 2

    def flipped(self) -> Outcome:
        """Same outcome seen from the other player's side."""
        if self is Outcome.A_WINS:
            return Outcome.B_WINS
        if self is Outcome.B_WINS:
            return Outcome.A_WINS
        return Outcome.TIE


def _build_table() -> dict[tuple[Element, Element], Outcome]:
    table = {}
    for a in Element:
        for b in Element:
            if BEATS.get(a) is b:
                table[a, b] = Outcome.A_WINS
            elif BEATS.get(b) is a:
                table[a, b] = Outcome.B_WINS
            else:
                table[a, b] = Outcome.TIE
    return table


# Pre-computed outcome table: (move_a, move_b) -> Outcome
_OUTCOMES = _build_table()


def _as_element(move: Element | str) -> Element | None:
    if isinstance(move, Element):
        return move
    try:
        return Element.from_symbol(move)
    except ValueError:
        return None


def resolve(move_a: Element | str, move_b: Element | str) -> Outcome:
    """Decide a round between two moves.

    Moves may be given as Elements or as their symbols. Unknown symbols
    should have been rejected before a match starts; if one gets through,
    the round counts as a tie.
    """
    a = _as_element(move_a)
    b = _as_element(move_b)
    if a is None or b is None:
        logger.warning(f"Unknown move in adjudication: {move_a!r} vs {move_b!r}, scoring as tie")
        return Outcome.TIE
    return _OUTCOMES[a, b]
