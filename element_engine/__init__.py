"""Element game engine."""

from element_engine.adjudicator import Outcome, resolve
from element_engine.elements import Element, InvalidDepthError, element_at, rotate
from element_engine.engines import EngineKind, engine_kind, is_valid_engine, parse_engine_code
from element_engine.game import INVALID_SCORES, MatchResult, derive_moves, play_match, simulate_game
from element_engine.inventory import (
    InventoryError,
    NoLegalMoveError,
    PlayerState,
    choose_available,
    choose_forced,
)

__all__ = [
    "Element",
    "InvalidDepthError",
    "element_at",
    "rotate",
    "Outcome",
    "resolve",
    "EngineKind",
    "engine_kind",
    "is_valid_engine",
    "parse_engine_code",
    "PlayerState",
    "InventoryError",
    "NoLegalMoveError",
    "choose_available",
    "choose_forced",
    "INVALID_SCORES",
    "MatchResult",
    "derive_moves",
    "play_match",
    "simulate_game",
]
