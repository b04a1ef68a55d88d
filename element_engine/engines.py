"""Engine codes: classification and parsing from raw text.

An engine is a plain string in one of two encodings:

- adaptive: 12 depth digits (1-5), each move reacting to the opponent's
  previous move;
- fixed: 13 element symbols (W, V, A, L, D), played literally.
"""

from __future__ import annotations

from enum import Enum

from element_engine.elements import SYMBOLS

ADAPTIVE_LENGTH = 12
FIXED_LENGTH = 13

DEPTH_DIGITS = "12345"


class EngineKind(Enum):
    """Encoding of an engine code."""

    ADAPTIVE = "adaptive"
    FIXED = "fixed"


def _is_adaptive(code: str) -> bool:
    return len(code) == ADAPTIVE_LENGTH and all(c in DEPTH_DIGITS for c in code)


def _is_fixed(code: str) -> bool:
    return len(code) == FIXED_LENGTH and all(c in SYMBOLS for c in code)


def engine_kind(code: str) -> EngineKind | None:
    """Classify an engine code, or return None if it is malformed."""
    if _is_adaptive(code):
        return EngineKind.ADAPTIVE
    if _is_fixed(code):
        return EngineKind.FIXED
    return None


def is_valid_engine(code: str) -> bool:
    return engine_kind(code) is not None


def parse_engine_code(text: str) -> str | None:
    """Extract an engine code from a line of input.

    Lines exported from other tools look like ``rank:label:CODE extra``;
    when there are at least two colons the code is taken from the third
    field. Only a 12-character adaptive prefix or a 13-character fixed
    prefix is kept; anything after it is ignored.

    Returns:
        The engine code, or None if no valid code was found.
    """
    parts = text.split(":")
    candidate = parts[2] if len(parts) > 2 else text
    candidate = candidate.strip()

    if _is_adaptive(candidate[:ADAPTIVE_LENGTH]):
        return candidate[:ADAPTIVE_LENGTH]
    if _is_fixed(candidate[:FIXED_LENGTH]):
        return candidate[:FIXED_LENGTH]
    return None
