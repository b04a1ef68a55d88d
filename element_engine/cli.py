"""Command-line interface for inspecting single matches."""

from __future__ import annotations

import argparse
import json
import sys

from element_engine.adjudicator import Outcome
from element_engine.engines import engine_kind, parse_engine_code
from element_engine.game import MatchResult, derive_moves, play_match

_OUTCOME_LABELS = {
    Outcome.TIE: "tie",
    Outcome.A_WINS: "A",
    Outcome.B_WINS: "B",
}


def _kind_label(code: str) -> str:
    kind = engine_kind(code)
    return kind.value if kind else "invalid"


def format_match(engine_a: str, engine_b: str, result: MatchResult) -> str:
    """Format a match as a round-by-round table."""
    lines = []

    lines.append("=" * 40)
    lines.append(f"A: {engine_a} ({_kind_label(engine_a)})")
    lines.append(f"B: {engine_b} ({_kind_label(engine_b)})")
    lines.append("=" * 40)

    if not result.is_valid:
        lines.append("Invalid match")
        return "\n".join(lines)

    lines.append(f"{'Round':>5}  {'A':>2}  {'B':>2}  {'Winner':>6}  {'Score':>7}")
    lines.append("-" * 40)

    score_a = 0
    score_b = 0
    moves_a, moves_b = result.moves
    for i, (move_a, move_b, outcome) in enumerate(zip(moves_a, moves_b, result.outcomes), 1):
        if outcome == Outcome.A_WINS:
            score_a += 1
        elif outcome == Outcome.B_WINS:
            score_b += 1
        lines.append(
            f"{i:>5}  {move_a.symbol:>2}  {move_b.symbol:>2}  "
            f"{_OUTCOME_LABELS[outcome]:>6}  {score_a:>3}-{score_b:<3}"
        )

    lines.append("-" * 40)
    if result.winner is None:
        lines.append(f"Tie {result.scores[0]}-{result.scores[1]}")
    else:
        lines.append(f"{'AB'[result.winner]} wins {result.scores[0]}-{result.scores[1]}")
    return "\n".join(lines)


def match_to_dict(engine_a: str, engine_b: str, result: MatchResult) -> dict:
    return {
        "engine_a": engine_a,
        "engine_b": engine_b,
        "valid": result.is_valid,
        "scores": list(result.scores),
        "moves_a": "".join(m.symbol for m in result.moves[0]),
        "moves_b": "".join(m.symbol for m in result.moves[1]),
        "outcomes": [_OUTCOME_LABELS[o] for o in result.outcomes],
    }


def _read_engine(text: str) -> str:
    code = parse_engine_code(text)
    if code is None:
        print(f"Invalid engine code '{text}'. Must be 12 digits (1-5) or 13 symbols (W, V, A, L, D).")
        sys.exit(2)
    return code


def cmd_play(args: argparse.Namespace) -> None:
    engine_a = _read_engine(args.engine_a)
    engine_b = _read_engine(args.engine_b)
    result = play_match(engine_a, engine_b)

    if args.json:
        print(json.dumps(match_to_dict(engine_a, engine_b, result), indent=2))
    else:
        print(format_match(engine_a, engine_b, result))


def cmd_moves(args: argparse.Namespace) -> None:
    adaptive = _read_engine(args.adaptive)
    fixed = _read_engine(args.fixed)
    try:
        moves = derive_moves(adaptive, fixed)
    except ValueError as e:
        print(str(e))
        sys.exit(2)
    print("".join(m.symbol for m in moves))


def main() -> None:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Element engine match inspector")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    play_parser = subparsers.add_parser("play", help="Play one match between two engines")
    play_parser.add_argument("engine_a", help="Engine code for player A")
    play_parser.add_argument("engine_b", help="Engine code for player B")
    play_parser.add_argument("--json", action="store_true", help="Print the match as JSON")

    moves_parser = subparsers.add_parser(
        "moves", help="Show the literal moves an adaptive engine plays against a fixed one"
    )
    moves_parser.add_argument("adaptive", help="12-digit adaptive engine")
    moves_parser.add_argument("fixed", help="13-symbol fixed engine")

    args = parser.parse_args()

    if args.command == "play":
        cmd_play(args)
    elif args.command == "moves":
        cmd_moves(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
