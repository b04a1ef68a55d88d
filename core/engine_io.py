"""Reading engine lists and writing ranked results."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from element_engine.engines import parse_engine_code
from simulation.evaluator import EvaluationResult

END_OF_LIST = "."


@dataclass
class EngineList:
    """Engine codes read from input, plus the lines that were rejected."""
    engines: list[str] = field(default_factory=list)
    rejected: list[str] = field(default_factory=list)


def read_engine_codes(lines: Iterable[str]) -> EngineList:
    """Read one engine code per line.

    Reading stops at the first blank line or a line containing only ".".
    Lines that do not hold a valid engine code are collected as rejected.
    """
    result = EngineList()
    for line in lines:
        text = line.strip()
        if text == END_OF_LIST or text == "":
            break
        code = parse_engine_code(text)
        if code is None:
            result.rejected.append(text)
        else:
            result.engines.append(code)
    return result


def read_engine_file(path: str | Path) -> EngineList:
    """Read engine codes from a text file."""
    with open(path) as f:
        return read_engine_codes(f)


def format_result(result: EvaluationResult) -> str:
    """Human-readable record for one ranked engine."""
    never_loses = "true" if result.never_loses else "false"
    return f"{result.engine} (score: {result.score}, never loses: {never_loses}, wins: {result.wins})"


def write_results(results: Iterable[EvaluationResult], path: str | Path) -> Path:
    """Write ranked results, one record per line.

    Returns:
        Path to the written file.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w") as f:
        for result in results:
            f.write(format_result(result) + "\n")
    return out
