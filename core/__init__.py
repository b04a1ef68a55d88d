"""Configuration and I/O around the evaluation core."""

from core.config import ConfigError, RankingConfig
from core.engine_io import (
    EngineList,
    format_result,
    read_engine_codes,
    read_engine_file,
    write_results,
)

__all__ = [
    "RankingConfig",
    "ConfigError",
    "EngineList",
    "read_engine_codes",
    "read_engine_file",
    "format_result",
    "write_results",
]
