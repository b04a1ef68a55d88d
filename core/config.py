"""Configuration for ranking runs."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from simulation.dispatcher import DEFAULT_NUM_WORKERS, DEFAULT_PROGRESS_INTERVAL

logger = logging.getLogger(__name__)

ENV_PREFIX = "ENGINE_RANKER_"

DEFAULT_OUTPUT_PATH = "sorted_engines.txt"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""

    pass


def _positive_int(name: str, raw: Any) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def _flag(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


@dataclass
class RankingConfig:
    """Configuration for ranking candidates against an opponent panel."""
    num_workers: int = DEFAULT_NUM_WORKERS
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    output_path: str = DEFAULT_OUTPUT_PATH
    use_processes: bool = True

    def __post_init__(self) -> None:
        self.num_workers = _positive_int("num_workers", self.num_workers)
        self.progress_interval = _positive_int("progress_interval", self.progress_interval)
        if isinstance(self.use_processes, str):
            self.use_processes = _flag("use_processes", self.use_processes)
        elif not isinstance(self.use_processes, bool):
            raise ConfigError(f"use_processes must be a boolean, got {self.use_processes!r}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "num_workers": self.num_workers,
            "progress_interval": self.progress_interval,
            "output_path": self.output_path,
            "use_processes": self.use_processes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RankingConfig":
        return cls(
            num_workers=data.get("num_workers", DEFAULT_NUM_WORKERS),
            progress_interval=data.get("progress_interval", DEFAULT_PROGRESS_INTERVAL),
            output_path=data.get("output_path", DEFAULT_OUTPUT_PATH),
            use_processes=data.get("use_processes", True),
        )

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "RankingConfig":
        """Build a config from ENGINE_RANKER_* environment variables.

        Args:
            env_file: Optional .env file to load first. Variables already
                set in the environment take precedence.
        """
        if env_file is not None:
            env_path = Path(env_file)
            if env_path.exists():
                load_dotenv(env_path)
                logger.info(f"Loaded environment from {env_path}")
            else:
                logger.warning(f"Env file not found: {env_path}")

        data: dict[str, Any] = {}
        if (raw := os.environ.get(f"{ENV_PREFIX}WORKERS")) is not None:
            data["num_workers"] = raw
        if (raw := os.environ.get(f"{ENV_PREFIX}PROGRESS_INTERVAL")) is not None:
            data["progress_interval"] = raw
        if (raw := os.environ.get(f"{ENV_PREFIX}OUTPUT")) is not None:
            data["output_path"] = raw
        if (raw := os.environ.get(f"{ENV_PREFIX}USE_PROCESSES")) is not None:
            data["use_processes"] = raw
        return cls.from_dict(data)
