"""Configuration settings for hand odds simulations."""

import os
from dataclasses import dataclass, field, fields, replace
from typing import Optional

EXECUTORS = ("process", "thread")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _env(name: str, default):
    return os.environ.get(name) or default


def _as_int(name: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _as_log_level(name: str, value: str) -> str:
    level = str(value).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return level


def _default_workers() -> int:
    return os.cpu_count() or 1


class Config:
    """
    Base configuration class.

    Values read from the environment stay raw strings here and are checked
    when a run is configured, see SimulationConfig.from_config and log_level.
    """

    # Simulation size
    TRIALS = _env("HAND_ODDS_TRIALS", 1_000_000)
    WORKERS = _env("HAND_ODDS_WORKERS", _default_workers())
    CHUNK_SIZE = _env("HAND_ODDS_CHUNK_SIZE", 10_000)

    # Worker pool: "process" for real parallelism, "thread" for debugging
    EXECUTOR = _env("HAND_ODDS_EXECUTOR", "process")

    # Example hands kept per category
    SAMPLES = _env("HAND_ODDS_SAMPLES", 0)

    SEED: Optional[int] = None
    PROGRESS = os.environ.get("HAND_ODDS_PROGRESS", "true").lower() == "true"
    LOG_LEVEL = _env("HAND_ODDS_LOG_LEVEL", "WARNING")


class DevelopmentConfig(Config):
    """Development configuration."""

    TRIALS = _env("HAND_ODDS_TRIALS", 100_000)
    LOG_LEVEL = _env("HAND_ODDS_LOG_LEVEL", "INFO")


class TestingConfig(Config):
    """Testing configuration."""

    # Small, deterministic and in-process
    TRIALS = 2_000
    WORKERS = 2
    CHUNK_SIZE = 250
    EXECUTOR = "thread"
    SEED = 1234
    PROGRESS = False
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    TRIALS = _env("HAND_ODDS_TRIALS", 10_000_000)
    CHUNK_SIZE = _env("HAND_ODDS_CHUNK_SIZE", 50_000)


# Configuration mapping
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": Config,
}


def get_config(config_name: Optional[str] = None) -> type[Config]:
    """Get configuration class based on environment."""
    if config_name is None:
        config_name = os.environ.get("HAND_ODDS_ENV", "default")

    return config.get(config_name, config["default"])


def log_level(config_cls: type[Config] = Config) -> str:
    """
    Logging level named by a configuration class.

    Raises:
        ValueError: If the level is not one of LOG_LEVELS
    """
    return _as_log_level("HAND_ODDS_LOG_LEVEL", config_cls.LOG_LEVEL)


@dataclass(frozen=True)
class SimulationConfig:
    """
    Validated settings for a single simulation run.

    Attributes:
        trials: Total number of hands to deal
        workers: Number of parallel workers
        chunk_size: Largest number of trials handed to a worker at once
        executor: "process" or "thread"
        seed: Run seed; results are reproducible when set
        samples: Example hands to keep per category
        progress: Whether front ends should show progress
    """
    trials: int = 1_000_000
    workers: int = field(default_factory=_default_workers)
    chunk_size: int = 10_000
    executor: str = "process"
    seed: Optional[int] = None
    samples: int = 0
    progress: bool = True

    def __post_init__(self) -> None:
        if self.trials <= 0:
            raise ValueError(f"trials must be > 0, got {self.trials}")
        if self.workers <= 0:
            raise ValueError(f"workers must be > 0, got {self.workers}")
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be > 0, got {self.chunk_size}")
        if self.executor not in EXECUTORS:
            raise ValueError(f"executor must be one of {', '.join(EXECUTORS)}, got {self.executor!r}")
        if self.samples < 0:
            raise ValueError(f"samples must be >= 0, got {self.samples}")

    @classmethod
    def from_config(cls, config_cls: type[Config] = Config, **overrides) -> 'SimulationConfig':
        """
        Build run settings from a configuration class.

        Args:
            config_cls: Configuration class supplying defaults
            overrides: Field values that win over the class; None is ignored

        Raises:
            ValueError: If a value is invalid or an override is unknown
        """
        values = {
            "trials": _as_int("HAND_ODDS_TRIALS", config_cls.TRIALS),
            "workers": _as_int("HAND_ODDS_WORKERS", config_cls.WORKERS),
            "chunk_size": _as_int("HAND_ODDS_CHUNK_SIZE", config_cls.CHUNK_SIZE),
            "executor": config_cls.EXECUTOR,
            "seed": config_cls.SEED,
            "samples": _as_int("HAND_ODDS_SAMPLES", config_cls.SAMPLES),
            "progress": config_cls.PROGRESS,
        }
        known = {f.name for f in fields(cls)}
        for key, value in overrides.items():
            if key not in known:
                raise ValueError(f"Unknown simulation setting: {key}")
            if value is not None:
                values[key] = value
        return cls(**values)

    def with_overrides(self, **overrides) -> 'SimulationConfig':
        """Copy with some fields replaced."""
        return replace(self, **overrides)
