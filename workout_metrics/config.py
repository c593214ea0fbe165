"""
Configuration management for the workout metrics CLI.

Recommendation cut-offs can be overridden through environment variables
or a .env file. The .env file is only read when AppConfig.load() runs,
so importing the analysis modules never touches the environment.
"""

import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .plan import RecommendationThresholds


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {raw!r} is not a number")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {raw!r} is not an integer")


def thresholds_from_env() -> RecommendationThresholds:
    """
    Build recommendation thresholds from WORKOUT_* environment variables.

    Unset or blank variables keep the default cut-off.
    """
    defaults = RecommendationThresholds()
    return RecommendationThresholds(
        balance_spread=_env_float("WORKOUT_BALANCE_SPREAD", defaults.balance_spread),
        strength_min_intensity=_env_float(
            "WORKOUT_STRENGTH_MIN_INTENSITY", defaults.strength_min_intensity
        ),
        hypertrophy_max_intensity=_env_float(
            "WORKOUT_HYPERTROPHY_MAX_INTENSITY", defaults.hypertrophy_max_intensity
        ),
        endurance_min_duration=_env_int(
            "WORKOUT_ENDURANCE_MIN_DURATION", defaults.endurance_min_duration
        ),
    )


@dataclass(frozen=True)
class PathConfig:
    """Locations of plan data on disk."""

    base_dir: Path
    data_dir: Path

    @classmethod
    def default(cls) -> "PathConfig":
        """Project root, with data/ holding the plan.json that analyze reads by default."""
        base = Path(__file__).parent.parent
        return cls(base_dir=base, data_dir=base / "data")


@dataclass(frozen=True)
class AppConfig:
    """Settings the CLI passes to each command."""

    thresholds: RecommendationThresholds
    paths: PathConfig

    @classmethod
    def load(cls, env_file: Optional[Path] = None) -> "AppConfig":
        """
        Read .env, then resolve thresholds and data paths.

        Parameters:
            env_file: Explicit .env path; when omitted python-dotenv
                searches for one. Variables already set in the
                environment take precedence over the file.
        """
        load_dotenv(env_file)
        return cls(thresholds=thresholds_from_env(), paths=PathConfig.default())
