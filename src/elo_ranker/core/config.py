"""Configuration schema and loading for Elo Ranker."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from elo_ranker.core.errors import ConfigurationError

DEFAULT_INITIAL_RATING = 1000
DEFAULT_K_FACTOR = 32.0
# Conventional Elo uses 400. The small divisor makes ratings swing hard.
DEFAULT_RATING_DIVISOR = 10.0
DEFAULT_TOTAL_ROUNDS = 3
DEFAULT_EXTENSION_ROUNDS = 3


class RankerConfig(BaseModel):
    """Ranking session configuration.

    Attributes:
        initial_rating: Rating every participant starts a session with.
        k_factor: Maximum rating points exchanged per match.
        rating_divisor: Scale divisor in the expected score formula.
        total_rounds: Rounds played before the leaderboard is shown.
        extension_rounds: Rounds added by "play more rounds".
        seed: Seed for the pairing shuffle. Unseeded if None.
    """

    initial_rating: int = DEFAULT_INITIAL_RATING
    k_factor: float = Field(default=DEFAULT_K_FACTOR, gt=0)
    rating_divisor: float = Field(default=DEFAULT_RATING_DIVISOR, gt=0)
    total_rounds: int = Field(default=DEFAULT_TOTAL_ROUNDS, ge=1)
    extension_rounds: int = Field(default=DEFAULT_EXTENSION_ROUNDS, ge=1)
    seed: int | None = None


def load_config(path: str | Path) -> RankerConfig:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to YAML configuration file.

    Returns:
        Validated RankerConfig instance. An empty file yields the defaults.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ConfigurationError: If the file does not hold a mapping.
        pydantic.ValidationError: If config values are invalid.
    """
    config_path = Path(path)
    if not config_path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with config_path.open() as f:
        data = yaml.safe_load(f)

    if data is None:
        return RankerConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a mapping in {config_path}, got {type(data).__name__}",
            "Use 'key: value' lines, e.g. 'total_rounds: 5'.",
        )
    return RankerConfig.model_validate(data)
