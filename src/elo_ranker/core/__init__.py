"""Core configuration and errors for Elo Ranker."""

from elo_ranker.core.config import (
    DEFAULT_EXTENSION_ROUNDS,
    DEFAULT_INITIAL_RATING,
    DEFAULT_K_FACTOR,
    DEFAULT_RATING_DIVISOR,
    DEFAULT_TOTAL_ROUNDS,
    RankerConfig,
    load_config,
)
from elo_ranker.core.errors import (
    ConfigurationError,
    InvalidMatchError,
    InvalidRosterError,
    RankerError,
    SessionStateError,
    UnknownParticipantError,
)

__all__ = [
    "DEFAULT_EXTENSION_ROUNDS",
    "DEFAULT_INITIAL_RATING",
    "DEFAULT_K_FACTOR",
    "DEFAULT_RATING_DIVISOR",
    "DEFAULT_TOTAL_ROUNDS",
    "RankerConfig",
    "load_config",
    "ConfigurationError",
    "InvalidMatchError",
    "InvalidRosterError",
    "RankerError",
    "SessionStateError",
    "UnknownParticipantError",
]
