"""Ranking module for Elo Ranker.

Provides the Elo update rule used after every decided match.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from elo_ranker.ranking.elo import (
    EloEngine,
    calculate_expected_win_chance,
    compute_updated_ratings,
)

if TYPE_CHECKING:
    from elo_ranker.core.config import RankerConfig


def create_engine(config: RankerConfig) -> EloEngine:
    """Create an Elo engine based on config.

    Args:
        config: Ranker configuration.

    Returns:
        Configured Elo engine.
    """
    return EloEngine(k_factor=config.k_factor, divisor=config.rating_divisor)


__all__ = [
    "EloEngine",
    "calculate_expected_win_chance",
    "compute_updated_ratings",
    "create_engine",
]
