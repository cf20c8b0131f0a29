"""Elo rating calculations for Elo Ranker."""

from __future__ import annotations

import math
from dataclasses import dataclass

from elo_ranker.core.config import DEFAULT_K_FACTOR, DEFAULT_RATING_DIVISOR

# 10 ** x overflows a float a little above x = 308.
_MAX_EXPONENT = 300.0


def calculate_expected_win_chance(
    rating_a: float,
    rating_b: float,
    divisor: float = DEFAULT_RATING_DIVISOR,
) -> float:
    """Calculate expected win probability for player A against player B.

    Uses the Elo logistic curve with a configurable scale divisor:
    E_A = 1 / (1 + 10^((R_B - R_A) / divisor))

    Args:
        rating_a: Rating of player A.
        rating_b: Rating of player B.
        divisor: Scale divisor (standard Elo uses 400).

    Returns:
        Probability that A wins (0.0 to 1.0).
    """
    # Clamp before dividing so integer ratings too large for a float still work.
    bound = _MAX_EXPONENT * divisor
    diff = max(min(rating_b - rating_a, bound), -bound)
    return 1.0 / (1.0 + 10 ** (diff / divisor))


def _add_truncated(rating: int, delta: float) -> int:
    """Return int(rating + delta) without converting rating to a float."""
    whole = math.floor(delta)
    base = rating + whole
    if delta == whole or base >= 0:
        return base
    return base + 1


def compute_updated_ratings(
    winner_rating: int,
    loser_rating: int,
    k_factor: float = DEFAULT_K_FACTOR,
    divisor: float = DEFAULT_RATING_DIVISOR,
) -> tuple[int, int]:
    """Compute new ratings after a decided match.

    Results are truncated toward zero, not rounded, so 1015.9 becomes 1015
    and -3.9 becomes -3. Ratings have no floor and may go negative. Integer
    ratings of any size are supported.

    Args:
        winner_rating: Current rating of the winner.
        loser_rating: Current rating of the loser.
        k_factor: Maximum points exchanged in one match.
        divisor: Scale divisor for the expected score.

    Returns:
        Tuple of (new_winner_rating, new_loser_rating).
    """
    expected_winner = calculate_expected_win_chance(winner_rating, loser_rating, divisor)
    expected_loser = 1.0 - expected_winner

    new_winner = _add_truncated(winner_rating, k_factor * (1.0 - expected_winner))
    new_loser = _add_truncated(loser_rating, k_factor * (0.0 - expected_loser))

    return new_winner, new_loser


@dataclass(frozen=True)
class EloEngine:
    """Stateless Elo update rule bound to a K-factor and divisor.

    Attributes:
        k_factor: Maximum points exchanged in one match.
        divisor: Scale divisor for the expected score.
    """

    k_factor: float = DEFAULT_K_FACTOR
    divisor: float = DEFAULT_RATING_DIVISOR

    def compute_updated_ratings(self, winner_rating: int, loser_rating: int) -> tuple[int, int]:
        """Return (new_winner_rating, new_loser_rating) for one decided match."""
        return compute_updated_ratings(
            winner_rating,
            loser_rating,
            k_factor=self.k_factor,
            divisor=self.divisor,
        )
