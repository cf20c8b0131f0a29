"""Elo Ranker.

Pair named participants at random each round, pick winners, and rank
them with Elo ratings.
"""

from elo_ranker.services.session import SessionController, SessionPhase

__version__ = "0.1.0"
__all__ = [
    "SessionController",
    "SessionPhase",
    "__version__",
]
