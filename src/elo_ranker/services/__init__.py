from .pairing import create_participants, parse_names, random_pairing
from .reporting import format_leaderboard, leaderboard_rows
from .session import SessionController, SessionPhase, SessionState

__all__ = [
    "SessionController",
    "SessionPhase",
    "SessionState",
    "create_participants",
    "format_leaderboard",
    "leaderboard_rows",
    "parse_names",
    "random_pairing",
]
