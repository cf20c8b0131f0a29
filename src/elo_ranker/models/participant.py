"""Participant and pairing models for a ranking session."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from elo_ranker.core.config import DEFAULT_INITIAL_RATING


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Participant:
    """A named participant in a ranking session.

    Attributes:
        name: Display name as entered.
        rating: Current Elo rating. No floor, may go negative.
        wins: Matches won this session.
        losses: Matches lost this session.
        id: Opaque unique identifier, fixed at creation.
    """

    name: str
    rating: int = DEFAULT_INITIAL_RATING
    wins: int = 0
    losses: int = 0
    id: str = field(default_factory=_new_id)

    @property
    def matches(self) -> int:
        return self.wins + self.losses

    def record_match(self, new_rating: int, won: bool) -> None:
        """Record a match result.

        Args:
            new_rating: Rating after the match.
            won: Whether this participant won.
        """
        self.rating = new_rating
        if won:
            self.wins += 1
        else:
            self.losses += 1


@dataclass(frozen=True)
class Pairing:
    """One match-up of two distinct participants within a round."""

    first: Participant
    second: Participant

    def __post_init__(self) -> None:
        if self.first.id == self.second.id:
            msg = f"Pairing needs two distinct participants, got '{self.first.id}' twice"
            raise ValueError(msg)

    @property
    def ids(self) -> tuple[str, str]:
        return self.first.id, self.second.id

    def opponent_of(self, participant_id: str) -> Participant:
        """Return the other side of the pairing.

        Raises:
            KeyError: If participant_id is not part of this pairing.
        """
        if participant_id == self.first.id:
            return self.second
        if participant_id == self.second.id:
            return self.first
        raise KeyError(participant_id)

    def __contains__(self, participant_id: object) -> bool:
        return participant_id in self.ids
