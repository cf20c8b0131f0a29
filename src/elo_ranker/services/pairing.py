"""Roster parsing and random pairing for Elo Ranker."""

from __future__ import annotations

import random

from elo_ranker.core.config import DEFAULT_INITIAL_RATING
from elo_ranker.models import Pairing, Participant


def parse_names(raw_text: str) -> list[str]:
    """Split comma-separated input into trimmed, non-empty names.

    Empty tokens are dropped silently. Duplicate names are kept; each one
    becomes its own participant.

    Args:
        raw_text: Free text such as "Alice, Bob, , Carol".

    Returns:
        Names in input order.
    """
    names = (token.strip() for token in raw_text.split(","))
    return [name for name in names if name]


def create_participants(
    names: list[str], initial_rating: int = DEFAULT_INITIAL_RATING
) -> list[Participant]:
    """Create one participant per name."""
    return [Participant(name=name, rating=initial_rating) for name in names]


def random_pairing(
    participants: list[Participant],
    rng: random.Random,
) -> tuple[list[Pairing], Participant | None]:
    """Generate pairings for one round.

    Shuffles ``participants`` in place with ``rng``, then pairs adjacent
    entries. With an odd count the last participant in shuffled order sits
    out (a bye) and gets no rating change.

    Args:
        participants: Roster to shuffle and pair. Mutated in place.
        rng: Randomness source. Pass a seeded ``random.Random`` for
            reproducible pairings.

    Returns:
        Tuple of (pairings, bye_recipient). bye_recipient is None if even count.
    """
    rng.shuffle(participants)

    pairings = [
        Pairing(participants[i], participants[i + 1])
        for i in range(0, len(participants) - 1, 2)
    ]
    bye_recipient = participants[-1] if len(participants) % 2 == 1 else None
    return pairings, bye_recipient
