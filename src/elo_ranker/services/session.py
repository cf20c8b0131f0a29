"""Session controller for round-robin style Elo ranking."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

import structlog

from elo_ranker.core.config import RankerConfig
from elo_ranker.core.errors import (
    InvalidMatchError,
    InvalidRosterError,
    SessionStateError,
    UnknownParticipantError,
)
from elo_ranker.models import Pairing, Participant
from elo_ranker.ranking import EloEngine, create_engine
from elo_ranker.services.pairing import create_participants, parse_names, random_pairing

logger = structlog.get_logger()


class SessionPhase(str, Enum):
    """Where a session stands between name entry and the leaderboard."""

    NAME_ENTRY = "name_entry"
    IN_ROUND = "in_round"
    ROUND_COMPLETE = "round_complete"
    FINISHED = "finished"


@dataclass
class SessionState:
    """Mutable state of one ranking session.

    Attributes:
        participants: Roster in current shuffled order.
        pairings: Pairings of the current round.
        bye: Participant sitting out the current round, if any.
        round: Current round number, starting at 1.
        pairing_index: Index of the next undecided pairing.
        total_rounds: Rounds to play before finishing.
        finished: Whether the leaderboard has been reached.
    """

    total_rounds: int
    participants: list[Participant] = field(default_factory=list)
    pairings: list[Pairing] = field(default_factory=list)
    bye: Participant | None = None
    round: int = 1
    pairing_index: int = 0
    finished: bool = False


class SessionController:
    """Owns the roster and drives pairing, match recording and rounds.

    All state lives in a single SessionState, mutated only through the
    methods below. The presentation layer reads it through the read-only
    properties.
    """

    def __init__(
        self,
        config: RankerConfig | None = None,
        rng: random.Random | None = None,
        engine: EloEngine | None = None,
    ) -> None:
        """Initialize session controller.

        Args:
            config: Ranker configuration. Defaults apply if None.
            rng: Randomness source for pairing. Defaults to
                ``random.Random(config.seed)``.
            engine: Elo engine. Built from config if None.
        """
        self.config = config or RankerConfig()
        self.rng = rng or random.Random(self.config.seed)  # noqa: S311
        self.engine = engine or create_engine(self.config)
        self._state = SessionState(total_rounds=self.config.total_rounds)

    @property
    def phase(self) -> SessionPhase:
        state = self._state
        if not state.participants:
            return SessionPhase.NAME_ENTRY
        if state.finished:
            return SessionPhase.FINISHED
        if state.pairing_index < len(state.pairings):
            return SessionPhase.IN_ROUND
        return SessionPhase.ROUND_COMPLETE

    @property
    def round(self) -> int:
        return self._state.round

    @property
    def total_rounds(self) -> int:
        return self._state.total_rounds

    @property
    def pairing_index(self) -> int:
        return self._state.pairing_index

    @property
    def pairings(self) -> tuple[Pairing, ...]:
        return tuple(self._state.pairings)

    @property
    def participants(self) -> tuple[Participant, ...]:
        return tuple(self._state.participants)

    @property
    def bye(self) -> Participant | None:
        return self._state.bye

    @property
    def current_pairing(self) -> Pairing | None:
        """The pairing awaiting a result, or None outside a round."""
        if self.phase is not SessionPhase.IN_ROUND:
            return None
        return self._state.pairings[self._state.pairing_index]

    def start_session(self, raw_names: str) -> None:
        """Create a fresh roster from comma-separated names and pair round 1.

        Args:
            raw_names: Free text such as "Alice, Bob, Carol".

        Raises:
            InvalidRosterError: If no non-empty names remain after trimming.
        """
        names = parse_names(raw_names)
        if not names:
            raise InvalidRosterError(raw_names)

        self._state = SessionState(
            total_rounds=self.config.total_rounds,
            participants=create_participants(names, self.config.initial_rating),
        )
        logger.info(
            "session_started",
            participants=len(names),
            total_rounds=self._state.total_rounds,
        )
        self.generate_pairings()

    def generate_pairings(self, rng: random.Random | None = None) -> list[Pairing]:
        """Shuffle the roster and pair it for the current round.

        Args:
            rng: Randomness source for this call. Defaults to the
                controller's own.

        Returns:
            The new pairings.
        """
        state = self._state
        state.pairings, state.bye = random_pairing(state.participants, rng or self.rng)
        state.pairing_index = 0
        logger.info(
            "round_pairs",
            round=state.round,
            count=len(state.pairings),
            bye=state.bye.name if state.bye else None,
        )
        return list(state.pairings)

    def record_result(self, winner_id: str, loser_id: str) -> tuple[int, int]:
        """Apply one decided match and move to the next pairing.

        Args:
            winner_id: Id of the winning participant.
            loser_id: Id of the losing participant.

        Returns:
            Tuple of (new_winner_rating, new_loser_rating).

        Raises:
            SessionStateError: If no pairing is awaiting a result.
            InvalidMatchError: If winner and loser are the same participant.
            UnknownParticipantError: If either id is not in the roster.
        """
        if self.phase is not SessionPhase.IN_ROUND:
            raise SessionStateError("record a result", self.phase.value)
        if winner_id == loser_id:
            raise InvalidMatchError(winner_id)

        winner = self._find(winner_id)
        loser = self._find(loser_id)

        new_winner, new_loser = self.engine.compute_updated_ratings(winner.rating, loser.rating)
        winner.record_match(new_winner, won=True)
        loser.record_match(new_loser, won=False)
        self._state.pairing_index += 1

        logger.debug(
            "match_recorded",
            winner=winner.name,
            loser=loser.name,
            winner_rating=new_winner,
            loser_rating=new_loser,
        )
        return new_winner, new_loser

    def choose_winner(self, participant_id: str) -> SessionPhase:
        """Declare a side of the pending pairing the winner.

        Records the match against the other side, then advances the round
        if it is complete.

        Args:
            participant_id: Id of either participant in the current pairing.

        Returns:
            The phase after advancing.

        Raises:
            SessionStateError: If no pairing is awaiting a result.
            UnknownParticipantError: If the id is not in the current pairing.
        """
        pairing = self.current_pairing
        if pairing is None:
            raise SessionStateError("choose a winner", self.phase.value)
        if participant_id not in pairing:
            logger.warning("unknown_participant", participant_id=participant_id)
            raise UnknownParticipantError(participant_id)

        loser = pairing.opponent_of(participant_id)
        self.record_result(participant_id, loser.id)
        return self.advance_if_round_complete()

    def advance_if_round_complete(self) -> SessionPhase:
        """Start the next round or finish once every pairing is decided.

        Does nothing while a pairing is still pending or after finishing.

        Returns:
            The phase after advancing.
        """
        if self.phase is not SessionPhase.ROUND_COMPLETE:
            return self.phase

        state = self._state
        if state.round < state.total_rounds:
            state.round += 1
            logger.info("round_advanced", round=state.round, total_rounds=state.total_rounds)
            self.generate_pairings()
        else:
            state.finished = True
            logger.info("session_finished", rounds=state.total_rounds)
        return self.phase

    def get_leaderboard(self) -> list[Participant]:
        """Get participants sorted by rating, highest first.

        Ties keep their current roster order, which is the last shuffle.

        Raises:
            SessionStateError: If the session has not finished.
        """
        if self.phase is not SessionPhase.FINISHED:
            raise SessionStateError("show the leaderboard", self.phase.value)
        return sorted(self._state.participants, key=lambda p: p.rating, reverse=True)

    def restart(self) -> None:
        """Go back to round 1 with the same roster.

        Ratings and records are kept. The pairings left from the last round
        are replayed rather than reshuffled, so the phase is IN_ROUND again.
        A roster of one has no pairings to replay and stays ROUND_COMPLETE;
        advancing walks through its empty rounds to FINISHED.

        Raises:
            SessionStateError: If there is no roster to restart.
        """
        if self.phase is SessionPhase.NAME_ENTRY:
            raise SessionStateError("restart", self.phase.value)

        state = self._state
        state.round = 1
        state.pairing_index = 0
        state.finished = False
        logger.info("session_restarted", total_rounds=state.total_rounds)

    def extend_session(self, extra_rounds: int | None = None) -> None:
        """Add rounds after finishing and replay from round 1.

        Args:
            extra_rounds: Rounds to add. Defaults to config.extension_rounds.

        Raises:
            ValueError: If extra_rounds is less than 1.
            SessionStateError: If the session has not finished.
        """
        if extra_rounds is None:
            extra_rounds = self.config.extension_rounds
        if extra_rounds < 1:
            msg = f"extra_rounds must be at least 1, got {extra_rounds}"
            raise ValueError(msg)
        if self.phase is not SessionPhase.FINISHED:
            raise SessionStateError("extend the session", self.phase.value)

        self._state.total_rounds += extra_rounds
        logger.info("session_extended", total_rounds=self._state.total_rounds)
        self.restart()
        self.generate_pairings()

    def discard_session(self) -> None:
        """Drop the roster and return to name entry."""
        self._state = SessionState(total_rounds=self.config.total_rounds)
        logger.info("session_discarded")

    def _find(self, participant_id: str) -> Participant:
        for participant in self._state.participants:
            if participant.id == participant_id:
                return participant
        logger.warning("unknown_participant", participant_id=participant_id)
        raise UnknownParticipantError(participant_id)
