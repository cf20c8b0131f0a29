"""Custom exceptions for roster, match and session errors."""

from __future__ import annotations


class RankerError(Exception):
    """Base exception for ranker errors with optional suggestions."""

    label = "Ranker Error"

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        self.message = message
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"[{self.label}] {self.message}"
        if self.suggestion:
            msg += f"\n[Suggestion] {self.suggestion}"
        return msg


class ConfigurationError(RankerError):
    """Error when configuration input is invalid."""

    label = "Configuration Error"


class InvalidRosterError(RankerError):
    """Error when name input yields no usable participants."""

    label = "Roster Error"

    def __init__(self, raw_text: str) -> None:
        super().__init__(
            f"No participant names found in {raw_text!r}",
            "Enter names separated by commas (e.g., 'Alice, Bob, Carol').",
        )


class UnknownParticipantError(RankerError):
    """Error when a match refers to a participant outside the roster."""

    label = "Match Error"

    def __init__(self, participant_id: str) -> None:
        self.participant_id = participant_id
        super().__init__(f"Unknown participant id '{participant_id}'")


class InvalidMatchError(RankerError):
    """Error when a participant is recorded as both winner and loser."""

    label = "Match Error"

    def __init__(self, participant_id: str) -> None:
        super().__init__(
            f"Participant '{participant_id}' cannot play against itself",
            "Record the result with two different participants.",
        )


class SessionStateError(RankerError):
    """Error when an operation is not allowed in the current session phase."""

    label = "Session Error"

    def __init__(self, operation: str, phase: str) -> None:
        self.operation = operation
        self.phase = phase
        super().__init__(f"Cannot {operation} while session is {phase}")
