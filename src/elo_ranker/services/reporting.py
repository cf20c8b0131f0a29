"""Leaderboard reporting for Elo Ranker."""

from __future__ import annotations

from collections.abc import Sequence

from tabulate import tabulate

from elo_ranker.models import Participant

LEADERBOARD_HEADERS = ("Rank", "Name", "Rating", "Played", "W", "L")


def leaderboard_rows(
    participants: Sequence[Participant],
) -> list[tuple[int, str, int, int, int, int]]:
    """Convert ranked participants to table rows.

    Args:
        participants: Participants already sorted by rating descending.

    Returns:
        List of (rank, name, rating, matches, wins, losses) tuples.
    """
    return [
        (rank, p.name, p.rating, p.matches, p.wins, p.losses)
        for rank, p in enumerate(participants, start=1)
    ]


def format_leaderboard(
    participants: Sequence[Participant],
    title: str | None = "Final Elo Leaderboard",
) -> str:
    """Render ranked participants as a markdown table.

    Args:
        participants: Participants already sorted by rating descending.
        title: Optional markdown heading above the table.

    Returns:
        Markdown report content.
    """
    lines = []
    if title:
        lines.extend([f"# {title}", ""])
    lines.append(
        tabulate(leaderboard_rows(participants), headers=LEADERBOARD_HEADERS, tablefmt="github")
    )
    return "\n".join(lines)
