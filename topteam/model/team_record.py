"""
Per-team record of league points earned in each match.
"""

from __future__ import annotations

from topteam.utils.constants import WIN_POINTS, DRAW_POINTS, LOSS_POINTS, VALID_POINTS


class TeamRecord:
    """
    Points history for one team (3 for a win, 1 for a tie, 0 for a loss).

    Usage:
        >>> record = TeamRecord("Aptos FC")
        >>> record.win()
        >>> record.tie()
        >>> record.total_score
        4
        >>> record.score_through_match(1)
        3
    """

    def __init__(self, name: str):
        self.name = name
        self.history: list[int] = []

    def __repr__(self) -> str:
        return f"TeamRecord(name={self.name!r}, history={self.history!r})"

    def record_outcome(self, points: int) -> None:
        """Append the points earned in one match."""
        if points not in VALID_POINTS:
            raise ValueError(
                f"Points per match must be one of {sorted(VALID_POINTS)}, got {points!r}"
            )
        self.history.append(points)

    def win(self) -> None:
        self.record_outcome(WIN_POINTS)

    def tie(self) -> None:
        self.record_outcome(DRAW_POINTS)

    def loss(self) -> None:
        self.record_outcome(LOSS_POINTS)

    @property
    def matches_played(self) -> int:
        return len(self.history)

    @property
    def total_score(self) -> int:
        return sum(self.history)

    @property
    def won(self) -> int:
        return self.history.count(WIN_POINTS)

    @property
    def drawn(self) -> int:
        return self.history.count(DRAW_POINTS)

    @property
    def lost(self) -> int:
        return self.history.count(LOSS_POINTS)

    def score_through_match(self, match_number: int) -> int:
        """
        Points accumulated over the first `match_number` matches.

        Args:
            match_number: Number of matches to include, 0 to matches_played

        Raises:
            ValueError: If match_number is outside 0..matches_played
        """
        if not 0 <= match_number <= self.matches_played:
            raise ValueError(
                f"{self.name} has played {self.matches_played} matches, "
                f"cannot score through match {match_number}"
            )
        return sum(self.history[:match_number])
