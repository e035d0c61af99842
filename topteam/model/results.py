"""
Parsing of single-line match results.

A result line names both teams with their final scores:

    San Jose Earthquakes 3, Santa Cruz Slugs 3

Team names may contain spaces and digits. The score is always the trailing
run of digits of each segment.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from topteam.utils.constants import RESULT_SEPARATOR


# Name is everything up to the last whitespace run that precedes trailing digits
TEAM_SCORE_PATTERN = re.compile(r"(?P<name>.*?\S)\s+(?P<score>[0-9]+)")


class MalformedResultError(ValueError):
    """A result line could not be decomposed into two (name, score) segments."""

    def __init__(self, message: str, line: str | None = None, line_number: int | None = None):
        self.line = line
        self.line_number = line_number
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.line_number is not None:
            return f"line {self.line_number}: {message}"
        return message


class InvalidMatchResultError(MalformedResultError):
    """A match result was built with an empty name or an invalid score."""


@dataclass(frozen=True)
class TeamScore:
    """A team name paired with the score it made in one match."""

    name: str
    score: int

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidMatchResultError(f"Team name must be a non-empty string, got {self.name!r}")
        # bool is an int subclass but never a valid score
        if isinstance(self.score, bool) or not isinstance(self.score, int):
            raise InvalidMatchResultError(f"Score must be an integer, got {self.score!r}")
        if self.score < 0:
            raise InvalidMatchResultError(f"Score must be non-negative, got {self.score}")

    def as_tuple(self) -> tuple[str, int]:
        return (self.name, self.score)


@dataclass(frozen=True)
class MatchResult:
    """Final score of one match between two teams."""

    team1: TeamScore
    team2: TeamScore

    @classmethod
    def from_tuples(cls, team1: tuple[str, int], team2: tuple[str, int]) -> MatchResult:
        """Build a result from two (name, score) pairs."""
        return cls(TeamScore(*team1), TeamScore(*team2))

    @property
    def team_names(self) -> tuple[str, str]:
        return (self.team1.name, self.team2.name)

    @property
    def is_tie(self) -> bool:
        return self.team1.score == self.team2.score

    @property
    def winner(self) -> str | None:
        """Name of the winning team, or None on a tie."""
        if self.is_tie:
            return None
        return max(self.team1, self.team2, key=lambda t: t.score).name

    def as_tuples(self) -> list[tuple[str, int]]:
        return [self.team1.as_tuple(), self.team2.as_tuple()]

    def __str__(self) -> str:
        return (
            f"{self.team1.name} {self.team1.score}{RESULT_SEPARATOR}"
            f"{self.team2.name} {self.team2.score}"
        )


def parse_team_score(segment: str, line: str | None = None) -> TeamScore:
    """
    Parse one "<name> <score>" segment of a result line.

    Args:
        segment: Text such as "Aptos FC 2"
        line: Full result line, used in error messages

    Returns:
        TeamScore for the segment

    Raises:
        MalformedResultError: If no trailing score follows a non-empty name
    """
    line = segment if line is None else line
    match = TEAM_SCORE_PATTERN.fullmatch(segment.strip())
    if match is None:
        raise MalformedResultError(
            f"Expected '<team> <score>' but got {segment.strip()!r} in {line!r}",
            line=line,
        )
    return TeamScore(match.group("name"), int(match.group("score")))


def parse_result(line: str) -> MatchResult:
    """
    Parse a result line into a MatchResult.

    Example:
        >>> result = parse_result("Capitola Seahorses 1, Aptos FC 0")
        >>> result.winner
        'Capitola Seahorses'

    Raises:
        MalformedResultError: If the line does not hold exactly two
            comma-separated "<team> <score>" segments
    """
    segments = line.split(RESULT_SEPARATOR)
    if len(segments) != 2:
        raise MalformedResultError(
            f"Expected two results separated by {RESULT_SEPARATOR!r}, "
            f"got {len(segments)} segment(s) in {line!r}",
            line=line,
        )

    team1, team2 = (parse_team_score(segment, line) for segment in segments)
    return MatchResult(team1, team2)
