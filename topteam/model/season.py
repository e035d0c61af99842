"""
Incremental standings engine for a round-robin season.

Results are applied one at a time. The number of matches per match day is
inferred from the input: the first time the next result involves a team that
has already played, the current result closes the first match day. After that,
a match day is complete whenever every known team has played the same number
of matches, and a ranking snapshot is emitted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

import numpy as np
import pandas as pd

from topteam.model.results import MatchResult, MalformedResultError, parse_result
from topteam.model.team_record import TeamRecord
from topteam.model.ranking import (
    NameOrder,
    RankingEntry,
    project_ranking,
    validate_name_order,
)
from topteam.utils.constants import DEFAULT_TOP_N


logger = logging.getLogger(__name__)

MatchDayCallback = Callable[[tuple[RankingEntry, ...], int], None]


@dataclass
class SeasonConfig:
    """Configuration for ranking and display of a season."""

    name_order: NameOrder = "ascending"  # Tie-break for teams level on points
    top_n: int = DEFAULT_TOP_N  # Entries shown per match day

    def __post_init__(self):
        validate_name_order(self.name_order)
        if self.top_n < 1:
            raise ValueError(f"top_n must be at least 1, got {self.top_n}")

    @classmethod
    def from_name_order(cls, name_order: str, **kwargs) -> SeasonConfig:
        """Get a configuration for a tie-break direction given as text."""
        return cls(name_order=validate_name_order(name_order.lower()), **kwargs)


@dataclass(frozen=True)
class MatchDay:
    """Ranking snapshot taken when a match day completes."""

    number: int
    ranking: tuple[RankingEntry, ...] = ()

    def top(self, n: int) -> list[RankingEntry]:
        return list(self.ranking[:n])


class Season:
    """
    Accumulate match results and rank teams at every completed match day.

    Usage:
        >>> season = Season()
        >>> def show(ranking, match_day):
        ...     print(match_day, [entry.name for entry in ranking[:3]])
        >>> match_days = season.ingest(lines, show)
        >>> season.matches_per_day
        3
        >>> print(season.standings())
    """

    def __init__(self, config: SeasonConfig | None = None):
        self.config = config if config is not None else SeasonConfig()
        self._teams: dict[str, TeamRecord] = {}
        self._results: list[MatchResult] = []
        self._matches_per_day: int | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def matches_per_day(self) -> int | None:
        """Matches per match day, or None until it has been inferred."""
        return self._matches_per_day

    @property
    def teams(self) -> list[TeamRecord]:
        """Team records in order of first appearance."""
        return list(self._teams.values())

    @property
    def team_names(self) -> list[str]:
        return list(self._teams)

    @property
    def results(self) -> list[MatchResult]:
        """Results processed so far, in input order."""
        return list(self._results)

    def team(self, name: str) -> TeamRecord:
        """Look up a team record by name (KeyError if unknown)."""
        return self._teams[name]

    def totals(self) -> dict[str, int]:
        """Total points per team, in order of first appearance."""
        return {team.name: team.total_score for team in self._teams.values()}

    @property
    def match_days(self) -> int:
        """Number of match days every team has completed."""
        if not self._teams:
            return 0
        return min(team.matches_played for team in self._teams.values())

    def is_end_of_match_day(self) -> bool:
        """True when matches per day is known and all teams have played equally."""
        if self._matches_per_day is None or not self._teams:
            return False
        return len({team.matches_played for team in self._teams.values()}) == 1

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def ingest(
        self,
        lines: Iterable[str],
        on_match_day_complete: MatchDayCallback | None = None,
    ) -> list[MatchDay]:
        """
        Apply result lines in order, reporting each completed match day.

        State accumulates across calls. If a line is malformed, the error
        propagates and results applied before it stay applied.

        Args:
            lines: Result lines, blank lines already removed
            on_match_day_complete: Called with (ranking, match_day) whenever
                a match day completes

        Returns:
            MatchDay snapshots completed during this call

        Raises:
            MalformedResultError: If a line (or the line after it, while
                matches per day is being inferred) cannot be parsed
        """
        completed = []
        for match_day in self.iter_match_days(lines):
            if on_match_day_complete is not None:
                on_match_day_complete(match_day.ranking, match_day.number)
            completed.append(match_day)
        return completed

    def iter_match_days(self, lines: Iterable[str]) -> Iterator[MatchDay]:
        """
        Lazily apply result lines, yielding a MatchDay each time one completes.

        Results are only applied as the iterator is consumed.

        While matches per day is unknown, the line after each result is parsed
        ahead. If any of its teams is already known (from this or any earlier
        result, not only the current one), matches per day is set to the
        current line's 1-based position in `lines`. It is never changed after.
        """
        lines = list(lines)

        for idx, line in enumerate(lines):
            line_number = idx + 1
            result = self._parse(line, line_number)

            self._add_new_teams(result.team_names)
            self._apply(result)

            if self._matches_per_day is None and idx + 1 < len(lines):
                next_result = self._parse(lines[idx + 1], line_number + 1)
                if any(name in self._teams for name in next_result.team_names):
                    self._matches_per_day = line_number
                    logger.info(f"Inferred {line_number} matches per match day")

            if self.is_end_of_match_day():
                match_day = self.match_days
                logger.info(f"Match day {match_day} complete after {len(self._results)} results")
                yield MatchDay(match_day, tuple(self.ranking(match_day)))

    def _parse(self, line: str, line_number: int) -> MatchResult:
        try:
            return parse_result(line)
        except MalformedResultError as e:
            e.line_number = line_number
            raise

    def _add_new_teams(self, team_names: Iterable[str]) -> None:
        for name in team_names:
            if name not in self._teams:
                self._teams[name] = TeamRecord(name)

    def _apply(self, result: MatchResult) -> None:
        """Attribute win/tie/loss points to both teams of a result."""
        team1 = self._teams[result.team1.name]
        team2 = self._teams[result.team2.name]

        if result.team1.score > result.team2.score:
            team1.win()
            team2.loss()
        elif result.team1.score < result.team2.score:
            team2.win()
            team1.loss()
        else:
            team1.tie()
            team2.tie()

        self._results.append(result)
        logger.debug(f"Applied result {len(self._results)}: {result}")

    # ------------------------------------------------------------------
    # Rankings and tables
    # ------------------------------------------------------------------

    def ranking(self, through_match: int | None = None) -> list[RankingEntry]:
        """Rank all teams by points through a match (default: last complete match day)."""
        if through_match is None:
            through_match = self.match_days
        return project_ranking(self._teams.values(), through_match, self.config.name_order)

    def rankings(self) -> list[list[RankingEntry]]:
        """Rankings for every completed match day, first to last."""
        return [self.ranking(day) for day in range(1, self.match_days + 1)]

    def standings(self) -> pd.DataFrame:
        """
        League table over every result applied so far.

        Returns:
            DataFrame with columns position, team, played, won, drawn, lost,
            points, ordered like a ranking
        """
        columns = ['position', 'team', 'played', 'won', 'drawn', 'lost', 'points']
        if not self._teams:
            return pd.DataFrame(columns=columns)

        df = pd.DataFrame([
            {
                'team': team.name,
                'played': team.matches_played,
                'won': team.won,
                'drawn': team.drawn,
                'lost': team.lost,
                'points': team.total_score,
            }
            for team in self._teams.values()
        ])

        df = df.sort_values(
            by=['points', 'team'],
            ascending=[False, self.config.name_order == "ascending"],
        ).reset_index(drop=True)
        df['position'] = range(1, len(df) + 1)

        return df[columns]

    def points_progression(self) -> pd.DataFrame:
        """
        Cumulative points per team after each completed match day.

        Returns:
            DataFrame indexed by team (first-appearance order) with one
            column per match day, 1..match_days
        """
        n_days = self.match_days
        history = np.array(
            [team.history[:n_days] for team in self._teams.values()],
            dtype=int,
        ).reshape(len(self._teams), n_days)

        df = pd.DataFrame(
            np.cumsum(history, axis=1),
            index=pd.Index(self.team_names, name='team'),
            columns=range(1, n_days + 1),
        )
        return df
