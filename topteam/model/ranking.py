"""
Ranking projection and display for match-day standings.

Supports:
- Ranking teams by points through a given match
- Name tie-breaks in either direction
- Text rendering of match-day rankings and league tables
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Sequence

import pandas as pd

from topteam.model.team_record import TeamRecord


NameOrder = Literal["ascending", "descending"]
NAME_ORDERS = ("ascending", "descending")


@dataclass(frozen=True)
class RankingEntry:
    """A team's points at the moment a ranking was taken."""

    name: str
    score: int


def validate_name_order(name_order: str) -> NameOrder:
    """Check a tie-break direction, raising ValueError for unknown values."""
    if name_order not in NAME_ORDERS:
        raise ValueError(f"Unknown name order: {name_order!r} (expected one of {NAME_ORDERS})")
    return name_order


def project_ranking(
    teams: Iterable[TeamRecord],
    through_match: int,
    name_order: NameOrder = "ascending",
) -> list[RankingEntry]:
    """
    Rank teams by points accumulated through `through_match` matches.

    Teams are sorted by score (desc), then by name in `name_order`. Names are
    unique so the order is total.

    Args:
        teams: Team records to rank
        through_match: Number of matches to count for every team
        name_order: Tie-break direction for teams level on points

    Returns:
        List of RankingEntry, best first
    """
    name_ascending = validate_name_order(name_order) == "ascending"

    df = pd.DataFrame(
        [(team.name, team.score_through_match(through_match)) for team in teams],
        columns=["name", "score"],
    )
    if len(df) == 0:
        return []

    df = df.sort_values(
        by=["score", "name"],
        ascending=[False, name_ascending],
    )

    return [RankingEntry(name, int(score)) for name, score in zip(df["name"], df["score"])]


def format_ranking(match_day: int, ranking: Sequence[RankingEntry], top_n: int | None = None) -> str:
    """
    Format a match-day ranking for console output.

    Example:
        >>> print(format_ranking(1, [RankingEntry("Aptos FC", 3)]))
        Matchday 1
        Aptos FC, 3 pts
    """
    entries = ranking if top_n is None else ranking[:top_n]
    lines = [f"Matchday {match_day}"]
    lines.extend(f"{entry.name}, {entry.score} pts" for entry in entries)
    return "\n".join(lines)


def format_table(standings: pd.DataFrame, max_teams: int | None = None) -> str:
    """
    Format a standings DataFrame as a human-readable table.

    Args:
        standings: DataFrame from Season.standings()
        max_teams: Maximum number of teams to display

    Returns:
        Formatted table string
    """
    df = standings.copy()

    if max_teams:
        df = df.head(max_teams)

    col_names = {
        'position': 'Pos',
        'team': 'Team',
        'played': 'P',
        'won': 'W',
        'drawn': 'D',
        'lost': 'L',
        'points': 'Pts',
    }
    display_cols = list(col_names)

    def cell(col, value):
        return f"{value:<24}" if col == 'team' else f"{value:>4}"

    lines = []
    header = " | ".join(cell(col, col_names[col]) for col in display_cols)
    lines.append(header)
    lines.append("-" * len(header))

    for _, row in df.iterrows():
        lines.append(" | ".join(cell(col, row[col]) for col in display_cols))

    return "\n".join(lines)
