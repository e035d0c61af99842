"""
Standings components for topteam.
"""

from topteam.model.results import (
    MatchResult,
    TeamScore,
    MalformedResultError,
    InvalidMatchResultError,
    parse_result,
)
from topteam.model.team_record import TeamRecord
from topteam.model.ranking import (
    RankingEntry,
    project_ranking,
    format_ranking,
    format_table,
)
from topteam.model.season import Season, SeasonConfig, MatchDay

__all__ = [
    "MatchResult",
    "TeamScore",
    "MalformedResultError",
    "InvalidMatchResultError",
    "parse_result",
    "TeamRecord",
    "RankingEntry",
    "project_ranking",
    "format_ranking",
    "format_table",
    "Season",
    "SeasonConfig",
    "MatchDay",
]
