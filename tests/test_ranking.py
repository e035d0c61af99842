"""
Tests for ranking projection and formatting.
"""

import pytest

from topteam.model.ranking import (
    RankingEntry,
    project_ranking,
    format_ranking,
)
from topteam.model.team_record import TeamRecord


def make_team(name, *points):
    team = TeamRecord(name)
    for p in points:
        team.record_outcome(p)
    return team


class TestProjectRanking:
    """Test ordering by points, then name."""

    def test_sorted_by_score(self):
        teams = [make_team("A", 0), make_team("B", 3), make_team("C", 1)]
        ranking = project_ranking(teams, 1)
        assert ranking == [RankingEntry("B", 3), RankingEntry("C", 1), RankingEntry("A", 0)]

    def test_ties_ascending_by_default(self):
        teams = [make_team("Felton Lumberjacks", 3), make_team("Capitola Seahorses", 3)]
        ranking = project_ranking(teams, 1)
        assert [e.name for e in ranking] == ["Capitola Seahorses", "Felton Lumberjacks"]

    def test_ties_descending(self):
        teams = [make_team("A", 3), make_team("B", 3)]
        ranking = project_ranking(teams, 1, name_order="descending")
        assert ranking == [RankingEntry("B", 3), RankingEntry("A", 3)]

    def test_uses_score_through_match(self):
        """Later matches are ignored."""
        teams = [make_team("A", 0, 3, 3), make_team("B", 3, 0, 0)]
        assert project_ranking(teams, 1)[0].name == "B"
        assert project_ranking(teams, 3)[0].name == "A"

    def test_input_order_does_not_matter(self):
        teams = [make_team(name, 1) for name in ["D", "B", "A", "C"]]
        forward = project_ranking(teams, 1)
        backward = project_ranking(list(reversed(teams)), 1)
        assert forward == backward

    def test_scores_are_python_ints(self):
        ranking = project_ranking([make_team("A", 3)], 1)
        assert type(ranking[0].score) is int

    def test_empty(self):
        assert project_ranking([], 0) == []

    def test_unknown_name_order(self):
        with pytest.raises(ValueError, match="Unknown name order"):
            project_ranking([make_team("A", 3)], 1, name_order="random")


class TestFormatRanking:
    """Test console rendering of a match day."""

    def test_format(self):
        ranking = [RankingEntry("Aptos FC", 9), RankingEntry("Felton Lumberjacks", 7)]
        assert format_ranking(4, ranking) == (
            "Matchday 4\n"
            "Aptos FC, 9 pts\n"
            "Felton Lumberjacks, 7 pts"
        )

    def test_top_n(self):
        ranking = [RankingEntry(name, 1) for name in "ABCD"]
        assert format_ranking(1, ranking, top_n=2).splitlines() == ["Matchday 1", "A, 1 pts", "B, 1 pts"]
