"""
Tests for per-team points history.
"""

import pytest

from topteam.model.team_record import TeamRecord


@pytest.fixture
def team():
    return TeamRecord("team1")


class TestOutcomes:
    """Test win/tie/loss recording."""

    def test_win_adds_three_points(self, team):
        team.win()
        assert team.total_score == 3
        assert team.matches_played == 1

    def test_loss_adds_no_points(self, team):
        team.win()
        team.loss()
        assert team.total_score == 3
        assert team.matches_played == 2

    def test_tie_adds_one_point(self, team):
        team.tie()
        assert team.total_score == 1
        assert team.matches_played == 1

    def test_record_outcome_appends_points(self, team):
        for points in (3, 0, 1, 1):
            team.record_outcome(points)
        assert team.history == [3, 0, 1, 1]
        assert (team.won, team.drawn, team.lost) == (1, 2, 1)

    @pytest.mark.parametrize("points", [2, -1, 4])
    def test_invalid_points(self, team, points):
        with pytest.raises(ValueError, match="Points per match"):
            team.record_outcome(points)
        assert team.history == []


class TestScoreThroughMatch:
    """Test partial sums of the points history."""

    def test_partial_sums(self, team):
        team.win()
        team.tie()
        team.loss()
        team.win()
        assert [team.score_through_match(n) for n in range(5)] == [0, 3, 4, 4, 7]

    def test_new_team_has_zero(self, team):
        assert team.score_through_match(0) == 0
        assert team.total_score == 0

    @pytest.mark.parametrize("n", [-1, 2])
    def test_out_of_range(self, team, n):
        team.win()
        with pytest.raises(ValueError, match="cannot score through match"):
            team.score_through_match(n)
