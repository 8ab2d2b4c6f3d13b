"""Unit tests for fantasy point calculation."""

import pytest

from gridcards.scoring import calculate_fantasy_points, round_points, score_stat_line


class TestPassingScoring:
    """Tests for passing stats."""

    def test_passing_yards(self):
        """Test passing yards: 0.04 pts per yard."""
        assert calculate_fantasy_points({'passing_yards': 250}, 'QB') == 10.0

    def test_passing_touchdowns(self):
        """Test passing TDs: 4 points each."""
        assert calculate_fantasy_points({'passing_touchdowns': 3}, 'QB') == 12.0

    def test_interception_penalty(self):
        """Test interceptions: -2 points each."""
        assert calculate_fantasy_points({'passing_interceptions': 2}, 'QB') == -4.0

    def test_comprehensive_qb_game(self):
        """Test the documented QB line: 300 yds, 3 TD, 1 INT = 22.00."""
        stats = {
            'passing_yards': 300,
            'passing_touchdowns': 3,
            'passing_interceptions': 1,
            'fumbles_lost': 0,
        }
        assert calculate_fantasy_points(stats, 'QB') == 22.0


class TestRushingReceivingScoring:
    """Tests for rushing and receiving stats."""

    def test_rushing(self):
        """Test rushing: 0.1 per yard, 6 per TD."""
        stats = {'rushing_yards': 87, 'rushing_touchdowns': 1}
        assert calculate_fantasy_points(stats, 'RB') == 14.7

    def test_comprehensive_wr_game(self):
        """Test the documented WR line: 120 yds, 8 rec, 1 TD = 26.00."""
        stats = {'receiving_yards': 120, 'receptions': 8, 'receiving_touchdowns': 1}
        assert calculate_fantasy_points(stats, 'WR') == 26.0

    def test_receptions_full_ppr(self):
        """Test each reception is worth a full point."""
        assert calculate_fantasy_points({'receptions': 5}, 'TE') == 5.0

    def test_receiving_receptions_alias(self):
        """Test provider field receiving_receptions counts as receptions."""
        assert calculate_fantasy_points({'receiving_receptions': 6}, 'WR') == 6.0

    def test_receptions_preferred_over_alias(self):
        """Test the alias is ignored when receptions is present."""
        stats = {'receptions': 3, 'receiving_receptions': 9}
        assert calculate_fantasy_points(stats, 'WR') == 3.0

    def test_fumbles_lost(self):
        """Test fumbles lost: -2 points each."""
        stats = {'rushing_yards': 40, 'fumbles_lost': 1}
        assert calculate_fantasy_points(stats, 'RB') == 2.0


class TestEdgeCases:
    """Tests for empty, null and unrecognized stat payloads."""

    def test_zero_stats(self):
        """Test an empty stat line scores exactly 0."""
        points, breakdown = score_stat_line({})
        assert points == 0.0
        assert breakdown == {}

    def test_none_payload(self):
        """Test a missing payload scores 0 instead of failing."""
        assert calculate_fantasy_points(None, 'QB') == 0.0

    def test_unrecognized_fields_ignored(self):
        """Test fields outside the scoring table don't score."""
        assert calculate_fantasy_points({'tackles': 9, 'targets': 12}, 'LB') == 0.0

    def test_none_values_handled(self):
        """Test null values are treated as 0."""
        stats = {'passing_yards': None, 'rushing_yards': 100}
        assert calculate_fantasy_points(stats, 'QB') == 10.0

    def test_position_does_not_change_score(self):
        """Test every position uses the same weights."""
        stats = {'passing_yards': 100, 'rushing_yards': 50, 'receptions': 3}
        results = {calculate_fantasy_points(stats, pos) for pos in ('QB', 'RB', 'WR', 'TE', None)}
        assert results == {12.0}

    def test_breakdown_per_metric(self):
        """Test breakdown lists each contributing metric."""
        points, breakdown = score_stat_line(
            {'passing_touchdowns': 2, 'passing_interceptions': 1}
        )
        assert points == 6.0
        assert breakdown == {'passing_touchdowns': 8, 'passing_interceptions': -2}

    def test_deterministic(self):
        """Test repeated calls give identical results."""
        stats = {'passing_yards': 333, 'rushing_yards': 17, 'receptions': 1}
        first = calculate_fantasy_points(stats, 'QB')
        assert all(calculate_fantasy_points(stats, 'QB') == first for _ in range(20))


class TestRounding:
    """Tests for 2-decimal rounding."""

    def test_result_has_two_decimals(self):
        """Test fractional yardage rounds to cents."""
        # 0.04 * 333 = 13.32, 0.1 * 17 = 1.7
        assert calculate_fantasy_points({'passing_yards': 333, 'rushing_yards': 17}) == 15.02

    @pytest.mark.parametrize(
        'raw, expected',
        [
            (2.675, 2.68),
            (1.005, 1.01),
            (-2.675, -2.68),
            (0.125, 0.13),
            (3.14159, 3.14),
        ],
    )
    def test_half_away_from_zero(self, raw, expected):
        """Test halves round away from zero."""
        assert round_points(raw) == expected
