"""Unit tests for validation functions."""

from gridcards.models import LineupScore, SlotScore
from gridcards.validators import validate_lineup_score, validate_slot_score


def make_slot(base=10.0, bonus=0.0, slot='QB', name='Jalen Hurts'):
    return SlotScore(
        slot_id=f's-{slot.lower()}',
        slot=slot,
        player_id='p-1',
        player_name=name,
        position='QB',
        base_points=base,
        token_bonus=bonus,
        had_stats=True,
    )


class TestSlotScoreValidation:
    """Tests for slot score validation."""

    def test_valid_slot_score(self):
        """Test that a normal slot score passes."""
        assert validate_slot_score(make_slot(base=22.0, bonus=5)) == []

    def test_unusually_high_score(self):
        """Test that a slot total over 100 is flagged."""
        warnings = validate_slot_score(make_slot(base=101.5))
        assert len(warnings) == 1
        assert 'unusually high' in warnings[0]

    def test_unusually_low_score(self):
        """Test that a slot total under -20 is flagged."""
        warnings = validate_slot_score(make_slot(base=-25.0))
        assert len(warnings) == 1
        assert 'unusually low' in warnings[0]

    def test_non_finite_points(self):
        """Test that NaN base points are flagged."""
        warnings = validate_slot_score(make_slot(base=float('nan')))
        assert len(warnings) == 1
        assert 'invalid base points' in warnings[0]

    def test_negative_score_in_range(self):
        """Test that a bad but plausible game passes."""
        assert validate_slot_score(make_slot(base=-6.0)) == []


class TestLineupScoreValidation:
    """Tests for lineup score validation."""

    def test_valid_lineup(self):
        """Test that a consistent lineup passes."""
        score = LineupScore(
            lineup_id='lu-1',
            user_id='u-1',
            slots=[make_slot(22.0), make_slot(26.0, 5, slot='WR1', name='CeeDee Lamb')],
        )
        assert validate_lineup_score(score) == []

    def test_empty_lineup(self):
        """Test that a lineup with no slots passes."""
        assert validate_lineup_score(LineupScore(lineup_id='lu-1', user_id=None)) == []

    def test_slot_warnings_propagate(self):
        """Test that slot problems are reported for the lineup."""
        score = LineupScore(lineup_id='lu-1', user_id='u-1', slots=[make_slot(base=float('inf'))])
        warnings = validate_lineup_score(score)
        assert len(warnings) == 1
        assert 'invalid base points' in warnings[0]

    def test_unusually_high_total(self):
        """Test that a lineup total over 300 is flagged."""
        slots = [make_slot(base=80.0, slot=f'S{i}') for i in range(4)]
        warnings = validate_lineup_score(LineupScore(lineup_id='lu-1', user_id='u-1', slots=slots))
        assert len(warnings) == 1
        assert 'Lineup lu-1 scored 320.00 pts' in warnings[0]
