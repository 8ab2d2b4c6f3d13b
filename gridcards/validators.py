"""Sanity checks for scored lineups.

These never block scoring; the orchestrator logs whatever they return.
"""

import math

from .models import LineupScore, SlotScore

ADDITIVITY_TOLERANCE = 0.01


def validate_slot_score(score: SlotScore) -> list[str]:
    """
    Check that a slot's score is a finite, plausible number.

    Sanity checks:
    - Base and bonus points are finite
    - Total in reasonable range (-20 to 100)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    for label, value in (('base points', score.base_points), ('token bonus', score.token_bonus)):
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            warnings.append(f'{score.player_name} ({score.slot}) has invalid {label}: {value!r}')
    if warnings:
        return warnings

    if score.total_points > 100:
        warnings.append(
            f'{score.player_name} ({score.slot}) scored {score.total_points:.2f} pts '
            '(unusually high - check stat feed)'
        )
    elif score.total_points < -20:
        warnings.append(
            f'{score.player_name} ({score.slot}) scored {score.total_points:.2f} pts '
            '(unusually low - check stat feed)'
        )

    return warnings


def validate_lineup_score(score: LineupScore) -> list[str]:
    """
    Check that a lineup total is consistent with its slots.

    Sanity checks:
    - Every slot passes validate_slot_score
    - Total equals the sum of slot totals (within 0.01)
    - Total in reasonable range (no more than 300)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []
    for slot in score.slots:
        warnings.extend(validate_slot_score(slot))
    if warnings:
        return warnings

    slot_sum = math.fsum(s.base_points + s.token_bonus for s in score.slots)
    diff = abs(slot_sum - score.total_points)
    if diff > ADDITIVITY_TOLERANCE:
        warnings.append(
            f'Lineup {score.lineup_id} total ({score.total_points:.2f}) != '
            f'slot sum ({slot_sum:.2f}) - difference: {diff:.4f}'
        )

    if score.total_points > 300:
        warnings.append(
            f'Lineup {score.lineup_id} scored {score.total_points:.2f} pts '
            '(unusually high - check for scoring bug)'
        )

    return warnings
