"""Fantasy point calculation for a single stat line."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional, Tuple

from .constants import SCORING_WEIGHTS, STAT_ALIASES

TWO_PLACES = Decimal('0.01')


def round_points(points: float) -> float:
    """Round to 2 decimal places, halves away from zero.

    Goes through ``repr`` so that e.g. 2.675 rounds to 2.68 rather than
    the 2.67 its binary value would give.
    """
    return float(Decimal(repr(points)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def _stat_value(stats: dict, metric: str) -> float:
    value = stats.get(metric)
    if value is None and metric in STAT_ALIASES:
        value = stats.get(STAT_ALIASES[metric])
    return value or 0


def score_stat_line(stats: Optional[dict], position: Optional[str] = None) -> Tuple[float, Dict[str, float]]:
    """
    Score one player's stat line (full PPR).

    Scoring:
        - Passing yards: 0.04 per yard (1 pt per 25)
        - Passing TDs: 4 points each
        - Interceptions thrown: -2 points each
        - Rushing / receiving yards: 0.1 per yard (1 pt per 10)
        - Receptions: 1 point each
        - Rushing / receiving TDs: 6 points each
        - Fumbles lost: -2 points each

    Every position uses the same weights; ``position`` is accepted so callers
    don't have to change when position-specific scoring arrives.

    Args:
        stats: Stat payload (missing or null metrics count as 0)
        position: Player position code (QB, RB, WR, TE, ...)

    Returns:
        Tuple of (rounded points, unrounded per-metric breakdown)
    """
    points = 0.0
    breakdown = {}
    stats = stats or {}

    for metric, weight in SCORING_WEIGHTS.items():
        value = _stat_value(stats, metric)
        if not value:
            continue
        metric_pts = value * weight
        breakdown[metric] = metric_pts
        points += metric_pts

    return round_points(points), breakdown


def calculate_fantasy_points(stats: Optional[dict], position: Optional[str] = None) -> float:
    """Fantasy points for a stat line, rounded to 2 decimals."""
    points, _ = score_stat_line(stats, position)
    return points
