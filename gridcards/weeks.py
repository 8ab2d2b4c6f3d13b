"""Resolve which week a scoring run targets."""

import logging
from datetime import datetime, timezone
from typing import Optional

from .config import get_league, get_season_start_month
from .exceptions import WeekNotFoundError
from .repository import LineupRepository
from .schemas import Week

logger = logging.getLogger('gridcards.weeks')


def current_season_year(now: Optional[datetime] = None, start_month: Optional[int] = None) -> int:
    """
    Season year in effect at ``now``.

    A season runs from ``start_month`` (August by default) into the next
    calendar year, so January 2026 still belongs to the 2025 season.
    """
    now = now or datetime.now(timezone.utc)
    start_month = start_month or get_season_start_month()
    return now.year if now.month >= start_month else now.year - 1


def resolve_week(
    repository: LineupRepository,
    week_id: Optional[str] = None,
    week_number: Optional[int] = None,
    now: Optional[datetime] = None,
    league: Optional[str] = None,
) -> Week:
    """
    Find the week to score.

    Resolution order:
        1. ``week_id``: that exact week
        2. ``week_number``: that week of the current season
        3. Neither: the completed week with the highest week number

    Raises:
        WeekNotFoundError: If the chosen lookup finds nothing
    """
    if week_id:
        week = repository.get_week(week_id)
        if week is None:
            raise WeekNotFoundError('Week not found', details=f'No week with id {week_id}')
        return week

    if week_number:
        year = current_season_year(now)
        league = league or get_league()
        season = repository.get_season(year, league)
        if season is None:
            raise WeekNotFoundError(
                'Current season not found', details=f'No {league} season for {year}'
            )
        week = repository.get_week_by_number(season.id, week_number)
        if week is None:
            raise WeekNotFoundError(
                f'Week {week_number} not found',
                details=f'Season {season.id} ({year}) has no week {week_number}',
            )
        return week

    week = repository.get_latest_completed_week()
    if week is None:
        raise WeekNotFoundError('No completed weeks found')
    logger.debug(f'Defaulting to latest completed week {week.week_number} ({week.id})')
    return week
