"""Request handling for ``POST /score-week``, independent of the HTTP server."""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from .config import get_data_dir, get_stats_path
from .exceptions import DataFetchError, ScoringInProgressError, WeekNotFoundError
from .orchestrator import WeekScorer
from .repository import JsonLeagueStore, PolarsStatProvider
from .schemas import ScoreWeekRequest

logger = logging.getLogger('gridcards.api')


def build_default_scorer() -> WeekScorer:
    """WeekScorer over the configured data directory and stats file."""
    repository = JsonLeagueStore(get_data_dir())
    stat_provider = PolarsStatProvider.from_path(get_stats_path())
    return WeekScorer(repository, stat_provider)


def handle_score_week(
    body: Optional[dict[str, Any]], scorer: Optional[WeekScorer] = None
) -> tuple[int, dict[str, Any]]:
    """
    Run a scoring request and map the outcome to (status code, JSON body).

    Status codes:
        200: Run completed (possibly with per-lineup errors)
        400: Invalid body or week could not be resolved
        409: The week is already being scored
        500: A required read failed, or anything unexpected
    """
    try:
        request = ScoreWeekRequest.model_validate(body or {})
    except ValidationError as e:
        return 400, {'error': 'Invalid request body', 'details': str(e)}

    try:
        scorer = scorer or build_default_scorer()
        report = scorer.score_week(
            week_id=request.week_id,
            week_number=request.week_number,
            force_rescore=request.force_rescore,
            test_mode=request.test_mode,
        )
    except WeekNotFoundError as e:
        payload: dict[str, Any] = {'error': str(e)}
        if e.details:
            payload['details'] = e.details
        return 400, payload
    except ScoringInProgressError as e:
        return 409, {'error': str(e)}
    except DataFetchError as e:
        return 500, {'error': str(e), 'details': e.details}
    except Exception as e:
        logger.exception('Week scoring error')
        return 500, {'error': str(e) or 'Unknown error'}

    return 200, report.to_response()
