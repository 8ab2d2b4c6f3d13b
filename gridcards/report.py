"""Run report returned by a week scoring run."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import get_error_sample_size
from .models import LineupScore


@dataclass
class RunReport:
    """Counts, errors and per-lineup results for one scoring run."""
    week_id: str
    week_number: int
    lineups_processed: int = 0
    lineups_scored: int = 0
    total_slots: int = 0
    token_bonuses_applied: int = 0
    games_available: int = 0
    stats_available: int = 0
    errors: List[str] = field(default_factory=list)
    lineup_scores: List[LineupScore] = field(default_factory=list)
    no_lineups: bool = False
    error_sample_size: Optional[int] = None

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def error_sample(self) -> List[str]:
        """First few errors, enough to diagnose without flooding the caller."""
        size = self.error_sample_size or get_error_sample_size()
        return self.errors[:size]

    @property
    def message(self) -> str:
        if self.no_lineups:
            return f'No lineups found for week {self.week_number}'
        return f'Scored {self.lineups_scored} lineups for week {self.week_number}'

    def record_error(self, message: str) -> None:
        self.errors.append(message)

    def stats(self) -> Dict[str, Any]:
        return {
            'week_id': self.week_id,
            'week_number': self.week_number,
            'lineups_processed': self.lineups_processed,
            'lineups_scored': self.lineups_scored,
            'total_slots': self.total_slots,
            'token_bonuses': self.token_bonuses_applied,
            'games_available': self.games_available,
            'stats_available': self.stats_available,
            'errors': self.error_count,
        }

    def to_response(self) -> Dict[str, Any]:
        """JSON body for a successful ``POST /score-week``.

        ``success`` stays true when individual lineups failed; callers read
        ``stats.errors`` for partial failures.
        """
        response: Dict[str, Any] = {
            'success': True,
            'message': self.message,
            'stats': self.stats(),
        }
        if self.errors:
            response['errors'] = self.error_sample
        return response
