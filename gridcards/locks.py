"""Per-week advisory locks so two scoring runs never interleave writes."""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from .exceptions import ScoringInProgressError

logger = logging.getLogger('gridcards.locks')


class WeekLockRegistry:
    """
    Non-blocking per-week locks shared by every scorer in the process.

    Only weeks currently being scored are tracked, so the registry never
    outgrows the number of concurrent runs. The lock is taken and released
    only through ``hold()``; a run can't release a week another run holds.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._held: set[str] = set()

    def _acquire(self, week_id: str) -> bool:
        with self._guard:
            if week_id in self._held:
                return False
            self._held.add(week_id)
            return True

    def _release(self, week_id: str) -> None:
        with self._guard:
            self._held.discard(week_id)

    def is_locked(self, week_id: str) -> bool:
        with self._guard:
            return week_id in self._held

    @property
    def held_weeks(self) -> frozenset[str]:
        with self._guard:
            return frozenset(self._held)

    @contextmanager
    def hold(self, week_id: str) -> Iterator[None]:
        """
        Hold the week's lock for the duration of the block.

        Raises:
            ScoringInProgressError: If another run already holds it
        """
        if not self._acquire(week_id):
            logger.warning(f'Scoring already in progress for week {week_id}')
            raise ScoringInProgressError(week_id)
        try:
            yield
        finally:
            self._release(week_id)


week_locks = WeekLockRegistry()
