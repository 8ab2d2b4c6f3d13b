"""Exceptions raised by the scoring pipeline.

Only the errors below stop a scoring run. Failures inside the per-lineup loop
are recorded on the run report instead of being raised.
"""


class ScoringError(Exception):
    """Base class for gridcards errors."""


class WeekNotFoundError(ScoringError):
    """The requested week (or its season) could not be resolved."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.details = details


class DataFetchError(ScoringError):
    """A read needed before scoring could start failed."""

    source = 'data'

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.details = details


class LineupFetchError(DataFetchError):
    source = 'lineups'


class GameFetchError(DataFetchError):
    source = 'games'


class StatFetchError(DataFetchError):
    source = 'stats'


class PlayerFetchError(DataFetchError):
    source = 'players'


class PersistenceError(ScoringError):
    """A scoring result could not be written."""


class ScoringInProgressError(ScoringError):
    """Another run already holds the lock for this week."""

    def __init__(self, week_id: str):
        super().__init__(f'Week {week_id} is already being scored')
        self.week_id = week_id
