from .models import TokenResult, SlotScore, LineupScore
from .schemas import (
    Season,
    Week,
    Game,
    Player,
    TokenType,
    LineupSlot,
    Lineup,
    StatRecord,
    TokenEvaluation,
    TokenRule,
    ScoreWeekRequest,
    ScoringConfig,
)
from .exceptions import (
    ScoringError,
    WeekNotFoundError,
    DataFetchError,
    LineupFetchError,
    GameFetchError,
    StatFetchError,
    PlayerFetchError,
    PersistenceError,
    ScoringInProgressError,
)
from .config import get_config, clear_config_cache
from .logging_config import setup_logging, get_logger
from .scoring import calculate_fantasy_points, score_stat_line, round_points
from .tokens import evaluate_token, parse_rule
from .weeks import resolve_week, current_season_year
from .repository import (
    LineupRepository,
    StatProvider,
    JsonLeagueStore,
    PolarsStatProvider,
)
from .locks import WeekLockRegistry
from .report import RunReport
from .orchestrator import WeekScorer, score_week
from .api import handle_score_week

__all__ = [
    # Result containers
    'TokenResult',
    'SlotScore',
    'LineupScore',
    'RunReport',
    # Records
    'Season',
    'Week',
    'Game',
    'Player',
    'TokenType',
    'LineupSlot',
    'Lineup',
    'StatRecord',
    'TokenEvaluation',
    'TokenRule',
    'ScoreWeekRequest',
    'ScoringConfig',
    # Errors
    'ScoringError',
    'WeekNotFoundError',
    'DataFetchError',
    'LineupFetchError',
    'GameFetchError',
    'StatFetchError',
    'PlayerFetchError',
    'PersistenceError',
    'ScoringInProgressError',
    # Config / logging
    'get_config',
    'clear_config_cache',
    'setup_logging',
    'get_logger',
    # Scoring
    'calculate_fantasy_points',
    'score_stat_line',
    'round_points',
    'evaluate_token',
    'parse_rule',
    # Weeks
    'resolve_week',
    'current_season_year',
    # Data access
    'LineupRepository',
    'StatProvider',
    'JsonLeagueStore',
    'PolarsStatProvider',
    # Orchestration
    'WeekLockRegistry',
    'WeekScorer',
    'score_week',
    'handle_score_week',
]
