"""Pydantic schemas for league records, token rules and requests."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .constants import (
    DEFAULT_ERROR_SAMPLE_SIZE,
    DEFAULT_LEAGUE,
    DEFAULT_SEASON_START_MONTH,
    LINEUP_STATUSES,
    POINTS_REWARD,
    STAT_CONDITION,
)


class Season(BaseModel):
    """A league season."""

    id: str = Field(..., min_length=1)
    year: int = Field(..., ge=1900, le=2100)
    league: str = Field(default=DEFAULT_LEAGUE, min_length=1)

    class Config:
        extra = 'forbid'


class Week(BaseModel):
    """A scheduling period within a season."""

    id: str = Field(..., min_length=1)
    season_id: str = Field(..., min_length=1)
    week_number: int = Field(..., ge=1)
    status: str = Field(default='upcoming', pattern=r'^(upcoming|active|completed)$')
    lock_time: datetime | None = None

    class Config:
        extra = 'forbid'
        frozen = True


class Game(BaseModel):
    """A sports event played during a week."""

    id: str = Field(..., min_length=1)
    week_id: str = Field(..., min_length=1)
    home_team: str | None = None
    away_team: str | None = None
    status: str | None = None

    class Config:
        extra = 'allow'


class Player(BaseModel):
    """An NFL player a card can represent."""

    id: str = Field(..., min_length=1)
    first_name: str = ''
    last_name: str = ''
    position: str | None = None
    team: str | None = None
    external_id: str | None = None

    class Config:
        extra = 'forbid'

    @property
    def name(self) -> str:
        return f'{self.first_name} {self.last_name}'.strip() or self.id


class TokenType(BaseModel):
    """A boost token definition.

    ``rule`` is the raw provider JSON, kept untyped so a malformed rule only
    fails its own evaluation.
    """

    id: str = Field(..., min_length=1)
    name: str = ''
    rule: Any = None

    class Config:
        extra = 'forbid'


class LineupSlot(BaseModel):
    """One position-labeled place in a lineup."""

    id: str = Field(..., min_length=1)
    lineup_id: str | None = None
    slot: str = Field(..., min_length=1)
    user_card_id: str | None = None
    player_id: str | None = None
    applied_token_id: str | None = None
    token_type_id: str | None = None
    token_type: TokenType | None = None

    class Config:
        extra = 'forbid'

    @property
    def is_empty(self) -> bool:
        return self.player_id is None


class Lineup(BaseModel):
    """A team's weekly lineup and its slots."""

    id: str = Field(..., min_length=1)
    user_id: str | None = None
    week_id: str = Field(..., min_length=1)
    status: str = Field(default='draft')
    total_points: float | None = None
    slots: list[LineupSlot] = Field(default_factory=list)

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        """Ensure status is a known lineup state."""
        if v not in LINEUP_STATUSES:
            raise ValueError(f'Invalid lineup status: {v}')
        return v

    class Config:
        extra = 'forbid'


class StatRecord(BaseModel):
    """One player's stat line for one game."""

    player_id: str = Field(..., min_length=1)
    game_id: str = Field(..., min_length=1)
    finalized: bool = False
    stats: dict[str, Any] = Field(default_factory=dict)

    class Config:
        extra = 'forbid'


class TokenEvaluation(BaseModel):
    """Audit record of one token evaluated for one lineup slot."""

    lineup_slot_id: str
    token_id: str
    satisfied: bool
    points_awarded: float
    rule_snapshot: Any = None
    evaluated_at: str

    class Config:
        extra = 'forbid'

    @property
    def key(self) -> tuple[str, str]:
        return (self.lineup_slot_id, self.token_id)


# Token rules: a closed set of condition and reward variants. Unknown variants
# parse successfully and evaluate to "not satisfied" / zero points.


class StatCondition(BaseModel):
    """Compare one stat metric against a threshold."""

    type: str = STAT_CONDITION
    metric: str = Field(..., min_length=1)
    op: str
    value: float

    class Config:
        extra = 'ignore'


class UnknownCondition(BaseModel):
    type: str | None = None

    class Config:
        extra = 'allow'


class PointsReward(BaseModel):
    """Fixed fantasy point bonus."""

    type: str = POINTS_REWARD
    value: float = 0

    @field_validator('value', mode='before')
    @classmethod
    def default_missing_value(cls, v):
        """A null reward value awards nothing."""
        return 0 if v is None else v

    class Config:
        extra = 'ignore'


class UnknownReward(BaseModel):
    type: str | None = None

    class Config:
        extra = 'allow'


class TokenRule(BaseModel):
    """Parsed token rule: one condition and one reward."""

    condition: StatCondition | UnknownCondition
    reward: PointsReward | UnknownReward


class ScoreWeekRequest(BaseModel):
    """Body of ``POST /score-week``. Unknown keys (e.g. ``cron_job``) are ignored."""

    week_id: str | None = None
    week_number: int | None = Field(None, ge=0)
    force_rescore: bool = False
    test_mode: bool = False

    @field_validator('week_number')
    @classmethod
    def zero_means_unset(cls, v):
        """Week 0 selects nothing; fall back to the latest completed week."""
        return v or None

    class Config:
        extra = 'ignore'


class ScoringConfig(BaseModel):
    """Scoring pipeline settings from data/scoring_config.json."""

    league: str = Field(default=DEFAULT_LEAGUE, min_length=1)
    season_start_month: int = Field(default=DEFAULT_SEASON_START_MONTH, ge=1, le=12)
    error_sample_size: int = Field(default=DEFAULT_ERROR_SAMPLE_SIZE, ge=1, le=100)
    data_dir: str = 'data'
    stats_file: str = 'player_game_stats.csv'
    log_dir: str = 'logs'

    class Config:
        extra = 'forbid'


# JSON file layouts used by JsonLeagueStore


class SeasonsFile(BaseModel):
    seasons: list[Season]

    class Config:
        extra = 'forbid'


class WeeksFile(BaseModel):
    weeks: list[Week]

    class Config:
        extra = 'forbid'


class GamesFile(BaseModel):
    games: list[Game]

    class Config:
        extra = 'forbid'


class PlayersFile(BaseModel):
    players: list[Player]

    class Config:
        extra = 'forbid'


class TokenTypesFile(BaseModel):
    token_types: list[TokenType]

    class Config:
        extra = 'forbid'


class LineupsFile(BaseModel):
    lineups: list[Lineup]

    class Config:
        extra = 'forbid'


class TokenEvaluationsFile(BaseModel):
    token_evaluations: list[TokenEvaluation]

    class Config:
        extra = 'forbid'
