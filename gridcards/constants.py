"""Constants for gridcards lineup scoring."""

# Fantasy points per unit of each stat (full PPR). Applied to every position.
SCORING_WEIGHTS = {
    'passing_yards': 0.04,  # 1 pt per 25 yards
    'passing_touchdowns': 4,
    'passing_interceptions': -2,
    'rushing_yards': 0.1,  # 1 pt per 10 yards
    'rushing_touchdowns': 6,
    'receiving_yards': 0.1,  # 1 pt per 10 yards
    'receptions': 1,
    'receiving_touchdowns': 6,
    'fumbles_lost': -2,
}

# Alternate provider field names, read only when the primary key is absent
STAT_ALIASES = {
    'receptions': 'receiving_receptions',
}

# Lineup lifecycle; drafts are never scored
LINEUP_STATUSES = ('draft', 'submitted', 'locked', 'scored')
SCORABLE_LINEUP_STATUSES = ('submitted', 'locked', 'scored')
SCORED_STATUS = 'scored'

# Token rule vocabulary
STAT_CONDITION = 'stat'
POINTS_REWARD = 'points'

# Defaults for scoring_config.json
DEFAULT_LEAGUE = 'NFL'
DEFAULT_SEASON_START_MONTH = 8  # August
DEFAULT_ERROR_SAMPLE_SIZE = 5
