"""Scoring configuration management."""

import os
from functools import lru_cache
from pathlib import Path

from .schemas import ScoringConfig
from .utils import load_json_safe

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'scoring_config.json'


@lru_cache(maxsize=1)
def get_config() -> ScoringConfig:
    """
    Load scoring configuration from data/scoring_config.json.

    Configuration is cached after first load. A missing file yields the
    defaults; an invalid one raises.

    Returns:
        ScoringConfig object with validated settings

    Example:
        from gridcards.config import get_config
        config = get_config()
        print(f"Scoring league: {config.league}")
    """
    return load_json_safe(CONFIG_PATH, default=ScoringConfig(), schema=ScoringConfig)


def get_league() -> str:
    """Get the league whose seasons are scored."""
    return get_config().league


def get_season_start_month() -> int:
    """Get the calendar month (1-12) a new season starts in."""
    return get_config().season_start_month


def get_error_sample_size() -> int:
    """Get how many error messages a run report returns."""
    return get_config().error_sample_size


def get_data_dir() -> Path:
    """Get the league data directory (GRIDCARDS_DATA_DIR overrides config)."""
    return Path(os.environ.get('GRIDCARDS_DATA_DIR') or get_config().data_dir)


def get_stats_path() -> Path:
    """Get the finalized stats table path (GRIDCARDS_STATS_FILE overrides config)."""
    override = os.environ.get('GRIDCARDS_STATS_FILE')
    if override:
        return Path(override)
    return get_data_dir() / get_config().stats_file


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime.
    """
    get_config.cache_clear()
