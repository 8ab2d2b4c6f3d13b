"""Shared fixtures: a small league on disk and its finalized stats."""

import json

import polars as pl
import pytest

RECEIVING_100_RULE = {
    'condition': {'type': 'stat', 'metric': 'receiving_yards', 'op': '>=', 'value': 100},
    'reward': {'type': 'points', 'value': 5},
}


def write_json(path, data):
    with open(path, 'w') as f:
        json.dump(data, f, indent=2)


def league_files():
    """League records keyed by file name."""
    return {
        'seasons.json': {
            'seasons': [
                {'id': 'season-2025', 'year': 2025, 'league': 'NFL'},
            ]
        },
        'weeks.json': {
            'weeks': [
                {'id': 'wk-1', 'season_id': 'season-2025', 'week_number': 1, 'status': 'completed'},
                {'id': 'wk-2', 'season_id': 'season-2025', 'week_number': 2, 'status': 'completed'},
                {'id': 'wk-3', 'season_id': 'season-2025', 'week_number': 3, 'status': 'active'},
            ]
        },
        'games.json': {
            'games': [
                {'id': 'g1', 'week_id': 'wk-1', 'home_team': 'PHI', 'away_team': 'DAL'},
                {'id': 'g2', 'week_id': 'wk-1', 'home_team': 'LAC', 'away_team': 'KC'},
                {'id': 'g-other', 'week_id': 'wk-2', 'home_team': 'PHI', 'away_team': 'NYG'},
            ]
        },
        'players.json': {
            'players': [
                {'id': 'p-qb', 'first_name': 'Jalen', 'last_name': 'Hurts', 'position': 'QB'},
                {'id': 'p-wr', 'first_name': 'CeeDee', 'last_name': 'Lamb', 'position': 'WR'},
                {'id': 'p-rb', 'first_name': 'Saquon', 'last_name': 'Barkley', 'position': 'RB'},
                {'id': 'p-te', 'first_name': 'Travis', 'last_name': 'Kelce', 'position': 'TE'},
            ]
        },
        'token_types.json': {
            'token_types': [
                {'id': 'tt-100', 'name': '100+ Receiving Yards = +5', 'rule': RECEIVING_100_RULE},
                {'id': 'tt-bad', 'name': 'Broken', 'rule': {'condition': 'receiving_yards'}},
            ]
        },
        'lineups.json': {
            'lineups': [
                {
                    'id': 'lu-1',
                    'user_id': 'u-1',
                    'week_id': 'wk-1',
                    'status': 'submitted',
                    'slots': [
                        {'id': 's-1-qb', 'slot': 'QB', 'user_card_id': 'c-1', 'player_id': 'p-qb'},
                        {
                            'id': 's-1-wr',
                            'slot': 'WR1',
                            'user_card_id': 'c-2',
                            'player_id': 'p-wr',
                            'applied_token_id': 'ut-1',
                            'token_type_id': 'tt-100',
                        },
                        {'id': 's-1-flex', 'slot': 'FLEX'},
                    ],
                },
                {
                    'id': 'lu-2',
                    'user_id': 'u-2',
                    'week_id': 'wk-1',
                    'status': 'locked',
                    'slots': [
                        {'id': 's-2-rb', 'slot': 'RB1', 'user_card_id': 'c-3', 'player_id': 'p-rb'},
                        {
                            'id': 's-2-te',
                            'slot': 'TE',
                            'user_card_id': 'c-4',
                            'player_id': 'p-te',
                            'applied_token_id': 'ut-2',
                            'token_type_id': 'tt-100',
                        },
                    ],
                },
                {
                    'id': 'lu-3',
                    'user_id': 'u-3',
                    'week_id': 'wk-1',
                    'status': 'scored',
                    'total_points': 10.0,
                    'slots': [
                        {'id': 's-3-qb', 'slot': 'QB', 'user_card_id': 'c-5', 'player_id': 'p-qb'},
                    ],
                },
                {
                    'id': 'lu-4',
                    'user_id': 'u-4',
                    'week_id': 'wk-1',
                    'status': 'draft',
                    'slots': [
                        {'id': 's-4-qb', 'slot': 'QB', 'user_card_id': 'c-6', 'player_id': 'p-qb'},
                    ],
                },
                {
                    'id': 'lu-5',
                    'user_id': 'u-1',
                    'week_id': 'wk-2',
                    'status': 'submitted',
                    'slots': [],
                },
            ]
        },
    }


def stats_frame():
    """Stat table for the league above.

    Finalized rows for wk-1 games: p-qb (22.00), p-wr (26.00), p-rb (14.70).
    p-te only has a non-finalized row; g-other belongs to another week.
    """
    return pl.DataFrame(
        {
            'player_id': ['p-qb', 'p-wr', 'p-rb', 'p-te', 'p-qb'],
            'game_id': ['g1', 'g1', 'g2', 'g2', 'g-other'],
            'finalized': [True, True, True, False, True],
            'passing_yards': [300, None, None, None, 400],
            'passing_touchdowns': [3, None, None, None, 5],
            'passing_interceptions': [1, None, None, None, 0],
            'rushing_yards': [None, None, 87, None, None],
            'rushing_touchdowns': [None, None, 1, None, None],
            'receiving_yards': [None, 120, None, 200, None],
            'receptions': [None, 8, None, 11, None],
            'receiving_touchdowns': [None, 1, None, 2, None],
            'fumbles_lost': [0, None, None, None, None],
        }
    )


@pytest.fixture
def league_dir(tmp_path):
    """Write the league JSON files to a temporary data directory."""
    data_dir = tmp_path / 'data'
    data_dir.mkdir()
    for name, content in league_files().items():
        write_json(data_dir / name, content)
    return data_dir


@pytest.fixture
def stats():
    return stats_frame()
