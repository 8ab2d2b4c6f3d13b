#!/usr/bin/env python3
"""
Week Scoring CLI

Scores every submitted lineup for a week using the league data directory
and the finalized stats table.

Usage:
    python score_week.py                        # latest completed week
    python score_week.py --week 5               # week 5 of the current season
    python score_week.py --week-id wk-2025-05 --force-rescore
    python score_week.py --week 5 --json        # print the API response body
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from gridcards import (
    JsonLeagueStore,
    PolarsStatProvider,
    ScoringError,
    WeekScorer,
    get_config,
    setup_logging,
)


def print_report(report, verbose: bool = True) -> None:
    """Print lineup breakdowns and run totals."""
    if verbose:
        for lineup in report.lineup_scores:
            print(f'\n{"=" * 60}')
            if lineup.skipped:
                print(f'Lineup {lineup.lineup_id}: already scored (skipped)')
                continue
            print(f'Lineup {lineup.lineup_id} (user {lineup.user_id})')
            print('=' * 60)
            for slot in lineup.slots:
                status = '✓' if slot.had_stats else '✗'
                print(
                    f'  {slot.slot} {slot.player_name} ({slot.position or "?"}): '
                    f'{slot.total_points:.2f} pts {status}'
                )
                if slot.token_bonus:
                    print(f'      token bonus: +{slot.token_bonus:g}')
            for evaluation in lineup.token_evaluations:
                if not evaluation.satisfied:
                    print(f'      token {evaluation.token_id}: condition not met')
            saved = '' if lineup.persisted else '  (NOT SAVED)'
            print(f'\n  TOTAL: {lineup.total_points:.2f} points{saved}')

    print('\n' + '=' * 60)
    print(report.message)
    print('=' * 60)
    for key, value in report.stats().items():
        print(f'  {key}: {value}')
    if report.errors:
        print('\nErrors:')
        for error in report.errors:
            print(f'  ❌ {error}')


def main():
    config = get_config()

    parser = argparse.ArgumentParser(description='Score fantasy lineups for a week')
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        '--week-id',
        default=None,
        help='ID of the week to score',
    )
    target.add_argument(
        '--week', '-w',
        type=int,
        default=None,
        help='Week number in the current season (default: latest completed week)',
    )
    parser.add_argument(
        '--force-rescore',
        action='store_true',
        help='Re-score lineups that are already scored',
    )
    parser.add_argument(
        '--test-mode',
        action='store_true',
        help='Test run: also re-scores already scored lineups',
    )
    parser.add_argument(
        '--data-dir', '-d',
        default=config.data_dir,
        help='Path to league data directory',
    )
    parser.add_argument(
        '--stats-file', '-s',
        default=None,
        help='Finalized stats table (CSV/Parquet/JSON); defaults to <data-dir>/' + config.stats_file,
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the API response body instead of a breakdown',
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress per-lineup output',
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log every slot',
    )

    args = parser.parse_args()

    setup_logging(
        log_dir=Path(config.log_dir),
        level=logging.DEBUG if args.debug else logging.WARNING if args.json else logging.INFO,
    )

    data_dir = Path(args.data_dir)
    stats_path = Path(args.stats_file) if args.stats_file else data_dir / config.stats_file

    if not data_dir.exists():
        print(f'❌ Data directory not found: {data_dir}')
        sys.exit(1)

    try:
        scorer = WeekScorer(JsonLeagueStore(data_dir), PolarsStatProvider.from_path(stats_path))
        report = scorer.score_week(
            week_id=args.week_id,
            week_number=args.week,
            force_rescore=args.force_rescore,
            test_mode=args.test_mode,
        )
    except FileNotFoundError as e:
        print(f'❌ {e}')
        sys.exit(1)
    except ScoringError as e:
        details = getattr(e, 'details', None)
        print(f'❌ {e}' + (f': {details}' if details else ''))
        sys.exit(1)

    if args.json:
        print(json.dumps(report.to_response(), indent=2))
    else:
        print_report(report, verbose=not args.quiet)


if __name__ == '__main__':
    main()
