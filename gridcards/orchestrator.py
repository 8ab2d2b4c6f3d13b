"""Week scoring: score every submitted lineup for a week and persist the results.

Only week resolution and the initial reads can fail a run. Everything that
happens to an individual lineup (scoring bug, failed write) is recorded on
the run report and the loop moves on to the next lineup.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Callable, Optional

from .constants import SCORABLE_LINEUP_STATUSES, SCORED_STATUS
from .exceptions import (
    DataFetchError,
    GameFetchError,
    LineupFetchError,
    PlayerFetchError,
    StatFetchError,
)
from .locks import WeekLockRegistry, week_locks
from .models import LineupScore, SlotScore
from .report import RunReport
from .repository import LineupRepository, StatProvider
from .schemas import Lineup, Player, TokenEvaluation, Week
from .scoring import calculate_fantasy_points
from .tokens import evaluate_token
from .validators import validate_lineup_score
from .weeks import resolve_week

logger = logging.getLogger('gridcards.orchestrator')


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _fetch_result(future: Future, error_cls: type[DataFetchError], message: str):
    try:
        return future.result()
    except Exception as e:
        logger.error(f'{message}: {e}')
        raise error_cls(message, details=str(e)) from e


class WeekScorer:
    """
    Scores all lineups for a week.

    Lineups are processed one at a time in repository order. Each lineup's
    total write and token-evaluation upsert are separate operations; neither
    is rolled back when the other fails.
    """

    def __init__(
        self,
        repository: LineupRepository,
        stat_provider: StatProvider,
        clock: Optional[Callable[[], datetime]] = None,
        locks: Optional[WeekLockRegistry] = None,
        league: Optional[str] = None,
        error_sample_size: Optional[int] = None,
    ):
        """
        Initialize scorer.

        Args:
            repository: Source of weeks/lineups/players and sink for results
            stat_provider: Source of finalized stat records
            clock: Returns "now"; used for season resolution and audit timestamps
            locks: Week lock registry (default: process-wide registry)
            league: League whose current season ``week_number`` refers to
            error_sample_size: Errors included in the HTTP response
        """
        self.repository = repository
        self.stat_provider = stat_provider
        self.clock = clock or _utc_now
        self.locks = locks or week_locks
        self.league = league
        self.error_sample_size = error_sample_size

    def resolve_week(self, week_id: Optional[str] = None, week_number: Optional[int] = None) -> Week:
        return resolve_week(
            self.repository,
            week_id=week_id,
            week_number=week_number,
            now=self.clock(),
            league=self.league,
        )

    def score_week(
        self,
        week_id: Optional[str] = None,
        week_number: Optional[int] = None,
        force_rescore: bool = False,
        test_mode: bool = False,
    ) -> RunReport:
        """
        Score every submitted, locked or scored lineup for a week.

        Args:
            week_id: Score this exact week
            week_number: Score this week of the current season
            force_rescore: Re-score lineups already marked scored
            test_mode: Same skip bypass as force_rescore, for test runs

        Returns:
            RunReport with counts and any per-lineup errors

        Raises:
            WeekNotFoundError: If the week can't be resolved
            DataFetchError: If lineups, games, stats or players can't be read
            ScoringInProgressError: If this week is already being scored
        """
        week = self.resolve_week(week_id=week_id, week_number=week_number)
        logger.info(f'Scoring week {week.week_number} (ID: {week.id})')

        with self.locks.hold(week.id):
            return self._score_resolved_week(week, force_rescore or test_mode)

    def _score_resolved_week(self, week: Week, rescore: bool) -> RunReport:
        report = RunReport(
            week_id=week.id,
            week_number=week.week_number,
            error_sample_size=self.error_sample_size,
        )

        with ThreadPoolExecutor(max_workers=3, thread_name_prefix='score-fetch') as executor:
            lineups_future = executor.submit(
                self.repository.fetch_lineups, week.id, SCORABLE_LINEUP_STATUSES
            )
            games_future = executor.submit(self.repository.fetch_games, week.id)
            players_future = executor.submit(self.repository.fetch_players)

            lineups = _fetch_result(lineups_future, LineupFetchError, 'Failed to fetch lineups')
            logger.info(f'Found {len(lineups)} lineups to score')
            if not lineups:
                report.no_lineups = True
                return report

            games = _fetch_result(games_future, GameFetchError, 'Failed to fetch week games')
            players = _fetch_result(players_future, PlayerFetchError, 'Failed to fetch players')

        game_ids = [g.id for g in games]
        try:
            stat_records = self.stat_provider.fetch_finalized_stats(game_ids)
        except Exception as e:
            logger.error(f'Failed to fetch week stats: {e}')
            raise StatFetchError('Failed to fetch week stats', details=str(e)) from e

        report.games_available = len(games)
        report.stats_available = len(stat_records)
        logger.info(f'Found {len(stat_records)} finalized stat records for {len(games)} games')

        # One stat line per player; a later record for the same player replaces an earlier one
        stats_by_player = {}
        for record in stat_records:
            if record.player_id:
                stats_by_player[record.player_id] = record.stats
        players_by_id = {p.id: p for p in players}

        for lineup in lineups:
            try:
                self._process_lineup(lineup, stats_by_player, players_by_id, rescore, report)
            except Exception as e:
                logger.exception(f'Error processing lineup {lineup.id}')
                report.record_error(f'Lineup {lineup.id}: {e}')
            report.lineups_processed += 1

        logger.info(
            f'Week scoring complete: {report.lineups_scored} lineups scored, '
            f'{report.total_slots} slots processed, '
            f'{report.token_bonuses_applied} token bonuses applied, '
            f'{report.error_count} errors'
        )
        return report

    def _process_lineup(
        self,
        lineup: Lineup,
        stats_by_player: dict[str, dict],
        players_by_id: dict[str, Player],
        rescore: bool,
        report: RunReport,
    ) -> None:
        if lineup.status == SCORED_STATUS and not rescore:
            logger.info(f'Skipping already scored lineup {lineup.id}')
            report.lineup_scores.append(LineupScore(lineup.id, lineup.user_id, skipped=True))
            return

        logger.info(f'Scoring lineup {lineup.id} for user {lineup.user_id}')
        score = self.score_lineup(lineup, stats_by_player, players_by_id)
        report.lineup_scores.append(score)
        report.total_slots += len(score.slots)
        report.token_bonuses_applied += score.token_bonuses

        for warning in validate_lineup_score(score):
            logger.warning(warning)

        total = score.total_points
        try:
            self.repository.update_lineup_score(lineup.id, total, SCORED_STATUS)
            score.persisted = True
            report.lineups_scored += 1
            logger.info(
                f'Scored lineup {lineup.id}: {total} points '
                f'({len(score.slots)} slots, {score.token_bonuses} token bonuses)'
            )
        except Exception as e:
            logger.error(f'Error updating lineup {lineup.id}: {e}')
            report.record_error(f'Lineup {lineup.id}: {e}')

        if score.token_evaluations:
            try:
                self.repository.upsert_token_evaluations(score.token_evaluations)
            except Exception as e:
                logger.error(f'Error saving token evaluations for lineup {lineup.id}: {e}')
                report.record_error(f'Token evaluations {lineup.id}: {e}')

    def score_lineup(
        self,
        lineup: Lineup,
        stats_by_player: dict[str, dict],
        players_by_id: dict[str, Player],
    ) -> LineupScore:
        """
        Compute slot scores and token evaluations for one lineup without writing anything.

        Empty slots are skipped. A player with no finalized stats scores 0 base
        points; a token on that slot is still evaluated (and is not satisfied).
        """
        result = LineupScore(lineup_id=lineup.id, user_id=lineup.user_id)
        evaluated_at = self.clock().isoformat()

        for slot in lineup.slots:
            if slot.is_empty:
                continue

            player = players_by_id.get(slot.player_id)
            if player is None:
                logger.warning(f'Slot {slot.id} references unknown player {slot.player_id}')
            position = player.position if player else None
            stats = stats_by_player.get(slot.player_id)

            base_points = calculate_fantasy_points(stats, position) if stats is not None else 0.0
            token_bonus = 0.0

            if slot.applied_token_id and slot.token_type is not None:
                rule = slot.token_type.rule
                token_result = evaluate_token(rule, stats)
                if token_result.satisfied:
                    token_bonus = token_result.points_awarded
                result.token_evaluations.append(
                    TokenEvaluation(
                        lineup_slot_id=slot.id,
                        token_id=slot.applied_token_id,
                        satisfied=token_result.satisfied,
                        points_awarded=token_result.points_awarded,
                        rule_snapshot=rule,
                        evaluated_at=evaluated_at,
                    )
                )

            slot_score = SlotScore(
                slot_id=slot.id,
                slot=slot.slot,
                player_id=slot.player_id,
                player_name=player.name if player else slot.player_id,
                position=position,
                base_points=base_points,
                token_bonus=token_bonus,
                had_stats=stats is not None,
            )
            result.slots.append(slot_score)
            logger.debug(
                f'  {slot.slot}: {slot_score.player_name} = {slot_score.total_points} pts '
                f'({base_points} base + {token_bonus} token)'
            )

        return result


def score_week(
    repository: LineupRepository,
    stat_provider: StatProvider,
    week_id: Optional[str] = None,
    week_number: Optional[int] = None,
    force_rescore: bool = False,
    test_mode: bool = False,
) -> RunReport:
    """Score a week with a default-configured WeekScorer."""
    scorer = WeekScorer(repository, stat_provider)
    return scorer.score_week(
        week_id=week_id,
        week_number=week_number,
        force_rescore=force_rescore,
        test_mode=test_mode,
    )
