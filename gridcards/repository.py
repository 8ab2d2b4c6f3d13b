"""Data access for the scoring pipeline.

``LineupRepository`` and ``StatProvider`` are the boundaries to the rest of the
platform. ``JsonLeagueStore`` keeps league records as JSON files in a data
directory; ``PolarsStatProvider`` serves finalized stat lines from a stats
table.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional

import polars as pl

from .exceptions import PersistenceError
from .schemas import (
    Game,
    GamesFile,
    Lineup,
    LineupsFile,
    Player,
    PlayersFile,
    Season,
    SeasonsFile,
    StatRecord,
    TokenEvaluation,
    TokenEvaluationsFile,
    TokenTypesFile,
    Week,
    WeeksFile,
)
from .utils import load_json, load_json_safe, save_json

logger = logging.getLogger('gridcards.repository')


class LineupRepository(ABC):
    """Reads weeks, games, players and lineups; writes scoring results."""

    @abstractmethod
    def get_week(self, week_id: str) -> Optional[Week]:
        ...

    @abstractmethod
    def get_season(self, year: int, league: str) -> Optional[Season]:
        ...

    @abstractmethod
    def get_week_by_number(self, season_id: str, week_number: int) -> Optional[Week]:
        ...

    @abstractmethod
    def get_latest_completed_week(self) -> Optional[Week]:
        ...

    @abstractmethod
    def fetch_lineups(self, week_id: str, statuses: Iterable[str]) -> list[Lineup]:
        """Lineups for a week in the given statuses, slots and token types resolved."""

    @abstractmethod
    def fetch_games(self, week_id: str) -> list[Game]:
        ...

    @abstractmethod
    def fetch_players(self) -> list[Player]:
        ...

    @abstractmethod
    def update_lineup_score(self, lineup_id: str, total_points: float, status: str) -> None:
        """Set a lineup's total and status. Raises on failure."""

    @abstractmethod
    def upsert_token_evaluations(self, evaluations: list[TokenEvaluation]) -> None:
        """Insert or overwrite evaluations keyed by (lineup_slot_id, token_id)."""


class StatProvider(ABC):
    """Supplies finalized per-player, per-game stat records."""

    @abstractmethod
    def fetch_finalized_stats(self, game_ids: Iterable[str]) -> list[StatRecord]:
        ...


class JsonLeagueStore(LineupRepository):
    """
    LineupRepository over a directory of JSON files.

    Layout::

        data/
            seasons.json            {"seasons": [...]}
            weeks.json              {"weeks": [...]}
            games.json              {"games": [...]}
            players.json            {"players": [...]}
            token_types.json        {"token_types": [...]}
            lineups.json            {"lineups": [...]}  (slots inline)
            token_evaluations.json  {"token_evaluations": [...]}  (written by scoring)

    Files are re-read on every call, so edits made between runs are seen.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir)

    def _path(self, name: str) -> Path:
        return self.data_dir / name

    def _weeks(self) -> list[Week]:
        return load_json(self._path('weeks.json'), schema=WeeksFile).weeks

    def get_week(self, week_id: str) -> Optional[Week]:
        return next((w for w in self._weeks() if w.id == week_id), None)

    def get_season(self, year: int, league: str) -> Optional[Season]:
        seasons = load_json(self._path('seasons.json'), schema=SeasonsFile).seasons
        return next((s for s in seasons if s.year == year and s.league == league), None)

    def get_week_by_number(self, season_id: str, week_number: int) -> Optional[Week]:
        return next(
            (w for w in self._weeks() if w.season_id == season_id and w.week_number == week_number),
            None,
        )

    def get_latest_completed_week(self) -> Optional[Week]:
        completed = [w for w in self._weeks() if w.status == 'completed']
        if not completed:
            return None
        # Stable sort keeps file order among equal week numbers
        return sorted(completed, key=lambda w: w.week_number, reverse=True)[0]

    def fetch_lineups(self, week_id: str, statuses: Iterable[str]) -> list[Lineup]:
        statuses = set(statuses)
        lineups = load_json(self._path('lineups.json'), schema=LineupsFile).lineups
        token_types_file = load_json_safe(
            self._path('token_types.json'), default=TokenTypesFile(token_types=[]), schema=TokenTypesFile
        )
        token_types = {t.id: t for t in token_types_file.token_types}

        selected = []
        for lineup in lineups:
            if lineup.week_id != week_id or lineup.status not in statuses:
                continue
            for slot in lineup.slots:
                if slot.lineup_id is None:
                    slot.lineup_id = lineup.id
                if slot.token_type is None and slot.token_type_id:
                    slot.token_type = token_types.get(slot.token_type_id)
            selected.append(lineup)
        return selected

    def fetch_games(self, week_id: str) -> list[Game]:
        games = load_json_safe(self._path('games.json'), default=GamesFile(games=[]), schema=GamesFile)
        return [g for g in games.games if g.week_id == week_id]

    def fetch_players(self) -> list[Player]:
        return load_json(self._path('players.json'), schema=PlayersFile).players

    def update_lineup_score(self, lineup_id: str, total_points: float, status: str) -> None:
        path = self._path('lineups.json')
        lineups_file = load_json(path, schema=LineupsFile)

        lineup = next((item for item in lineups_file.lineups if item.id == lineup_id), None)
        if lineup is None:
            raise PersistenceError(f'Lineup {lineup_id} does not exist')

        lineup.total_points = total_points
        lineup.status = status
        save_json(path, lineups_file)

    def upsert_token_evaluations(self, evaluations: list[TokenEvaluation]) -> None:
        path = self._path('token_evaluations.json')
        existing = load_json_safe(
            path, default=TokenEvaluationsFile(token_evaluations=[]), schema=TokenEvaluationsFile
        )

        by_key = {e.key: e for e in existing.token_evaluations}
        for evaluation in evaluations:
            by_key[evaluation.key] = evaluation

        save_json(path, TokenEvaluationsFile(token_evaluations=list(by_key.values())))
        logger.debug(f'Upserted {len(evaluations)} token evaluations into {path}')

    def get_token_evaluations(self) -> list[TokenEvaluation]:
        """All stored token evaluations (audit / inspection)."""
        path = self._path('token_evaluations.json')
        existing = load_json_safe(
            path, default=TokenEvaluationsFile(token_evaluations=[]), schema=TokenEvaluationsFile
        )
        return existing.token_evaluations

    def get_lineup(self, lineup_id: str) -> Optional[Lineup]:
        lineups = load_json(self._path('lineups.json'), schema=LineupsFile).lineups
        return next((item for item in lineups if item.id == lineup_id), None)


class PolarsStatProvider(StatProvider):
    """
    StatProvider over a polars stat table.

    Expected columns: ``player_id``, ``game_id`` (``sports_event_id`` is
    accepted), ``finalized``, and one column per stat metric. Null metric
    cells are left out of the payload.
    """

    ID_COLUMNS = ('player_id', 'game_id', 'finalized')

    def __init__(self, frame: pl.DataFrame):
        if 'sports_event_id' in frame.columns and 'game_id' not in frame.columns:
            frame = frame.rename({'sports_event_id': 'game_id'})
        self.frame = frame.with_columns(
            pl.col('player_id').cast(pl.Utf8),
            pl.col('game_id').cast(pl.Utf8),
        )

    @classmethod
    def from_path(cls, path: Path | str) -> 'PolarsStatProvider':
        """Load a stats table from CSV, Parquet, JSON or NDJSON."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f'Stats file not found: {path}')

        suffix = path.suffix.lower()
        if suffix == '.csv':
            frame = pl.read_csv(path)
        elif suffix == '.parquet':
            frame = pl.read_parquet(path)
        elif suffix in ('.ndjson', '.jsonl'):
            frame = pl.read_ndjson(path)
        elif suffix == '.json':
            frame = pl.read_json(path)
        else:
            raise ValueError(f'Unsupported stats file type: {path.suffix}')

        logger.debug(f'Loaded {frame.height} stat rows from {path}')
        return cls(frame)

    def fetch_finalized_stats(self, game_ids: Iterable[str]) -> list[StatRecord]:
        game_ids = [str(g) for g in game_ids]
        if not game_ids:
            return []

        rows = self.frame.filter(
            pl.col('finalized').fill_null(False) & pl.col('game_id').is_in(game_ids)
        )

        records = []
        for row in rows.iter_rows(named=True):
            stats = {k: v for k, v in row.items() if k not in self.ID_COLUMNS and v is not None}
            records.append(
                StatRecord(
                    player_id=row['player_id'],
                    game_id=row['game_id'],
                    finalized=True,
                    stats=stats,
                )
            )
        return records
