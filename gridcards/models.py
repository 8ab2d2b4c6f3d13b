"""Result containers for lineup scoring."""

from dataclasses import dataclass, field
from typing import List, Optional

from .schemas import TokenEvaluation


@dataclass(frozen=True)
class TokenResult:
    """Outcome of evaluating one token rule against one stat line."""
    satisfied: bool = False
    points_awarded: float = 0.0


@dataclass
class SlotScore:
    """Container for one lineup slot's score breakdown."""
    slot_id: str
    slot: str
    player_id: str
    player_name: str
    position: Optional[str]
    base_points: float = 0.0
    token_bonus: float = 0.0
    had_stats: bool = False

    @property
    def total_points(self) -> float:
        return self.base_points + self.token_bonus


@dataclass
class LineupScore:
    """Container for a scored (or skipped) lineup."""
    lineup_id: str
    user_id: Optional[str]
    slots: List[SlotScore] = field(default_factory=list)
    token_evaluations: List[TokenEvaluation] = field(default_factory=list)
    skipped: bool = False
    persisted: bool = False

    @property
    def total_points(self) -> float:
        return sum(s.total_points for s in self.slots)

    @property
    def token_bonuses(self) -> int:
        return sum(1 for e in self.token_evaluations if e.satisfied)
