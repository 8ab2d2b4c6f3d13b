"""Boost token rule evaluation.

A token rule is provider JSON of the form::

    {
        "condition": {"type": "stat", "metric": "receiving_yards", "op": ">=", "value": 100},
        "reward": {"type": "points", "value": 5}
    }

Evaluation never raises. Anything it cannot understand (missing rule, missing
stats, unknown condition or reward type, unknown operator, malformed shape)
resolves to "not satisfied, 0 points".
"""

import logging
import operator
from typing import Any, Mapping, Optional, Union

from .constants import POINTS_REWARD, STAT_CONDITION
from .models import TokenResult
from .schemas import (
    PointsReward,
    StatCondition,
    TokenRule,
    UnknownCondition,
    UnknownReward,
)

logger = logging.getLogger('gridcards.tokens')

NOT_SATISFIED = TokenResult(satisfied=False, points_awarded=0)

OPERATORS = {
    '>=': operator.ge,
    '>': operator.gt,
    '=': operator.eq,
    '==': operator.eq,
    '<': operator.lt,
    '<=': operator.le,
}


def parse_condition(raw: Mapping[str, Any]) -> Union[StatCondition, UnknownCondition]:
    if raw.get('type') == STAT_CONDITION:
        return StatCondition.model_validate(dict(raw))
    return UnknownCondition(type=raw.get('type'))


def parse_reward(raw: Mapping[str, Any]) -> Union[PointsReward, UnknownReward]:
    if raw.get('type') == POINTS_REWARD:
        return PointsReward.model_validate(dict(raw))
    return UnknownReward(type=raw.get('type'))


def parse_rule(raw: Mapping[str, Any]) -> TokenRule:
    """
    Parse raw rule JSON into a TokenRule.

    Raises:
        ValidationError: If a known variant is malformed (e.g. a stat
            condition without a metric)
        AttributeError / TypeError: If the rule is not shaped like a dict
    """
    return TokenRule(
        condition=parse_condition(raw['condition']),
        reward=parse_reward(raw['reward']),
    )


def condition_satisfied(condition: Union[StatCondition, UnknownCondition], stats: Mapping[str, Any]) -> bool:
    if not isinstance(condition, StatCondition):
        return False

    compare = OPERATORS.get(condition.op)
    if compare is None:
        logger.debug(f'Unrecognized operator {condition.op!r}, condition not satisfied')
        return False

    stat_value = stats.get(condition.metric) or 0
    return bool(compare(stat_value, condition.value))


def reward_points(reward: Union[PointsReward, UnknownReward]) -> float:
    if isinstance(reward, PointsReward):
        return reward.value or 0
    # Other reward types (multipliers etc.) are not implemented and award nothing
    return 0


def evaluate_token(
    rule: Optional[Union[TokenRule, Mapping[str, Any]]],
    stats: Optional[Mapping[str, Any]],
) -> TokenResult:
    """
    Evaluate a token rule against a player's stat line.

    Args:
        rule: Raw rule JSON or an already parsed TokenRule
        stats: The player's stat payload for the week

    Returns:
        TokenResult with satisfied flag and bonus points
    """
    if rule is None or stats is None:
        return NOT_SATISFIED

    try:
        parsed = rule if isinstance(rule, TokenRule) else parse_rule(rule)
        satisfied = condition_satisfied(parsed.condition, stats)
        points = reward_points(parsed.reward) if satisfied else 0
        return TokenResult(satisfied=satisfied, points_awarded=points)
    except Exception as e:
        logger.warning(f'Error evaluating token rule {rule!r}: {e}')
        return NOT_SATISFIED
