"""
Decision Scoring Engine - Criterion Scorers.

============================================================
PURPOSE
============================================================
One scorer per criterion. Each scorer turns a sanitized
option attribute into a 0-100 "higher is better" sub-score.

============================================================
NORMALIZATION
============================================================
Relative (depend on the option set):
    COST:  max(0, 100 - cost / max_cost * 100)
    TIME:  max(0, 100 - time / max_time * 100)
    max_cost / max_time are floored at 1 so an all-zero
    set scores 100 everywhere instead of dividing by zero.

Absolute:
    RISK:      (10 - risk_level) * 10
    PRIORITY:  priority * 10
    REWARD:    reward_potential * 10

Relative scores are NOT comparable across decisions: the
most expensive option of any set scores 0 on cost.

============================================================
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Sequence

from .config import ATTRIBUTE_SCALE_MAX, RELATIVE_NORMALIZATION_FLOOR
from .types import Criterion, Option


SCORE_MAX = 100.0
ATTRIBUTE_TO_SCORE = SCORE_MAX / ATTRIBUTE_SCALE_MAX


# ============================================================
# NORMALIZATION CONTEXT
# ============================================================


@dataclass(frozen=True)
class NormalizationContext:
    """Set-wide values the relative scorers normalize against."""

    max_cost: float = RELATIVE_NORMALIZATION_FLOOR
    max_time: float = RELATIVE_NORMALIZATION_FLOOR

    @classmethod
    def from_options(cls, options: Sequence[Option]) -> "NormalizationContext":
        """
        Build the context from sanitized options.

        Args:
            options: Options whose cost / time_required are set
        """
        return cls(
            max_cost=max([o.cost for o in options] + [RELATIVE_NORMALIZATION_FLOOR]),
            max_time=max([o.time_required for o in options] + [RELATIVE_NORMALIZATION_FLOOR]),
        )


# ============================================================
# BASE SCORER
# ============================================================


class BaseCriterionScorer(ABC):
    """Abstract base class for criterion scorers."""

    @property
    @abstractmethod
    def criterion(self) -> Criterion:
        """Return the criterion this scorer handles."""
        pass

    @abstractmethod
    def score(self, option: Option, context: NormalizationContext) -> float:
        """
        Score one sanitized option.

        Returns:
            Sub-score in [0, 100], full precision
        """
        pass

    @staticmethod
    def _inverse_linear(value: float, maximum: float) -> float:
        return max(0.0, SCORE_MAX - (value / maximum) * SCORE_MAX)


# ============================================================
# RELATIVE SCORERS
# ============================================================


class CostScorer(BaseCriterionScorer):
    """Cheaper is better, relative to the most expensive option."""

    @property
    def criterion(self) -> Criterion:
        return Criterion.COST

    def score(self, option: Option, context: NormalizationContext) -> float:
        return self._inverse_linear(option.cost, context.max_cost)


class TimeScorer(BaseCriterionScorer):
    """Faster is better, relative to the slowest option."""

    @property
    def criterion(self) -> Criterion:
        return Criterion.TIME

    def score(self, option: Option, context: NormalizationContext) -> float:
        return self._inverse_linear(option.time_required, context.max_time)


# ============================================================
# ABSOLUTE SCORERS
# ============================================================


class RiskScorer(BaseCriterionScorer):
    """Risk 0 scores 100, risk 10 scores 0."""

    @property
    def criterion(self) -> Criterion:
        return Criterion.RISK

    def score(self, option: Option, context: NormalizationContext) -> float:
        return (ATTRIBUTE_SCALE_MAX - option.risk_level) * ATTRIBUTE_TO_SCORE


class PriorityScorer(BaseCriterionScorer):

    @property
    def criterion(self) -> Criterion:
        return Criterion.PRIORITY

    def score(self, option: Option, context: NormalizationContext) -> float:
        return option.priority * ATTRIBUTE_TO_SCORE


class RewardScorer(BaseCriterionScorer):

    @property
    def criterion(self) -> Criterion:
        return Criterion.REWARD

    def score(self, option: Option, context: NormalizationContext) -> float:
        return option.reward_potential * ATTRIBUTE_TO_SCORE


def default_scorers() -> List[BaseCriterionScorer]:
    """One scorer per criterion, in evaluation order."""
    return [CostScorer(), TimeScorer(), RiskScorer(), PriorityScorer(), RewardScorer()]


def score_criteria(
    option: Option,
    context: NormalizationContext,
    scorers: Sequence[BaseCriterionScorer],
) -> Dict[Criterion, float]:
    """Run every scorer against one option."""
    return {scorer.criterion: scorer.score(option, context) for scorer in scorers}
