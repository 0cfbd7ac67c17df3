"""
Decision Scoring Engine - Type Definitions.

============================================================
PURPOSE
============================================================
Data contracts for the Decision Scoring Engine.

This module defines the enums, value types and exceptions
shared by the weight blender, the scoring engine and the
surfaces built on top of them (report, CLI, API).

============================================================
DESIGN PRINCIPLES
============================================================
- All types are immutable
- Enums for discrete values (criteria, personalities, levels)
- Weight vectors are value objects with explicit normalization
- Clear separation between input and output types

============================================================
CRITERIA
============================================================
Every option is evaluated on exactly five criteria:

1. COST - lower is better, relative to the option set
2. TIME - lower is better, relative to the option set
3. RISK - lower is better, absolute 0-10 scale
4. PRIORITY - higher is better, absolute 0-10 scale
5. REWARD - higher is better, absolute 0-10 scale

Each criterion produces a sub-score on a common 0-100 scale.

============================================================
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union


# ============================================================
# ENUMS
# ============================================================


class Criterion(str, Enum):
    """
    The five criteria every option is scored on.

    Declaration order is the evaluation order.
    """

    COST = "cost"
    TIME = "time"
    RISK = "risk"
    PRIORITY = "priority"
    REWARD = "reward"

    @classmethod
    def all_criteria(cls) -> List["Criterion"]:
        """Return all criteria in evaluation order."""
        return [cls.COST, cls.TIME, cls.RISK, cls.PRIORITY, cls.REWARD]


class RiskPersonality(str, Enum):
    """
    Risk posture declared by the user.

    Each personality maps to a fixed weight prior
    (see config.PERSONALITY_PROFILES).
    """

    CONSERVATIVE = "conservative"
    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"

    @classmethod
    def parse(cls, value: Union[str, "RiskPersonality", None]) -> "RiskPersonality":
        """
        Convert a label into a RiskPersonality.

        Args:
            value: Enum member, case-insensitive label, or None

        Returns:
            Matching RiskPersonality (BALANCED for None)

        Raises:
            InvalidInputError: If the label is unknown
        """
        if value is None:
            return cls.BALANCED
        if isinstance(value, cls):
            return value
        label = str(value).strip().lower()
        for member in cls:
            if member.value == label:
                return member
        raise InvalidInputError(
            f"Unknown risk personality '{value}' "
            f"(expected one of: {', '.join(m.value for m in cls)})"
        )


class RiskLevel(str, Enum):
    """
    Categorical risk level of the chosen option.

    Raw risk (0-10) thresholds:
    - LOW: <= 2.5
    - MEDIUM: <= 5
    - HIGH: <= 7.5
    - CRITICAL: > 7.5
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def from_raw_risk(cls, raw_risk: float) -> "RiskLevel":
        """
        Classify a raw 0-10 risk attribute.

        Args:
            raw_risk: The option's risk_level

        Returns:
            Appropriate RiskLevel classification
        """
        if raw_risk <= 2.5:
            return cls.LOW
        elif raw_risk <= 5:
            return cls.MEDIUM
        elif raw_risk <= 7.5:
            return cls.HIGH
        else:
            return cls.CRITICAL

    @property
    def severity_order(self) -> int:
        """Numeric ordering for severity comparison."""
        return {"low": 0, "medium": 1, "high": 2, "critical": 3}[self.value]


# ============================================================
# INPUT DATA CONTRACTS
# ============================================================


@dataclass(frozen=True)
class Option:
    """
    One candidate choice within a decision.

    Numeric attributes may be None before sanitization;
    sanitizer.sanitize_option fills in the neutral defaults.
    """

    option_id: Optional[str] = None
    label: Optional[str] = None

    # Scored attributes
    cost: Optional[float] = None              # >= 0, currency units
    time_required: Optional[float] = None     # >= 0, hours
    risk_level: Optional[float] = None        # 0-10, higher = riskier
    priority: Optional[float] = None          # 0-10, higher = more important
    reward_potential: Optional[float] = None  # 0-10

    # Descriptive attributes (carried, not scored)
    description: str = ""
    feasibility: Optional[float] = None       # 0-10
    pros: Tuple[str, ...] = ()
    cons: Tuple[str, ...] = ()

    @property
    def has_label(self) -> bool:
        """Check if the option carries a usable label."""
        return isinstance(self.label, str) and bool(self.label.strip())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Option":
        """
        Build an Option from a loosely-typed record.

        Accepts both "id" and "option_id" as the identifier key.
        Values are stored as given; coercion happens in the sanitizer.
        """
        option_id = data.get("option_id", data.get("id"))
        return cls(
            option_id=str(option_id) if option_id is not None else None,
            label=data.get("label"),
            cost=data.get("cost"),
            time_required=data.get("time_required"),
            risk_level=data.get("risk_level"),
            priority=data.get("priority"),
            reward_potential=data.get("reward_potential"),
            description=data.get("description") or "",
            feasibility=data.get("feasibility"),
            pros=tuple(data.get("pros") or ()),
            cons=tuple(data.get("cons") or ()),
        )


@dataclass(frozen=True)
class WeightVector:
    """
    Immutable criterion -> weight mapping.

    All five criteria are always present and non-negative.
    A vector is not necessarily normalized; call normalized()
    before using it to aggregate sub-scores.
    """

    cost: float = 0.0
    time: float = 0.0
    risk: float = 0.0
    priority: float = 0.0
    reward: float = 0.0

    def __post_init__(self) -> None:
        for criterion in Criterion.all_criteria():
            value = getattr(self, criterion.value)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidWeightsError(
                    f"Weight for '{criterion.value}' must be a number, got {value!r}",
                    criterion=criterion,
                )
            if math.isnan(value) or math.isinf(value) or value < 0:
                raise InvalidWeightsError(
                    f"Weight for '{criterion.value}' must be a finite non-negative number, got {value}",
                    criterion=criterion,
                )

    @classmethod
    def from_mapping(cls, weights: Optional[Mapping[Any, Any]]) -> "WeightVector":
        """
        Build a vector from a plain mapping.

        Keys may be Criterion members or their string values.
        Missing keys are treated as 0; unknown keys are ignored.
        """
        if weights is None:
            return cls()
        if isinstance(weights, WeightVector):
            return weights
        values: Dict[str, float] = {}
        for key, value in weights.items():
            name = key.value if isinstance(key, Criterion) else str(key)
            if name in cls.__dataclass_fields__:
                values[name] = value if value is not None else 0.0
        return cls(**values)

    def get(self, criterion: Criterion) -> float:
        """Return the weight for a criterion."""
        return getattr(self, criterion.value)

    @property
    def total(self) -> float:
        """Sum of all five weights."""
        return sum(self.get(c) for c in Criterion.all_criteria())

    def normalized(self) -> "WeightVector":
        """
        Return a copy scaled so the weights sum to 1.0.

        Raises:
            DegenerateWeightsError: If the weights sum to zero
        """
        total = self.total
        if total <= 0:
            raise DegenerateWeightsError(
                "Weight vector sums to zero; cannot normalize"
            )
        return WeightVector(**{
            c.value: self.get(c) / total for c in Criterion.all_criteria()
        })

    def is_normalized(self, tolerance: float = 1e-9) -> bool:
        """Check if the weights sum to 1.0 within tolerance."""
        return abs(self.total - 1.0) <= tolerance

    def as_dict(self) -> Dict[str, float]:
        return {c.value: self.get(c) for c in Criterion.all_criteria()}


# ============================================================
# OUTPUT DATA CONTRACTS
# ============================================================


@dataclass(frozen=True)
class ScoredOption:
    """
    Scoring result for a single option.

    Sub-scores and weighted_total are rounded to two decimals
    for presentation. exact_total keeps full precision and is
    what ranking and confidence are computed from.
    """

    option_id: str
    label: str

    cost_score: float
    time_score: float
    risk_score: float
    priority_score: float
    reward_score: float

    weighted_total: float
    rank: int

    # Sanitized input risk_level, kept for risk classification
    raw_risk: float

    exact_total: float = field(default=0.0, compare=False, repr=False)

    def sub_score(self, criterion: Criterion) -> float:
        """Return the sub-score for a criterion."""
        return getattr(self, f"{criterion.value}_score")

    @property
    def sub_scores(self) -> Dict[str, float]:
        return {c.value: self.sub_score(c) for c in Criterion.all_criteria()}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "option_id": self.option_id,
            "label": self.label,
            "cost_score": self.cost_score,
            "time_score": self.time_score,
            "risk_score": self.risk_score,
            "priority_score": self.priority_score,
            "reward_score": self.reward_score,
            "weighted_total": self.weighted_total,
            "rank": self.rank,
            "raw_risk": self.raw_risk,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """
    Complete output from the Scoring Engine.

    ============================================================
    OUTPUT GUARANTEES
    ============================================================
    - breakdown is ordered by rank (1 = best)
    - ranks are a contiguous permutation of 1..n
    - confidence is always 50-99
    - risk_level describes the best option only
    ============================================================
    """

    breakdown: Tuple[ScoredOption, ...]
    best_option_id: str
    confidence: float
    risk_level: RiskLevel
    weights: WeightVector

    engine_version: str = "1.0.0"

    @property
    def best(self) -> ScoredOption:
        """The rank-1 option."""
        return self.breakdown[0]

    @property
    def runner_up(self) -> Optional[ScoredOption]:
        """The rank-2 option, if any."""
        return self.breakdown[1] if len(self.breakdown) > 1 else None

    @property
    def ranking(self) -> List[str]:
        """Option ids in rank order."""
        return [s.option_id for s in self.breakdown]

    def get_option(self, option_id: str) -> Optional[ScoredOption]:
        for scored in self.breakdown:
            if scored.option_id == option_id:
                return scored
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "breakdown": [s.to_dict() for s in self.breakdown],
            "best_option_id": self.best_option_id,
            "confidence": self.confidence,
            "risk_level": self.risk_level.value,
            "weights": self.weights.as_dict(),
            "engine_version": self.engine_version,
        }


# ============================================================
# ERROR TYPES
# ============================================================


class DecisionScoringError(Exception):
    """Base exception for decision scoring errors."""

    def __init__(self, message: str, criterion: Optional[Criterion] = None) -> None:
        super().__init__(message)
        self.criterion = criterion


class InvalidInputError(DecisionScoringError):
    """
    Raised when the option set cannot be scored.

    Fewer than two options, an option without a label,
    or an unknown personality label.
    """
    pass


class DegenerateWeightsError(DecisionScoringError):
    """
    Raised when a weight vector sums to zero.

    Callers must not substitute a default: that would
    hide a configuration bug.
    """
    pass


class InvalidWeightsError(DecisionScoringError):
    """Raised when weights are negative, non-numeric, or do not total 100%."""
    pass
