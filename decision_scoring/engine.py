"""
Decision Scoring Engine - Main Orchestrator.

============================================================
PURPOSE
============================================================
The ScoringEngine is the main entry point for ranking the
options of a decision.

It orchestrates:
1. Input sanitization and validation
2. Per-criterion sub-scores
3. Weighted aggregation
4. Stable ranking
5. Confidence and risk-level derivation

============================================================
DESIGN PRINCIPLES
============================================================
- Pure: no I/O, no state carried between calls
- Deterministic: identical input -> identical ranks
- Ranking and confidence use full precision; rounding is
  applied to the presented values only
- Ties keep input order (stable sort)

============================================================
USAGE
============================================================
    from decision_scoring import analyze_decision

    result = analyze_decision(
        options=[
            {"id": "a", "label": "Rent", "cost": 1200, "risk_level": 2},
            {"id": "b", "label": "Buy", "cost": 5000, "risk_level": 6},
        ],
        personality="conservative",
    )

    print(result.best.label, result.confidence, result.risk_level.value)

============================================================
"""

import logging
from typing import Iterable, List, Optional, Sequence, Union

from .blender import WeightBlender, WeightsLike
from .config import (
    CONFIDENCE_CAP,
    CONFIDENCE_FLOOR,
    CONFIDENCE_SCALE,
    ENGINE_VERSION,
    MIN_OPTIONS,
)
from .criteria import (
    BaseCriterionScorer,
    NormalizationContext,
    default_scorers,
    score_criteria,
)
from .sanitizer import OptionLike, sanitize_options
from .types import (
    AnalysisResult,
    Criterion,
    DecisionScoringError,
    InvalidInputError,
    Option,
    RiskLevel,
    RiskPersonality,
    ScoredOption,
    WeightVector,
)

logger = logging.getLogger(__name__)


SCORE_DECIMALS = 2
CONFIDENCE_DECIMALS = 1


class ScoringEngine:
    """
    Ranks options by weighted multi-criteria score.

    ============================================================
    RESPONSIBILITIES
    ============================================================
    1. Sanitize options (defaults, coercion, clamping)
    2. Reject unscorable input
    3. Compute five sub-scores per option
    4. Aggregate with normalized weights
    5. Rank, derive confidence and risk level
    ============================================================
    """

    def __init__(
        self,
        scorers: Optional[Sequence[BaseCriterionScorer]] = None,
        engine_version: str = ENGINE_VERSION,
    ):
        """
        Initialize the Scoring Engine.

        Args:
            scorers: One scorer per criterion. Defaults to the
                     standard cost/time/risk/priority/reward set.
            engine_version: Version stamped on every result.
        """
        self._scorers = list(scorers) if scorers is not None else default_scorers()
        self.engine_version = engine_version

        covered = {s.criterion for s in self._scorers}
        missing = [c.value for c in Criterion.all_criteria() if c not in covered]
        if missing:
            raise ValueError(f"No scorer configured for: {', '.join(missing)}")

    def score(
        self,
        options: Iterable[OptionLike],
        weights: WeightsLike,
    ) -> AnalysisResult:
        """
        Score and rank a set of options.

        Args:
            options: Options or plain records, at least two,
                     each with a non-blank label
            weights: Weight vector (normalized here if needed)

        Returns:
            AnalysisResult with the ranked breakdown

        Raises:
            InvalidInputError: Fewer than two options or a missing label
            DegenerateWeightsError: Weights sum to zero
            DecisionScoringError: On any other failure
        """
        try:
            # --------------------------------------------------
            # Step 1: Sanitize and validate
            # --------------------------------------------------
            sanitized = sanitize_options(options)
            self._validate_options(sanitized)

            vector = WeightVector.from_mapping(weights).normalized()

            # --------------------------------------------------
            # Step 2: Sub-scores and weighted totals
            # --------------------------------------------------
            context = NormalizationContext.from_options(sanitized)
            rows = []
            for option in sanitized:
                sub_scores = score_criteria(option, context, self._scorers)
                total = self._weighted_total(sub_scores, vector)
                rows.append((option, sub_scores, total))

            # --------------------------------------------------
            # Step 3: Stable ranking on full precision
            # --------------------------------------------------
            ranked = sorted(rows, key=lambda row: row[2], reverse=True)

            breakdown = tuple(
                self._build_scored_option(option, sub_scores, total, rank)
                for rank, (option, sub_scores, total) in enumerate(ranked, start=1)
            )

            # --------------------------------------------------
            # Step 4: Summary statistics
            # --------------------------------------------------
            confidence = calculate_confidence(
                breakdown[0].exact_total,
                breakdown[1].exact_total if len(breakdown) > 1 else None,
            )
            risk_level = classify_risk(breakdown[0].raw_risk)

            result = AnalysisResult(
                breakdown=breakdown,
                best_option_id=breakdown[0].option_id,
                confidence=confidence,
                risk_level=risk_level,
                weights=vector,
                engine_version=self.engine_version,
            )

            logger.debug(
                f"Scored {len(breakdown)} options: best={result.best_option_id} "
                f"total={result.best.weighted_total} confidence={confidence} "
                f"risk={risk_level.value}"
            )
            return result

        except DecisionScoringError as e:
            logger.warning(f"Scoring rejected: {e}")
            raise
        except Exception as e:
            raise DecisionScoringError(f"Scoring failed: {str(e)}") from e

    def _validate_options(self, options: List[Option]) -> None:
        """
        Raises:
            InvalidInputError: If the set cannot be ranked
        """
        unlabeled = [o.option_id for o in options if not o.has_label]
        if unlabeled:
            raise InvalidInputError(
                f"Options missing a label: {', '.join(unlabeled)}"
            )

        if len(options) < MIN_OPTIONS:
            raise InvalidInputError(
                f"At least {MIN_OPTIONS} options are required to rank a decision "
                f"(got {len(options)})"
            )

    def _weighted_total(self, sub_scores, weights: WeightVector) -> float:
        total = sum(sub_scores[c] * weights.get(c) for c in Criterion.all_criteria())
        # Floating-point sums can drift a hair past the bounds
        return max(0.0, min(100.0, total))

    def _build_scored_option(self, option: Option, sub_scores, total: float, rank: int) -> ScoredOption:
        return ScoredOption(
            option_id=option.option_id,
            label=option.label,
            cost_score=round(sub_scores[Criterion.COST], SCORE_DECIMALS),
            time_score=round(sub_scores[Criterion.TIME], SCORE_DECIMALS),
            risk_score=round(sub_scores[Criterion.RISK], SCORE_DECIMALS),
            priority_score=round(sub_scores[Criterion.PRIORITY], SCORE_DECIMALS),
            reward_score=round(sub_scores[Criterion.REWARD], SCORE_DECIMALS),
            weighted_total=round(total, SCORE_DECIMALS),
            rank=rank,
            raw_risk=option.risk_level,
            exact_total=total,
        )


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================


def calculate_confidence(best_total: float, runner_up_total: Optional[float]) -> float:
    """
    Confidence from the gap between the top two totals.

        confidence = clamp(50 + gap / 100 * 49, 50, 99)

    Args:
        best_total: Full-precision total of the rank-1 option
        runner_up_total: Total of the rank-2 option (None -> gap 0)

    Returns:
        Confidence percentage rounded to one decimal
    """
    gap = best_total - runner_up_total if runner_up_total is not None else 0.0
    raw = CONFIDENCE_FLOOR + (gap / 100.0) * CONFIDENCE_SCALE
    return round(min(CONFIDENCE_CAP, max(CONFIDENCE_FLOOR, raw)), CONFIDENCE_DECIMALS)


def classify_risk(raw_risk: float) -> RiskLevel:
    """Risk level of a chosen option from its raw 0-10 risk."""
    return RiskLevel.from_raw_risk(raw_risk)


def score_options(
    options: Iterable[OptionLike],
    weights: WeightsLike,
) -> AnalysisResult:
    """
    Convenience function to score options in one call.

    Args:
        options: Options or plain records
        weights: Final weight vector (e.g. from blend())
    """
    return ScoringEngine().score(options, weights)


def analyze_decision(
    options: Iterable[OptionLike],
    personality: Union[RiskPersonality, str, None] = RiskPersonality.BALANCED,
    user_weights: WeightsLike = None,
) -> AnalysisResult:
    """
    Blend weights for the personality, then score.

    Args:
        options: Options or plain records
        personality: Risk personality or its label
        user_weights: Stored user weights (None -> balanced default)

    Returns:
        AnalysisResult
    """
    weights = WeightBlender().blend(user_weights, personality)
    return ScoringEngine().score(options, weights)


def format_analysis_summary(result: AnalysisResult) -> str:
    """
    Format a human-readable analysis summary.

    Useful for logging and the CLI.
    """
    lines = [
        "=" * 60,
        "DECISION ANALYSIS",
        "=" * 60,
        f"Best Option: {result.best.label} ({result.best_option_id})",
        f"Confidence:  {result.confidence:.1f}%",
        f"Risk Level:  {result.risk_level.value}",
        "",
        "Weights:",
    ]
    for name, value in result.weights.as_dict().items():
        lines.append(f"  {name:<9} {value:.4f}")

    lines.append("")
    lines.append("Ranking:")
    lines.append(f"  {'#':>2}  {'Option':<24} {'Total':>7}  {'Cost':>6} {'Time':>6} {'Risk':>6} {'Prio':>6} {'Rew':>6}")
    for s in result.breakdown:
        lines.append(
            f"  {s.rank:>2}  {s.label[:24]:<24} {s.weighted_total:>7.2f}  "
            f"{s.cost_score:>6.2f} {s.time_score:>6.2f} {s.risk_score:>6.2f} "
            f"{s.priority_score:>6.2f} {s.reward_score:>6.2f}"
        )
    lines.append("=" * 60)

    return "\n".join(lines)
