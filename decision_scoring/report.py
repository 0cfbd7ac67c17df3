"""
Decision Scoring Engine - Decision Report.

============================================================
RESPONSIBILITY
============================================================
Turns an AnalysisResult into the record an application stores
next to the decision: recommendation, backup suggestion,
risk assessment sentence and the full score breakdown.

Everything here is deterministic text derived from the result.
No AI enrichment happens here; the report is meaningful
without it.

============================================================
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .config import DEFAULT_USER_WEIGHTS
from .types import AnalysisResult, RiskLevel, RiskPersonality, WeightVector


RISK_ASSESSMENTS: Dict[RiskLevel, str] = {
    RiskLevel.LOW: "Low risk — a safe and predictable path forward.",
    RiskLevel.MEDIUM: "Moderate risk — consider mitigation strategies.",
    RiskLevel.HIGH: "High risk — ensure you have contingency plans.",
    RiskLevel.CRITICAL: "Critical risk — consider lower-risk alternatives.",
}

# Status a decision moves to once it has been scored
ANALYZED_STATUS = "analyzed"


@dataclass(frozen=True)
class DecisionReport:
    """Persistable summary of one analysis."""

    best_option_id: str
    recommendation: str
    alternative_suggestion: Optional[str]
    risk_assessment: str
    confidence_percentage: float
    risk_level: RiskLevel
    risk_personality: RiskPersonality

    analysis_data: Dict[str, Any] = field(default_factory=dict)
    score_breakdown: List[Dict[str, Any]] = field(default_factory=list)

    decision_status: str = ANALYZED_STATUS

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "best_option_id": self.best_option_id,
            "recommendation": self.recommendation,
            "alternative_suggestion": self.alternative_suggestion,
            "risk_assessment": self.risk_assessment,
            "confidence_percentage": self.confidence_percentage,
            "risk_level": self.risk_level.value,
            "analysis_data": self.analysis_data,
            "score_breakdown": {"breakdown": self.score_breakdown},
            "decision_status": self.decision_status,
        }


def build_recommendation(result: AnalysisResult) -> str:
    return f"Recommend **{result.best.label}** with {result.confidence:.1f}% confidence."


def build_alternative_suggestion(result: AnalysisResult) -> Optional[str]:
    runner_up = result.runner_up
    if runner_up is None:
        return None
    return f"**{runner_up.label}** is a solid backup."


def build_decision_report(
    result: AnalysisResult,
    personality: Union[RiskPersonality, str, None] = RiskPersonality.BALANCED,
    user_weights: Union[WeightVector, Mapping[Any, Any], None] = None,
) -> DecisionReport:
    """
    Build the stored report for a scored decision.

    Args:
        result: Output of ScoringEngine.score
        personality: Personality the weights were blended with
        user_weights: The user's stored weights before blending.
                      None means nothing was stored and the
                      balanced default stood in.

    Returns:
        DecisionReport
    """
    profile = RiskPersonality.parse(personality)
    stored = DEFAULT_USER_WEIGHTS if user_weights is None else WeightVector.from_mapping(user_weights)

    return DecisionReport(
        best_option_id=result.best_option_id,
        recommendation=build_recommendation(result),
        alternative_suggestion=build_alternative_suggestion(result),
        risk_assessment=RISK_ASSESSMENTS[result.risk_level],
        confidence_percentage=result.confidence,
        risk_level=result.risk_level,
        risk_personality=profile,
        analysis_data={
            "weights": stored.as_dict(),
            "blended_weights": result.weights.as_dict(),
            "risk_personality": profile.value,
        },
        score_breakdown=[s.to_dict() for s in result.breakdown],
    )
