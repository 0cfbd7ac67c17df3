"""
Decision Scoring Engine - Package.

============================================================
PURPOSE
============================================================
Ranks the competing options of a decision by combining their
attributes into a single weighted score, adjusted by the
user's declared risk personality.

============================================================
WHAT IT IS
============================================================
- Pure, deterministic multi-criteria scoring
- Weight blending: 60% user preference, 40% personality prior
- Confidence from the gap between the top two options
- Risk level of the chosen option

============================================================
WHAT IT IS NOT
============================================================
- NOT a persistence layer (callers store the result)
- NOT an AI text generator
- NOT a UI

============================================================
FIVE CRITERIA
============================================================
1. COST: cheaper is better, relative to the option set
2. TIME: faster is better, relative to the option set
3. RISK: (10 - risk_level) * 10
4. PRIORITY: priority * 10
5. REWARD: reward_potential * 10

Weighted total: 0-100. Confidence: 50-99.

Risk level of the best option:
- LOW (<= 2.5)
- MEDIUM (<= 5)
- HIGH (<= 7.5)
- CRITICAL (> 7.5)

============================================================
USAGE
============================================================
    from decision_scoring import blend, ScoringEngine, Option

    weights = blend(user_weights=None, personality="conservative")

    result = ScoringEngine().score(
        [
            Option(option_id="a", label="Stay", cost=0, risk_level=1),
            Option(option_id="b", label="Move", cost=8000, risk_level=6,
                   reward_potential=8),
        ],
        weights,
    )

    print(f"Best: {result.best.label}")
    print(f"Confidence: {result.confidence}%")
    print(f"Risk: {result.risk_level.value}")

============================================================
"""

# Types
from .types import (
    # Enums
    Criterion,
    RiskPersonality,
    RiskLevel,

    # Input types
    Option,
    WeightVector,

    # Output types
    ScoredOption,
    AnalysisResult,

    # Exceptions
    DecisionScoringError,
    InvalidInputError,
    DegenerateWeightsError,
    InvalidWeightsError,
)

# Configuration
from .config import (
    PERSONALITY_PROFILES,
    DEFAULT_USER_WEIGHTS,
    ScoringSettings,
    get_personality_profile,
    get_default_settings,
    load_settings,
)

# Weights
from .blender import (
    WeightBlender,
    blend,
)

from .preferences import (
    weights_from_percentages,
    weights_to_percentages,
    parse_weight_string,
    load_user_weights,
)

# Scoring
from .sanitizer import (
    sanitize_option,
    sanitize_options,
    collect_options,
)

from .criteria import (
    NormalizationContext,
    BaseCriterionScorer,
    CostScorer,
    TimeScorer,
    RiskScorer,
    PriorityScorer,
    RewardScorer,
)

from .engine import (
    ScoringEngine,
    score_options,
    analyze_decision,
    calculate_confidence,
    classify_risk,
    format_analysis_summary,
)

# Report
from .report import (
    DecisionReport,
    RISK_ASSESSMENTS,
    build_decision_report,
)


__all__ = [
    # Enums
    "Criterion",
    "RiskPersonality",
    "RiskLevel",

    # Input types
    "Option",
    "WeightVector",

    # Output types
    "ScoredOption",
    "AnalysisResult",

    # Exceptions
    "DecisionScoringError",
    "InvalidInputError",
    "DegenerateWeightsError",
    "InvalidWeightsError",

    # Configuration
    "PERSONALITY_PROFILES",
    "DEFAULT_USER_WEIGHTS",
    "ScoringSettings",
    "get_personality_profile",
    "get_default_settings",
    "load_settings",

    # Weights
    "WeightBlender",
    "blend",
    "weights_from_percentages",
    "weights_to_percentages",
    "parse_weight_string",
    "load_user_weights",

    # Scoring
    "sanitize_option",
    "sanitize_options",
    "collect_options",
    "NormalizationContext",
    "BaseCriterionScorer",
    "CostScorer",
    "TimeScorer",
    "RiskScorer",
    "PriorityScorer",
    "RewardScorer",
    "ScoringEngine",
    "score_options",
    "analyze_decision",
    "calculate_confidence",
    "classify_risk",
    "format_analysis_summary",

    # Report
    "DecisionReport",
    "RISK_ASSESSMENTS",
    "build_decision_report",
]


__version__ = "1.0.0"
