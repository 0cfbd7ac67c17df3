"""
Decision Scoring Engine - Configuration.

============================================================
PURPOSE
============================================================
Defines the fixed scoring constants, the personality weight
tables and the runtime settings of the Decision Scoring Engine.

============================================================
FIXED CONSTANTS
============================================================
The blend ratio and the confidence constants are behavioral
contracts: changing them changes observable rankings and
confidence values. They are module constants, not settings.

Blend:
- USER_WEIGHT_RATIO = 0.6
- PERSONALITY_WEIGHT_RATIO = 0.4

Confidence:
- CONFIDENCE_FLOOR = 50  (a tie is a coin flip)
- CONFIDENCE_SCALE = 49  (full 100-point gap adds 49)
- CONFIDENCE_CAP = 99    (never claim certainty)

============================================================
RUNTIME SETTINGS
============================================================
ScoringSettings covers what a deployment may change:
default personality, stored user weights, logging, API guard.
Loaded from the environment (and a .env file if present).

    DECISION_DEFAULT_PERSONALITY   conservative|balanced|aggressive
    DECISION_USER_WEIGHTS          "cost=25,time=20,risk=25,priority=15,reward=15"
    DECISION_LOG_LEVEL             DEBUG|INFO|WARNING|ERROR|CRITICAL
    DECISION_LOG_FORMAT            text|json
    DECISION_API_KEY               optional x-api-key for the HTTP API
    DECISION_CORS_ORIGINS          comma separated origins

============================================================
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from dotenv import load_dotenv

from .preferences import parse_weight_string
from .types import InvalidInputError, RiskPersonality, WeightVector


# ============================================================
# FIXED SCORING CONSTANTS
# ============================================================

USER_WEIGHT_RATIO: float = 0.6
PERSONALITY_WEIGHT_RATIO: float = 0.4

CONFIDENCE_FLOOR: float = 50.0
CONFIDENCE_SCALE: float = 49.0
CONFIDENCE_CAP: float = 99.0

# Missing risk / priority / reward default to the scale midpoint
NEUTRAL_ATTRIBUTE_VALUE: float = 5.0
ATTRIBUTE_SCALE_MAX: float = 10.0

# Floor for the set-relative cost/time maximum (all-zero sets)
RELATIVE_NORMALIZATION_FLOOR: float = 1.0

MIN_OPTIONS: int = 2

ENGINE_VERSION: str = "1.0.0"


# ============================================================
# PERSONALITY PROFILES
# ============================================================

PERSONALITY_PROFILES: Dict[RiskPersonality, WeightVector] = {
    RiskPersonality.CONSERVATIVE: WeightVector(
        cost=0.25, time=0.15, risk=0.40, priority=0.10, reward=0.10,
    ),
    RiskPersonality.BALANCED: WeightVector(
        cost=0.25, time=0.20, risk=0.25, priority=0.15, reward=0.15,
    ),
    RiskPersonality.AGGRESSIVE: WeightVector(
        cost=0.20, time=0.20, risk=0.10, priority=0.20, reward=0.30,
    ),
}

# Used when the user has not stored a weight preference
DEFAULT_USER_WEIGHTS: WeightVector = PERSONALITY_PROFILES[RiskPersonality.BALANCED]


def get_personality_profile(personality: Any) -> WeightVector:
    """
    Return the fixed weight table for a personality.

    Args:
        personality: RiskPersonality or its label

    Raises:
        InvalidInputError: If the label is unknown
    """
    return PERSONALITY_PROFILES[RiskPersonality.parse(personality)]


# ============================================================
# RUNTIME SETTINGS
# ============================================================

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


@dataclass(frozen=True)
class ScoringSettings:
    """
    Runtime settings for the engine and its CLI/API surfaces.

    user_weights is None when no preference is stored; the
    blender then falls back to DEFAULT_USER_WEIGHTS.
    """

    default_personality: RiskPersonality = RiskPersonality.BALANCED
    user_weights: Optional[WeightVector] = None

    log_level: str = "INFO"
    log_format: str = "text"

    api_key: Optional[str] = None
    cors_origins: Tuple[str, ...] = ("*",)

    engine_version: str = ENGINE_VERSION

    def to_dict(self) -> Dict[str, Any]:
        return {
            "default_personality": self.default_personality.value,
            "user_weights": self.user_weights.as_dict() if self.user_weights else None,
            "log_level": self.log_level,
            "log_format": self.log_format,
            "api_key_configured": self.api_key is not None,
            "cors_origins": list(self.cors_origins),
            "engine_version": self.engine_version,
        }


def get_default_settings() -> ScoringSettings:
    """Return settings with every value at its default."""
    return ScoringSettings()


def load_settings(env: Optional[Mapping[str, str]] = None) -> ScoringSettings:
    """
    Build settings from environment variables.

    Args:
        env: Mapping to read from. Defaults to os.environ after
             loading a .env file from the working directory.

    Returns:
        ScoringSettings

    Raises:
        InvalidInputError: On an unknown personality, log level or format
        InvalidWeightsError: On malformed DECISION_USER_WEIGHTS
    """
    if env is None:
        load_dotenv()
        env = os.environ

    personality = RiskPersonality.parse(
        env.get("DECISION_DEFAULT_PERSONALITY") or RiskPersonality.BALANCED.value
    )

    raw_weights = env.get("DECISION_USER_WEIGHTS")
    user_weights = parse_weight_string(raw_weights) if raw_weights else None

    log_level = (env.get("DECISION_LOG_LEVEL") or "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise InvalidInputError(f"Invalid DECISION_LOG_LEVEL: {log_level}")

    log_format = (env.get("DECISION_LOG_FORMAT") or "text").lower()
    if log_format not in LOG_FORMATS:
        raise InvalidInputError(f"Invalid DECISION_LOG_FORMAT: {log_format}")

    origins = tuple(
        o.strip() for o in (env.get("DECISION_CORS_ORIGINS") or "*").split(",") if o.strip()
    )

    return ScoringSettings(
        default_personality=personality,
        user_weights=user_weights,
        log_level=log_level,
        log_format=log_format,
        api_key=env.get("DECISION_API_KEY") or None,
        cors_origins=origins or ("*",),
    )
