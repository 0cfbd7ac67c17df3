"""
Pydantic schemas for the Scoring API.
"""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# =======================
# COMMON
# =======================

class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str = "1.0.0"

class WeightsPayload(BaseModel):
    """Criterion weights as fractions; missing criteria count as 0."""
    cost: Optional[float] = None
    time: Optional[float] = None
    risk: Optional[float] = None
    priority: Optional[float] = None
    reward: Optional[float] = None

    def as_mapping(self) -> Dict[str, float]:
        return {k: v for k, v in self.model_dump().items() if v is not None}

# =======================
# 1. PERSONALITIES
# =======================

class PersonalityProfileOut(BaseModel):
    personality: str
    weights: Dict[str, float]

class PersonalitiesResponse(BaseModel):
    data: List[PersonalityProfileOut]

# =======================
# 2. BLEND
# =======================

class BlendRequest(BaseModel):
    personality: Optional[str] = None
    weights: Optional[WeightsPayload] = None

class BlendResponse(BaseModel):
    personality: str
    weights: Dict[str, float]

# =======================
# 3. ANALYZE
# =======================

class OptionPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    option_id: Optional[str] = Field(default=None, alias="id")
    label: Optional[str] = None
    description: Optional[str] = None
    cost: Optional[float] = None
    time_required: Optional[float] = None
    risk_level: Optional[float] = None
    priority: Optional[float] = None
    reward_potential: Optional[float] = None
    feasibility: Optional[float] = None
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)

class AnalyzeRequest(BaseModel):
    options: List[OptionPayload]
    personality: Optional[str] = None
    weights: Optional[WeightsPayload] = None

class ScoredOptionOut(BaseModel):
    option_id: str
    label: str
    cost_score: float
    time_score: float
    risk_score: float
    priority_score: float
    reward_score: float
    weighted_total: float
    rank: int
    raw_risk: float

class AnalyzeResponse(BaseModel):
    best_option_id: str
    confidence_percentage: float
    risk_level: str
    risk_personality: str
    recommendation: str
    alternative_suggestion: Optional[str] = None
    risk_assessment: str
    decision_status: str
    user_weights: Dict[str, float]
    weights: Dict[str, float]
    breakdown: List[ScoredOptionOut]
