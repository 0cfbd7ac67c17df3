import logging

from fastapi import APIRouter, Depends, HTTPException

from decision_scoring import (
    PERSONALITY_PROFILES,
    DecisionScoringError,
    Option,
    RiskPersonality,
    ScoringEngine,
    ScoringSettings,
    WeightBlender,
    build_decision_report,
)
from scoring_api.dependencies import get_settings, require_api_key
from scoring_api.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    BlendRequest,
    BlendResponse,
    PersonalitiesResponse,
    PersonalityProfileOut,
    ScoredOptionOut,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Analysis"], dependencies=[Depends(require_api_key)])


@router.get("/personalities", response_model=PersonalitiesResponse)
def list_personalities():
    """
    Get the fixed weight table of every risk personality.
    """
    return PersonalitiesResponse(
        data=[
            PersonalityProfileOut(personality=p.value, weights=w.as_dict())
            for p, w in PERSONALITY_PROFILES.items()
        ]
    )


@router.post("/blend", response_model=BlendResponse)
def blend_weights(body: BlendRequest, settings: ScoringSettings = Depends(get_settings)):
    """
    Blend user weights with a personality prior.
    """
    try:
        personality = RiskPersonality.parse(body.personality or settings.default_personality)
        user_weights = body.weights.as_mapping() if body.weights else settings.user_weights
        weights = WeightBlender().blend(user_weights, personality)
    except DecisionScoringError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return BlendResponse(personality=personality.value, weights=weights.as_dict())


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(body: AnalyzeRequest, settings: ScoringSettings = Depends(get_settings)):
    """
    Score and rank the options of one decision.
    """
    try:
        personality = RiskPersonality.parse(body.personality or settings.default_personality)
        user_weights = body.weights.as_mapping() if body.weights else settings.user_weights

        options = [
            Option.from_dict(o.model_dump(by_alias=False))
            for o in body.options
        ]
        weights = WeightBlender().blend(user_weights, personality)
        result = ScoringEngine(engine_version=settings.engine_version).score(options, weights)
    except DecisionScoringError as e:
        logger.info(f"Rejected analysis request: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    report = build_decision_report(result, personality, user_weights)

    return AnalyzeResponse(
        best_option_id=report.best_option_id,
        confidence_percentage=report.confidence_percentage,
        risk_level=report.risk_level.value,
        risk_personality=personality.value,
        recommendation=report.recommendation,
        alternative_suggestion=report.alternative_suggestion,
        risk_assessment=report.risk_assessment,
        decision_status=report.decision_status,
        user_weights=report.analysis_data["weights"],
        weights=result.weights.as_dict(),
        breakdown=[ScoredOptionOut(**s.to_dict()) for s in result.breakdown],
    )
