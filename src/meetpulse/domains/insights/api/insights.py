# src/meetpulse/domains/insights/api/insights.py
"""
AI Insights API Routes

Stores insight documents and generates new ones from feedback.
"""

from typing import Optional, List

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
import json
import logging

from ....repositories import (
    get_feedback_repository,
    get_insight_repository,
    get_meeting_repository,
)
from ....services.insights import generate_insights, generate_meeting_recommendations
from ....services.user_stats import candidate_meeting_ids

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai-insights", tags=["ai-insights"])


# ============== Pydantic Models ==============

class GenerateInsightsRequest(BaseModel):
    """Scope of feedback to summarize. With neither field, all feedback is used."""
    email: Optional[str] = Field(default=None, description="Host whose meetings to analyze")
    meetingId: Optional[str] = Field(default=None, description="Single meeting to analyze")


class RecommendationsRequest(BaseModel):
    """Ask for advice on the next meeting of a given kind."""
    meetingType: str = Field(..., description="Free-form meeting type, e.g. 'standup'")
    email: Optional[str] = Field(default=None, description="Host whose past feedback to use")


class RecommendationsResponse(BaseModel):
    meetingType: str
    recommendations: List[str]


def _select_feedback(email: Optional[str], meeting_id: Optional[str]):
    feedback_repo = get_feedback_repository()
    if meeting_id:
        return feedback_repo.get_for_meetings([meeting_id])
    if email:
        hosted = get_meeting_repository().get_hosted_by(email)
        return feedback_repo.get_for_meetings(candidate_meeting_ids(hosted))
    return feedback_repo.get_all()


# ============== Endpoints ==============

@router.post("")
async def save_insight(request: Request):
    """Persist an insight document as submitted."""
    try:
        insight = await request.json()
    except json.JSONDecodeError:
        return JSONResponse({"message": "Invalid JSON"}, status_code=400)
    if not isinstance(insight, dict):
        return JSONResponse({"message": "Insight must be an object"}, status_code=400)

    stored = get_insight_repository().save(insight)
    return JSONResponse({"message": "AI Insight saved", "insight": stored})


@router.get("")
async def list_insights():
    """List all stored insights."""
    return JSONResponse(get_insight_repository().get_all())


@router.post("/generate")
async def generate(body: GenerateInsightsRequest):
    """Generate, store and return insights for the selected feedback."""
    feedback = _select_feedback(body.email, body.meetingId)
    insight = generate_insights(feedback)

    record = insight.to_dict()
    record["feedbackCount"] = len(feedback)
    if body.email:
        record["email"] = body.email
    if body.meetingId:
        record["meetingId"] = body.meetingId

    stored = get_insight_repository().save(record)
    return JSONResponse({"message": "AI Insight generated", "insight": stored})


@router.post("/recommendations", response_model=RecommendationsResponse)
async def recommendations(body: RecommendationsRequest):
    """Recommendations for an upcoming meeting, informed by past feedback."""
    feedback = _select_feedback(body.email, None)
    return RecommendationsResponse(
        meetingType=body.meetingType,
        recommendations=generate_meeting_recommendations(body.meetingType, feedback),
    )
