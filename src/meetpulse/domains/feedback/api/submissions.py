# src/meetpulse/domains/feedback/api/submissions.py
"""
Feedback API Routes

Attendees submit feedback through the meeting's shareable link. Records are
append-only; only meetingId, userId and responses are kept from the body.
"""

from typing import Optional

from fastapi import APIRouter, Request, Query
from fastapi.responses import JSONResponse
import json
import logging

from ....core.models import Feedback
from ....repositories import get_feedback_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.post("")
async def submit_feedback(request: Request):
    """Record one attendee's answers for a meeting."""
    try:
        data = await request.json()
    except json.JSONDecodeError:
        return JSONResponse({"message": "Invalid JSON"}, status_code=400)
    if (
        not isinstance(data, dict)
        or not data.get("meetingId")
        or not data.get("userId")
        or data.get("responses") is None
    ):
        return JSONResponse(
            {"message": "meetingId, userId, and responses are required"},
            status_code=400,
        )
    if not isinstance(data["responses"], dict):
        return JSONResponse({"message": "responses must be an object"}, status_code=400)

    stored = get_feedback_repository().submit(Feedback(
        meeting_id=data["meetingId"],
        user_id=data["userId"],
        responses=data["responses"],
    ))
    logger.info(f"Feedback saved for meeting {data['meetingId']}")
    return JSONResponse({"message": "Feedback saved", "feedback": stored})


@router.get("")
async def list_feedback(meeting_id: Optional[str] = Query(None, alias="meetingId")):
    """List feedback, optionally for one meeting."""
    repo = get_feedback_repository()
    if meeting_id:
        return JSONResponse(repo.get_for_meetings([meeting_id]))
    return JSONResponse(repo.get_all())
