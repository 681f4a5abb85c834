# src/meetpulse/domains/meetings/api/crud.py
"""
Meeting API Routes

Create, list and fetch meetings. There is no update path.
"""

from typing import Optional

from fastapi import APIRouter, Request, Query
from fastapi.responses import JSONResponse
import json
import logging

from ....core.models import Meeting
from ....repositories import get_meeting_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/meetings", tags=["meetings"])


@router.post("")
async def create_meeting(request: Request):
    """Create a meeting; ``id`` and ``createdBy`` are required."""
    try:
        data = await request.json()
    except json.JSONDecodeError:
        return JSONResponse({"message": "Invalid JSON"}, status_code=400)
    if not isinstance(data, dict) or not data.get("id") or not data.get("createdBy"):
        return JSONResponse(
            {"message": "Meeting ID and createdBy (userId) are required"},
            status_code=400,
        )

    try:
        meeting = Meeting.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        return JSONResponse({"message": f"Invalid meeting: {e}"}, status_code=400)

    stored = get_meeting_repository().create_meeting(meeting, extra=data)
    return JSONResponse({"message": "Meeting created", "meeting": stored})


@router.get("")
async def list_meetings(created_by: Optional[str] = Query(None, alias="createdBy")):
    """List meetings, optionally only those created by one host."""
    repo = get_meeting_repository()
    meetings = repo.get_hosted_by(created_by) if created_by else repo.get_all()
    return JSONResponse(meetings)


@router.get("/{meeting_id}")
async def get_meeting(meeting_id: str):
    """Get a meeting by ``id`` or ``meetingId``."""
    meeting = get_meeting_repository().get_by_id(meeting_id)
    if not meeting:
        return JSONResponse({"message": "Meeting not found"}, status_code=404)
    return JSONResponse(meeting)
