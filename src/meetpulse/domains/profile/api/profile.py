# src/meetpulse/domains/profile/api/profile.py
"""
Profile API Routes

Profiles are stored per email; statistics are computed on every read and
merged over whatever the stored record holds.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
import json
import logging

from ....core.container import get_store
from ....repositories import get_user_repository
from ....services.user_stats import (
    get_question_averages,
    get_satisfaction_trend,
    get_user_stats,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("/{identity}")
async def get_profile(identity: str):
    """Get a profile merged with freshly computed statistics."""
    user = get_user_repository().get_by_email(identity)
    if not user:
        return JSONResponse({"message": "User not found"}, status_code=404)

    stats = get_user_stats(get_store(), identity)
    return JSONResponse({**user, **stats.to_dict()})


@router.get("/{identity}/ratings")
async def get_profile_ratings(identity: str):
    """Get the per-question rating averages and weekly satisfaction trend for a host."""
    user = get_user_repository().get_by_email(identity)
    if not user:
        return JSONResponse({"message": "User not found"}, status_code=404)

    store = get_store()
    return JSONResponse({
        "email": identity,
        "ratings": get_question_averages(store, identity),
        "trend": get_satisfaction_trend(store, identity),
    })


@router.post("")
async def save_profile(request: Request):
    """Create or update a profile by email."""
    try:
        profile = await request.json()
    except json.JSONDecodeError:
        return JSONResponse({"message": "Invalid JSON"}, status_code=400)
    if not isinstance(profile, dict) or not profile.get("email"):
        return JSONResponse({"message": "Email is required"}, status_code=400)

    saved = get_user_repository().save_profile(profile)
    return JSONResponse({"message": "Profile saved", "profile": saved})
