# src/meetpulse/services/user_stats.py
"""
User Statistics Aggregator

Derives a host's statistics from stored meetings and feedback at read time:

- meetings hosted: meetings whose ``createdBy`` is the identity
- average rating: mean of every rating-shaped answer left on those meetings
- per-question averages and a weekly satisfaction trend for the same feedback

A response value counts as a rating when it is a real number in [1, 5].
The meeting's declared question types are not consulted, so answers keep
counting even if question definitions drift. Booleans and strings never
count, whatever they would coerce to.

The store is passed in on every call. Nothing here writes.
"""

import logging
import math
from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, Hashable, Iterable, List, Optional, Set

from ..core.models import UserStats
from ..core.ports import DocumentStoreProtocol

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def is_rating(value: Any) -> bool:
    """True when ``value`` is a non-boolean number within [1, 5]."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # NaN fails both comparisons
    return MIN_RATING <= value <= MAX_RATING


def round_rating(value: float) -> float:
    """Round half up to 2 decimal places."""
    return math.floor(value * 100 + 0.5) / 100


def candidate_meeting_ids(meetings: Iterable[Dict[str, Any]]) -> Set[Hashable]:
    """Collect ``meetingId`` (falling back to ``id``) from each meeting."""
    ids = set()
    for meeting in meetings:
        meeting_id = meeting.get("meetingId") or meeting.get("id")
        if meeting_id:
            ids.add(meeting_id)
    return ids


def _relevant_feedback(store: DocumentStoreProtocol, identity: str) -> List[Dict[str, Any]]:
    hosted = store.find("meetings", {"createdBy": identity})
    meeting_ids = candidate_meeting_ids(hosted)
    if not meeting_ids:
        return []
    return store.find("feedback", in_filters={"meetingId": list(meeting_ids)})


def _rated_answers(feedbacks: Iterable[Dict[str, Any]]):
    """Yield (question_id, value) for every rating-shaped answer."""
    for fb in feedbacks:
        responses = fb.get("responses")
        if not isinstance(responses, dict):
            continue
        for key, value in responses.items():
            if is_rating(value):
                yield key, value
            elif isinstance(value, (int, float)) and not isinstance(value, bool):
                logger.debug(f"Skipping out-of-range value {value!r} for '{key}' on feedback {fb.get('id')}")


def get_user_stats(store: DocumentStoreProtocol, identity: str) -> UserStats:
    """
    Compute meetings hosted and average rating for ``identity``.

    Args:
        store: Document store to read meetings and feedback from
        identity: The host's email

    Returns:
        UserStats; ``avg_rating`` is 0 when no rating has been left yet

    Raises:
        StoreError: If any read fails
    """
    meetings_hosted = store.count("meetings", {"createdBy": identity})

    ratings = [value for _, value in _rated_answers(_relevant_feedback(store, identity))]
    avg_rating = round_rating(sum(ratings) / len(ratings)) if ratings else 0

    return UserStats(meetings_hosted=meetings_hosted, avg_rating=avg_rating)


def get_question_averages(store: DocumentStoreProtocol, identity: str) -> Dict[str, float]:
    """Average rating per response key over feedback on meetings hosted by ``identity``."""
    totals: Dict[str, List[float]] = defaultdict(list)
    for key, value in _rated_answers(_relevant_feedback(store, identity)):
        totals[key].append(value)
    return {key: round_rating(sum(vals) / len(vals)) for key, vals in totals.items()}


def _iso_week(timestamp: Any) -> Optional[str]:
    """ISO week label such as ``2024-W03``, or None if unparsable."""
    if not isinstance(timestamp, str):
        return None
    try:
        created = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return None
    year, week, _ = created.isocalendar()
    return f"{year}-W{week:02d}"


def get_satisfaction_trend(
    store: DocumentStoreProtocol,
    identity: str,
    question_id: str = "overallSatisfaction",
) -> List[Dict[str, Any]]:
    """
    Weekly average of one rating question over feedback on meetings hosted by ``identity``.

    Feedback without a parsable ``createdAt`` or a rating-shaped answer is skipped.

    Returns:
        ``[{"week": "2024-W03", "avg": 4.5}, ...]`` in week order
    """
    weeks: Dict[str, List[float]] = defaultdict(list)
    for fb in _relevant_feedback(store, identity):
        responses = fb.get("responses")
        if not isinstance(responses, dict) or not is_rating(responses.get(question_id)):
            continue
        week = _iso_week(fb.get("createdAt"))
        if week is not None:
            weeks[week].append(responses[question_id])
    return [
        {"week": week, "avg": round_rating(sum(vals) / len(vals))}
        for week, vals in sorted(weeks.items())
    ]
