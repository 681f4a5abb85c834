# src/meetpulse/services/__init__.py
"""
Services - read-side derivations over the stored collections.
"""

from .user_stats import get_user_stats, get_question_averages, get_satisfaction_trend
from .insights import generate_insights, generate_meeting_recommendations

__all__ = [
    "get_user_stats",
    "get_question_averages",
    "get_satisfaction_trend",
    "generate_insights",
    "generate_meeting_recommendations",
]
