# src/meetpulse/core/models/__init__.py
"""
Domain models for the application.

These are pure data classes representing the core domain entities.
They are store-agnostic: records travel as plain dicts with the camelCase
field names the front-end uses, and these classes convert to and from them.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any
from enum import Enum


class MeetingStatus(str, Enum):
    """Meeting lifecycle statuses."""
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class QuestionType(str, Enum):
    """Answer types a feedback question can declare."""
    RATING = "rating"
    BOOLEAN = "boolean"
    TEXT = "text"


# Fields on a User record that are derived on read and never stored
COMPUTED_USER_FIELDS = ("meetingsHosted", "avgRating")


@dataclass
class FeedbackQuestion:
    """A single question attached to a meeting."""
    id: str
    type: QuestionType
    text: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FeedbackQuestion":
        return cls(
            id=str(data["id"]),
            type=QuestionType(data["type"]),
            text=str(data.get("text", "")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "type": self.type.value, "text": self.text}


DEFAULT_FEEDBACK_QUESTIONS: List[FeedbackQuestion] = [
    FeedbackQuestion("meetingObjectiveClarity", QuestionType.RATING, "Meeting Objective Clarity"),
    FeedbackQuestion("contentRelevance", QuestionType.RATING, "Content Relevance"),
    FeedbackQuestion("overallEngagement", QuestionType.RATING, "Overall Engagement"),
    FeedbackQuestion("timeUtilization", QuestionType.RATING, "Time Utilization"),
    FeedbackQuestion("focusTopicManagement", QuestionType.RATING, "Focus & Topic Management"),
    FeedbackQuestion("decisionQuality", QuestionType.RATING, "Decision Quality"),
    FeedbackQuestion("overallSatisfaction", QuestionType.RATING, "Overall Satisfaction"),
    FeedbackQuestion("facilitatorEffectiveness", QuestionType.RATING, "Facilitator Effectiveness"),
    FeedbackQuestion("technicalSetup", QuestionType.RATING, "Technical Setup"),
    FeedbackQuestion("agendaSharedInAdvance", QuestionType.BOOLEAN, "Was the meeting agenda shared in advance?"),
    FeedbackQuestion("unnecessaryAttendees", QuestionType.BOOLEAN, "Were there unnecessary attendees?"),
    FeedbackQuestion("actionItemsAssigned", QuestionType.BOOLEAN, "Were action items clearly assigned?"),
    FeedbackQuestion("meetingRecorded", QuestionType.BOOLEAN, "Was the meeting recorded?"),
    FeedbackQuestion("preparedBeforeMeeting", QuestionType.BOOLEAN, "Did you prepare before the meeting?"),
    FeedbackQuestion("improvementAreas", QuestionType.TEXT, "What could have been improved?"),
    FeedbackQuestion("futureSuggestions", QuestionType.TEXT, "Any suggestions for future meetings?"),
    FeedbackQuestion("valuableAspect", QuestionType.TEXT, "What was the most valuable aspect?"),
    FeedbackQuestion("leastValuableAspect", QuestionType.TEXT, "What was the least valuable aspect?"),
]


@dataclass
class User:
    """User profile entity, keyed by email."""
    email: str
    name: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        known = {"email", "name", "company", "position", "department"}
        extra = {
            k: v for k, v in data.items()
            if k not in known and k not in COMPUTED_USER_FIELDS and k not in ("_id", "id")
        }
        return cls(
            email=data["email"],
            name=data.get("name"),
            company=data.get("company"),
            position=data.get("position"),
            department=data.get("department"),
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        d = dict(self.extra)
        d.update({
            k: v for k, v in {
                "email": self.email,
                "name": self.name,
                "company": self.company,
                "position": self.position,
                "department": self.department,
            }.items() if v is not None
        })
        return d


@dataclass
class Meeting:
    """Meeting entity. Stored with ``meetingId`` always equal to ``id``."""
    id: str
    created_by: str
    title: str = ""
    description: Optional[str] = None
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    status: MeetingStatus = MeetingStatus.SCHEDULED
    feedback_questions: List[FeedbackQuestion] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Meeting":
        """Build from a client payload. Any client ``meetingId`` is ignored."""
        questions = data.get("feedbackQuestions")
        if questions is None:
            parsed = list(DEFAULT_FEEDBACK_QUESTIONS)
        else:
            parsed = [FeedbackQuestion.from_dict(q) for q in questions]
        return cls(
            id=str(data["id"]),
            created_by=data["createdBy"],
            title=data.get("title", ""),
            description=data.get("description"),
            date=data.get("date"),
            start_time=data.get("startTime"),
            end_time=data.get("endTime"),
            status=MeetingStatus(data.get("status") or MeetingStatus.SCHEDULED.value),
            feedback_questions=parsed,
        )

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "id": self.id,
            "meetingId": self.id,
            "createdBy": self.created_by,
            "userId": self.created_by,
            "title": self.title,
            "description": self.description,
            "date": self.date,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "status": self.status.value,
            "feedbackQuestions": [q.to_dict() for q in self.feedback_questions],
        }
        return {k: v for k, v in d.items() if v is not None}


@dataclass
class Feedback:
    """Feedback left on a meeting. Append-only."""
    meeting_id: str
    user_id: str
    responses: Dict[str, Any]
    created_at: Optional[str] = None
    id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "id": self.id,
            "meetingId": self.meeting_id,
            "userId": self.user_id,
            "responses": self.responses,
            "createdAt": self.created_at,
        }
        return {k: v for k, v in d.items() if v is not None}


@dataclass
class AIInsight:
    """Generated summary of a batch of feedback."""
    strengths: List[str] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    trends: List[str] = field(default_factory=list)
    effectiveness_score: float = 0.0
    summary: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AIInsight":
        return cls(
            strengths=list(data.get("strengths") or []),
            improvements=list(data.get("improvements") or []),
            recommendations=list(data.get("recommendations") or []),
            trends=list(data.get("trends") or []),
            effectiveness_score=float(data.get("effectivenessScore") or 0),
            summary=str(data.get("summary") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strengths": self.strengths,
            "improvements": self.improvements,
            "recommendations": self.recommendations,
            "trends": self.trends,
            "effectivenessScore": self.effectiveness_score,
            "summary": self.summary,
        }


@dataclass
class UserStats:
    """Derived statistics for a host. ``avg_rating`` of 0 means no ratings yet."""
    meetings_hosted: int = 0
    avg_rating: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"meetingsHosted": self.meetings_hosted, "avgRating": self.avg_rating}


__all__ = [
    "MeetingStatus",
    "QuestionType",
    "COMPUTED_USER_FIELDS",
    "FeedbackQuestion",
    "DEFAULT_FEEDBACK_QUESTIONS",
    "User",
    "Meeting",
    "Feedback",
    "AIInsight",
    "UserStats",
]
