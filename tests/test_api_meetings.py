# tests/test_api_meetings.py
"""
Tests for the Meetings API.

Tests the /api/meetings endpoints for:
- Creating meetings with required fields and default questions
- Listing meetings, optionally by host
- Fetching a meeting by id or meetingId
"""

import pytest


class TestCreateMeeting:
    """Test suite for POST /api/meetings."""

    def test_create_meeting(self, client, meeting_factory, assert_response_success):
        response = client.post("/api/meetings", json=meeting_factory())
        data = assert_response_success(response)

        meeting = data["meeting"]
        assert data["message"] == "Meeting created"
        assert meeting["meetingId"] == "m1"
        assert meeting["userId"] == "host@example.com"
        assert meeting["status"] == "scheduled"
        assert len(meeting["feedbackQuestions"]) == 18

    @pytest.mark.parametrize("missing", ["id", "createdBy"])
    def test_required_fields(self, client, meeting_factory, assert_response_error, missing):
        payload = meeting_factory()
        del payload[missing]

        response = client.post("/api/meetings", json=payload)

        assert_response_error(response, 400, "Meeting ID and createdBy (userId) are required")

    def test_invalid_status_rejected(self, client, meeting_factory, assert_response_error):
        response = client.post("/api/meetings", json=meeting_factory(status="postponed"))
        assert_response_error(response, 400, "Invalid meeting")

    def test_client_meeting_id_overridden_by_id(
        self, client, store, profile_factory, meeting_factory, feedback_factory, assert_response_success
    ):
        client.post("/api/profile", json=profile_factory())
        data = assert_response_success(
            client.post("/api/meetings", json=meeting_factory(id="m1", meetingId="other"))
        )
        client.post("/api/feedback", json=feedback_factory(meeting_id="m1", responses={"overallSatisfaction": 4}))

        assert data["meeting"]["meetingId"] == "m1"
        assert store.find_one("meetings", {"id": "m1"})["meetingId"] == "m1"
        profile = assert_response_success(client.get("/api/profile/host@example.com"))
        assert profile["meetingsHosted"] == 1
        assert profile["avgRating"] == 4

    def test_custom_questions_and_extra_fields_kept(self, client, meeting_factory, store):
        questions = [{"id": "pace", "type": "rating", "text": "Pace"}]
        client.post("/api/meetings", json=meeting_factory(
            feedbackQuestions=questions, location="Room 4", startTime="09:00", endTime="09:30"
        ))

        stored = store.find_one("meetings", {"id": "m1"})
        assert stored["feedbackQuestions"] == questions
        assert stored["location"] == "Room 4"
        assert stored["endTime"] == "09:30"


class TestListMeetings:
    """Test suite for GET /api/meetings."""

    def test_empty(self, client, assert_response_success):
        assert assert_response_success(client.get("/api/meetings")) == []

    def test_lists_in_insertion_order(self, client, meeting_factory, assert_response_success):
        for mid in ["m1", "m2", "m3"]:
            client.post("/api/meetings", json=meeting_factory(id=mid))

        data = assert_response_success(client.get("/api/meetings"))

        assert [m["id"] for m in data] == ["m1", "m2", "m3"]

    def test_filter_by_host(self, client, meeting_factory, assert_response_success):
        client.post("/api/meetings", json=meeting_factory(id="m1"))
        client.post("/api/meetings", json=meeting_factory(id="m2", created_by="other@example.com"))

        data = assert_response_success(client.get("/api/meetings?createdBy=other@example.com"))

        assert [m["id"] for m in data] == ["m2"]


class TestGetMeeting:
    """Test suite for GET /api/meetings/{meeting_id}."""

    def test_by_id(self, client, meeting_factory, assert_response_success):
        client.post("/api/meetings", json=meeting_factory(id="m1", title="Retro"))

        data = assert_response_success(client.get("/api/meetings/m1"))

        assert data["title"] == "Retro"

    def test_by_meeting_id_only(self, client, store, assert_response_success):
        store.insert("meetings", {"id": "storage-7", "meetingId": "share-7", "createdBy": "h"})

        data = assert_response_success(client.get("/api/meetings/share-7"))

        assert data["id"] == "storage-7"

    def test_not_found(self, client, assert_response_error):
        assert_response_error(client.get("/api/meetings/missing"), 404, "Meeting not found")
