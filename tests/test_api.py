"""Tests for API endpoints (fully deterministic, no network)."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from src.api.main import app

client = TestClient(app)
client_no_raise = TestClient(app, raise_server_exceptions=False)

SCENARIO_NOTES = "Send report by Friday\nSchedule follow-up call"


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


# --- /api/generate ---


def test_generate_returns_camel_case_artifacts():
    response = client.post("/api/generate", json={"rawNotes": SCENARIO_NOTES})
    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"summary", "actionItems", "email"}
    assert data["summary"] == "Summary\n\n- Send report by Friday\n- Schedule follow-up call"
    assert data["actionItems"].startswith("Action Items\n\n1. Send report by Friday")
    assert data["email"] == ""


def test_generate_accepts_snake_case_fields():
    response = client.post("/api/generate", json={"raw_notes": SCENARIO_NOTES})
    assert response.status_code == 200
    assert "Send report by Friday" in response.json()["summary"]


def test_generate_merges_post_meeting_sections():
    response = client.post(
        "/api/generate",
        json={"rawNotes": "", "postMeetingNotes": "Budget approved", "meetingOutcome": "Signed"},
    )
    assert response.status_code == 200
    summary = response.json()["summary"]
    assert "- ## Post-Meeting Notes" in summary
    assert "- Signed" in summary


def test_generate_empty_notes_returns_400():
    response = client.post("/api/generate", json={"rawNotes": "   \n  "})
    assert response.status_code == 400
    assert "notes" in response.json()["detail"]


def test_generate_missing_body_fields_returns_400():
    response = client.post("/api/generate", json={})
    assert response.status_code == 400


def test_generate_too_large_returns_413():
    response = client.post("/api/generate", json={"rawNotes": "x" * 50_001})
    assert response.status_code == 413
    assert response.json()["detail"] == (
        "Notes are too long (50,001 characters). Maximum is 50,000 characters."
    )


def test_generate_at_limit_succeeds():
    response = client.post("/api/generate", json={"rawNotes": "x" * 50_000})
    assert response.status_code == 200


def test_generate_limit_applies_to_merged_notes():
    """Each field is under the limit but the merged blob is not."""
    response = client.post(
        "/api/generate",
        json={"rawNotes": "x" * 30_000, "postMeetingNotes": "y" * 30_000},
    )
    assert response.status_code == 413


def test_generate_uses_configured_limit():
    with patch("src.api.routes.generate.settings") as mock_settings:
        mock_settings.max_input_chars = 10
        response = client.post("/api/generate", json={"rawNotes": "Send the report"})
    assert response.status_code == 413


def test_generate_unexpected_failure_returns_500():
    with patch("src.api.routes.generate.generate_artifacts", side_effect=RuntimeError("boom")):
        response = client_no_raise.post("/api/generate", json={"rawNotes": SCENARIO_NOTES})
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to generate outputs"


# --- /api/follow-up ---


def test_follow_up_drafts_email():
    response = client.post(
        "/api/follow-up",
        json={
            "highlights": [
                {"text": "Confirm launch date", "tag": "Urgent"},
                {"text": "Share pricing deck", "tag": "None"},
            ],
            "emailType": "concern",
            "emailTone": "warm",
        },
    )
    assert response.status_code == 200
    lines = response.json()["email"].splitlines()
    assert lines[1] == "Subject: Concern / follow-up from our meeting"
    assert lines[3] == "Hi there,"
    assert "- [Urgent] Confirm launch date" in lines
    assert "- Share pricing deck" in lines
    assert lines[-1] == "Thanks so much,"


def test_follow_up_context_fields():
    response = client.post(
        "/api/follow-up",
        json={
            "highlights": [{"text": "Send contract"}],
            "followUpType": "Phone Call",
            "meetingResult": "Completed",
            "meetingOutcome": "Verbal yes",
            "focusPrompt": "timeline",
        },
    )
    assert response.status_code == 200
    email = response.json()["email"]
    assert "Subject: Follow-up from our meeting (Phone Call)" in email
    assert "Meeting result: Completed" in email
    assert "Meeting outcome: Verbal yes" in email
    assert "Focus: timeline" in email


def test_follow_up_unknown_choices_fall_back_to_defaults():
    response = client.post(
        "/api/follow-up",
        json={
            "highlights": [{"text": "Send contract"}],
            "emailType": "newsletter",
            "emailTone": "sarcastic",
            "meetingResult": "Exploded",
        },
    )
    assert response.status_code == 200
    lines = response.json()["email"].splitlines()
    assert lines[1] == "Subject: Follow-up from our meeting"
    assert lines[3] == "Hi,"
    assert "Meeting result" not in response.json()["email"]


def test_follow_up_tag_normalisation():
    response = client.post(
        "/api/follow-up",
        json={"highlights": [{"text": "A", "tag": "Someday"}, {"text": "B", "tag": ""}]},
    )
    assert response.status_code == 200
    lines = response.json()["email"].splitlines()
    assert "- [Other] A" in lines
    assert "- B" in lines


def test_follow_up_without_highlights_returns_400():
    response = client.post("/api/follow-up", json={"highlights": []})
    assert response.status_code == 400
    assert response.json()["detail"] == "Add at least 1 highlight to generate a follow-up email."


def test_follow_up_blank_highlights_return_400():
    response = client.post("/api/follow-up", json={"highlights": [{"text": "  "}]})
    assert response.status_code == 400


def test_follow_up_empty_draft_returns_500():
    with patch("src.api.routes.follow_up.generate_follow_up_email", return_value="  "):
        response = client_no_raise.post("/api/follow-up", json={"highlights": [{"text": "A"}]})
    assert response.status_code == 500
    assert response.json()["detail"] == "Email generation returned an empty draft."


def test_follow_up_unexpected_failure_returns_500():
    with patch("src.api.routes.follow_up.generate_follow_up_email", side_effect=RuntimeError("boom")):
        response = client_no_raise.post("/api/follow-up", json={"highlights": [{"text": "A"}]})
    assert response.status_code == 500
