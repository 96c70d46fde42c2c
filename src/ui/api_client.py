"""HTTP client wrapper for the RecapKit FastAPI backend."""

from __future__ import annotations

import os
from typing import Any

import httpx
import streamlit as st

API_URL = os.getenv("API_URL", "http://localhost:8000")


def _error_detail(exc: httpx.HTTPError) -> str:
    """Prefer the API's ``detail`` message over the raw HTTP error."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            return str(exc.response.json().get("detail", exc))
        except ValueError:
            return str(exc)
    return str(exc)


def check_health() -> bool:
    """Return True if the API server responds to /health."""
    try:
        r = httpx.get(f"{API_URL}/health", timeout=5.0)
        return r.status_code == 200
    except httpx.ConnectError:
        return False


def generate_outputs(
    raw_notes: str,
    post_meeting_notes: str = "",
    meeting_outcome: str = "",
) -> dict[str, Any]:
    """Ask the API for the summary and action items of a session's notes."""
    payload = {
        "rawNotes": raw_notes,
        "postMeetingNotes": post_meeting_notes,
        "meetingOutcome": meeting_outcome,
    }
    try:
        r = httpx.post(f"{API_URL}/api/generate", json=payload, timeout=30.0)
        r.raise_for_status()
        return r.json()  # type: ignore[no-any-return]
    except httpx.HTTPError as e:
        st.error(f"Generate failed: {_error_detail(e)}")
        return {}


def draft_follow_up_email(
    highlights: list[dict[str, str]],
    *,
    follow_up_type: str = "",
    focus_prompt: str = "",
    email_prompt: str = "",
    meeting_result: str = "Pending",
    meeting_outcome: str = "",
    email_type: str = "followUp",
    email_tone: str = "professional",
) -> dict[str, Any]:
    """Ask the API to draft a follow-up email from highlights."""
    payload = {
        "highlights": highlights,
        "followUpType": follow_up_type,
        "focusPrompt": focus_prompt,
        "emailPrompt": email_prompt,
        "meetingResult": meeting_result,
        "meetingOutcome": meeting_outcome,
        "emailType": email_type,
        "emailTone": email_tone,
    }
    try:
        r = httpx.post(f"{API_URL}/api/follow-up", json=payload, timeout=30.0)
        r.raise_for_status()
        return r.json()  # type: ignore[no-any-return]
    except httpx.HTTPError as e:
        st.error(f"Follow-up email failed: {_error_detail(e)}")
        return {}
