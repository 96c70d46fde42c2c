"""Pydantic request/response schemas for the RecapKit API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case field names accepted too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GenerateRequest(CamelModel):
    """Request body for the /api/generate endpoint."""

    raw_notes: str = ""
    post_meeting_notes: str | None = None
    meeting_outcome: str | None = None


class GenerateResponse(CamelModel):
    """Response body for the /api/generate endpoint.

    ``email`` is always empty here; /api/follow-up drafts emails.
    """

    summary: str
    action_items: str
    email: str = ""


class HighlightIn(CamelModel):
    """A highlight as sent by the client: text plus an optional tag."""

    text: str = ""
    tag: str | None = None


class FollowUpRequest(CamelModel):
    """Request body for the /api/follow-up endpoint.

    Enum-like fields are plain strings so unknown values fall back to
    defaults instead of failing validation.
    """

    highlights: list[HighlightIn] = []
    follow_up_type: str | None = None
    focus_prompt: str | None = None
    email_prompt: str | None = None
    meeting_result: str | None = None
    meeting_outcome: str | None = None
    email_type: str | None = None
    email_tone: str | None = None


class FollowUpResponse(CamelModel):
    """Response body for the /api/follow-up endpoint."""

    email: str
