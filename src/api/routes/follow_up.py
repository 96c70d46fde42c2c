"""Follow-up endpoint: draft an email from curated highlights."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TypeVar

from fastapi import APIRouter, HTTPException

from src.api.models import FollowUpRequest, FollowUpResponse, HighlightIn
from src.pipeline_config import EmailTone, EmailType, HighlightTag, MeetingResult
from src.recap.models import FollowUpHighlight
from src.recap.pipeline import generate_follow_up_email

logger = logging.getLogger(__name__)

router = APIRouter()

E = TypeVar("E", bound=StrEnum)


def _as_choice(enum_cls: type[E], value: str | None, default: E) -> E:
    """Coerce *value* to a member of *enum_cls*, falling back to *default*."""
    try:
        return enum_cls((value or "").strip())
    except ValueError:
        return default


def _as_tag(tag: str | None) -> HighlightTag:
    cleaned = (tag or "").strip()
    if not cleaned:
        return HighlightTag.NONE
    return _as_choice(HighlightTag, cleaned, HighlightTag.OTHER)


def _clean(value: str | None) -> str:
    return (value or "").strip()


def normalize_highlights(raw: list[HighlightIn]) -> list[FollowUpHighlight]:
    """Drop highlights without text and normalise their tags."""
    return [
        FollowUpHighlight(text=h.text.strip(), tag=_as_tag(h.tag))
        for h in raw
        if h.text.strip()
    ]


@router.post("/api/follow-up", response_model=FollowUpResponse)
async def follow_up(request: FollowUpRequest) -> FollowUpResponse:
    """Draft a follow-up email from the selected highlights and prompts.

    Unknown email types, tones and meeting results fall back to
    ``followUp``, ``professional`` and ``Pending``.
    """
    highlights = normalize_highlights(request.highlights)
    if not highlights:
        raise HTTPException(
            status_code=400,
            detail="Add at least 1 highlight to generate a follow-up email.",
        )

    try:
        email = generate_follow_up_email(
            highlights,
            follow_up_type=_clean(request.follow_up_type),
            focus_prompt=_clean(request.focus_prompt),
            email_prompt=_clean(request.email_prompt),
            meeting_result=_as_choice(MeetingResult, request.meeting_result, MeetingResult.PENDING),
            meeting_outcome=_clean(request.meeting_outcome),
            email_type=_as_choice(EmailType, request.email_type, EmailType.FOLLOW_UP),
            email_tone=_as_choice(EmailTone, request.email_tone, EmailTone.PROFESSIONAL),
        )
    except Exception as exc:
        logger.exception("Follow-up email generation failed")
        raise HTTPException(status_code=500, detail="Failed to generate follow-up email") from exc

    if not email.strip():
        raise HTTPException(status_code=500, detail="Email generation returned an empty draft.")

    return FollowUpResponse(email=email)
