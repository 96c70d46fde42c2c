"""Generate endpoint: derive summary and action items from meeting notes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from src.api.models import GenerateRequest, GenerateResponse
from src.config import settings
from src.recap.errors import EmptyNotesError, NotesTooLargeError
from src.recap.pipeline import generate_artifacts, merge_notes, validate_merged_notes

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/generate", response_model=GenerateResponse)
async def generate(request: GenerateRequest) -> GenerateResponse:
    """Generate the summary and action-item artifacts.

    Raw notes, post-meeting notes and the meeting outcome are merged into one
    blob before segmentation.  The email is left blank; use /api/follow-up.
    """
    merged = merge_notes(
        request.raw_notes,
        request.post_meeting_notes,
        request.meeting_outcome,
    )

    try:
        validate_merged_notes(merged, settings.max_input_chars)
    except EmptyNotesError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except NotesTooLargeError as exc:
        raise HTTPException(status_code=413, detail=str(exc)) from exc

    try:
        outputs = generate_artifacts(merged)
    except Exception as exc:
        logger.exception("Artifact generation failed for %d characters of notes", len(merged))
        raise HTTPException(status_code=500, detail="Failed to generate outputs") from exc

    return GenerateResponse(
        summary=outputs.summary,
        action_items=outputs.action_items,
        email=outputs.email,
    )
