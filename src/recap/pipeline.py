"""End-to-end recap pipeline: merge -> segment -> extract -> check -> format."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from src.pipeline_config import (
    DEFAULT_RECAP_CONFIG,
    EmailTone,
    EmailType,
    MeetingResult,
    RecapConfig,
)
from src.recap.actions import parse_action_items
from src.recap.bullets import to_bullets
from src.recap.errors import EmptyNotesError, NotesTooLargeError
from src.recap.formatters import (
    format_action_items,
    make_follow_up_email_draft_from_highlights,
    make_summary,
)
from src.recap.issues import detect_action_issues
from src.recap.models import FollowUpHighlight, Outputs

logger = logging.getLogger(__name__)

POST_MEETING_HEADER = "## Post-Meeting Notes"
MEETING_OUTCOME_HEADER = "## Meeting Outcome"


def merge_notes(
    raw_notes: str,
    post_meeting_notes: str | None = None,
    meeting_outcome: str | None = None,
) -> str:
    """Join raw notes with the optional post-meeting sections.

    Sections are separated by a blank line; empty parts are left out.
    """
    parts: list[str] = []
    if raw_notes.strip():
        parts.append(raw_notes.strip())
    if post_meeting_notes and post_meeting_notes.strip():
        parts.append(f"{POST_MEETING_HEADER}\n{post_meeting_notes.strip()}")
    if meeting_outcome and meeting_outcome.strip():
        parts.append(f"{MEETING_OUTCOME_HEADER}\n{meeting_outcome.strip()}")
    return "\n\n".join(parts)


def validate_merged_notes(merged: str, max_chars: int) -> None:
    """Reject empty or oversized input before any pattern matching runs.

    Raises:
        EmptyNotesError: Nothing to process.
        NotesTooLargeError: More than *max_chars* characters.
    """
    if not merged.strip():
        raise EmptyNotesError("Add some notes, post-meeting notes, or a meeting outcome first.")
    if len(merged) > max_chars:
        raise NotesTooLargeError(len(merged), max_chars)


def generate_artifacts(merged: str, config: RecapConfig = DEFAULT_RECAP_CONFIG) -> Outputs:
    """Derive the summary and action-item artifacts from merged notes.

    The email stays blank here; drafting it is a separate, explicit step.
    """
    bullets = to_bullets(merged, config)
    items = parse_action_items(bullets, config)
    issues = detect_action_issues(items, config)
    logger.info(
        "Recap generated: %d bullets, %d action items, %d issues",
        len(bullets),
        len(items),
        len(issues),
    )
    return Outputs(
        summary=make_summary(bullets, config),
        action_items=format_action_items(items, issues, config=config),
        email="",
    )


def generate_follow_up_email(
    highlights: Sequence[FollowUpHighlight],
    *,
    follow_up_type: str | None = None,
    focus_prompt: str | None = None,
    email_prompt: str | None = None,
    meeting_result: MeetingResult = MeetingResult.PENDING,
    meeting_outcome: str | None = None,
    email_type: EmailType = EmailType.FOLLOW_UP,
    email_tone: EmailTone = EmailTone.PROFESSIONAL,
    config: RecapConfig = DEFAULT_RECAP_CONFIG,
) -> str:
    """Draft the follow-up email for a set of highlights."""
    email = make_follow_up_email_draft_from_highlights(
        highlights,
        follow_up_type=follow_up_type,
        focus_prompt=focus_prompt,
        email_prompt=email_prompt,
        meeting_result=meeting_result,
        meeting_outcome=meeting_outcome,
        email_type=email_type,
        email_tone=email_tone,
        config=config,
    )
    logger.info("Follow-up email drafted from %d highlights", len(highlights))
    return email
