"""Render recap artifacts: summary, action-item list and email drafts."""

from __future__ import annotations

from collections.abc import Sequence

from src.pipeline_config import (
    DEFAULT_RECAP_CONFIG,
    EmailTone,
    EmailType,
    HighlightTag,
    MeetingResult,
    RecapConfig,
)
from src.recap.models import ActionIssue, ActionItem, FollowUpHighlight

NO_NOTES_MESSAGE = "No notes provided."
NO_ACTION_ITEMS_MESSAGE = "No obvious action items found."
NO_HIGHLIGHTS_PLACEHOLDER = "(No follow-up items selected yet)"

SUBJECT_BY_TYPE: dict[EmailType, str] = {
    EmailType.FOLLOW_UP: "Follow-up from our meeting",
    EmailType.QUESTION: "Quick question from our meeting",
    EmailType.ACTION_COMPLETE: "Update: action item completed",
    EmailType.ACTION_CLARIFICATION: "Clarification needed on an action item",
    EmailType.CONCERN: "Concern / follow-up from our meeting",
}

INTRO_BY_TYPE: dict[EmailType, str] = {
    EmailType.FOLLOW_UP: "Here are the key points from our discussion:",
    EmailType.QUESTION: "I had a quick question coming out of our discussion:",
    EmailType.ACTION_COMPLETE: "Quick update - we completed the following:",
    EmailType.ACTION_CLARIFICATION: "Could you clarify the following item from our discussion?",
    EmailType.CONCERN: "I wanted to flag a concern and confirm next steps:",
}

GREETING_BY_TONE: dict[EmailTone, str] = {
    EmailTone.PROFESSIONAL: "Hi,",
    EmailTone.WARM: "Hi there,",
    EmailTone.FRIENDLY_PROFESSIONAL: "Hi team,",
    EmailTone.CASUAL: "Hey,",
}

CLOSING_BY_TONE: dict[EmailTone, str] = {
    EmailTone.PROFESSIONAL: "Thanks,",
    EmailTone.WARM: "Thanks so much,",
    EmailTone.FRIENDLY_PROFESSIONAL: "Thanks!",
    EmailTone.CASUAL: "Thanks,",
}


def make_summary(bullets: Sequence[str], config: RecapConfig = DEFAULT_RECAP_CONFIG) -> str:
    """Summarise notes as the first few bullets plus a count of the rest."""
    if not bullets:
        return NO_NOTES_MESSAGE

    top = bullets[: config.summary_max_bullets]
    rest = len(bullets) - len(top)

    lines = ["Summary\n"]
    lines.extend(f"- {bullet}" for bullet in top)
    if rest:
        lines.append(f"\n({rest} additional note{'' if rest == 1 else 's'})")
    return "\n".join(lines)


def format_action_items(
    items: Sequence[ActionItem],
    issues: Sequence[ActionIssue],
    _legacy_pro_mode: bool | None = None,
    *,
    config: RecapConfig = DEFAULT_RECAP_CONFIG,
) -> str:
    """Render action items as a numbered list followed by a Checks section.

    ``_legacy_pro_mode`` is accepted and ignored; older call sites still pass
    a third positional flag.
    """
    if not items:
        return NO_ACTION_ITEMS_MESSAGE

    lines = ["Action Items\n"]
    for i, item in enumerate(items, 1):
        lines.append(f"{i}. {item.text}")
        lines.append(f"   - Owner: {item.owner or 'Unassigned'}")
        lines.append(f"   - Due: {item.due or 'No due date'}")
        if item.notes:
            lines.append(f"   - Notes: {item.notes}")
        lines.append("")

    if issues:
        shown = issues[: config.max_checks_shown]
        lines.append("Checks\n")
        lines.extend(f"- {issue.message}" for issue in shown)
        if len(issues) > len(shown):
            lines.append(f"- (+{len(issues) - len(shown)} more)")

    return "\n".join(lines).strip()


def make_email_draft(
    bullets: Sequence[str],
    *,
    email_type: EmailType = EmailType.FOLLOW_UP,
    tone: EmailTone = EmailTone.PROFESSIONAL,
    subject_override: str | None = None,
    context_lines: Sequence[str] | None = None,
    max_bullets: int | None = None,
    config: RecapConfig = DEFAULT_RECAP_CONFIG,
) -> str:
    """Draft a follow-up email from bullets.

    Args:
        bullets: Points for the email body.
        email_type: Selects the subject line and opening sentence.
        tone: Selects the greeting and closing.
        subject_override: Replaces the type-derived subject when given.
        context_lines: Rendered as a "Context:" block before the body.
        max_bullets: Body size; defaults to ``config.email_max_bullets``.

    Returns:
        The email draft as plain text.
    """
    limit = config.email_max_bullets if max_bullets is None else max_bullets
    body = [f"- {bullet}" for bullet in bullets[:limit]] or ["- No notes provided"]
    subject = subject_override or SUBJECT_BY_TYPE[email_type]

    parts = [
        "Email Draft",
        f"Subject: {subject}",
        "",
        GREETING_BY_TONE[tone],
        "",
    ]
    context = [line for line in context_lines or [] if line.strip()]
    if context:
        parts.append("Context:")
        parts.extend(context)
        parts.append("")
    parts.append(INTRO_BY_TYPE[email_type])
    parts.extend(body)
    parts.extend(["", "Let me know if you have questions.", "", CLOSING_BY_TONE[tone]])
    return "\n".join(parts)


def format_highlight(highlight: FollowUpHighlight) -> str:
    """``[Tag] text``, or bare text when the highlight is untagged."""
    if highlight.tag and highlight.tag != HighlightTag.NONE:
        return f"[{highlight.tag}] {highlight.text}"
    return highlight.text


def make_follow_up_email_draft_from_highlights(
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
    """Draft a follow-up email from curated highlights instead of raw bullets."""
    labelled = [
        ("Follow-up type", follow_up_type),
        ("Meeting result", None if meeting_result == MeetingResult.PENDING else meeting_result),
        ("Focus", focus_prompt),
        ("Meeting outcome", meeting_outcome),
        ("Email instructions", email_prompt),
    ]
    context_lines = [f"{label}: {value.strip()}" for label, value in labelled if value and value.strip()]

    bullets = [format_highlight(h) for h in highlights[: config.max_highlights]]
    if not bullets:
        bullets = [NO_HIGHLIGHTS_PLACEHOLDER]

    subject = None
    if follow_up_type and follow_up_type.strip():
        subject = f"{SUBJECT_BY_TYPE[email_type]} ({follow_up_type.strip()})"

    return make_email_draft(
        bullets,
        email_type=email_type,
        tone=email_tone,
        subject_override=subject,
        context_lines=context_lines,
        max_bullets=config.highlight_email_max_bullets,
        config=config,
    )
