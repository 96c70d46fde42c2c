"""Recap configuration: vocabulary enums and the RecapConfig dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class EmailType(StrEnum):
    """Purpose of a drafted email; selects subject and opening sentence."""

    FOLLOW_UP = "followUp"
    QUESTION = "question"
    ACTION_COMPLETE = "actionComplete"
    ACTION_CLARIFICATION = "actionClarification"
    CONCERN = "concern"


class EmailTone(StrEnum):
    """Voice of a drafted email; selects greeting and closing."""

    PROFESSIONAL = "professional"
    WARM = "warm"
    FRIENDLY_PROFESSIONAL = "friendlyProfessional"
    CASUAL = "casual"


class MeetingResult(StrEnum):
    """How a past meeting turned out."""

    COMPLETED = "Completed"
    NO_SHOW = "No Show"
    RESCHEDULED = "Rescheduled"
    CANCELLED = "Cancelled"
    BLOCKED = "Blocked"
    PENDING = "Pending"


class HighlightTag(StrEnum):
    """Category tag on a follow-up highlight."""

    NONE = "None"
    EMAIL = "Email"
    CALL = "Call"
    MEETING = "Meeting"
    URGENT = "Urgent"
    OTHER = "Other"


class FollowUpType(StrEnum):
    """Channel planned for a follow-up."""

    EMAIL = "Email"
    PHONE_CALL = "Phone Call"
    IN_PERSON_MEETING = "In-Person Meeting"
    VIDEO_CALL = "Video Call"
    TEXT_MESSAGE = "Text Message"
    OTHER = "Other"


@dataclass(frozen=True)
class RecapConfig:
    """Immutable tuning for the notes-to-artifacts heuristics.

    The vocabularies were iterated on repeatedly, so they live here rather
    than inside the regexes that use them.  Multi-word entries match across
    any run of whitespace or hyphens (``follow up`` also matches
    ``follow-up``).
    """

    action_verbs: tuple[str, ...] = (
        "follow up",
        "send",
        "share",
        "email",
        "schedule",
        "book",
        "call",
        "confirm",
        "ask",
        "create",
        "update",
        "review",
        "meet",
        "prepare",
        "decide",
        "draft",
        "finalize",
        "fix",
        "ship",
        "deliver",
        "contact",
    )
    owner_subject_verbs: tuple[str, ...] = (
        "will",
        "to",
        "is going to",
        "needs to",
        "should",
    )
    relative_due_tokens: tuple[str, ...] = (
        "today",
        "tomorrow",
        "this week",
        "next week",
        "end of day",
        "eod",
        "eow",
    )
    due_hint_tokens: tuple[str, ...] = ("today", "tomorrow", "next week")
    vague_phrases: tuple[str, ...] = ("look into", "check on", "touch base")
    vague_min_chars: int = 20

    # Output shaping
    fallback_item_count: int = 5
    action_item_cap: int | None = None
    summary_max_bullets: int = 6
    max_checks_shown: int = 8
    email_max_bullets: int = 6
    highlight_email_max_bullets: int = 20
    max_highlights: int = 50
    prose_min_chars: int = 80


DEFAULT_RECAP_CONFIG = RecapConfig()
