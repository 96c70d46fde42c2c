"""Data models for recap artifacts."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import StrEnum

from src.pipeline_config import HighlightTag


class IssueType(StrEnum):
    """Quality check that an action item failed."""

    MISSING_OWNER = "missingOwner"
    MISSING_DUE_DATE = "missingDueDate"
    VAGUE = "vague"


@dataclass(frozen=True)
class ActionItem:
    """A bullet classified as actionable."""

    text: str
    owner: str | None = None
    due: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class ActionIssue:
    """A single failed check, pointing back at its action item."""

    type: IssueType
    message: str
    item_index: int = 0


@dataclass(frozen=True)
class IssueCounts:
    """Aggregate view over a run's issues."""

    missing_owners: int = 0
    missing_due: int = 0
    weak: int = 0
    missing_verb: int = 0


def new_id() -> str:
    """Short random identifier for highlights, sessions and folders."""
    return uuid.uuid4().hex[:8]


@dataclass
class FollowUpHighlight:
    """A curated snippet that drives follow-up email drafting."""

    text: str
    tag: HighlightTag = HighlightTag.NONE
    id: str = field(default_factory=new_id)


@dataclass
class Outputs:
    """The three generated artifacts; each stays blank until generated."""

    summary: str = ""
    action_items: str = ""
    email: str = ""
