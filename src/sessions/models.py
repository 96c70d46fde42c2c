"""Data models for locally stored sessions, folders and follow-up plans."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum

from src.pipeline_config import FollowUpType, MeetingResult
from src.recap.models import FollowUpHighlight, Outputs, new_id


class SessionMode(StrEnum):
    """Lifecycle stage of a meeting session."""

    CURRENT = "current"
    PAST = "past"
    FOLLOW_UP = "followUp"


class CheckpointReason(StrEnum):
    """Why a checkpoint was taken."""

    CLEAR = "clear"
    GENERATE = "generate"
    END = "end"
    MANUAL = "manual"


@dataclass(frozen=True)
class Checkpoint:
    """Snapshot of a session's editable state, used for undo/redo."""

    raw_notes: str
    objective: str
    outputs: Outputs
    reason: CheckpointReason = CheckpointReason.MANUAL
    timestamp: float = field(default_factory=time.time)


@dataclass
class PastMeta:
    """Post-meeting annotations on a past session."""

    meeting_result: MeetingResult = MeetingResult.PENDING
    meeting_outcome: str = ""


@dataclass
class FollowUp:
    """A follow-up plan attached to a past session."""

    title: str
    follow_up_type: FollowUpType = FollowUpType.EMAIL
    focus_prompt: str = ""
    email_prompt: str = ""
    highlights: list[FollowUpHighlight] = field(default_factory=list)
    email: str = ""
    completed: bool = False
    id: str = field(default_factory=new_id)
    created_at: float = field(default_factory=time.time)
    updated_at: float = field(default_factory=time.time)


@dataclass
class Session:
    """One meeting's notes, generated artifacts and history."""

    title: str = "Untitled Meeting"
    folder_id: str | None = None
    mode: SessionMode = SessionMode.CURRENT
    objective: str = ""
    raw_notes: str = ""
    post_meeting_notes: str = ""
    outputs: Outputs = field(default_factory=Outputs)
    past_meta: PastMeta = field(default_factory=PastMeta)
    follow_ups: list[FollowUp] = field(default_factory=list)
    checkpoints: list[Checkpoint] = field(default_factory=list)
    redo_stack: list[Checkpoint] = field(default_factory=list)
    id: str = field(default_factory=new_id)
    created_at: float = field(default_factory=time.time)
    updated_at: float = field(default_factory=time.time)


@dataclass
class Folder:
    """A named group of sessions."""

    name: str
    id: str = field(default_factory=new_id)
    created_at: float = field(default_factory=time.time)
    updated_at: float = field(default_factory=time.time)


@dataclass
class Workspace:
    """Everything the session repository persists."""

    sessions: list[Session] = field(default_factory=list)
    folders: list[Folder] = field(default_factory=list)
