"""Folder/session organisation and follow-up planning on a workspace."""

from __future__ import annotations

import re
import time
from dataclasses import replace
from enum import StrEnum

from src.pipeline_config import HighlightTag, MeetingResult
from src.recap.models import FollowUpHighlight
from src.sessions.models import Folder, FollowUp, PastMeta, Session, SessionMode

_NUMBERED_ROW_RE = re.compile(r"^\d+\.\s+(.+)$")


class SortMode(StrEnum):
    """Sidebar ordering for sessions."""

    UPDATED = "updated"
    ALPHA = "alpha"


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------


def create_session(folder_id: str | None = None, title: str = "Untitled Meeting") -> Session:
    """New sessions start in the current-meeting stage."""
    return Session(title=title, folder_id=folder_id)


def find_session(sessions: list[Session], session_id: str) -> Session | None:
    return next((s for s in sessions if s.id == session_id), None)


def update_session(sessions: list[Session], updated: Session) -> list[Session]:
    """Swap in *updated* by id, stamping its update time."""
    stamped = replace(updated, updated_at=time.time())
    return [stamped if s.id == updated.id else s for s in sessions]


def delete_session(sessions: list[Session], session_id: str) -> list[Session]:
    return [s for s in sessions if s.id != session_id]


def move_session_to_folder(
    sessions: list[Session], session_id: str, folder_id: str | None
) -> list[Session]:
    """Move a session into a folder, or out of all folders with ``None``."""
    return [
        replace(s, folder_id=folder_id, updated_at=time.time()) if s.id == session_id else s
        for s in sessions
    ]


def sort_sessions(sessions: list[Session], sort_mode: SortMode = SortMode.UPDATED) -> list[Session]:
    """Alphabetical by title, or most recently updated first."""
    if sort_mode is SortMode.ALPHA:
        return sorted(sessions, key=lambda s: s.title.casefold())
    return sorted(sessions, key=lambda s: s.updated_at, reverse=True)


def set_past_meta(
    session: Session, meeting_result: MeetingResult, meeting_outcome: str
) -> Session:
    """Record how a past meeting went."""
    return replace(
        session,
        past_meta=PastMeta(meeting_result=meeting_result, meeting_outcome=meeting_outcome),
        updated_at=time.time(),
    )


# ---------------------------------------------------------------------------
# Folders
# ---------------------------------------------------------------------------


def create_folder(name: str) -> Folder:
    return Folder(name=name.strip() or "Untitled Folder")


def rename_folder(folders: list[Folder], folder_id: str, name: str) -> list[Folder]:
    return [
        replace(f, name=name.strip() or f.name, updated_at=time.time()) if f.id == folder_id else f
        for f in folders
    ]


def delete_folder(
    folders: list[Folder], sessions: list[Session], folder_id: str
) -> tuple[list[Folder], list[Session]]:
    """Remove a folder; its sessions become standalone rather than deleted."""
    remaining = [f for f in folders if f.id != folder_id]
    unfiled = [
        replace(s, folder_id=None, updated_at=time.time()) if s.folder_id == folder_id else s
        for s in sessions
    ]
    return remaining, unfiled


def sessions_in_folder(sessions: list[Session], folder_id: str | None) -> list[Session]:
    return [s for s in sessions if s.folder_id == folder_id]


# ---------------------------------------------------------------------------
# Follow-up plans
# ---------------------------------------------------------------------------


def add_follow_up(session: Session, title: str | None = None) -> Session:
    """Attach a new follow-up plan to a past meeting.

    Raises:
        ValueError: The session is not a past meeting.
    """
    if session.mode is not SessionMode.PAST:
        raise ValueError("Follow-ups can only be planned for past meetings")
    follow_up = FollowUp(title=title or f"Follow-Up {len(session.follow_ups) + 1}")
    return replace(session, follow_ups=[*session.follow_ups, follow_up], updated_at=time.time())


def update_follow_up(session: Session, updated: FollowUp) -> Session:
    stamped = replace(updated, updated_at=time.time())
    return replace(
        session,
        follow_ups=[stamped if f.id == updated.id else f for f in session.follow_ups],
        updated_at=time.time(),
    )


def add_highlight(
    follow_up: FollowUp, text: str, tag: HighlightTag = HighlightTag.NONE
) -> FollowUp:
    """Add a highlight; blank text is ignored."""
    if not text.strip():
        return follow_up
    highlight = FollowUpHighlight(text=text.strip(), tag=tag)
    return replace(follow_up, highlights=[*follow_up.highlights, highlight])


def remove_highlight(follow_up: FollowUp, highlight_id: str) -> FollowUp:
    return replace(follow_up, highlights=[h for h in follow_up.highlights if h.id != highlight_id])


def set_highlight_tag(follow_up: FollowUp, highlight_id: str, tag: HighlightTag) -> FollowUp:
    return replace(
        follow_up,
        highlights=[
            replace(h, tag=tag) if h.id == highlight_id else h for h in follow_up.highlights
        ],
    )


def toggle_follow_up_complete(follow_up: FollowUp) -> FollowUp:
    return replace(follow_up, completed=not follow_up.completed)


def action_item_rows(action_items_text: str) -> list[str]:
    """Numbered rows of a formatted action-item list, ready to promote."""
    rows: list[str] = []
    for line in action_items_text.splitlines():
        match = _NUMBERED_ROW_RE.match(line.strip())
        if match:
            rows.append(match.group(1).strip())
    return rows
