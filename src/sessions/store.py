"""Session persistence behind a small repository interface.

The organizer and the recap pipeline never touch storage directly; callers
inject a repository exposing ``load()`` and ``save(workspace)``.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any, Protocol

from src.pipeline_config import FollowUpType, HighlightTag, MeetingResult
from src.recap.models import FollowUpHighlight, Outputs, new_id
from src.sessions.models import (
    Checkpoint,
    CheckpointReason,
    Folder,
    FollowUp,
    PastMeta,
    Session,
    SessionMode,
    Workspace,
)

logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Keyed store for the whole workspace."""

    def load(self) -> Workspace: ...

    def save(self, workspace: Workspace) -> None: ...


class InMemorySessionRepository:
    """Repository that keeps the serialised workspace in memory."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def load(self) -> Workspace:
        return workspace_from_dict(self._data)

    def save(self, workspace: Workspace) -> None:
        self._data = workspace_to_dict(workspace)


class JsonFileSessionRepository:
    """Repository backed by a single JSON file.

    A missing or unreadable file loads as an empty workspace.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> Workspace:
        if not self.path.exists():
            return Workspace()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.warning("Could not read sessions from %s; starting empty", self.path)
            return Workspace()
        return workspace_from_dict(data)

    def save(self, workspace: Workspace) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(workspace_to_dict(workspace), indent=2), encoding="utf-8")
        tmp_path.replace(self.path)


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


def workspace_to_dict(workspace: Workspace) -> dict[str, Any]:
    return asdict(workspace)


def workspace_from_dict(data: Any) -> Workspace:
    """Rebuild a workspace from stored data, repairing older shapes."""
    if not isinstance(data, dict):
        return Workspace()
    sessions = data.get("sessions")
    folders = data.get("folders")
    return Workspace(
        sessions=[session_from_dict(s) for s in sessions if isinstance(s, dict)]
        if isinstance(sessions, list)
        else [],
        folders=[folder_from_dict(f) for f in folders if isinstance(f, dict)]
        if isinstance(folders, list)
        else [],
    )


def _choice(enum_cls: Any, value: Any, default: Any) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        return default


def _outputs_from_dict(data: Any) -> Outputs:
    data = data if isinstance(data, dict) else {}
    return Outputs(
        summary=data.get("summary") or "",
        action_items=data.get("action_items") or "",
        email=data.get("email") or "",
    )


def _mode_from_value(value: Any) -> SessionMode:
    # Sessions saved before the follow-up planner used "future".
    if value == "future":
        return SessionMode.FOLLOW_UP
    return _choice(SessionMode, value, SessionMode.CURRENT)


def checkpoint_from_dict(data: dict[str, Any]) -> Checkpoint:
    """Unknown reasons, including the retired ``pause``, load as manual."""
    return Checkpoint(
        raw_notes=data.get("raw_notes") or "",
        objective=data.get("objective") or "",
        outputs=_outputs_from_dict(data.get("outputs")),
        reason=_choice(CheckpointReason, data.get("reason"), CheckpointReason.MANUAL),
        timestamp=data.get("timestamp") or data.get("created_at") or time.time(),
    )


def highlight_from_dict(data: dict[str, Any]) -> FollowUpHighlight:
    return FollowUpHighlight(
        text=data.get("text") or "",
        tag=_choice(HighlightTag, data.get("tag"), HighlightTag.NONE),
        id=data.get("id") or new_id(),
    )


def follow_up_from_dict(data: dict[str, Any]) -> FollowUp:
    now = time.time()
    return FollowUp(
        title=data.get("title") or "Follow-Up",
        follow_up_type=_choice(FollowUpType, data.get("follow_up_type"), FollowUpType.EMAIL),
        focus_prompt=data.get("focus_prompt") or "",
        email_prompt=data.get("email_prompt") or "",
        highlights=[highlight_from_dict(h) for h in data.get("highlights") or [] if isinstance(h, dict)],
        email=data.get("email") or "",
        completed=bool(data.get("completed")),
        id=data.get("id") or new_id(),
        created_at=data.get("created_at") or now,
        updated_at=data.get("updated_at") or now,
    )


def session_from_dict(data: dict[str, Any]) -> Session:
    now = time.time()
    past = data.get("past_meta") if isinstance(data.get("past_meta"), dict) else {}
    return Session(
        title=data.get("title") or "Untitled Meeting",
        folder_id=data.get("folder_id"),
        mode=_mode_from_value(data.get("mode")),
        objective=data.get("objective") or "",
        raw_notes=data.get("raw_notes") or "",
        post_meeting_notes=data.get("post_meeting_notes") or "",
        outputs=_outputs_from_dict(data.get("outputs")),
        past_meta=PastMeta(
            meeting_result=_choice(MeetingResult, past.get("meeting_result"), MeetingResult.PENDING),
            meeting_outcome=past.get("meeting_outcome") or "",
        ),
        follow_ups=[follow_up_from_dict(f) for f in data.get("follow_ups") or [] if isinstance(f, dict)],
        checkpoints=[checkpoint_from_dict(c) for c in data.get("checkpoints") or [] if isinstance(c, dict)],
        redo_stack=[checkpoint_from_dict(c) for c in data.get("redo_stack") or [] if isinstance(c, dict)],
        id=data.get("id") or new_id(),
        created_at=data.get("created_at") or now,
        updated_at=data.get("updated_at") or now,
    )


def folder_from_dict(data: dict[str, Any]) -> Folder:
    now = time.time()
    return Folder(
        name=data.get("name") or "Untitled Folder",
        id=data.get("id") or new_id(),
        created_at=data.get("created_at") or now,
        updated_at=data.get("updated_at") or now,
    )
