"""Checkpoint history and meeting lifecycle transitions.

Every function returns a new Session; the input session is left untouched.
Destructive edits (clear, generate, end meeting, past-notes edit) push a
checkpoint of the prior state and clear the redo stack.
"""

from __future__ import annotations

import time
from dataclasses import replace
from typing import Any

from src.recap.models import Outputs
from src.sessions.models import Checkpoint, CheckpointReason, Session, SessionMode

MAX_CHECKPOINTS = 50


def make_checkpoint(session: Session, reason: CheckpointReason) -> Checkpoint:
    """Snapshot the session's notes, objective and outputs."""
    return Checkpoint(
        raw_notes=session.raw_notes,
        objective=session.objective,
        outputs=session.outputs,
        reason=reason,
    )


def same_state(a: Checkpoint, b: Checkpoint) -> bool:
    """Compare checkpoints ignoring reason and timestamp."""
    return a.raw_notes == b.raw_notes and a.objective == b.objective and a.outputs == b.outputs


def push_checkpoint(
    checkpoints: list[Checkpoint],
    checkpoint: Checkpoint,
    limit: int = MAX_CHECKPOINTS,
) -> list[Checkpoint]:
    """Append *checkpoint* unless it repeats the last one; keep the newest *limit*."""
    if checkpoints and same_state(checkpoints[-1], checkpoint):
        return list(checkpoints)
    return [*checkpoints, checkpoint][-limit:]


def apply_destructive(session: Session, reason: CheckpointReason, **changes: Any) -> Session:
    """Checkpoint the current state, clear redo, then apply *changes*."""
    return replace(
        session,
        checkpoints=push_checkpoint(session.checkpoints, make_checkpoint(session, reason)),
        redo_stack=[],
        **changes,
        updated_at=time.time(),
    )


def record_generation(session: Session, outputs: Outputs) -> Session:
    """Store freshly generated outputs."""
    return apply_destructive(session, CheckpointReason.GENERATE, outputs=outputs)


def end_meeting(session: Session, outputs: Outputs) -> Session:
    """Regenerate outputs and move the session into the past-meeting stage."""
    return apply_destructive(session, CheckpointReason.END, outputs=outputs, mode=SessionMode.PAST)


def clear_session(session: Session) -> Session:
    """Blank the notes, objective and outputs."""
    return apply_destructive(
        session, CheckpointReason.CLEAR, raw_notes="", objective="", outputs=Outputs()
    )


def save_past_edit(session: Session, raw_notes: str, outputs: Outputs) -> Session:
    """Replace a past meeting's raw notes along with regenerated outputs.

    Raises:
        ValueError: The session is not a past meeting.
    """
    if session.mode is not SessionMode.PAST:
        raise ValueError("Only past meetings can have their notes edited")
    return apply_destructive(session, CheckpointReason.MANUAL, raw_notes=raw_notes, outputs=outputs)


def _restore(session: Session, checkpoint: Checkpoint, **stacks: list[Checkpoint]) -> Session:
    return replace(
        session,
        raw_notes=checkpoint.raw_notes,
        objective=checkpoint.objective,
        outputs=checkpoint.outputs,
        **stacks,
        updated_at=time.time(),
    )


def undo(session: Session) -> Session:
    """Restore the latest checkpoint; the current state goes onto the redo stack."""
    if not session.checkpoints:
        return session
    return _restore(
        session,
        session.checkpoints[-1],
        checkpoints=session.checkpoints[:-1],
        redo_stack=[*session.redo_stack, make_checkpoint(session, CheckpointReason.MANUAL)],
    )


def redo(session: Session) -> Session:
    """Re-apply the latest undone state; the current state becomes a checkpoint."""
    if not session.redo_stack:
        return session
    return _restore(
        session,
        session.redo_stack[-1],
        redo_stack=session.redo_stack[:-1],
        checkpoints=[*session.checkpoints, make_checkpoint(session, CheckpointReason.MANUAL)],
    )
