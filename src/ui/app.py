"""RecapKit -- Streamlit UI.

Organise meeting sessions in folders, paste notes, generate a summary and
action items, and plan follow-up emails for past meetings.  Sessions are
stored locally in a JSON file; artifact generation goes through the API.
"""

from __future__ import annotations

from dataclasses import replace

import streamlit as st

from src.config import settings
from src.pipeline_config import EmailTone, EmailType, FollowUpType, HighlightTag, MeetingResult
from src.recap.models import Outputs
from src.sessions import history, organizer
from src.sessions.models import Session, SessionMode, Workspace
from src.sessions.store import JsonFileSessionRepository
from src.ui.api_client import check_health, draft_follow_up_email, generate_outputs

repository = JsonFileSessionRepository(settings.sessions_path)

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(page_title="RecapKit", layout="wide")

workspace = repository.load()


def persist(updated: Workspace) -> None:
    repository.save(updated)
    st.rerun()


def save_session(session: Session) -> None:
    persist(replace(workspace, sessions=organizer.update_session(workspace.sessions, session)))


def fetch_outputs(session: Session, raw_notes: str | None = None) -> Outputs | None:
    result = generate_outputs(
        raw_notes if raw_notes is not None else session.raw_notes,
        session.post_meeting_notes,
        session.past_meta.meeting_outcome,
    )
    if not result:
        return None
    return Outputs(summary=result.get("summary", ""), action_items=result.get("actionItems", ""))


# ---------------------------------------------------------------------------
# Sidebar -- folders, sessions, API status
# ---------------------------------------------------------------------------
with st.sidebar:
    st.title("RecapKit")
    st.caption("Turning your meetings into actionable and accountable follow-ups")
    st.markdown("---")

    sort_mode = st.selectbox(
        "Sort sessions",
        options=[m.value for m in organizer.SortMode],
        format_func=lambda x: "Recently updated" if x == "updated" else "A-Z",
    )
    ordered = organizer.sort_sessions(workspace.sessions, organizer.SortMode(sort_mode))

    if st.button("New session"):
        created = organizer.create_session()
        st.session_state["session_id"] = created.id
        persist(replace(workspace, sessions=[created, *workspace.sessions]))

    new_folder_name = st.text_input("New folder", placeholder="e.g. Client calls")
    if st.button("Create folder", disabled=not new_folder_name.strip()):
        persist(replace(workspace, folders=[*workspace.folders, organizer.create_folder(new_folder_name)]))

    st.markdown("---")
    for session in organizer.sessions_in_folder(ordered, None):
        if st.button(session.title, key=f"open-{session.id}"):
            st.session_state["session_id"] = session.id

    for folder in workspace.folders:
        with st.expander(folder.name):
            for session in organizer.sessions_in_folder(ordered, folder.id):
                if st.button(session.title, key=f"open-{session.id}"):
                    st.session_state["session_id"] = session.id
            folder_name = st.text_input("Folder name", value=folder.name, key=f"name-{folder.id}")
            if folder_name.strip() != folder.name and st.button("Rename", key=f"rename-{folder.id}"):
                folders = organizer.rename_folder(workspace.folders, folder.id, folder_name)
                persist(replace(workspace, folders=folders))
            if st.button("New session here", key=f"new-in-{folder.id}"):
                created = organizer.create_session(folder_id=folder.id)
                st.session_state["session_id"] = created.id
                persist(replace(workspace, sessions=[created, *workspace.sessions]))
            if st.button("Delete folder", key=f"delete-{folder.id}"):
                folders, sessions = organizer.delete_folder(workspace.folders, workspace.sessions, folder.id)
                persist(Workspace(sessions=sessions, folders=folders))

    st.markdown("---")
    api_healthy = check_health()
    if api_healthy:
        st.markdown(":green_circle: API connected")
    else:
        st.markdown(":red_circle: API unreachable")

# ---------------------------------------------------------------------------
# Home
# ---------------------------------------------------------------------------
current = organizer.find_session(workspace.sessions, st.session_state.get("session_id", ""))
if current is None:
    st.header("RecapKit")
    st.write("Create a session from the sidebar, paste your meeting notes, and generate a recap.")
    st.stop()

# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------
s = current
st.header(s.title)
st.caption(f"Stage: {s.mode.value}")

col_folder, col_delete = st.columns([4, 1])
folder_ids = [None, *(f.id for f in workspace.folders)]
folder_names = {f.id: f.name for f in workspace.folders}
target_folder = col_folder.selectbox(
    "Folder",
    folder_ids,
    index=folder_ids.index(s.folder_id) if s.folder_id in folder_ids else 0,
    format_func=lambda fid: folder_names.get(fid, "No folder"),
)
if target_folder != s.folder_id:
    persist(
        replace(
            workspace,
            sessions=organizer.move_session_to_folder(workspace.sessions, s.id, target_folder),
        )
    )
if col_delete.button("Delete session"):
    st.session_state.pop("session_id", None)
    persist(replace(workspace, sessions=organizer.delete_session(workspace.sessions, s.id)))

title = st.text_input("Title", value=s.title)
objective = st.text_input("Objective", value=s.objective)
is_past = s.mode is SessionMode.PAST
raw_notes = st.text_area("Notes", value=s.raw_notes, height=240, disabled=is_past)
post_meeting_notes = s.post_meeting_notes
if is_past:
    post_meeting_notes = st.text_area("Post-meeting notes", value=s.post_meeting_notes, height=120)

if (title, objective, raw_notes, post_meeting_notes) != (
    s.title,
    s.objective,
    s.raw_notes,
    s.post_meeting_notes,
):
    if st.button("Save changes"):
        save_session(
            replace(
                s,
                title=title,
                objective=objective,
                raw_notes=raw_notes,
                post_meeting_notes=post_meeting_notes,
            )
        )

col_gen, col_end, col_undo, col_redo, col_clear = st.columns(5)
if col_gen.button("Generate", disabled=not api_healthy):
    outputs = fetch_outputs(s)
    if outputs:
        save_session(history.record_generation(s, outputs))
if col_end.button("End meeting", disabled=is_past or not api_healthy):
    outputs = fetch_outputs(s)
    if outputs:
        save_session(history.end_meeting(s, outputs))
if col_undo.button(f"Undo ({len(s.checkpoints)})", disabled=not s.checkpoints):
    save_session(history.undo(s))
if col_redo.button(f"Redo ({len(s.redo_stack)})", disabled=not s.redo_stack):
    save_session(history.redo(s))
if col_clear.button("Clear"):
    save_session(history.clear_session(s))

if is_past:
    with st.expander("Edit past notes"):
        st.warning("Editing regenerates the summary and action items.")
        edited = st.text_area("Raw notes", value=s.raw_notes, key="past-edit")
        if st.button("Save edit", disabled=not api_healthy):
            outputs = fetch_outputs(s, raw_notes=edited)
            if outputs:
                save_session(history.save_past_edit(s, edited, outputs))

col_summary, col_actions = st.columns(2)
with col_summary:
    st.subheader("Summary")
    st.text(s.outputs.summary or "Generate to see a summary.")
with col_actions:
    st.subheader("Action Items")
    st.text(s.outputs.action_items or "Generate to see action items.")

if not is_past:
    st.stop()

# ---------------------------------------------------------------------------
# Past meeting -- result, outcome and follow-up planning
# ---------------------------------------------------------------------------
st.markdown("---")
st.subheader("Meeting result")
results = [r.value for r in MeetingResult]
meeting_result = st.selectbox("Result", results, index=results.index(s.past_meta.meeting_result))
meeting_outcome = st.text_area("Outcome", value=s.past_meta.meeting_outcome)
if (meeting_result, meeting_outcome) != (s.past_meta.meeting_result, s.past_meta.meeting_outcome):
    if st.button("Save result"):
        save_session(organizer.set_past_meta(s, MeetingResult(meeting_result), meeting_outcome))

st.subheader("Follow-ups")
if st.button("Add follow-up"):
    save_session(organizer.add_follow_up(s))

for follow_up in s.follow_ups:
    label = f"{follow_up.title}{' (done)' if follow_up.completed else ''}"
    with st.expander(label, expanded=not follow_up.completed):
        types = [t.value for t in FollowUpType]
        follow_up_type = st.selectbox(
            "Type", types, index=types.index(follow_up.follow_up_type), key=f"type-{follow_up.id}"
        )
        focus = st.text_input("Focus", value=follow_up.focus_prompt, key=f"focus-{follow_up.id}")
        instructions = st.text_input(
            "Email instructions", value=follow_up.email_prompt, key=f"prompt-{follow_up.id}"
        )

        st.markdown("**Highlights**")
        tags = [t.value for t in HighlightTag]
        for h in follow_up.highlights:
            col_text, col_tag, col_remove = st.columns([6, 2, 1])
            col_text.write(h.text)
            tag = col_tag.selectbox("Tag", tags, index=tags.index(h.tag), key=f"tag-{h.id}")
            if tag != h.tag:
                updated = organizer.set_highlight_tag(follow_up, h.id, HighlightTag(tag))
                save_session(organizer.update_follow_up(s, updated))
            if col_remove.button("Remove", key=f"remove-{h.id}"):
                save_session(organizer.update_follow_up(s, organizer.remove_highlight(follow_up, h.id)))

        rows = organizer.action_item_rows(s.outputs.action_items)
        promote = st.selectbox("Promote action item", ["", *rows], key=f"promote-{follow_up.id}")
        custom = st.text_input("Or add custom text", key=f"custom-{follow_up.id}")
        if st.button("Add highlight", key=f"add-{follow_up.id}", disabled=not (promote or custom.strip())):
            updated = organizer.add_highlight(follow_up, promote or custom)
            save_session(organizer.update_follow_up(s, updated))

        col_type, col_tone = st.columns(2)
        email_type = col_type.selectbox("Email type", [t.value for t in EmailType], key=f"etype-{follow_up.id}")
        email_tone = col_tone.selectbox("Email tone", [t.value for t in EmailTone], key=f"etone-{follow_up.id}")

        col_draft, col_done = st.columns(2)
        if col_draft.button("Draft email", key=f"draft-{follow_up.id}", disabled=not api_healthy):
            result = draft_follow_up_email(
                [{"text": h.text, "tag": h.tag.value} for h in follow_up.highlights],
                follow_up_type=follow_up_type,
                focus_prompt=focus,
                email_prompt=instructions,
                meeting_result=s.past_meta.meeting_result.value,
                meeting_outcome=s.past_meta.meeting_outcome,
                email_type=email_type,
                email_tone=email_tone,
            )
            if result:
                updated = replace(
                    follow_up,
                    follow_up_type=FollowUpType(follow_up_type),
                    focus_prompt=focus,
                    email_prompt=instructions,
                    email=result.get("email", ""),
                )
                save_session(organizer.update_follow_up(s, updated))
        if col_done.button("Mark incomplete" if follow_up.completed else "Mark complete", key=f"done-{follow_up.id}"):
            save_session(organizer.update_follow_up(s, organizer.toggle_follow_up_complete(follow_up)))

        if follow_up.email:
            st.text_area("Email draft", value=follow_up.email, height=260, key=f"email-{follow_up.id}")
