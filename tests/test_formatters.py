"""Tests for summary, action-item and email formatters."""

from __future__ import annotations

import pytest

from src.pipeline_config import EmailTone, EmailType, HighlightTag, MeetingResult
from src.recap.formatters import (
    CLOSING_BY_TONE,
    GREETING_BY_TONE,
    INTRO_BY_TYPE,
    NO_ACTION_ITEMS_MESSAGE,
    NO_HIGHLIGHTS_PLACEHOLDER,
    NO_NOTES_MESSAGE,
    SUBJECT_BY_TYPE,
    format_action_items,
    format_highlight,
    make_email_draft,
    make_follow_up_email_draft_from_highlights,
    make_summary,
)
from src.recap.models import ActionIssue, ActionItem, FollowUpHighlight, IssueType


def _bullet_lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.startswith("- ")]


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


class TestMakeSummary:
    def test_empty(self) -> None:
        assert make_summary([]) == NO_NOTES_MESSAGE

    def test_short_list(self) -> None:
        assert make_summary(["a", "b"]) == "Summary\n\n- a\n- b"

    def test_exactly_six(self) -> None:
        bullets = [f"Point {n}" for n in range(6)]
        summary = make_summary(bullets)
        assert len(_bullet_lines(summary)) == 6
        assert "additional" not in summary

    def test_one_additional_note(self) -> None:
        summary = make_summary([f"Point {n}" for n in range(7)])
        assert summary.endswith("- Point 5\n\n(1 additional note)")

    def test_several_additional_notes(self) -> None:
        summary = make_summary([f"Point {n}" for n in range(9)])
        assert len(_bullet_lines(summary)) == 6
        assert summary.endswith("(3 additional notes)")


# ---------------------------------------------------------------------------
# Action items
# ---------------------------------------------------------------------------


class TestFormatActionItems:
    def test_empty(self) -> None:
        assert format_action_items([], []) == NO_ACTION_ITEMS_MESSAGE

    def test_scenario(self) -> None:
        items = [
            ActionItem(text="Send report by Friday", due="Friday"),
            ActionItem(text="Schedule follow-up call"),
        ]
        issues = [
            ActionIssue(IssueType.MISSING_OWNER, 'Missing owner: "Send report by Friday"', 0),
            ActionIssue(IssueType.MISSING_OWNER, 'Missing owner: "Schedule follow-up call"', 1),
            ActionIssue(IssueType.MISSING_DUE_DATE, 'Missing due date: "Schedule follow-up call"', 1),
        ]
        assert format_action_items(items, issues) == (
            "Action Items\n"
            "\n"
            "1. Send report by Friday\n"
            "   - Owner: Unassigned\n"
            "   - Due: Friday\n"
            "\n"
            "2. Schedule follow-up call\n"
            "   - Owner: Unassigned\n"
            "   - Due: No due date\n"
            "\n"
            "Checks\n"
            "\n"
            '- Missing owner: "Send report by Friday"\n'
            '- Missing owner: "Schedule follow-up call"\n'
            '- Missing due date: "Schedule follow-up call"'
        )

    def test_notes_line_and_no_checks(self) -> None:
        items = [ActionItem(text="Send deck", owner="Maya", due="EOD", notes="include Q3")]
        assert format_action_items(items, []) == (
            "Action Items\n"
            "\n"
            "1. Send deck\n"
            "   - Owner: Maya\n"
            "   - Due: EOD\n"
            "   - Notes: include Q3"
        )

    def test_checks_truncated(self) -> None:
        items = [ActionItem(text=f"Fix {n}") for n in range(4)]
        issues = [
            ActionIssue(IssueType.VAGUE, f"issue {n}", n // 3) for n in range(12)
        ]
        text = format_action_items(items, issues)
        checks = text.split("Checks\n", 1)[1]
        assert len(_bullet_lines(checks)) == 9
        assert checks.endswith("- (+4 more)")
        assert "- issue 7" in checks
        assert "- issue 8" not in checks

    def test_legacy_third_argument_is_ignored(self) -> None:
        items = [ActionItem(text="Send deck")]
        assert format_action_items(items, [], True) == format_action_items(items, [])


# ---------------------------------------------------------------------------
# Email drafts
# ---------------------------------------------------------------------------


class TestMakeEmailDraft:
    @pytest.mark.parametrize("email_type", list(EmailType))
    @pytest.mark.parametrize("tone", list(EmailTone))
    def test_every_type_and_tone(self, email_type: EmailType, tone: EmailTone) -> None:
        draft = make_email_draft(["Budget approved"], email_type=email_type, tone=tone)
        lines = draft.splitlines()
        assert lines[0] == "Email Draft"
        assert lines[1] == f"Subject: {SUBJECT_BY_TYPE[email_type]}"
        assert lines[3] == GREETING_BY_TONE[tone]
        assert INTRO_BY_TYPE[email_type] in lines
        assert "- Budget approved" in lines
        assert "Let me know if you have questions." in lines
        assert lines[-1] == CLOSING_BY_TONE[tone]

    def test_exact_layout(self) -> None:
        assert make_email_draft(["Budget approved", "Hiring paused"]) == (
            "Email Draft\n"
            "Subject: Follow-up from our meeting\n"
            "\n"
            "Hi,\n"
            "\n"
            "Here are the key points from our discussion:\n"
            "- Budget approved\n"
            "- Hiring paused\n"
            "\n"
            "Let me know if you have questions.\n"
            "\n"
            "Thanks,"
        )

    def test_no_bullets_placeholder(self) -> None:
        assert _bullet_lines(make_email_draft([])) == ["- No notes provided"]

    def test_default_limit(self) -> None:
        draft = make_email_draft([f"Point {n}" for n in range(10)])
        assert _bullet_lines(draft) == [f"- Point {n}" for n in range(6)]

    def test_explicit_limit(self) -> None:
        draft = make_email_draft([f"Point {n}" for n in range(10)], max_bullets=2)
        assert len(_bullet_lines(draft)) == 2

    def test_subject_override(self) -> None:
        draft = make_email_draft(["x"], email_type=EmailType.CONCERN, subject_override="Re: launch")
        assert "Subject: Re: launch" in draft.splitlines()

    def test_context_block_before_intro(self) -> None:
        draft = make_email_draft(["x"], context_lines=["Focus: pricing", "  "])
        lines = draft.splitlines()
        start = lines.index("Context:")
        assert lines[start + 1] == "Focus: pricing"
        assert lines[start + 2] == ""
        assert lines.index(INTRO_BY_TYPE[EmailType.FOLLOW_UP]) == start + 3

    def test_blank_context_is_omitted(self) -> None:
        assert "Context:" not in make_email_draft(["x"], context_lines=["", " "])


# ---------------------------------------------------------------------------
# Highlights email
# ---------------------------------------------------------------------------


class TestHighlightsEmail:
    def test_format_highlight(self) -> None:
        assert format_highlight(FollowUpHighlight("Ship v2", HighlightTag.URGENT)) == "[Urgent] Ship v2"
        assert format_highlight(FollowUpHighlight("Ship v2")) == "Ship v2"

    def test_scenario(self) -> None:
        draft = make_follow_up_email_draft_from_highlights(
            [
                FollowUpHighlight("Confirm launch date", HighlightTag.URGENT),
                FollowUpHighlight("Share pricing deck"),
            ],
            email_type=EmailType.CONCERN,
            email_tone=EmailTone.WARM,
        )
        lines = draft.splitlines()
        assert lines[1] == "Subject: Concern / follow-up from our meeting"
        assert lines[3] == "Hi there,"
        assert INTRO_BY_TYPE[EmailType.CONCERN] in lines
        assert _bullet_lines(draft) == ["- [Urgent] Confirm launch date", "- Share pricing deck"]
        assert lines[-1] == "Thanks so much,"
        assert "Context:" not in lines

    def test_placeholder_when_no_highlights(self) -> None:
        draft = make_follow_up_email_draft_from_highlights([])
        assert _bullet_lines(draft) == [f"- {NO_HIGHLIGHTS_PLACEHOLDER}"]

    def test_pending_result_is_omitted(self) -> None:
        draft = make_follow_up_email_draft_from_highlights(
            [FollowUpHighlight("x")], meeting_result=MeetingResult.PENDING
        )
        assert "Meeting result" not in draft

    def test_context_lines(self) -> None:
        draft = make_follow_up_email_draft_from_highlights(
            [FollowUpHighlight("x")],
            follow_up_type="Phone Call",
            focus_prompt="pricing",
            email_prompt="keep it short",
            meeting_result=MeetingResult.COMPLETED,
            meeting_outcome="Signed",
        )
        lines = draft.splitlines()
        start = lines.index("Context:")
        assert lines[start + 1 : start + 6] == [
            "Follow-up type: Phone Call",
            "Meeting result: Completed",
            "Focus: pricing",
            "Meeting outcome: Signed",
            "Email instructions: keep it short",
        ]

    def test_follow_up_type_in_subject(self) -> None:
        draft = make_follow_up_email_draft_from_highlights(
            [FollowUpHighlight("x")], follow_up_type="Video Call", email_type=EmailType.QUESTION
        )
        assert "Subject: Quick question from our meeting (Video Call)" in draft.splitlines()

    def test_body_capped(self) -> None:
        highlights = [FollowUpHighlight(f"Item {n}") for n in range(60)]
        draft = make_follow_up_email_draft_from_highlights(highlights)
        assert len(_bullet_lines(draft)) == 20
