"""Render a recap (summary, action items, optional email) from a notes file."""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import settings
from src.pipeline_config import EmailTone, EmailType
from src.recap.bullets import to_bullets
from src.recap.errors import RecapError
from src.recap.formatters import make_email_draft
from src.recap.pipeline import generate_artifacts, merge_notes, validate_merged_notes


def recap_notes(
    raw_notes: str,
    post_meeting_notes: str = "",
    meeting_outcome: str = "",
    email_type: str | None = None,
    email_tone: str = EmailTone.PROFESSIONAL,
) -> str:
    """Build the printable recap for one set of notes.

    Raises:
        RecapError: The notes are empty or too long.
    """
    merged = merge_notes(raw_notes, post_meeting_notes, meeting_outcome)
    validate_merged_notes(merged, settings.max_input_chars)

    outputs = generate_artifacts(merged)
    sections = [outputs.summary, outputs.action_items]
    if email_type:
        sections.append(
            make_email_draft(
                to_bullets(merged),
                email_type=EmailType(email_type),
                tone=EmailTone(email_tone),
            )
        )
    return "\n\n".join(sections)


def _read(path: str | None) -> str:
    if not path:
        return ""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("notes", help="notes file, or - for stdin")
    parser.add_argument("--post-notes", default=None, help="post-meeting notes file")
    parser.add_argument("--outcome", default="", help="meeting outcome text")
    parser.add_argument("--email-type", choices=[t.value for t in EmailType], default=None)
    parser.add_argument("--tone", choices=[t.value for t in EmailTone], default=EmailTone.PROFESSIONAL.value)
    args = parser.parse_args()

    try:
        print(
            recap_notes(
                _read(args.notes),
                _read(args.post_notes),
                args.outcome,
                email_type=args.email_type,
                email_tone=args.tone,
            )
        )
    except RecapError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
