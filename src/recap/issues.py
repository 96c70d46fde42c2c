"""Quality checks on extracted action items."""

from __future__ import annotations

import re
from collections.abc import Sequence

from src.pipeline_config import DEFAULT_RECAP_CONFIG, RecapConfig
from src.recap.actions import ISO_DATE_RE, WEEKDAY_RE, has_action_verb, phrase_pattern
from src.recap.models import ActionIssue, ActionItem, IssueCounts, IssueType

_OWNER_HINT_SUBSTRINGS = ("@", "owner:", "assigned to")
_OWNER_HINT_RE = re.compile(r"\b(?:i|we)\s+will\b", re.IGNORECASE)


def has_owner(item: ActionItem) -> bool:
    """An owner was extracted, or the text carries an ownership cue."""
    if item.owner:
        return True
    lower = item.text.lower()
    return any(hint in lower for hint in _OWNER_HINT_SUBSTRINGS) or bool(
        _OWNER_HINT_RE.search(item.text)
    )


def has_due_date(item: ActionItem, config: RecapConfig = DEFAULT_RECAP_CONFIG) -> bool:
    """A due date was extracted, or the text mentions a date-like token."""
    if item.due:
        return True
    return any(
        pattern.search(item.text)
        for pattern in (phrase_pattern(config.due_hint_tokens), WEEKDAY_RE, ISO_DATE_RE)
    )


def is_vague(item: ActionItem, config: RecapConfig = DEFAULT_RECAP_CONFIG) -> bool:
    """Too short to act on, or phrased as a non-commitment."""
    if len(item.text) < config.vague_min_chars:
        return True
    return phrase_pattern(config.vague_phrases).search(item.text) is not None


def detect_action_issues(
    items: Sequence[ActionItem], config: RecapConfig = DEFAULT_RECAP_CONFIG
) -> list[ActionIssue]:
    """Run every check on every item; checks never suppress each other.

    Returns one ActionIssue per failed check, in item order, each carrying
    the index of the item it refers to.
    """
    issues: list[ActionIssue] = []
    for index, item in enumerate(items):
        if not has_owner(item):
            issues.append(
                ActionIssue(
                    type=IssueType.MISSING_OWNER,
                    message=f'Missing owner: "{item.text}"',
                    item_index=index,
                )
            )
        if not has_due_date(item, config):
            issues.append(
                ActionIssue(
                    type=IssueType.MISSING_DUE_DATE,
                    message=f'Missing due date: "{item.text}"',
                    item_index=index,
                )
            )
        if is_vague(item, config):
            issues.append(
                ActionIssue(
                    type=IssueType.VAGUE,
                    message=f'Possibly vague: "{item.text}"',
                    item_index=index,
                )
            )
    return issues


def count_action_issues(
    items: Sequence[ActionItem],
    issues: Sequence[ActionIssue],
    config: RecapConfig = DEFAULT_RECAP_CONFIG,
) -> IssueCounts:
    """Aggregate counts derived from the itemized issues."""
    by_type = {issue_type: 0 for issue_type in IssueType}
    for issue in issues:
        by_type[issue.type] += 1
    return IssueCounts(
        missing_owners=by_type[IssueType.MISSING_OWNER],
        missing_due=by_type[IssueType.MISSING_DUE_DATE],
        weak=by_type[IssueType.VAGUE],
        missing_verb=sum(1 for item in items if not has_action_verb(item.text, config)),
    )
