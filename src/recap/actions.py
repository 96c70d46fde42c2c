"""Heuristic action-item extraction: owner, due date and notes per bullet."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from src.pipeline_config import DEFAULT_RECAP_CONFIG, RecapConfig
from src.recap.bullets import strip_marker
from src.recap.models import ActionItem

# Owner patterns.  Tag words are case-insensitive, names are not.
_NAME = r"[A-Za-z][A-Za-z'.-]*(?:\s+[A-Z][A-Za-z'.-]*)?"
_HANDLE_RE = re.compile(r"@([A-Za-z0-9_]+)")
_OWNER_TAG_RE = re.compile(rf"\b(?i:owner):\s*({_NAME})")
_ASSIGNED_TO_RE = re.compile(rf"\b(?i:assigned\s+to)\s+({_NAME})")
_NAMED_WILL_RE = re.compile(r"^([A-Z][a-zA-Z'.-]{1,20})\s+will\b")
_FIRST_PERSON_RE = re.compile(r"\bi\s+will\b", re.IGNORECASE)
_FIRST_PERSON_PLURAL_RE = re.compile(r"\bwe\s+will\b", re.IGNORECASE)

# Due-date patterns
ISO_DATE_RE = re.compile(r"\b\d{4}-\d{2}-\d{2}\b")
WEEKDAY_RE = re.compile(
    r"\b(?:mon|tues?|wed(?:nes)?|thu(?:rs?)?|fri|sat(?:ur)?|sun)(?:day)?\b",
    re.IGNORECASE,
)

# Notes patterns
_NOTE_TAG_RE = re.compile(r"\b(?i:note):\s*(.+)$")
_TRAILING_PAREN_RE = re.compile(r"\(([^)]+)\)\s*$")

_ACTION_PREFIX_RE = re.compile(r"^action:\s*", re.IGNORECASE)
_EXPLICIT_ACTION_RE = re.compile(r"^(?:action:|to\s+\w+)", re.IGNORECASE)


def phrase_pattern(phrases: Iterable[str]) -> re.Pattern[str]:
    """Compile a whole-word, case-insensitive alternation of *phrases*.

    Words inside a phrase may be separated by whitespace or hyphens, so
    ``"follow up"`` also matches ``"follow-up"``.
    """
    alternatives = sorted(
        (r"[\s-]+".join(re.escape(word) for word in phrase.split()) for phrase in phrases),
        key=len,
        reverse=True,
    )
    return re.compile(rf"\b(?:{'|'.join(alternatives)})\b", re.IGNORECASE)


def _owner_subject_pattern(config: RecapConfig) -> re.Pattern[str]:
    verbs = "|".join(r"\s+".join(re.escape(w) for w in v.split()) for v in config.owner_subject_verbs)
    return re.compile(rf"^([A-Z][a-zA-Z'.-]{{1,20}})\s+(?:{verbs})\b\s*")


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def has_action_verb(text: str, config: RecapConfig = DEFAULT_RECAP_CONFIG) -> bool:
    """True if *text* contains a whole-word verb from the action vocabulary."""
    return phrase_pattern(config.action_verbs).search(text) is not None


def match_owner_subject(
    text: str, config: RecapConfig = DEFAULT_RECAP_CONFIG
) -> re.Match[str] | None:
    """Match a leading ``<Name> will|to|should ...`` subject."""
    return _owner_subject_pattern(config).match(text)


def is_explicit_action(text: str) -> bool:
    """True for ``action: ...`` and ``to <verb> ...`` lines."""
    return _EXPLICIT_ACTION_RE.match(text) is not None


def is_action_candidate(text: str, config: RecapConfig = DEFAULT_RECAP_CONFIG) -> bool:
    """A bullet is an action if any verb, owner-subject or explicit cue matches."""
    return (
        has_action_verb(text, config)
        or match_owner_subject(text, config) is not None
        or is_explicit_action(text)
    )


# ---------------------------------------------------------------------------
# Field extractors
# ---------------------------------------------------------------------------


def extract_owner(text: str) -> str | None:
    """Best-effort owner: @handle, owner tag, "assigned to", leading "<Name> will", I/we.

    Only "will" names an owner; "to", "should" and the other subject verbs
    just mark the bullet as an action.
    """
    handle = _HANDLE_RE.search(text)
    if handle:
        return handle.group(1)

    for pattern in (_OWNER_TAG_RE, _ASSIGNED_TO_RE):
        match = pattern.search(text)
        if match:
            return match.group(1).strip().rstrip(".")

    named = _NAMED_WILL_RE.match(text)
    if named:
        return named.group(1)

    if _FIRST_PERSON_RE.search(text):
        return "Me"
    if _FIRST_PERSON_PLURAL_RE.search(text):
        return "We"
    return None


def extract_due(text: str, config: RecapConfig = DEFAULT_RECAP_CONFIG) -> str | None:
    """Best-effort due date: ISO date, relative token, then weekday name."""
    iso = ISO_DATE_RE.search(text)
    if iso:
        return iso.group(0)

    for token in config.relative_due_tokens:
        match = phrase_pattern([token]).search(text)
        if match:
            return match.group(0)

    weekday = WEEKDAY_RE.search(text)
    if weekday:
        return weekday.group(0)
    return None


def extract_notes(text: str) -> str | None:
    """Trailing detail after `` - ``, a ``note:`` tag, or a final parenthetical."""
    if " - " in text:
        tail = text.split(" - ", 1)[1].strip()
        if tail:
            return tail

    note = _NOTE_TAG_RE.search(text)
    if note:
        return note.group(1).strip()

    paren = _TRAILING_PAREN_RE.search(text)
    if paren:
        return paren.group(1).strip()
    return None


def strip_owner_subject(text: str, config: RecapConfig = DEFAULT_RECAP_CONFIG) -> str:
    """Drop a leading owner subject; never returns an empty string."""
    subject = match_owner_subject(text, config)
    if subject is None:
        return text
    return text[subject.end() :].strip() or text


def clean_action_text(bullet: str) -> str:
    """Strip the bullet marker and any ``action:`` prefix."""
    base = strip_marker(bullet.strip())
    return _ACTION_PREFIX_RE.sub("", base, count=1).strip() or base or bullet


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


def build_action_item(bullet: str, config: RecapConfig = DEFAULT_RECAP_CONFIG) -> ActionItem:
    """Build one ActionItem from a qualifying bullet."""
    cleaned = clean_action_text(bullet)
    return ActionItem(
        text=strip_owner_subject(cleaned, config),
        owner=extract_owner(cleaned),
        due=extract_due(cleaned, config),
        notes=extract_notes(cleaned),
    )


def parse_action_items(
    bullets: Sequence[str], config: RecapConfig = DEFAULT_RECAP_CONFIG
) -> list[ActionItem]:
    """Extract action items from bullets.

    When no bullet looks like an action, the first
    ``config.fallback_item_count`` bullets are returned verbatim so any
    non-empty notes always produce some action-item output.
    ``config.action_item_cap`` optionally limits the qualifying results.
    """
    items = [
        build_action_item(bullet, config)
        for bullet in bullets
        if is_action_candidate(strip_marker(bullet.strip()), config)
    ]

    if not items:
        return [ActionItem(text=bullet) for bullet in bullets[: config.fallback_item_count]]

    if config.action_item_cap is not None:
        items = items[: config.action_item_cap]
    return items
