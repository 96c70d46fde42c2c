"""Line normalisation and bullet segmentation for free-form meeting notes."""

from __future__ import annotations

import re

from src.pipeline_config import DEFAULT_RECAP_CONFIG, RecapConfig

_INLINE_SPACE_RE = re.compile(r"[ \t]+")

# One leading marker: "*", "-", "•", "1)", "1.", "[ ]" or "[x]", then whitespace.
_MARKER_RE = re.compile(r"^(?:[*\-•]|\d+[.)]|\[[ xX]\])\s+")

# Sentence boundary: terminal punctuation, whitespace, then a capital, digit or "(".
_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9(])")

_GLYPH_SEPARATOR_RE = re.compile(r"[•·]")
_MARKER_ONLY_RE = re.compile(r"^[*\-•]+$")
_INLINE_SEPARATORS = (" - ", " | ")


def normalize_line(line: str) -> str:
    """Replace non-breaking spaces, collapse runs of spaces/tabs, and trim."""
    return _INLINE_SPACE_RE.sub(" ", line.replace("\u00a0", " ")).strip()


def strip_marker(text: str) -> str:
    """Remove a single leading bullet or numbering marker."""
    return _MARKER_RE.sub("", text, count=1)


def split_sentences(text: str) -> list[str]:
    """Split unstructured prose into sentences."""
    return [s for s in _SENTENCE_BOUNDARY_RE.split(text) if s.strip()]


def split_inline_bullets(line: str) -> list[str]:
    """Split one line on inline bullet glyphs, then `` - ``, then `` | ``.

    A line with no separable parts is returned whole.
    """
    parts = _GLYPH_SEPARATOR_RE.split(line)
    for separator in _INLINE_SEPARATORS:
        parts = [piece for part in parts for piece in part.split(separator)]
    parts = [p for p in parts if p.strip()]
    return parts or [line]


def _dedupe_key(bullet: str) -> str:
    return " ".join(bullet.split()).casefold()


def dedupe_bullets(bullets: list[str]) -> list[str]:
    """Drop case-insensitive duplicates, keeping the first occurrence."""
    seen: set[str] = set()
    unique: list[str] = []
    for bullet in bullets:
        key = _dedupe_key(bullet)
        if key in seen:
            continue
        seen.add(key)
        unique.append(bullet)
    return unique


def to_bullets(raw: str, config: RecapConfig = DEFAULT_RECAP_CONFIG) -> list[str]:
    """Split raw notes into an ordered, deduplicated list of bullets.

    A single long line (over ``config.prose_min_chars`` characters) is treated
    as prose and split into sentences.  Anything else is treated as
    structured notes: every line is split on inline separators.

    Returns an empty list when the notes hold nothing usable; callers should
    show guidance rather than treat it as an error.
    """
    text = raw.replace("\r\n", "\n").replace("\r", "\n").strip()
    if not text:
        return []

    raw_lines = [line for line in text.split("\n") if line.strip()]
    lines = [normalize_line(line) for line in raw_lines]

    candidates: list[str] = []
    if len(raw_lines) <= 1 and len(raw_lines[0]) > config.prose_min_chars:
        candidates = split_sentences(lines[0])
    else:
        for line in lines:
            candidates.extend(split_inline_bullets(line))

    bullets: list[str] = []
    for candidate in candidates:
        cleaned = normalize_line(strip_marker(normalize_line(candidate)))
        if cleaned and not _MARKER_ONLY_RE.match(cleaned):
            bullets.append(cleaned)

    return dedupe_bullets(bullets)
