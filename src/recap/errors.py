"""Request-boundary errors raised before the recap pipeline runs."""

from __future__ import annotations


class RecapError(Exception):
    """Base class for recap request errors."""


class EmptyNotesError(RecapError):
    """No notes, post-meeting notes or outcome were supplied."""


class NotesTooLargeError(RecapError):
    """The merged notes exceed the configured character limit."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(
            f"Notes are too long ({length:,} characters). Maximum is {limit:,} characters."
        )
        self.length = length
        self.limit = limit
