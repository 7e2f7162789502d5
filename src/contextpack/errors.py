"""Exceptions raised by contextpack."""

from typing import Optional


class ContextPackError(Exception):
    """Base exception for contextpack errors."""


class IngestError(ContextPackError):
    """Raised when a corpus source cannot be read as a whole.

    A single unreadable document inside a readable corpus is skipped and
    logged instead.
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.source = source
        self.original_error = original_error
