# bible_refs/services/references/errors.py
"""
Error kinds and client exceptions for verse lookup.

The resolver never raises for a failed reference: it records an ErrorKind
on the result. Verse API clients signal failures by raising a VerseApiError
subclass, which carries the kind the resolver records.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Why a reference could not be (fully) resolved."""
    INVALID_CHAPTER = "InvalidChapter"
    UNKNOWN_BOOK = "UnknownBook"
    NOT_FOUND = "NotFound"
    UNEXPECTED_RESPONSE = "UnexpectedResponse"
    FAILURE = "Failure"


class VerseApiError(Exception):
    """Base exception for verse API errors."""

    kind = ErrorKind.FAILURE

    def __init__(self, url: str, detail: Optional[str] = None):
        self.url = url
        self.detail = detail
        message = f"{self.kind.value} at {url}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class VerseNotFoundError(VerseApiError):
    """Raised when the API answers 404."""
    kind = ErrorKind.NOT_FOUND


class UnexpectedResponseError(VerseApiError):
    """Raised on any other non-success status or an unreadable body."""
    kind = ErrorKind.UNEXPECTED_RESPONSE


class VerseApiFailure(VerseApiError):
    """Raised when the request itself fails (timeout, connection error)."""
    kind = ErrorKind.FAILURE
