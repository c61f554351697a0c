"""Exception hierarchy for outcomekit.

These are errors raised by the library itself. Exceptions captured inside an
outcome are never wrapped or rewritten.
"""

from __future__ import annotations


class OutcomeKitError(Exception):
    """Base exception for all outcomekit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidFailureError(OutcomeKitError, TypeError):
    """A failure was requested for something that is not an exception."""


class ConfigurationError(OutcomeKitError):
    """Settings validation or resolution failed."""


HINTS = {
    "not_an_exception": (
        "Outcome.failure() only wraps exception instances. "
        "Raise or construct an exception, e.g. Outcome.failure(ValueError(...))."
    ),
    "empty_capture": (
        "Pass at least one exception type, e.g. capture=(Exception,). "
        "Use capture=(BaseException,) to also capture KeyboardInterrupt."
    ),
}
