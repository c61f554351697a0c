"""Internal marker for the payload of a failed outcome.

Not part of the public API. Instances are created only through
``capture_failure()`` so callers cannot forge a failure payload.
"""

from __future__ import annotations

from dataclasses import dataclass

from outcomekit.errors import HINTS, InvalidFailureError


@dataclass(frozen=True, slots=True, eq=False)
class CapturedFailure:
    """Wraps exactly one exception; equality is identity of that exception."""

    exception: BaseException

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CapturedFailure):
            return NotImplemented
        return other.exception is self.exception

    def __hash__(self) -> int:
        return id(self.exception)


def capture_failure(exception: BaseException) -> CapturedFailure:
    """Create the marker for ``exception``.

    Raises:
        InvalidFailureError: If ``exception`` is not an exception instance.
    """
    if not isinstance(exception, BaseException):
        raise InvalidFailureError(
            f"expected an exception instance, got {type(exception).__name__}",
            hint=HINTS["not_an_exception"],
        )
    return CapturedFailure(exception)
