"""Outcome type for explicit, value-based error handling.

An ``Outcome`` is either a ``Success`` holding a value or a ``Failure``
holding exactly one captured exception. Which one it is depends only on the
variant, never on what the stored value looks like, so any value (``None``,
an exception instance, another outcome) can be a success value.

Combinators let callers transform and recover without ``try``/``except``.
Callbacks passed to ``map``, ``recover``, ``fold``, ``unwrap_or`` and the
``on_*`` hooks run unguarded: anything they raise propagates to the caller.
Only ``map_catching`` and ``recover_catching`` run their callback inside the
safe-call boundary. ``unwrap`` and ``throw_on_failure`` re-raise the
captured exception to hand control back to ordinary exception flow.

Example:
    >>> Outcome.success(2).map(lambda v: v * 10).unwrap()
    20
    >>> Outcome.failure(KeyError("k")).recover(lambda e: 0).unwrap()
    0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self, TypeGuard

from outcomekit._captured import CapturedFailure, capture_failure
from outcomekit.errors import HINTS, InvalidFailureError

if TYPE_CHECKING:
    from collections.abc import Callable


class Outcome[T]:
    """Sealed base of ``Success`` and ``Failure``.

    Build instances with ``Outcome.success()`` and ``Outcome.failure()``.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> Self:
        if cls is Outcome:
            raise TypeError(
                "Outcome cannot be instantiated directly; "
                "use Outcome.success() or Outcome.failure()"
            )
        return object.__new__(cls)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"Outcome is sealed; {cls.__qualname__} cannot extend it"
            )

    # --- Construction ---

    @staticmethod
    def success[V](value: V = None) -> Success[V]:  # type: ignore[assignment]
        """Wrap ``value`` as a successful outcome."""
        return Success(value)

    @staticmethod
    def failure[V](error: BaseException) -> Failure[V]:
        """Wrap ``error`` as a failed outcome.

        Raises:
            InvalidFailureError: If ``error`` is not an exception instance.
        """
        return Failure(capture_failure(error))

    @staticmethod
    def is_outcome(obj: object) -> TypeGuard[Outcome[Any]]:
        """Return True if ``obj`` is a ``Success`` or a ``Failure``."""
        return isinstance(obj, Success | Failure)

    # --- Classification & extraction ---

    @property
    def is_success(self) -> bool:
        """True for a ``Success``; ``is_failure`` is then False."""
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        """True for a ``Failure``; ``is_success`` is then False."""
        return not self.is_success

    def value_or_none(self) -> T | None:
        """Return the value on success, ``None`` on failure."""
        match self:
            case Success(value):
                return value
            case _:
                return None

    def error_or_none(self) -> BaseException | None:
        """Return the captured exception on failure, ``None`` on success."""
        match self:
            case Failure(error):
                return error
            case _:
                return None

    def throw_on_failure(self) -> None:
        """Re-raise the captured exception if this is a failure."""
        match self:
            case Failure(error):
                raise error

    def unwrap(self) -> T:
        """Return the value, or re-raise the captured exception."""
        self.throw_on_failure()
        return self.value  # type: ignore[attr-defined]

    def unwrap_or[R](self, on_failure: Callable[[BaseException], R]) -> T | R:
        """Return the value, or ``on_failure(error)`` for a failure.

        Exceptions raised by ``on_failure`` propagate.
        """
        match self:
            case Failure(error):
                return on_failure(error)
        return self.value  # type: ignore[attr-defined]

    def unwrap_or_default[R](self, default: R) -> T | R:
        """Return the value, or ``default`` for a failure."""
        if self.is_failure:
            return default
        return self.value  # type: ignore[attr-defined]

    def fold[R](
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[BaseException], R],
    ) -> R:
        """Apply exactly one of the callbacks and return its result.

        Exceptions raised by either callback propagate.
        """
        match self:
            case Failure(error):
                return on_failure(error)
        return on_success(self.value)  # type: ignore[attr-defined]

    # --- Transformation ---

    def map[R](self, transform: Callable[[T], R]) -> Outcome[R]:
        """Transform the value of a success; a failure passes through as-is.

        Exceptions raised by ``transform`` propagate. See ``map_catching``.
        """
        match self:
            case Success(value):
                return Success(transform(value))
        return self  # type: ignore[return-value]

    def map_catching[R](self, transform: Callable[[T], R]) -> Outcome[R]:
        """Like ``map``, but an exception from ``transform`` becomes a failure."""
        # Deferred: boundary imports this module
        from outcomekit.boundary import capture

        match self:
            case Success(value):
                return capture(lambda: transform(value), transform)
        return self  # type: ignore[return-value]

    def recover[R](self, transform: Callable[[BaseException], R]) -> Outcome[T | R]:
        """Turn a failure into a success via ``transform(error)``.

        A success is returned unchanged. Exceptions raised by ``transform``
        propagate. See ``recover_catching``.
        """
        match self:
            case Failure(error):
                return Success(transform(error))
        return self

    def recover_catching[R](
        self, transform: Callable[[BaseException], R]
    ) -> Outcome[T | R]:
        """Like ``recover``, but an exception from ``transform`` becomes a failure.

        Only exceptions of the configured capture types are re-captured. A
        failure holding e.g. ``KeyboardInterrupt`` whose ``transform`` re-raises
        it lets the interrupt propagate unless ``capture`` includes it.
        """
        from outcomekit.boundary import capture

        match self:
            case Failure(error):
                return capture(lambda: transform(error), transform)
        return self

    # --- Side effects ---

    def on_failure(self, action: Callable[[BaseException], object]) -> Self:
        """Call ``action(error)`` if this is a failure; return ``self``."""
        match self:
            case Failure(error):
                action(error)
        return self

    def on_success(self, action: Callable[[T], object]) -> Self:
        """Call ``action(value)`` if this is a success; return ``self``."""
        match self:
            case Success(value):
                action(value)
        return self


@dataclass(frozen=True, slots=True)
class Success[T](Outcome[T]):
    """A successful outcome holding ``value``."""

    value: T


@dataclass(frozen=True, slots=True, repr=False, match_args=False)
class Failure[T](Outcome[T]):
    """A failed outcome holding one captured exception.

    Two failures are equal when they hold the very same exception object.
    """

    __match_args__ = ("error",)

    _payload: CapturedFailure

    def __post_init__(self) -> None:
        if not isinstance(self._payload, CapturedFailure):
            raise InvalidFailureError(
                "Failure must be built with Outcome.failure(), "
                f"got a {type(self._payload).__name__} payload",
                hint=HINTS["not_an_exception"],
            )

    @property
    def error(self) -> BaseException:
        """The captured exception."""
        return self._payload.exception

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"
