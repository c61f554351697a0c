"""Safe-call boundary: run a computation and capture what it raises."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from outcomekit.config import get_settings
from outcomekit.outcome import Outcome

if TYPE_CHECKING:
    from collections.abc import Callable

log = logging.getLogger(__name__)


def _describe(source: object) -> str:
    return getattr(source, "__qualname__", None) or repr(source)


def capture[R](fn: Callable[[], R], source: object) -> Outcome[R]:
    """Run ``fn`` inside the boundary, naming ``source`` in trace records.

    ``source`` is the user-facing computation ``fn`` stands for, such as the
    function a ``catching`` wrapper or a ``map_catching`` call delegates to.
    """
    settings = get_settings()
    try:
        value = fn()
    except settings.capture as exc:
        if settings.trace:
            log.debug(
                "Captured %s from %s: %s", type(exc).__name__, _describe(source), exc
            )
        return Outcome.failure(exc)
    return Outcome.success(value)


def safe_call[R](fn: Callable[[], R]) -> Outcome[R]:
    """Call ``fn`` once and wrap its result as an outcome.

    A normal return becomes a success. An exception of one of the configured
    capture types (``Exception`` by default) becomes a failure holding that
    same exception object; any other exception propagates.

    Example:
        >>> safe_call(lambda: 42).value_or_none()
        42
        >>> safe_call(lambda: int("x")).is_failure
        True
    """
    return capture(fn, fn)


def catching[**P, R](fn: Callable[P, R]) -> Callable[P, Outcome[R]]:
    """Decorate ``fn`` so that calling it returns an outcome instead of raising.

    The wrapped call has the same capture rules as ``safe_call``.

    Example:
        >>> @catching
        ... def parse(text: str) -> int:
        ...     return int(text)
        >>> parse("7").unwrap()
        7
        >>> parse("seven").is_failure
        True
    """

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[R]:
        return capture(lambda: fn(*args, **kwargs), fn)

    return wrapper
