"""Settings for the safe-call boundary.

Resolution follows a fixed precedence: defaults < environment < overrides.
The schema lives in a single Pydantic model so every path (environment,
programmatic overrides, scoped overrides) goes through the same validation.

Settings are read at call time. A ``settings_scope`` block installs settings
in a ``ContextVar``; outside any scope the environment-resolved settings are
used and cached.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from functools import cache
import os
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from outcomekit.errors import HINTS, ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

ENV_PREFIX = "OUTCOMEKIT_"


class Settings(BaseModel):
    """Validated, immutable settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    #: Log every captured exception at DEBUG on ``outcomekit.boundary``.
    trace: bool = Field(default=False)
    #: Exception types the safe-call boundary turns into failures.
    capture: tuple[type[BaseException], ...] = Field(default=(Exception,))

    @field_validator("capture", mode="before")
    @classmethod
    def normalize_capture(cls, v: Any) -> Any:
        """Accept a single exception type as shorthand for a one-element tuple."""
        if isinstance(v, type):
            return (v,)
        return v

    @field_validator("capture")
    @classmethod
    def require_capture(
        cls, v: tuple[type[BaseException], ...]
    ) -> tuple[type[BaseException], ...]:
        if not v:
            raise ValueError("capture must name at least one exception type")
        return v


# --- Environment ---


def _dotenv_values() -> dict[str, str]:
    """Return the ``OUTCOMEKIT_*`` entries of the nearest ``.env`` file.

    The file is read, never loaded: ``os.environ`` is left untouched.
    """
    from dotenv import dotenv_values, find_dotenv

    path = find_dotenv(usecwd=True)
    if not path:
        return {}
    return {
        key: value
        for key, value in dotenv_values(path).items()
        if key.startswith(ENV_PREFIX) and value is not None
    }


def _coerce_bool(v: str) -> bool:
    """Convert string to boolean using common conventions."""
    return v.strip().lower() in {"1", "true", "yes", "on"}


def load_env() -> dict[str, Any]:
    """Read ``OUTCOMEKIT_*`` variables for boolean settings fields.

    Process environment variables take precedence over a ``.env`` file.
    Exception types cannot be expressed in the environment, so ``capture``
    is only configurable programmatically. Unknown variables are ignored.
    """
    file_values = _dotenv_values()
    config: dict[str, Any] = {}
    for name, info in Settings.model_fields.items():
        if info.annotation is not bool:
            continue
        key = f"{ENV_PREFIX}{name.upper()}"
        raw = os.environ.get(key, file_values.get(key))
        if raw is not None:
            config[name] = _coerce_bool(raw)
    return config


# --- Resolution ---


def _validate(merged: Mapping[str, Any]) -> Settings:
    try:
        return Settings.model_validate(dict(merged))
    except ValidationError as e:
        err = e.errors()[0]
        msg = err.get("msg") or ""
        # Remove Pydantic's standard wrapper prefix
        if msg.startswith("Value error, "):
            msg = msg[13:]
        hint = HINTS["empty_capture"] if "capture" in err.get("loc", ()) else None
        raise ConfigurationError(
            f"Settings validation failed: {msg}", hint=hint
        ) from e


def resolve_settings(
    overrides: Mapping[str, Any] | None = None, **kwargs: Any
) -> Settings:
    """Resolve settings from defaults, the environment and explicit overrides.

    Raises:
        ConfigurationError: If the merged values fail validation.
    """
    return _validate({**load_env(), **(overrides or {}), **kwargs})


@cache
def _env_settings() -> Settings:
    return resolve_settings()


def reset_settings_cache() -> None:
    """Forget the cached environment-resolved settings."""
    _env_settings.cache_clear()


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "outcomekit_settings", default=None
)


def get_settings() -> Settings:
    """Return the settings in effect for the current context."""
    ambient = _AMBIENT.get()
    if ambient is not None:
        return ambient
    return _env_settings()


@contextmanager
def settings_scope(
    settings_or_overrides: Settings | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Generator[Settings]:
    """Install settings for the duration of a ``with`` block.

    Overrides are layered on top of the settings already in effect, so
    nested scopes compose. The previous settings are restored on exit, even
    when the block raises.

    Example:
        with settings_scope(capture=BaseException):
            outcome = safe_call(lambda: sys.exit(3))
    """
    if isinstance(settings_or_overrides, Settings):
        if overrides:
            raise ConfigurationError(
                "settings_scope() takes either a Settings instance or overrides",
                hint="Use Settings.model_copy(update=...) to adjust an instance.",
            )
        settings = settings_or_overrides
    else:
        base = get_settings().model_dump()
        settings = _validate({**base, **(settings_or_overrides or {}), **overrides})

    token = _AMBIENT.set(settings)
    try:
        yield settings
    finally:
        _AMBIENT.reset(token)
