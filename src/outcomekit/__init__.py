"""outcomekit: success-or-failure values instead of exception control flow.

Public API:
    - Outcome: sealed result type, built with Outcome.success() / Outcome.failure()
    - Success, Failure: the two variants, for isinstance checks and ``match``
    - safe_call(): run a zero-argument computation, capturing what it raises
    - catching: decorator form of safe_call() for functions of any arity
    - Settings, settings_scope(): control which exceptions are captured
"""

from __future__ import annotations

import logging

from outcomekit.boundary import catching, safe_call
from outcomekit.config import Settings, get_settings, resolve_settings, settings_scope
from outcomekit.errors import ConfigurationError, InvalidFailureError, OutcomeKitError
from outcomekit.outcome import Failure, Outcome, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("outcomekit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("outcomekit").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "Failure",
    "InvalidFailureError",
    "Outcome",
    "OutcomeKitError",
    "Settings",
    "Success",
    "catching",
    "get_settings",
    "resolve_settings",
    "safe_call",
    "settings_scope",
]
