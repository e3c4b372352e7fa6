"""Exception types for dissection option handling.

Two families live here. ``DissectOptionError`` and its subclasses describe bad
user input: they carry a primary message plus optional continuation lines
(usually the list of valid choices) and are turned into diagnostics by the
dispatcher. ``NeverRaise`` marks an internal invariant failure and is never
caught inside the package.
"""

from __future__ import annotations

from typing import Sequence


class DissectOptionError(Exception):
    """Base class for user-facing option errors."""

    def __init__(self, message: str, details: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.details = tuple(details)


class TimestampSpecError(DissectOptionError):
    """Raised for a malformed ``-t`` time stamp type or precision."""


class SecondsTypeError(DissectOptionError):
    """Raised for a ``-u`` value other than ``s`` or ``hms``."""


class ResolveFlagError(DissectOptionError):
    """Raised when a ``-N`` flag string contains an unknown character."""

    def __init__(self, bad_char: str, details: Sequence[str] = ()) -> None:
        super().__init__(
            f"-N specifies unknown resolving option '{bad_char}'; valid options are:",
            details,
        )
        self.bad_char = bad_char


class DecodeAsError(DissectOptionError):
    """Raised when a ``-d`` decode-as rule cannot be parsed."""


class MissingCapabilityError(DissectOptionError):
    """Raised when an option needs support that this build does not have."""


class ConfigError(DissectOptionError):
    """Raised when a config file value has the wrong shape."""


class NeverRaise(RuntimeError):
    """Sentinel exception for code paths that must be unreachable.

    Raising it signals a defect in the caller, not bad input, so nothing in
    the package handles it.
    """

    def __init__(self, message: str, *, env: dict[str, object] | None = None):
        super().__init__(message)
        self.env = dict(env or {})


class NeverThrown(NeverRaise):
    """Alias for NeverRaise used by the explicit never() marker."""
