"""Invariant markers for dissectopt."""

from __future__ import annotations

from typing import NoReturn

from dissectopt.exceptions import NeverThrown


def never(reason: str = "", **env: object) -> NoReturn:
    """Mark a code path as intentionally unreachable.

    Reaching it is a caller defect. The env payload is attached to the
    exception for the traceback and is not otherwise evaluated.
    """
    message = reason or "never() marker reached"
    if env:
        rendered = ", ".join(f"{key}={value!r}" for key, value in sorted(env.items()))
        message = f"{message} ({rendered})"
    raise NeverThrown(message, env=env)
