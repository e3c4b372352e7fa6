from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import typer

from dissectopt.exceptions import DissectOptionError


class ErrorReporter(Protocol):
    def err(self, message: str) -> None: ...

    def err_cont(self, message: str) -> None: ...


@dataclass(frozen=True)
class EchoReporter:
    """Writes diagnostics to stderr; continuation lines carry no prefix."""

    prog: str = "dissectopt"

    def err(self, message: str) -> None:
        typer.echo(f"{self.prog}: {message}", err=True)

    def err_cont(self, message: str) -> None:
        typer.echo(message, err=True)


@dataclass
class CollectingReporter:
    errors: list[str] = field(default_factory=list)
    continuations: list[str] = field(default_factory=list)
    lines: list[str] = field(default_factory=list)

    def err(self, message: str) -> None:
        self.errors.append(message)
        self.lines.append(message)

    def err_cont(self, message: str) -> None:
        self.continuations.append(message)
        self.lines.append(message)


def report_option_error(reporter: ErrorReporter, exc: DissectOptionError) -> None:
    reporter.err(exc.message)
    if exc.details:
        reporter.err_cont("\n".join(exc.details))
