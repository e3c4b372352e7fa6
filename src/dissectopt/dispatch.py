"""Per-option dispatch for dissection options.

The host scans its arguments and calls ``handle_option`` once per recognized
flag, in command-line order. Each call either records something in
``DissectOptions`` or triggers an immediate side effect through
``DissectDeps``. Protocol lists are only resolved later, by
``dissectopt.apply``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable

from dissectopt.decode_as import DecodeAsTable
from dissectopt.exceptions import DissectOptionError, MissingCapabilityError
from dissectopt.invariants import never
from dissectopt.name_resolution import (
    ResolveFlags,
    disable_name_resolution,
    string_to_name_resolve,
)
from dissectopt.options import DissectOptions
from dissectopt.reporting import ErrorReporter, report_option_error
from dissectopt.timestamp import SecondsType, parse_seconds_type, parse_timestamp_spec


class OptionCode(StrEnum):
    DECODE_AS = "d"
    KEYTAB = "K"
    NO_NAME_RESOLUTION = "n"
    NAME_RESOLVE_FLAGS = "N"
    TIMESTAMP_TYPE = "t"
    SECONDS_TYPE = "u"
    DISABLE_PROTOCOL = "disable-protocol"
    ENABLE_PROTOCOL = "enable-protocol"
    ENABLE_HEURISTIC = "enable-heuristic"
    DISABLE_HEURISTIC = "disable-heuristic"


@dataclass(frozen=True)
class DissectDeps:
    """Collaborators reached from the dispatcher.

    Callables report bad input by raising ``DissectOptionError``.
    ``read_keytab`` is ``None`` when Kerberos support is not available.
    """

    decode_as: Callable[[str], None]
    read_keytab: Callable[[str], None] | None
    disable_name_resolution: Callable[[], None]
    string_to_name_resolve: Callable[[str], None]
    set_seconds_type: Callable[[SecondsType], None]
    reporter: ErrorReporter


@dataclass
class RuntimeSettings:
    """Settings the default collaborators write into."""

    resolve_flags: ResolveFlags
    decode_as: DecodeAsTable
    seconds_type: SecondsType = SecondsType.DEFAULT
    keytabs: list[str] | None = None

    @classmethod
    def default(cls) -> RuntimeSettings:
        return cls(resolve_flags=ResolveFlags(), decode_as=DecodeAsTable())

    def set_seconds_type(self, seconds_type: SecondsType) -> None:
        self.seconds_type = seconds_type

    def read_keytab(self, path: str) -> None:
        if self.keytabs is None:
            self.keytabs = []
        self.keytabs.append(path)

    def to_payload(self) -> dict[str, object]:
        return {
            "seconds_type": self.seconds_type.value,
            "name_resolution": self.resolve_flags.to_payload(),
            "decode_as": [rule.to_payload() for rule in self.decode_as.rules],
            "keytabs": list(self.keytabs or []),
        }


def runtime_deps(
    settings: RuntimeSettings,
    *,
    reporter: ErrorReporter,
    keytab_support: bool = False,
) -> DissectDeps:
    flags = settings.resolve_flags
    return DissectDeps(
        decode_as=settings.decode_as.command_option,
        read_keytab=settings.read_keytab if keytab_support else None,
        disable_name_resolution=lambda: disable_name_resolution(flags),
        string_to_name_resolve=lambda text: string_to_name_resolve(text, flags),
        set_seconds_type=settings.set_seconds_type,
        reporter=reporter,
    )


def handle_option(
    options: DissectOptions,
    code: OptionCode,
    argument: str | None,
    *,
    deps: DissectDeps,
) -> bool:
    try:
        _dispatch(options, code, argument or "", deps=deps)
    except DissectOptionError as exc:
        report_option_error(deps.reporter, exc)
        return False
    return True


def _dispatch(
    options: DissectOptions,
    code: OptionCode,
    argument: str,
    *,
    deps: DissectDeps,
) -> None:
    match code:
        case OptionCode.DECODE_AS:
            deps.decode_as(argument)
        case OptionCode.KEYTAB:
            if deps.read_keytab is None:
                raise MissingCapabilityError(
                    "-K specified, but Kerberos keytab file support isn't present"
                )
            deps.read_keytab(argument)
        case OptionCode.NO_NAME_RESOLUTION:
            deps.disable_name_resolution()
        case OptionCode.NAME_RESOLVE_FLAGS:
            deps.string_to_name_resolve(argument)
        case OptionCode.TIMESTAMP_TYPE:
            options.apply_timestamp(parse_timestamp_spec(argument))
        case OptionCode.SECONDS_TYPE:
            deps.set_seconds_type(parse_seconds_type(argument))
        case OptionCode.DISABLE_PROTOCOL:
            options.disable_protocol_names.append(str(argument))
        case OptionCode.ENABLE_PROTOCOL:
            options.enable_protocol_names.append(str(argument))
        case OptionCode.ENABLE_HEURISTIC:
            options.enable_heuristic_names.append(str(argument))
        case OptionCode.DISABLE_HEURISTIC:
            options.disable_heuristic_names.append(str(argument))
        case _:
            # Callers only forward codes from OptionCode.
            never("unhandled dissect option code", code=code)


@dataclass
class OptionDispatcher:
    options: DissectOptions
    deps: DissectDeps

    def handle(self, code: OptionCode, argument: str | None = None) -> bool:
        return handle_option(self.options, code, argument, deps=self.deps)
