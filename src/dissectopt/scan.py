"""Argument scanning loop that feeds the option dispatcher.

argparse invokes actions in command-line order, so each recognized flag is
dispatched as soon as it is seen. The first failing option stops the scan.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from dissectopt.dispatch import OptionCode, OptionDispatcher


class _ScanStopped(Exception):
    pass


class _DispatchAction(argparse.Action):
    def __init__(self, option_strings, dest, *, code: OptionCode, dispatcher: OptionDispatcher, **kwargs):
        super().__init__(option_strings, dest, **kwargs)
        self.code = code
        self.dispatcher = dispatcher

    def __call__(self, parser, namespace, values, option_string=None):
        argument = values if isinstance(values, str) else None
        if not self.dispatcher.handle(self.code, argument):
            raise _ScanStopped(option_string)


_OPTION_SPECS: tuple[tuple[tuple[str, ...], OptionCode, str | None, str], ...] = (
    (("-d",), OptionCode.DECODE_AS, "RULE", "decode-as rule <layer type>==<selector>,<protocol>"),
    (("-K",), OptionCode.KEYTAB, "KEYTAB", "Kerberos keytab file"),
    (("-n",), OptionCode.NO_NAME_RESOLUTION, None, "disable all name resolution"),
    (("-N",), OptionCode.NAME_RESOLVE_FLAGS, "FLAGS", "enable name resolution types (d, m, n, N, t, v)"),
    (("-t",), OptionCode.TIMESTAMP_TYPE, "SPEC", "time stamp format and/or precision, e.g. ad.6"),
    (("-u",), OptionCode.SECONDS_TYPE, "s|hms", "seconds display type"),
    (("--disable-protocol",), OptionCode.DISABLE_PROTOCOL, "NAME", "disable dissection of a protocol"),
    (("--enable-protocol",), OptionCode.ENABLE_PROTOCOL, "NAME", "enable dissection of a protocol"),
    (("--enable-heuristic",), OptionCode.ENABLE_HEURISTIC, "NAME", "enable heuristic dissection of a protocol"),
    (("--disable-heuristic",), OptionCode.DISABLE_HEURISTIC, "NAME", "disable heuristic dissection of a protocol"),
)


def build_parser(dispatcher: OptionDispatcher, *, prog: str = "dissectopt") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Dissection options: time stamps, name resolution and protocol toggles.",
        allow_abbrev=False,
    )
    for option_strings, code, metavar, help_text in _OPTION_SPECS:
        parser.add_argument(
            *option_strings,
            action=_DispatchAction,
            code=code,
            dispatcher=dispatcher,
            nargs=0 if metavar is None else None,
            metavar=metavar,
            dest=f"opt_{code.name.lower()}",
            default=argparse.SUPPRESS,
            help=help_text,
        )
    return parser


def scan_arguments(
    argv: Sequence[str],
    dispatcher: OptionDispatcher,
    *,
    prog: str = "dissectopt",
) -> bool:
    parser = build_parser(dispatcher, prog=prog)
    try:
        parser.parse_args(list(argv))
    except _ScanStopped:
        return False
    return True
