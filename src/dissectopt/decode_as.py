"""Decode-as rules for ``-d``.

Rules are checked for shape only; binding them to real dissector tables is
left to whoever consumes ``DecodeAsTable.rules``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dissectopt.exceptions import DecodeAsError

DECODE_AS_FORMAT_HELP: tuple[str, ...] = (
    '\tDecode-as rules have the form "<layer type>==<selector>,<decode-as protocol>"',
    '\tfor example "tcp.port==8888,http"',
)


@dataclass(frozen=True)
class DecodeAsRule:
    table: str
    selector: str
    protocol: str

    def to_payload(self) -> dict[str, str]:
        return {"table": self.table, "selector": self.selector, "protocol": self.protocol}


def parse_decode_as(text: str) -> DecodeAsRule:
    table, sep, rest = text.partition("==")
    if not sep:
        raise DecodeAsError(
            f'"{text}" isn\'t a valid decode-as rule: missing "=="',
            DECODE_AS_FORMAT_HELP,
        )
    selector, comma, protocol = rest.partition(",")
    if not comma:
        raise DecodeAsError(
            f'"{text}" isn\'t a valid decode-as rule: missing "," before the protocol',
            DECODE_AS_FORMAT_HELP,
        )
    table, selector, protocol = table.strip(), selector.strip(), protocol.strip()
    for label, value in (("layer type", table), ("selector", selector), ("protocol", protocol)):
        if not value:
            raise DecodeAsError(
                f'"{text}" isn\'t a valid decode-as rule: empty {label}',
                DECODE_AS_FORMAT_HELP,
            )
    return DecodeAsRule(table=table, selector=selector, protocol=protocol)


@dataclass
class DecodeAsTable:
    rules: list[DecodeAsRule] = field(default_factory=list)

    def command_option(self, text: str) -> None:
        self.rules.append(parse_decode_as(text))
