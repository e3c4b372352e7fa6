"""In-process protocol registry.

Stands in for the dissection engine's registry: protocols can be switched on
and off by name and heuristic dissectors toggled by their unique short name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol

from dissectopt.config import TomlTable, TomlValue, _normalize_name_list


class ProtocolRegistry(Protocol):
    def disable_protocol_by_name(self, name: str) -> None: ...

    def enable_protocol_by_name(self, name: str) -> None: ...

    def enable_heuristic_by_name(self, name: str, enabled: bool) -> bool: ...


@dataclass
class HeuristicEntry:
    short_name: str
    protocol: str
    enabled: bool = True


@dataclass
class InMemoryProtocolRegistry:
    protocols: dict[str, bool] = field(default_factory=dict)
    heuristics: list[HeuristicEntry] = field(default_factory=list)

    @classmethod
    def from_names(
        cls,
        protocols: Iterable[str] = (),
        *,
        heuristics: Iterable[tuple[str, str]] = (),
        disabled_protocols: Iterable[str] = (),
        disabled_heuristics: Iterable[str] = (),
    ) -> InMemoryProtocolRegistry:
        off = set(disabled_protocols)
        off_heur = set(disabled_heuristics)
        registry = cls(protocols={name: name not in off for name in protocols})
        for short_name, protocol in heuristics:
            registry.protocols.setdefault(protocol, protocol not in off)
            registry.heuristics.append(
                HeuristicEntry(
                    short_name=short_name,
                    protocol=protocol,
                    enabled=short_name not in off_heur,
                )
            )
        return registry

    @classmethod
    def from_config(cls, section: TomlTable) -> InMemoryProtocolRegistry:
        return cls.from_names(
            _normalize_name_list(section.get("protocols")),
            heuristics=_heuristic_pairs(section.get("heuristics")),
            disabled_protocols=_normalize_name_list(section.get("disabled_protocols")),
            disabled_heuristics=_normalize_name_list(section.get("disabled_heuristics")),
        )

    def disable_protocol_by_name(self, name: str) -> None:
        if name in self.protocols:
            self.protocols[name] = False

    def enable_protocol_by_name(self, name: str) -> None:
        if name in self.protocols:
            self.protocols[name] = True

    def enable_heuristic_by_name(self, name: str, enabled: bool) -> bool:
        found = False
        for entry in self.heuristics:
            if entry.short_name == name:
                entry.enabled = enabled
                found = True
        return found

    def is_protocol_enabled(self, name: str) -> bool:
        return self.protocols.get(name, False)

    def is_heuristic_enabled(self, short_name: str) -> bool:
        return any(
            entry.enabled for entry in self.heuristics if entry.short_name == short_name
        )

    def to_payload(self) -> dict[str, object]:
        return {
            "protocols": dict(sorted(self.protocols.items())),
            "heuristics": {
                entry.short_name: entry.enabled
                for entry in sorted(self.heuristics, key=lambda item: item.short_name)
            },
        }


def _heuristic_pairs(value: TomlValue) -> list[tuple[str, str]]:
    # ``{short_name = protocol}`` table, or "short_name:protocol" strings.
    pairs: list[tuple[str, str]] = []
    if isinstance(value, dict):
        for short_name, protocol in value.items():
            if isinstance(protocol, str) and protocol.strip():
                pairs.append((short_name, protocol.strip()))
        return pairs
    for item in _normalize_name_list(value):
        short_name, _, protocol = item.partition(":")
        short_name = short_name.strip()
        protocol = protocol.strip() or short_name.split("_", 1)[0]
        if short_name:
            pairs.append((short_name, protocol))
    return pairs
