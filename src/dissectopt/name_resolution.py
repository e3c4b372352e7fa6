"""Name resolution flags for ``-n`` and ``-N``."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace

from dissectopt.exceptions import ResolveFlagError

RESOLVE_FLAG_FIELDS: dict[str, str] = {
    "d": "dns_pkt_addr_resolution",
    "m": "mac_name",
    "n": "network_name",
    "N": "use_external_net_name_resolver",
    "t": "transport_name",
    "v": "vlan_name",
}

RESOLVE_FLAG_HELP: tuple[str, ...] = (
    "\t'd' to enable address resolution from captured DNS packets",
    "\t'm' to enable MAC address resolution",
    "\t'n' to enable network address resolution",
    "\t'N' to enable using external resolvers (e.g., DNS)",
    "\t    for network address resolution",
    "\t't' to enable transport-layer port number resolution",
    "\t'v' to enable VLAN IDs to names resolution",
)


@dataclass
class ResolveFlags:
    mac_name: bool = True
    network_name: bool = False
    transport_name: bool = True
    dns_pkt_addr_resolution: bool = True
    use_external_net_name_resolver: bool = False
    vlan_name: bool = False

    def to_payload(self) -> dict[str, bool]:
        return asdict(self)


def parse_resolve_flags(text: str, base: ResolveFlags) -> ResolveFlags:
    """Return ``base`` with every flag named in ``text`` switched on.

    Raises ResolveFlagError naming the first unknown character.
    """
    enabled: dict[str, bool] = {}
    for char in text:
        field_name = RESOLVE_FLAG_FIELDS.get(char)
        if field_name is None:
            raise ResolveFlagError(char, RESOLVE_FLAG_HELP)
        enabled[field_name] = True
    return replace(base, **enabled)


def string_to_name_resolve(text: str, flags: ResolveFlags) -> None:
    """Update ``flags`` in place; on error ``flags`` is left untouched."""
    updated = parse_resolve_flags(text, flags)
    for field_name in RESOLVE_FLAG_FIELDS.values():
        setattr(flags, field_name, getattr(updated, field_name))


def disable_name_resolution(flags: ResolveFlags) -> None:
    for field_name in RESOLVE_FLAG_FIELDS.values():
        setattr(flags, field_name, False)
