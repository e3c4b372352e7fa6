"""Second phase: push collected protocol toggles into a registry.

The order of the four passes is fixed and defines precedence: a protocol
named in both the disable and the enable list ends up enabled. Unknown
protocol names are left to the registry, which ignores them; unknown
heuristic names are reported one by one and fail the phase as a whole once
every name has been tried.
"""

from __future__ import annotations

from dissectopt.options import DissectOptions
from dissectopt.registry import ProtocolRegistry
from dissectopt.reporting import ErrorReporter


def setup_enabled_and_disabled_protocols(
    options: DissectOptions,
    registry: ProtocolRegistry,
    *,
    reporter: ErrorReporter,
) -> bool:
    success = True

    for name in options.disable_protocol_names:
        registry.disable_protocol_by_name(name)

    for name in options.enable_protocol_names:
        registry.enable_protocol_by_name(name)

    for name in options.enable_heuristic_names:
        if not registry.enable_heuristic_by_name(name, True):
            reporter.err(f"No such protocol {name}, can't enable")
            success = False

    for name in options.disable_heuristic_names:
        if not registry.enable_heuristic_by_name(name, False):
            reporter.err(f"No such protocol {name}, can't disable")
            success = False

    return success
