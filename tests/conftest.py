from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))


import pytest

from dissectopt.dispatch import OptionDispatcher, RuntimeSettings, runtime_deps
from dissectopt.options import DissectOptions
from dissectopt.registry import InMemoryProtocolRegistry
from dissectopt.reporting import CollectingReporter


@pytest.fixture
def reporter() -> CollectingReporter:
    return CollectingReporter()


@pytest.fixture
def settings() -> RuntimeSettings:
    return RuntimeSettings.default()


@pytest.fixture
def options() -> DissectOptions:
    return DissectOptions()


@pytest.fixture
def dispatcher(
    options: DissectOptions,
    settings: RuntimeSettings,
    reporter: CollectingReporter,
) -> OptionDispatcher:
    return OptionDispatcher(
        options=options,
        deps=runtime_deps(settings, reporter=reporter),
    )


@pytest.fixture
def registry() -> InMemoryProtocolRegistry:
    return InMemoryProtocolRegistry.from_names(
        ["eth", "ip", "tcp", "udp", "http", "dns", "rtp"],
        heuristics=[
            ("rtp_udp", "rtp"),
            ("rtcp_udp", "rtcp"),
            ("http_tcp", "http"),
        ],
        disabled_protocols=["rtp"],
        disabled_heuristics=["rtp_udp"],
    )
