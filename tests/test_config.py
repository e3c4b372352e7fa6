from __future__ import annotations

from pathlib import Path
import textwrap

import pytest

from dissectopt.config import (
    CONFIG_PATH_ENV,
    config_argv,
    dissect_defaults,
    dissect_section,
    load_config,
    registry_defaults,
    registry_section,
)
from dissectopt.exceptions import ConfigError
from tests.env_helpers import env_scope


def _write_config(path: Path, body: str) -> Path:
    path.write_text(textwrap.dedent(body).strip() + "\n", encoding="utf-8")
    return path


def test_missing_or_broken_config_is_empty(tmp_path: Path) -> None:
    assert load_config(root=tmp_path) == {}
    broken = _write_config(tmp_path / "broken.toml", "[dissect\nx = ")
    assert load_config(config_path=broken) == {}


def test_sections_are_read_from_root(tmp_path: Path) -> None:
    _write_config(
        tmp_path / "dissectopt.toml",
        """
        [dissect]
        time_stamp = "ad.6"

        [registry]
        protocols = ["tcp"]
        """,
    )
    assert dissect_defaults(root=tmp_path) == {"time_stamp": "ad.6"}
    assert registry_defaults(root=tmp_path) == {"protocols": ["tcp"]}


def test_env_var_overrides_root(tmp_path: Path) -> None:
    elsewhere = _write_config(
        tmp_path / "other.toml",
        """
        [dissect]
        seconds = "hms"
        """,
    )
    with env_scope({CONFIG_PATH_ENV: str(elsewhere)}):
        assert dissect_defaults(root=tmp_path / "missing") == {"seconds": "hms"}


def test_non_table_sections_are_ignored(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "c.toml", 'dissect = "nope"')
    assert dissect_defaults(config_path=path) == {}


def test_config_argv_expands_every_key() -> None:
    argv = config_argv(
        {
            "time_stamp": "u.3",
            "seconds": "hms",
            "name_resolution": "mn",
            "decode_as": ["tcp.port==8888,http", "udp.port==53,dns"],
            "keytab": "/etc/krb5.keytab",
            "disable_protocols": "http, dns",
            "enable_protocols": ["dns"],
            "enable_heuristics": ["rtp_udp"],
            "disable_heuristics": ["http_tcp"],
        }
    )
    assert argv == [
        "-t", "u.3",
        "-u", "hms",
        "-N", "mn",
        "-d", "tcp.port==8888,http",
        "-d", "udp.port==53,dns",
        "-K", "/etc/krb5.keytab",
        "--disable-protocol", "http",
        "--disable-protocol", "dns",
        "--enable-protocol", "dns",
        "--enable-heuristic", "rtp_udp",
        "--disable-heuristic", "http_tcp",
    ]


def test_name_resolution_false_means_no_resolution() -> None:
    assert config_argv({"name_resolution": False}) == ["-n"]


def test_single_decode_as_rule_is_not_comma_split() -> None:
    assert config_argv({"decode_as": "tcp.port==8888,http"}) == [
        "-d",
        "tcp.port==8888,http",
    ]


def test_empty_section() -> None:
    assert config_argv(None) == []
    assert config_argv({}) == []


@pytest.mark.parametrize(
    "section",
    [
        {"time_stamp": 3},
        {"seconds": True},
        {"name_resolution": True},
        {"decode_as": 5},
    ],
)
def test_config_argv_rejects_wrong_types(section: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        config_argv(section)  # type: ignore[arg-type]


def test_sections_split_from_one_loaded_table(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path / "c.toml",
        """
        registry = ["not", "a", "table"]

        [dissect]
        seconds = "s"
        """,
    )
    data = load_config(config_path=path)
    assert dissect_section(data) == {"seconds": "s"}
    assert registry_section(data) == {}
    assert dissect_section({}) == {}
