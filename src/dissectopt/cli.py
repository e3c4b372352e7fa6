from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from dissectopt.apply import setup_enabled_and_disabled_protocols
from dissectopt.config import (
    config_argv,
    dissect_section,
    load_config,
    registry_section,
)
from dissectopt.dispatch import OptionDispatcher, RuntimeSettings, runtime_deps
from dissectopt.exceptions import ConfigError
from dissectopt.options import DissectOptions
from dissectopt.registry import InMemoryProtocolRegistry
from dissectopt.reporting import EchoReporter, report_option_error
from dissectopt.scan import scan_arguments
from dissectopt.timestamp import (
    SECONDS_TYPE_HELP,
    TIME_FORMAT_HELP,
    TIME_PRECISION_DIGITS,
)

app = typer.Typer(add_completion=False)

_PROG = "dissectopt"
_INVALID_OPTION_EXIT = 1


def _stable_json(payload: dict[str, object]) -> str:
    return json.dumps(payload, indent=2, sort_keys=True)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    help=(
        "Scan dissection options (from the config file, then the command line), "
        "apply protocol toggles and print the resulting settings."
    ),
)
def resolve(
    ctx: typer.Context,
    root: Path = typer.Option(Path("."), "--root"),
    config: Optional[Path] = typer.Option(None, "--config"),
    keytab_support: bool = typer.Option(
        False,
        "--keytab-support/--no-keytab-support",
        help="Accept -K keytab files.",
    ),
) -> None:
    reporter = EchoReporter(prog=_PROG)
    data = load_config(root=root, config_path=config)
    try:
        config_tokens = config_argv(dissect_section(data))
    except ConfigError as exc:
        report_option_error(reporter, exc)
        raise typer.Exit(code=_INVALID_OPTION_EXIT)

    options = DissectOptions()
    settings = RuntimeSettings.default()
    dispatcher = OptionDispatcher(
        options=options,
        deps=runtime_deps(settings, reporter=reporter, keytab_support=keytab_support),
    )
    if not scan_arguments([*config_tokens, *ctx.args], dispatcher, prog=_PROG):
        raise typer.Exit(code=_INVALID_OPTION_EXIT)

    registry = InMemoryProtocolRegistry.from_config(registry_section(data))
    if not setup_enabled_and_disabled_protocols(options, registry, reporter=reporter):
        raise typer.Exit(code=_INVALID_OPTION_EXIT)

    payload = {
        **options.to_payload(),
        **settings.to_payload(),
        "registry": registry.to_payload(),
    }
    typer.echo(_stable_json(payload))


@app.command("timestamp-formats")
def timestamp_formats() -> None:
    """List the accepted -t types, .N precisions and -u seconds types."""
    typer.echo("Time stamp types (-t TYPE):")
    for line in TIME_FORMAT_HELP:
        typer.echo(line)
    digits = ", ".join(TIME_PRECISION_DIGITS)
    typer.echo(f"Time stamp precisions (-t .N or -t TYPE.N): N in {digits}")
    typer.echo("Seconds types (-u):")
    for line in SECONDS_TYPE_HELP:
        typer.echo(line)
