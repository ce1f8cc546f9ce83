"""CLI точка входа ProbeDesk: `probedesk` и `probedesk win`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from probedesk.completion import install_autocomplete
from probedesk.invoker import INVALID_TARGET, execute_powershell, is_valid_host
from probedesk.models import DEFAULT_TRACE_SAMPLES, ProbeContext, RunConfig
from probedesk.registry import Registry, discover_probes
from probedesk.report import EXPORT_FORMATS
from probedesk.runner import dispatch
from probes.base import BaseProbe, HostProbe

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

PLATFORM = "win"

PROBES = discover_probes(PLATFORM)
COLLECTORS = [p for p in PROBES if p.kind == "collect"]
ONE_OFFS = [p for p in PROBES if p.kind == "one-off"]
TRACER = next(p for p in PROBES if p.kind == "target")

#: Флаги, которые не являются зондами, но попадают в автодополнение
EXTRA_FLAGS = ["remote", "report", "out", "yes", "trace-sample", "autocomplete-install"]


def _param_name(flag: str) -> str:
    return flag.replace("-", "_")


def _probe_flags(probes: list[BaseProbe]):
    """Добавить команде по булеву флагу на каждый зонд (в порядке зондов)."""
    def decorator(f):
        for probe in reversed(probes):
            f = click.option(f"--{probe.name}", is_flag=True, help=probe.description)(f)
        return f
    return decorator


def _validate_remote(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[str]:
    if value is not None and not is_valid_host(value):
        raise click.BadParameter(INVALID_TARGET)
    return value


def _install_autocomplete() -> None:
    flags = [p.name for p in PROBES] + EXTRA_FLAGS
    try:
        profile, added = install_autocomplete(flags)
    except OSError as exc:
        raise click.ClickException(f"failed to install autocomplete: {exc}")
    if added:
        click.echo(f"✅ Autocomplete installed into {profile}. Restart PowerShell to use it.")
    else:
        click.echo(f"Autocomplete is already installed in {profile}.")


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """ProbeDesk — сбор сведений о системе и сети Windows для поддержки и аудита.

    Без подкоманды работает как `probedesk win`: без флагов собирает всё.
    """
    if ctx.invoked_subcommand is None:
        # make_context проходит полную обработку параметров, включая envvar
        with win.make_context("win", [], parent=ctx) as sub_ctx:
            win.invoke(sub_ctx)


@cli.command()
@_probe_flags(COLLECTORS)
@click.option("--trace", "trace_requested", is_flag=True, help=TRACER.description)
@click.option("--remote", default=None, callback=_validate_remote,
              help="Run commands remotely on target host (requires PS Remoting)")
@click.option("--report", "report_format", type=click.Choice(EXPORT_FORMATS), default=None,
              help="Export collected data to report (html or md)")
@click.option("--out", "-o", "out_dir", type=click.Path(file_okay=False, path_type=Path),
              default=None, help="Directory for the exported report (default: Desktop)")
@click.option("--yes", "confirmed", is_flag=True,
              help="Confirm operations that change the system")
@click.option("--trace-sample", "trace_samples", multiple=True, envvar="PROBEDESK_TRACE_SAMPLES",
              default=DEFAULT_TRACE_SAMPLES, show_default=True,
              help="Hosts traced in full collection mode")
@click.option("--autocomplete-install", is_flag=True,
              help="Install PowerShell autocomplete into the user profile")
@_probe_flags(ONE_OFFS)
@click.argument("host", required=False)
def win(
    host: Optional[str],
    trace_requested: bool,
    remote: Optional[str],
    report_format: Optional[str],
    out_dir: Optional[Path],
    confirmed: bool,
    trace_samples: tuple[str, ...],
    autocomplete_install: bool,
    **flags: bool,
) -> None:
    """Собрать сведения о Windows. Без флагов — полный сбор с экспортом в html."""
    if autocomplete_install:
        _install_autocomplete()
        return

    one_off = next((p for p in ONE_OFFS if flags.get(_param_name(p.name))), None)
    if isinstance(one_off, HostProbe) and not host:
        click.echo(f"Please specify a host or IP, e.g.: probedesk win --{one_off.name} 8.8.8.8")
        return

    selected = [p.name for p in COLLECTORS if flags.get(_param_name(p.name))]
    config = RunConfig(
        confirmed=confirmed,
        remote=remote,
        report_format=report_format,
        out_dir=out_dir,
        host=host,
        trace_requested=trace_requested,
        trace_samples=tuple(trace_samples),
    )
    probe_ctx = ProbeContext(remote=remote, confirmed=confirmed, execute=execute_powershell)

    dispatch(
        Registry.build(COLLECTORS, selected),
        config,
        probe_ctx,
        tracer=TRACER,
        one_off=one_off,
    )
