"""Последовательный запуск действий и сборка отчёта."""

from __future__ import annotations

import getpass
import logging
from datetime import datetime
from typing import Callable, Iterable, Optional

import click

from probedesk.models import ProbeContext, ProbeResult, Report, ResultKind, RunConfig
from probedesk.registry import Registry
from probedesk.report import DEFAULT_FORMAT, deliver_report
from probes.base import BaseProbe, HostProbe

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]


def current_user() -> str:
    """Имя пользователя для шапки отчёта."""
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "Unknown"


def _run_one(title: str, run: Callable[[], ProbeResult]) -> ProbeResult:
    """Запустить один зонд. Любой сбой превращается в текст секции."""
    logger.debug("Запуск %s", title)
    try:
        result = run()
    except Exception as exc:
        logger.error("[%s] ошибка: %s", title, exc)
        return ProbeResult(
            kind=ResultKind.EXECUTION_FAILED,
            text=f"⚠️ Error executing: {exc}",
            error=str(exc),
        )
    if result.failed:
        logger.error("Error running %s: %s", title, result.error)
    return result


def _append(report: Report, title: str, run: Callable[[], ProbeResult], echo: Echo) -> ProbeResult:
    # Заголовок печатается до запуска: оператор видит, что сейчас выполняется
    echo(f"\n=== {title} ===")
    result = _run_one(title, run)
    echo(result.text)
    report.add(title, result.text)
    return result


def _append_trace(report: Report, tracer: HostProbe, host: str, ctx: ProbeContext, echo: Echo) -> None:
    _append(report, tracer.section_title(host), lambda: tracer.run(ctx, host), echo)


def run_selected(
    registry: Registry,
    ctx: ProbeContext,
    tracer: Optional[HostProbe] = None,
    trace_requested: bool = False,
    host: Optional[str] = None,
    echo: Echo = click.echo,
) -> Report:
    """Выборочный режим: только отмеченные действия, в порядке реестра.

    Трассировка, если запрошена, всегда добавляется последней секцией.
    """
    report = Report()

    for action in registry.selected():
        _append(report, action.title, lambda a=action: a.run(ctx), echo)

    if trace_requested and tracer is not None:
        if not host:
            echo("Please specify a host or IP to trace, e.g.: probedesk win --trace 8.8.8.8")
        else:
            _append_trace(report, tracer, host, ctx, echo)

    return report


def run_full_collection(
    registry: Registry,
    ctx: ProbeContext,
    tracer: Optional[HostProbe] = None,
    samples: Iterable[str] = (),
    user: Optional[str] = None,
    now: Optional[datetime] = None,
    echo: Echo = click.echo,
) -> Report:
    """Полный сбор: все действия реестра и трассировка до каждого хоста-образца."""
    echo("=== Collecting All Windows Info ===")
    report = Report.with_header(user or current_user(), now or datetime.now())

    for action in registry.all():
        _append(report, action.title, lambda a=action: a.run(ctx), echo)

    if tracer is not None:
        for sample in samples:
            _append_trace(report, tracer, sample, ctx, echo)

    logger.info("Полный сбор: %d секций", len(report.sections))
    return report


def run_one_off(
    probe: BaseProbe,
    ctx: ProbeContext,
    host: Optional[str] = None,
    echo: Echo = click.echo,
) -> ProbeResult:
    """Одиночная операция: только вывод в консоль, без отчёта и экспорта."""
    result = _run_one(probe.name, lambda: probe.run(ctx, host))
    echo(result.text)
    return result


def dispatch(
    registry: Registry,
    config: RunConfig,
    ctx: ProbeContext,
    tracer: Optional[HostProbe] = None,
    one_off: Optional[BaseProbe] = None,
    echo: Echo = click.echo,
) -> Optional[Report]:
    """Выбрать режим запуска и довести отчёт до буфера обмена и файла.

    Returns:
        Собранный отчёт; None для одиночной операции.
    """
    if one_off is not None:
        run_one_off(one_off, ctx, config.host, echo)
        return None

    if not registry.any_selected(config.trace_requested):
        report = run_full_collection(
            registry, ctx, tracer, config.trace_samples, echo=echo
        )
        deliver_report(
            report.render(), config.report_format or DEFAULT_FORMAT, config.out_dir, echo
        )
        return report

    report = run_selected(
        registry, ctx, tracer, config.trace_requested, config.host, echo
    )
    content = report.render()
    if content:
        deliver_report(content, config.report_format, config.out_dir, echo)
    return report
