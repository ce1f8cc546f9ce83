"""Probe Invoker — запуск команды PowerShell локально или через Invoke-Command."""

from __future__ import annotations

import logging
import re
import subprocess
from typing import Optional

from probedesk.models import ProbeContext, ProbeResult, ResultKind

logger = logging.getLogger(__name__)

NO_OUTPUT = "No output (possibly no data found)."
INVALID_TARGET = "Invalid target: only letters, digits, dots, and hyphens are allowed."

# Без этого PowerShell отдаёт вывод в OEM-кодировке и ломает «•» и кириллицу
UTF8_PREAMBLE = "[Console]::OutputEncoding = [Text.UTF8Encoding]::UTF8;"

_HOST_RE = re.compile(r"[A-Za-z0-9.\-]+")


def is_valid_host(value: Optional[str]) -> bool:
    """Проверить хост/IP перед подстановкой в команду.

    Разрешены только буквы, цифры, точки и дефисы; пустая строка запрещена.
    """
    if not value:
        return False
    return _HOST_RE.fullmatch(value) is not None


def wrap_command(command: str, remote: Optional[str] = None) -> str:
    """Обернуть команду в UTF-8 преамбулу и, если задан remote, в Invoke-Command."""
    if remote:
        return (
            f"Invoke-Command -ComputerName {remote} "
            f"-ScriptBlock {{ {UTF8_PREAMBLE} {command} }}"
        )
    return f"{UTF8_PREAMBLE} {command}"


def execute_powershell(script: str) -> tuple[str, Optional[str]]:
    """Выполнить скрипт в powershell.exe и вернуть (вывод, ошибка).

    stderr сливается в stdout. Ошибка — ненулевой код выхода или
    невозможность запустить процесс.
    """
    try:
        proc = subprocess.run(
            ["powershell", "-NoProfile", "-NonInteractive", "-Command", script],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        return "", str(exc)

    output = proc.stdout or ""
    if proc.returncode != 0:
        return output, f"exit status {proc.returncode}"
    return output, None


def invoke(command: str, ctx: ProbeContext) -> ProbeResult:
    """Выполнить команду зонда и нормализовать результат.

    Ошибка исполнения не пробрасывается: она становится текстом секции.
    """
    if ctx.remote and not is_valid_host(ctx.remote):
        return ProbeResult(kind=ResultKind.VALIDATION_FAILED, text=INVALID_TARGET)

    script = wrap_command(command, ctx.remote)
    logger.debug("PowerShell%s: %s", f" @{ctx.remote}" if ctx.remote else "", command)

    output, error = ctx.execute(script)
    output = (output or "").strip()

    if error is not None:
        return ProbeResult(
            kind=ResultKind.EXECUTION_FAILED,
            text=output or f"⚠️ Error executing: {error}",
            error=error,
        )
    if not output:
        return ProbeResult(kind=ResultKind.EMPTY_OUTPUT, text=NO_OUTPUT)
    return ProbeResult(kind=ResultKind.OK, text=output)
