"""Базовые классы зондов ProbeDesk."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from probedesk.gate import confirmation_gate
from probedesk.invoker import INVALID_TARGET, invoke, is_valid_host
from probedesk.models import ProbeContext, ProbeResult, ResultKind


class BaseProbe(ABC):
    """Интерфейс зонда. Один зонд = одна внешняя команда."""

    #: Уникальный идентификатор зонда (kebab-case), он же имя CLI-флага
    name: str = ""
    #: Платформа, для которой предназначен зонд
    platform: str = ""
    #: collect — секция отчёта, one-off — одиночная операция, target — трассировка
    kind: str = "collect"
    #: Порядок в реестре и в отчёте
    order: int = 0
    #: Текст справки для CLI-флага
    description: str = ""

    @abstractmethod
    def run(self, ctx: ProbeContext, target: Optional[str] = None) -> ProbeResult:
        """Выполнить зонд.

        Args:
            ctx: Удалённый хост, подтверждение и исполнитель команд.
            target: Хост/IP для зондов, которым он нужен; остальные его игнорируют.

        Returns:
            Результат. Зонд никогда не бросает исключение из-за сбоя команды.
        """
        ...

    def __repr__(self) -> str:
        return f"<Probe {self.name!r} platform={self.platform!r} kind={self.kind!r}>"


class CommandProbe(BaseProbe):
    """Зонд с фиксированной командой PowerShell."""

    command: str = ""

    def run(self, ctx: ProbeContext, target: Optional[str] = None) -> ProbeResult:
        return invoke(self.command, ctx)


class GatedProbe(CommandProbe):
    """Изменяющая операция: без подтверждения команда не запускается."""

    kind = "one-off"
    #: Имя операции в сообщении об отказе ("Flushing DNS")
    operation: str = ""

    def run(self, ctx: ProbeContext, target: Optional[str] = None) -> ProbeResult:
        return confirmation_gate(
            self.operation, ctx.confirmed, lambda: invoke(self.command, ctx)
        )


class HostProbe(BaseProbe):
    """Зонд, которому нужен хост: команда собирается из шаблона {host}."""

    command_template: str = ""
    #: Заголовок секции: "TraceRoute" → "TraceRoute (8.8.8.8)"
    title: str = ""

    def section_title(self, target: str) -> str:
        return f"{self.title} ({target})"

    def run(self, ctx: ProbeContext, target: Optional[str] = None) -> ProbeResult:
        if not is_valid_host(target):
            return ProbeResult(kind=ResultKind.VALIDATION_FAILED, text=INVALID_TARGET)
        return invoke(self.command_template.format(host=target), ctx)
