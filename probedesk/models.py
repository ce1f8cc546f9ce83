"""Модели данных ProbeDesk: ProbeResult, ReportSection, Report, ProbeContext, RunConfig."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

#: Хосты для трассировки в режиме полного сбора: внутренний и публичный
DEFAULT_TRACE_SAMPLES: tuple[str, ...] = ("fileserver.corp.local", "8.8.8.8")


class ResultKind(str, Enum):
    """Исход запуска зонда."""

    OK = "ok"
    EMPTY_OUTPUT = "empty_output"
    EXECUTION_FAILED = "execution_failed"
    VALIDATION_FAILED = "validation_failed"
    CONFIRMATION_REQUIRED = "confirmation_required"


class ProbeResult(BaseModel):
    """Результат зонда. Текст всегда пригоден для вывода в отчёт."""

    model_config = ConfigDict(frozen=True)

    kind: ResultKind = Field(..., description="Исход запуска")
    text: str = Field(..., description="Текст для консоли и отчёта")
    error: Optional[str] = Field(None, description="Ошибка исполнения, если была")

    @property
    def failed(self) -> bool:
        return self.kind is ResultKind.EXECUTION_FAILED


class ReportSection(BaseModel):
    """Секция отчёта — вывод одного действия под заголовком."""

    model_config = ConfigDict(frozen=True)

    title: str
    body: str

    def render(self) -> str:
        return f"=== {self.title} ===\n{self.body}\n\n"


class Report(BaseModel):
    """Отчёт — заголовок (только полный сбор) и секции в порядке выполнения."""

    header: str = ""
    sections: list[ReportSection] = Field(default_factory=list)

    @classmethod
    def with_header(cls, user: str, generated_at: datetime) -> Report:
        """Создать отчёт с шапкой: кто и когда его собрал."""
        header = (
            f"Report generated by: {user}\n"
            f"Date: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}\n\n"
        )
        return cls(header=header)

    def add(self, title: str, body: str) -> ReportSection:
        section = ReportSection(title=title, body=body)
        self.sections.append(section)
        return section

    def titles(self) -> list[str]:
        return [s.title for s in self.sections]

    def render(self) -> str:
        """Склеить отчёт в одну строку. Детерминирован для одних и тех же секций."""
        return self.header + "".join(s.render() for s in self.sections)


class ProbeContext(BaseModel):
    """Всё, от чего зависит запуск зонда, кроме самой команды.

    execute — внешний исполнитель: принимает скрипт PowerShell,
    возвращает (вывод, ошибка или None).
    """

    model_config = ConfigDict(frozen=True)

    remote: Optional[str] = Field(None, description="Хост для Invoke-Command")
    confirmed: bool = Field(False, description="Подтверждение (--yes) для изменяющих операций")
    execute: Callable[[str], tuple[str, Optional[str]]]


class RunConfig(BaseModel):
    """Параметры одного запуска, собранные CLI из опций."""

    model_config = ConfigDict(frozen=True)

    confirmed: bool = False
    remote: Optional[str] = None
    report_format: Optional[str] = Field(None, description="md или html")
    out_dir: Optional[Path] = Field(None, description="Куда писать отчёт; по умолчанию Desktop")
    host: Optional[str] = Field(None, description="Позиционный хост для --trace / --ping")
    trace_requested: bool = False
    trace_samples: tuple[str, ...] = DEFAULT_TRACE_SAMPLES
