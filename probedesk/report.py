"""Report Sink — копирование отчёта в буфер обмена и экспорт в md/html."""

from __future__ import annotations

import html
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import click
import pyperclip

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("md", "html")
DEFAULT_FORMAT = "html"


class ExportError(Exception):
    """Отчёт не удалось записать: неизвестный формат или ошибка ФС."""


# ---------------------------------------------------------------------------
# Рендеринг
# ---------------------------------------------------------------------------

def render_markdown(content: str) -> str:
    return "```markdown\n" + content + "\n```"


def escape_html(content: str) -> str:
    """Экранирование как у прежних отчётов: кавычки — числовыми ссылками."""
    return html.escape(content, quote=False).replace("\"", "&#34;").replace("'", "&#39;")


def render_html(content: str) -> str:
    """Минимальный HTML-документ; <pre> сохраняет пробелы и переносы строк."""
    return "<html><body><pre>" + escape_html(content) + "</pre></body></html>"


_RENDERERS: dict[str, Callable[[str], str]] = {
    "md": render_markdown,
    "html": render_html,
}


def default_export_dir() -> Path:
    """Рабочий стол текущего пользователя."""
    return Path.home() / "Desktop"


def report_filename(report_format: str, now: Optional[datetime] = None) -> str:
    stamp = (now or datetime.now()).strftime("%Y-%m-%d_%H-%M-%S")
    return f"report_{stamp}.{report_format}"


# ---------------------------------------------------------------------------
# Побочные эффекты
# ---------------------------------------------------------------------------

def copy_to_clipboard(content: str, echo: Callable[[str], None] = click.echo) -> bool:
    """Скопировать отчёт в буфер обмена. Ошибка не фатальна.

    Returns:
        True, если текст попал в буфер.
    """
    if not content:
        echo("Nothing to copy.")
        return False
    try:
        pyperclip.copy(content)
    except pyperclip.PyperclipException as exc:
        logger.error("Буфер обмена недоступен: %s", exc)
        echo(f"Error copying to clipboard: {exc}")
        return False
    echo("✅ Output copied to clipboard!")
    return True


def export_report(
    content: str,
    report_format: str,
    path: str | Path | None = None,
    now: Optional[datetime] = None,
) -> Path:
    """Записать отчёт в файл report_<дата_время>.<формат>.

    Args:
        content: Текст отчёта.
        report_format: md или html.
        path: Директория для файла. Если None — рабочий стол пользователя.
        now: Время для имени файла (по умолчанию — текущее).

    Returns:
        Путь к записанному файлу.

    Raises:
        ExportError: Формат не поддерживается (ничего не пишется) или запись не удалась.
    """
    renderer = _RENDERERS.get(report_format)
    if renderer is None:
        raise ExportError(f"unsupported format: {report_format}")

    out_dir = Path(path) if path is not None else default_export_dir()
    out_file = out_dir / report_filename(report_format, now)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        out_file.write_text(renderer(content), encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"cannot write {out_file}: {exc}") from exc

    logger.debug("Отчёт записан: %s", out_file)
    return out_file


def deliver_report(
    content: str,
    report_format: Optional[str] = None,
    out_dir: str | Path | None = None,
    echo: Callable[[str], None] = click.echo,
) -> Optional[Path]:
    """Буфер обмена, затем (если задан формат) экспорт.

    Пустой отчёт никуда не отправляется.
    """
    if not content:
        echo("Nothing to copy.")
        return None

    copy_to_clipboard(content, echo)

    if not report_format:
        return None
    try:
        out_file = export_report(content, report_format, out_dir)
    except ExportError as exc:
        logger.error("Экспорт отчёта не удался: %s", exc)
        echo(f"Error exporting report: {exc}")
        return None

    echo(f"✅ Report exported successfully as {report_format} → {out_file}")
    return out_file
