"""Confirmation Gate — изменяющие операции выполняются только с --yes."""

from __future__ import annotations

import logging
from typing import Callable

from probedesk.models import ProbeResult, ResultKind

logger = logging.getLogger(__name__)


def confirmation_message(operation: str) -> str:
    return f"{operation} requires explicit confirmation to proceed."


def confirmation_gate(
    operation: str,
    confirmed: bool,
    action: Callable[[], ProbeResult],
) -> ProbeResult:
    """Запустить action, только если подтверждение получено.

    Args:
        operation: Человекочитаемое имя операции ("Flushing DNS").
        confirmed: Значение флага --yes.
        action: Отложенный запуск зонда.

    Returns:
        Результат action либо confirmation_required без запуска.
    """
    if not confirmed:
        logger.info("%s пропущено: нет подтверждения", operation)
        return ProbeResult(
            kind=ResultKind.CONFIRMATION_REQUIRED,
            text=confirmation_message(operation),
        )
    return action()
