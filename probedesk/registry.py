"""Action Registry — упорядоченный список действий и автообнаружение зондов."""

from __future__ import annotations

import importlib
import pkgutil
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from probedesk.models import ProbeContext, ProbeResult
from probes.base import BaseProbe


def discover_probes(platform: str) -> list[BaseProbe]:
    """Автообнаружение зондов для платформы.

    Сканирует пакет `probes.<platform>` и создаёт экземпляры всех классов,
    наследующих BaseProbe и имеющих name. Результат отсортирован по order.
    """
    pkg_name = f"probes.{platform}"
    try:
        pkg = importlib.import_module(pkg_name)
    except ModuleNotFoundError:
        raise ValueError(f"Платформа '{platform}' не поддерживается (пакет {pkg_name} не найден)")

    seen: set[type] = set()
    probe_instances: list[BaseProbe] = []
    for module_info in pkgutil.iter_modules(pkg.__path__):
        module = importlib.import_module(f"{pkg_name}.{module_info.name}")
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if (
                isinstance(attr, type)
                and issubclass(attr, BaseProbe)
                and attr.name
                and attr.platform == platform
                and attr not in seen
            ):
                seen.add(attr)
                probe_instances.append(attr())

    return sorted(probe_instances, key=lambda p: (p.order, p.name))


class Action(BaseModel):
    """Именованное действие: зонд и признак того, что его выбрали."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    selected: bool = False
    probe: BaseProbe

    @property
    def title(self) -> str:
        """Заголовок секции: check-health → Check-Health."""
        return self.name.title()

    def run(self, ctx: ProbeContext) -> ProbeResult:
        return self.probe.run(ctx)


class Registry(BaseModel):
    """Неизменяемый реестр действий. Порядок реестра = порядок отчёта."""

    model_config = ConfigDict(frozen=True)

    actions: tuple[Action, ...] = ()

    @classmethod
    def build(cls, probes: Iterable[BaseProbe], selected: Iterable[str] = ()) -> Registry:
        """Собрать реестр из зондов в их порядке, отметив выбранные по имени."""
        chosen = set(selected)
        return cls(actions=tuple(
            Action(name=p.name, selected=p.name in chosen, probe=p) for p in probes
        ))

    def all(self) -> tuple[Action, ...]:
        return self.actions

    def selected(self) -> list[Action]:
        return [a for a in self.actions if a.selected]

    def any_selected(self, trace_requested: bool = False) -> bool:
        """Выбрано ли хоть что-то: иначе запускается полный сбор."""
        return trace_requested or any(a.selected for a in self.actions)
