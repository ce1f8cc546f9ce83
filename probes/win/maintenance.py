"""Обслуживающие операции: сброс DNS-кэша и обновление пакетов winget."""

from __future__ import annotations

from probes.base import GatedProbe


class FlushDns(GatedProbe):
    name = "flush"
    platform = "win"
    order = 110
    description = "Flush DNS cache (requires --yes)"
    operation = "Flushing DNS"
    command = "ipconfig /flushdns"


class WingetUpdate(GatedProbe):
    """Обновить все пакеты, молча приняв соглашения источников."""

    name = "winget-update"
    platform = "win"
    order = 120
    description = "Update installed packages using winget (requires --yes)"
    operation = "Running winget upgrade"
    command = "winget upgrade --accept-source-agreements --accept-package-agreements"
