"""Зонд запущенных служб Windows."""

from __future__ import annotations

from probes.base import CommandProbe


class RunningServices(CommandProbe):
    name = "services"
    platform = "win"
    order = 60
    description = "Get running services"
    command = (
        "Get-Service | Where-Object {$_.Status -eq 'Running'} "
        "| Select-Object DisplayName,Name,StartType"
    )
