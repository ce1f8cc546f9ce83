"""Зонды DISM: проверка, сканирование и восстановление образа Windows."""

from __future__ import annotations

from probes.base import CommandProbe, GatedProbe


class CheckHealth(CommandProbe):
    """Только чтение — подтверждение не требуется."""

    name = "check-health"
    platform = "win"
    order = 90
    description = "Check Windows image health (DISM /CheckHealth)"
    command = "Dism /Online /Cleanup-Image /CheckHealth"


class ScanHealth(GatedProbe):
    name = "scan-health"
    platform = "win"
    order = 130
    description = "Scan system health (requires --yes)"
    operation = "Scanning health"
    command = "Dism /Online /Cleanup-Image /ScanHealth"


class RestoreHealth(GatedProbe):
    name = "restore-health"
    platform = "win"
    order = 140
    description = "Restore system health (requires --yes)"
    operation = "Restoring health"
    command = "Dism /Online /Cleanup-Image /RestoreHealth"
