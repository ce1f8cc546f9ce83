"""Зонды сетевой конфигурации: адаптеры, сетевые диски, VPN."""

from __future__ import annotations

from probes.base import CommandProbe


class IpConfig(CommandProbe):
    name = "ipconfig"
    platform = "win"
    order = 20
    description = "Get full IP configuration (ipconfig /all)"
    command = "ipconfig /all"


class NetUse(CommandProbe):
    """Подключённые сетевые диски и ресурсы."""

    name = "netuse"
    platform = "win"
    order = 30
    description = "Get mapped network drives (net use)"
    command = "net use"


class VpnConnections(CommandProbe):
    name = "vpn"
    platform = "win"
    order = 50
    description = "Get configured VPN connections"
    command = "Get-VpnConnection"
