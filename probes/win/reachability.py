"""Зонды доступности хоста: трассировка маршрута и ping."""

from __future__ import annotations

from probes.base import HostProbe


class TraceRoute(HostProbe):
    """Трассировка без разрешения имён, не больше 10 хопов."""

    name = "trace"
    platform = "win"
    kind = "target"
    order = 100
    description = "Trace a host (add host as argument)"
    title = "TraceRoute"
    command_template = "tracert -d -h 10 {host}"


class Ping(HostProbe):
    name = "ping"
    platform = "win"
    kind = "one-off"
    order = 150
    description = "Ping a host (add host as argument)"
    title = "Ping"
    command_template = "ping -n 4 {host}"
