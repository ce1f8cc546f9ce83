"""Зонды сведений о системе: ОС, установленные продукты, локальные пользователи."""

from __future__ import annotations

from probes.base import CommandProbe


class SystemInfo(CommandProbe):
    """Название и версия ОС из systeminfo."""

    name = "system"
    platform = "win"
    order = 10
    description = "Get OS name and version"
    command = "systeminfo | Select-String 'OS Name','OS Version'"


class InstalledProducts(CommandProbe):
    """Установленные программы из ветки Uninstall реестра."""

    name = "products"
    platform = "win"
    order = 40
    description = "Get installed products"
    command = (
        "Get-ItemProperty HKLM:\\Software\\Microsoft\\Windows\\CurrentVersion\\Uninstall\\* "
        "| Select-Object DisplayName,DisplayVersion"
    )


class LocalUsers(CommandProbe):
    name = "users"
    platform = "win"
    order = 70
    description = "Get local user accounts"
    command = (
        "Get-LocalUser "
        "| Select-Object Name,Enabled,PasswordExpires,PasswordLastSet,LastLogon"
    )
