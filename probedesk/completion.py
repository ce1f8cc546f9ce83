"""Автодополнение флагов ProbeDesk в PowerShell."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

#: Маркер, по которому установленный скрипт находится в профиле
MARKER = "# probedesk autocomplete"

_SCRIPT_TEMPLATE = """{marker}
$flags = @({flags})

Register-ArgumentCompleter -CommandName "probedesk" -ScriptBlock {{
    param($commandName, $parameterName, $wordToComplete, $commandAst, $fakeBoundParameter)

    if ($commandAst.CommandElements.Count -gt 1 -and $commandAst.CommandElements[1].Value -eq "win") {{
        $flags | Where-Object {{ $_ -like "$wordToComplete*" }} |
            ForEach-Object {{
                [System.Management.Automation.CompletionResult]::new($_, $_, 'ParameterValue', $_)
            }}
    }}
}}"""


def autocomplete_script(flags: Iterable[str]) -> str:
    quoted = ",".join(f'"{flag}"' for flag in flags)
    return _SCRIPT_TEMPLATE.format(marker=MARKER, flags=quoted)


def default_profile_path() -> Path:
    """Профиль PowerShell текущего пользователя."""
    base = os.environ.get("USERPROFILE") or str(Path.home())
    return Path(base) / "Documents" / "PowerShell" / "Microsoft.PowerShell_profile.ps1"


def install_autocomplete(flags: Iterable[str], profile: Optional[Path] = None) -> tuple[Path, bool]:
    """Дописать скрипт автодополнения в профиль PowerShell.

    Профиль и его директория создаются при необходимости. Повторная
    установка ничего не меняет.

    Returns:
        (путь к профилю, True если скрипт был дописан).

    Raises:
        OSError: Профиль не удалось прочитать или записать.
    """
    profile = profile or default_profile_path()
    profile.parent.mkdir(parents=True, exist_ok=True)

    existing = profile.read_text(encoding="utf-8") if profile.exists() else ""
    if MARKER in existing:
        return profile, False

    with profile.open("a", encoding="utf-8") as fh:
        fh.write("\n" + autocomplete_script(flags) + "\n")
    return profile, True
