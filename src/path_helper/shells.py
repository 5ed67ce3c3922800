"""Rendering of computed path values as shell export statements."""

from __future__ import annotations

from collections.abc import Mapping

from path_helper.domain import ShellStyle


def detect_shell_style(shell: str | None) -> ShellStyle:
    """Pick C-shell syntax when *shell* (usually ``$SHELL``) mentions ``csh``, POSIX syntax otherwise."""
    if shell and "csh" in shell:
        return ShellStyle.CSH
    return ShellStyle.SH


def format_export(style: ShellStyle, name: str, value: str) -> str:
    if style is ShellStyle.CSH:
        return f'setenv {name} "{value}";'
    return f'{name}="{value}"; export {name};'


def render_exports(style: ShellStyle, values: Mapping[str, str]) -> str:
    """Return one newline-terminated export statement per variable, in mapping order."""
    return "".join(f"{format_export(style, name, value)}\n" for name, value in values.items())
