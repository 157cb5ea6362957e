"""User-facing help rendering."""

from __future__ import annotations

from collections.abc import Iterable

from .commands import locate_command
from .config import StrapConfig
from .constants import BUILTIN_COMMANDS, SUMMARY_NAME_WIDTH
from .docs import DocumentationRecord, documentation_for
from .errors import UndocumentedError
from .lib.fonts import FONT_BOLD, FONT_RED, FontStyle

_PLAIN = FontStyle(enabled=False)


def render_program_usage(program: str) -> str:
    return f"Usage: {program} <command> [<args>]"


def render_version(config: StrapConfig) -> str:
    return f"{config.program_name} {config.version}"


def render_usage(record: DocumentationRecord) -> str:
    """Usage block only; empty when the command has none."""
    return record.usage


def render_help(program: str, command: str, record: DocumentationRecord) -> str:
    """Full help text for one command.

    Raises:
        UndocumentedError: If the record has neither usage nor summary.
    """
    if record.is_absent:
        raise UndocumentedError(command)

    lines = [record.usage or f"Usage: {program} {command}"]
    help_text = record.help_text
    if help_text:
        lines.extend(["", help_text, ""])
    return "\n".join(lines)


def render_summaries(
    entries: Iterable[tuple[str, DocumentationRecord]],
    style: FontStyle = _PLAIN,
) -> list[str]:
    """One aligned line per command that has a summary."""
    rows: list[str] = []
    for name, record in entries:
        if not record.summary:
            continue
        label = style.apply(f"{name:<{SUMMARY_NAME_WIDTH}}", FONT_BOLD)
        rows.append(f"   {label}   {record.summary}")
    return rows


def builtin_summaries(config: StrapConfig) -> list[tuple[str, DocumentationRecord]]:
    entries = []
    for name in BUILTIN_COMMANDS:
        command = locate_command(config, name)
        if command.exists:
            entries.append((name, documentation_for(command.path)))
    return entries


def render_top_level_usage(config: StrapConfig, style: FontStyle = _PLAIN) -> str:
    program = config.program_name
    lines = [render_program_usage(program), ""]

    summaries = render_summaries(builtin_summaries(config), style)
    if summaries:
        lines.append(f"Some useful {program} commands are:")
        lines.extend(summaries)
        lines.append("")

    lines.append(f"See '{program} help <command>' for information on a specific command.")
    return "\n".join(lines)


def render_error(program: str, message: str, style: FontStyle = _PLAIN) -> str:
    return f"{style.error_prefix()}{style.apply(f'{program}:', FONT_RED)} {message}"
