"""Command lookup across the core commands directory and installed plugins."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import StrapConfig
from .constants import CMD_DIR_NAME
from .lib.logging_utils import log_event


@dataclass(frozen=True)
class Command:
    name: str
    path: Path
    exists: bool


def is_valid_name(name: str) -> bool:
    """Names must be a single, non-hidden path segment."""
    if not name or name.startswith("."):
        return False
    return "/" not in name and "\\" not in name and "\0" not in name


def plugin_command_dirs(plugins_dir: Path) -> list[Path]:
    """`cmd` directories of installed plugins, in plugin name order."""
    try:
        children = sorted(plugins_dir.iterdir(), key=lambda p: p.name)
    except OSError:
        return []

    return [
        child / CMD_DIR_NAME
        for child in children
        if not child.name.startswith(".") and (child / CMD_DIR_NAME).is_dir()
    ]


def command_search_path(config: StrapConfig) -> list[Path]:
    return [config.cmd_dir, *plugin_command_dirs(config.plugins_dir)]


def find_in_directory(directory: Path, name: str) -> Command:
    """Look up `name` as a file directly inside `directory`."""
    candidate = directory / name
    exists = is_valid_name(name) and candidate.is_file()
    return Command(name=name, path=candidate, exists=exists)


def locate_command(config: StrapConfig, name: str) -> Command:
    """Find a command by exact name; core commands shadow plugin commands."""
    search_path = command_search_path(config)
    for directory in search_path:
        command = find_in_directory(directory, name)
        if command.exists:
            log_event("command_lookup", command=name, found=True, path=command.path)
            return command

    log_event(
        "command_lookup",
        command=name,
        found=False,
        searched=search_path,
    )
    return Command(name=name, path=config.cmd_dir / name, exists=False)


def list_commands(config: StrapConfig) -> list[str]:
    """Sorted names of every available command."""
    names: set[str] = set()
    for directory in command_search_path(config):
        try:
            entries = list(directory.iterdir())
        except OSError:
            continue
        names.update(
            entry.name
            for entry in entries
            if is_valid_name(entry.name) and entry.is_file()
        )
    return sorted(names)
