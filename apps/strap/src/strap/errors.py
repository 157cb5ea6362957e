"""Typed exceptions for strap."""

from __future__ import annotations

from pathlib import Path


class StrapError(Exception):
    """Base exception for strap failures."""

    exit_code = 1


class ConfigError(StrapError):
    """Raised when environment overrides are unusable."""


class PathResolutionError(StrapError):
    """Raised when a path cannot be canonicalized."""


class PathNotFoundError(PathResolutionError):
    """Raised when a path, or every target in its symlink chain, is missing."""


class InvalidPathError(PathResolutionError):
    """Raised when a directory was required but a file was given, or vice versa."""


class SymlinkLoopError(PathResolutionError):
    def __init__(self, path: str, limit: int) -> None:
        super().__init__(
            f"Too many levels of symbolic links (more than {limit}): {path}"
        )
        self.path = path
        self.limit = limit


class MissingInstallationError(StrapError):
    def __init__(self, label: str, directory: Path) -> None:
        super().__init__(f"Missing {label} directory: {directory}")
        self.label = label
        self.directory = directory


class UnknownCommandError(StrapError):
    def __init__(self, command: str, plugin: str | None = None) -> None:
        if plugin is None:
            message = f"no such command '{command}'"
        else:
            message = f"no such command '{command}' in plugin '{plugin}'"
        super().__init__(message)
        self.command = command
        self.plugin = plugin


class PluginNotFoundError(StrapError):
    def __init__(self, plugin: str) -> None:
        super().__init__(f"no such plugin '{plugin}'")
        self.plugin = plugin


class UndocumentedError(StrapError):
    def __init__(self, command: str) -> None:
        super().__init__("Sorry, this command isn't documented yet.")
        self.command = command


class CommandExecutionError(StrapError):
    """Raised when a located command cannot be started."""

    exit_code = 126
