"""Startup configuration built once from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from . import __version__
from .constants import (
    APP_NAME,
    CMD_DIR_NAME,
    ENV_CMD_DIR,
    ENV_DEBUG,
    ENV_HOME,
    ENV_LIB_DIR,
    ENV_PLUGINS_DIR,
    ENV_USER_HOME,
    LIB_DIR_NAME,
    PLUGINS_DIR_NAME,
    TRUTHY_VALUES,
    USER_HOME_DIR_NAME,
)
from .errors import ConfigError, MissingInstallationError
from .path_resolver import resolve_directory, resolve_file


@dataclass(frozen=True)
class StrapConfig:
    home: Path
    lib_dir: Path
    plugins_dir: Path
    cmd_dir: Path
    user_home: Path
    debug: bool = False
    program_name: str = APP_NAME
    version: str = __version__

    def installation_dirs(self) -> list[tuple[str, Path]]:
        """Directories that must exist for strap to run, with display labels."""
        return [
            ("installation", self.home),
            ("library", self.lib_dir),
            ("plugins", self.plugins_dir),
            ("commands", self.cmd_dir),
        ]

    def to_environ(self, base: Mapping[str, str] | None = None) -> dict[str, str]:
        """Environment for child commands: `base` plus the exported STRAP_* values."""
        env = dict(base) if base is not None else {}
        env[ENV_HOME] = str(self.home)
        env[ENV_LIB_DIR] = str(self.lib_dir)
        env[ENV_PLUGINS_DIR] = str(self.plugins_dir)
        env[ENV_CMD_DIR] = str(self.cmd_dir)
        env[ENV_USER_HOME] = str(self.user_home)
        if self.debug:
            env[ENV_DEBUG] = "1"
        else:
            env.pop(ENV_DEBUG, None)
        return env


def locate_installation_root() -> Path:
    """Self-locate: the installation root is the directory holding this package."""
    return resolve_file(__file__).parent


def load_config(
    environ: Mapping[str, str],
    installation_root: Path,
    *,
    program_name: str = APP_NAME,
) -> StrapConfig:
    """Build the configuration, honoring STRAP_* overrides in `environ`.

    Raises:
        ConfigError: If an override is a relative path.
    """
    home = _directory_override(environ, ENV_HOME) or installation_root
    lib_dir = _directory_override(environ, ENV_LIB_DIR) or home / LIB_DIR_NAME
    plugins_dir = (
        _directory_override(environ, ENV_PLUGINS_DIR) or home / PLUGINS_DIR_NAME
    )
    cmd_dir = _directory_override(environ, ENV_CMD_DIR) or home / CMD_DIR_NAME
    user_home = (
        _directory_override(environ, ENV_USER_HOME)
        or Path.home() / USER_HOME_DIR_NAME
    )

    return StrapConfig(
        home=home,
        lib_dir=lib_dir,
        plugins_dir=plugins_dir,
        cmd_dir=cmd_dir,
        user_home=user_home,
        debug=is_truthy(environ.get(ENV_DEBUG)),
        program_name=program_name,
    )


def validate_installation(config: StrapConfig) -> None:
    """Raise MissingInstallationError for the first missing critical directory."""
    for label, directory in config.installation_dirs():
        if not directory.is_dir():
            raise MissingInstallationError(label, directory)


def ensure_user_home(config: StrapConfig) -> Path:
    try:
        config.user_home.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigError(
            f"Failed to create user data directory: {config.user_home}"
        ) from exc
    return config.user_home


def is_truthy(value: str | None) -> bool:
    return value is not None and value.strip().lower() in TRUTHY_VALUES


def _directory_override(environ: Mapping[str, str], name: str) -> Path | None:
    raw = environ.get(name, "").strip()
    if not raw:
        return None

    path = Path(raw).expanduser()
    if not path.is_absolute():
        raise ConfigError(f"{name} must be an absolute path: {raw}")
    # Missing directories are reported by validate_installation.
    if path.is_dir():
        return resolve_directory(path)
    return path
