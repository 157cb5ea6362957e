"""Pytest fixtures for strap tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from strap.config import StrapConfig
from strap.lib.logging_utils import StructuredTextFormatter
from strap.constants import (
    ENV_CMD_DIR,
    ENV_DEBUG,
    ENV_HOME,
    ENV_LIB_DIR,
    ENV_NO_COLOR,
    ENV_PLUGINS_DIR,
    ENV_USER_HOME,
)
from test_helpers import HELP_SOURCE, RUN_SOURCE, VERSION_SOURCE, write_command


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from outer STRAP_* variables and from CLI logging setup."""
    for name in (
        ENV_HOME,
        ENV_LIB_DIR,
        ENV_PLUGINS_DIR,
        ENV_CMD_DIR,
        ENV_USER_HOME,
        ENV_DEBUG,
        ENV_NO_COLOR,
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    logging.disable(logging.NOTSET)
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, StructuredTextFormatter):
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """Fake installation with the three built-in commands."""
    root = tmp_path / "strap-home"
    (root / "lib").mkdir(parents=True)
    (root / "plugins").mkdir()
    cmd_dir = root / "cmd"
    write_command(cmd_dir, "help", HELP_SOURCE)
    write_command(cmd_dir, "run", RUN_SOURCE)
    write_command(cmd_dir, "version", VERSION_SOURCE)
    return root.resolve()


@pytest.fixture
def config(install_root: Path, tmp_path: Path) -> StrapConfig:
    return StrapConfig(
        home=install_root,
        lib_dir=install_root / "lib",
        plugins_dir=install_root / "plugins",
        cmd_dir=install_root / "cmd",
        user_home=tmp_path / "user-home",
    )


@pytest.fixture
def strap_env(
    install_root: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point the real entry points at the fake installation."""
    monkeypatch.setenv(ENV_HOME, str(install_root))
    monkeypatch.setenv(ENV_USER_HOME, str(tmp_path / "user-home"))
    return install_root
