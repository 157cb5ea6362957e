"""Top-level argument dispatch.

`run` never executes a command itself: it either finishes (`Completed`) or
returns a `Handoff` describing the process that takes over. The CLI executes
the handoff and exits with the child's status.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from .commands import locate_command
from .config import StrapConfig, validate_installation
from .constants import HELP_FLAGS, INTERPRETER_DIRECTIVE, USAGE_FLAG, VERSION_FLAGS
from .docs import documentation_for
from .errors import CommandExecutionError, UnknownCommandError
from .help import (
    render_program_usage,
    render_top_level_usage,
    render_usage,
    render_version,
)
from .lib.fonts import FontStyle
from .lib.logging_utils import log_event


@dataclass(frozen=True)
class Completed:
    exit_status: int


@dataclass(frozen=True)
class Handoff:
    program: str
    args: tuple[str, ...] = ()
    env: dict[str, str] = field(default_factory=dict)

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]


DispatchResult = Completed | Handoff


def run(
    args: Sequence[str],
    config: StrapConfig,
    *,
    stdout: TextIO | None = None,
) -> DispatchResult:
    """Interpret the command line.

    Raises:
        MissingInstallationError: If a critical directory is missing.
        UnknownCommandError: If the requested command does not exist.
    """
    out = stdout if stdout is not None else sys.stdout
    validate_installation(config)

    first = args[0] if args else ""
    rest = list(args[1:])

    if first in ("", config.program_name) or first in HELP_FLAGS:
        print(render_top_level_usage(config, FontStyle.for_stream(out)), file=out)
        return Completed(0)

    if first in VERSION_FLAGS:
        print(render_version(config), file=out)
        return Completed(0)

    if first == USAGE_FLAG:
        return _print_usage(rest, config, out)

    command = locate_command(config, first)
    if not command.exists:
        raise UnknownCommandError(first)

    return build_handoff(config, command.path, rest)


def _print_usage(rest: list[str], config: StrapConfig, out: TextIO) -> Completed:
    if not rest:
        print(render_program_usage(config.program_name), file=out)
        return Completed(0)

    command = locate_command(config, rest[0])
    if not command.exists:
        raise UnknownCommandError(rest[0])

    usage = render_usage(documentation_for(command.path))
    if usage:
        print(usage, file=out)
    return Completed(0)


def build_handoff(config: StrapConfig, path: Path, args: Sequence[str]) -> Handoff:
    """Describe how to run the command file at `path` with `args`.

    Python scripts run under the current interpreter so they import this
    installation of strap.
    """
    env = config.to_environ(os.environ)
    if is_python_script(path):
        handoff = Handoff(program=sys.executable, args=(str(path), *args), env=env)
    else:
        handoff = Handoff(program=str(path), args=tuple(args), env=env)
    log_event("handoff", argv=handoff.argv)
    return handoff


def is_python_script(path: Path) -> bool:
    try:
        with path.open("rb") as handle:
            first_line = handle.readline(256)
    except OSError:
        return False
    return (
        first_line.startswith(INTERPRETER_DIRECTIVE.encode())
        and b"python" in first_line
    )


def execute_handoff(handoff: Handoff) -> int:
    """Run the handed-off command to completion and return its exit status.

    Interrupts are delivered to the child as well; the child decides how to
    exit and its status is forwarded.
    """
    try:
        process = subprocess.Popen(handoff.argv, env=handoff.env)
    except OSError as exc:
        raise CommandExecutionError(
            f"cannot execute {handoff.program}: {exc.strerror or exc}"
        ) from exc

    with process:
        while True:
            try:
                return_code = process.wait()
                break
            except KeyboardInterrupt:
                continue

    # Signal deaths follow the shell convention.
    if return_code < 0:
        return 128 - return_code
    return return_code
