"""The `help` command: display documentation parsed from a command's source."""

from __future__ import annotations

import sys
from typing import TextIO

from ..commands import list_commands, locate_command
from ..config import StrapConfig
from ..constants import APP_NAME, COMPLETE_FLAG, USAGE_FLAG
from ..docs import documentation_for
from ..errors import StrapError, UndocumentedError, UnknownCommandError
from ..help import (
    render_error,
    render_help,
    render_program_usage,
    render_top_level_usage,
    render_usage,
)
from ..lib.fonts import FontStyle
from . import bootstrap


def main(
    argv: list[str] | None = None,
    *,
    config: StrapConfig | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    program = config.program_name if config is not None else APP_NAME

    try:
        config = bootstrap(config)
        program = config.program_name
        return _run_help(args, config, out, err)
    except UndocumentedError as exc:
        print(str(exc), file=err)
        return 1
    except StrapError as exc:
        print(render_error(program, str(exc), FontStyle.for_stream(err)), file=err)
        return exc.exit_code


def _run_help(args: list[str], config: StrapConfig, out: TextIO, err: TextIO) -> int:
    if args and args[0] == COMPLETE_FLAG:
        for name in list_commands(config):
            print(name, file=out)
        return 0

    usage_only = bool(args) and args[0] == USAGE_FLAG
    if usage_only:
        args = args[1:]

    if not args or args[0] in ("", config.program_name):
        if usage_only:
            print(render_program_usage(config.program_name), file=out)
        else:
            print(render_top_level_usage(config, FontStyle.for_stream(out)), file=out)
        return 0

    name = args[0]
    command = locate_command(config, name)
    if not command.exists:
        raise UnknownCommandError(name)

    record = documentation_for(command.path)
    if usage_only:
        usage = render_usage(record)
        if usage:
            print(usage, file=out)
        return 0

    print(render_help(config.program_name, name, record), file=out)
    return 0
