"""The `run` command: execute a command provided by an installed plugin."""

from __future__ import annotations

import sys
from typing import TextIO

from ..commands import find_in_directory, is_valid_name
from ..config import StrapConfig
from ..constants import APP_NAME, CMD_DIR_NAME
from ..dispatcher import build_handoff, execute_handoff
from ..errors import PluginNotFoundError, StrapError, UnknownCommandError
from ..help import render_error
from ..lib.fonts import FontStyle
from . import bootstrap

_USAGE = "Usage: strap run PLUGIN COMMAND [ARGS...]"


def main(
    argv: list[str] | None = None,
    *,
    config: StrapConfig | None = None,
    stderr: TextIO | None = None,
) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    err = stderr if stderr is not None else sys.stderr

    if len(args) < 2:
        print(_USAGE, file=err)
        return 1

    plugin, name, rest = args[0], args[1], args[2:]
    try:
        config = bootstrap(config)
        plugin_dir = config.plugins_dir / plugin
        if not is_valid_name(plugin) or not plugin_dir.is_dir():
            raise PluginNotFoundError(plugin)

        command = find_in_directory(plugin_dir / CMD_DIR_NAME, name)
        if not command.exists:
            raise UnknownCommandError(name, plugin=plugin)

        return execute_handoff(build_handoff(config, command.path, rest))
    except StrapError as exc:
        program = config.program_name if config is not None else APP_NAME
        print(render_error(program, str(exc), FontStyle.for_stream(err)), file=err)
        return exc.exit_code
