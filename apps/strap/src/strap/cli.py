"""CLI entry and startup wiring."""

from __future__ import annotations

import os
import sys

from colorama import just_fix_windows_console

from .config import (
    ensure_user_home,
    load_config,
    locate_installation_root,
    validate_installation,
)
from .constants import APP_NAME
from .dispatcher import Handoff, execute_handoff, run
from .errors import StrapError
from .help import render_error
from .lib.fonts import FontStyle
from .lib.logging_utils import log_event, setup_logging


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    just_fix_windows_console()

    try:
        config = load_config(os.environ, locate_installation_root())
        setup_logging(config.debug)
        log_event(
            "app_start",
            args=args,
            home=config.home,
            cmd_dir=config.cmd_dir,
            plugins_dir=config.plugins_dir,
            user_home=config.user_home,
        )
        validate_installation(config)
        ensure_user_home(config)

        result = run(args, config)
        if isinstance(result, Handoff):
            return execute_handoff(result)
        return result.exit_status
    except StrapError as exc:
        style = FontStyle.for_stream(sys.stderr)
        print(render_error(APP_NAME, str(exc), style), file=sys.stderr)
        return exc.exit_code
