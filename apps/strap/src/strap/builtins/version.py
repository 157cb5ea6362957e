"""The `version` command."""

from __future__ import annotations

import sys
from typing import TextIO

from ..config import StrapConfig
from ..help import render_version
from . import bootstrap


def main(
    argv: list[str] | None = None,
    *,
    config: StrapConfig | None = None,
    stdout: TextIO | None = None,
) -> int:
    out = stdout if stdout is not None else sys.stdout
    config = bootstrap(config)
    print(render_version(config), file=out)
    return 0
