"""Built-in leaf commands.

Each module backs an executable script in the installation `cmd` directory.
The scripts run as child processes, so they rebuild their configuration from
the STRAP_* variables the dispatcher exported.
"""

from __future__ import annotations

import os

from ..config import StrapConfig, load_config, locate_installation_root
from ..lib.logging_utils import setup_logging


def bootstrap(config: StrapConfig | None = None) -> StrapConfig:
    if config is not None:
        return config
    config = load_config(os.environ, locate_installation_root())
    setup_logging(config.debug)
    return config
