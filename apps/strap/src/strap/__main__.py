"""strap executable module.

No app-root try/except here: cli.main() is the error boundary for both
`python -m strap` and the installed `strap` script.
"""

from __future__ import annotations

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
