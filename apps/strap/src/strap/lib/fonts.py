"""Terminal font constants and styling.

Colors follow the X11 names of the 16 base terminal colors; a few extra
entries come from the 256-color palette.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TextIO

from colorama import Fore, Style
from colorama.ansi import code_to_chars

from ..constants import ENV_NO_COLOR


def _fore_256(index: int) -> str:
    return code_to_chars(f"38;5;{index}")


FONT_BLACK = Fore.BLACK
FONT_MAROON = Fore.RED
FONT_GREEN = Fore.GREEN
FONT_OLIVE = Fore.YELLOW
FONT_NAVY = Fore.BLUE
FONT_PURPLE = Fore.MAGENTA
FONT_TEAL = Fore.CYAN
FONT_SILVER = Fore.WHITE
FONT_GRAY = Fore.LIGHTBLACK_EX
FONT_RED = Fore.LIGHTRED_EX
FONT_LIME = Fore.LIGHTGREEN_EX
FONT_YELLOW = Fore.LIGHTYELLOW_EX
FONT_BLUE = Fore.LIGHTBLUE_EX
FONT_FUCHSIA = Fore.LIGHTMAGENTA_EX
FONT_AQUA = Fore.LIGHTCYAN_EX
FONT_WHITE = Fore.LIGHTWHITE_EX

FONT_DARK_BLUE = _fore_256(18)
FONT_DODGER_BLUE_3 = _fore_256(26)
FONT_MEDIUM_PURPLE_4 = _fore_256(60)
FONT_SLATE_BLUE_3 = _fore_256(61)
FONT_GRAY_93 = _fore_256(255)

FONT_BOLD = Style.BRIGHT
FONT_ULINE = code_to_chars(4)
FONT_UNULINE = code_to_chars(24)
FONT_INVERT = code_to_chars(7)

FONT_CLEAR = Style.RESET_ALL

FONT_CHECKMARK = "✔"
FONT_ERRCROSS = "❌ "


@dataclass(frozen=True)
class FontStyle:
    """Applies font sequences when the target stream can render them."""

    enabled: bool

    @classmethod
    def for_stream(
        cls,
        stream: TextIO,
        environ: Mapping[str, str] | None = None,
    ) -> FontStyle:
        env = os.environ if environ is None else environ
        if env.get(ENV_NO_COLOR):
            return cls(enabled=False)
        isatty = getattr(stream, "isatty", None)
        try:
            return cls(enabled=bool(isatty is not None and isatty()))
        except ValueError:
            # Closed stream.
            return cls(enabled=False)

    def apply(self, text: str, *fonts: str) -> str:
        if not self.enabled or not fonts:
            return text
        return f"{''.join(fonts)}{text}{FONT_CLEAR}"

    def error_prefix(self) -> str:
        """Error cross glyph, only shown when styling is on."""
        return FONT_ERRCROSS if self.enabled else ""
