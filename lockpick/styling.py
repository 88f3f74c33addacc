"""ANSI terminal styling of text."""

from enum import Enum

_RESET = "\033[0m"


class Color(Enum):
    """Foreground colour codes."""

    COMMON = "29"
    GRAY = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    WHITE = "37"


class Style(Enum):
    """Text format codes."""

    BOLD = "1"
    DIM = "2"
    ITALIC = "3"
    UNDERLINE = "4"
    COMMON = "5"


def styled(text: str, color: Color, style: Style) -> str:
    """Wrap ``text`` in escape sequences for ``color`` and ``style``."""
    return f"\033[{style.value};{color.value};{style.value}m{text}{_RESET}"