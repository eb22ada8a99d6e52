# clparams — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the rich theme used for clparams console output.

`OneColors` holds the hex palette used in inline markup (`f"[{OneColors.DARK_RED}]..."`),
`NordColors` backs the named styles of the console theme so messages can also be
styled semantically (`console.print("...", style="error")`).
"""
from rich.style import Style
from rich.theme import Theme


class OneColors:
    """One Dark palette."""

    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"

    BLUE_b = f"bold {BLUE}"
    CYAN_b = f"bold {CYAN}"
    DARK_RED_b = f"bold {DARK_RED}"


class NordColors:
    """Nord palette."""

    NORD0 = "#2E3440"
    NORD3 = "#4C566A"
    NORD4 = "#D8DEE9"
    NORD8 = "#88C0D0"
    NORD9 = "#81A1C1"
    NORD11 = "#BF616A"
    NORD13 = "#EBCB8B"
    NORD14 = "#A3BE8C"


def get_nord_theme() -> Theme:
    """Return the rich theme with the semantic styles used by clparams."""
    return Theme(
        {
            "title": Style(color=NordColors.NORD8, bold=True),
            "action": Style(color=NordColors.NORD9, bold=True),
            "parameter": Style(color=NordColors.NORD14),
            "muted": Style(color=NordColors.NORD3),
            "text": Style(color=NordColors.NORD4),
            "warning": Style(color=NordColors.NORD13),
            "error": Style(color=NordColors.NORD11, bold=True),
        }
    )
