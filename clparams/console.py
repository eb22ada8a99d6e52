# clparams — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for clparams output."""
from rich.console import Console

from clparams.themes import get_nord_theme

console = Console(color_system="truecolor", theme=get_nord_theme())
