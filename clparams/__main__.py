"""
clparams

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from clparams.config import loader
from clparams.console import console
from clparams.exceptions import ConfigError
from clparams.parameters import Parameters
from clparams.themes import OneColors

DEFAULT_DESCRIPTION = (
    "clparams: no configuration found.\n"
    "Create clparams.yaml or clparams.toml to register parameters and actions."
)


def find_config() -> Path | None:
    candidates = [
        Path.cwd() / "clparams.yaml",
        Path.cwd() / "clparams.toml",
        Path.cwd() / ".clparams.yaml",
        Path.cwd() / ".clparams.toml",
        Path(os.environ.get("CLPARAMS_CONFIG", "clparams.yaml")),
        Path.home() / ".config" / "clparams" / "clparams.yaml",
        Path.home() / ".config" / "clparams" / "clparams.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def bootstrap() -> Path | None:
    config_path = find_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def build_parameters(config_path: Path | None) -> Parameters:
    """Load the configured table and add the built-in `--verbose/-v` flag."""
    if config_path:
        parameters = loader(config_path)
    else:
        parameters = Parameters(DEFAULT_DESCRIPTION)

    if not parameters.contains_long("verbose"):
        short = None if parameters.contains_short("v") else "v"
        parameters.add_parameter(
            "verbose", short, max_arity=0, description="Enable debug logging."
        )
    return parameters


def main(argv: Sequence[str] | None = None) -> int:
    try:
        parameters = build_parameters(bootstrap())
    except ConfigError as error:
        console.print(
            f"[{OneColors.DARK_RED}]❌ {escape(str(error))}[/]", highlight=False
        )
        return 1
    parameters.parse(sys.argv[1:] if argv is None else argv)

    verbose = parameters.slot_for("verbose")
    if verbose is not None and verbose.present:
        logging.getLogger("clparams").setLevel(logging.DEBUG)

    action = parameters.selected_action
    if not action or (action == "help" and "help" not in parameters.actions):
        parameters.render_help()
        return 0

    if not parameters.run_action():
        console.print(
            f"[{OneColors.DARK_RED}]❌ Unknown action '{escape(action)}'.[/]",
            highlight=False,
        )
        parameters.render_help()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
