# clparams — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader that builds a `Parameters` table from a YAML or TOML file.

Example (YAML):
    description: "Build tool"
    parameters:
      - long: verbose
        short: v
        arity: 0
        description: "Chatty output"
      - long: include
        short: I
        arity: "*"
    actions:
      - key: build
        description: "Build the project"
        action: my_module.build
"""
from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from clparams.console import console
from clparams.exceptions import ClParamsError, ConfigError
from clparams.logger import logger
from clparams.parameter import UNLIMITED
from clparams.parameter_action import Action, wrap_if_needed
from clparams.parameters import Parameters
from clparams.themes import OneColors


def import_action(dotted_path: str) -> Any:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        console.print(f"[{OneColors.DARK_RED}]❌ Invalid action path:[/] {dotted_path}")
        sys.exit(1)
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        console.print(
            f"[{OneColors.DARK_RED}]❌ Could not import '{dotted_path}': {error}[/]\n"
            f"[{OneColors.COMMENT_GREY}]Ensure the module is installed and discoverable "
            "via PYTHONPATH."
        )
        sys.exit(1)
    try:
        action = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        console.print(
            f"[{OneColors.DARK_RED}]❌ Module '{module_path}' has no attribute "
            f"'{attr}': {error}[/]"
        )
        sys.exit(1)
    return action


class RawParameter(BaseModel):
    """Raw parameter entry of a clparams configuration."""

    long: str
    short: str | None = None
    arity: int | str = 1
    description: str = ""

    @field_validator("arity", mode="before")
    @classmethod
    def validate_arity(cls, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"arity must be an integer or '*', got {value!r}")
        if isinstance(value, str):
            if value.strip() == "*":
                return UNLIMITED
            try:
                value = int(value)
            except ValueError as error:
                raise ValueError(
                    f"arity must be an integer or '*', got {value!r}"
                ) from error
        if not isinstance(value, int):
            raise ValueError(f"arity must be an integer or '*', got {value!r}")
        if value < 0 and value != UNLIMITED:
            raise ValueError(f"arity must be >= 0, -1 or '*', got {value}")
        return value


class RawAction(BaseModel):
    """Raw action entry of a clparams configuration."""

    key: str
    action: str
    description: str | None = None


class ParametersConfig(BaseModel):
    """clparams configuration model."""

    description: str = ""
    parameters: list[RawParameter] = Field(default_factory=list)
    actions: list[RawAction] = Field(default_factory=list)

    def to_parameters(self) -> Parameters:
        table = Parameters(self.description)
        for raw_parameter in self.parameters:
            table.add_parameter(
                raw_parameter.long,
                raw_parameter.short,
                max_arity=int(raw_parameter.arity),
                description=raw_parameter.description,
            )
        for raw_action in self.actions:
            target = import_action(raw_action.action)
            if raw_action.description is not None and callable(target):
                action = Action(function=target, description=raw_action.description)
            else:
                action = wrap_if_needed(target)
            table.register_action(raw_action.key, action)
        return table


def loader(file_path: Path | str) -> Parameters:
    """
    Load a `Parameters` table from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        Parameters: A table with the configured parameters and actions.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file format is unsupported or its content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ConfigError(f"Unsupported config format: {suffix}")

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping.\n"
            "Example:\n"
            "description: 'My CLI'\n"
            "parameters:\n"
            "  - long: 'verbose'\n"
            "    short: 'v'\n"
            "    arity: 0\n"
            "actions:\n"
            "  - key: 'build'\n"
            "    action: 'my_module.build'"
        )

    try:
        config = ParametersConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration in {path}:\n{error}") from error

    logger.debug(
        "Loaded %d parameters and %d actions from %s",
        len(config.parameters),
        len(config.actions),
        path,
    )
    try:
        return config.to_parameters()
    except ClParamsError as error:
        raise ConfigError(f"Invalid configuration in {path}: {error}") from error
