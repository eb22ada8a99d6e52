# clparams — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Parameters`, the table that owns everything a parse
produces and everything a parse needs to know.

A table holds:
- the registered parameters, keyed by `ParameterName` in registration order,
- the positional arguments left over after parsing,
- the registered actions, keyed by the action token in registration order,
- the selected action key (empty until a parse selects one),
- a free-form description used as the header of the help text.

Public Interface:
- `register_parameter(...)` / `add_parameter(...)`: Register a named slot.
- `register_action(...)` / `add_action(...)`: Register a handler for an action key.
- `parse(args)`: Populate the table from an argument vector.
- `run_action()`: Dispatch to the selected action.
- `help()` / `render_help()`: Build or print the help text.

Example Usage:
    table = Parameters("Build tool")
    table.add_parameter("verbose", "v", max_arity=0, description="Chatty output")
    table.add_action("build", "Build the project", build)

    table.parse(["build", "-v", "src"])
    table.run_action()  # calls build(table)

Registration is strict: duplicate long names, duplicate short names and
duplicate action keys raise. Parsing is lenient and never raises.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from rich.console import Console

from clparams.console import console
from clparams.exceptions import (
    ActionAlreadyExistsError,
    InvalidActionError,
    ParameterAlreadyExistsError,
    ParameterError,
)
from clparams.logger import logger as default_logger
from clparams.parameter import Parameter
from clparams.parameter_action import Action, ParameterAction, wrap_if_needed
from clparams.parameter_name import ParameterName, validate_short_name
from clparams.tokenizer import is_parameter_token, parse_args

SECTION_RULE = "\t-----------------------------\n"
ENTRY_RULE = "\t---------\n"
DESCRIPTION_INDENT = "\n\t\t\t"


def _description_lines(text: str) -> list[str]:
    lines = text.split("\n")
    while len(lines) > 1 and not lines[-1]:
        lines.pop()
    return lines


def _indent(text: str) -> str:
    return text.replace("\n", DESCRIPTION_INDENT)


class Parameters:
    """
    Table of parameters, positional arguments and actions for one command line.

    Attributes:
        description (str): Header text for `help()`.
        logger (logging.Logger): Receives parse diagnostics and unknown-action
            warnings. Defaults to the `clparams` logger.
        console (Console): Rich console used by `render_help()`.
    """

    def __init__(
        self,
        description: str | None = "",
        logger: logging.Logger | None = None,
    ) -> None:
        self.description: str = description or ""
        self.logger: logging.Logger = logger or default_logger
        self.console: Console = console
        self._parameters: dict[ParameterName, Parameter] = {}
        self._positionals: list[str] = []
        self._actions: dict[str, ParameterAction] = {}
        self._selected_action: str = ""

    def register_parameter(
        self, name: ParameterName | str, parameter: Parameter | None = None
    ) -> Parameter:
        """
        Register `parameter` under `name`.

        Args:
            name (ParameterName | str): Name of the parameter, a plain string is
                taken as a long name without a short form.
            parameter (Parameter | None): Slot to register. A single-value slot
                is created when omitted.

        Returns:
            Parameter: The registered slot.

        Raises:
            ParameterAlreadyExistsError: If the long or short name is taken.
        """
        if isinstance(name, str):
            name = ParameterName(name)
        if not isinstance(name, ParameterName):
            raise ParameterError(
                f"name must be a ParameterName or str, got {type(name).__name__}"
            )
        if parameter is None:
            parameter = Parameter()
        if not isinstance(parameter, Parameter):
            raise ParameterError(
                f"parameter must be a Parameter, got {type(parameter).__name__}"
            )

        if name in self._parameters:
            raise ParameterAlreadyExistsError(
                f"Parameter '--{name.long_name}' is already registered"
            )
        if name.short_name is not None:
            existing = self.lookup_by_short(name.short_name)
            if existing is not None:
                raise ParameterAlreadyExistsError(
                    f"Short name '-{name.short_name}' is already used by "
                    f"'--{existing.long_name}'"
                )

        self._parameters[name] = parameter
        self.logger.debug(
            "Registered parameter '%s' (max_arity=%s)", name, parameter.max_arity
        )
        return parameter

    def add_parameter(
        self,
        long_name: str,
        short_name: str | None = None,
        max_arity: int = 1,
        description: str = "",
    ) -> Parameter:
        """Create and register a parameter in one call."""
        return self.register_parameter(
            ParameterName(long_name, short_name),
            Parameter(max_arity=max_arity, description=description),
        )

    def register_action(self, key: str, action: ParameterAction | Callable) -> None:
        """
        Register `action` to run when `key` is the first token.

        Plain callables are wrapped in `Action`, taking their description from
        the docstring.

        Raises:
            InvalidActionError: If the key could never be selected or the action
                is not usable.
            ActionAlreadyExistsError: If the key is already registered.
        """
        if not isinstance(key, str) or not key:
            raise InvalidActionError("Action key must be a non-empty string")
        if is_parameter_token(key):
            raise InvalidActionError(
                f"Action key '{key}' looks like a parameter and could never be selected"
            )
        if key in self._actions:
            raise ActionAlreadyExistsError(f"Action '{key}' is already registered")
        self._actions[key] = wrap_if_needed(action)

    def add_action(
        self, key: str, description: str, function: Callable[[Parameters], Any]
    ) -> Action:
        """Wrap `function` in an `Action` and register it under `key`."""
        action = Action(function=function, description=description)
        self.register_action(key, action)
        return action

    def lookup_by_long(self, long_name: str) -> ParameterName | None:
        """Return the registered name whose long form is `long_name`."""
        for name in self._parameters:
            if name.long_name == long_name:
                return name
        return None

    def lookup_by_short(self, short_name: str) -> ParameterName | None:
        """Return the first registered name whose short form is `short_name`."""
        validate_short_name(short_name)
        for name in self._parameters:
            if name.short_name == short_name:
                return name
        return None

    def contains_long(self, long_name: str) -> bool:
        return self.lookup_by_long(long_name) is not None

    def contains_short(self, short_name: str) -> bool:
        return self.lookup_by_short(short_name) is not None

    def slot_for(self, name: ParameterName | str) -> Parameter | None:
        """Return the slot for a `ParameterName` or a long name."""
        if isinstance(name, str):
            resolved = self.lookup_by_long(name)
            if resolved is None:
                return None
            name = resolved
        return self._parameters.get(name)

    def slot_for_short(self, short_name: str) -> Parameter | None:
        name = self.lookup_by_short(short_name)
        if name is None:
            return None
        return self._parameters[name]

    def name_for(self, parameter: Parameter) -> ParameterName | None:
        """Return the name `parameter` is registered under, if it is registered."""
        for name, slot in self._parameters.items():
            if slot is parameter:
                return name
        return None

    def is_parameter_token(self, token: str) -> bool:
        return is_parameter_token(token)

    @property
    def parameters(self) -> dict[ParameterName, Parameter]:
        return dict(self._parameters)

    @property
    def actions(self) -> dict[str, ParameterAction]:
        return dict(self._actions)

    @property
    def positionals(self) -> list[str]:
        return self._positionals

    def add_positionals(self, values: Iterable[str]) -> None:
        self._positionals.extend(values)

    @property
    def selected_action(self) -> str:
        return self._selected_action

    def set_action(self, key: str) -> None:
        self._selected_action = key

    def parse(self, args: Iterable[str]) -> None:
        """Parse an argument vector (without the program name) into this table."""
        parse_args(self, args)

    def reset(self) -> None:
        """Clear all parse results, keeping registered parameters and actions."""
        for parameter in self._parameters.values():
            parameter.values.clear()
            parameter.present = False
        self._positionals.clear()
        self._selected_action = ""

    def run_action(self) -> bool:
        """
        Run the selected action with this table as its context.

        Returns:
            bool: True if a handler ran, False if the selected key is unknown.
        """
        action = self._actions.get(self._selected_action)
        if action is None:
            self.logger.warning(
                "Unknown action '%s'. Available actions: %s",
                self._selected_action,
                ", ".join(self._actions) or "none",
            )
            return False
        self.logger.debug("Running action '%s'", self._selected_action)
        action.run(self)
        return True

    def help(self) -> str:
        """
        Build the help text: description, then every action, then every
        parameter, each in registration order.
        """
        parts = [f"\t{line}\n" for line in _description_lines(self.description)]

        parts.append(SECTION_RULE)
        parts.append("\tActions:\n\n")
        for key, action in self._actions.items():
            description = _indent(action.description or "")
            parts.append(f"{ENTRY_RULE}\t{key}:\n\t\t{description}\n")

        parts.append(SECTION_RULE)
        parts.append("\tParameters:\n\n")
        for name, parameter in self._parameters.items():
            short = f"/-{name.short_name}" if name.has_short() else ""
            parts.append(
                f"{ENTRY_RULE}\t--{name.long_name}{short}:\n"
                f"\t\t{_indent(parameter.description)}\n"
            )
        return "".join(parts)

    def render_help(self, console: Console | None = None) -> None:
        """Print `help()` through a Rich console."""
        (console or self.console).print(self.help(), markup=False, highlight=False)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, ParameterName):
            return key in self._parameters
        if isinstance(key, str):
            return self.contains_long(key)
        return False

    def __str__(self) -> str:
        slots = ", ".join(
            f"{name}={parameter}" for name, parameter in self._parameters.items()
        )
        return f"{{{slots}}}"

    def __repr__(self) -> str:
        return (
            f"Parameters(parameters={len(self._parameters)}, "
            f"actions={len(self._actions)}, positionals={len(self._positionals)}, "
            f"selected_action={self._selected_action!r})"
        )
