# clparams — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the action interface dispatched by `Parameters.run_action()`.

`ParameterAction` is a structural protocol: any object exposing a `description`
string and a `run(parameters)` method can be registered as an action. `Action`
is the stock implementation wrapping a plain callable, used when a function is
registered directly or loaded from a configuration file.

Example:
    def build(parameters: Parameters) -> None:
        ...

    table.register_action("build", Action(build, "Build the project"))
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Protocol, runtime_checkable

from clparams.exceptions import InvalidActionError

if TYPE_CHECKING:
    from clparams.parameters import Parameters


@runtime_checkable
class ParameterAction(Protocol):
    """A named, describable unit of work invoked with the parsed parameters."""

    description: str

    def run(self, parameters: Parameters) -> Any: ...


@dataclass
class Action:
    """
    Wraps a callable as a `ParameterAction`.

    Attributes:
        function (Callable[[Parameters], Any]): Invoked with the parsed table.
        description (str): Help text shown by `Parameters.help()`.
    """

    function: Callable[[Parameters], Any]
    description: str = ""

    def __post_init__(self) -> None:
        if not callable(self.function):
            raise InvalidActionError(f"{self.function!r} is not callable")

    def run(self, parameters: Parameters) -> Any:
        return self.function(parameters)

    def __str__(self) -> str:
        name = getattr(self.function, "__name__", type(self.function).__name__)
        return f"Action(function={name}, description={self.description!r})"


def wrap_if_needed(obj: Any, description: str | None = None) -> ParameterAction:
    """Return `obj` as a `ParameterAction`, wrapping plain callables in `Action`."""
    if isinstance(obj, ParameterAction):
        return obj
    if callable(obj):
        if description is None:
            description = (getattr(obj, "__doc__", None) or "").strip()
        return Action(function=obj, description=description)
    raise InvalidActionError(
        f"Cannot use object of type '{type(obj).__name__}' as an action. "
        "Expected a callable or an object with 'description' and 'run'."
    )
