# clparams — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Parameter`, the slot that collects the values bound to one named flag.

A slot holds an ordered list of raw string values, bounded by `max_arity`
(`UNLIMITED` lifts the bound, `0` makes a pure presence flag), and a `present`
flag recording whether the flag token was seen at all during parsing.

Rendering follows the parse result: `false` for a flag that never appeared,
otherwise the collected values as `[a, b]` (`[]` for a bare flag).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from clparams.exceptions import ParameterError

UNLIMITED = -1


@dataclass
class Parameter:
    """
    Bounded, order-preserving value slot for a single parameter.

    Attributes:
        max_arity (int): Maximum number of values accepted, or `UNLIMITED`.
        description (str): Help text shown by `Parameters.help()`.
        values (list[str]): Values accepted so far, in command-line order.
        present (bool): True once the flag has been seen during parsing.
    """

    max_arity: int = 1
    description: str = ""
    values: list[str] = field(default_factory=list)
    present: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_arity, bool) or not isinstance(self.max_arity, int):
            raise ParameterError(
                f"max_arity must be an int, got {type(self.max_arity).__name__}"
            )
        if self.max_arity < 0 and self.max_arity != UNLIMITED:
            raise ParameterError(
                f"max_arity must be >= 0 or UNLIMITED, got {self.max_arity}"
            )
        if self.description is None:
            self.description = ""
        if not self.unlimited and len(self.values) > self.max_arity:
            raise ParameterError(
                f"{len(self.values)} initial values exceed max_arity {self.max_arity}"
            )

    @property
    def unlimited(self) -> bool:
        return self.max_arity == UNLIMITED

    @property
    def is_full(self) -> bool:
        """True when no further value would be accepted."""
        return not self.unlimited and len(self.values) >= self.max_arity

    def append(self, value: str) -> bool:
        """
        Accept `value` if the slot has room.

        Returns:
            bool: True if the value was stored, False if the arity is exhausted.
        """
        if self.is_full:
            return False
        self.values.append(value)
        return True

    def mark_present(self) -> None:
        self.present = True

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __str__(self) -> str:
        if not self.present:
            return "false"
        return f"[{', '.join(self.values)}]"
