# clparams — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParameterName`, the key under which a `Parameter` is registered in a
`Parameters` table.

A name pairs a long form (`verbose`, written `--verbose` on the command line)
with an optional single-character short form (`v`, written `-v`). Identity is
carried by the long name alone: two names with the same long name are equal and
hash the same, whatever their short names.
"""
from __future__ import annotations

from dataclasses import dataclass

from clparams.exceptions import InvalidParameterNameError


def validate_short_name(short_name: str) -> str:
    """Return `short_name` if it is a usable short flag character, else raise."""
    if not isinstance(short_name, str) or len(short_name) != 1:
        raise InvalidParameterNameError(
            f"Short name must be a single character, got {short_name!r}"
        )
    if short_name.isspace() or short_name == "-":
        raise InvalidParameterNameError(
            f"Short name {short_name!r} cannot be whitespace or '-'"
        )
    return short_name


@dataclass(frozen=True, eq=False)
class ParameterName:
    """
    Long and optional short name of a parameter.

    Attributes:
        long_name (str): Full name, matched against `--<long_name>`.
        short_name (str | None): One character, matched against `-<short_name>`.
    """

    long_name: str
    short_name: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.long_name, str) or not self.long_name:
            raise InvalidParameterNameError("Long name must be a non-empty string")
        if any(char.isspace() for char in self.long_name):
            raise InvalidParameterNameError(
                f"Long name {self.long_name!r} cannot contain whitespace"
            )
        if self.long_name.startswith("-"):
            raise InvalidParameterNameError(
                f"Long name {self.long_name!r} must be given without leading '-'"
            )
        if self.short_name is not None:
            validate_short_name(self.short_name)

    def has_short(self) -> bool:
        """Return True if this name has a short form."""
        return self.short_name is not None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParameterName):
            return self.long_name == other.long_name
        if isinstance(other, str):
            return self.long_name == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.long_name)

    def __str__(self) -> str:
        return self.long_name
