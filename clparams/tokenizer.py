# clparams — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tokenizer and binder that turn a raw argument vector into a populated
`Parameters` table.

Parsing is a single left-to-right pass in three steps:

1. Action extraction: if the first token is non-empty and not parameter-shaped
   it is removed and becomes the selected action.
2. Grouping: every flag token opens a group and the plain tokens after it are
   collected into that group. A long flag (`--name`) opens one group; a short
   cluster (`-abc`) opens one group per letter (`-a`, `-b`, `-c`), so only the
   last letter of a cluster collects the values that follow it. Plain tokens
   seen before the first flag are positional arguments.
3. Binding: each group's flag is resolved against the table. Values are stored
   in the matching slot until its arity is exhausted; the rest spill over to
   the positional arguments. Unknown flags are kept, together with their
   values, as positional arguments.

Nothing here raises for malformed input and no token is dropped: every token
ends up as the action, a bound flag or value, or a positional argument.

Example:
    table.add_parameter("output", "o")
    table.parse(["build", "-o", "out.bin", "extra"])

    # table.selected_action == "build"
    # table.slot_for("output").values == ["out.bin"]
    # table.positionals == ["extra"]
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Iterable, Sequence

if TYPE_CHECKING:
    from clparams.parameter_name import ParameterName
    from clparams.parameters import Parameters

PARAMETER_TOKEN = re.compile(r"-{1,2}\S+")


def is_parameter_token(token: str) -> bool:
    """
    Check whether `token` is shaped like a flag: one or two leading hyphens
    followed by a run of non-whitespace characters.
    """
    return PARAMETER_TOKEN.fullmatch(token) is not None


def group_tokens(tokens: Iterable[str]) -> tuple[list[list[str]], list[str]]:
    """
    Split `tokens` into flag groups.

    Returns:
        tuple: `(groups, leading)` where each group is `[flag, value, ...]` and
        `leading` holds the plain tokens that came before any flag.
    """
    groups: list[list[str]] = []
    leading: list[str] = []
    for token in tokens:
        if token.startswith("--"):
            groups.append([token])
            continue
        letters = token.replace("-", "") if token.startswith("-") else ""
        if letters:
            # -abc -> -a -b -c
            for letter in letters:
                groups.append([f"-{letter}"])
        elif groups:
            groups[-1].append(token)
        else:
            leading.append(token)
    return groups, leading


def resolve_flag(parameters: Parameters, flag: str) -> ParameterName | None:
    """Return the registered name for a `--long` or `-s` flag token, if any."""
    if flag.startswith("--"):
        return parameters.lookup_by_long(flag[2:])
    if flag.startswith("-") and len(flag) == 2 and not flag[1].isspace():
        return parameters.lookup_by_short(flag[1])
    return None


def bind_groups(parameters: Parameters, groups: Sequence[Sequence[str]]) -> None:
    """Bind each flag group to its slot in `parameters`."""
    logger = parameters.logger
    for group in groups:
        if not group:
            continue
        flag, values = group[0], group[1:]
        name = resolve_flag(parameters, flag)
        if name is None:
            logger.debug(
                "Unrecognized flag '%s', keeping %s as positionals", flag, group
            )
            parameters.add_positionals(group)
            continue

        slot = parameters.parameters[name]
        for value in values:
            if not slot.append(value):
                logger.debug(
                    "Parameter '%s' is full (max_arity=%s), '%s' becomes positional",
                    name,
                    slot.max_arity,
                    value,
                )
                parameters.add_positionals([value])
        slot.mark_present()


def parse_args(parameters: Parameters, args: Iterable[str]) -> None:
    """
    Parse `args` into `parameters` in place.

    Args:
        parameters (Parameters): Table with the parameters and actions registered.
        args (Iterable[str]): Argument vector without the program name.
    """
    tokens = list(args)
    if not tokens:
        return

    logger = parameters.logger
    # an empty first token could never name an action, keep it positional
    if tokens[0] and not is_parameter_token(tokens[0]):
        parameters.set_action(tokens.pop(0))

    logger.debug("Grouping %d tokens", len(tokens))
    groups, leading = group_tokens(tokens)
    parameters.add_positionals(leading)

    logger.debug("Binding %d flag groups", len(groups))
    bind_groups(parameters, groups)
    logger.debug("Parameters: %s", parameters)
