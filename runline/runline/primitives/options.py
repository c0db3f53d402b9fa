"""POSIX-style option values and argument vector assembly.

An option is emitted as a flag, optionally followed by its value as a
separate token:

    Absent            -> nothing
    Switch(False)     -> nothing
    Switch(True)      -> --flag
    Valued("v")       -> --flag v
    Repeated(("a",))  -> --flag a [--flag b ...]

Single-character keys use a single dash (``-r``), longer keys use two
(``--no-deps``). No quoting happens here; each value is one argv token.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Absent:
    """Option is omitted entirely."""


@dataclass(frozen=True)
class Switch:
    """Boolean flag, emitted bare when on."""

    on: bool


@dataclass(frozen=True)
class Valued:
    """Flag followed by a single value token."""

    value: str


@dataclass(frozen=True)
class Repeated:
    """Flag emitted once per value, in order."""

    values: Tuple[str, ...]


OptionValue = Union[Absent, Switch, Valued, Repeated]

ABSENT = Absent()


def option_value(raw: Any) -> OptionValue:
    """Coerce a caller-supplied value into an OptionValue.

    None is Absent, a bool is a Switch, a list or tuple is Repeated, and
    anything else (numbers included) is stringified into Valued.
    """
    if isinstance(raw, (Absent, Switch, Valued, Repeated)):
        return raw
    if raw is None:
        return ABSENT
    if isinstance(raw, bool):
        return Switch(raw)
    if isinstance(raw, (list, tuple)):
        return Repeated(tuple(str(item) for item in raw))
    return Valued(str(raw))


def option_flag(key: str) -> str:
    """Return the flag spelling for an option key."""
    return f"-{key}" if len(key) == 1 else f"--{key}"


def option_tokens(key: str, value: OptionValue) -> List[str]:
    """Render one option entry as argv tokens."""
    flag = option_flag(key)
    if isinstance(value, Switch):
        return [flag] if value.on else []
    if isinstance(value, Valued):
        return [flag, value.value]
    if isinstance(value, Repeated):
        tokens: List[str] = []
        for item in value.values:
            tokens.extend([flag, item])
        return tokens
    return []


def normalize_options(options: Optional[Mapping[str, Any]]) -> Dict[str, OptionValue]:
    """Coerce every value of an options mapping, keeping its order."""
    if not options:
        return {}
    return {key: option_value(value) for key, value in options.items()}


def build_argv(
    executable: str,
    subcommands: Iterable[str] = (),
    options: Optional[Mapping[str, Any]] = None,
    arguments: Iterable[str] = (),
) -> List[str]:
    """Assemble a complete argument vector.

    Order is fixed: executable, subcommands, options in mapping order,
    then positional arguments.

    Args:
        executable: Program to run.
        subcommands: Tokens placed right after the executable.
        options: Mapping of option key to raw or OptionValue.
        arguments: Positional arguments.

    Returns:
        The argv as a list of strings.
    """
    argv = [executable, *subcommands]
    for key, value in normalize_options(options).items():
        argv.extend(option_tokens(key, value))
    argv.extend(arguments)
    logger.debug("Built argv: %s", argv)
    return argv
