"""Runline: POSIX command lines for Ansible run configurations."""

from runline.primitives import (
    UNSET,
    Command,
    CommandError,
    ConfigurationError,
    EmptyExecutableError,
    build_argv,
    join_arguments,
    split_arguments,
)
from runline.runtime import and_commands, as_docker_run, shell_command

__version__ = "0.1.0"

__all__ = [
    "UNSET",
    "Command",
    "CommandError",
    "ConfigurationError",
    "EmptyExecutableError",
    "build_argv",
    "join_arguments",
    "split_arguments",
    "and_commands",
    "as_docker_run",
    "shell_command",
]
