"""Runline primitives: pure command-building units."""

from runline.primitives.command import Command, command_from_settings
from runline.primitives.environment import (
    UNSET,
    config_file_overlay,
    materialize_environment,
    merge_environment,
    python_venv_overlay,
)
from runline.primitives.errors import (
    CommandError,
    ConfigurationError,
    EmptyExecutableError,
)
from runline.primitives.input_file import write_input_file
from runline.primitives.options import (
    ABSENT,
    Absent,
    OptionValue,
    Repeated,
    Switch,
    Valued,
    build_argv,
    option_flag,
    option_value,
)
from runline.primitives.tokenizer import join_arguments, split_arguments

__all__ = [
    # Errors
    "CommandError",
    "ConfigurationError",
    "EmptyExecutableError",
    # Options
    "ABSENT",
    "Absent",
    "OptionValue",
    "Repeated",
    "Switch",
    "Valued",
    "build_argv",
    "option_flag",
    "option_value",
    # Tokenizer
    "join_arguments",
    "split_arguments",
    # Environment
    "UNSET",
    "config_file_overlay",
    "materialize_environment",
    "merge_environment",
    "python_venv_overlay",
    # Command
    "Command",
    "command_from_settings",
    "write_input_file",
]
