"""Immutable description of a process to run.

A Command holds everything needed to spawn a POSIX-style tool:

    executable  subcommands...  --options...  arguments...

plus an environment overlay, a working directory and an optional stdin
file. Every ``with_*`` method returns a new Command.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from runline.primitives.environment import (
    CONFIG_FILE_VAR,
    EnvValue,
    config_file_overlay,
    materialize_environment,
    merge_environment,
    python_venv_overlay,
)
from runline.primitives.errors import EmptyExecutableError
from runline.primitives.input_file import write_input_file
from runline.primitives.options import OptionValue, build_argv, normalize_options
from runline.primitives.tokenizer import join_arguments, split_arguments

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Command:
    """Process description for a POSIX-style command line.

    Attributes:
        executable: Program to run, never empty.
        subcommands: Tokens placed right after the executable.
        options: Option key to value, in emission order.
        arguments: Positional arguments placed after the options.
        environment: Overlay on the parent environment; UNSET removes a variable.
        working_directory: Directory to run in, or None for the caller's.
        input_path: File to use as stdin, or None.

    Instances compare by value but are not hashable, since options and
    environment are dicts.
    """

    executable: str
    subcommands: Tuple[str, ...] = ()
    options: Dict[str, OptionValue] = field(default_factory=dict)
    arguments: Tuple[str, ...] = ()
    environment: Dict[str, EnvValue] = field(default_factory=dict)
    working_directory: Optional[str] = None
    input_path: Optional[str] = None

    __hash__ = None

    def __post_init__(self):
        if not self.executable or not self.executable.strip():
            raise EmptyExecutableError()
        object.__setattr__(self, "subcommands", tuple(self.subcommands))
        object.__setattr__(self, "options", normalize_options(self.options))
        object.__setattr__(self, "arguments", tuple(self.arguments))
        object.__setattr__(self, "environment", dict(self.environment))

    @property
    def argv(self) -> List[str]:
        """Full argument vector, executable first."""
        return build_argv(
            self.executable, self.subcommands, self.options, self.arguments
        )

    @property
    def parameters(self) -> List[str]:
        """Everything after the executable."""
        return self.argv[1:]

    def render(self) -> str:
        """Display string that splits back into ``argv``."""
        return join_arguments(self.argv)

    def __str__(self) -> str:
        return self.render()

    def with_options(self, options: Optional[Mapping[str, Any]] = None) -> "Command":
        """Add options; an existing key keeps its position and takes the new value."""
        merged = dict(self.options)
        merged.update(normalize_options(options))
        return replace(self, options=merged)

    def with_arguments(self, *arguments: str) -> "Command":
        """Append positional arguments."""
        return replace(self, arguments=self.arguments + tuple(arguments))

    def with_raw_options(self, text: Optional[str]) -> "Command":
        """Tokenize a free-text option string and append it as arguments."""
        return self.with_arguments(*split_arguments(text))

    def with_environment(self, overlay: Mapping[str, EnvValue]) -> "Command":
        """Merge an overlay onto the environment."""
        return replace(self, environment=merge_environment(self.environment, overlay))

    def with_working_directory(self, path: Optional[str]) -> "Command":
        return replace(self, working_directory=path)

    def with_input(self, text: str, directory: Optional[str] = None) -> "Command":
        """Use text as stdin by writing it to a private temp file."""
        path = write_input_file(text, directory)
        return replace(self, input_path=str(path))

    def with_python_venv(
        self,
        venv_path: str,
        base_env: Optional[Mapping[str, str]] = None,
    ) -> "Command":
        """Activate a Python virtualenv for execution."""
        overlay = python_venv_overlay(venv_path, self.environment, base_env)
        return self.with_environment(overlay)

    def with_config_file(
        self,
        config_path: str,
        variable: str = CONFIG_FILE_VAR,
    ) -> "Command":
        """Point the tool at a config file."""
        return self.with_environment(config_file_overlay(config_path, variable))

    def process_environment(
        self,
        base_env: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, str]:
        """Complete environment for the child process."""
        return materialize_environment(self.environment, base_env)

    def popen_kwargs(
        self,
        base_env: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """Keyword arguments for ``subprocess.Popen`` and friends.

        Stdin is not opened here; ``input_path`` is left for the caller.
        """
        return {
            "args": self.argv,
            "env": self.process_environment(base_env),
            "cwd": self.working_directory,
        }


def command_from_settings(
    executable: str,
    subcommands: Iterable[str] = (),
    options: Optional[Mapping[str, Any]] = None,
    raw_opts: Optional[str] = None,
    arguments: Iterable[str] = (),
    working_directory: Optional[str] = None,
) -> Command:
    """Build a Command from run-configuration values.

    Raw options are tokenized and placed before the positional arguments.
    A blank working directory is treated as unset.
    """
    command = Command(
        executable,
        subcommands=tuple(subcommands),
        options=dict(options or {}),
        arguments=tuple(split_arguments(raw_opts)) + tuple(arguments),
        working_directory=working_directory if working_directory and working_directory.strip() else None,
    )
    logger.debug("Command from settings: %s", command)
    return command
