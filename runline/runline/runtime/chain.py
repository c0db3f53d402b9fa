"""Run several commands as one shell invocation.

Commands are rendered to display strings and joined with ``&&``, so the
shell stops at the first failure. Used when a tool has to be invoked
more than once (e.g. installing roles and collections into different
directories) but the caller can only spawn a single process.
"""

import logging
from typing import Dict, Iterable, Optional

from runline.primitives.command import Command
from runline.primitives.environment import EnvValue, merge_environment
from runline.primitives.errors import ConfigurationError

logger = logging.getLogger(__name__)

SHELL = "sh"


def shell_command(command: Command, shell: str = SHELL) -> Command:
    """Wrap a command to run via ``sh -c``."""
    return Command(
        shell,
        arguments=("-c", command.render()),
        environment=command.environment,
        working_directory=command.working_directory,
        input_path=command.input_path,
    )


def and_commands(commands: Iterable[Command], shell: str = SHELL) -> Command:
    """Chain commands with ``&&`` inside one ``sh -c`` command.

    Environments are merged in order, later commands winning on
    collision. The working directory and stdin come from the first
    command that defines one.

    Raises:
        ConfigurationError: No commands were given.
    """
    commands = list(commands)
    if not commands:
        raise ConfigurationError("no commands to chain", field="commands")

    environment: Dict[str, EnvValue] = {}
    working_directory: Optional[str] = None
    input_path: Optional[str] = None
    for command in commands:
        environment = merge_environment(environment, command.environment)
        working_directory = working_directory or command.working_directory
        input_path = input_path or command.input_path

    script = " && ".join(command.render() for command in commands)
    logger.debug("Chained %d commands: %s", len(commands), script)
    return Command(
        shell,
        arguments=("-c", script),
        environment=environment,
        working_directory=working_directory,
        input_path=input_path,
    )
