"""Runline runtime: invocations derived from a built command."""

from runline.runtime.chain import and_commands, shell_command
from runline.runtime.container import as_docker_run, container_venv_overlay

__all__ = [
    "and_commands",
    "shell_command",
    "as_docker_run",
    "container_venv_overlay",
]
