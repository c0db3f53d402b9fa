"""Ansible installation targets.

Where Ansible lives decides how a command is resolved and wrapped:

    SystemInstall      executables next to a configured location
    VirtualenvInstall  executables on PATH after virtualenv activation
    ContainerInstall   executables inside a container image

The variant is chosen once from settings and dispatched here, so the
command primitives never need to know about it.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from runline.primitives.command import Command
from runline.runtime.container import DOCKER_EXE, REMOTE_WORK_DIR, as_docker_run


@dataclass(frozen=True)
class SystemInstall:
    """Ansible installed on the host.

    Attributes:
        location: Path of the ``ansible`` executable (or a bare name on PATH).
    """

    location: str = "ansible"


@dataclass(frozen=True)
class VirtualenvInstall:
    """Ansible installed in a local Python virtualenv."""

    venv_path: str


@dataclass(frozen=True)
class ContainerInstall:
    """Ansible installed in a container image."""

    image: str
    docker_exe: str = DOCKER_EXE
    venv_path: Optional[str] = None
    remote_work_dir: str = REMOTE_WORK_DIR


InstallTarget = Union[SystemInstall, VirtualenvInstall, ContainerInstall]


def resolve_executable(target: InstallTarget, command: str) -> str:
    """Resolve the executable path for an Ansible command name.

    For a system install, commands live in the same directory as the
    configured ``ansible`` executable. Virtualenv and container installs
    rely on PATH.
    """
    if isinstance(target, SystemInstall):
        parent = os.path.dirname(target.location or "")
        return os.path.join(parent, command) if parent else command
    return command


def apply_install(
    target: InstallTarget,
    command: Command,
    base_env: Optional[Mapping[str, str]] = None,
) -> Command:
    """Adapt a command to run against the given installation."""
    if isinstance(target, VirtualenvInstall):
        return command.with_python_venv(target.venv_path, base_env)
    if isinstance(target, ContainerInstall):
        return as_docker_run(
            command,
            target.image,
            venv_path=target.venv_path,
            docker_exe=target.docker_exe,
            remote_work_dir=target.remote_work_dir,
        )
    return command
