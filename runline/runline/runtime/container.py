"""Convert a command into a ``docker run`` command.

The command's environment is passed into the container with ``--env``.
Variables that must be expanded inside the container (PATH and the
PYTHONHOME placeholder) cannot go through ``--env``: setting PATH that
way breaks permissions in the images this runs against. Those are
exported by a shell step in front of the original command instead:

    docker run --rm --env K=V ... --entrypoint sh IMAGE \\
        -c 'export PATH="venv/bin:$PATH" && ansible --version'

Variables that should apply to the local ``docker`` process itself need
to be set on the returned command.
"""

import logging
import os
import posixpath
import re
from typing import Dict, List, Optional, Tuple

from runline.primitives.command import Command
from runline.primitives.environment import UNSET
from runline.primitives.errors import ConfigurationError

logger = logging.getLogger(__name__)

DOCKER_EXE = "docker"
REMOTE_WORK_DIR = "/tmp/ansible"

# Exported inside the container rather than passed with --env.
SHELL_EXPORTED = ("PATH", "PYTHONHOME")

# References the container shell is allowed to expand.
_PLACEHOLDER = re.compile(r"(\$(?:PATH|PYTHONHOME)(?![A-Za-z0-9_]))")
_SHELL_SPECIAL = re.compile(r'([\\"`$])')


def export_step(key: str, value: str) -> str:
    """Render a double-quoted `export` for the container shell.

    Only the $PATH and $PYTHONHOME placeholders stay expandable; any
    other quote, backslash, backtick or dollar sign is escaped.
    """
    parts = _PLACEHOLDER.split(value)
    quoted = "".join(
        part if index % 2 else _SHELL_SPECIAL.sub(r"\\\1", part)
        for index, part in enumerate(parts)
    )
    return f'export {key}="{quoted}"'


def container_venv_overlay(venv_path: str) -> Dict[str, str]:
    """Virtualenv activation in container path conventions.

    The container's PATH and PYTHONHOME are only known inside it, so they
    are written as shell references.
    """
    return {
        "VIRTUAL_ENV": venv_path,
        "PATH": f"{posixpath.join(venv_path, 'bin')}:$PATH",
        "PYTHONHOME": "$PYTHONHOME",
    }


def _split_exports(
    environment: Dict[str, str],
    exported: Tuple[str, ...],
) -> Tuple[Dict[str, str], List[Tuple[str, str]]]:
    passed = {}
    exports = []
    for key, value in environment.items():
        if key in exported:
            exports.append((key, value))
        else:
            passed[key] = value
    exports.sort(key=lambda item: exported.index(item[0]))
    return passed, exports


def as_docker_run(
    command: Command,
    image: str,
    venv_path: Optional[str] = None,
    docker_exe: Optional[str] = None,
    remote_work_dir: str = REMOTE_WORK_DIR,
) -> Command:
    """Wrap a command to run inside a container.

    Args:
        command: Command to run in the container.
        image: Container image name.
        venv_path: Python virtualenv directory inside the container.
        docker_exe: Local container runtime executable, default "docker".
        remote_work_dir: Mount point of the local working directory.

    Returns:
        New ``docker run`` command with an empty environment overlay.

    Raises:
        ConfigurationError: No image was given.
    """
    if not image or not image.strip():
        raise ConfigurationError("container image is required", field="image")

    docker_env = {
        key: value for key, value in command.environment.items() if value is not UNSET
    }
    exported: Tuple[str, ...] = ("PATH",)
    if venv_path:
        docker_env.update(container_venv_overlay(venv_path))
        exported = SHELL_EXPORTED
    passed, exports = _split_exports(docker_env, exported)

    if exports:
        steps = [export_step(key, value) for key, value in exports]
        steps.append(command.render())
        entrypoint = "sh"
        arguments = ["-c", " && ".join(steps)]
    else:
        entrypoint = command.executable
        arguments = command.parameters

    local_work_dir = os.path.abspath(command.working_directory or os.curdir)
    options = {
        "rm": True,
        "env": [f"{key}={value}" for key, value in passed.items()],
        "workdir": remote_work_dir,
        "volume": f"{local_work_dir}:{remote_work_dir}",
        "entrypoint": entrypoint,
    }
    docker = Command(
        docker_exe or DOCKER_EXE,
        subcommands=("run",),
        options=options,
        arguments=(image, *arguments),
        working_directory=command.working_directory,
        input_path=command.input_path,
    )
    logger.debug("Docker run command: %s", docker)
    return docker
