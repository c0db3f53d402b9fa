"""Steps shared by every Ansible run configuration."""

import logging
from dataclasses import replace
from typing import Mapping, Optional

from runline.configurations.install import (
    ContainerInstall,
    InstallTarget,
    VirtualenvInstall,
    apply_install,
)
from runline.configurations.settings import AnsibleSettings
from runline.primitives.command import Command

logger = logging.getLogger(__name__)


def resolve_target(
    settings: AnsibleSettings,
    virtualenv: Optional[str] = None,
) -> InstallTarget:
    """Installation target, with a per-configuration virtualenv taking precedence.

    For a container install the virtualenv is taken as a path inside the
    container.
    """
    target = settings.install_target()
    if not virtualenv:
        return target
    if isinstance(target, ContainerInstall):
        return replace(target, venv_path=virtualenv)
    return VirtualenvInstall(virtualenv)


def finish_command(
    command: Command,
    settings: AnsibleSettings,
    target: InstallTarget,
    base_env: Optional[Mapping[str, str]] = None,
) -> Command:
    """Apply config file, installation and terminal settings to a command."""
    if settings.config_file:
        command = command.with_config_file(settings.config_file)
    command = apply_install(target, command, base_env)
    if "TERM" not in command.environment:
        command = command.with_environment({"TERM": settings.term})
    logger.info("Ansible command: %s", command)
    return command
