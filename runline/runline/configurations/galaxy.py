"""ansible-galaxy run configuration."""

import logging
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from runline.configurations.base import finish_command, resolve_target
from runline.configurations.install import resolve_executable
from runline.configurations.settings import AnsibleSettings, get_settings
from runline.primitives.command import Command, command_from_settings
from runline.primitives.errors import ConfigurationError
from runline.runtime.chain import and_commands

logger = logging.getLogger(__name__)


class GalaxyConfig(BaseModel):
    """User-edited settings for an ansible-galaxy install."""

    requirements: str = ""
    deps: bool = True
    force: bool = False
    roles_dir: str = ""
    collections_dir: str = ""
    ansible_command: str = "ansible-galaxy"
    virtualenv: Optional[str] = None
    raw_opts: str = ""
    work_dir: str = ""


class RequirementsContent(BaseModel):
    """Which categories a requirements file declares.

    The file itself is parsed by the caller.
    """

    roles: bool = False
    collections: bool = False

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "RequirementsContent":
        """Build from an already parsed requirements document."""
        data = data or {}
        return cls(
            roles=data.get("roles") is not None,
            collections=data.get("collections") is not None,
        )


def _install_command(
    config: GalaxyConfig,
    executable: str,
    kind: Optional[str] = None,
    path: Optional[str] = None,
) -> Command:
    """Build one install command.

    Args:
        kind: None for the all-in-one install, else "collection" or "role".
        path: Installation directory for that kind.
    """
    force_option = "force-with-deps" if config.deps else "force"
    options = {
        "no-deps": not config.deps,
        force_option: config.force,
        "r": config.requirements or None,
        "p": path,
    }
    subcommands = [token for token in (kind, "install") if token]
    return command_from_settings(
        executable,
        subcommands=subcommands,
        options=options,
        raw_opts=config.raw_opts,
    )


def build_galaxy_command(
    config: GalaxyConfig,
    settings: Optional[AnsibleSettings] = None,
    content: Optional[RequirementsContent] = None,
    base_env: Optional[Mapping[str, str]] = None,
) -> Command:
    """Build the ansible-galaxy command for a run configuration.

    With a custom roles or collections directory, Ansible needs the
    specific ``role install`` and ``collection install`` commands, and
    neither accepts two destinations. The two installs are then chained
    in one shell command.

    Args:
        config: Run configuration values.
        settings: Project settings, default from the environment.
        content: Categories present in the requirements file; required
            when a custom directory is set.
        base_env: Parent environment for virtualenv activation.

    Raises:
        ConfigurationError: Custom directories without requirements content,
            or requirements that declare neither roles nor collections.
    """
    settings = settings or get_settings()
    target = resolve_target(settings, config.virtualenv)
    executable = resolve_executable(target, config.ansible_command)
    roles_dir = config.roles_dir or None
    collections_dir = config.collections_dir or None

    if roles_dir is None and collections_dir is None:
        command = _install_command(config, executable)
    else:
        if content is None:
            raise ConfigurationError(
                "requirements content is needed for custom install directories",
                field="requirements",
            )
        commands = []
        if content.collections:
            commands.append(_install_command(config, executable, "collection", collections_dir))
        if content.roles:
            commands.append(_install_command(config, executable, "role", roles_dir))
        if not commands:
            raise ConfigurationError(
                f"no roles or collections in '{config.requirements}'",
                field="requirements",
            )
        logger.debug("Installing %d categories separately", len(commands))
        # Silence warnings about unconfigured directories, which only
        # matter to ansible-playbook.
        overlay = {}
        if collections_dir is not None:
            overlay["ANSIBLE_COLLECTIONS_PATHS"] = collections_dir
        if roles_dir is not None:
            overlay["ANSIBLE_ROLES_PATH"] = roles_dir
        command = and_commands(commands).with_environment(overlay)

    if config.work_dir.strip():
        command = command.with_working_directory(config.work_dir)
    return finish_command(command, settings, target, base_env)
