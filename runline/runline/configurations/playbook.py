"""ansible-playbook run configuration."""

from typing import List, Mapping, Optional

from pydantic import BaseModel, Field

from runline.configurations.base import finish_command, resolve_target
from runline.configurations.install import resolve_executable
from runline.configurations.settings import AnsibleSettings, get_settings
from runline.primitives.command import Command, command_from_settings


class PlaybookConfig(BaseModel):
    """User-edited settings for an ansible-playbook run."""

    playbooks: List[str] = Field(default_factory=list)
    inventory: List[str] = Field(default_factory=list)
    host: str = ""
    tags: List[str] = Field(default_factory=list)
    variables: List[str] = Field(default_factory=list)
    ansible_command: str = "ansible-playbook"
    virtualenv: Optional[str] = None
    raw_opts: str = ""
    work_dir: str = ""


def build_playbook_command(
    config: PlaybookConfig,
    settings: Optional[AnsibleSettings] = None,
    password: Optional[str] = None,
    base_env: Optional[Mapping[str, str]] = None,
) -> Command:
    """Build the ansible-playbook command for a run configuration.

    Args:
        config: Run configuration values.
        settings: Project settings, default from the environment.
        password: Become password; sent on stdin with --ask-become-pass.
        base_env: Parent environment for virtualenv activation.

    Returns:
        Command ready to spawn.
    """
    settings = settings or get_settings()
    target = resolve_target(settings, config.virtualenv)
    options = {
        "limit": config.host or None,
        "inventory": ",".join(config.inventory) or None,
        "tags": ",".join(config.tags) or None,
        "extra-vars": " ".join(config.variables) or None,
    }
    command = command_from_settings(
        resolve_executable(target, config.ansible_command),
        options=options,
        raw_opts=config.raw_opts,
        arguments=config.playbooks,
        working_directory=config.work_dir,
    )
    if password is not None:
        command = command.with_input(password).with_options({"ask-become-pass": True})
    return finish_command(command, settings, target, base_env)
