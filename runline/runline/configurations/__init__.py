"""Runline configurations: Ansible run configurations built on the primitives."""

from runline.configurations.galaxy import (
    GalaxyConfig,
    RequirementsContent,
    build_galaxy_command,
)
from runline.configurations.install import (
    ContainerInstall,
    SystemInstall,
    VirtualenvInstall,
    apply_install,
    resolve_executable,
)
from runline.configurations.playbook import PlaybookConfig, build_playbook_command
from runline.configurations.settings import AnsibleSettings, configure_logging, get_settings

__all__ = [
    "AnsibleSettings",
    "get_settings",
    "configure_logging",
    "SystemInstall",
    "VirtualenvInstall",
    "ContainerInstall",
    "apply_install",
    "resolve_executable",
    "PlaybookConfig",
    "build_playbook_command",
    "GalaxyConfig",
    "RequirementsContent",
    "build_galaxy_command",
]
