"""Project-level Ansible settings."""

import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings

from runline.configurations.install import (
    ContainerInstall,
    InstallTarget,
    SystemInstall,
    VirtualenvInstall,
)
from runline.primitives.errors import ConfigurationError
from runline.utils.logger import get_logger


class AnsibleSettings(BaseSettings):
    """Settings loaded from RUNLINE_* environment variables or a .env file.

    install_type selects where Ansible lives:
    - system: ansible_location is the path of the ansible executable
    - virtualenv: virtualenv is a local Python virtualenv directory
    - docker: docker_image (plus optional docker_venv) inside docker_exe
    """

    # Installation
    install_type: Literal["system", "virtualenv", "docker"] = "system"
    ansible_location: str = "ansible"
    virtualenv: Optional[str] = None

    # Container
    docker_exe: str = "docker"
    docker_image: Optional[str] = None
    docker_venv: Optional[str] = None
    remote_work_dir: str = "/tmp/ansible"

    # Execution
    config_file: Optional[str] = None
    term: str = "xterm-256color"

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    class Config:
        env_prefix = "RUNLINE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    def install_target(self) -> InstallTarget:
        """Build the installation variant for these settings."""
        if self.install_type == "virtualenv":
            if not self.virtualenv:
                raise ConfigurationError(
                    "virtualenv install requires a virtualenv path", field="virtualenv"
                )
            return VirtualenvInstall(self.virtualenv)
        if self.install_type == "docker":
            if not self.docker_image:
                raise ConfigurationError(
                    "docker install requires an image", field="docker_image"
                )
            return ContainerInstall(
                image=self.docker_image,
                docker_exe=self.docker_exe or "docker",
                venv_path=self.docker_venv,
                remote_work_dir=self.remote_work_dir,
            )
        return SystemInstall(self.ansible_location)


@lru_cache
def get_settings() -> AnsibleSettings:
    """Get cached settings instance."""
    return AnsibleSettings()


def configure_logging(settings: Optional[AnsibleSettings] = None) -> logging.Logger:
    """Set up the runline logger from settings."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    return get_logger("runline", level=level, log_dir=settings.log_dir)
