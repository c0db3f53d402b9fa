"""Tests for project settings and installation targets."""

import logging

import pytest

from runline.configurations.install import (
    ContainerInstall,
    SystemInstall,
    VirtualenvInstall,
    apply_install,
    resolve_executable,
)
from runline.configurations.settings import AnsibleSettings, configure_logging, get_settings
from runline.primitives.command import Command
from runline.primitives.errors import ConfigurationError


class TestAnsibleSettings:
    """Test settings defaults and environment loading."""

    def test_defaults(self, system_settings):
        assert system_settings.install_type == "system"
        assert system_settings.ansible_location == "ansible"
        assert system_settings.docker_exe == "docker"
        assert system_settings.remote_work_dir == "/tmp/ansible"
        assert system_settings.term == "xterm-256color"
        assert system_settings.config_file is None

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("RUNLINE_INSTALL_TYPE", "docker")
        monkeypatch.setenv("RUNLINE_DOCKER_IMAGE", "ansible:latest")
        monkeypatch.setenv("RUNLINE_CONFIG_FILE", "ansible.cfg")
        settings = get_settings()
        assert settings.install_type == "docker"
        assert settings.docker_image == "ansible:latest"
        assert settings.config_file == "ansible.cfg"

    def test_from_dotenv(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("RUNLINE_VIRTUALENV=/opt/venv\n", encoding="utf-8")
        assert AnsibleSettings().virtualenv == "/opt/venv"

    def test_get_settings_cached(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        assert get_settings() is get_settings()

    def test_invalid_install_type(self):
        with pytest.raises(ValueError):
            AnsibleSettings(_env_file=None, install_type="conda")


class TestInstallTarget:
    """Test settings to installation variant."""

    def test_system(self):
        settings = AnsibleSettings(_env_file=None, ansible_location="/opt/bin/ansible")
        assert settings.install_target() == SystemInstall("/opt/bin/ansible")

    def test_virtualenv(self):
        settings = AnsibleSettings(_env_file=None, install_type="virtualenv", virtualenv=".venv")
        assert settings.install_target() == VirtualenvInstall(".venv")

    def test_virtualenv_requires_path(self):
        settings = AnsibleSettings(_env_file=None, install_type="virtualenv")
        with pytest.raises(ConfigurationError) as excinfo:
            settings.install_target()
        assert excinfo.value.field == "virtualenv"

    def test_docker(self):
        settings = AnsibleSettings(
            _env_file=None,
            install_type="docker",
            docker_image="ansible:latest",
            docker_exe="podman",
            docker_venv="/venv",
        )
        assert settings.install_target() == ContainerInstall(
            image="ansible:latest", docker_exe="podman", venv_path="/venv"
        )

    def test_docker_requires_image(self):
        settings = AnsibleSettings(_env_file=None, install_type="docker")
        with pytest.raises(ConfigurationError) as excinfo:
            settings.install_target()
        assert excinfo.value.field == "docker_image"


class TestResolveExecutable:
    """Test executable resolution per installation."""

    def test_system_sibling(self):
        target = SystemInstall("/usr/local/bin/ansible")
        assert resolve_executable(target, "ansible-playbook") == "/usr/local/bin/ansible-playbook"

    def test_system_bare_name(self):
        assert resolve_executable(SystemInstall("ansible"), "ansible-galaxy") == "ansible-galaxy"

    def test_virtualenv(self):
        assert resolve_executable(VirtualenvInstall("/venv"), "ansible-galaxy") == "ansible-galaxy"

    def test_container(self):
        assert resolve_executable(ContainerInstall("img"), "ansible-galaxy") == "ansible-galaxy"


class TestApplyInstall:
    """Test installation dispatch."""

    def test_system_unchanged(self):
        command = Command("ansible")
        assert apply_install(SystemInstall(), command) is command

    def test_virtualenv(self, base_env):
        command = apply_install(VirtualenvInstall("/opt/venv"), Command("ansible"), base_env)
        assert command.environment["VIRTUAL_ENV"] == "/opt/venv"

    def test_container(self):
        target = ContainerInstall("img", docker_exe="podman", remote_work_dir="/src")
        command = apply_install(target, Command("ansible", working_directory="/w"))
        assert command.executable == "podman"
        assert "/w:/src" in command.argv


class TestConfigureLogging:
    """Test configure_logging()."""

    @pytest.fixture(autouse=True)
    def _reset_logger(self):
        yield
        logger = logging.getLogger("runline")
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    def test_level_from_settings(self):
        logger = configure_logging(AnsibleSettings(_env_file=None, log_level="warning"))
        assert logger.name == "runline"
        assert logger.level == logging.WARNING

    def test_unknown_level_falls_back(self):
        logger = configure_logging(AnsibleSettings(_env_file=None, log_level="chatty"))
        assert logger.level == logging.INFO

    def test_log_dir(self, tmp_path):
        configure_logging(AnsibleSettings(_env_file=None, log_dir=str(tmp_path)))
        assert (tmp_path / "runline.log").exists()
