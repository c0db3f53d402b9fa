"""Tests for the ansible-playbook run configuration."""

import os

import pytest

from runline.configurations.playbook import PlaybookConfig, build_playbook_command
from runline.configurations.settings import AnsibleSettings


@pytest.fixture
def config():
    return PlaybookConfig(
        playbooks=["site.yml", "deploy.yml"],
        inventory=["hosts.yml", "more.yml"],
        host="web",
        tags=["setup", "deploy"],
        variables=["x=1", "y=2"],
        raw_opts='--check -e "z=3 w"',
        work_dir="/work",
    )


class TestBuildPlaybookCommand:
    """Test build_playbook_command()."""

    def test_argv(self, config, system_settings):
        command = build_playbook_command(config, system_settings)
        assert command.argv == [
            "ansible-playbook",
            "--limit", "web",
            "--inventory", "hosts.yml,more.yml",
            "--tags", "setup,deploy",
            "--extra-vars", "x=1 y=2",
            "--check", "-e", "z=3 w",
            "site.yml", "deploy.yml",
        ]
        assert command.working_directory == "/work"

    def test_empty_config(self, system_settings):
        command = build_playbook_command(PlaybookConfig(), system_settings)
        assert command.argv == ["ansible-playbook"]
        assert command.working_directory is None

    def test_term_default(self, config, system_settings):
        command = build_playbook_command(config, system_settings)
        assert command.environment["TERM"] == "xterm-256color"

    def test_password_on_stdin(self, config, system_settings):
        command = build_playbook_command(config, system_settings, password="s3cret")
        try:
            assert command.argv.index("--ask-become-pass") == command.argv.index("x=1 y=2") + 1
            with open(command.input_path, encoding="utf-8") as stream:
                assert stream.read() == "s3cret"
        finally:
            os.unlink(command.input_path)

    def test_no_password(self, config, system_settings):
        command = build_playbook_command(config, system_settings)
        assert "--ask-become-pass" not in command.argv
        assert command.input_path is None

    def test_config_file(self, config):
        settings = AnsibleSettings(_env_file=None, config_file="ansible.cfg")
        command = build_playbook_command(config, settings)
        assert command.environment["ANSIBLE_CONFIG"] == "ansible.cfg"

    def test_system_location(self, config):
        settings = AnsibleSettings(_env_file=None, ansible_location="/opt/ansible/bin/ansible")
        command = build_playbook_command(config, settings)
        assert command.executable == "/opt/ansible/bin/ansible-playbook"

    def test_config_virtualenv(self, config, system_settings, base_env):
        config.virtualenv = "/opt/venv"
        command = build_playbook_command(config, system_settings, base_env=base_env)
        assert command.executable == "ansible-playbook"
        assert command.environment["VIRTUAL_ENV"] == "/opt/venv"
        assert command.environment["PATH"].startswith("/opt/venv/bin")

    def test_docker(self, config):
        settings = AnsibleSettings(
            _env_file=None, install_type="docker", docker_image="ansible:latest"
        )
        command = build_playbook_command(config, settings)
        assert command.executable == "docker"
        assert command.argv[-14:-12] == ["ansible:latest", "--limit"]
        assert "--volume" in command.argv
        assert command.environment == {"TERM": "xterm-256color"}
