"""Environment overlays for built commands.

An overlay is a mapping merged on top of a command's environment,
overwriting on collision. A key mapped to ``UNSET`` removes the variable
from the final process environment, which is different from setting it
to an empty string.

Lookups that fall back to the parent process go through an explicit
``base_env`` argument, defaulting to ``os.environ`` only at the call
boundary. Pure functions, no side effects.
"""

import logging
import os
from typing import Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)


class _Unset:
    """Sentinel type for an environment variable to be removed."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()

EnvValue = Union[str, _Unset]

CONFIG_FILE_VAR = "ANSIBLE_CONFIG"


def _base(base_env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if base_env is None else base_env


def merge_environment(
    environment: Mapping[str, EnvValue],
    overlay: Mapping[str, EnvValue],
) -> Dict[str, EnvValue]:
    """Return a new environment with overlay applied on top."""
    merged = dict(environment)
    merged.update(overlay)
    return merged


def lookup(
    name: str,
    environment: Mapping[str, EnvValue],
    base_env: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Resolve a variable from the command first, then the base environment.

    A variable explicitly UNSET on the command resolves to None without
    consulting the base environment.
    """
    if name in environment:
        value = environment[name]
        return None if value is UNSET else value
    return _base(base_env).get(name)


def materialize_environment(
    environment: Mapping[str, EnvValue],
    base_env: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """Build the full process environment: base plus overlay, UNSET removed."""
    env = dict(_base(base_env))
    for key, value in environment.items():
        if value is UNSET:
            env.pop(key, None)
        else:
            env[key] = value
    return env


def python_venv_overlay(
    venv_path: str,
    environment: Mapping[str, EnvValue],
    base_env: Optional[Mapping[str, str]] = None,
) -> Dict[str, EnvValue]:
    """Compute the overlay that activates a Python virtualenv.

    Does what an installed ``activate`` script does without running it:
    prepend the environment's ``bin/`` directory to PATH, record
    VIRTUAL_ENV, and unset PYTHONHOME if it is set.

    Applying the overlay again with the same path leaves PATH unchanged.

    Args:
        venv_path: Virtualenv directory, absolute or relative to cwd.
        environment: Current command environment.
        base_env: Parent process environment for fallback lookups.

    Returns:
        Overlay mapping to merge onto the command environment.
    """
    venv = os.path.abspath(venv_path)
    bin_dir = os.path.join(venv, "bin")
    current_path = lookup("PATH", environment, base_env)
    if not current_path:
        path = bin_dir
    elif current_path.split(os.pathsep)[0] == bin_dir:
        path = current_path
    else:
        path = os.pathsep.join([bin_dir, current_path])

    overlay: Dict[str, EnvValue] = {
        "VIRTUAL_ENV": venv,
        "PATH": path,
    }
    if lookup("PYTHONHOME", environment, base_env) is not None:
        overlay["PYTHONHOME"] = UNSET
    logger.debug("Virtualenv overlay for %s: %s", venv, overlay)
    return overlay


def config_file_overlay(
    config_path: str,
    variable: str = CONFIG_FILE_VAR,
) -> Dict[str, EnvValue]:
    """Point a tool at its config file through an environment variable."""
    return {variable: config_path}
