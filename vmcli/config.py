"""Settings loading from YAML and the environment."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from vmcli.exceptions import ConfigurationError


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "vmcli.yaml"
CONFIG_ENV_VAR = "VMCLI_CONFIG"
PATH_ENV_VAR = "VMCLI_PATH"

# Accepted spellings of the path key under the 'settings' mapping
PATH_KEYS = ("vmcli_path", "VmcliPath")


@dataclass
class Settings:
    """Client settings."""
    vmcli_path: Optional[str] = None


def load_settings(
    config_path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Load settings from a YAML file and the environment.

    The file is config_path if given, else $VMCLI_CONFIG, else ./vmcli.yaml if it
    exists. $VMCLI_PATH overrides the path found in the file.

    Example file:

        settings:
          vmcli_path: C:/Program Files (x86)/VMware/VMware Workstation/vmcli.exe

    Raises:
        ConfigurationError: If an explicitly named file is missing or malformed
    """
    env = os.environ if environ is None else environ
    settings = Settings()

    explicit = config_path or env.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")
        settings = _load_file(path)
    elif Path(DEFAULT_CONFIG_FILE).exists():
        settings = _load_file(Path(DEFAULT_CONFIG_FILE))

    env_path = env.get(PATH_ENV_VAR)
    if env_path and env_path.strip():
        logger.debug(f"Using vmcli path from ${PATH_ENV_VAR}")
        settings.vmcli_path = env_path

    return settings


def _load_file(path: Path) -> Settings:
    logger.debug(f"Loading settings: {path}")
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load config file {path}: {e}") from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a YAML mapping")

    section = data.get('settings', {})
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'settings' in {path} must be a mapping, got {type(section).__name__}")

    return Settings(vmcli_path=_first_path(section))


def _first_path(section: Dict[str, Any]) -> Optional[str]:
    for key in PATH_KEYS:
        value = section.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ConfigurationError(f"'settings.{key}' must be a string, got {type(value).__name__}")
        return value
    return None
