"""Configuration management for kraftpack.

Handles loading and validation of YAML configuration files describing
logging and which package managers to register at startup.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_CONFIG_PATH = "/etc/kraftpack/config.yaml"
CONFIG_ENV_VAR = "KRAFTPACK_CONFIG"


@dataclass
class LoggingConfig:
    """Configuration for log output."""

    level: str = "INFO"
    log_dir: str = "/var/log/kraftpack"
    file_logging: bool = False
    console_logging: bool = True


@dataclass
class PackManagerConfig:
    """Configuration for the package manager registry."""

    # context key -> "module.path:ClassName"
    managers: Dict[str, str] = field(default_factory=dict)
    sort_by_key: bool = False


@dataclass
class KraftPackConfig:
    """Top-level configuration for kraftpack."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    packmanager: PackManagerConfig = field(default_factory=PackManagerConfig)


def parse_logging_config(logging_dict: Dict[str, Any]) -> LoggingConfig:
    """Parse a logging configuration dictionary.

    Args:
        logging_dict: Logging configuration dictionary

    Returns:
        LoggingConfig instance
    """
    return LoggingConfig(
        level=logging_dict.get("level", "INFO"),
        log_dir=logging_dict.get("log_dir", "/var/log/kraftpack"),
        file_logging=logging_dict.get("file_logging", False),
        console_logging=logging_dict.get("console_logging", True),
    )


def parse_packmanager_config(pm_dict: Dict[str, Any]) -> PackManagerConfig:
    """Parse the package manager section.

    Args:
        pm_dict: Package manager configuration dictionary

    Returns:
        PackManagerConfig instance

    Raises:
        TypeError: If ``managers`` is not a mapping
    """
    managers = pm_dict.get("managers") or {}
    if not isinstance(managers, dict):
        raise TypeError(
            f"packmanager.managers must be a mapping, got {type(managers).__name__}"
        )

    return PackManagerConfig(
        managers={str(key): str(value) for key, value in managers.items()},
        sort_by_key=bool(pm_dict.get("sort_by_key", False)),
    )


def parse_config(config_dict: Dict[str, Any]) -> KraftPackConfig:
    """Parse the full configuration dictionary.

    Args:
        config_dict: Full configuration dictionary

    Returns:
        KraftPackConfig instance
    """
    logging_config = LoggingConfig()
    if "logging" in config_dict:
        logging_config = parse_logging_config(config_dict["logging"] or {})

    packmanager_config = PackManagerConfig()
    if "packmanager" in config_dict:
        packmanager_config = parse_packmanager_config(config_dict["packmanager"] or {})

    return KraftPackConfig(logging=logging_config, packmanager=packmanager_config)


def default_config_path() -> str:
    """Return the configuration path, honouring ``KRAFTPACK_CONFIG``."""
    return os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_file.open("r") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise TypeError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )

    return _expand_env_vars(config)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration.

    Args:
        obj: Configuration object (dict, list, str, etc.)

    Returns:
        Configuration with expanded environment variables
    """
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj


def load_typed_config(config_path: str = DEFAULT_CONFIG_PATH) -> KraftPackConfig:
    """Load and parse configuration into typed dataclass.

    Args:
        config_path: Path to configuration file

    Returns:
        KraftPackConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    return parse_config(load_config(config_path))
