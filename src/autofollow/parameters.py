# src/autofollow/parameters.py
"""
Parameters Module - Central Configuration Management
=====================================================

This module provides the Parameters class for loading and accessing
configuration values from YAML files.

Every top-level section of the YAML file is flattened: its keys become
UPPERCASE class attributes (``Follow.FOLLOW_DISTANCE`` ->
``Parameters.FOLLOW_DISTANCE``). Built-in defaults are declared as class
attributes and mirror ``config_default.yaml``, so a missing config file
leaves the same configuration as the shipped one.

Config file resolution:
    1. Explicit ``config_file`` argument
    2. ``AUTOFOLLOW_CONFIG`` environment variable
    3. ``configs/config.yaml`` relative to the working directory (user copy)
    4. ``config_default.yaml`` installed with the package (shipped defaults)
"""

import yaml
import os
import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)

_USER_CONFIG = os.path.join('configs', 'config.yaml')
_DEFAULT_CONFIG = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config_default.yaml')

CONFIG_ENV_VAR = 'AUTOFOLLOW_CONFIG'


def resolve_config_path(config_file: Optional[str] = None) -> str:
    """Pick the config file to load according to the resolution order above."""
    if config_file:
        return config_file
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return env_path
    if os.path.exists(_USER_CONFIG):
        return _USER_CONFIG
    return _DEFAULT_CONFIG


class Parameters:
    """
    Central configuration class for the AutoFollow project.
    Configurations are set as class variables; ``FollowSettings.from_parameters()``
    turns them into an immutable per-tick snapshot.
    """

    # Built-in defaults. Restored by reset_defaults().
    _DEFAULTS: Dict[str, Any] = {
        # BotBase
        'IS_PAUSED': False,
        'TICK_INTERVAL': 0.1,
        # Follow
        'ENABLE_FOLLOWING': True,
        'FOLLOW_MODE': 'party_leader',
        'FOLLOW_DISTANCE': 3.0,
        'FOLLOW_DISTANCE_TOLERANCE': 0.5,
        'FIXED_CHARACTER_NAME': '',
        'FIXED_CHARACTER_TYPE': 'Pc',
        'FIXED_CHARACTER_STRING': '',
        'USE_NAV_GRAPH': True,
        'TAKE_OFF_HEIGHT': 5.0,
        # GameConstants
        'SPRINT_AURA_ID': 50,
        'MOUNT_ACTION_ID': 9,
        # Debug
        'MOVEMENT_CIRCUIT_BREAKER': False,
        'LOG_LEVEL': 'INFO',
        'LOG_SPAM_COOLDOWN': 5.0,
    }

    # Raw config storage
    _raw_config: Dict[str, Any] = {}
    _config_file: Optional[str] = None

    @classmethod
    def reset_defaults(cls) -> None:
        """Restore built-in defaults and forget any loaded file."""
        for key, value in cls._DEFAULTS.items():
            setattr(cls, key, value)
        cls._raw_config = {}
        cls._config_file = None

    @classmethod
    def load_config(cls, config_file: Optional[str] = None) -> None:
        """
        Class method to load configurations from a YAML file and set class variables.

        A missing file keeps the current values and logs a warning. A file that
        exists but is not valid YAML raises ``yaml.YAMLError``.

        Args:
            config_file: Path to the YAML file. See module docstring for the
                resolution order when omitted.
        """
        path = resolve_config_path(config_file)
        if not os.path.exists(path):
            logger.warning(f"Config file not found: {path} - using built-in defaults")
            return

        with open(path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError(f"Config file {path} must contain a mapping at top level, "
                             f"got {type(config).__name__}")

        cls._raw_config = config
        cls._config_file = path

        for section, params in config.items():
            if params is None:
                continue
            if isinstance(params, dict):
                for key, value in params.items():
                    setattr(cls, key.upper(), value)
            else:
                setattr(cls, section.upper(), params)

        logger.debug(f"Loaded configuration from {path}")

    @classmethod
    def get_section(cls, section_name: str) -> dict:
        """
        Get all parameters in a section of the last loaded file as a dictionary.

        Args:
            section_name: Name of the section (e.g., 'Follow', 'Debug')

        Returns:
            dict: The section parameters, or empty dict if not found
        """
        section = cls._raw_config.get(section_name, {})
        return section if isinstance(section, dict) else {}

    @classmethod
    def reload_config(cls, config_file: Optional[str] = None) -> bool:
        """
        Reload configuration from disk.

        Args:
            config_file: Path to the config file (default: the last loaded file)

        Returns:
            bool: True if reload was successful, False otherwise
        """
        path = config_file or cls._config_file
        try:
            logger.info(f"Reloading configuration from {resolve_config_path(path)}")
            cls.load_config(path)
            logger.info("Configuration reloaded successfully")
            return True

        except Exception as e:
            logger.error(f"Failed to reload configuration: {e}")
            return False


Parameters.reset_defaults()
# Load the configurations upon module import
Parameters.load_config()
