"""
Configuration module for Agent Tools.

Uses pydantic-settings for environment variable and YAML loading.
"""

from agent_tools.config.settings import (
    ConfigFileError,
    Settings,
    get_install_root,
    get_package_root,
    get_user_config_dir,
    get_user_config_path,
)

__all__ = [
    "ConfigFileError",
    "Settings",
    "get_install_root",
    "get_package_root",
    "get_user_config_dir",
    "get_user_config_path",
]
