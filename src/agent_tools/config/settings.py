"""
Settings configuration using pydantic-settings.

Loads configuration from (highest precedence first):
1. Constructor arguments
2. Environment variables with AGT_ prefix
3. .env file named by AGT_ENV_FILE (if set and present)
4. User config: ~/.config/agt/config.yaml (or $AGT_CONFIG_DIR/config.yaml)
5. Field defaults
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings
import yaml as _yaml

import agent_tools.constants as constants

ENV_CONFIG_DIR = "AGT_CONFIG_DIR"
"""Environment variable overriding the user config directory."""

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigFileError(ValueError):
    """Raised when the user config file cannot be parsed."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


def _get_env_file() -> str | None:
    """Use AGT_ENV_FILE as the .env file if it is set and exists."""
    if env_file := _os.environ.get("AGT_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


def get_user_config_dir() -> _pathlib.Path:
    """
    Get the user config directory.

    Respects AGT_CONFIG_DIR if set, otherwise uses the XDG standard path.
    """
    config_dir_env = _os.environ.get(ENV_CONFIG_DIR)
    if config_dir_env:
        return _pathlib.Path(config_dir_env)
    return _pathlib.Path.home() / ".config" / constants.PROGRAM_NAME


def get_user_config_path() -> _pathlib.Path:
    """Get the path to the user config file."""
    return get_user_config_dir() / "config.yaml"


def get_package_root() -> _pathlib.Path:
    """Directory of the installed ``agent_tools`` package (ships ``skills/``)."""
    return _pathlib.Path(__file__).resolve().parent.parent


class Settings(_pydantic_settings.BaseSettings):
    """
    Agent Tools configuration settings.

    All settings can be overridden via environment variables with the
    AGT_ prefix, e.g. AGT_PROJECT_ROOT=/opt/agent-tools.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="AGT_",
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args) - highest
        2. env_settings (AGT_* env vars)
        3. dotenv_settings (.env file)
        4. user config.yaml
        """
        yaml_path = get_user_config_path()
        try:
            yaml_settings = _pydantic_settings.YamlConfigSettingsSource(
                settings_cls, yaml_file=yaml_path
            )
        except _yaml.YAMLError as e:
            raise ConfigFileError(yaml_path, f"Invalid YAML: {e}") from e

        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_settings,
            file_secret_settings,
        )

    project_root: _pathlib.Path | None = _pydantic.Field(
        default=None,
        description="Install root containing skills/ (set by packaging or a wrapper script)",
    )

    agents_file: str = _pydantic.Field(
        default=constants.DEFAULT_AGENTS_FILE,
        description="Documentation file edited by 'agt init' when --file-path is not given",
    )

    log_level: str = _pydantic.Field(
        default="WARNING",
        description="Logging level for diagnostics written to stderr",
    )

    @_pydantic.field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize and check the log level name."""
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{value}'. Expected one of: {', '.join(_LOG_LEVELS)}"
            )
        return level

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings without loading any .env file (test isolation)."""
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]


def get_install_root(settings: Settings | None = None) -> _pathlib.Path:
    """
    Resolve the directory that holds the ``skills/`` library.

    A configured ``project_root`` (AGT_PROJECT_ROOT, injected by a wrapper
    or by packaging) wins. Otherwise the installed package directory is
    used, which carries the bundled skills.
    """
    if settings is None:
        settings = Settings()
    if settings.project_root is not None:
        return settings.project_root.expanduser().resolve()
    return get_package_root()
