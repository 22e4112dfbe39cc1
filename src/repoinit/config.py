from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from repoinit.exceptions import ConfigError
from repoinit.logging import get_logger
from repoinit.vcs.kinds import VcsKind

__all__ = [
    "RepoInitConfig",
    "ToolsConfig",
    "load_config",
    "get_user_config_path",
    "PROJECT_CONFIG_FILENAME",
]

logger = get_logger(__name__)

PROJECT_CONFIG_FILENAME = "repoinit.yaml"


class ToolsConfig(BaseModel):
    """Executables used by the tool-backed version control systems.

    Attributes:
        hg: Mercurial executable (init and root discovery).
        pijul: Pijul executable.
        fossil: Fossil executable.
        svnadmin: Subversion repository administration executable.
        svn: Subversion client executable used for the checkout.
        timeout_seconds: Per-command timeout. None waits indefinitely.
    """

    hg: str = "hg"
    pijul: str = "pijul"
    fossil: str = "fossil"
    svnadmin: str = "svnadmin"
    svn: str = "svn"
    timeout_seconds: float | None = Field(default=None, gt=0)

    @field_validator("hg", "pijul", "fossil", "svnadmin", "svn")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("executable name cannot be empty")
        return v


class YamlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads a single YAML file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data = _read_yaml(yaml_file) if yaml_file else {}

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._config_data


class RepoInitConfig(BaseSettings):
    """Root configuration object.

    Attributes:
        default_vcs: Kind initialized when the caller does not request one.
        tools: Executable names for the tool-backed systems.
        verbosity: Log level used by the CLI when no flag overrides it.
    """

    model_config = SettingsConfigDict(
        env_prefix="REPOINIT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    default_vcs: VcsKind = VcsKind.GIT
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @field_validator("default_vcs", mode="before")
    @classmethod
    def parse_default_vcs(cls, v: Any) -> Any:
        if isinstance(v, str):
            return VcsKind.parse(v)
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources.

        Priority (highest to lowest):
        1. Environment variables (REPOINIT_*)
        2. Init settings (an explicit ``--config`` file passed by load_config)
        3. Project YAML config (./repoinit.yaml)
        4. User YAML config (~/.config/repoinit/config.yaml)
        """
        return (
            env_settings,
            init_settings,
            YamlConfigSource(settings_cls, Path.cwd() / PROJECT_CONFIG_FILENAME),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


def _read_yaml(yaml_file: Path) -> dict[str, Any]:
    if not yaml_file.exists():
        return {}
    try:
        with open(yaml_file) as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {yaml_file}: {e}") from e
    if loaded is None:
        logger.warning("config_file_empty", path=str(yaml_file))
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(
            f"Config file {yaml_file} must contain a mapping",
            value=loaded,
        )
    return loaded


def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/repoinit/config.yaml
    """
    return Path.home() / ".config" / "repoinit" / "config.yaml"


def load_config(config_path: Path | None = None) -> RepoInitConfig:
    """Load configuration with hierarchy: defaults -> user -> project -> env.

    Args:
        config_path: Optional explicit config file. It takes precedence over
            the project and user files but not over environment variables.

    Returns:
        RepoInitConfig instance with merged configuration.

    Raises:
        ConfigError: If configuration is invalid or the explicit file is missing.
    """
    overrides: dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(
                f"Config file not found: {config_path}",
                value=str(config_path),
            )
        overrides = _read_yaml(config_path)

    try:
        return RepoInitConfig(**overrides)
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
