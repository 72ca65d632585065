"""Configuration management for the skill installer."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, PrivateAttr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError
from .logger import get_logger
from .paths import resolve_path

ENV_PREFIX = "OBSIDIAN_SKILL_"

logger = get_logger(__name__)


class InstallerConfig(BaseSettings):
    """Settings for where the bundle comes from and where it lands."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
    )

    bundle_dir: Path | None = Field(
        default=None,
        description="Directory holding skills/ and commands/ "
        "(defaults to the bundle shipped with the package)",
    )
    skill_name: str = Field(
        default="obsidian",
        description="Name of the skill directory and of the slash command file",
    )
    claude_dir_name: str = Field(
        default=".claude",
        description="Configuration directory created inside the target project",
    )

    _custom_config_file: Path | None = PrivateAttr(default=None)

    def __init__(self, config_file: Path | None = None, **kwargs: Any) -> None:
        if config_file is not None and config_file.exists():
            try:
                with open(config_file, encoding="utf-8") as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(config_file, str(e)) from e

            if not isinstance(config_data, dict):
                raise ConfigError(
                    config_file,
                    f"expected a mapping of settings, got {type(config_data).__name__}",
                )
            if not all(isinstance(key, str) for key in config_data):
                raise ConfigError(config_file, "setting names must be strings")

            # Precedence: kwargs, then environment, then the file
            env_keys = {key.upper() for key in os.environ}
            for key, value in config_data.items():
                if key in kwargs or f"{ENV_PREFIX}{key.upper()}" in env_keys:
                    continue
                if key == "bundle_dir" and value is not None:
                    # Relative paths in a config file are anchored at the file
                    value = resolve_path(value, config_file.parent)
                kwargs[key] = value
            logger.debug(f"Loaded configuration from {config_file}")

        try:
            super().__init__(**kwargs)
        except ValidationError as e:
            raise ConfigError(config_file, str(e)) from e

        self._custom_config_file = config_file

    @property
    def config_file_path(self) -> Path | None:
        return self._custom_config_file

    def skill_target(self, target_dir: Path) -> Path:
        """Destination of the skill tree inside ``target_dir``."""
        return target_dir / self.claude_dir_name / "skills" / self.skill_name

    def command_target(self, target_dir: Path) -> Path:
        """Directory receiving the slash command file inside ``target_dir``."""
        return target_dir / self.claude_dir_name / "commands"

    @property
    def command_filename(self) -> str:
        return f"{self.skill_name}.md"
