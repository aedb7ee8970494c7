"""
Configuration management for fieldmask.

Loads and validates configuration from fieldmask.toml files using Pydantic.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fieldmask.i18n import Translator

CONFIG_FILENAME = "fieldmask.toml"


class MessagesConfig(BaseSettings):
    """Localized message configuration."""

    model_config = SettingsConfigDict(env_prefix="FIELDMASK_MESSAGES_")

    language: str = Field(default="en", description="Language table to read from the catalog")
    catalog: Optional[str] = Field(
        default=None, description="Path to a TOML translation catalog (optional)"
    )


class RenderConfig(BaseSettings):
    """Editor rendering configuration."""

    model_config = SettingsConfigDict(env_prefix="FIELDMASK_RENDER_")

    show_hints: bool = Field(
        default=True, description="Append the format mask hint after the input boxes"
    )
    field_prefix: str = Field(default="", description="Prefix for html element names")


class Config(BaseSettings):
    """Main configuration for fieldmask."""

    model_config = SettingsConfigDict(env_prefix="FIELDMASK_")

    messages: MessagesConfig = Field(default_factory=MessagesConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    @classmethod
    def from_toml(cls, path: Path | str) -> Config:
        """
        Load configuration from TOML file.

        Args:
            path: Path to fieldmask.toml file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        config = cls(**data)
        # Relative catalog paths are resolved against the config file
        if config.messages.catalog and not Path(config.messages.catalog).is_absolute():
            config.messages.catalog = str(config_path.parent / config.messages.catalog)
        return config

    @classmethod
    def find_and_load(cls, start_dir: Optional[Path] = None) -> Config:
        """
        Find and load configuration from fieldmask.toml.

        Searches for fieldmask.toml starting from start_dir and walking up
        parent directories until found or reaching filesystem root.

        Args:
            start_dir: Directory to start search (defaults to current directory)

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If no config file found
        """
        if start_dir is None:
            start_dir = Path.cwd()

        current = Path(start_dir).resolve()

        while True:
            config_path = current / CONFIG_FILENAME
            if config_path.exists():
                return cls.from_toml(config_path)

            parent = current.parent
            if parent == current:
                break
            current = parent

        raise FileNotFoundError(
            f"No {CONFIG_FILENAME} found in {start_dir} or parent directories."
        )

    def to_toml(self, path: Path | str) -> None:
        """
        Write configuration to TOML file.

        Args:
            path: Path to write fieldmask.toml
        """
        config_path = Path(path)

        catalog_line = (
            f'catalog = "{self.messages.catalog}"\n' if self.messages.catalog else ""
        )
        toml_content = f"""# fieldmask configuration

[messages]
language = "{self.messages.language}"
{catalog_line}
[render]
show_hints = {str(self.render.show_hints).lower()}
field_prefix = "{self.render.field_prefix}"
"""

        config_path.write_text(toml_content)

    def make_translator(self) -> Translator:
        """Build the translator described by the messages section."""
        if self.messages.catalog:
            return Translator.from_toml(self.messages.catalog, self.messages.language)
        return Translator(language=self.messages.language)


# Default configuration instance
DEFAULT_CONFIG = Config()
