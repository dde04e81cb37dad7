"""Configuration management for universal-tagger."""

import os
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from universal_tagger.exceptions import ConfigError
from universal_tagger.language import Language

CONFIG_ENV_VAR = "UNIVERSAL_TAGGER_CONFIG"


class DetectionConfig(BaseModel):
    """Configuration for language detection."""

    languages: List[Language] = Field(
        default_factory=lambda: list(Language),
        description="Languages the detector may choose from (ISO 639-3 codes)",
    )
    minimum_relative_distance: float = Field(
        default=0.0,
        ge=0.0,
        lt=0.99,
        description="Below this confidence gap detection returns no language",
    )
    low_accuracy_mode: bool = False

    @field_validator("languages", mode="before")
    @classmethod
    def parse_languages(cls, v):
        """Accept any spelling Language.parse understands."""
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, (list, tuple)):
            return v
        return [Language.parse(item) if isinstance(item, str) else item for item in v]

    @field_validator("languages")
    @classmethod
    def at_least_two(cls, v: List[Language]) -> List[Language]:
        """Deduplicate and require two candidates."""
        unique = list(dict.fromkeys(v))
        if len(unique) < 2:
            raise ValueError("at least two languages must be enabled for detection")
        return unique


class StopWordsConfig(BaseModel):
    """Configuration for stop-word lookup."""

    data_dir: Optional[Path] = Field(
        default=None,
        description="Directory of prebuilt <code>.trie files (see build-stop-words)",
    )

    @field_validator("data_dir", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v


class Config(BaseModel):
    """Main configuration for universal-tagger."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    stop_words: StopWordsConfig = Field(default_factory=StopWordsConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """
        Load configuration from a YAML file.

        Raises:
            ConfigError: If the file is missing, unparsable or invalid
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError(f"cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML in {path}: {e}") from e

        try:
            return cls(**data)
        except (TypeError, ValidationError) as e:
            raise ConfigError(f"invalid configuration in {path}: {e}") from e

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)


def get_default_config() -> Config:
    """Get default configuration: every language enabled, no prebuilt stop words."""
    return Config()


def load_config(config_path: Optional[str | Path] = None) -> Config:
    """
    Load configuration.

    Args:
        config_path: Path to a YAML file. If None, $UNIVERSAL_TAGGER_CONFIG
            is used when set, otherwise the defaults.

    Returns:
        Config object

    Raises:
        ConfigError: If the config file is unreadable or invalid
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_ENV_VAR)
        if not config_path:
            return get_default_config()

    return Config.from_yaml(config_path)
