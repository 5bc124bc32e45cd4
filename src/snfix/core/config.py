"""Configuration management for snfix."""

from pathlib import Path
import json

from pydantic import BaseModel, Field

from snfix.analysis.matcher_config import MatcherConfig, TierThreshold

__all__ = ["Config", "MatcherConfig", "TierThreshold", "load_config"]


class Config(BaseModel):
    """Main configuration for snfix."""

    matcher: MatcherConfig = Field(default_factory=MatcherConfig)
    dictionary_path: Path | None = Field(
        default=None, description="Alternative API dictionary (JSON)"
    )

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a JSON file.

        A relative dictionary_path is resolved against the directory of the
        config file.
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            data = json.load(f)

        config = cls(**data)
        if config.dictionary_path is not None and not config.dictionary_path.is_absolute():
            config.dictionary_path = config_path.parent / config.dictionary_path
        return config

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a JSON file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)

    @classmethod
    def get_default(cls) -> "Config":
        """Get default configuration."""
        return cls()


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or return default.

    Args:
        config_path: Path to configuration file. If None, default locations are
            searched and the default config is returned when none exists.

    Returns:
        Config object
    """
    if config_path is None:
        default_locations = [
            Path.home() / ".config" / "snfix" / "config.json",
            Path.cwd() / "snfix.json",
        ]

        for location in default_locations:
            if location.exists():
                return Config.load_from_file(location)

        return Config.get_default()

    return Config.load_from_file(config_path)
