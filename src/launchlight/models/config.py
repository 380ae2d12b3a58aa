"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from launchlight.persistence import PydanticPersistence

DEFAULT_CONFIG_DIR = Path.home() / ".launchlight"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    palettes_dir: Path = Field(
        default_factory=lambda: DEFAULT_CONFIG_DIR / "palettes",
        description="Directory of user palette files (JSON or YAML)",
    )
    default_palette: str = Field(
        default="launchpad",
        description="Palette used when a command does not name one",
    )
    default_device: str = Field(
        default="Launchpad Pro MK3",
        description="Virtual device shown by default",
    )

    @field_serializer("palettes_dir")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.launchlight/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_DIR / "config.json"

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_DIR / "config.json"

        PydanticPersistence.save_json(self, path)
