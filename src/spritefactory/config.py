"""Application configuration with pydantic-settings + TOML."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict, TomlConfigSettingsSource


def _default_config_dir() -> Path:
    return Path.home() / ".spritefactory"


class EditorSettings(BaseSettings):
    """Defaults for new sessions and the animation preview."""

    tile_width: int = Field(default=32, ge=0)
    tile_height: int = Field(default=32, ge=0)
    preview_ticks_per_frame: int = Field(default=10, gt=0)
    preview_zoom_options: list[int] = Field(default_factory=lambda: [1, 2, 4, 8])
    preview_max_size: int = Field(default=256, gt=0)
    tick_rate: float = Field(default=60.0, gt=0)
    document_suffix: str = ".sprites"

    @property
    def default_zoom(self) -> int:
        return self.preview_zoom_options[-1] if self.preview_zoom_options else 1


class AppConfig(BaseSettings):
    """Root application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SPRITEFACTORY_",
        env_nested_delimiter="__",
    )

    config_dir: Path = Field(default_factory=_default_config_dir)
    editor: EditorSettings = Field(default_factory=EditorSettings)

    @classmethod
    def settings_customise_sources(cls, settings_cls, **kwargs):  # type: ignore[override]
        toml_path = _default_config_dir() / "config.toml"
        sources = (
            kwargs.get("init_settings"),
            kwargs.get("env_settings"),
        )
        if toml_path.exists():
            sources = (*sources, TomlConfigSettingsSource(settings_cls, toml_file=toml_path))
        return (*sources, kwargs.get("dotenv_settings"), kwargs.get("file_secret_settings"))

    def ensure_dirs(self) -> None:
        """Create the config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)


def load_config() -> AppConfig:
    """Load application config, creating defaults if needed."""
    config = AppConfig()
    config.ensure_dirs()
    return config
