"""
Configuration management for DeskDrop.

Uses pydantic-settings for type-safe configuration with environment variable support.
"""

from enum import Enum
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TransferMode(str, Enum):
    """How a dropped item reaches its destination."""
    COPY = "copy"
    MOVE = "move"
    SHORTCUT = "shortcut"


class ShortcutBackendName(str, Enum):
    """Shortcut formats the factory can write."""
    AUTO = "auto"
    SHELL_LINK = "shell_link"    # Windows .lnk via WScript.Shell
    DESKTOP = "desktop"          # freedesktop .desktop Type=Link
    URL = "url"                  # [InternetShortcut] plain-text redirect


class LogFormat(str, Enum):
    """Renderer used for structured log output."""
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DESKDROP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # -------------------------------------------------------------------------
    # File Operations
    # -------------------------------------------------------------------------
    default_overwrite: bool = Field(
        default=True,
        description="Replace existing destination entries unless a caller opts out"
    )

    # -------------------------------------------------------------------------
    # Shortcuts
    # -------------------------------------------------------------------------
    shortcut_backend: ShortcutBackendName = Field(
        default=ShortcutBackendName.AUTO,
        description="Shortcut format to write (auto picks one per platform)"
    )
    internet_shortcut_extension: str = Field(
        default=".url",
        description="Extension of plain-text redirect files that are copied verbatim"
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: LogFormat = Field(default=LogFormat.CONSOLE, description="Log renderer")
    log_file: Optional[str] = Field(default=None, description="Log file path (optional)")

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def internet_shortcut_suffix(self) -> str:
        """Lowercase extension with a leading dot."""
        ext = self.internet_shortcut_extension.strip().lower()
        if ext and not ext.startswith("."):
            ext = "." + ext
        return ext


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the current settings instance."""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
