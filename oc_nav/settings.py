from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the navigator.

    Values are loaded from environment variables and `.env`.

    Notes:
    - OC_NAV_BINARY can point at `kubectl` or a wrapper script; the menu
      commands use it as their program name.
    - Logs go to a file because the TUI owns the terminal.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Wrapped CLI
    OC_NAV_BINARY: str = Field(default="oc")

    # Status bar
    OC_NAV_FLASH_SECONDS: float = Field(default=2.0, ge=0)

    # Diagnostic logging
    OC_NAV_LOG_ENABLED: bool = Field(default=True)
    OC_NAV_LOG_DIR: Path = Field(default=Path("~/.oc_nav/logs"))
    OC_NAV_LOG_LEVEL: str = Field(default="INFO")
    # Timed rotation retention count (days).
    OC_NAV_LOG_BACKUP_COUNT: int = Field(default=7, ge=0)


def load_settings() -> Settings:
    s = Settings()
    s.OC_NAV_LOG_DIR = s.OC_NAV_LOG_DIR.expanduser()
    return s
