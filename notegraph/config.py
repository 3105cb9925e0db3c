import sys

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="NOTEGRAPH_")

    # Vault layout
    note_extension: str = ".md"
    ignored_directories: list[str] = ["node_modules"]  # dot-directories are always skipped
    default_vault_name: str = "Untitled"
    watch_enabled: bool = False

    # Search settings
    snippet_chars: int = 160

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Send loguru output to stderr at the configured level."""
    logger.configure(handlers=[{"sink": sys.stderr, "level": level or settings.log_level}])
