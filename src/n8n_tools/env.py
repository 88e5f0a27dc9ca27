"""Environment configuration for n8n-tools.

Uses pydantic-settings for type-safe configuration with custom directory-tree
search for .env files. Searches from the current directory up to home.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from n8n_tools.exceptions import ConfigurationError


class N8nSettings(BaseSettings):
    """n8n connection settings.

    Loaded from N8N_* environment variables. The .env file is found by
    searching up the directory tree.
    """

    model_config = SettingsConfigDict(
        env_prefix="N8N_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Base URL of the n8n REST API, e.g. https://n8n.example.com/api/v1
    api_url: str | None = None

    # Seconds; None keeps the HTTP client's default
    request_timeout: float | None = None

    @property
    def n8n_api_url(self) -> str:
        """Return the configured API URL, raising if it is not set."""
        if not self.api_url:
            raise ConfigurationError("N8N_API_URL")
        return self.api_url


def find_dotenv(start_path: Path | None = None) -> Path | None:
    """Find .env file by searching up the directory tree.

    Searches from start_path (or cwd) up to home directory.
    Returns the first .env file found, or None if not found.
    """
    current = start_path or Path.cwd()
    home = Path.home()

    while current >= home:
        candidate = current / ".env"
        if candidate.exists():
            return candidate
        if current == current.parent:
            break
        current = current.parent

    return None


@lru_cache(maxsize=1)
def get_env_config() -> N8nSettings:
    """Get cached N8nSettings instance.

    Finds .env by searching up directory tree, then loads settings.
    Cached to avoid repeated file I/O.
    """
    env_file = find_dotenv()
    if env_file:
        return N8nSettings(_env_file=env_file)
    return N8nSettings()


def clear_env_config_cache() -> None:
    """Clear the settings cache. Useful for testing."""
    get_env_config.cache_clear()
