from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class DuplicatePolicy(str, Enum):
    """Which catalog record wins when a fetch yields the same id more than once"""

    FIRST_SEEN = "first_seen"
    LAST_SEEN = "last_seen"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    CATALOG_URL: Optional[str] = None
    CATALOG_PATH: Optional[str] = None
    CATALOG_TIMEOUT_SECONDS: float = 10.0
    FAVORITES_DATABASE_URL: str = "sqlite+aiosqlite:///./data/favorites.db"
    DUPLICATE_POLICY: DuplicatePolicy = DuplicatePolicy.LAST_SEEN


class BrowsingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="BROWSE_", extra="ignore")

    search_debounce_ms: int = 300
    page_size: int = 10
    prefetch_distance: int = 3

    @property
    def search_debounce_seconds(self) -> float:
        return self.search_debounce_ms / 1000
