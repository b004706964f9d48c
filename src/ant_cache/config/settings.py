"""Environment-based cache settings.

Loads cache configuration from ``ANT_CACHE_*`` environment variables (or
a ``.env`` file) for applications that configure the cache externally.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .cache_config import DEFAULT_CHECK_PERIOD, CacheConfig


class CacheSettings(BaseSettings):
    """Cache settings read from the environment.

    Variables: ``ANT_CACHE_CHECK_PERIOD_SECONDS``, ``ANT_CACHE_TTL_SECONDS``,
    ``ANT_CACHE_MAX_KEYS``, ``ANT_CACHE_DELETE_ON_EXPIRE``.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANT_CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    check_period_seconds: float = Field(default=DEFAULT_CHECK_PERIOD, ge=0)
    ttl_seconds: Optional[float] = Field(default=None, ge=0)
    max_keys: int = Field(default=0, ge=0)
    delete_on_expire: bool = True

    def to_config(self) -> CacheConfig:
        """Build the immutable cache configuration."""
        return CacheConfig(**self.model_dump(exclude_none=True))
