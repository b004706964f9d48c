"""Cache configuration.

ONLY cache configuration - the immutable settings a cache instance is
built with, their defaults and validation.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_CHECK_PERIOD = 30


class CacheConfig(BaseModel):
    """Main cache configuration.

    All fields are optional. When ``ttl_seconds`` is not given it defaults
    to twice ``check_period_seconds``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Seconds between expiry sweeps; 0 disables the sweeper and TTLs altogether
    check_period_seconds: float = Field(default=DEFAULT_CHECK_PERIOD, ge=0)

    # Default TTL for new entries; 0 means entries never expire
    ttl_seconds: float = Field(default=2 * DEFAULT_CHECK_PERIOD, ge=0)

    # Hard ceiling on distinct keys; 0 means unbounded
    max_keys: int = Field(default=0, ge=0)

    # Delete lapsed entries when no ``expired`` listener is registered
    delete_on_expire: bool = True

    @model_validator(mode="before")
    @classmethod
    def _derive_default_ttl(cls, data: Any) -> Any:
        """Fill in ``ttl_seconds`` from the check period when omitted."""
        if not isinstance(data, dict) or data.get("ttl_seconds") is not None:
            return data

        period = data.get("check_period_seconds", DEFAULT_CHECK_PERIOD)
        try:
            derived = 2 * float(period)
        except (TypeError, ValueError):
            # Leave the bad period for field validation to report
            return data
        return {**data, "ttl_seconds": derived}

    @property
    def sweeper_enabled(self) -> bool:
        return self.check_period_seconds > 0

    @property
    def is_bounded(self) -> bool:
        return self.max_keys > 0
