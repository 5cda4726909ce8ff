"""Library settings for mhash."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Settings for multihash validation.

    Values are loaded from ``MULTIHASH_*`` environment variables.
    """

    max_digest_length: Optional[int] = Field(
        default=None,
        ge=1,
        description="Largest accepted digest in bytes. None means unbounded.",
    )

    model_config = SettingsConfigDict(
        env_prefix="MULTIHASH_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use."""
    settings = Settings()
    logger.debug("Loaded multihash settings: %s", settings)
    return settings


def resolve_max_length(max_length: Optional[int] = None) -> Optional[int]:
    """Return ``max_length`` if given, else the configured policy."""
    if max_length is not None:
        return max_length
    return get_settings().max_digest_length
