"""
Central configuration for merkletree.

Settings are read from environment variables using Pydantic BaseSettings.
None of them affect digests, paths or proofs; the hash algorithm and the
leaf/node prefixes are constants in `merkletree.core.hashing`. Unrecognized
values fall back to the defaults, so a bad environment never stops a tree
from being built.

Usage:

    from merkletree.core.settings import get_settings

    settings = get_settings()
    if settings.cache_enabled:
        ...
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_TRUE_VALUES = ("1", "true", "yes", "on")


class MerkleTreeSettings(BaseSettings):
    """
    Root configuration object for merkletree.

    Environment:
      - MERKLETREE_CACHE_ENABLED
      - MERKLETREE_LOG_LEVEL
    """

    model_config = SettingsConfigDict(env_prefix="MERKLETREE_")

    cache_enabled: bool = Field(
        default=False,
        description="Memoize sub-range digests per tree by default.",
    )
    log_level: str = Field(
        default=logging.getLevelName(logging.WARNING),
        description="Level for the 'merkletree' logger (DEBUG/INFO/WARNING/ERROR/CRITICAL).",
    )

    @field_validator("cache_enabled", mode="before")
    @classmethod
    def _parse_cache_enabled(cls, v) -> bool:
        if isinstance(v, str):
            return v.strip().lower() in _TRUE_VALUES
        return bool(v)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        v = (v or "WARNING").strip().upper()
        if v == "WARN":
            v = "WARNING"
        if v not in _LOG_LEVELS:
            return "WARNING"
        return v


@lru_cache(maxsize=1)
def get_settings() -> MerkleTreeSettings:
    """
    Cached accessor for MerkleTreeSettings.

    Call `get_settings.cache_clear()` after changing the environment.
    """
    return MerkleTreeSettings()
