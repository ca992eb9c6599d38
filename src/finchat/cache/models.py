"""Data models for the snapshot cache.

These models define cache keys and entries independent of the storage
backend used.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CacheKey(BaseModel):
    """Typed cache key.

    Embedding a data-version token in the key invalidates entries
    automatically when the underlying entity changes, without eviction.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(description="Logical kind of cached computation")
    entity_id: str = Field(description="Identifier of the entity the value belongs to")
    version: str = Field(description="Data-version token of the entity")
    params: tuple[str, ...] = Field(
        default=(),
        description="Extra qualifiers of the computation (e.g. a period key)"
    )

    def __str__(self) -> str:
        parts = [self.namespace, self.entity_id, self.version, *self.params]
        return ":".join(parts)


class CacheEntry(BaseModel):
    """A cached value with its expiry time."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: CacheKey
    value: Any
    expires_at: float = Field(description="Clock reading after which the entry is stale")

    def is_live(self, now: float) -> bool:
        """Check whether the entry may still be served at ``now``."""
        return now < self.expires_at
