"""Records kept by the in-memory backing store."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

SubscriptionCallback = Callable[[str, Any, Any], None]
"""Observer invoked as ``callback(key, previous_value, new_value)``."""


class StoreEntry(BaseModel):
    """One key of a backing store together with its dirty flag."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: Any = None
    changed: bool = Field(
        default=False,
        description="Whether the value was written after initialization completed.",
    )

    @field_validator("key")
    @classmethod
    def _require_key(cls, value: str) -> str:
        if not value:
            raise ValueError("key must be non-empty")
        return value


class Subscription(BaseModel):
    """A registered store observer."""

    model_config = ConfigDict(frozen=True)

    id: str
    callback: SubscriptionCallback

    @field_validator("id")
    @classmethod
    def _require_id(cls, value: str) -> str:
        if not value:
            raise ValueError("subscription id must be non-empty")
        return value
