"""In-memory change-tracking store backing generated model properties.

Generated models keep their property values in a store instead of plain
attributes. The store remembers, per key, whether the value was written
after initialization completed, which lets a serializer emit only the
properties a user actually touched.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from typing import Any

from pykiota._constants import DEFAULT_SUBSCRIPTION_ID_PREFIX
from pykiota.config import KiotaConfig
from pykiota.store.entries import StoreEntry, Subscription, SubscriptionCallback

_logger = logging.getLogger(__name__)


def counter_id_generator(prefix: str = DEFAULT_SUBSCRIPTION_ID_PREFIX) -> Callable[[], str]:
    """Return a generator of ``"<prefix>-1"``, ``"<prefix>-2"``, ... ids."""
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


class InMemoryBackingStore:
    """Key/value store with per-entry dirty tracking and change observers.

    Not thread-safe: callers sharing a store across threads must
    synchronize access themselves.
    """

    def __init__(
        self,
        *,
        return_only_changed_values: bool = False,
        id_generator: Callable[[], str] | None = None,
    ) -> None:
        self._initialization_completed = True
        self._return_only_changed_values = return_only_changed_values
        self._id_generator = id_generator or counter_id_generator()
        self._entries: dict[str, StoreEntry] = {}
        self._subscriptions: dict[str, Subscription] = {}

    @classmethod
    def from_config(cls, config: KiotaConfig) -> InMemoryBackingStore:
        return cls(
            return_only_changed_values=config.return_only_changed_values,
            id_generator=counter_id_generator(config.subscription_id_prefix),
        )

    @property
    def initialization_completed(self) -> bool:
        return self._initialization_completed

    @initialization_completed.setter
    def initialization_completed(self, value: bool) -> None:
        """Set the flag and re-stamp every stored entry.

        Entries written while initialization was in progress become
        unchanged once it completes; flipping back marks them changed.
        """
        self._initialization_completed = value
        self._entries = {
            key: entry.model_copy(update={"changed": not value}) for key, entry in self._entries.items()
        }

    @property
    def return_only_changed_values(self) -> bool:
        return self._return_only_changed_values

    @return_only_changed_values.setter
    def return_only_changed_values(self, value: bool) -> None:
        self._return_only_changed_values = value

    def _is_visible(self, entry: StoreEntry) -> bool:
        return not self._return_only_changed_values or entry.changed

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under *key*.

        Missing keys, and unchanged keys while ``return_only_changed_values``
        is enabled, yield *default*. Pass a sentinel to tell them apart
        from a stored ``None``.
        """
        _require_key(key)
        entry = self._entries.get(key)
        if entry is None or not self._is_visible(entry):
            return default
        return entry.value

    def set(self, key: str, value: Any) -> None:
        """Store *value* and notify every subscriber with ``(key, old, new)``."""
        _require_key(key)
        previous = self._entries.get(key)
        self._entries[key] = StoreEntry(key=key, value=value, changed=self._initialization_completed)
        old_value = previous.value if previous is not None else None
        # Snapshot: callbacks may subscribe, unsubscribe or call set() again.
        for subscription in list(self._subscriptions.values()):
            subscription.callback(key, old_value, value)

    def is_changed(self, key: str) -> bool:
        """Return whether *key* holds a value written after initialization."""
        entry = self._entries.get(key)
        return entry is not None and entry.changed

    def clear(self) -> None:
        """Drop every entry. Subscriptions are kept."""
        self._entries.clear()

    def enumerate(self) -> dict[str, Any]:
        """Return every visible entry whose value is not ``None``."""
        return {
            key: entry.value
            for key, entry in self._entries.items()
            if self._is_visible(entry) and entry.value is not None
        }

    def enumerate_keys_for_values_changed_to_null(self) -> list[str]:
        """Return the keys explicitly set to ``None`` after initialization."""
        return [key for key, entry in self._entries.items() if entry.value is None and entry.changed]

    def subscribe(self, callback: SubscriptionCallback, subscription_id: str | None = None) -> str:
        """Register *callback* and return its subscription id.

        Re-using an existing id replaces the callback registered under it.
        """
        if callback is None:
            raise ValueError("callback cannot be None")
        if subscription_id is None:
            subscription_id = self._id_generator()
        elif not subscription_id:
            raise ValueError("subscription id must be non-empty")
        self._subscriptions[subscription_id] = Subscription(id=subscription_id, callback=callback)
        _logger.debug("Registered store subscription %s", subscription_id)
        return subscription_id

    def unsubscribe(self, subscription_id: str) -> None:
        if self._subscriptions.pop(subscription_id, None) is not None:
            _logger.debug("Removed store subscription %s", subscription_id)


class InMemoryBackingStoreFactory:
    """Hands out fresh stores configured from a :class:`KiotaConfig`."""

    def __init__(self, config: KiotaConfig | None = None) -> None:
        self._config = config or KiotaConfig()

    def create_backing_store(self) -> InMemoryBackingStore:
        return InMemoryBackingStore.from_config(self._config)


def _require_key(key: str) -> None:
    if not isinstance(key, str) or not key:
        raise ValueError("key must be a non-empty string")
