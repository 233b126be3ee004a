"""Change-tracking backing store for generated model properties."""

from pykiota.store.backing_store import InMemoryBackingStore, InMemoryBackingStoreFactory, counter_id_generator
from pykiota.store.entries import StoreEntry, Subscription, SubscriptionCallback
from pykiota.store.parse_node_factory import (
    BACKING_STORE_HOOKS,
    BackingStoreParseNodeFactory,
    with_backing_store_hooks,
)

__all__ = [
    "BACKING_STORE_HOOKS",
    "BackingStoreParseNodeFactory",
    "InMemoryBackingStore",
    "InMemoryBackingStoreFactory",
    "StoreEntry",
    "Subscription",
    "SubscriptionCallback",
    "counter_id_generator",
    "with_backing_store_hooks",
]
