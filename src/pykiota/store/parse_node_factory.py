"""Parse node factory that keeps deserialized values out of the dirty set.

Objects materialized through :class:`BackingStoreParseNodeFactory` have
their backing store put back into "initializing" mode while the payload
is assigned, so the assigned values are recorded as unchanged. Only
assignments made by the caller afterwards show up as changes.
"""

from __future__ import annotations

from pykiota.abstractions import BackedModel, Parsable
from pykiota.serialization.parse_node import AssignmentHook, AssignmentHooks, ParseNode, ParseNodeFactory


def _begin_initialization(item: Parsable) -> None:
    if isinstance(item, BackedModel) and item.backing_store is not None:
        item.backing_store.initialization_completed = False


def _complete_initialization(item: Parsable) -> None:
    if isinstance(item, BackedModel) and item.backing_store is not None:
        item.backing_store.initialization_completed = True


BACKING_STORE_HOOKS = AssignmentHooks(before=_begin_initialization, after=_complete_initialization)


def _chain(first: AssignmentHook | None, second: AssignmentHook | None) -> AssignmentHook | None:
    if first is None or second is None:
        return first or second

    def _run_both(item: Parsable) -> None:
        first(item)
        second(item)

    return _run_both


def with_backing_store_hooks(hooks: AssignmentHooks | None = None) -> AssignmentHooks:
    """Wrap *hooks* so the store hooks run outermost around them."""
    if hooks is None:
        return BACKING_STORE_HOOKS
    return AssignmentHooks(
        before=_chain(BACKING_STORE_HOOKS.before, hooks.before),
        after=_chain(hooks.after, BACKING_STORE_HOOKS.after),
    )


class BackingStoreParseNodeFactory:
    """Wraps a concrete factory and installs :data:`BACKING_STORE_HOOKS`."""

    def __init__(self, concrete: ParseNodeFactory) -> None:
        if concrete is None:
            raise ValueError("concrete factory cannot be None")
        self._concrete = concrete

    def get_valid_content_type(self) -> str:
        return self._concrete.get_valid_content_type()

    def get_root_parse_node(
        self,
        content_type: str,
        content: bytes,
        *,
        hooks: AssignmentHooks | None = None,
    ) -> ParseNode:
        return self._concrete.get_root_parse_node(content_type, content, hooks=with_backing_store_hooks(hooks))
