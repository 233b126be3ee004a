"""Capability contracts consumed from generated model classes.

Generated models never inherit from a pykiota base class. They satisfy
these protocols structurally:

* :class:`Parsable` exposes the field-deserializer table.
* :class:`AdditionalDataHolder` exposes a bag for unknown fields.
* :class:`BackedModel` stores its properties in a backing store.

Factories and enum resolvers are plain callables. String enums generated
for an API inherit from :class:`KiotaEnum`, whose :meth:`KiotaEnum.for_value`
is the resolver parse nodes expect.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from pykiota.serialization.parse_node import ParseNode
    from pykiota.store.backing_store import InMemoryBackingStore

T = TypeVar("T")
TEnum = TypeVar("TEnum", bound=enum.Enum)
TKiotaEnum = TypeVar("TKiotaEnum", bound="KiotaEnum")

FieldDeserializer = Callable[["ParseNode"], None]
"""Handler that consumes a child parse node and assigns one property."""

ParsableFactory = Callable[["ParseNode"], T]
"""Creates a bare instance, optionally inspecting a discriminator via the node."""

EnumResolver = Callable[[str], TEnum | None]
"""Resolves one raw label to an enum member, or ``None`` when unknown."""


@runtime_checkable
class Parsable(Protocol):
    """A model that can be populated from a parse node."""

    def get_field_deserializers(self) -> dict[str, FieldDeserializer]: ...


@runtime_checkable
class AdditionalDataHolder(Protocol):
    """A model that keeps fields no deserializer claimed."""

    additional_data: dict[str, Any]


@runtime_checkable
class BackedModel(Protocol):
    """A model whose properties live in a backing store."""

    backing_store: InMemoryBackingStore


class KiotaEnum(enum.StrEnum):
    """Base for string enums of generated models.

    Members are looked up by their wire label. Labels without a member
    resolve to ``None`` rather than raising ``ValueError``.
    """

    @classmethod
    def for_value(cls: type[TKiotaEnum], raw: str) -> TKiotaEnum | None:
        for member in cls:
            if member.value == raw:
                return member
        return None
