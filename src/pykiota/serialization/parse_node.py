"""Parse node contracts shared by every wire format."""

from __future__ import annotations

import dataclasses
import uuid
from collections.abc import Callable
from datetime import date, datetime, time
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

from pykiota.abstractions import EnumResolver, Parsable, ParsableFactory

if TYPE_CHECKING:
    from pykiota.serialization.period import Period

T = TypeVar("T")
TParsable = TypeVar("TParsable", bound=Parsable)

AssignmentHook = Callable[[Parsable], None]


@dataclasses.dataclass(frozen=True)
class AssignmentHooks:
    """Callbacks run around field assignment of every materialized object.

    A root node receives the hooks once; every child node it creates is
    built with the same instance so nested objects observe them too.
    """

    before: AssignmentHook | None = None
    after: AssignmentHook | None = None


NO_HOOKS = AssignmentHooks()


class ParseNode(Protocol):
    """A node of a deserialized payload."""

    @property
    def hooks(self) -> AssignmentHooks: ...

    def get_child_node(self, identifier: str) -> ParseNode | None: ...

    def get_str_value(self) -> str | None: ...

    def get_bool_value(self) -> bool | None: ...

    def get_byte_value(self) -> int | None: ...

    def get_short_value(self) -> int | None: ...

    def get_int_value(self) -> int | None: ...

    def get_long_value(self) -> int | None: ...

    def get_float_value(self) -> float | None: ...

    def get_double_value(self) -> float | None: ...

    def get_decimal_value(self) -> Decimal | None: ...

    def get_uuid_value(self) -> uuid.UUID | None: ...

    def get_datetime_value(self) -> datetime | None: ...

    def get_date_value(self) -> date | None: ...

    def get_time_value(self) -> time | None: ...

    def get_period_value(self) -> Period | None: ...

    def get_bytes_value(self) -> bytes | None: ...

    def get_enum_value(self, resolver: EnumResolver[Any]) -> Any | None: ...

    def get_enum_set_value(self, resolver: EnumResolver[Any]) -> set[Any] | None: ...

    def get_collection_of_enum_values(self, resolver: EnumResolver[Any]) -> list[Any] | None: ...

    def get_collection_of_primitive_values(self, primitive_type: type[T]) -> list[T] | None: ...

    def get_collection_of_object_values(self, factory: ParsableFactory[TParsable]) -> list[TParsable] | None: ...

    def get_object_value(self, factory: ParsableFactory[TParsable]) -> TParsable: ...


class ParseNodeFactory(Protocol):
    """Builds root parse nodes for one content type."""

    def get_valid_content_type(self) -> str: ...

    def get_root_parse_node(
        self,
        content_type: str,
        content: bytes,
        *,
        hooks: AssignmentHooks | None = None,
    ) -> ParseNode: ...
