"""Parse node for ``application/x-www-form-urlencoded`` payloads.

A payload ``key1=value1&key2=value2`` becomes a table of raw field texts.
Nothing is URL-decoded while parsing; decoding happens when a typed
getter reads the value. Repeated keys are joined with a separator
(``","`` by default), so ``t=1&t=2`` reads back as ``"1,2"``.

The format cannot express repeated structured elements, so collections
of primitives or objects are rejected with
:class:`~pykiota.exceptions.KiotaUnsupportedOperationError`.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from types import MappingProxyType
from typing import Any, TypeVar
from urllib.parse import unquote_plus

from pykiota._constants import (
    BYTE_RANGE,
    DEFAULT_FORM_VALUE_SEPARATOR,
    INT_RANGE,
    LONG_RANGE,
    NULL_LITERAL,
    SHORT_RANGE,
)
from pykiota._redact import redact_for_log
from pykiota.abstractions import AdditionalDataHolder, EnumResolver, Parsable, ParsableFactory, TEnum
from pykiota.exceptions import KiotaUnsupportedOperationError
from pykiota.serialization import convert
from pykiota.serialization.parse_node import NO_HOOKS, AssignmentHook, AssignmentHooks
from pykiota.serialization.period import Period

_logger = logging.getLogger(__name__)

T = TypeVar("T")
TParsable = TypeVar("TParsable", bound=Parsable)


def _parse_fields(raw_value: str, separator: str) -> dict[str, str]:
    fields: dict[str, str] = {}
    for segment in raw_value.split("&"):
        key, has_value, value = segment.partition("=")
        if not has_value:
            if segment:
                _logger.debug("Dropping form segment without a value")
            continue
        key = key.strip()
        value = value.strip()
        if key in fields:
            fields[key] = f"{fields[key]}{separator}{value}"
        else:
            fields[key] = value
    return fields


class FormParseNode:
    """Parse node over one form-encoded text fragment.

    Parameters
    ----------
    raw_value : str
        The encoded text this node wraps.
    hooks : AssignmentHooks or None
        Callbacks run before and after field assignment of every object
        materialized from this node or any of its children.
    separator : str
        Separator joining the values of repeated keys.
    """

    def __init__(
        self,
        raw_value: str,
        *,
        hooks: AssignmentHooks | None = None,
        separator: str = DEFAULT_FORM_VALUE_SEPARATOR,
    ) -> None:
        if not isinstance(raw_value, str):
            raise ValueError("raw_value must be a string")
        self._raw_value = raw_value
        self._hooks = hooks or NO_HOOKS
        self._separator = separator
        self._fields = _parse_fields(raw_value, separator)
        if self._fields and _logger.isEnabledFor(logging.DEBUG):
            _logger.debug("Parsed form fields: %s", redact_for_log(self._fields))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fields={sorted(self._fields)!r})"

    @property
    def hooks(self) -> AssignmentHooks:
        return self._hooks

    @property
    def on_before_assign_field_values(self) -> AssignmentHook | None:
        return self._hooks.before

    @property
    def on_after_assign_field_values(self) -> AssignmentHook | None:
        return self._hooks.after

    @property
    def fields(self) -> Mapping[str, str]:
        """Read-only view of the raw field texts, keyed by trimmed name."""
        return MappingProxyType(self._fields)

    def _child(self, raw_value: str) -> FormParseNode:
        return FormParseNode(raw_value, hooks=self._hooks, separator=self._separator)

    def get_child_node(self, identifier: str) -> FormParseNode | None:
        """Return the node of field *identifier*, or ``None`` when absent."""
        if not isinstance(identifier, str):
            raise ValueError("identifier must be a string")
        raw = self._fields.get(identifier.strip())
        if raw is None:
            return None
        return self._child(raw)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def get_str_value(self) -> str | None:
        decoded = unquote_plus(self._raw_value)
        if decoded.lower() == NULL_LITERAL:
            return None
        return decoded

    def get_bool_value(self) -> bool | None:
        return convert.to_bool(self.get_str_value())

    def get_byte_value(self) -> int | None:
        return convert.to_int(self.get_str_value(), BYTE_RANGE)

    def get_short_value(self) -> int | None:
        return convert.to_int(self.get_str_value(), SHORT_RANGE)

    def get_int_value(self) -> int | None:
        return convert.to_int(self.get_str_value(), INT_RANGE)

    def get_long_value(self) -> int | None:
        return convert.to_int(self.get_str_value(), LONG_RANGE)

    def get_float_value(self) -> float | None:
        return convert.to_float(self.get_str_value())

    def get_double_value(self) -> float | None:
        return convert.to_double(self.get_str_value())

    def get_decimal_value(self) -> Decimal | None:
        return convert.to_decimal(self.get_str_value())

    def get_uuid_value(self) -> uuid.UUID | None:
        return convert.to_uuid(self.get_str_value())

    def get_datetime_value(self) -> datetime | None:
        return convert.to_datetime(self.get_str_value())

    def get_date_value(self) -> date | None:
        return convert.to_date(self.get_str_value())

    def get_time_value(self) -> time | None:
        return convert.to_time(self.get_str_value())

    def get_period_value(self) -> Period | None:
        return convert.to_period(self.get_str_value())

    def get_bytes_value(self) -> bytes | None:
        return convert.to_bytes(self.get_str_value())

    # ------------------------------------------------------------------
    # Enums
    # ------------------------------------------------------------------

    def _enum_labels(self) -> list[str] | None:
        raw = self.get_str_value()
        if not raw:
            return None
        return raw.split(self._separator)

    def get_enum_value(self, resolver: EnumResolver[TEnum]) -> TEnum | None:
        if resolver is None:
            raise ValueError("resolver cannot be None")
        raw = self.get_str_value()
        if not raw:
            return None
        return resolver(raw)

    def get_enum_set_value(self, resolver: EnumResolver[TEnum]) -> set[TEnum] | None:
        if resolver is None:
            raise ValueError("resolver cannot be None")
        labels = self._enum_labels()
        if labels is None:
            return None
        return {member for member in map(resolver, labels) if member is not None}

    def get_collection_of_enum_values(self, resolver: EnumResolver[TEnum]) -> list[TEnum] | None:
        if resolver is None:
            raise ValueError("resolver cannot be None")
        labels = self._enum_labels()
        if labels is None:
            return None
        return [member for member in map(resolver, labels) if member is not None]

    # ------------------------------------------------------------------
    # Collections and objects
    # ------------------------------------------------------------------

    def get_collection_of_primitive_values(self, primitive_type: type[T]) -> list[T] | None:
        raise KiotaUnsupportedOperationError("Collections of primitives are not supported with form encoding")

    def get_collection_of_object_values(self, factory: ParsableFactory[TParsable]) -> list[TParsable] | None:
        raise KiotaUnsupportedOperationError("Collections of objects are not supported with form encoding")

    def get_object_value(self, factory: ParsableFactory[TParsable]) -> TParsable:
        """Create an object through *factory* and assign its fields from this node."""
        if factory is None:
            raise ValueError("factory cannot be None")
        item = factory(self)
        self._assign_field_values(item, item.get_field_deserializers())
        return item

    def _assign_field_values(self, item: Parsable, field_deserializers: Mapping[str, Any]) -> None:
        if not self._fields:
            return
        if self._hooks.before is not None:
            self._hooks.before(item)

        additional_data: dict[str, Any] | None = None
        if isinstance(item, AdditionalDataHolder):
            additional_data = item.additional_data

        for field_name, field_value in self._fields.items():
            deserializer = field_deserializers.get(field_name)
            if deserializer is not None:
                deserializer(self._child(field_value))
            elif additional_data is not None:
                _logger.debug("Storing unmatched form field %r in additional data", field_name)
                additional_data[field_name] = field_value

        if self._hooks.after is not None:
            self._hooks.after(item)
