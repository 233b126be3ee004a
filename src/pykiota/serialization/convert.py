"""Tolerant text-to-value conversions.

Every helper takes decoded payload text (or ``None``) and returns the
parsed value, or ``None`` when the text does not parse. A malformed field
therefore degrades to "no value" instead of failing the whole payload.
"""

from __future__ import annotations

import base64
import logging
import math
import re
import struct
import uuid
from collections.abc import Callable
from datetime import UTC, date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import TypeVar

from pykiota.serialization.period import Period

_logger = logging.getLogger(__name__)

T = TypeVar("T")

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# float() and Decimal() also take digit underscores and "inf"/"infinity" in any case.
_JAVA_SPECIAL_FLOATS = frozenset({"NaN", "Infinity"})
_PYTHON_ONLY_SPECIALS = frozenset({"inf", "infinity", "nan", "snan"})

_TRUE_LITERALS = frozenset({"true", "1"})
_FALSE_LITERALS = frozenset({"false", "0"})


def _attempt(parser: Callable[[str], T], text: str | None) -> T | None:
    if text is None:
        return None
    try:
        return parser(text)
    except ValueError:
        _logger.debug("Could not parse %r with %s", text, getattr(parser, "__name__", parser))
        return None


def to_bool(text: str | None) -> bool | None:
    """Map ``true``/``1`` and ``false``/``0`` (any case); anything else is ``None``."""
    if text is None:
        return None
    normalized = text.lower()
    if normalized in _TRUE_LITERALS:
        return True
    if normalized in _FALSE_LITERALS:
        return False
    return None


def to_int(text: str | None, bounds: tuple[int, int]) -> int | None:
    """Parse a decimal integer that must fit the inclusive *bounds*."""
    if text is None or not _INTEGER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    low, high = bounds
    if value < low or value > high:
        return None
    return value


def _strict_float(text: str) -> float:
    """Parse like float() but without its Python-only spellings."""
    if "_" in text:
        raise ValueError("digit separators are not allowed")
    body = text.strip().lstrip("+-")
    if body.lower() in _PYTHON_ONLY_SPECIALS and body not in _JAVA_SPECIAL_FLOATS:
        raise ValueError(f"unsupported special value: {text!r}")
    return float(text)


def _single_precision(text: str) -> float:
    value = _strict_float(text)
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def to_float(text: str | None) -> float | None:
    """Parse a float and round it to single precision."""
    return _attempt(_single_precision, text)


def to_double(text: str | None) -> float | None:
    return _attempt(_strict_float, text)


def _finite_decimal(text: str) -> Decimal:
    if "_" in text:
        raise ValueError("digit separators are not allowed")
    try:
        value = Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(str(exc)) from exc
    if not value.is_finite():
        raise ValueError("decimal must be finite")
    return value


def to_decimal(text: str | None) -> Decimal | None:
    return _attempt(_finite_decimal, text)


def to_uuid(text: str | None) -> uuid.UUID | None:
    return _attempt(uuid.UUID, text)


def _aware_datetime(text: str) -> datetime:
    value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def to_datetime(text: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    return _attempt(_aware_datetime, text)


def to_date(text: str | None) -> date | None:
    return _attempt(date.fromisoformat, text)


def to_time(text: str | None) -> time | None:
    return _attempt(time.fromisoformat, text)


def to_period(text: str | None) -> Period | None:
    return _attempt(Period.parse, text)


def _standard_b64decode(text: str) -> bytes:
    # Padding is optional on input; binascii.Error subclasses ValueError.
    padded = text + "=" * (-len(text) % 4)
    return base64.b64decode(padded, validate=True)


def to_bytes(text: str | None) -> bytes | None:
    """Decode standard base64; empty text is ``None``."""
    if not text:
        return None
    return _attempt(_standard_b64decode, text)
