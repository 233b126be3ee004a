"""Constants shared across pykiota."""

from __future__ import annotations

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Literal payload text that stands for "no value".
NULL_LITERAL = "null"

DEFAULT_FORM_VALUE_SEPARATOR = ","
DEFAULT_SUBSCRIPTION_ID_PREFIX = "subscription"

# Signed integer ranges, keyed by the width the getter advertises.
BYTE_RANGE = (-(2**7), 2**7 - 1)
SHORT_RANGE = (-(2**15), 2**15 - 1)
INT_RANGE = (-(2**31), 2**31 - 1)
LONG_RANGE = (-(2**63), 2**63 - 1)
