"""Helpers for safe debug logging.

Form-encoded bodies routinely carry credentials (login forms, OAuth token
requests). The parse node passes its field table through
:func:`redact_for_log` before emitting DEBUG records about it.
"""

from __future__ import annotations

from collections.abc import Mapping

_SENSITIVE_FIELD_NAMES: frozenset[str] = frozenset(
    {
        "password",
        "passwd",
        "secret",
        "client_secret",
        "token",
        "access_token",
        "refresh_token",
        "id_token",
        "assertion",
        "code",
        "authorization",
        "cookie",
    }
)


def is_sensitive_field(name: str) -> bool:
    """Return ``True`` when a form field name looks like it carries a secret."""
    return name.strip().lower() in _SENSITIVE_FIELD_NAMES


def redact_for_log(fields: Mapping[str, str], *, max_string: int = 256) -> dict[str, str]:
    """Return a copy of a form field table suitable for debug logs.

    Sensitive values are replaced by ``<redacted>``; long values are cut at
    *max_string* characters.
    """
    redacted: dict[str, str] = {}
    for name, value in fields.items():
        if is_sensitive_field(name):
            redacted[name] = "<redacted>"
        elif len(value) > max_string:
            redacted[name] = f"{value[:max_string]}…<truncated>"
        else:
            redacted[name] = value
    return redacted
