"""Custom exception hierarchy for pykiota."""

from __future__ import annotations


class KiotaError(Exception):
    """Base exception for all pykiota errors."""


class KiotaConfigError(KiotaError):
    """Invalid or missing configuration."""


class KiotaUnsupportedOperationError(KiotaError, NotImplementedError):
    """The requested operation cannot be expressed in this wire format.

    Raised for collections of primitives or objects in form-encoded
    payloads: the format has no way to express repeated structured
    elements, so retrying is pointless.
    """


class KiotaContentTypeError(KiotaError, ValueError):
    """A parse node factory was handed a payload of a foreign content type."""

    def __init__(
        self,
        message: str,
        *,
        content_type: str = "",
        expected: str = "",
    ) -> None:
        self.content_type = content_type
        self.expected = expected
        super().__init__(message)
