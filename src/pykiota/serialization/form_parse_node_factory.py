"""Root parse node factory for form-encoded response bodies."""

from __future__ import annotations

from pykiota._constants import FORM_CONTENT_TYPE
from pykiota.config import KiotaConfig
from pykiota.exceptions import KiotaContentTypeError
from pykiota.serialization.form_parse_node import FormParseNode
from pykiota.serialization.parse_node import AssignmentHooks


def media_type(content_type: str) -> str:
    """Return the bare, lower-cased media type of a ``Content-Type`` value."""
    return content_type.split(";", 1)[0].strip().lower()


class FormParseNodeFactory:
    """Builds :class:`FormParseNode` roots from raw response bodies."""

    def __init__(self, config: KiotaConfig | None = None) -> None:
        self._config = config or KiotaConfig()

    def get_valid_content_type(self) -> str:
        return FORM_CONTENT_TYPE

    def get_root_parse_node(
        self,
        content_type: str,
        content: bytes,
        *,
        hooks: AssignmentHooks | None = None,
    ) -> FormParseNode:
        """Decode *content* as UTF-8 and wrap it in a root parse node.

        Raises
        ------
        ValueError
            If *content_type* or *content* is empty.
        KiotaContentTypeError
            If *content_type* is not ``application/x-www-form-urlencoded``.
        """
        if not content_type:
            raise ValueError("content_type cannot be empty")
        valid = self.get_valid_content_type()
        if media_type(content_type) != valid:
            raise KiotaContentTypeError(
                f"expected a {valid} content type, got {content_type!r}",
                content_type=content_type,
                expected=valid,
            )
        if not content:
            raise ValueError("content cannot be empty")
        return FormParseNode(
            content.decode("utf-8"),
            hooks=hooks,
            separator=self._config.form_value_separator,
        )
