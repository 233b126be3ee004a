"""Parse nodes turning serialized payloads into typed values and models."""

from pykiota.serialization.form_parse_node import FormParseNode
from pykiota.serialization.form_parse_node_factory import FormParseNodeFactory
from pykiota.serialization.parse_node import NO_HOOKS, AssignmentHook, AssignmentHooks, ParseNode, ParseNodeFactory
from pykiota.serialization.period import ZERO_PERIOD, Period

__all__ = [
    "NO_HOOKS",
    "ZERO_PERIOD",
    "AssignmentHook",
    "AssignmentHooks",
    "FormParseNode",
    "FormParseNodeFactory",
    "ParseNode",
    "ParseNodeFactory",
    "Period",
]
