"""pykiota - change-tracking backing store and form parse node for generated API models."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pykiota")
except PackageNotFoundError:
    __version__ = "0+local"
from pykiota.abstractions import (
    AdditionalDataHolder,
    BackedModel,
    EnumResolver,
    FieldDeserializer,
    KiotaEnum,
    Parsable,
    ParsableFactory,
)
from pykiota.config import KiotaConfig
from pykiota.exceptions import (
    KiotaConfigError,
    KiotaContentTypeError,
    KiotaError,
    KiotaUnsupportedOperationError,
)
from pykiota.serialization import (
    AssignmentHooks,
    FormParseNode,
    FormParseNodeFactory,
    ParseNode,
    ParseNodeFactory,
    Period,
)
from pykiota.store import (
    BackingStoreParseNodeFactory,
    InMemoryBackingStore,
    InMemoryBackingStoreFactory,
)

__all__ = [
    "__version__",
    "AdditionalDataHolder",
    "AssignmentHooks",
    "BackedModel",
    "BackingStoreParseNodeFactory",
    "EnumResolver",
    "FieldDeserializer",
    "FormParseNode",
    "FormParseNodeFactory",
    "InMemoryBackingStore",
    "InMemoryBackingStoreFactory",
    "KiotaConfig",
    "KiotaConfigError",
    "KiotaContentTypeError",
    "KiotaEnum",
    "KiotaError",
    "KiotaUnsupportedOperationError",
    "Parsable",
    "ParsableFactory",
    "ParseNode",
    "ParseNodeFactory",
    "Period",
]
