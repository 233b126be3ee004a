from __future__ import annotations

from typing import Any

from pykiota.abstractions import AdditionalDataHolder, BackedModel, KiotaEnum, Parsable
from pykiota.store.backing_store import InMemoryBackingStore


class Color(KiotaEnum):
    RED = "red"
    DARK_BLUE = "darkBlue"


def test_for_value_resolves_wire_label() -> None:
    assert Color.for_value("darkBlue") is Color.DARK_BLUE


def test_for_value_unknown_label_is_none() -> None:
    assert Color.for_value("green") is None
    assert Color.for_value("DARK_BLUE") is None


def test_enum_members_are_strings() -> None:
    assert Color.RED == "red"


def test_protocols_checked_structurally() -> None:
    class Model:
        def __init__(self) -> None:
            self.additional_data: dict[str, Any] = {}
            self.backing_store = InMemoryBackingStore()

        def get_field_deserializers(self) -> dict[str, Any]:
            return {}

    class Bare:
        pass

    assert isinstance(Model(), Parsable)
    assert isinstance(Model(), AdditionalDataHolder)
    assert isinstance(Model(), BackedModel)
    assert not isinstance(Bare(), Parsable)
    assert not isinstance(Bare(), AdditionalDataHolder)
    assert not isinstance(Bare(), BackedModel)
