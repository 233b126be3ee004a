from __future__ import annotations

import pytest

from pykiota.config import KiotaConfig
from pykiota.exceptions import KiotaConfigError

_ENV_KEYS = ("KIOTA_RETURN_ONLY_CHANGED_VALUES", "KIOTA_FORM_VALUE_SEPARATOR", "KIOTA_SUBSCRIPTION_ID_PREFIX")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = KiotaConfig()
    assert config.return_only_changed_values is False
    assert config.form_value_separator == ","
    assert config.subscription_id_prefix == "subscription"


def test_from_env_without_variables_matches_defaults() -> None:
    assert KiotaConfig.from_env() == KiotaConfig()


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KIOTA_RETURN_ONLY_CHANGED_VALUES", "yes")
    monkeypatch.setenv("KIOTA_FORM_VALUE_SEPARATOR", ";")
    monkeypatch.setenv("KIOTA_SUBSCRIPTION_ID_PREFIX", "obs")

    config = KiotaConfig.from_env()

    assert config.return_only_changed_values is True
    assert config.form_value_separator == ";"
    assert config.subscription_id_prefix == "obs"


def test_unrecognized_boolean_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KIOTA_RETURN_ONLY_CHANGED_VALUES", "maybe")
    assert KiotaConfig.from_env().return_only_changed_values is False


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KIOTA_RETURN_ONLY_CHANGED_VALUES", "true")
    monkeypatch.setenv("KIOTA_FORM_VALUE_SEPARATOR", ";")

    config = KiotaConfig.from_env(return_only_changed_values=False, form_value_separator="|")

    assert config.return_only_changed_values is False
    assert config.form_value_separator == "|"


@pytest.mark.parametrize("field", ["form_value_separator", "subscription_id_prefix"])
def test_empty_values_rejected(field: str) -> None:
    with pytest.raises(KiotaConfigError):
        KiotaConfig(**{field: ""})


def test_config_is_frozen() -> None:
    config = KiotaConfig()
    with pytest.raises(AttributeError):
        config.form_value_separator = ";"  # type: ignore[misc]
