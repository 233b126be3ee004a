"""Runtime configuration for pykiota."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pykiota._constants import DEFAULT_FORM_VALUE_SEPARATOR, DEFAULT_SUBSCRIPTION_ID_PREFIX
from pykiota.exceptions import KiotaConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class KiotaConfig:
    """Store and parser configuration.

    Parameters
    ----------
    return_only_changed_values : bool
        Make new backing stores hide entries that were not changed after
        initialization completed.
    form_value_separator : str
        Separator used to join repeated keys of a form payload into a
        single field value.
    subscription_id_prefix : str
        Prefix of the subscription ids a store generates when the caller
        does not supply one.
    """

    return_only_changed_values: bool = False
    form_value_separator: str = DEFAULT_FORM_VALUE_SEPARATOR
    subscription_id_prefix: str = DEFAULT_SUBSCRIPTION_ID_PREFIX

    def __post_init__(self) -> None:
        if not self.form_value_separator:
            raise KiotaConfigError("form_value_separator must be non-empty")
        if not self.subscription_id_prefix:
            raise KiotaConfigError("subscription_id_prefix must be non-empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> KiotaConfig:
        """Create configuration from environment variables.

        Reads ``KIOTA_RETURN_ONLY_CHANGED_VALUES``,
        ``KIOTA_FORM_VALUE_SEPARATOR`` and ``KIOTA_SUBSCRIPTION_ID_PREFIX``.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        KiotaConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "return_only_changed_values" not in overrides:
            config_kwargs["return_only_changed_values"] = _env_bool(
                env.get("KIOTA_RETURN_ONLY_CHANGED_VALUES"),
                False,
            )

        _ENV_CONFIG_MAP = {
            "KIOTA_FORM_VALUE_SEPARATOR": "form_value_separator",
            "KIOTA_SUBSCRIPTION_ID_PREFIX": "subscription_id_prefix",
        }
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
