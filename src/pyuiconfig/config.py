"""Client configuration for pyuiconfig."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyuiconfig._constants import DEFAULT_STORAGE_ADAPTER_TIMEOUT
from pyuiconfig.exceptions import ConfigurationError


def _env_float(name: str, value: str) -> float:
    try:
        return float(value.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class UiConfig:
    """Service configuration.

    Parameters
    ----------
    storage_adapter_url : str
        Base URL of the storage adapter web service, including the API
        version segment (e.g. ``"http://storageadapter:9022/v1"``).
    bing_map_key : str
        Map-provider key injected into theme documents that lack one.
    storage_adapter_timeout : float
        Total timeout in seconds for a single storage adapter request.
    """

    storage_adapter_url: str
    bing_map_key: str = ""
    storage_adapter_timeout: float = DEFAULT_STORAGE_ADAPTER_TIMEOUT

    def __post_init__(self) -> None:
        if not self.storage_adapter_url or not self.storage_adapter_url.strip():
            raise ConfigurationError("storage_adapter_url must not be empty")
        if self.storage_adapter_timeout <= 0:
            raise ConfigurationError(
                f"storage_adapter_timeout must be positive, got {self.storage_adapter_timeout}"
            )

    @classmethod
    def from_env(cls, **overrides: Any) -> UiConfig:
        """Create configuration from environment variables.

        Reads ``PCS_STORAGEADAPTER_WEBSERVICE_URL``, ``PCS_BINGMAP_KEY``
        and ``PCS_STORAGEADAPTER_TIMEOUT``.  Explicit keyword arguments
        override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        UiConfig
            Populated configuration.

        Raises
        ------
        ConfigurationError
            If the storage adapter URL is missing or the timeout is invalid.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "PCS_STORAGEADAPTER_WEBSERVICE_URL": "storage_adapter_url",
            "PCS_BINGMAP_KEY": "bing_map_key",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # timeout is numeric, handle separately
        timeout_env = env.get("PCS_STORAGEADAPTER_TIMEOUT")
        if timeout_env is not None and "storage_adapter_timeout" not in overrides:
            config_kwargs["storage_adapter_timeout"] = _env_float("PCS_STORAGEADAPTER_TIMEOUT", timeout_env)

        config_kwargs.update(overrides)

        if "storage_adapter_url" not in config_kwargs:
            raise ConfigurationError("PCS_STORAGEADAPTER_WEBSERVICE_URL is not set")

        return cls(**config_kwargs)
