"""High-level async client for the UI configuration store."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pyuiconfig.config import UiConfig
from pyuiconfig.exceptions import UiConfigError
from pyuiconfig.storage import Storage
from pyuiconfig.storage_adapter import HttpStorageAdapterClient

_logger = logging.getLogger(__name__)


class UiConfigClient:
    """Async client wiring the storage adapter to the settings facade.

    Usage::

        async with UiConfigClient(UiConfig.from_env()) as client:
            theme = await client.storage.get_theme()
    """

    def __init__(
        self,
        config: UiConfig,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._adapter: HttpStorageAdapterClient | None = None
        self._storage: Storage | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> UiConfigClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._adapter = HttpStorageAdapterClient(self._config, self._http_session)
        self._storage = Storage(self._adapter, self._config)
        _logger.debug("Using storage adapter at %s", self._config.storage_adapter_url)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._adapter = None
        self._storage = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def storage(self) -> Storage:
        if self._storage is None:
            raise UiConfigError("Client not initialized. Use 'async with UiConfigClient(...) as client:'")
        return self._storage

    async def ping(self) -> dict[str, Any]:
        """Return the storage adapter's status document."""
        if self._adapter is None:
            raise UiConfigError("Client not initialized. Use 'async with UiConfigClient(...) as client:'")
        return await self._adapter.status()
