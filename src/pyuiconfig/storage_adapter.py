"""Key/value storage adapter client."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol, TypeVar
from urllib.parse import quote

import aiohttp
from pydantic import ValidationError

from pyuiconfig._constants import USER_AGENT
from pyuiconfig._redact import redact_for_log
from pyuiconfig.config import UiConfig
from pyuiconfig.exceptions import (
    ConflictingResourceError,
    ResourceNotFoundError,
    StorageAdapterError,
)
from pyuiconfig.models.value import ValueApiModel, ValueListApiModel

_logger = logging.getLogger(__name__)

V = TypeVar("V", ValueApiModel, ValueListApiModel)


class StorageAdapter(Protocol):
    """Structural key/value store interface used by the settings facade.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpStorageAdapterClient`)
    concrete.
    """

    async def get(self, collection: str, key: str) -> ValueApiModel:
        ...

    async def get_all(self, collection: str) -> list[ValueApiModel]:
        ...

    async def create(self, collection: str, data: str) -> ValueApiModel:
        ...

    async def update(self, collection: str, key: str, data: str, etag: str) -> ValueApiModel:
        ...

    async def delete(self, collection: str, key: str) -> None:
        ...


def _values_path(collection: str, key: str | None = None) -> str:
    path = f"collections/{quote(collection, safe='')}/values"
    if key is not None:
        path = f"{path}/{quote(key, safe='')}"
    return path


def _parse_envelope(model_cls: type[V], body: Any, *, collection: str, key: str = "") -> V:
    """Validate a decoded response body as a storage adapter envelope."""
    try:
        return model_cls.model_validate(body)
    except ValidationError as exc:
        raise StorageAdapterError(
            f"Unexpected {model_cls.__name__} response for {collection}/{key}: {exc.error_count()} error(s)",
            collection=collection,
            key=key,
        ) from exc


class HttpStorageAdapterClient:
    """Storage adapter client speaking the adapter's JSON REST API."""

    def __init__(self, config: UiConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._base_url = config.storage_adapter_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=config.storage_adapter_timeout)

    async def get(self, collection: str, key: str) -> ValueApiModel:
        body = await self._request("GET", _values_path(collection, key), collection=collection, key=key)
        return _parse_envelope(ValueApiModel, body, collection=collection, key=key)

    async def get_all(self, collection: str) -> list[ValueApiModel]:
        body = await self._request("GET", _values_path(collection), collection=collection)
        return list(_parse_envelope(ValueListApiModel, body, collection=collection).items)

    async def create(self, collection: str, data: str) -> ValueApiModel:
        body = await self._request(
            "POST",
            _values_path(collection),
            collection=collection,
            payload={"Data": data},
        )
        return _parse_envelope(ValueApiModel, body, collection=collection)

    async def update(self, collection: str, key: str, data: str, etag: str) -> ValueApiModel:
        body = await self._request(
            "PUT",
            _values_path(collection, key),
            collection=collection,
            key=key,
            payload={"Data": data, "ETag": etag},
        )
        return _parse_envelope(ValueApiModel, body, collection=collection, key=key)

    async def delete(self, collection: str, key: str) -> None:
        await self._request("DELETE", _values_path(collection, key), collection=collection, key=key)

    async def status(self) -> dict[str, Any]:
        """Return the storage adapter's service status document."""
        body = await self._request("GET", "status")
        return body if isinstance(body, dict) else {}

    async def _request(
        self,
        method: str,
        path: str,
        *,
        collection: str = "",
        key: str = "",
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        404 maps to :class:`ResourceNotFoundError`, 409 to
        :class:`ConflictingResourceError`; any other error status or a
        network failure raises :class:`StorageAdapterError`.  An empty
        success body decodes to ``None``.
        """
        url = f"{self._base_url}/{path}"
        headers = {
            "accept": "application/json",
            "user-agent": USER_AGENT,
        }
        data: str | None = None
        if payload is not None:
            headers["content-type"] = "application/json; charset=UTF-8"
            data = json.dumps(payload)

        _logger.debug("%s %s payload=%s", method, url, redact_for_log(payload))

        try:
            async with self._http.request(
                method,
                url,
                data=data,
                headers=headers,
                timeout=self._timeout,
            ) as resp:
                text = await resp.text()
                status = resp.status
        except aiohttp.ClientError as exc:
            raise StorageAdapterError(
                f"{method} {path} failed: {exc}",
                collection=collection,
                key=key,
            ) from exc
        except TimeoutError as exc:
            raise StorageAdapterError(
                f"{method} {path} timed out after {self._config.storage_adapter_timeout}s",
                collection=collection,
                key=key,
            ) from exc

        if status == 404:
            raise ResourceNotFoundError(
                f"{collection}/{key} not found" if collection else f"{path} not found",
                status_code=status,
                collection=collection,
                key=key,
            )
        if status == 409:
            raise ConflictingResourceError(
                f"{collection}/{key} was modified by another writer",
                status_code=status,
                collection=collection,
                key=key,
            )
        if status >= 400:
            raise StorageAdapterError(
                f"HTTP {status} from {method} {path}: {text[:200]}",
                status_code=status,
                collection=collection,
                key=key,
            )

        if not text.strip():
            return None
        try:
            body = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StorageAdapterError(
                f"Invalid JSON from {method} {path}: {text[:200]}",
                status_code=status,
                collection=collection,
                key=key,
            ) from exc

        _logger.debug("%s %s -> %s %s", method, url, status, redact_for_log(body))
        return body
