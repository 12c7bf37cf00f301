"""Custom exception hierarchy for pyuiconfig."""

from __future__ import annotations


class UiConfigError(Exception):
    """Base exception for all pyuiconfig errors."""


class ConfigurationError(UiConfigError):
    """Invalid or missing configuration."""


class StorageAdapterError(UiConfigError):
    """Storage adapter request failed (network, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        collection: str = "",
        key: str = "",
    ) -> None:
        self.status_code = status_code
        self.collection = collection
        self.key = key
        super().__init__(message)


class ResourceNotFoundError(StorageAdapterError):
    """The requested key does not exist in the collection."""


class ConflictingResourceError(StorageAdapterError):
    """Write rejected because the supplied etag no longer matches.

    The stored value was changed by another writer since the caller read
    it.  Callers should re-fetch the value to obtain a fresh etag and
    retry.
    """


class InvalidDocumentError(UiConfigError):
    """Stored data is not valid JSON or does not match the expected model."""

    def __init__(self, message: str, *, collection: str = "", key: str = "") -> None:
        self.collection = collection
        self.key = key
        super().__init__(message)
