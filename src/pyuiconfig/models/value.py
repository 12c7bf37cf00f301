"""Storage adapter value envelopes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ValueApiModel(BaseModel):
    """A single stored value as returned by the storage adapter.

    ``data`` is the stored document as a JSON string; ``key`` and
    ``etag`` are assigned by the store and never part of ``data``.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    key: str = Field(default="", alias="Key")
    data: str | None = Field(default=None, alias="Data")
    etag: str = Field(default="", alias="ETag")
    metadata: dict[str, Any] = Field(default_factory=dict, alias="$metadata")


class ValueListApiModel(BaseModel):
    """All values of a collection."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    items: list[ValueApiModel] = Field(default_factory=list, alias="Items")
    metadata: dict[str, Any] = Field(default_factory=dict, alias="$metadata")
