"""Profile model."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from pyuiconfig.models._base import UiConfigBaseModel


class Profile(UiConfigBaseModel):
    """A named bundle of settings applied to devices.

    Like :class:`~pyuiconfig.models.device_group.DeviceGroup`, ``id`` and
    ``etag`` are attached from the storage envelope.
    """

    display_name: str | None = None
    description: str | None = None
    settings: dict[str, Any] | None = None

    id: str | None = Field(default=None, exclude=True)
    etag: str | None = Field(default=None, exclude=True)
