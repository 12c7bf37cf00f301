"""Device group models."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import Field

from pyuiconfig.models._base import UiConfigBaseModel


class ConditionOperator(str, enum.Enum):
    """Comparison applied by a device group condition."""

    EQ = "EQ"
    NE = "NE"
    LT = "LT"
    GT = "GT"
    LE = "LE"
    GE = "GE"
    IN = "IN"


class DeviceGroupCondition(UiConfigBaseModel):
    """A single device-twin query clause (``Key Operator Value``)."""

    key: str
    operator: ConditionOperator
    value: Any = None


class DeviceGroup(UiConfigBaseModel):
    """A named set of devices selected by query conditions.

    ``id`` and ``etag`` come from the storage envelope and are never
    part of the stored document.
    """

    display_name: str | None = None
    conditions: list[DeviceGroupCondition] | None = None

    id: str | None = Field(default=None, exclude=True)
    """Store-assigned key."""
    etag: str | None = Field(default=None, exclude=True)
    """Concurrency token of the stored revision."""
