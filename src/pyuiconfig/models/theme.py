"""Theme documents.

A theme is an opaque JSON object owned by the web UI; only the
map-provider key is interpreted here.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

Theme = dict[str, Any]

#: Theme returned when none has been stored yet.
DEFAULT_THEME: Mapping[str, Any] = MappingProxyType(
    {
        "Name": "Default",
        "Description": "Default Theme",
    }
)


def default_theme() -> Theme:
    """Return a mutable copy of :data:`DEFAULT_THEME`."""
    return copy.deepcopy(dict(DEFAULT_THEME))
