"""pyuiconfig - Async settings facade for IoT solution UI configuration."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyuiconfig")
except PackageNotFoundError:
    __version__ = "0+local"
from pyuiconfig.client import UiConfigClient
from pyuiconfig.config import UiConfig
from pyuiconfig.exceptions import (
    ConfigurationError,
    ConflictingResourceError,
    InvalidDocumentError,
    ResourceNotFoundError,
    StorageAdapterError,
    UiConfigError,
)
from pyuiconfig.models import (
    DEFAULT_THEME,
    ConditionOperator,
    DeviceGroup,
    DeviceGroupCondition,
    Logo,
    Profile,
    Theme,
    ValueApiModel,
)
from pyuiconfig.storage import Storage
from pyuiconfig.storage_adapter import HttpStorageAdapterClient, StorageAdapter

__all__ = [
    "__version__",
    "ConditionOperator",
    "ConfigurationError",
    "ConflictingResourceError",
    "DEFAULT_THEME",
    "DeviceGroup",
    "DeviceGroupCondition",
    "HttpStorageAdapterClient",
    "InvalidDocumentError",
    "Logo",
    "Profile",
    "ResourceNotFoundError",
    "Storage",
    "StorageAdapter",
    "StorageAdapterError",
    "Theme",
    "UiConfig",
    "UiConfigClient",
    "UiConfigError",
    "ValueApiModel",
]
