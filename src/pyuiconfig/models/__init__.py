"""Data models for stored UI configuration documents."""

from pyuiconfig.models._base import UiConfigBaseModel
from pyuiconfig.models.device_group import ConditionOperator, DeviceGroup, DeviceGroupCondition
from pyuiconfig.models.logo import Logo
from pyuiconfig.models.profile import Profile
from pyuiconfig.models.theme import DEFAULT_THEME, Theme, default_theme
from pyuiconfig.models.value import ValueApiModel, ValueListApiModel

__all__ = [
    "ConditionOperator",
    "DEFAULT_THEME",
    "DeviceGroup",
    "DeviceGroupCondition",
    "Logo",
    "Profile",
    "Theme",
    "UiConfigBaseModel",
    "ValueApiModel",
    "ValueListApiModel",
    "default_theme",
]
