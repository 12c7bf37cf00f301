"""Internal constants shared across the library."""

USER_AGENT = "pyuiconfig"

SOLUTION_COLLECTION_ID = "solution-settings"
USER_COLLECTION_ID = "user-settings"
DEVICE_GROUP_COLLECTION_ID = "devicegroups"
PROFILE_COLLECTION_ID = "profiles"

THEME_KEY = "theme"
LOGO_KEY = "logo"

#: Theme field carrying the map-provider key for client-side map rendering.
BING_MAP_KEY_KEY = "BingMapKey"

#: Etag value that makes the storage adapter skip the concurrency check.
MATCH_ANY_ETAG = "*"

DEFAULT_STORAGE_ADAPTER_TIMEOUT: float = 10.0
