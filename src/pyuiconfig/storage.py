"""Settings facade over the key/value storage adapter.

Maps the UI configuration entities onto storage adapter collections:

* ``solution-settings``: the ``theme`` and ``logo`` documents
* ``user-settings``: one opaque document per user-supplied id
* ``devicegroups`` and ``profiles``: documents keyed by store-assigned ids

Theme, logo and user-setting writes overwrite unconditionally (etag
``"*"``).  Device group and profile updates are conditioned on the etag
supplied by the caller and raise :class:`ConflictingResourceError` when
it is stale.

:meth:`Storage.set_logo` reads the current logo before writing without
any lock, so two concurrent logo updates can interleave and the later
write wins with a merge based on a stale read.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pyuiconfig._constants import (
    BING_MAP_KEY_KEY,
    DEVICE_GROUP_COLLECTION_ID,
    LOGO_KEY,
    MATCH_ANY_ETAG,
    PROFILE_COLLECTION_ID,
    SOLUTION_COLLECTION_ID,
    THEME_KEY,
    USER_COLLECTION_ID,
)
from pyuiconfig.config import UiConfig
from pyuiconfig.exceptions import InvalidDocumentError, ResourceNotFoundError
from pyuiconfig.models.device_group import DeviceGroup
from pyuiconfig.models.logo import Logo
from pyuiconfig.models.profile import Profile
from pyuiconfig.models.theme import Theme, default_theme
from pyuiconfig.models.value import ValueApiModel
from pyuiconfig.storage_adapter import StorageAdapter

_logger = logging.getLogger(__name__)

E = TypeVar("E", DeviceGroup, Profile)


def _loads(value: ValueApiModel, collection: str, key: str) -> Any:
    """JSON-decode the envelope's data; a missing body decodes to ``None``."""
    if value.data is None:
        return None
    try:
        return json.loads(value.data)
    except json.JSONDecodeError as exc:
        raise InvalidDocumentError(
            f"{collection}/{key} is not JSON: {value.data[:128]}",
            collection=collection,
            key=key,
        ) from exc


def _with_identity(model_cls: type[E], value: ValueApiModel, collection: str) -> E:
    body = model_cls.from_document(value.data, collection=collection, key=value.key)
    return body.model_copy(update={"id": value.key, "etag": value.etag})


class Storage:
    """Stateless facade over a :class:`StorageAdapter`.

    Every call fetches fresh from the store; nothing is cached.
    """

    def __init__(self, client: StorageAdapter, config: UiConfig) -> None:
        self._client = client
        self._config = config

    # ------------------------------------------------------------------
    # Theme
    # ------------------------------------------------------------------

    async def get_theme(self) -> Theme:
        """Return the stored theme, or the default theme when none is stored."""
        try:
            response = await self._client.get(SOLUTION_COLLECTION_ID, THEME_KEY)
        except ResourceNotFoundError:
            _logger.debug("No theme stored, using default")
            theme = default_theme()
        else:
            theme = self._theme_document(response)
        return self._append_bing_map_key(theme)

    async def set_theme(self, theme: Theme) -> Theme:
        value = json.dumps(theme)
        response = await self._client.update(SOLUTION_COLLECTION_ID, THEME_KEY, value, MATCH_ANY_ETAG)
        return self._append_bing_map_key(self._theme_document(response))

    def _theme_document(self, response: ValueApiModel) -> Theme:
        decoded = _loads(response, SOLUTION_COLLECTION_ID, THEME_KEY)
        if decoded is None:
            return {}
        if not isinstance(decoded, dict):
            raise InvalidDocumentError(
                f"{SOLUTION_COLLECTION_ID}/{THEME_KEY} is not a JSON object",
                collection=SOLUTION_COLLECTION_ID,
                key=THEME_KEY,
            )
        return decoded

    def _append_bing_map_key(self, theme: Theme) -> Theme:
        # A key already present is kept as-is, even when its value is null.
        if BING_MAP_KEY_KEY not in theme:
            theme[BING_MAP_KEY_KEY] = self._config.bing_map_key
        return theme

    # ------------------------------------------------------------------
    # User settings
    # ------------------------------------------------------------------

    async def get_user_setting(self, id: str) -> Any:
        """Return the user's settings document, or ``{}`` when none is stored."""
        try:
            response = await self._client.get(USER_COLLECTION_ID, id)
        except ResourceNotFoundError:
            _logger.debug("No user setting stored for id=%s", id)
            return {}
        return _loads(response, USER_COLLECTION_ID, id)

    async def set_user_setting(self, id: str, setting: Any) -> Any:
        value = json.dumps(setting)
        response = await self._client.update(USER_COLLECTION_ID, id, value, MATCH_ANY_ETAG)
        return _loads(response, USER_COLLECTION_ID, id)

    # ------------------------------------------------------------------
    # Logo
    # ------------------------------------------------------------------

    async def get_logo(self) -> Logo:
        """Return the stored logo, or :meth:`Logo.default` when none is stored."""
        try:
            response = await self._client.get(SOLUTION_COLLECTION_ID, LOGO_KEY)
        except ResourceNotFoundError:
            _logger.debug("No logo stored, using default")
            return Logo.default()
        return Logo.from_document(response.data, collection=SOLUTION_COLLECTION_ID, key=LOGO_KEY)

    async def set_logo(self, model: Logo) -> Logo:
        """Store *model*, keeping the current name/image where *model* has none.

        Absent fields are never written over a stored non-default logo:
        a missing ``name`` keeps the stored name and a missing ``image``
        keeps the stored image together with its ``type``.
        """
        if model.name is None or model.image is None:
            current = await self.get_logo()
            model = model.merged_with(current)

        value = model.to_document()
        response = await self._client.update(SOLUTION_COLLECTION_ID, LOGO_KEY, value, MATCH_ANY_ETAG)
        return Logo.from_document(response.data, collection=SOLUTION_COLLECTION_ID, key=LOGO_KEY)

    # ------------------------------------------------------------------
    # Device groups
    # ------------------------------------------------------------------

    async def get_all_device_groups(self) -> list[DeviceGroup]:
        return await self._get_all(DeviceGroup, DEVICE_GROUP_COLLECTION_ID)

    async def get_device_group(self, id: str) -> DeviceGroup:
        """Fetch one device group; raises :class:`ResourceNotFoundError` if absent."""
        return await self._get(DeviceGroup, DEVICE_GROUP_COLLECTION_ID, id)

    async def create_device_group(self, input: DeviceGroup) -> DeviceGroup:
        return await self._create(DeviceGroup, DEVICE_GROUP_COLLECTION_ID, input)

    async def update_device_group(self, id: str, input: DeviceGroup, etag: str) -> DeviceGroup:
        """Replace a device group if *etag* still matches the stored revision."""
        return await self._update(DeviceGroup, DEVICE_GROUP_COLLECTION_ID, id, input, etag)

    async def delete_device_group(self, id: str) -> None:
        await self._client.delete(DEVICE_GROUP_COLLECTION_ID, id)

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------

    async def get_all_profiles(self) -> list[Profile]:
        return await self._get_all(Profile, PROFILE_COLLECTION_ID)

    async def get_profile(self, id: str) -> Profile:
        return await self._get(Profile, PROFILE_COLLECTION_ID, id)

    async def create_profile(self, input: Profile) -> Profile:
        return await self._create(Profile, PROFILE_COLLECTION_ID, input)

    async def update_profile(self, id: str, input: Profile, etag: str) -> Profile:
        return await self._update(Profile, PROFILE_COLLECTION_ID, id, input, etag)

    async def delete_profile(self, id: str) -> None:
        await self._client.delete(PROFILE_COLLECTION_ID, id)

    # ------------------------------------------------------------------
    # Keyed collections
    # ------------------------------------------------------------------

    async def _get_all(self, model_cls: type[E], collection: str) -> list[E]:
        items = await self._client.get_all(collection)
        return [_with_identity(model_cls, item, collection) for item in items]

    async def _get(self, model_cls: type[E], collection: str, id: str) -> E:
        response = await self._client.get(collection, id)
        return _with_identity(model_cls, response, collection)

    async def _create(self, model_cls: type[E], collection: str, input: E) -> E:
        value = input.to_document(exclude_none=True)
        response = await self._client.create(collection, value)
        _logger.debug("Created %s/%s", collection, response.key)
        return _with_identity(model_cls, response, collection)

    async def _update(self, model_cls: type[E], collection: str, id: str, input: E, etag: str) -> E:
        value = input.to_document(exclude_none=True)
        response = await self._client.update(collection, id, value, etag)
        return _with_identity(model_cls, response, collection)
