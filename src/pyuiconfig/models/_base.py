"""Base model for documents stored in the storage adapter.

Every stored document model inherits from :class:`UiConfigBaseModel`
which provides:

* ``alias_generator=to_pascal`` so the PascalCase keys used in stored
  documents map to snake_case fields.
* :meth:`UiConfigBaseModel.from_document` to decode the JSON string held
  in a value envelope, raising :class:`InvalidDocumentError` for
  malformed data.
* :meth:`UiConfigBaseModel.to_document` to encode a model back into the
  envelope's JSON string, with an explicit ``exclude_none`` switch.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_pascal

from pyuiconfig.exceptions import InvalidDocumentError

M = TypeVar("M", bound="UiConfigBaseModel")


class UiConfigBaseModel(BaseModel):
    """Base for stored settings documents."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_pascal,
    )

    @classmethod
    def from_document(cls: type[M], data: str | None, *, collection: str = "", key: str = "") -> M:
        """Decode a stored JSON document into a model instance."""
        if data is None:
            raise InvalidDocumentError(
                f"{collection}/{key} has no data",
                collection=collection,
                key=key,
            )
        try:
            return cls.model_validate_json(data)
        except ValidationError as exc:
            raise InvalidDocumentError(
                f"{collection}/{key} is not a valid {cls.__name__}: {exc.error_count()} error(s)",
                collection=collection,
                key=key,
            ) from exc

    def to_document(self, *, exclude_none: bool = False) -> str:
        """Encode the model as the JSON string stored in the envelope.

        Fields declared with ``exclude=True`` (identity, etag) are never
        written.  With *exclude_none* set, ``None``-valued fields are
        omitted entirely rather than written as ``null``.
        """
        return self.model_dump_json(by_alias=True, exclude_none=exclude_none)
