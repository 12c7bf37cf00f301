"""Solution logo model."""

from __future__ import annotations

from pydantic import Field

from pyuiconfig.models._base import UiConfigBaseModel


class Logo(UiConfigBaseModel):
    """Logo shown in the solution header.

    ``image`` holds the encoded image content and ``type`` its content
    type; the two always travel together.  ``is_default`` marks the
    built-in logo returned when nothing has been stored and is never
    serialized.
    """

    name: str | None = None
    image: str | None = None
    type: str | None = None
    is_default: bool = Field(default=False, exclude=True)

    @classmethod
    def default(cls) -> Logo:
        """The built-in logo: no name, no image."""
        return _DEFAULT_LOGO

    def merged_with(self, current: Logo) -> Logo:
        """Fill absent fields from *current* unless *current* is the default.

        ``name`` is taken from *current* when missing here.  ``image``
        and ``type`` are taken together, and only when this logo has no
        image and *current* has one; ``type`` is never copied on its own.
        """
        if current.is_default:
            return self
        update: dict[str, str | None] = {}
        if self.name is None:
            update["name"] = current.name
        if self.image is None and current.image is not None:
            update["image"] = current.image
            update["type"] = current.type
        if not update:
            return self
        return self.model_copy(update=update)


_DEFAULT_LOGO = Logo(name=None, image=None, type=None, is_default=True)
