"""Render-ready structures returned by the link and image helpers."""

from __future__ import annotations

from collections.abc import ItemsView, Iterator, KeysView, Mapping, ValuesView
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .common.types import JSONValue


class _DictLikeModel(BaseModel, Mapping[str, object]):
    """Frozen model that can also be read like the mapping templates expect."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    def _as_dict(self) -> dict[str, object]:
        return self.model_dump(mode="python")

    def __getitem__(self, key: str) -> object:
        return self._as_dict()[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._as_dict())

    def __len__(self) -> int:
        return len(self._as_dict())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return key in self._as_dict()

    def get(self, key: str, default: object | None = None) -> object | None:
        return self._as_dict().get(key, default)

    def items(self) -> ItemsView[str, object]:
        return self._as_dict().items()

    def keys(self) -> KeysView[str]:
        return self._as_dict().keys()

    def values(self) -> ValuesView[object]:
        return self._as_dict().values()

    def to_render_array(self) -> dict[str, JSONValue]:
        """Return the structure keyed the way theme templates read it."""

        return self.model_dump(mode="json", by_alias=True)


class LinkDescription(_DictLikeModel):
    """Normalized link properties for a link field value."""

    url: str
    title: str
    target: Literal["_blank", "_self"]
    aria_label: str | Literal[False] = False
    modifiers: tuple[str, ...] = ()


class ImageInfo(_DictLikeModel):
    """File size, MIME type and pixel dimensions of an image."""

    size: int | None = Field(default=None, serialization_alias="image_size")
    mime_type: str | None = Field(default=None, serialization_alias="image_type")
    width: int | None = Field(default=None, serialization_alias="image_width")
    height: int | None = Field(default=None, serialization_alias="image_height")


class ImageDescription(_DictLikeModel):
    """Everything a template needs to render an image as a CSS background."""

    file_id: str = Field(default="", serialization_alias="fid")
    src: str = ""
    alt: str = ""
    focal_point: str = Field(serialization_alias="focal")
    css: str
    info: ImageInfo | None = None
    uri: str = ""

    def to_render_array(self) -> dict[str, JSONValue]:
        data = super().to_render_array()
        if data.get("info") is None:
            data["info"] = {}
        return data


__all__ = ["LinkDescription", "ImageInfo", "ImageDescription"]
