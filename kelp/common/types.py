"""Collaborator contracts for the host content-management framework."""

from __future__ import annotations

from typing import (
    Any,
    Mapping,
    Protocol,
    Sequence,
    TypeAlias,
    runtime_checkable,
)


class FieldItemList(Protocol):
    """The values stored in a single field of an entity."""

    def is_empty(self) -> bool:
        ...


class FieldableEntity(Protocol):
    """An entity that exposes named fields."""

    def has_field(self, field_name: str) -> bool:
        ...

    def get(self, field_name: str) -> FieldItemList:
        ...


class LinkItem(Protocol):
    """A single value of a link field."""

    def get_url(self) -> str:
        """Return the resolved absolute destination."""
        ...

    def get_title(self) -> str | None:
        ...

    def is_external(self) -> bool:
        ...

    def get_options(self) -> Mapping[str, Any]:
        """Return the option bag, including any ``attributes`` mapping."""
        ...


@runtime_checkable
class FileEntity(Protocol):
    """A managed file referenced by an entity reference field."""

    def id(self) -> int | str | None:
        ...

    def get_file_uri(self) -> str | None:
        ...

    def get_mime_type(self) -> str | None:
        ...


class ImageFieldItemList(Protocol):
    """An image field: a file reference plus per-item metadata such as ``alt``."""

    @property
    def entity(self) -> object | None:
        ...

    def get_value(self) -> Sequence[Mapping[str, Any]]:
        ...


class FileUrlGenerator(Protocol):
    def generate_absolute_string(self, uri: str) -> str:
        ...


class InspectedImage(Protocol):
    def get_file_size(self) -> int | None:
        ...

    def get_width(self) -> int | None:
        ...

    def get_height(self) -> int | None:
        ...


class ImageFactory(Protocol):
    def get(self, source: str) -> InspectedImage:
        ...


JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | Sequence["JSONValue"] | Mapping[str, "JSONValue"]


__all__ = [
    "FieldItemList",
    "FieldableEntity",
    "LinkItem",
    "FileEntity",
    "ImageFieldItemList",
    "FileUrlGenerator",
    "InspectedImage",
    "ImageFactory",
    "JSONValue",
]
