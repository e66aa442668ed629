"""Local stand-ins for the framework's link, file and image services."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from PIL import Image

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .config import Settings

logger = logging.getLogger(__name__)

_PASSTHROUGH_SCHEMES = frozenset({"http", "https", "data"})
_EXTERNAL_SCHEMES = frozenset({"http", "https"})


def _split_uri(uri: str) -> tuple[str | None, str]:
    scheme, separator, target = uri.partition("://")
    if not separator:
        return None, uri
    return scheme.lower(), target


@dataclass(frozen=True, slots=True)
class UrlLink:
    """A link field value pointing at a plain URL."""

    url: str
    title: str | None = None
    options: Mapping[str, Any] = field(default_factory=dict)

    def get_url(self) -> str:
        return self.url

    def get_title(self) -> str | None:
        return self.title

    def is_external(self) -> bool:
        if self.url.startswith("//"):
            return True
        scheme, _ = _split_uri(self.url)
        return scheme in _EXTERNAL_SCHEMES

    def get_options(self) -> Mapping[str, Any]:
        return self.options


@dataclass(frozen=True, slots=True)
class LocalFile:
    """A managed file record."""

    fid: int | str | None
    uri: str | None
    mime_type: str | None = None

    def id(self) -> int | str | None:
        return self.fid

    def get_file_uri(self) -> str | None:
        return self.uri

    def get_mime_type(self) -> str | None:
        return self.mime_type


@dataclass(frozen=True, slots=True)
class ImageFieldValue:
    """An image field holding one file reference and its item values."""

    entity: object | None
    values: Sequence[Mapping[str, Any]] = ()

    def get_value(self) -> Sequence[Mapping[str, Any]]:
        return self.values


class StreamWrapperUrlGenerator:
    """Turn stream wrapper URIs such as ``public://a.jpg`` into absolute URLs."""

    def __init__(self, site_url: str, stream_base_urls: Mapping[str, str]) -> None:
        self._site_url = site_url.rstrip("/")
        self._stream_base_urls = {
            scheme.lower(): base.rstrip("/") for scheme, base in stream_base_urls.items()
        }

    @classmethod
    def from_settings(cls, settings: "Settings") -> "StreamWrapperUrlGenerator":
        stream_base_urls = {"public": settings.public_files_url or settings.site_url}
        if settings.private_files_path is not None:
            stream_base_urls["private"] = f"{settings.site_url}/system/files"
        return cls(settings.site_url, stream_base_urls)

    def generate_absolute_string(self, uri: str) -> str:
        scheme, target = _split_uri(uri)
        if scheme is None:
            return f"{self._site_url}/{quote(target.lstrip('/'))}"
        if scheme in _PASSTHROUGH_SCHEMES:
            return uri
        base_url = self._stream_base_urls.get(scheme)
        if base_url is None:
            raise ValueError(f"No public URL is configured for '{scheme}://' files")
        return f"{base_url}/{quote(target.lstrip('/'))}"


@dataclass(frozen=True, slots=True)
class ImageProperties:
    """Size and dimensions read from an image file; ``None`` when unknown."""

    file_size: int | None = None
    width: int | None = None
    height: int | None = None

    def get_file_size(self) -> int | None:
        return self.file_size

    def get_width(self) -> int | None:
        return self.width

    def get_height(self) -> int | None:
        return self.height


class PillowImageFactory:
    """Inspect images stored under local stream wrapper directories."""

    def __init__(self, stream_roots: Mapping[str, Path], base_path: Path | None = None) -> None:
        self._stream_roots = {
            scheme.lower(): Path(root) for scheme, root in stream_roots.items()
        }
        self._base_path = base_path or Path.cwd()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PillowImageFactory":
        stream_roots = {"public": settings.public_files_path}
        if settings.private_files_path is not None:
            stream_roots["private"] = settings.private_files_path
        return cls(stream_roots)

    def resolve_path(self, source: str) -> Path:
        """Map *source* to a file under its stream root; escaping the root is an error."""

        scheme, target = _split_uri(source)
        if scheme is None:
            root = self._base_path
        else:
            root = self._stream_roots.get(scheme)
            if root is None:
                raise ValueError(
                    f"No local directory is configured for '{scheme}://' files"
                )
        root = root.resolve()
        path = (root / target.lstrip("/")).resolve()
        if not path.is_relative_to(root):
            raise ValueError(f"{source!r} resolves outside {root}")
        return path

    def get(self, source: str) -> ImageProperties:
        path = self.resolve_path(source)
        try:
            file_size = path.stat().st_size
        except OSError as exc:
            logger.warning("Image file %s could not be read.", path, exc_info=exc)
            return ImageProperties()
        try:
            with Image.open(path) as image:
                width, height = image.size
        except (OSError, Image.DecompressionBombError) as exc:
            logger.warning(
                "File %s is not a readable image; dimensions are unknown.",
                path,
                exc_info=exc,
            )
            return ImageProperties(file_size=file_size)
        return ImageProperties(file_size=file_size, width=width, height=height)


__all__ = [
    "ImageFieldValue",
    "ImageProperties",
    "LocalFile",
    "PillowImageFactory",
    "StreamWrapperUrlGenerator",
    "UrlLink",
]
