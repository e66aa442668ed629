"""Background-image data for image fields."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .common.types import FileEntity, FileUrlGenerator, ImageFactory, ImageFieldItemList
from .models import ImageDescription, ImageInfo

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .config import Settings

logger = logging.getLogger(__name__)

DEFAULT_FOCAL_POINT = "50% 50%"


def _background_css(src: str, focal_point: str) -> str:
    return f"background-image: url( {src} ); background-position: {focal_point};"


class ImageDataExtractor:
    """Describe the file referenced by an image field for template rendering."""

    def __init__(
        self, url_generator: FileUrlGenerator, image_factory: ImageFactory
    ) -> None:
        self._url_generator = url_generator
        self._image_factory = image_factory

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ImageDataExtractor":
        """Build an extractor backed by the local stream wrapper adapters."""

        from .adapters import PillowImageFactory, StreamWrapperUrlGenerator

        return cls(
            StreamWrapperUrlGenerator.from_settings(settings),
            PillowImageFactory.from_settings(settings),
        )

    def get_image_data(self, field: ImageFieldItemList) -> ImageDescription | None:
        """Return image data for *field*, or ``None`` when it references no file."""

        file = field.entity
        if not isinstance(file, FileEntity):
            logger.debug(
                "Image field references %s rather than a file; skipping.",
                type(file).__name__,
            )
            return None

        focal_point = DEFAULT_FOCAL_POINT
        uri = file.get_file_uri()
        if uri is None:
            logger.debug("File %s has no URI; returning default image data.", file.id())
            return ImageDescription(
                focal_point=focal_point,
                css=_background_css("", focal_point),
            )

        src = self._url_generator.generate_absolute_string(uri)
        image = self._image_factory.get(uri)
        info = ImageInfo(
            size=image.get_file_size(),
            mime_type=file.get_mime_type(),
            width=image.get_width(),
            height=image.get_height(),
        )

        file_id = file.id()
        alt = ""
        values = field.get_value()
        if values and values[0].get("alt") is not None:
            alt = values[0]["alt"]

        return ImageDescription(
            file_id="" if file_id is None else str(file_id),
            src=src,
            alt=alt,
            focal_point=focal_point,
            css=_background_css(src, focal_point),
            info=info,
            uri=uri,
        )


__all__ = ["DEFAULT_FOCAL_POINT", "ImageDataExtractor"]
