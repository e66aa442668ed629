"""Presentation helpers for content-management templates."""

from __future__ import annotations

from .common.text import machinify, youtube_video_id
from .common.validation import field_check
from .images import ImageDataExtractor
from .links import link_helper
from .models import ImageDescription, ImageInfo, LinkDescription

__all__ = [
    "ImageDataExtractor",
    "ImageDescription",
    "ImageInfo",
    "LinkDescription",
    "field_check",
    "link_helper",
    "machinify",
    "youtube_video_id",
]
