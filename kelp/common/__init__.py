"""Helpers shared across the link, image and command-line modules."""

from __future__ import annotations

from .text import machinify, youtube_video_id
from .types import JSONValue
from .validation import field_check

__all__ = ["JSONValue", "field_check", "machinify", "youtube_video_id"]
