"""Text normalization helpers used by templates."""

from __future__ import annotations

import re
from typing import Literal

__all__ = ["machinify", "youtube_video_id"]

_MACHINE_NAME_UNSAFE_RE = re.compile(r"[^a-z0-9_]+")
_YOUTUBE_VIDEO_ID_RE = re.compile(
    r"(?:(?:(?:https?:)?//)?(?:www\.)?(?:youtu(?:be\.com|\.be))/"
    r"(?:watch\?v=|v/|embed/)?([\w\-]+))",
    re.IGNORECASE | re.ASCII,
)


def youtube_video_id(source: str) -> str | Literal[False]:
    """Return the YouTube video ID found at the start of *source*, else ``False``."""

    match = _YOUTUBE_VIDEO_ID_RE.match(source)
    if match is None:
        return False
    return match.group(1)


def machinify(text: str, separator: str = "_") -> str:
    """Convert *text* into a lowercase machine name joined by *separator*.

    Runs of characters outside ``[a-z0-9_]`` are replaced by *separator*, then
    repeated separators are collapsed. The first pass always keeps ``_``, even
    when a different separator is requested.
    """

    value = _MACHINE_NAME_UNSAFE_RE.sub(lambda _match: separator, text.strip().lower())
    if not separator:
        return value
    repeated = re.compile(f"(?:{re.escape(separator)})+")
    return repeated.sub(lambda _match: separator, value)
