"""Link field helpers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .common.types import LinkItem
from .models import LinkDescription

DEFAULT_LINK_TITLE = "Learn More"


def link_helper(
    link: LinkItem, options: Mapping[str, Any] | None = None
) -> LinkDescription:
    """Build the render properties for a link field value.

    Recognised *options*:

    ``title``
        Title used when the link has none. Defaults to ``"Learn More"``.
    ``modifiers``
        CSS class modifiers passed through to the template.

    Other keys, and options set to ``None``, are ignored. A single modifier
    may be given as a string. External links open in a new window and the
    ``aria-label`` attribute from the link's options is carried over when set.
    """

    merged: dict[str, Any] = {"title": DEFAULT_LINK_TITLE, "modifiers": ()}
    merged.update(
        {key: value for key, value in (options or {}).items() if value is not None}
    )

    attributes = link.get_options().get("attributes") or {}
    aria_label = attributes.get("aria-label")
    modifiers: Sequence[str] = merged["modifiers"]
    if isinstance(modifiers, str):
        modifiers = [modifiers]

    return LinkDescription(
        url=link.get_url(),
        title=link.get_title() or merged["title"],
        target="_blank" if link.is_external() else "_self",
        aria_label=False if aria_label is None else aria_label,
        modifiers=tuple(modifiers),
    )


__all__ = ["DEFAULT_LINK_TITLE", "link_helper"]
