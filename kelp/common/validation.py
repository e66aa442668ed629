"""Field presence checks for fieldable entities."""

from __future__ import annotations

from collections.abc import Sequence

from .types import FieldableEntity


def field_check(entity: FieldableEntity, field_names: str | Sequence[str]) -> bool:
    """Return ``True`` when every named field exists on *entity* and is populated.

    *field_names* may be a single field name or an ordered sequence of names;
    checking stops at the first missing or empty field.
    """

    names = [field_names] if isinstance(field_names, str) else field_names
    for name in names:
        if not entity.has_field(name) or entity.get(name).is_empty():
            return False
    return True


__all__ = ["field_check"]
