from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

from .base import FieldDescriptor
from .content import BooleanField, LogoField, VideoField

logger = logging.getLogger(__name__)

FIELD_TYPES: dict[str, type[FieldDescriptor]] = {
    cls.variant.kind: cls for cls in (BooleanField, LogoField, VideoField)
}


def create_field(data: Mapping[str, Any] | None = None) -> FieldDescriptor:
    """Build the descriptor registered for ``data["type"]``.

    Unregistered or missing types produce a plain FieldDescriptor with the
    type passed through.
    """
    data = data or {}
    kind = data.get("type")
    field_cls = FIELD_TYPES.get(kind) if isinstance(kind, str) else None
    if field_cls is None:
        logger.debug(f"No variant registered for type {kind!r}, using base field")
        field_cls = FieldDescriptor
    return field_cls.model_validate(data)


def create_fields(
    bags: Iterable[Mapping[str, Any]], warn_duplicates: bool = True
) -> list[FieldDescriptor]:
    fields = [create_field(bag) for bag in bags]

    if warn_duplicates:
        counts = Counter(f.name for f in fields)
        for name, count in counts.items():
            if count > 1:
                logger.warning(f"Field name '{name}' is used by {count} sibling fields")

    return fields
