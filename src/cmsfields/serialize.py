"""Serialization of field descriptors into fields.json content."""

import json
from typing import Any, Iterable

from .consts import JSON_INDENT_DEFAULT
from .fields import FieldDescriptor


def field_to_dict(field: FieldDescriptor) -> dict[str, Any]:
    """Plain dict of a descriptor, keyed by attribute name.

    Attributes the input never supplied and that have no default are left
    out. model_dump places passthrough keys after the declared ones.
    """
    return field.model_dump(exclude_unset=True)


def fields_to_json(
    fields: Iterable[FieldDescriptor], indent: int | None = JSON_INDENT_DEFAULT
) -> str:
    return json.dumps(
        [field_to_dict(f) for f in fields], indent=indent, ensure_ascii=False
    )
