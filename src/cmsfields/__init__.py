"""Form field descriptors for CMS modules and themes."""

from .fields import (
    BooleanField,
    FieldDescriptor,
    LogoField,
    VideoField,
    create_field,
    create_fields,
)
from .serialize import field_to_dict, fields_to_json

__version__ = "0.1.0"

__all__ = [
    "BooleanField",
    "FieldDescriptor",
    "LogoField",
    "VideoField",
    "create_field",
    "create_fields",
    "field_to_dict",
    "fields_to_json",
]
