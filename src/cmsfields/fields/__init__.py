from __future__ import annotations

from .base import FieldDescriptor
from .content import BooleanField, LogoField, VideoField
from .factory import FIELD_TYPES, create_field, create_fields
from .variants import (
    BASE_VARIANT,
    BOOLEAN_VARIANT,
    LOGO_VARIANT,
    VIDEO_VARIANT,
    FieldVariant,
    default_logo,
    normalize,
)

__all__ = [
    "BASE_VARIANT",
    "BOOLEAN_VARIANT",
    "BooleanField",
    "FIELD_TYPES",
    "FieldDescriptor",
    "FieldVariant",
    "LOGO_VARIANT",
    "LogoField",
    "VIDEO_VARIANT",
    "VideoField",
    "create_field",
    "create_fields",
    "default_logo",
    "normalize",
]
