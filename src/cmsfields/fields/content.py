"""Content field variants."""

from __future__ import annotations

from typing import Any, ClassVar, Literal

from .base import FieldDescriptor
from .variants import BOOLEAN_VARIANT, LOGO_VARIANT, VIDEO_VARIANT, FieldVariant


class BooleanField(FieldDescriptor):
    """On/off switch for content editors.

    ``default`` and ``display`` ("checkbox" or "toggle") are taken from the
    input as given. Neither has a fallback, so both are omitted from the
    serialized field when the input leaves them out.
    """

    variant: ClassVar[FieldVariant] = BOOLEAN_VARIANT

    type: Literal["boolean"] = "boolean"
    default: Any = None
    display: Any = None


class LogoField(FieldDescriptor):
    """Logo picker, defaulting to the domain's logo.

    A supplied ``default`` replaces the fallback
    ``{"override_inherited_src": False, "src": None, "alt": None}`` as a whole.
    """

    variant: ClassVar[FieldVariant] = LOGO_VARIANT

    type: Literal["logo"] = "logo"
    default: Any = None


class VideoField(FieldDescriptor):
    """Video player field.

    The label is derived from the name when missing. The emitted type tag is
    "blog", which is kept for the existing fields.json consumers.
    """

    variant: ClassVar[FieldVariant] = VIDEO_VARIANT

    type: Literal["blog"] = "blog"
