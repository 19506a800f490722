from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator

from .variants import BASE_VARIANT, FieldVariant, normalize


class FieldDescriptor(BaseModel):
    """Form field shown to content editors of a module or theme.

    Built from a loose data bag: recognized attributes are defaulted,
    anything else is kept in ``model_extra`` and serialized verbatim.

    Attributes:
        type: Field kind discriminant
        name: Key the field's value is stored against
        label: Text the content creator sees
        help_text: Tooltip text
        inline_help_text: Help text shown below the label
        id: Identifier assigned by the CMS, absent for local fields
        locked: Hide the field from the content editor
        required: Block publishing until the field is filled
        visibility: Display conditions, passed through untouched
        display_width: "half_width" to pair with the next field, else None
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    variant: ClassVar[FieldVariant] = BASE_VARIANT

    type: Any = None
    name: str
    label: str
    help_text: Any = None
    inline_help_text: Any = None
    id: Any = None
    locked: bool = False
    required: bool = False
    visibility: Any = None
    display_width: Any = None

    @model_validator(mode="before")
    @classmethod
    def apply_defaults(cls, values):
        if not isinstance(values, Mapping):
            return values
        return normalize(values, cls.variant)

    @property
    def passthrough(self) -> dict[str, Any]:
        return dict(self.model_extra or {})
