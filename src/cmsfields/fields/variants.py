"""Per-variant defaults and the shared normalization step."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from .. import consts
from ..utils import to_sentence_case, to_snake_case


@dataclass(frozen=True)
class FieldVariant:
    """Literal defaults that distinguish one field kind from another.

    Attributes:
        kind: Registry key callers use to request the variant
        type_tag: Value forced onto ``type``; None lets the input through
        default_label: Label used when the input has none
        default_name: Last resort name when neither name nor label yields one
        label_from_name: Resolve ``name`` first and derive the label from it
        extra_defaults: Factories for variant specific attributes, applied
            when the input value is missing, None or a falsy scalar
    """

    kind: str
    type_tag: Optional[str]
    default_label: str = consts.FIELD_LABEL_DEFAULT
    default_name: str = consts.FIELD_NAME_DEFAULT
    label_from_name: bool = False
    extra_defaults: Mapping[str, Callable[[], Any]] = field(
        default_factory=dict, hash=False
    )


def default_logo() -> dict[str, Any]:
    return {"override_inherited_src": False, "src": None, "alt": None}


BASE_VARIANT = FieldVariant(kind="field", type_tag=None)

BOOLEAN_VARIANT = FieldVariant(
    kind="boolean",
    type_tag=consts.BOOLEAN_TYPE,
    default_label=consts.BOOLEAN_LABEL_DEFAULT,
    default_name=consts.BOOLEAN_NAME_DEFAULT,
)

LOGO_VARIANT = FieldVariant(
    kind="logo",
    type_tag=consts.LOGO_TYPE,
    default_label=consts.LOGO_LABEL_DEFAULT,
    default_name=consts.LOGO_NAME_DEFAULT,
    extra_defaults={"default": default_logo},
)

VIDEO_VARIANT = FieldVariant(
    kind="video",
    type_tag=consts.VIDEO_TYPE,
    default_name=consts.VIDEO_NAME_DEFAULT,
    label_from_name=True,
)


def _missing(value: Any) -> bool:
    # containers count as supplied even when empty
    if value is None:
        return True
    return not value and not isinstance(value, (dict, list, tuple))


def _text(value: Any) -> Any:
    # falsy values are left alone so the caller's `or` chain can fall back
    if value and not isinstance(value, str):
        return str(value)
    return value


def normalize(
    data: Mapping[str, Any], variant: FieldVariant = BASE_VARIANT
) -> dict[str, Any]:
    """Apply the shared defaulting rules followed by the variant's overrides.

    Every input key is copied first, so unknown keys survive; recognized keys
    are then overwritten with their normalized values. Never raises.
    """
    values = dict(data)

    if variant.label_from_name:
        name = _text(data.get("name")) or variant.default_name
        label = _text(data.get("label")) or to_sentence_case(name)
    else:
        label = _text(data.get("label")) or variant.default_label
        name = (
            _text(data.get("name")) or to_snake_case(label) or variant.default_name
        )

    values["label"] = label
    values["name"] = name
    values["locked"] = bool(data.get("locked"))
    values["required"] = bool(data.get("required"))
    values["display_width"] = data.get("display_width") or None

    if variant.type_tag is not None:
        values["type"] = variant.type_tag

    for key, factory in variant.extra_defaults.items():
        if _missing(values.get(key)):
            values[key] = factory()

    return values
