"""Shared normalization unit tests"""

from cmsfields.fields import (
    BASE_VARIANT,
    BOOLEAN_VARIANT,
    LOGO_VARIANT,
    VIDEO_VARIANT,
    FieldVariant,
    normalize,
)


def test_base_normalization_leaves_type_alone():
    assert "type" not in normalize({})
    assert normalize({"type": "text"})["type"] == "text"


def test_variant_forces_type_tag():
    assert normalize({"type": "text"}, BOOLEAN_VARIANT)["type"] == "boolean"


def test_unknown_keys_copied():
    values = normalize({"foo": "bar", "label": "Title"})

    assert values["foo"] == "bar"
    assert values["name"] == "title"


def test_absent_passthrough_keys_stay_absent():
    values = normalize({})

    for key in ("help_text", "inline_help_text", "id", "visibility"):
        assert key not in values


def test_extra_defaults_applied_only_when_missing():
    assert normalize({}, LOGO_VARIANT)["default"]["src"] is None
    assert normalize({"default": {"src": "a.png"}}, LOGO_VARIANT)["default"] == {
        "src": "a.png"
    }


def test_label_from_name_order():
    values = normalize({"name": "hero-video"}, VIDEO_VARIANT)

    assert values["name"] == "hero-video"
    assert values["label"] == "Hero Video"


def test_custom_variant():
    variant = FieldVariant(
        kind="text",
        type_tag="text",
        default_label="Text field",
        default_name="text_field",
        extra_defaults={"default": str},
    )

    values = normalize({}, variant)

    assert values["type"] == "text"
    assert values["label"] == "Text field"
    assert values["name"] == "text_field"
    assert values["default"] == ""


def test_variant_kinds():
    assert BASE_VARIANT.type_tag is None
    assert [v.kind for v in (BOOLEAN_VARIANT, LOGO_VARIANT, VIDEO_VARIANT)] == [
        "boolean",
        "logo",
        "video",
    ]
