"""Field definition loader unit tests"""

import json

import pytest

from cmsfields.errors import FieldsFileException
from cmsfields.loader import load_field_bags


def test_load_toml(tmp_path):
    path = tmp_path / "fields.toml"
    path.write_text(
        """
[[fields]]
type = "boolean"
label = "Show CTA"
default = true

[[fields]]
type = "logo"
visibility = [{ controlling_field = "show_cta", controlling_value_regex = "true" }]
"""
    )

    bags = load_field_bags(path)

    assert bags[0] == {"type": "boolean", "label": "Show CTA", "default": True}
    assert bags[1]["visibility"] == [
        {"controlling_field": "show_cta", "controlling_value_regex": "true"}
    ]
    assert type(bags[1]) is dict


def test_load_json_array(tmp_path):
    path = tmp_path / "fields.json"
    path.write_text(json.dumps([{"type": "video", "name": "intro"}]))

    assert load_field_bags(path) == [{"type": "video", "name": "intro"}]


def test_load_json_object_with_fields(tmp_path):
    path = tmp_path / "fields.json"
    path.write_text(json.dumps({"fields": [{"label": "Title"}]}))

    assert load_field_bags(str(path)) == [{"label": "Title"}]


def test_empty_toml_yields_no_fields(tmp_path):
    path = tmp_path / "fields.toml"
    path.write_text("")

    assert load_field_bags(path) == []


def test_missing_file(tmp_path):
    with pytest.raises(FieldsFileException, match="not found"):
        load_field_bags(tmp_path / "missing.toml")


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "fields.yaml"
    path.write_text("- type: boolean\n")

    with pytest.raises(FieldsFileException, match="Unsupported"):
        load_field_bags(path)


def test_invalid_toml(tmp_path):
    path = tmp_path / "fields.toml"
    path.write_text("[[fields]\ntype = ")

    with pytest.raises(FieldsFileException, match="Invalid TOML"):
        load_field_bags(path)


def test_invalid_json(tmp_path):
    path = tmp_path / "fields.json"
    path.write_text("[{")

    with pytest.raises(FieldsFileException, match="Invalid JSON"):
        load_field_bags(path)


def test_non_list_fields(tmp_path):
    path = tmp_path / "fields.json"
    path.write_text(json.dumps({"fields": "boolean"}))

    with pytest.raises(FieldsFileException, match="Expected a list"):
        load_field_bags(path)


def test_non_object_entry(tmp_path):
    path = tmp_path / "fields.json"
    path.write_text(json.dumps([{"type": "logo"}, "boolean"]))

    with pytest.raises(FieldsFileException, match="Field #1"):
        load_field_bags(path)
