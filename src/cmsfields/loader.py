"""Field definition file loading."""

import json
import logging
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from .errors import FieldsFileException

logger = logging.getLogger(__name__)


def _as_bags(raw: Any, path: Path) -> list[dict[str, Any]]:
    if isinstance(raw, dict):
        raw = raw.get("fields", [])

    if not isinstance(raw, list):
        raise FieldsFileException(f"Expected a list of fields in {path}")

    bags = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            raise FieldsFileException(
                f"Field #{index} in {path} is not a table/object: {item!r}"
            )
        bags.append(dict(item))
    return bags


def load_field_bags(path: str | Path) -> list[dict[str, Any]]:
    """Read raw field data bags from a TOML or JSON file.

    TOML files list fields as an array of tables (``[[fields]]``). JSON files
    hold either a top-level array or an object with a ``fields`` array.

    Raises:
        FieldsFileException: Missing file, unsupported suffix or bad content
    """
    path = Path(path)
    if not path.exists():
        raise FieldsFileException(f"Field definition file not found: {path}")

    content = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()

    if suffix == ".toml":
        try:
            raw = tomlkit.loads(content).unwrap()
        except TOMLKitError as e:
            raise FieldsFileException(f"Invalid TOML in {path}: {e}") from e
    elif suffix == ".json":
        try:
            raw = json.loads(content)
        except json.JSONDecodeError as e:
            raise FieldsFileException(f"Invalid JSON in {path}: {e}") from e
    else:
        raise FieldsFileException(
            f"Unsupported field definition file type '{suffix}', use .toml or .json"
        )

    bags = _as_bags(raw, path)
    logger.info(f"Loaded {len(bags)} field definitions from {path}")
    return bags
