"""Utility functions for cmsfields"""

import re
from pathlib import Path

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[\W_]+")
_WORD_SEPARATORS = re.compile(r"[_\-\s]+")


def canonicalify(p: Path | str) -> Path:
    return Path(p).expanduser().resolve()


def ensure_path(p: Path | str) -> Path:
    path = canonicalify(p)
    path.mkdir(parents=True, exist_ok=True)
    return path


def to_snake_case(text: str | None) -> str:
    """Convert human readable text to a lower snake case identifier.

    Args:
        text: Arbitrary text, typically a field label

    Returns:
        Identifier made of lowercase words joined by underscores, or an
        empty string when the text holds no word characters.

    Examples:
        >>> to_snake_case("Boolean field")
        'boolean_field'
        >>> to_snake_case("showTitle")
        'show_title'
        >>> to_snake_case("  Hero -- CTA!  ")
        'hero_cta'
        >>> to_snake_case(None)
        ''
    """
    if not text:
        return ""

    spaced = _CAMEL_BOUNDARY.sub(" ", str(text))
    words = [w for w in _SEPARATORS.split(spaced) if w]
    return "_".join(w.lower() for w in words)


def to_sentence_case(identifier: str | None) -> str:
    """Turn an underscore or hyphen separated identifier into display text.

    Examples:
        >>> to_sentence_case("my_video")
        'My Video'
        >>> to_sentence_case("videoplayer-field")
        'Videoplayer Field'
    """
    if not identifier:
        return ""

    words = [w for w in _WORD_SEPARATORS.split(str(identifier)) if w]
    return " ".join(w[:1].upper() + w[1:] for w in words)
