"""Allow-list filtering of raw request parameters, keyed by field class."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable
from enum import Enum


class FieldClass(Enum):
    NUMERIC = "numeric"
    NAME = "name"


_NUMERIC_PUNCTUATION = frozenset("+-.,:")
_NAME_PUNCTUATION = frozenset("-+.*[]()/'\"")
_TRUE_VALUES = {"1", "true", "yes", "y", "on"}


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_letter(ch: str) -> bool:
    return unicodedata.category(ch).startswith("L")


def is_numeric_char(ch: str) -> bool:
    return _is_ascii_digit(ch) or ch in _NUMERIC_PUNCTUATION or ch.isspace()


def is_name_char(ch: str) -> bool:
    return (
        _is_letter(ch)
        or _is_ascii_digit(ch)
        or ch in _NAME_PUNCTUATION
        or ch.isspace()
    )


ALLOWED_CHARACTERS: dict[FieldClass, Callable[[str], bool]] = {
    FieldClass.NUMERIC: is_numeric_char,
    FieldClass.NAME: is_name_char,
}


def is_name_like(text: str) -> bool:
    """True when the whole (non-empty) text is made of object-name characters."""
    return bool(text) and all(is_name_char(ch) for ch in text)


def sanitize(raw: str | None, field_class: FieldClass) -> str:
    """Return the allow-listed form of a raw parameter.

    Numeric fields have every disallowed character stripped. Names are only
    trimmed: a name is accepted or rejected as a whole (see is_name_like), so
    a partially valid name is never silently rewritten into a different one.
    Absent input gives an empty string.
    """
    if raw is None:
        return ""
    if field_class is FieldClass.NAME:
        return raw.strip()
    allowed = ALLOWED_CHARACTERS[field_class]
    return "".join(ch for ch in raw if allowed(ch))


def parse_flag(raw: str | None) -> bool:
    if not raw:
        return False
    return raw.strip().lower() in _TRUE_VALUES
