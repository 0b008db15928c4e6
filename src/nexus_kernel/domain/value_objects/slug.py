"""URL slug value object."""
from __future__ import annotations

import re
import unicodedata

from nexus_kernel.domain.base_value_object import BaseValueObject
from nexus_kernel.exceptions import InvalidValueError

MAX_SLUG_LENGTH = 100

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def slugify(text: str) -> str:
    """Fold diacritics to ASCII, drop punctuation, hyphenate whitespace."""
    folded = unicodedata.normalize("NFKD", text.strip().lower())
    ascii_text = folded.encode("ascii", "ignore").decode("ascii")
    slug = _DISALLOWED.sub("", ascii_text)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


class Slug(BaseValueObject):
    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise InvalidValueError("slug source must be a string")
        value = slugify(text)
        if not value:
            raise InvalidValueError("invalid slug: cannot be empty after processing")
        if len(value) > MAX_SLUG_LENGTH:
            raise InvalidValueError(f"slug too long: maximum {MAX_SLUG_LENGTH} characters")
        self.value = value
        self._finalize_init()

    def __str__(self) -> str:
        return self.value
