"""Identifier normalization for proto output."""

from __future__ import annotations

import re
from collections.abc import Callable

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]+")
_DIGIT_THEN_LOWER = re.compile(r"(\d)([a-z])")
_LOWER_THEN_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_THEN_WORD = re.compile(r"([A-Z]+)([A-Z][a-z])")


def last_path_segment(name: str) -> str:
    """Keep only the text after the last '/' (drops extension prefixes)."""
    return name.split("/")[-1]


def clean_name(name: str) -> str:
    """Strip and replace each run of non-alphanumeric characters with a space.

    Examples:
    --------
        >>> clean_name("  file_hash ")
        'file hash'
        >>> clean_name("Http-Request (v2)")
        'Http Request v2 '

    """
    return _NON_ALPHANUMERIC.sub(" ", name.strip())


def to_camel(name: str) -> str:
    """Convert space-separated words to UpperCamelCase.

    Only the first letter of each word is changed, so acronyms survive.
    A letter directly after a digit starts a new word.

    Examples:
    --------
        >>> to_camel("process activity")
        'ProcessActivity'
        >>> to_camel("md5sum")
        'Md5Sum'

    """
    words = [w[0].upper() + w[1:] for w in name.split() if w]
    return _DIGIT_THEN_LOWER.sub(lambda m: m.group(1) + m.group(2).upper(), "".join(words))


def to_screaming_snake(name: str) -> str:
    """Convert a name to SCREAMING_SNAKE_CASE.

    Examples:
    --------
        >>> to_screaming_snake("ProcessActivityActivityId Launch")
        'PROCESS_ACTIVITY_ACTIVITY_ID_LAUNCH'
        >>> to_screaming_snake("HTTPRequest Other")
        'HTTP_REQUEST_OTHER'

    """
    value = clean_name(name)
    value = _ACRONYM_THEN_WORD.sub(r"\1 \2", value)
    value = _LOWER_THEN_UPPER.sub(r"\1 \2", value)
    return "_".join(value.upper().split())


def to_field_name(name: str) -> str:
    """Convert an attribute name to a lower snake_case proto field name."""
    return "_".join(clean_name(name).lower().split())


def to_package_name(name: str) -> str:
    """Convert a category or other label to a proto package segment."""
    return "_".join(clean_name(name).lower().split())


class NameNormalizer:
    """Memoized conversion of schema names to canonical proto type names.

    The memo is consulted before anything is computed, so a given input
    always yields the same output for the lifetime of the normalizer.
    Inputs that normalize to an empty string are returned as such.

    Usage:
        normalizer = NameNormalizer(preprocessor=last_path_segment)
        normalizer.normalize("win/registry_key")  # 'RegistryKey'
    """

    def __init__(self, preprocessor: Callable[[str], str] | None = None) -> None:
        """Initialize the normalizer.

        Args:
        ----
            preprocessor: Optional hook applied to the raw name first.

        """
        self.preprocessor = preprocessor
        self._cache: dict[str, str] = {}

    def normalize(self, raw: str) -> str:
        """Return the canonical name for raw."""
        cached = self._cache.get(raw)
        if cached is not None:
            return cached

        value = raw
        if self.preprocessor is not None:
            value = self.preprocessor(value)

        value = to_camel(clean_name(value))

        self._cache[raw] = value
        return value
