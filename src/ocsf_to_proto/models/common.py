"""Common parsing helpers for schema values."""

from __future__ import annotations

from typing import Any


def parse_code(value: Any) -> int:
    """Parse an enumeration code that can be an integer or a numeric string.

    Args:
    ----
        value: Input value - int, or str in decimal or hex ("0x10") format

    Returns:
    -------
        Parsed integer value

    Raises:
    ------
        ValueError: If the value cannot be parsed as an integer

    Examples:
    --------
        >>> parse_code(99)
        99
        >>> parse_code("99")
        99
        >>> parse_code("-1")
        -1
        >>> parse_code("0x1F")
        31

    """
    if value is None:
        raise ValueError("Value cannot be None")

    if isinstance(value, bool):
        raise ValueError(f"Cannot parse bool as integer: {value}")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        value = value.strip()
        if value.lower().startswith("0x"):
            try:
                return int(value, 16)
            except ValueError as e:
                raise ValueError(f"Invalid hex string: {value}") from e
        try:
            return int(value)
        except ValueError as e:
            raise ValueError(f"Invalid integer string: {value}") from e

    raise ValueError(f"Cannot parse {type(value).__name__} as integer: {value}")
