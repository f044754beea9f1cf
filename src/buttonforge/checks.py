"""Argument checks shared by descriptors and builders."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from buttonforge.errors import InvalidArgumentError


def check(condition: bool, field: str, message: str) -> None:
    if not condition:
        raise InvalidArgumentError(field, message)


def not_none(value: Any, field: str) -> None:
    if value is None:
        raise InvalidArgumentError(field, f"{field} may not be None")


def not_empty(value: str | None, field: str) -> None:
    not_none(value, field)
    if not value:
        raise InvalidArgumentError(field, f"{field} may not be empty")


def not_longer(value: str, limit: int, field: str) -> None:
    if len(value) > limit:
        raise InvalidArgumentError(
            field, f"{field} may not be longer than {limit} characters (got {len(value)})"
        )


def not_negative(value: int, field: str) -> None:
    if value < 0:
        raise InvalidArgumentError(field, f"{field} may not be negative")


def none_none(values: Iterable[Any], field: str) -> None:
    if any(v is None for v in values):
        raise InvalidArgumentError(field, f"{field} may not contain None")


def parse_snowflake(value: str, field: str = "ID") -> int:
    """Parse a Discord snowflake given as a decimal string."""
    not_empty(value, field)
    try:
        parsed = int(value.strip())
    except ValueError:
        raise InvalidArgumentError(field, f"{field} is not a valid snowflake: {value!r}") from None
    if parsed < 0 or parsed.bit_length() > 64:
        raise InvalidArgumentError(field, f"{field} is not a valid snowflake: {value!r}")
    return parsed
