"""Coercion of raw filter values.

Filters often arrive as query-string text, so numbers and flags may be
strings. ``None`` always means "not set".
"""

from __future__ import annotations

import logging
import math
import reprlib
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

Number = int | float | Decimal


def resolve_aliases(
    raw: Mapping[str, Any], aliases: Mapping[str, str], kind: str
) -> dict[str, Any]:
    """Map request-style filter keys onto field names.

    Raises:
        InvalidArgumentError: On an unknown key, or two keys naming the same field
    """
    values: dict[str, Any] = {}
    given_as: dict[str, str] = {}
    for key, value in raw.items():
        if key not in aliases:
            raise InvalidArgumentError(f"Unknown {kind} filter: {key}")
        field = aliases[key]
        if field in values:
            raise InvalidArgumentError(
                f"{kind.capitalize()} filter given twice: {given_as[field]} and {key}"
            )
        values[field] = value
        given_as[field] = key
    return values


def optional_text(value: Any, name: str) -> str | None:
    """Return the text filter, treating None and the empty string as unset.

    Whitespace is real text: a title of " " matches titles containing a space.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be text, got {type(value).__name__}")
    return value or None


def coerce_non_negative_number(value: Any, name: str) -> Number | None:
    """Coerce a numeric filter, keeping zero as a real value.

    Strings are parsed as int first, then float.

    Raises:
        InvalidArgumentError: If the value is not a finite, non-negative number
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None

    # bool is an int subclass; "minSalary=True" is a caller mistake
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a number, got {reprlib.repr(value)}")

    if isinstance(value, str):
        text = value.strip()
        try:
            number: Number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                raise InvalidArgumentError(
                    f"{name} must be a number, got {reprlib.repr(value)}"
                ) from None
    elif isinstance(value, (int, float, Decimal)):
        number = value
    else:
        raise InvalidArgumentError(f"{name} must be a number, got {type(value).__name__}")

    if isinstance(number, Decimal):
        finite = number.is_finite()
    else:
        finite = isinstance(number, int) or math.isfinite(number)
    if not finite:
        raise InvalidArgumentError(f"{name} must be a finite number, got {reprlib.repr(value)}")
    if number < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {reprlib.repr(value)}")
    return number


def coerce_flag(value: Any, name: str) -> bool | None:
    """Read a tri-state flag: True, False, or None when unset or unrecognised.

    Only ``True`` and the string ``"true"`` (any case) turn a flag on;
    ``False`` and ``"false"`` turn it off. Anything else is ignored.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    if value is not None:
        logger.debug(f"Ignoring {name}={reprlib.repr(value)}; expected true or false")
    return None
