"""Helpers for classifying input values, coercing dates and parsing patterns."""

import math
import numbers
import re
from collections.abc import Mapping
from datetime import date, datetime, timedelta, timezone
from typing import Any


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# ISO dates without zero padding, e.g. "2019-1-1" or "2019/1/1"
_LOOSE_DATE = re.compile(r"^(\d{4})[-/](\d{1,2})[-/](\d{1,2})$")

_PATTERN_LITERAL = re.compile(r"^/(.+)/([a-z]*)$", re.DOTALL)

# JavaScript-style flags accepted in a pattern literal. "g" and "u" have no
# effect on a single search.
PATTERN_FLAGS: dict[str, int] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "u": 0,
    "g": 0,
}

# Flags a compiled pattern may carry and still be written as a literal
_LITERAL_FLAGS = re.IGNORECASE | re.MULTILINE | re.DOTALL | re.UNICODE


# =============================================================================
# Kinds
# =============================================================================


def kind_of(value: Any) -> str:
    """Return the basic kind of a value.

    Kinds are "null", "boolean", "number", "string", "date", "object" and
    "array". Anything else reports its Python type name.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Real):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (date, datetime)):
        return "date"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def is_number(value: Any) -> bool:
    """True for real numbers other than booleans and NaN."""
    if kind_of(value) != "number":
        return False
    return isinstance(value, numbers.Rational) or not math.isnan(value)


def is_finite_number(value: Any) -> bool:
    """True for real numbers other than booleans, NaN and infinities.

    Integers and fractions are never converted to float.
    """
    if kind_of(value) != "number":
        return False
    return isinstance(value, numbers.Rational) or math.isfinite(value)


# =============================================================================
# Dates
# =============================================================================


def parse_date(text: str) -> datetime | None:
    """Parse an ISO-like date string. Naive results are taken as UTC.

    Returns None when the string is not a date.
    """
    text = text.strip()
    if not text:
        return None

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        match = _LOOSE_DATE.match(text)
        if not match:
            return None
        try:
            parsed = datetime(*(int(part) for part in match.groups()))
        except ValueError:
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_datetime(value: Any) -> datetime | None:
    """Coerce a date, datetime or date string to an aware datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, str):
        return parse_date(value)
    return None


def to_timestamp(value: Any) -> int | None:
    """Millisecond timestamp of a date-like value, or None if not date-like."""
    moment = to_datetime(value)
    if moment is None:
        return None
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def format_date(value: Any) -> str:
    """Render a date boundary the way the rule author wrote it."""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


# =============================================================================
# Patterns
# =============================================================================


def parse_pattern(literal: str) -> re.Pattern:
    """Compile a ``/body/flags`` literal.

    Raises:
        ValueError: If the literal is malformed, uses an unknown flag, or
            the body is not a valid regular expression
    """
    match = _PATTERN_LITERAL.match(literal)
    if not match:
        raise ValueError(f"'{literal}' is not a /pattern/flags literal")

    body, flag_letters = match.groups()
    flags = 0
    for letter in flag_letters:
        if letter not in PATTERN_FLAGS:
            raise ValueError(f"unsupported flag '{letter}'")
        flags |= PATTERN_FLAGS[letter]

    if not flags & re.MULTILINE:
        body = _strict_end_anchors(body)

    try:
        return re.compile(body, flags)
    except re.error as e:
        raise ValueError(str(e)) from e


def _strict_end_anchors(body: str) -> str:
    """Replace unescaped ``$`` outside character classes with ``\\Z``.

    Without the multiline flag a literal's ``$`` matches only at the very end
    of the string, while Python's ``$`` also matches before a final newline.
    """
    parts = []
    escaped = in_class = False
    for char in body:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif in_class:
            in_class = char != "]"
        elif char == "[":
            in_class = True
        elif char == "$":
            parts.append(r"\Z")
            continue
        parts.append(char)
    return "".join(parts)


def pattern_to_literal(expression: re.Pattern) -> str:
    """Convert a compiled pattern back to its ``/body/flags`` literal.

    Raises:
        ValueError: If the pattern is a bytes pattern or carries flags other
            than IGNORECASE, MULTILINE and DOTALL
    """
    if not isinstance(expression.pattern, str):
        raise ValueError("only str patterns can be written as /pattern/flags literals")
    if expression.flags & ~_LITERAL_FLAGS:
        raise ValueError(
            "only the IGNORECASE, MULTILINE and DOTALL flags can be written in a "
            "/pattern/flags literal"
        )

    letters = ""
    if expression.flags & re.IGNORECASE:
        letters += "i"
    if expression.flags & re.MULTILINE:
        letters += "m"
    if expression.flags & re.DOTALL:
        letters += "s"
    return f"/{expression.pattern}/{letters}"
