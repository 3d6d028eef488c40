"""Field-level parsing and formatting.

Every function here is total: malformed input maps to a documented default
instead of raising, so the parser can repair irregular headers field by
field.
"""

import math
import re

from bdfedit.domain.font import PropertyValue

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_WHOLE_INT = re.compile(r"[+-]?[0-9]+")
_DIGITS = re.compile(r"[0-9]+")
_QUOTED = re.compile(r'"(.*)"', re.DOTALL)


def to_int(token: str | None, default: int) -> int:
    """Parse the leading decimal integer of a token.

    Trailing text after the digits is ignored, so ``"12px"`` gives 12.

    Args:
        token: Token text, or None when the token is missing
        default: Value returned when no integer can be read

    Returns:
        Parsed integer or ``default``
    """
    if token is None:
        return default
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else default


def safe_int(value: object) -> int:
    """Coerce a model field to an int for output.

    Floats are truncated toward zero; NaN, infinities and non-numbers give 0.
    """
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return math.trunc(value) if math.isfinite(value) else 0
    return 0


def parse_property_value(text: str) -> PropertyValue:
    """Infer a property value from its surface syntax.

    Args:
        text: Everything after the property name, trimmed

    Returns:
        Inner text for a double-quoted value, an int for a bare decimal
        integer, otherwise the text unchanged
    """
    if not text:
        return ""
    quoted = _QUOTED.fullmatch(text)
    if quoted:
        return quoted.group(1)
    if _WHOLE_INT.fullmatch(text):
        return int(text)
    return text


def format_property_value(value: PropertyValue) -> str:
    """Format a property value for a properties line.

    Ints and all-digit strings are written bare; every other string is
    wrapped in double quotes without escaping.
    """
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, str):
        if _DIGITS.fullmatch(value):
            return value
        return f'"{value}"'
    return "" if value is None else str(value)
