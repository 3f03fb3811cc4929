"""Input validation for saturation bounds.

Every value that reaches the configuration store passes through clamp().
Invalid input never raises: values with no leading integer degrade to 0
and integers outside the range are clamped to the nearest bound.
"""

import math
import re

SATURATION_MIN = 0
SATURATION_MAX = 255

# Leading sign and digits; anything after them is ignored
_LEADING_INT = re.compile(r'\s*([+-]?)([0-9]+)')

# Digit runs longer than this are out of range whatever their value
_MAX_DIGITS = len(str(SATURATION_MAX)) + 1


def _parse(raw) -> int:
    """Parse a raw value as an integer, returning 0 when it is not a number.

    Strings are read up to the first non-digit, so '150.5' is 150 and
    '12abc' is 12.
    """
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isnan(raw):
            return 0
        if math.isinf(raw):
            return SATURATION_MAX if raw > 0 else SATURATION_MIN
        return int(raw)

    match = _LEADING_INT.match(str(raw))
    if not match:
        return 0
    sign, digits = match.groups()
    digits = digits.lstrip('0') or '0'
    if len(digits) > _MAX_DIGITS:
        value = SATURATION_MAX + 1
    else:
        value = int(digits)
    return -value if sign == '-' else value


def clamp(raw: int | float | str | None) -> int:
    """Parse and clamp a raw saturation value into [0, 255].

    Args:
        raw: Integer, float, decimal integer string, or None

    Returns:
        Integer in [SATURATION_MIN, SATURATION_MAX]
    """
    return max(SATURATION_MIN, min(SATURATION_MAX, _parse(raw)))


def parse_optional(raw: int | float | str | None) -> int | None:
    """Clamp a query parameter, keeping None when the parameter was absent."""
    if raw is None:
        return None
    return clamp(raw)
