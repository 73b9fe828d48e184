"""
Parse degree/minute/second strings into decimal degrees.

The parser is deliberately permissive. Any run of characters other than
digits, '.' and ',' separates the numeric parts, so all of these work:

    - "51° 28′ 40.12″ N"
    - "3º 37' 09\"W"
    - "73/59/11E"
    - "-27.389"
    - "0033709W"   (fixed-width ddmmss with no separators)
    - "00337W"     (fixed-width dddmm with no separators)

Minimal validation is done: minutes or seconds of 60 and above are simply
added in.
"""

import logging
import math
import numbers
import re

from geodms.types import Degrees

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[^0-9.,]+")
_LEADING_NUMBER = re.compile(r"\d*\.\d+|\d+")

# Digit counts of fixed-width forms: 2-3 degree digits + 2 minute digits,
# or 1-3 degree digits + 2 minute digits + 2 second digits
_FIXED_WIDTH_DM = (4, 5)
_FIXED_WIDTH_DMS = (6, 7)


def _to_number(token: str) -> float:
    """Read the leading decimal number of a token ("12,5" -> 12.0, "," -> 0.0)."""
    match = _LEADING_NUMBER.match(token)
    return float(match.group()) if match else 0.0


def _single_part(token: str) -> float:
    """Interpret a lone numeric part as decimal degrees or a fixed-width form."""
    if token.isdigit():
        if len(token) in _FIXED_WIDTH_DM:
            return _to_number(token[:-2]) + _to_number(token[-2:]) / 60
        if len(token) in _FIXED_WIDTH_DMS:
            return (
                _to_number(token[:-4])
                + _to_number(token[-4:-2]) / 60
                + _to_number(token[-2:]) / 3600
            )
    return _to_number(token)


def parse_dms(value: numbers.Real | str | None) -> Degrees | None:
    """
    Convert a DMS string (or a number) to decimal degrees.

    Accepts signed decimal degrees, or degrees/minutes/seconds optionally
    suffixed by a compass direction. A leading '-' and a trailing 'S'/'W'
    (any case) each negate the result, so "-27.389S" is positive.

    Args:
        value: Finite number (returned unchanged) or string in any of the
            formats listed in the module docstring.

    Returns:
        Decimal degrees, or None if the text has no numeric parts or more
        than three of them.

    Examples:
        >>> parse_dms("40°44′55″S")
        -40.74861111111111
        >>> parse_dms("FRED") is None
        True
    """
    if isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value):
        return value

    text = str(value).strip()
    parts = [p for p in _SEPARATORS.split(text) if p]

    if len(parts) == 3:
        deg = _to_number(parts[0]) + _to_number(parts[1]) / 60 + _to_number(parts[2]) / 3600
    elif len(parts) == 2:
        deg = _to_number(parts[0]) + _to_number(parts[1]) / 60
    elif len(parts) == 1:
        deg = _single_part(parts[0])
    else:
        logger.debug(f"Unrecognised DMS format {text!r} ({len(parts)} numeric parts)")
        return None

    if text.startswith('-'):
        deg = -deg

    # West and south are negative
    if text[-1].upper() in ('W', 'S'):
        deg = -deg

    return Degrees(deg)
