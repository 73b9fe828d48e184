"""
Format decimal degrees as degree/minute/second strings.

The core formatter discards the sign. ``to_lat`` and ``to_lon`` add a
compass letter instead, and ``to_brng`` normalises into [0°, 360°).

Examples:
    >>> to_dms(51.477811111111116)
    '51°28′40″'
    >>> to_dms(51.477811111111116, 'dm')
    '51°28.67′'
    >>> to_lat(-51.477811111111116, 'dms', 2)
    '51°28′40.12″S'
    >>> to_brng(-450)
    '270°0′0″'
"""

from __future__ import annotations

import logging

from geodms.dms_config import DEFAULT_FORMAT, DmsFormat, DmsStyle
from geodms.types import Degrees

logger = logging.getLogger(__name__)

DEGREE_SIGN = "°"
PRIME = "′"
DOUBLE_PRIME = "″"


def _render(value: float, places: int) -> str:
    """Round value and render it without trailing zeros ("51", "28.67")."""
    if places == 0:
        return str(round(value))
    text = f"{round(value, places):.{places}f}"
    return text.rstrip("0").rstrip(".")


def normalize_bearing(degrees: float, fmt: DmsFormat = DEFAULT_FORMAT) -> Degrees:
    """Normalise degrees into [0, 360) as it will be displayed under fmt.

    A value that would render as 360 (either from float modulo or from
    rounding in the D style) is wrapped to 0.
    """
    brng = float(degrees) % 360.0
    if brng >= 360.0:
        brng = 0.0
    elif fmt.style is DmsStyle.D and round(brng, fmt.places) >= 360.0:
        brng = 0.0
    return Degrees(brng)


class DmsFormatter:
    """Formats angles with one fixed DmsFormat.

    Example:
        >>> fmt = DmsFormatter(DmsFormat.create("dm", 0))
        >>> fmt.lat(51.477811111111116)
        '51°29′N'
    """

    def __init__(self, fmt: DmsFormat | None = None):
        self._fmt = fmt if fmt is not None else DEFAULT_FORMAT

    @property
    def config(self) -> DmsFormat:
        return self._fmt

    def __repr__(self) -> str:
        return f"DmsFormatter(style={self._fmt.style.value!r}, places={self._fmt.places})"

    def format(self, degrees: float) -> str:
        """Format degrees without a sign or compass letter."""
        deg = abs(float(degrees))
        places = self._fmt.places

        if self._fmt.style is DmsStyle.D:
            return f"{_render(deg, places)}{DEGREE_SIGN}"

        d, remainder = divmod(deg, 1)
        if self._fmt.style is DmsStyle.DM:
            return f"{int(d)}{DEGREE_SIGN}{_render(remainder * 60, places)}{PRIME}"

        m, remainder = divmod(remainder * 60, 1)
        s = _render(remainder * 60, places)
        return f"{int(d)}{DEGREE_SIGN}{int(m)}{PRIME}{s}{DOUBLE_PRIME}"

    def lat(self, degrees: float) -> str:
        """Format a latitude, suffixed with N or S."""
        return self.format(degrees) + ("S" if degrees < 0 else "N")

    def lon(self, degrees: float) -> str:
        """Format a longitude, suffixed with E or W."""
        return self.format(degrees) + ("W" if degrees < 0 else "E")

    def bearing(self, degrees: float) -> str:
        """Format a bearing in the range 0°..360°."""
        return self.format(normalize_bearing(degrees, self._fmt))


def to_dms(degrees: float, style: DmsStyle | str = DmsStyle.DMS, decimal_places: int | None = None) -> str:
    """
    Convert decimal degrees to degrees/minutes/seconds.

    Degree, prime and double-prime symbols are added. The sign is discarded
    and no compass direction is added.

    Args:
        degrees: Decimal degrees
        style: 'd', 'dm' or 'dms' (default); anything else means 'dms'
        decimal_places: Decimal places on the last component. Default is
            4 for 'd', 2 for 'dm', 0 for 'dms'.

    Returns:
        Formatted angle, e.g. '51°28′40″'
    """
    return DmsFormatter(DmsFormat.create(style, decimal_places)).format(degrees)


def to_lat(degrees: float, style: DmsStyle | str = DmsStyle.DMS, decimal_places: int | None = None) -> str:
    """Convert decimal degrees to a latitude string suffixed with N/S."""
    return DmsFormatter(DmsFormat.create(style, decimal_places)).lat(degrees)


def to_lon(degrees: float, style: DmsStyle | str = DmsStyle.DMS, decimal_places: int | None = None) -> str:
    """Convert decimal degrees to a longitude string suffixed with E/W."""
    return DmsFormatter(DmsFormat.create(style, decimal_places)).lon(degrees)


def to_brng(degrees: float, style: DmsStyle | str = DmsStyle.DMS, decimal_places: int | None = None) -> str:
    """
    Convert decimal degrees to a bearing string in the range 0°..360°.

    Negative values wrap around (-90 -> 270). A value that would round up
    to 360 is shown as 0.
    """
    return DmsFormatter(DmsFormat.create(style, decimal_places)).bearing(degrees)
