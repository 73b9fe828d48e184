"""
Geodetic DMS Conversion Package.

Converts between human-entered degree/minute/second angle strings and
decimal degrees.

Example Usage:
    >>> from geodms import parse_dms, to_lat, to_lon, to_brng
    >>>
    >>> lat = parse_dms('51° 28′ 40.12″ N')
    >>> lon = parse_dms('000° 00′ 05.31″ W')
    >>> to_lat(lat, 'dms', 2)
    '51°28′40.12″N'
    >>> to_lon(lon, 'dms', 2)
    '0°0′5.31″W'
    >>> to_brng(-90)
    '270°0′0″'

Available API:
    Parsing:
        - parse_dms: DMS string or number to decimal degrees (None on failure)
        - parse_dms_array: Many values to a float64 array (NaN on failure)

    Formatting:
        - to_dms, to_lat, to_lon, to_brng: Decimal degrees to text
        - DmsFormatter: The same operations bound to one DmsFormat
        - normalize_bearings: Element-wise normalisation into [0, 360)

    Configuration:
        - DmsFormat: Style and decimal places (dict/YAML loadable)
        - DmsStyle: Enum of 'd', 'dm', 'dms'
"""

from geodms.dms_config import DmsFormat, DmsStyle
from geodms.dms_formatter import DmsFormatter, to_brng, to_dms, to_lat, to_lon
from geodms.dms_parser import parse_dms
from geodms.vectorized import normalize_bearings, parse_dms_array

__all__ = [
    # Parsing
    'parse_dms',
    'parse_dms_array',

    # Formatting
    'to_dms',
    'to_lat',
    'to_lon',
    'to_brng',
    'DmsFormatter',
    'normalize_bearings',

    # Configuration
    'DmsFormat',
    'DmsStyle',
]

__version__ = '0.1.0'
__description__ = 'Degree/minute/second parsing and formatting for geodetic coordinates'
