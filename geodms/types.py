"""
Unit type annotations for angle values.

Angles handled by geodms are plain floats at runtime. The ``Degrees`` alias
documents which parameters and return values carry decimal degrees, so that
a static type checker (mypy) can tell them apart from raw minute or second
counts.

Usage Example:
    >>> from geodms.types import Degrees
    >>>
    >>> def halfway(a: Degrees, b: Degrees) -> Degrees:
    ...     return Degrees((a + b) / 2)
"""

from typing import NewType

Degrees = NewType('Degrees', float)
"""Angle in decimal degrees (e.g., latitude, longitude, bearing)"""
