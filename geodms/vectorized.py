"""
numpy helpers for converting many angles at once.

Useful when a column of hand-entered coordinates has to become a float
array: unparseable entries come back as NaN rather than None so the result
stays a plain float64 array.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
import numpy.typing as npt

from geodms.dms_parser import parse_dms


def parse_dms_array(values: Iterable) -> npt.NDArray[np.float64]:
    """
    Parse each value with parse_dms().

    Args:
        values: Iterable of numbers and/or DMS strings

    Returns:
        1-D float64 array of decimal degrees, NaN where parsing failed
    """
    parsed = [parse_dms(v) for v in values]
    return np.array([np.nan if deg is None else deg for deg in parsed], dtype=np.float64)


def normalize_bearings(degrees: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Normalise angles into [0, 360) element-wise.

    Args:
        degrees: Scalar or array of angles in degrees

    Returns:
        Array of the same shape with every value in [0, 360)
    """
    brng = np.mod(np.asarray(degrees, dtype=np.float64), 360.0)
    # Tiny negative inputs give exactly 360.0 after float modulo
    return np.where(brng >= 360.0, 0.0, brng)
