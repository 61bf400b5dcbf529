"""Zero crossings of wavelet detail coefficients and their modulus maxima."""

from __future__ import annotations

from wzc.data.types import Extremum, as_coefficients, normalize_extrema
from wzc.errors import InvalidArgument
from wzc.zc.core.model import Polarity, ZeroCrossing
from wzc.zc.core.partition import build_zero_crossings, find_crossing_indexes
from wzc.zc.core.window import get_closest_zc_id, get_zcs_in_window

__all__ = [
    "Extremum",
    "InvalidArgument",
    "Polarity",
    "ZeroCrossing",
    "as_coefficients",
    "build_zero_crossings",
    "find_crossing_indexes",
    "get_closest_zc_id",
    "get_zcs_in_window",
    "normalize_extrema",
]

__version__ = "0.1.0"
