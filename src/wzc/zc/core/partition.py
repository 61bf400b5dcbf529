"""Partition detail coefficients into zero crossings.

A crossing is recorded at sample i whenever coeff[i] * coeff[i-1] < 0, so a
zero-valued sample never triggers one. Extrema are consumed left to right:
- crossing 0 takes every extremum before it as its left bucket
- crossing k takes every extremum before crossing k+1 as its right bucket
  (before the last sample for the final crossing)
- the left bucket of crossing k is the right bucket of crossing k-1,
  reversed to nearest-first order

Extrema at or after the final boundary are dropped.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from wzc.data.types import Extremum, as_coefficients, normalize_extrema
from wzc.errors import InvalidArgument
from wzc.logging import get_logger
from wzc.zc.core.model import ZeroCrossing

log = get_logger("partition")


def find_crossing_indexes(coeffs: Sequence[float]) -> List[int]:
    """Indexes of the samples right after each strict sign flip."""
    return [i for i in range(1, len(coeffs)) if coeffs[i] * coeffs[i - 1] < 0]


def _check_extrema(mms: Sequence[Extremum], n: int, check_order: bool) -> None:
    prev = None
    for mm in mms:
        if mm.index < 0 or mm.index >= n:
            raise InvalidArgument(f"extremum {mm.id} index {mm.index} outside coefficients [0, {n})")
        if check_order and prev is not None and mm.index <= prev.index:
            raise InvalidArgument(
                f"extrema must be strictly ascending by index: {prev.index} then {mm.index}"
            )
        prev = mm


def build_zero_crossings(coeffs: Any, extrema: Any, *, check_order: bool = True) -> List[ZeroCrossing]:
    """Build the ordered zero crossing list with shared extrema buckets."""
    wdc = as_coefficients(coeffs)
    mms = normalize_extrema(extrema)
    _check_extrema(mms, len(wdc), check_order)

    indexes = find_crossing_indexes(wdc)
    log.debug("partition start", extra={"samples": len(wdc), "extrema": len(mms), "crossings": len(indexes)})

    zcs: List[ZeroCrossing] = []
    r_mms: List[Extremum] = []
    mm_id = 0

    for zc_id, index in enumerate(indexes):
        if zc_id > 0:
            l_mms = list(r_mms)
        else:
            l_mms = []
            while mm_id < len(mms) and mms[mm_id].index < index:
                l_mms.append(mms[mm_id])
                mm_id += 1
        l_mms.reverse()

        r_index = indexes[zc_id + 1] if zc_id < len(indexes) - 1 else len(wdc) - 1
        r_mms = []
        while mm_id < len(mms) and mms[mm_id].index < r_index:
            r_mms.append(mms[mm_id])
            mm_id += 1

        zcs.append(ZeroCrossing(index=index, id=zc_id, left_extrema=l_mms, right_extrema=r_mms))

    log.debug("partition done", extra={"crossings": len(zcs), "assigned": mm_id, "dropped": len(mms) - mm_id})
    return zcs
