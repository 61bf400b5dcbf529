"""Restrict the zero crossing list to a window [begin_index, end_index).

Crossings kept are those with begin_index < index < end_index - 1. The
extrema buckets of the first and last kept crossings are clipped to the
window; a real extremum cut off by the window edge is replaced by a
synthetic one sitting on the edge sample, valued from the coefficients.

`ids_zcs` is the externally built per-sample lookup: ids_zcs[i] is the id
of the crossing whose index is closest to sample i, ties going to the lower
id, or -1 when no crossing is at or before i. A lookup holding the last
crossing at or before i resolves to the same ids, since get_closest_zc_id
always compares the entry with its successor.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from wzc.data.types import Extremum, as_coefficients
from wzc.errors import InvalidArgument
from wzc.logging import get_logger
from wzc.zc.core.model import ZeroCrossing

log = get_logger("window")


def get_closest_zc_id(zcs: Sequence[ZeroCrossing], ids_zcs: Sequence[int], index: int) -> int:
    """Id of the crossing closest to `index`; ties go to the lower id."""
    if not zcs:
        raise InvalidArgument("cannot resolve a crossing id in an empty crossing list")
    if index < 0 or index >= len(ids_zcs):
        raise InvalidArgument(f"index {index} outside crossing lookup [0, {len(ids_zcs)})")

    zc_id = int(ids_zcs[index])
    if zc_id == -1:
        return 0
    if zc_id < -1 or zc_id >= len(zcs):
        raise InvalidArgument(f"lookup entry {zc_id} at index {index} is not a crossing id")
    if zc_id == len(zcs) - 1:
        return zc_id

    first = abs(zcs[zc_id].index - index)
    second = abs(zcs[zc_id + 1].index - index)
    return zc_id if first <= second else zc_id + 1


def _clip_left(wdc: Sequence[float], mms: Sequence[Extremum], begin: int) -> List[Extremum]:
    num_passed = 0
    while num_passed < len(mms) and mms[num_passed].index >= begin:
        num_passed += 1
    if num_passed == 0:
        return [Extremum.from_coefficients(wdc, begin, mms[0].id)]
    out = list(mms[:num_passed])
    if len(mms) > num_passed:
        out.append(Extremum.from_coefficients(wdc, begin, mms[num_passed].id))
    return out


def _clip_right(wdc: Sequence[float], mms: Sequence[Extremum], end: int) -> List[Extremum]:
    num_passed = 0
    while num_passed < len(mms) and mms[num_passed].index <= end:
        num_passed += 1
    if num_passed == 0:
        return [Extremum.from_coefficients(wdc, end, mms[-1].id)]
    out = list(mms[:num_passed])
    if len(mms) > num_passed:
        out.append(Extremum.from_coefficients(wdc, end, mms[num_passed].id))
    return out


def get_zcs_in_window(
    coeffs: Any,
    zcs: Sequence[ZeroCrossing],
    ids_zcs: Sequence[int],
    begin_index: int,
    end_index: int,
) -> List[ZeroCrossing]:
    """Crossings inside [begin_index, end_index) with boundary buckets clipped.

    The full list is never modified; clipped boundary crossings are new objects.
    """
    wdc = as_coefficients(coeffs)
    if begin_index < 0 or end_index > len(wdc) or begin_index >= end_index:
        raise InvalidArgument(
            f"window [{begin_index}, {end_index}) invalid for {len(wdc)} coefficients"
        )

    # no crossing can satisfy begin_index + 1 <= index < end_index - 1
    if not zcs or end_index - begin_index <= 2:
        log.debug("window empty", extra={"begin": begin_index, "end": end_index, "crossings": len(zcs)})
        return []

    begin_for_zc = begin_index + 1
    end_for_zc = end_index - 1
    end_for_mm = end_index - 1

    begin_id = get_closest_zc_id(zcs, ids_zcs, begin_for_zc)
    if zcs[begin_id].index < begin_for_zc:
        begin_id += 1
    end_id = get_closest_zc_id(zcs, ids_zcs, end_for_zc)
    if zcs[end_id].index >= end_for_zc:
        end_id -= 1
    if end_id < begin_id - 1:
        raise InvalidArgument(
            f"lookup resolved end id {end_id} before begin id {begin_id} for window [{begin_index}, {end_index})"
        )

    target = list(zcs[begin_id:end_id + 1])
    log.debug(
        "window resolved",
        extra={"begin": begin_index, "end": end_index, "begin_id": begin_id, "end_id": end_id, "kept": len(target)},
    )
    if not target:
        return target

    left_zc = target[0]
    if left_zc.left_extrema:
        target[0] = left_zc.with_left_extrema(_clip_left(wdc, left_zc.left_extrema, begin_index))
        log.debug("window clip left", extra={"zc": left_zc.id, "before": len(left_zc.left_extrema), "after": len(target[0].left_extrema), "polarity": target[0].polarity})

    right_zc = target[-1]
    if right_zc.right_extrema:
        target[-1] = right_zc.with_right_extrema(_clip_right(wdc, right_zc.right_extrema, end_for_mm))
        log.debug("window clip right", extra={"zc": right_zc.id, "before": len(right_zc.right_extrema), "after": len(target[-1].right_extrema), "polarity": target[-1].polarity})

    return target
