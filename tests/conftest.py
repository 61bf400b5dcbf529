from __future__ import annotations

from typing import List, Sequence

import pytest

from wzc.data.types import Extremum
from wzc.zc.core.model import ZeroCrossing
from wzc.zc.core.partition import build_zero_crossings


def build_lookup(zcs: Sequence[ZeroCrossing], n: int) -> List[int]:
    """Per-sample id of the last crossing at or before the sample, -1 before the first."""
    ids = [-1] * n
    cur = -1
    j = 0
    for i in range(n):
        while j < len(zcs) and zcs[j].index <= i:
            cur = zcs[j].id
            j += 1
        ids[i] = cur
    return ids


def build_nearest_lookup(zcs: Sequence[ZeroCrossing], n: int) -> List[int]:
    """Per-sample id of the closest crossing, ties to the lower id; -1 only without crossings."""
    if not zcs:
        return [-1] * n
    return [min(zcs, key=lambda zc: (abs(zc.index - i), zc.id)).id for i in range(n)]


# crossings at 4, 7, 11, 16
COEFFS = [0.5, 1, 2, 1, -1, -3, -1, 1, 4, 2, 1, -1, -2, -5, -2, -1, 1, 2, 1, 0.5]

EXTREMA = [
    Extremum(1, 1.0, 10),
    Extremum(2, 2.0, 11),
    Extremum(5, -3.0, 12),
    Extremum(8, 4.0, 13),
    Extremum(10, 1.0, 14),
    Extremum(13, -5.0, 15),
    Extremum(15, -1.0, 16),
    Extremum(17, 2.0, 17),
    Extremum(18, 1.0, 18),
]


@pytest.fixture
def coeffs() -> List[float]:
    return list(COEFFS)


@pytest.fixture
def extrema() -> List[Extremum]:
    return list(EXTREMA)


@pytest.fixture
def zcs(coeffs, extrema) -> List[ZeroCrossing]:
    return build_zero_crossings(coeffs, extrema)


@pytest.fixture
def lookup(zcs, coeffs) -> List[int]:
    return build_lookup(zcs, len(coeffs))
