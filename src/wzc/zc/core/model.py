"""Zero crossing of the wavelet detail coefficients.

A crossing owns two buckets of modulus maxima, both ordered nearest to the
crossing first:
- left_extrema: descending signal index
- right_extrema: ascending signal index

Derived fields (dominant/nearest extremum per side, amplitudes, polarity)
are computed at construction. Crossings are frozen; use with_left_extrema /
with_right_extrema to get a recomputed copy with a replaced bucket.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from wzc.data.types import Extremum


class Polarity(str, Enum):
    UNKNOWN = "unknown"
    POSITIVE = "positive"
    NEGATIVE = "negative"


def _dominant(mms: Tuple[Extremum, ...]) -> Optional[Extremum]:
    # max() keeps the first of equal candidates
    if not mms:
        return None
    return max(mms, key=lambda mm: abs(mm.value))


@dataclass(frozen=True)
class ZeroCrossing:
    index: int
    id: int
    left_extrema: Tuple[Extremum, ...] = ()
    right_extrema: Tuple[Extremum, ...] = ()

    dominant_left: Optional[Extremum] = field(init=False, default=None, compare=False)
    dominant_right: Optional[Extremum] = field(init=False, default=None, compare=False)
    nearest_left: Optional[Extremum] = field(init=False, default=None, compare=False)
    nearest_right: Optional[Extremum] = field(init=False, default=None, compare=False)
    dominant_amplitude: Optional[float] = field(init=False, default=None, compare=False)
    local_amplitude: Optional[float] = field(init=False, default=None, compare=False)
    polarity: Polarity = field(init=False, default=Polarity.UNKNOWN, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "left_extrema", tuple(self.left_extrema))
        object.__setattr__(self, "right_extrema", tuple(self.right_extrema))
        self._recompute()

    def _recompute(self) -> None:
        g_l = _dominant(self.left_extrema)
        g_r = _dominant(self.right_extrema)
        l_l = self.left_extrema[0] if self.left_extrema else None
        l_r = self.right_extrema[0] if self.right_extrema else None

        g_ampl: Optional[float] = None
        polarity = Polarity.UNKNOWN
        if g_l is not None and g_r is not None:
            g_ampl = abs(g_l.value) + abs(g_r.value)
            # anything but a negative-left / positive-right pair counts as negative
            if g_l.value < 0 and g_r.value > 0:
                polarity = Polarity.POSITIVE
            else:
                polarity = Polarity.NEGATIVE

        l_ampl: Optional[float] = None
        if l_l is not None and l_r is not None:
            l_ampl = abs(l_l.value) + abs(l_r.value)

        object.__setattr__(self, "dominant_left", g_l)
        object.__setattr__(self, "dominant_right", g_r)
        object.__setattr__(self, "nearest_left", l_l)
        object.__setattr__(self, "nearest_right", l_r)
        object.__setattr__(self, "dominant_amplitude", g_ampl)
        object.__setattr__(self, "local_amplitude", l_ampl)
        object.__setattr__(self, "polarity", polarity)

    def with_left_extrema(self, mms: Iterable[Extremum]) -> "ZeroCrossing":
        return replace(self, left_extrema=tuple(mms))

    def with_right_extrema(self, mms: Iterable[Extremum]) -> "ZeroCrossing":
        return replace(self, right_extrema=tuple(mms))

    def to_dict(self) -> Dict[str, Any]:
        def _idx(mm: Optional[Extremum]) -> Optional[int]:
            return mm.index if mm is not None else None

        return {
            "id": self.id,
            "index": self.index,
            "polarity": self.polarity.value,
            "dominant_amplitude": self.dominant_amplitude,
            "local_amplitude": self.local_amplitude,
            "n_left": len(self.left_extrema),
            "n_right": len(self.right_extrema),
            "dominant_left_index": _idx(self.dominant_left),
            "dominant_right_index": _idx(self.dominant_right),
            "nearest_left_index": _idx(self.nearest_left),
            "nearest_right_index": _idx(self.nearest_right),
        }
