"""Input records and coercion helpers.

Extrema come from an upstream modulus-maxima detector and can arrive in a
few shapes. We support:
- Extremum instances
- tuple: (index, value) or (index, value, id)
- dict or pandas Series row with keys: index/idx, value/px, id
- object with attributes: index/idx, value/px, id
- pandas DataFrame with columns index, value and optionally id

Everything is normalized to a list of Extremum. When no id is given, the
element's position in the supplied sequence is used.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

import pandas as pd

from wzc.errors import InvalidArgument


@dataclass(frozen=True)
class Extremum:
    """A modulus maximum of the wavelet transform."""

    index: int
    value: float
    id: int

    @staticmethod
    def from_coefficients(coeffs: Sequence[float], index: int, id: int) -> "Extremum":
        """Synthetic extremum at `index`, valued from the coefficient sequence."""
        if index < 0 or index >= len(coeffs):
            raise InvalidArgument(f"extremum index {index} outside coefficients [0, {len(coeffs)})")
        return Extremum(index=int(index), value=float(coeffs[index]), id=int(id))


def as_coefficients(obj: Any) -> List[float]:
    """Detail coefficients as a plain list of floats (list, numpy array or Series)."""
    if obj is None:
        raise InvalidArgument("coefficient sequence is required")
    if isinstance(obj, pd.DataFrame):
        if obj.shape[1] != 1:
            raise InvalidArgument(f"expected a single coefficient column, got {list(obj.columns)}")
        obj = obj.iloc[:, 0]
    if isinstance(obj, pd.Series):
        values = obj.tolist()
    elif hasattr(obj, "tolist"):
        values = obj.tolist()
    else:
        values = list(obj)
    if not values:
        raise InvalidArgument("coefficient sequence must not be empty")
    return [float(v) for v in values]


def _first_attr(obj: Any, names: Tuple[str, ...]) -> Optional[Any]:
    for n in names:
        if isinstance(obj, (dict, pd.Series)):
            if obj.get(n) is not None:
                return obj[n]
        elif hasattr(obj, n):
            return getattr(obj, n)
    return None


def _to_extremum(item: Any, pos: int) -> Extremum:
    if isinstance(item, Extremum):
        return item
    if isinstance(item, (tuple, list)):
        if len(item) == 2:
            return Extremum(index=int(item[0]), value=float(item[1]), id=pos)
        if len(item) == 3:
            return Extremum(index=int(item[0]), value=float(item[1]), id=int(item[2]))
        raise InvalidArgument(f"extremum tuple must be (index, value[, id]), got {item!r}")

    idx = _first_attr(item, ("index", "idx"))
    val = _first_attr(item, ("value", "px"))
    if idx is None or val is None:
        raise InvalidArgument(f"Unsupported extremum record: {item!r}")
    ident = _first_attr(item, ("id",))
    return Extremum(index=int(idx), value=float(val), id=pos if ident is None else int(ident))


def normalize_extrema(obj: Any) -> List[Extremum]:
    """Normalize the supported extremum representations to list[Extremum]."""
    if obj is None:
        return []
    if isinstance(obj, pd.DataFrame):
        missing = {"index", "value"} - set(obj.columns)
        if missing:
            raise InvalidArgument(f"extrema frame missing columns: {sorted(missing)}")
        ids = obj["id"].tolist() if "id" in obj.columns else range(len(obj))
        return [
            Extremum(index=int(i), value=float(v), id=int(k))
            for i, v, k in zip(obj["index"].tolist(), obj["value"].tolist(), ids)
        ]
    return [_to_extremum(item, pos) for pos, item in enumerate(obj)]
