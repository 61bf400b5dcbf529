from dataclasses import dataclass

import pandas as pd
import pytest

from wzc.data.types import Extremum, as_coefficients, normalize_extrema
from wzc.errors import InvalidArgument


@dataclass
class _MM:
    idx: int
    px: float
    id: int


def test_normalize_mixed_records():
    out = normalize_extrema([
        Extremum(1, 2.0, 7),
        (3, -1.0),
        (4, 1.5, 9),
        {"index": 6, "value": -0.5},
        {"idx": 8, "px": 3.0, "id": 12},
        _MM(idx=9, px=-2.0, id=13),
    ])
    assert out == [
        Extremum(1, 2.0, 7),
        Extremum(3, -1.0, 1),
        Extremum(4, 1.5, 9),
        Extremum(6, -0.5, 3),
        Extremum(8, 3.0, 12),
        Extremum(9, -2.0, 13),
    ]


def test_normalize_frame_without_ids():
    df = pd.DataFrame({"index": [2, 5], "value": [1.0, -3.0]})
    assert normalize_extrema(df) == [Extremum(2, 1.0, 0), Extremum(5, -3.0, 1)]


def test_normalize_rejects_bad_records():
    assert normalize_extrema(None) == []
    with pytest.raises(InvalidArgument):
        normalize_extrema([(1,)])
    with pytest.raises(InvalidArgument):
        normalize_extrema([{"index": 1}])
    with pytest.raises(InvalidArgument):
        normalize_extrema(pd.DataFrame({"index": [1]}))


def test_as_coefficients():
    assert as_coefficients([1, -2, 3]) == [1.0, -2.0, 3.0]
    assert as_coefficients(pd.Series([0.5, -0.5])) == [0.5, -0.5]
    assert as_coefficients(pd.DataFrame({"d1": [1, 2]})) == [1.0, 2.0]
    with pytest.raises(InvalidArgument):
        as_coefficients([])
    with pytest.raises(InvalidArgument):
        as_coefficients(None)
    with pytest.raises(InvalidArgument):
        as_coefficients(pd.DataFrame({"a": [1], "b": [2]}))


def test_extremum_from_coefficients():
    mm = Extremum.from_coefficients([0.1, -0.7, 0.3], 1, 42)
    assert mm == Extremum(1, -0.7, 42)
    with pytest.raises(InvalidArgument):
        Extremum.from_coefficients([0.1], 1, 0)


def test_normalize_series_rows():
    df = pd.DataFrame({"index": [2, 5], "value": [1.0, -3.0], "id": [4, 8]})
    out = normalize_extrema([row for _, row in df.iterrows()])
    assert out == [Extremum(2, 1.0, 4), Extremum(5, -3.0, 8)]

    with pytest.raises(InvalidArgument):
        normalize_extrema([pd.Series({"value": 1.0})])
