from wzc.reporting.render import crossings_to_frame, render_crossings_report
from wzc.zc.core.model import ZeroCrossing


def test_crossings_to_frame(zcs):
    df = crossings_to_frame(zcs)
    assert list(df.index) == [0, 1, 2, 3]
    assert df.loc[1, "index"] == 7
    assert df.loc[1, "polarity"] == "positive"
    assert df.loc[2, "dominant_amplitude"] == 9.0
    assert df.loc[2, "nearest_left_index"] == 10
    assert df["n_right"].tolist() == [1, 2, 2, 2]


def test_crossings_to_frame_empty():
    df = crossings_to_frame([])
    assert df.empty
    assert "polarity" in df.columns


def test_compact_report(zcs):
    text = render_crossings_report(zcs)
    assert text == "zcs=4 span=[4..16] pos=2 neg=2 unknown=0 max_ampl=9"


def test_pretty_report_truncates(zcs):
    text = render_crossings_report(zcs, fmt="pretty", max_rows=2)
    lines = text.splitlines()
    assert lines[1] == "- zc 0 @ 4 negative g_ampl=5 l_ampl=5 mms=2/1"
    assert lines[2].startswith("- zc 1 @ 7 positive")
    assert lines[-1] == "... (2 more crossings truncated)"


def test_report_with_unknown_polarity():
    text = render_crossings_report([ZeroCrossing(index=3, id=0)], fmt="pretty")
    assert "unknown=1" in text
    assert "g_ampl=- l_ampl=-" in text
