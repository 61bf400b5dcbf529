from __future__ import annotations

from collections import Counter
from typing import List, Optional, Sequence

import pandas as pd

from wzc.zc.core.model import ZeroCrossing

_COLUMNS = [
    "id", "index", "polarity", "dominant_amplitude", "local_amplitude", "n_left", "n_right",
    "dominant_left_index", "dominant_right_index", "nearest_left_index", "nearest_right_index",
]


def crossings_to_frame(zcs: Sequence[ZeroCrossing]) -> pd.DataFrame:
    """One row per crossing, indexed by crossing id."""
    df = pd.DataFrame([zc.to_dict() for zc in zcs], columns=_COLUMNS)
    return df.set_index("id")


def _fmt_ampl(v: Optional[float]) -> str:
    return "-" if v is None else f"{v:.4g}"


def _compact_lines(zcs: Sequence[ZeroCrossing]) -> List[str]:
    counts = Counter(zc.polarity.value for zc in zcs)
    span = f"[{zcs[0].index}..{zcs[-1].index}]" if zcs else "[None..None]"
    amps = [zc.dominant_amplitude for zc in zcs if zc.dominant_amplitude is not None]
    best = f"{max(amps):.4g}" if amps else "-"
    return [
        f"zcs={len(zcs)} span={span} pos={counts.get('positive', 0)} "
        f"neg={counts.get('negative', 0)} unknown={counts.get('unknown', 0)} max_ampl={best}"
    ]


def _pretty_lines(zcs: Sequence[ZeroCrossing], max_rows: int) -> List[str]:
    lines = _compact_lines(zcs)
    for zc in zcs[:max_rows]:
        lines.append(
            f"- zc {zc.id} @ {zc.index} {zc.polarity.value} "
            f"g_ampl={_fmt_ampl(zc.dominant_amplitude)} l_ampl={_fmt_ampl(zc.local_amplitude)} "
            f"mms={len(zc.left_extrema)}/{len(zc.right_extrema)}"
        )
    if len(zcs) > max_rows:
        lines.append(f"... ({len(zcs) - max_rows} more crossings truncated)")
    return lines


def render_crossings_report(zcs: Sequence[ZeroCrossing], *, fmt: str = "compact", max_rows: int = 25) -> str:
    """Render a short text summary.

    fmt:
      - compact: single line with counts per polarity (default)
      - pretty : one line per crossing
    """
    fmt = (fmt or "compact").strip().lower()
    if fmt == "pretty":
        lines = _pretty_lines(zcs, max_rows)
    else:
        lines = _compact_lines(zcs)
    return "\n".join(lines)
