# batch_maker/services/extractors.py
from __future__ import annotations

import math
import re
from typing import Optional

TIME_UNITS = ("minutes", "minute", "mins", "min", "hours", "hour", "hrs", "hr")

_UNIT_ALT = "|".join(TIME_UNITS)
_NUM = r"(\d+(?:\.\d+)?)"

# Range wins over a single value; only the lower bound is kept.
_TIME_PATTERNS = (
    re.compile(rf"{_NUM}\s*(?:to|-|–)\s*{_NUM}\s*({_UNIT_ALT})\b", flags=re.IGNORECASE),
    re.compile(rf"{_NUM}\s*({_UNIT_ALT})\b", flags=re.IGNORECASE),
)

_TEMP_RE = re.compile(
    r"(\d+)\s*(?:°|degrees?)?\s*([CF])(?:elsius|ahrenheit)?\b",
    flags=re.IGNORECASE,
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def extract_time(text: str) -> Optional[int]:
    """First duration mentioned in `text`, in whole minutes."""
    for pattern in _TIME_PATTERNS:
        m = pattern.search(text or "")
        if not m:
            continue
        value = float(m.group(1))
        if not math.isfinite(value):
            return None
        unit = m.group(m.lastindex).lower()
        if unit.startswith("h"):
            return _round_half_up(value * 60)
        return _round_half_up(value)
    return None


def extract_temperature(text: str) -> Optional[str]:
    m = _TEMP_RE.search(text or "")
    if not m:
        return None
    return f"{m.group(1)}°{m.group(2).upper()}"
