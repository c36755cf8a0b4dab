# crema_backend/app/utils/numbers.py
from __future__ import annotations

import math
from typing import Any, Optional

# Purpose:
# A measurement counts as "given" only when it is present, non-zero and not NaN.
# Negative values are given; nothing here rejects them.
def is_given(x: Optional[float]) -> bool:
    if x is None:
        return False
    try:
        v = float(x)
    except (TypeError, ValueError):
        return False
    return v != 0 and not math.isnan(v)

# Purpose:
# Parse a brew ratio typed by a user. Accepts 2, 2.0, "2", "1:2" or "1:2.5".
# Returns None when the value cannot be read as a ratio.
def parse_ratio(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    s = str(value).strip()
    if not s:
        return None
    try:
        if ":" in s:
            lhs, rhs = s.split(":")
            num = float(lhs)
            if num == 0:
                return None
            return float(rhs) / num
        return float(s)
    except ValueError:
        return None
