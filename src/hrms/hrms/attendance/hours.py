from __future__ import annotations

import math
from datetime import time


def worked_hours(check_in: time, check_out: time) -> float:
    """Clock delta in hours, rounded half-up to one decimal, never below 0."""
    minutes = (check_out.hour * 60 + check_out.minute) - (check_in.hour * 60 + check_in.minute)
    if minutes <= 0:
        return 0.0
    return math.floor(minutes / 60 * 10 + 0.5) / 10
