from __future__ import annotations
import math


def format_duration(seconds: float, compact: bool = False) -> str:
    """Format seconds as 00h:00m:00.00s, or 00:00:00 when compact."""
    s = float(seconds)
    hours = math.floor(s / 3600)
    minutes = math.floor((s - hours * 3600) / 60)
    secs = s - hours * 3600 - minutes * 60
    if compact:
        return "%02d:%02d:%02d" % (hours, minutes, int(secs))
    return "%02dh:%02dm:%05.2fs" % (hours, minutes, secs)
