from __future__ import annotations


def format_expires_in(seconds: int | None) -> str:
    if seconds is None:
        return "-"
    if seconds <= 0:
        return "0s"
    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        minutes = seconds // 60
        secs = seconds % 60
        return f"{minutes}m{secs:02d}s"
    if seconds < 86400:
        hours = seconds // 3600
        minutes = (seconds % 3600) // 60
        return f"{hours}h{minutes:02d}m"
    days = seconds // 86400
    hours = (seconds % 86400) // 3600
    return f"{days}d{hours:02d}h"
