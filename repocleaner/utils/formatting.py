"""Text formatting utilities."""

from datetime import datetime, timezone
from typing import Optional


def format_timestamp(timestamp: datetime, now: Optional[datetime] = None) -> str:
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    diff = now - timestamp

    if diff.days < 0:
        return "Just now"
    if diff.days == 0:
        if diff.seconds < 60:
            return "Just now"
        elif diff.seconds < 3600:
            minutes = diff.seconds // 60
            return f"{minutes}m ago"
        else:
            hours = diff.seconds // 3600
            return f"{hours}h ago"
    elif diff.days == 1:
        return "Yesterday"
    elif diff.days < 7:
        return f"{diff.days}d ago"
    elif timestamp.year == now.year:
        return timestamp.strftime("%b %d")
    return timestamp.strftime("%b %d, %Y")


def format_count(count: int) -> str:
    """Compact star/fork counts: 999, 1.2k, 12k, 1.5M."""
    if count < 1000:
        return str(count)
    if count < 1_000_000:
        value = count / 1000
        return f"{value:.1f}k" if round(value, 1) < 10 else f"{round(value)}k"
    value = count / 1_000_000
    return f"{value:.1f}M" if round(value, 1) < 10 else f"{round(value)}M"


def format_result_count(total: int, mirror_size: int, searching: bool) -> str:
    """Badge text next to the page title: '7' or '7 of 42' while searching."""
    if searching:
        return f"{total} of {mirror_size}"
    return str(total)
