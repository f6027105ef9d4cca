"""Audience-number normalisation and display formatting.

Follower ranges in a QueryState are expressed in thousands. Every follower
comparison and every follower label goes through ``followers_in_thousands``.
"""
from typing import Optional

from app.core.accessors import safe_number


def followers_in_thousands(raw_followers: Optional[float]) -> float:
    return safe_number(raw_followers) / 1000


def format_number(value: float) -> str:
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    return str(int(value))


def format_followers(thousands: float) -> str:
    """Slider label for a thousands-scaled value: 50 -> "50K", 1000 -> "1M"."""
    if thousands >= 1000:
        return f"{thousands / 1000:.0f}M"
    return f"{thousands:.0f}K"
