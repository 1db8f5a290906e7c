"""Formatting helpers for the fleet telemetry dashboard."""

from __future__ import annotations


def format_duration(seconds: float | None) -> str:
    """Format seconds as h:mm:ss or '—' if None."""
    if seconds is None:
        return "—"
    total = int(round(seconds))
    hours, rem = divmod(total, 3600)
    mins, secs = divmod(rem, 60)
    return f"{hours}:{mins:02d}:{secs:02d}"


def format_distance(km: float | None) -> str:
    """Format kilometres with two decimals, switching to metres below 1 km."""
    if km is None:
        return "—"
    if km < 1:
        return f"{km * 1000:.0f} m"
    return f"{km:.2f} km"


def format_speed(kmh: float | None) -> str:
    if kmh is None:
        return "—"
    return f"{kmh:.1f} km/h"


def format_share(part: float, whole: float) -> str | None:
    """Format *part* as a percentage of *whole*, or None when *whole* is zero."""
    if whole <= 0:
        return None
    return f"{part / whole:.0%}"
