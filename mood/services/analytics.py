# mood/services/analytics.py
"""
Date-range resolution and summary statistics over mood entries.

Every function here is pure: callers pass the entries (newest first, as
returned by ``MoodEntry.objects.newest_first()``) and an explicit ``now``.
Calendar dates are taken from the entry timestamps as stored (UTC).
"""

from typing import Dict, Any, List, Iterable, Optional
from datetime import datetime, timedelta
import math

RANGE_DAYS = {
    "7d": 7,
    "30d": 30,
    "90d": 90,
    "all": None,
}

MOOD_LABELS = ["VERY_SAD", "SAD", "NEUTRAL", "HAPPY", "VERY_HAPPY"]

SECONDS_PER_DAY = 24 * 60 * 60


class InvalidRange(ValueError):
    """Raised for a range value the endpoint does not accept"""


def resolve_range(
    range_value: str, now: datetime, allow_all: bool = True
) -> Optional[datetime]:
    """
    Turn a relative range ("7d", "30d", "90d", "all") into a cutoff timestamp.

    Returns ``None`` for "all" (no lower bound). Raises ``InvalidRange`` for
    unknown values, or for "all" when ``allow_all`` is False.
    """
    if range_value not in RANGE_DAYS:
        raise InvalidRange(
            f"Invalid range '{range_value}'. Must be one of: {', '.join(RANGE_DAYS)}"
        )

    days = RANGE_DAYS[range_value]
    if days is None:
        if not allow_all:
            raise InvalidRange("Range 'all' not supported for trends")
        return None

    return now - timedelta(days=days)


def round_half_up(value: float, digits: int = 2) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def average_score(scores: List[int]) -> float:
    if not scores:
        return 0
    return round_half_up(sum(scores) / len(scores))


def best_entry(entries: List[Any]):
    """Entry with the highest score; the first one seen wins ties"""
    best = None
    for entry in entries:
        if best is None or entry.mood_score > best.mood_score:
            best = entry
    return best


def label_distribution(entries: Iterable[Any]) -> Dict[str, int]:
    distribution = {label: 0 for label in MOOD_LABELS}
    for entry in entries:
        if entry.mood_label in distribution:
            distribution[entry.mood_label] += 1
    return distribution


def current_streak(timestamps: Iterable[datetime], now: datetime) -> int:
    """
    Count consecutive days with entries, ending today.

    The i-th most recent entry must be exactly i whole days (24h periods)
    old. A second entry on the same day therefore breaks the alignment and
    ends the streak early.
    """
    streak = 0
    for index, timestamp in enumerate(sorted(timestamps, reverse=True)):
        days_diff = math.floor((now - timestamp).total_seconds() / SECONDS_PER_DAY)
        if days_diff != index:
            break
        streak += 1
    return streak


def compute_stats(entries: List[Any], now: datetime) -> Dict[str, Any]:
    """Average, best day, streak and label distribution for a window of entries"""
    scores = [entry.mood_score for entry in entries]
    best = best_entry(entries)

    if best is not None:
        best_day = {"date": best.timestamp.date().isoformat(), "score": best.mood_score}
    else:
        best_day = {"date": now.date().isoformat(), "score": 0}

    return {
        "averageScore": average_score(scores),
        "totalEntries": len(entries),
        "bestDay": best_day,
        "currentStreak": current_streak([entry.timestamp for entry in entries], now),
        "distribution": label_distribution(entries),
    }


def format_trends(rows: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Shape ``MoodEntryQuerySet.daily_trends()`` rows for the API"""
    return [
        {
            "period": str(row["day"]),
            "averageScore": round(float(row["average_score"]), 2),
            "count": row["count"],
        }
        for row in rows
    ]
