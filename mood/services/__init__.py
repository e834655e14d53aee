from .sanitizer import sanitize_note, hash_note
from .analytics import InvalidRange, resolve_range, compute_stats, format_trends
from .insights import mood_insight_service, MoodInsightService

__all__ = [
    "sanitize_note",
    "hash_note",
    "InvalidRange",
    "resolve_range",
    "compute_stats",
    "format_trends",
    "mood_insight_service",
    "MoodInsightService",
]
