"""
Mood journal specific settings and configuration
"""

# Default Mood Settings
DEFAULT_MOOD_SETTINGS = {
    "NOTE_MAX_LENGTH": 500,  # characters, after sanitization
    "HISTORY_LIMIT": 1000,  # entries
    "DEFAULT_RANGES": {
        "history": "7d",
        "trends": "7d",
        "stats": "30d",
    },
    # Insights
    "INSIGHT_WINDOW": 30,  # most recent entries
    "INSIGHT_MIN_ENTRIES": 7,
    "LOW_MOOD_THRESHOLD": -0.5,
    "POSITIVE_MOOD_THRESHOLD": 0.5,
    "VARIABILITY_THRESHOLD": 1.5,
    # Patterns
    "PATTERN_WINDOW": 90,  # most recent entries
    "PATTERN_MIN_ENTRIES": 14,
    "TREND_WINDOW_SIZE": 14,
    "MIN_WEEKDAY_SAMPLES": 5,  # strictly more than
    "MIN_WEEKEND_SAMPLES": 2,  # strictly more than
    "PATTERN_MIN_DIFFERENCE": 0.5,
    "TIME_PATTERN_MAX_CONFIDENCE": 0.9,
    "TREND_PATTERN_MAX_CONFIDENCE": 0.85,
}


def get_mood_settings():
    """Get mood settings with fallbacks"""
    from django.conf import settings

    mood_settings = getattr(settings, "MOOD_SETTINGS", {})

    # Merge with defaults, nested dicts key by key
    final_settings = DEFAULT_MOOD_SETTINGS.copy()
    for key, value in mood_settings.items():
        default = DEFAULT_MOOD_SETTINGS.get(key)
        if isinstance(default, dict) and isinstance(value, dict):
            final_settings[key] = {**default, **value}
        else:
            final_settings[key] = value

    return final_settings
