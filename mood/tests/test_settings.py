from mood.settings import DEFAULT_MOOD_SETTINGS, get_mood_settings


def test_defaults_without_overrides(settings):
    settings.MOOD_SETTINGS = {}

    assert get_mood_settings() == DEFAULT_MOOD_SETTINGS


def test_nested_ranges_are_merged_per_key(settings):
    settings.MOOD_SETTINGS = {"DEFAULT_RANGES": {"history": "30d"}, "HISTORY_LIMIT": 50}

    cfg = get_mood_settings()

    assert cfg["DEFAULT_RANGES"] == {"history": "30d", "trends": "7d", "stats": "30d"}
    assert cfg["HISTORY_LIMIT"] == 50
    assert DEFAULT_MOOD_SETTINGS["DEFAULT_RANGES"]["history"] == "7d"
