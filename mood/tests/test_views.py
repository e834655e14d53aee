from datetime import datetime, timedelta, timezone as dt_timezone
from unittest.mock import patch

import pytest
from django.db import DatabaseError
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from mood.models import MoodEntry, MoodEntryQuerySet

pytestmark = pytest.mark.django_db

MOOD_URL = "/api/mood"


# ---- authentication ----


@pytest.mark.parametrize(
    "method,path",
    [
        ("post", "/api/mood"),
        ("get", "/api/mood/history"),
        ("get", "/api/mood/trends"),
        ("get", "/api/mood/stats"),
        ("get", "/api/mood/insights"),
        ("get", "/api/mood/patterns"),
        ("get", "/api/mood/export"),
        ("delete", "/api/mood/1"),
    ],
)
def test_requires_authentication(api_client, method, path):
    response = getattr(api_client, method)(path)

    assert response.status_code == 401
    assert response.data["success"] is False
    assert response.data["error"]


# ---- record mood ----


@pytest.mark.parametrize(
    "score,label",
    [(-2, "VERY_SAD"), (-1, "SAD"), (0, "NEUTRAL"), (1, "HAPPY"), (2, "VERY_HAPPY")],
)
def test_record_then_fetch_history(auth_client, user, score, label):
    before = timezone.now()
    response = auth_client.post(
        MOOD_URL, {"moodScore": score, "moodLabel": label}, format="json"
    )

    assert response.status_code == 201
    assert response.data["success"] is True
    data = response.data["data"]
    assert data["moodScore"] == score
    assert data["moodLabel"] == label
    assert data["source"] == "USER_ENTRY"
    assert data["userId"] == user.id

    history = auth_client.get(f"{MOOD_URL}/history").data["data"]
    assert len(history) == 1
    assert history[0]["moodScore"] == score
    assert history[0]["moodLabel"] == label
    recorded_at = parse_datetime(history[0]["timestamp"])
    assert before <= recorded_at <= timezone.now()


def test_record_sanitizes_and_hashes_note(auth_client):
    response = auth_client.post(
        MOOD_URL,
        {
            "moodScore": -1,
            "moodLabel": "SAD",
            "note": "Call John Smith at 5551234567 or john@x.com",
            "source": "PROMPT",
            "emotionTags": ["tired", "anxious", "tired"],
            "metadata": {"sessionId": "abc123", "deviceType": "ios"},
        },
        format="json",
    )

    assert response.status_code == 201
    data = response.data["data"]
    assert data["noteSummary"] == "[name] at [number] or [email]"
    assert data["source"] == "PROMPT"
    assert data["emotionTags"] == ["tired", "anxious"]
    assert data["metadata"] == {"sessionId": "abc123", "deviceType": "ios"}
    assert "noteHash" not in data
    assert "note" not in data

    stored = MoodEntry.objects.get()
    assert stored.note_hash and len(stored.note_hash) == 64


def test_blank_note_is_not_stored(auth_client):
    response = auth_client.post(
        MOOD_URL, {"moodScore": 0, "moodLabel": "NEUTRAL", "note": "   "}, format="json"
    )

    assert response.status_code == 201
    stored = MoodEntry.objects.get()
    assert stored.note_summary is None
    assert stored.note_hash is None


@pytest.mark.parametrize(
    "payload",
    [
        {"moodScore": 3, "moodLabel": "HAPPY"},
        {"moodScore": 1, "moodLabel": "FURIOUS"},
        {"moodScore": "happy", "moodLabel": "HAPPY"},
        {"moodScore": "2", "moodLabel": "VERY_HAPPY"},
        {"moodScore": "-1", "moodLabel": "SAD"},
        {"moodScore": True, "moodLabel": "HAPPY"},
        {"moodScore": 1.5, "moodLabel": "HAPPY"},
        {"moodLabel": "HAPPY"},
        {"moodScore": 1},
        {"moodScore": 1, "moodLabel": "HAPPY", "source": "IMPORT"},
        {"moodScore": 1, "moodLabel": "HAPPY", "emotionTags": ["x" * 51]},
    ],
)
def test_record_rejects_invalid_payload(auth_client, payload):
    response = auth_client.post(MOOD_URL, payload, format="json")

    assert response.status_code == 400
    assert response.data["success"] is False
    assert response.data["error"]
    assert "details" in response.data
    assert MoodEntry.objects.count() == 0


def test_record_error_messages(auth_client):
    response = auth_client.post(MOOD_URL, {"moodScore": 3, "moodLabel": "HAPPY"}, format="json")
    assert "moodScore must be -2, -1, 0, 1, or 2" in response.data["error"]

    response = auth_client.post(MOOD_URL, {"moodLabel": "HAPPY"}, format="json")
    assert "moodScore and moodLabel are required" in response.data["error"]

    response = auth_client.post(MOOD_URL, {"moodScore": "2", "moodLabel": "VERY_HAPPY"}, format="json")
    assert "moodScore must be -2, -1, 0, 1, or 2" in response.data["error"]


def test_record_store_failure_returns_500(auth_client):
    with patch.object(
        MoodEntry.objects, "create", side_effect=DatabaseError("connection lost")
    ):
        response = auth_client.post(
            MOOD_URL, {"moodScore": 1, "moodLabel": "HAPPY"}, format="json"
        )

    assert response.status_code == 500
    assert response.data["error"] == "Failed to record mood entry"
    assert response.data["details"] == "connection lost"
    assert MoodEntry.objects.count() == 0


def test_trailing_slash_is_accepted(auth_client):
    response = auth_client.post(
        f"{MOOD_URL}/", {"moodScore": 1, "moodLabel": "HAPPY"}, format="json"
    )
    assert response.status_code == 201
    assert auth_client.get(f"{MOOD_URL}/history/").status_code == 200


# ---- history ----


def test_history_filters_by_range_newest_first(auth_client, make_entry):
    recent = make_entry(1, days_ago=1)
    today = make_entry(2, days_ago=0)
    older = make_entry(-1, days_ago=10)

    default = auth_client.get(f"{MOOD_URL}/history").data["data"]
    assert [e["id"] for e in default] == [today.id, recent.id]

    month = auth_client.get(f"{MOOD_URL}/history", {"range": "30d"}).data["data"]
    assert [e["id"] for e in month] == [today.id, recent.id, older.id]

    everything = auth_client.get(f"{MOOD_URL}/history", {"range": "all"}).data["data"]
    assert len(everything) == 3


def test_history_excludes_hash_and_other_users(auth_client, make_entry, other_user):
    make_entry(1, note_summary="fine", note_hash="a" * 64)
    make_entry(2, owner=other_user)

    data = auth_client.get(f"{MOOD_URL}/history").data["data"]

    assert len(data) == 1
    assert data[0]["noteSummary"] == "fine"
    assert "noteHash" not in data[0]


def test_history_is_capped(auth_client, make_entry, settings):
    settings.MOOD_SETTINGS = {"HISTORY_LIMIT": 2}
    for hours in range(1, 5):
        make_entry(0, hours_ago=hours)

    data = auth_client.get(f"{MOOD_URL}/history").data["data"]

    assert len(data) == 2


def test_history_rejects_unknown_range(auth_client):
    response = auth_client.get(f"{MOOD_URL}/history", {"range": "1y"})

    assert response.status_code == 400
    assert "Invalid range" in response.data["error"]


def test_history_store_failure_returns_500(auth_client):
    with patch.object(
        MoodEntryQuerySet, "since", side_effect=DatabaseError("timeout")
    ):
        response = auth_client.get(f"{MOOD_URL}/history")

    assert response.status_code == 500
    assert response.data["success"] is False
    assert response.data["details"] == "timeout"


# ---- trends ----


def test_trends_group_by_day(auth_client, make_entry):
    first = make_entry(1, days_ago=2)
    make_entry(2, days_ago=2, hours_ago=1)
    make_entry(0, days_ago=2, hours_ago=1)
    second = make_entry(-2, days_ago=1)
    make_entry(2, days_ago=20)

    data = auth_client.get(f"{MOOD_URL}/trends").data["data"]

    assert data == [
        {"period": first.timestamp.date().isoformat(), "averageScore": 1.0, "count": 3},
        {"period": second.timestamp.date().isoformat(), "averageScore": -2.0, "count": 1},
    ]


def test_trends_reject_all_range(auth_client, make_entry):
    make_entry(1)

    response = auth_client.get(f"{MOOD_URL}/trends", {"range": "all"})

    assert response.status_code == 400
    assert response.data["error"] == "Range 'all' not supported for trends"


# ---- stats ----


def test_stats_streak_and_distribution(auth_client, make_entry):
    for days_ago, score in enumerate([2, 2, 2, -2, -2]):
        make_entry(score, days_ago=days_ago)

    data = auth_client.get(f"{MOOD_URL}/stats").data["data"]

    assert data["totalEntries"] == 5
    assert data["averageScore"] == 0.4
    assert data["currentStreak"] == 5
    assert data["bestDay"]["score"] == 2
    assert data["distribution"]["VERY_HAPPY"] == 3
    assert data["distribution"]["VERY_SAD"] == 2
    assert data["distribution"]["NEUTRAL"] == 0


def test_stats_same_day_entries_truncate_streak(auth_client, make_entry):
    make_entry(1, hours_ago=1)
    make_entry(1, hours_ago=2)
    make_entry(1, days_ago=1)
    make_entry(1, days_ago=2)

    data = auth_client.get(f"{MOOD_URL}/stats").data["data"]

    assert data["currentStreak"] == 1


def test_stats_without_entries(auth_client):
    data = auth_client.get(f"{MOOD_URL}/stats").data["data"]

    assert data["totalEntries"] == 0
    assert data["averageScore"] == 0
    assert data["currentStreak"] == 0
    assert data["bestDay"] == {"date": timezone.now().date().isoformat(), "score": 0}


def test_stats_respect_range(auth_client, make_entry):
    make_entry(2, days_ago=45)
    make_entry(-1, days_ago=1)

    assert auth_client.get(f"{MOOD_URL}/stats").data["data"]["totalEntries"] == 1
    data = auth_client.get(f"{MOOD_URL}/stats", {"range": "90d"}).data["data"]
    assert data["totalEntries"] == 2
    assert data["averageScore"] == 0.5


# ---- insights ----


def test_insights_need_seven_entries(auth_client, make_entry):
    for hours in range(1, 7):
        make_entry(-1, hours_ago=hours)

    response = auth_client.get(f"{MOOD_URL}/insights")

    assert response.status_code == 200
    assert response.data["data"] == []
    assert response.data["message"] == "Not enough data for insights. Keep tracking!"


def test_insights_for_low_mood(auth_client, make_entry):
    for hours in range(1, 9):
        make_entry(-1, hours_ago=hours)

    data = auth_client.get(f"{MOOD_URL}/insights").data["data"]
    titles = [insight["title"] for insight in data]

    assert "Lower Mood Pattern Observed" in titles
    assert "Positive Mood Trend" not in titles
    assert data[0]["dataPoints"] == 8


def test_insights_use_latest_thirty_entries(auth_client, make_entry):
    for hours in range(1, 31):
        make_entry(2, hours_ago=hours)
    for days in range(5, 25):
        make_entry(-2, days_ago=days)

    data = auth_client.get(f"{MOOD_URL}/insights").data["data"]

    assert [insight["title"] for insight in data] == ["Positive Mood Trend"]
    assert data[0]["dataPoints"] == 30


# ---- patterns ----


def test_patterns_need_fourteen_entries(auth_client, make_entry):
    for hours in range(1, 14):
        make_entry(0, hours_ago=hours)

    response = auth_client.get(f"{MOOD_URL}/patterns")

    assert response.data["data"] == []
    assert response.data["message"] == "Not enough data for pattern detection"


def test_patterns_detect_downward_trend(auth_client, user):
    # All on one Wednesday so the weekday/weekend split cannot qualify
    wednesday = datetime(2024, 1, 3, 12, 0, tzinfo=dt_timezone.utc)
    for minutes in range(28):
        score = -2 if minutes < 14 else 2
        MoodEntry.objects.create(
            user=user,
            mood_score=score,
            mood_label="VERY_SAD" if score < 0 else "VERY_HAPPY",
            timestamp=wednesday - timedelta(minutes=minutes),
        )

    data = auth_client.get(f"{MOOD_URL}/patterns").data["data"]

    assert [pattern["type"] for pattern in data] == ["trend"]
    assert "downward" in data[0]["description"]
    assert data[0]["confidence"] == 0.85


# ---- delete ----


def test_delete_own_entry(auth_client, make_entry):
    entry = make_entry(1)

    response = auth_client.delete(f"{MOOD_URL}/{entry.id}")

    assert response.status_code == 200
    assert response.data == {"success": True, "message": "Mood entry deleted successfully"}
    assert not MoodEntry.objects.filter(pk=entry.id).exists()


def test_delete_other_users_entry_is_not_found(auth_client, make_entry, other_user):
    entry = make_entry(1, owner=other_user)

    response = auth_client.delete(f"{MOOD_URL}/{entry.id}")

    assert response.status_code == 404
    assert response.data["error"] == "Mood entry not found"
    assert MoodEntry.objects.filter(pk=entry.id).exists()


def test_delete_missing_entry_is_not_found(auth_client):
    response = auth_client.delete(f"{MOOD_URL}/999999")

    assert response.status_code == 404


# ---- export ----


def test_export_returns_everything_for_the_user(auth_client, make_entry, other_user):
    make_entry(1, days_ago=0)
    make_entry(-1, days_ago=200, note_summary="old", note_hash="b" * 64)
    make_entry(2, owner=other_user)

    response = auth_client.get(f"{MOOD_URL}/export")

    assert response.status_code == 200
    assert response.data["totalEntries"] == 2
    assert len(response.data["data"]) == 2
    assert response.data["exportedAt"]
    assert all("noteHash" not in entry for entry in response.data["data"])

    history = auth_client.get(f"{MOOD_URL}/history", {"range": "all"}).data["data"]
    assert response.data["data"] == history


def test_export_is_not_capped(auth_client, make_entry, settings):
    settings.MOOD_SETTINGS = {"HISTORY_LIMIT": 1}
    make_entry(1, hours_ago=1)
    make_entry(1, hours_ago=2)

    assert auth_client.get(f"{MOOD_URL}/export").data["totalEntries"] == 2


# ---- store failures ----


@pytest.mark.parametrize(
    "path,method,error",
    [
        ("/api/mood/trends", "daily_trends", "Failed to fetch mood trends"),
        ("/api/mood/stats", "since", "Failed to calculate mood statistics"),
        ("/api/mood/insights", "values_list", "Failed to generate insights"),
        ("/api/mood/patterns", "newest_first", "Failed to detect patterns"),
        ("/api/mood/export", "newest_first", "Failed to export mood data"),
    ],
)
def test_read_store_failure_returns_500(auth_client, make_entry, path, method, error):
    make_entry(1)

    with patch.object(
        MoodEntryQuerySet, method, side_effect=DatabaseError("connection reset")
    ):
        response = auth_client.get(path)

    assert response.status_code == 500
    assert response.data == {
        "success": False,
        "error": error,
        "details": "connection reset",
    }


def test_delete_store_failure_returns_500(auth_client, make_entry):
    entry = make_entry(1)

    with patch.object(MoodEntry, "delete", side_effect=DatabaseError("database is locked")):
        response = auth_client.delete(f"{MOOD_URL}/{entry.id}")

    assert response.status_code == 500
    assert response.data == {
        "success": False,
        "error": "Failed to delete mood entry",
        "details": "database is locked",
    }
    assert MoodEntry.objects.filter(pk=entry.id).exists()


def test_unexpected_failure_carries_details(auth_client, make_entry):
    make_entry(1)

    with patch.object(MoodEntryQuerySet, "since", side_effect=RuntimeError("clock skew")):
        response = auth_client.get(f"{MOOD_URL}/history")

    assert response.status_code == 500
    assert response.data["error"] == "Failed to fetch mood history"
    assert response.data["details"] == "clock skew"


def test_partial_range_override_keeps_other_defaults(auth_client, make_entry, settings):
    settings.MOOD_SETTINGS = {"DEFAULT_RANGES": {"history": "30d"}}
    make_entry(1, days_ago=10)

    assert len(auth_client.get(f"{MOOD_URL}/history").data["data"]) == 1
    stats = auth_client.get(f"{MOOD_URL}/stats")
    assert stats.status_code == 200
    assert stats.data["data"]["totalEntries"] == 1
