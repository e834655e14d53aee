from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

pytestmark = pytest.mark.django_db


def test_summary_prints_stats_and_insights(user, make_entry):
    for hours in range(1, 9):
        make_entry(2, hours_ago=hours)

    out = StringIO()
    call_command("mood_summary", user_id=user.id, stdout=out)
    output = out.getvalue()

    assert f"MOOD SUMMARY: {user.username} (30d)" in output
    assert "Entries: 8" in output
    assert "Average score: 2.0" in output
    assert "Positive Mood Trend" in output
    assert "Not enough data for pattern detection" in output


def test_summary_without_entries(user):
    out = StringIO()
    call_command("mood_summary", user_id=user.id, range="all", stdout=out)
    output = out.getvalue()

    assert "Entries: 0" in output
    assert "Not enough data for insights. Keep tracking!" in output


def test_summary_unknown_user():
    with pytest.raises(CommandError):
        call_command("mood_summary", user_id=424242, stdout=StringIO())
