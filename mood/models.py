# mood/models.py
from django.conf import settings
from django.db import models
from django.db.models import Avg, Count
from django.db.models.functions import TruncDate
from django.utils import timezone


class MoodEntryQuerySet(models.QuerySet):
    def for_user(self, user):
        return self.filter(user=user)

    def since(self, cutoff):
        """Entries at or after ``cutoff``; ``None`` means no lower bound"""
        if cutoff is None:
            return self
        return self.filter(timestamp__gte=cutoff)

    def newest_first(self):
        return self.order_by("-timestamp")

    def daily_trends(self):
        """Per calendar day (UTC) average score and entry count, oldest day first"""
        return (
            self.annotate(day=TruncDate("timestamp"))
            .values("day")
            .annotate(average_score=Avg("mood_score"), count=Count("id"))
            .order_by("day")
        )


class MoodEntry(models.Model):
    """A single mood check-in. Entries are never edited, only deleted."""

    SCORE_CHOICES = [
        (-2, "Very sad"),
        (-1, "Sad"),
        (0, "Neutral"),
        (1, "Happy"),
        (2, "Very happy"),
    ]

    LABEL_CHOICES = [
        ("VERY_SAD", "Very Sad"),
        ("SAD", "Sad"),
        ("NEUTRAL", "Neutral"),
        ("HAPPY", "Happy"),
        ("VERY_HAPPY", "Very Happy"),
    ]

    SOURCE_CHOICES = [
        ("USER_ENTRY", "User Entry"),
        ("SESSION_END", "Session End"),
        ("PROMPT", "Prompt"),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="mood_entries",
    )
    timestamp = models.DateTimeField(default=timezone.now, db_index=True)
    mood_score = models.SmallIntegerField(choices=SCORE_CHOICES)
    mood_label = models.CharField(max_length=20, choices=LABEL_CHOICES)
    note_summary = models.CharField(max_length=1000, blank=True, null=True)
    # sha256 of the normalized raw note, kept for future deduplication
    note_hash = models.CharField(max_length=64, blank=True, null=True)
    emotion_tags = models.JSONField(default=list, blank=True)
    source = models.CharField(
        max_length=20, choices=SOURCE_CHOICES, default="USER_ENTRY"
    )
    metadata = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = MoodEntryQuerySet.as_manager()

    class Meta:
        db_table = "mood_entries"
        verbose_name_plural = "Mood Entries"
        ordering = ["-timestamp"]
        indexes = [
            models.Index(fields=["user", "-timestamp"], name="mood_entry_user_ts_idx"),
            models.Index(fields=["user", "mood_score"], name="mood_entry_user_score_idx"),
            models.Index(fields=["user", "-created_at"], name="mood_entry_user_created_idx"),
        ]

    def __str__(self):
        return f"{self.user} - {self.mood_label} ({self.mood_score}) @ {self.timestamp:%Y-%m-%d %H:%M}"
