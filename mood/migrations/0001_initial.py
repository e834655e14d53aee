import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="MoodEntry",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "timestamp",
                    models.DateTimeField(
                        db_index=True, default=django.utils.timezone.now
                    ),
                ),
                (
                    "mood_score",
                    models.SmallIntegerField(
                        choices=[
                            (-2, "Very sad"),
                            (-1, "Sad"),
                            (0, "Neutral"),
                            (1, "Happy"),
                            (2, "Very happy"),
                        ]
                    ),
                ),
                (
                    "mood_label",
                    models.CharField(
                        choices=[
                            ("VERY_SAD", "Very Sad"),
                            ("SAD", "Sad"),
                            ("NEUTRAL", "Neutral"),
                            ("HAPPY", "Happy"),
                            ("VERY_HAPPY", "Very Happy"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "note_summary",
                    models.CharField(blank=True, max_length=1000, null=True),
                ),
                ("note_hash", models.CharField(blank=True, max_length=64, null=True)),
                ("emotion_tags", models.JSONField(blank=True, default=list)),
                (
                    "source",
                    models.CharField(
                        choices=[
                            ("USER_ENTRY", "User Entry"),
                            ("SESSION_END", "Session End"),
                            ("PROMPT", "Prompt"),
                        ],
                        default="USER_ENTRY",
                        max_length=20,
                    ),
                ),
                ("metadata", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="mood_entries",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "Mood Entries",
                "db_table": "mood_entries",
                "ordering": ["-timestamp"],
                "indexes": [
                    models.Index(
                        fields=["user", "-timestamp"], name="mood_entry_user_ts_idx"
                    ),
                    models.Index(
                        fields=["user", "mood_score"],
                        name="mood_entry_user_score_idx",
                    ),
                    models.Index(
                        fields=["user", "-created_at"],
                        name="mood_entry_user_created_idx",
                    ),
                ],
            },
        ),
    ]
