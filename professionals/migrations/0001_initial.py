import django.db.models.deletion
import django.utils.timezone
import professionals.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("posts", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ProfessionalProfile",
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
                ("license_number", models.CharField(max_length=100)),
                (
                    "license_type",
                    models.CharField(
                        choices=[
                            ("psychologist", "Psychologist"),
                            ("psychiatrist", "Psychiatrist"),
                            ("counselor", "Counselor"),
                            ("therapist", "Therapist"),
                            ("social_worker", "Social worker"),
                            ("other", "Other"),
                        ],
                        max_length=20,
                    ),
                ),
                ("issuing_authority", models.CharField(max_length=200)),
                (
                    "verification_status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("verified", "Verified"),
                            ("rejected", "Rejected"),
                        ],
                        default="pending",
                        max_length=20,
                    ),
                ),
                ("verified_at", models.DateTimeField(blank=True, null=True)),
                ("rejection_reason", models.TextField(blank=True)),
                ("specializations", models.JSONField(blank=True, default=list)),
                ("bio", models.TextField(blank=True, max_length=1000)),
                ("years_of_experience", models.PositiveIntegerField(default=0)),
                (
                    "institution_affiliation",
                    models.CharField(blank=True, max_length=200),
                ),
                ("daily_response_limit", models.PositiveIntegerField(default=20)),
                ("responses_given_today", models.PositiveIntegerField(default=0)),
                (
                    "last_response_reset",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                (
                    "opt_in_topics",
                    models.JSONField(
                        default=professionals.models.default_opt_in_topics
                    ),
                ),
                ("is_available", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="professional_profile",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "verified_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "professional_profiles",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["verification_status", "-created_at"],
                        name="prof_status_created_idx",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="ProfessionalResponse",
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
                    "response_type",
                    models.CharField(
                        choices=[
                            ("reflective", "Reflective"),
                            ("resource", "Resource"),
                            ("next_steps", "Next steps"),
                            ("encouragement", "Encouragement"),
                            ("combined", "Combined"),
                        ],
                        max_length=20,
                    ),
                ),
                ("content", models.JSONField(default=dict)),
                ("ai_assisted", models.BooleanField(default=False)),
                ("disclaimer_acknowledged", models.BooleanField(default=False)),
                ("is_visible", models.BooleanField(default=True)),
                ("edited_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "post",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="professional_responses",
                        to="posts.post",
                    ),
                ),
                (
                    "professional",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="professional_responses",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "professional_responses",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["post", "-created_at"], name="prof_resp_post_idx"
                    ),
                    models.Index(
                        fields=["professional", "-created_at"],
                        name="prof_resp_author_idx",
                    ),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("post", "professional"),
                        name="unique_response_per_post",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="ResponseTemplate",
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
                    "type",
                    models.CharField(
                        choices=[
                            ("reflective", "Reflective"),
                            ("resource", "Resource"),
                            ("next_steps", "Next steps"),
                            ("encouragement", "Encouragement"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("anxiety", "Anxiety"),
                            ("depression", "Depression"),
                            ("self-care", "Self-care"),
                            ("wellness", "Wellness"),
                            ("general", "General"),
                            ("all", "All"),
                        ],
                        default="all",
                        max_length=20,
                    ),
                ),
                ("title", models.CharField(max_length=100)),
                ("template", models.TextField(max_length=2000)),
                ("placeholders", models.JSONField(blank=True, default=list)),
                ("example_usage", models.CharField(blank=True, max_length=500)),
                ("is_active", models.BooleanField(default=True)),
                ("usage_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="response_templates",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "response_templates",
                "ordering": ["-usage_count", "id"],
                "indexes": [
                    models.Index(
                        fields=["type", "category", "is_active"],
                        name="template_lookup_idx",
                    ),
                ],
            },
        ),
    ]
