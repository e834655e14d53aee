import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Post",
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
                ("content", models.TextField(max_length=2000)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("anxiety", "Anxiety"),
                            ("depression", "Depression"),
                            ("self-care", "Self-care"),
                            ("wellness", "Wellness"),
                            ("general", "General"),
                        ],
                        default="general",
                        max_length=20,
                    ),
                ),
                (
                    "response_mode",
                    models.CharField(
                        choices=[
                            ("open", "Open"),
                            ("listen_only", "Listen only"),
                            ("advice", "Advice"),
                            ("encouragement", "Encouragement"),
                        ],
                        default="open",
                        max_length=20,
                    ),
                ),
                ("mood", models.CharField(blank=True, max_length=50)),
                ("is_anonymous", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "author",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="posts",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "posts",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["author", "-created_at"], name="post_author_created_idx"
                    ),
                    models.Index(
                        fields=["category", "-created_at"],
                        name="post_category_created_idx",
                    ),
                ],
            },
        ),
    ]
