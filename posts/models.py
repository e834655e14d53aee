# posts/models.py
from django.conf import settings
from django.db import models

TOPIC_CHOICES = [
    ("anxiety", "Anxiety"),
    ("depression", "Depression"),
    ("self-care", "Self-care"),
    ("wellness", "Wellness"),
    ("general", "General"),
]


class Post(models.Model):
    """A community post that professionals may respond to"""

    RESPONSE_MODE_CHOICES = [
        ("open", "Open"),
        ("listen_only", "Listen only"),
        ("advice", "Advice"),
        ("encouragement", "Encouragement"),
    ]

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="posts",
    )
    content = models.TextField(max_length=2000)
    category = models.CharField(max_length=20, choices=TOPIC_CHOICES, default="general")
    response_mode = models.CharField(
        max_length=20, choices=RESPONSE_MODE_CHOICES, default="open"
    )
    mood = models.CharField(max_length=50, blank=True)
    is_anonymous = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "posts"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["author", "-created_at"], name="post_author_created_idx"),
            models.Index(fields=["category", "-created_at"], name="post_category_created_idx"),
        ]

    def __str__(self):
        return f"Post {self.id} ({self.category}) by {self.author}"
