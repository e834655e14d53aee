# professionals/models.py
import logging
from django.conf import settings
from django.db import models
from django.utils import timezone
from model_utils import FieldTracker
from posts.models import Post, TOPIC_CHOICES

logger = logging.getLogger(__name__)


def default_opt_in_topics():
    return ["general"]


class ProfessionalProfile(models.Model):
    LICENSE_TYPE_CHOICES = [
        ("psychologist", "Psychologist"),
        ("psychiatrist", "Psychiatrist"),
        ("counselor", "Counselor"),
        ("therapist", "Therapist"),
        ("social_worker", "Social worker"),
        ("other", "Other"),
    ]

    VERIFICATION_STATUS_CHOICES = [
        ("pending", "Pending"),
        ("verified", "Verified"),
        ("rejected", "Rejected"),
    ]

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="professional_profile",
    )
    license_number = models.CharField(max_length=100)
    license_type = models.CharField(max_length=20, choices=LICENSE_TYPE_CHOICES)
    issuing_authority = models.CharField(max_length=200)

    # Verification Status
    verification_status = models.CharField(
        max_length=20, choices=VERIFICATION_STATUS_CHOICES, default="pending"
    )
    verified_at = models.DateTimeField(null=True, blank=True)
    verified_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    rejection_reason = models.TextField(blank=True)

    specializations = models.JSONField(default=list, blank=True)
    bio = models.TextField(max_length=1000, blank=True)
    years_of_experience = models.PositiveIntegerField(default=0)
    institution_affiliation = models.CharField(max_length=200, blank=True)

    # Rate limiting
    daily_response_limit = models.PositiveIntegerField(default=20)
    responses_given_today = models.PositiveIntegerField(default=0)
    last_response_reset = models.DateTimeField(default=timezone.now)

    opt_in_topics = models.JSONField(default=default_opt_in_topics)
    is_available = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    tracker = FieldTracker(["verification_status"])

    class Meta:
        db_table = "professional_profiles"
        ordering = ["-created_at"]
        indexes = [
            models.Index(
                fields=["verification_status", "-created_at"],
                name="prof_status_created_idx",
            ),
        ]

    def __str__(self):
        return f"Professional Profile - {self.user.username} ({self.verification_status})"

    @property
    def is_verified(self):
        return self.verification_status == "verified"

    def reset_daily_count(self, now):
        """Zero the counter once a new UTC day has started. Returns True on reset."""
        day_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        if self.last_response_reset < day_start:
            self.responses_given_today = 0
            self.last_response_reset = day_start
            return True
        return False

    @property
    def daily_limit_reached(self):
        return self.responses_given_today >= self.daily_response_limit

    def save(self, *args, **kwargs):
        is_new = self._state.adding
        super().save(*args, **kwargs)

        if not is_new and self.tracker.has_changed("verification_status"):
            logger.info(
                f"Professional application of user {self.user_id} moved from "
                f"{self.tracker.previous('verification_status')} to {self.verification_status}"
            )


class ProfessionalResponse(models.Model):
    """A structured reply from a verified professional to a community post"""

    RESPONSE_TYPE_CHOICES = [
        ("reflective", "Reflective"),
        ("resource", "Resource"),
        ("next_steps", "Next steps"),
        ("encouragement", "Encouragement"),
        ("combined", "Combined"),
    ]

    post = models.ForeignKey(
        Post, on_delete=models.CASCADE, related_name="professional_responses"
    )
    professional = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="professional_responses",
    )
    response_type = models.CharField(max_length=20, choices=RESPONSE_TYPE_CHOICES)
    # reflection / resources / nextSteps / encouragement
    content = models.JSONField(default=dict)
    ai_assisted = models.BooleanField(default=False)
    disclaimer_acknowledged = models.BooleanField(default=False)
    is_visible = models.BooleanField(default=True)
    edited_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "professional_responses"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["post", "professional"], name="unique_response_per_post"
            ),
        ]
        indexes = [
            models.Index(fields=["post", "-created_at"], name="prof_resp_post_idx"),
            models.Index(
                fields=["professional", "-created_at"], name="prof_resp_author_idx"
            ),
        ]

    def __str__(self):
        return f"{self.response_type} response by {self.professional} on post {self.post_id}"


class ResponseTemplate(models.Model):
    TYPE_CHOICES = [
        ("reflective", "Reflective"),
        ("resource", "Resource"),
        ("next_steps", "Next steps"),
        ("encouragement", "Encouragement"),
    ]

    CATEGORY_CHOICES = TOPIC_CHOICES + [("all", "All")]

    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES, default="all")
    title = models.CharField(max_length=100)
    template = models.TextField(max_length=2000)
    placeholders = models.JSONField(default=list, blank=True)
    example_usage = models.CharField(max_length=500, blank=True)
    is_active = models.BooleanField(default=True)
    usage_count = models.PositiveIntegerField(default=0)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="response_templates",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "response_templates"
        ordering = ["-usage_count", "id"]
        indexes = [
            models.Index(
                fields=["type", "category", "is_active"], name="template_lookup_idx"
            ),
        ]

    def __str__(self):
        return f"{self.title} ({self.type}/{self.category})"
