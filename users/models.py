# users/models.py
from django.db import models
from django.contrib.auth.models import AbstractUser
from django.utils import timezone
import logging
from model_utils import FieldTracker

logger = logging.getLogger(__name__)


class CustomUser(AbstractUser):
    ROLE_CHOICES = [
        ("user", "User"),
        ("professional", "Professional"),
        ("admin", "Admin"),
    ]

    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default="user")
    email = models.EmailField(unique=True)
    dm_consent = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    tracker = FieldTracker(["role", "is_active"])

    REQUIRED_FIELDS = ["email"]

    class Meta:
        db_table = "users_user"
        verbose_name = "user"
        verbose_name_plural = "users"
        ordering = ["-date_joined"]

    def __str__(self):
        return self.username

    @property
    def is_professional(self):
        return self.role == "professional"

    def save(self, *args, **kwargs):
        is_new = self._state.adding
        super().save(*args, **kwargs)

        if is_new:
            return

        if self.tracker.has_changed("role"):
            logger.info(
                f"User {self.id} role changed from {self.tracker.previous('role')} to {self.role}"
            )
        if self.tracker.has_changed("is_active"):
            logger.info(
                f"User {self.id} {'reactivated' if self.is_active else 'deactivated'}"
            )
