from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient
from django.core.cache import cache

LABELS = {-2: "VERY_SAD", -1: "SAD", 0: "NEUTRAL", 1: "HAPPY", 2: "VERY_HAPPY"}


@pytest.fixture(autouse=True)
def reset_throttle_cache():
    # DRF throttles count requests in the default cache
    cache.clear()


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(
        username="alex", email="alex@example.com", password="s3cret-pass!"
    )


@pytest.fixture
def other_user(db):
    return get_user_model().objects.create_user(
        username="sam", email="sam@example.com", password="s3cret-pass!"
    )


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def auth_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def make_entry(user):
    """Create a stored entry ``days_ago`` days (plus ``hours_ago`` hours) in the past"""

    from mood.models import MoodEntry

    def _make(score, days_ago=0, hours_ago=1, owner=None, **extra):
        return MoodEntry.objects.create(
            user=owner or user,
            mood_score=score,
            mood_label=LABELS[score],
            timestamp=timezone.now() - timedelta(days=days_ago, hours=hours_ago),
            **extra,
        )

    return _make


@pytest.fixture
def admin_user(db):
    return get_user_model().objects.create_user(
        username="morgan", email="morgan@example.com", password="s3cret-pass!", role="admin"
    )


@pytest.fixture
def professional(db):
    """A professional whose application has been approved"""

    from professionals.models import ProfessionalProfile

    member = get_user_model().objects.create_user(
        username="dr_lee",
        email="lee@example.com",
        password="s3cret-pass!",
        role="professional",
    )
    ProfessionalProfile.objects.create(
        user=member,
        license_number="PSY-1234",
        license_type="psychologist",
        issuing_authority="State Board",
        verification_status="verified",
        verified_at=timezone.now(),
        opt_in_topics=["anxiety", "general"],
    )
    return member


@pytest.fixture
def client_for():
    def _client(member):
        client = APIClient()
        client.force_authenticate(user=member)
        return client

    return _client


@pytest.fixture
def make_post(user):
    from posts.models import Post

    def _make(category="general", author=None, **extra):
        return Post.objects.create(
            author=author or user,
            content="Struggling to sleep before exams",
            category=category,
            **extra,
        )

    return _make
