# professionals/services.py
"""
Application review and response submission for verified professionals.

Eligibility is checked in a fixed order: verified status, the daily response
limit, the disclaimer, the target post, topic opt-in, and finally whether the
professional already answered that post.
"""

import logging
from django.db import transaction
from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from posts.models import Post
from professionals.models import ProfessionalProfile, ProfessionalResponse

logger = logging.getLogger(__name__)

DEFAULT_REJECTION_REASON = "Application did not meet verification criteria"


class DailyResponseLimitReached(APIException):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    default_code = "daily_limit_reached"

    def __init__(self, limit):
        super().__init__(
            f"Daily response limit ({limit}) reached. Try again tomorrow."
        )


def submit_application(user, data):
    """Create a pending professional profile for ``user``"""
    existing = ProfessionalProfile.objects.filter(user=user).first()
    if existing is not None:
        raise ValidationError(
            f"You already have a professional application with status: {existing.verification_status}"
        )

    profile = ProfessionalProfile.objects.create(user=user, **data)
    logger.info(f"User {user.id} applied for professional status")
    return profile


@transaction.atomic
def review_application(profile, action, reviewer, now, rejection_reason=None):
    """Approve or reject a professional application"""
    if action == "approve":
        profile.verification_status = "verified"
        profile.verified_at = now
        profile.verified_by = reviewer
        profile.rejection_reason = ""
        profile.user.role = "professional"
        profile.user.save()
    else:
        profile.verification_status = "rejected"
        profile.rejection_reason = rejection_reason or DEFAULT_REJECTION_REASON

    profile.save()
    return profile


def submit_response(user, post_id, data, now):
    """
    Store a professional's response to a post and count it against today's limit.

    ``data`` holds the validated response body. The profile row is locked so
    concurrent submissions cannot overrun the daily limit.
    """
    with transaction.atomic():
        profile = (
            ProfessionalProfile.objects.select_for_update().filter(user=user).first()
        )
        if profile is None or not user.is_professional or not profile.is_verified:
            raise PermissionDenied("Only verified professionals can submit responses")

        profile.reset_daily_count(now)
        if profile.daily_limit_reached:
            raise DailyResponseLimitReached(profile.daily_response_limit)

        if not data.get("disclaimer_acknowledged"):
            raise ValidationError(
                "You must acknowledge the professional response disclaimer"
            )

        post = Post.objects.filter(pk=post_id).first()
        if post is None:
            raise NotFound("Post not found")

        if post.category not in profile.opt_in_topics:
            raise PermissionDenied(
                f'You have not opted into the "{post.category}" topic'
            )

        if ProfessionalResponse.objects.filter(post=post, professional=user).exists():
            raise ValidationError("You have already responded to this post")

        response = ProfessionalResponse.objects.create(
            post=post,
            professional=user,
            response_type=data["response_type"],
            content=data["content"],
            ai_assisted=data.get("ai_assisted", False),
            disclaimer_acknowledged=True,
        )

        profile.responses_given_today += 1
        profile.save(
            update_fields=["responses_given_today", "last_response_reset", "updated_at"]
        )

    logger.info(
        f"Professional {user.id} responded to post {post.id} "
        f"({profile.responses_given_today}/{profile.daily_response_limit} today)"
    )
    return response
