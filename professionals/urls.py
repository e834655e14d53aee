# professionals/urls.py
from django.urls import path
from professionals.views import ProfessionalViewSet

urlpatterns = [
    path(
        "apply",
        ProfessionalViewSet.as_view({"post": "apply"}),
        name="professional-apply",
    ),
    path(
        "profile",
        ProfessionalViewSet.as_view({"get": "profile", "patch": "update_profile"}),
        name="professional-profile",
    ),
    path(
        "dm-consent",
        ProfessionalViewSet.as_view({"patch": "dm_consent"}),
        name="professional-dm-consent",
    ),
    path(
        "templates",
        ProfessionalViewSet.as_view({"get": "templates"}),
        name="professional-templates",
    ),
    path(
        "posts/<int:post_id>/response",
        ProfessionalViewSet.as_view({"post": "submit_response"}),
        name="professional-submit-response",
    ),
    path(
        "posts/<int:post_id>/responses",
        ProfessionalViewSet.as_view({"get": "post_responses"}),
        name="professional-post-responses",
    ),
    # Admin
    path(
        "admin/applications",
        ProfessionalViewSet.as_view({"get": "applications"}),
        name="professional-applications",
    ),
    path(
        "admin/<int:user_id>/verify",
        ProfessionalViewSet.as_view({"patch": "verify"}),
        name="professional-verify",
    ),
]
