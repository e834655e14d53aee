# professionals/permissions.py
from rest_framework.permissions import BasePermission


class IsProfessional(BasePermission):
    """Allow access only to users holding the professional role"""

    message = "Access denied. Insufficient permissions."

    def has_permission(self, request, view):
        return request.user.is_authenticated and request.user.is_professional


class IsVerifiedProfessional(BasePermission):
    """Allow access only to professionals whose application was approved"""

    message = "Only verified professionals can submit responses"

    def has_permission(self, request, view):
        return (
            request.user.is_authenticated
            and request.user.is_professional
            and hasattr(request.user, "professional_profile")
            and request.user.professional_profile.is_verified
        )


class IsPlatformAdmin(BasePermission):
    message = "Access denied. Insufficient permissions."

    def has_permission(self, request, view):
        return request.user.is_authenticated and (
            request.user.role == "admin" or request.user.is_superuser
        )
