from django.contrib import admin
from .models import ProfessionalProfile, ProfessionalResponse, ResponseTemplate


@admin.register(ProfessionalProfile)
class ProfessionalProfileAdmin(admin.ModelAdmin):
    list_display = [
        "user",
        "license_type",
        "verification_status",
        "responses_given_today",
        "daily_response_limit",
        "created_at",
    ]
    list_filter = ["verification_status", "license_type", "is_available"]
    search_fields = ["user__username", "user__email", "license_number"]
    readonly_fields = ["verified_at", "verified_by", "created_at", "updated_at"]


@admin.register(ProfessionalResponse)
class ProfessionalResponseAdmin(admin.ModelAdmin):
    list_display = ["id", "post", "professional", "response_type", "is_visible", "created_at"]
    list_filter = ["response_type", "is_visible", "ai_assisted"]
    readonly_fields = ["created_at", "updated_at"]


@admin.register(ResponseTemplate)
class ResponseTemplateAdmin(admin.ModelAdmin):
    list_display = ["title", "type", "category", "is_active", "usage_count"]
    list_filter = ["type", "category", "is_active"]
    search_fields = ["title", "template"]
