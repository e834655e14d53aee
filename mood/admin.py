# mood/admin.py
from django.contrib import admin
from mood.models import MoodEntry


@admin.register(MoodEntry)
class MoodEntryAdmin(admin.ModelAdmin):
    list_display = ["user", "mood_label", "mood_score", "source", "timestamp"]
    list_filter = ["mood_label", "source", "timestamp"]
    search_fields = ["user__username", "user__email"]
    readonly_fields = [
        "user",
        "timestamp",
        "mood_score",
        "mood_label",
        "note_summary",
        "emotion_tags",
        "source",
        "metadata",
        "created_at",
        "updated_at",
    ]
    fieldsets = [
        ("Entry", {"fields": ["user", "timestamp", "mood_score", "mood_label", "source"]}),
        ("Details", {"fields": ["note_summary", "emotion_tags", "metadata"]}),
        ("Timestamps", {"fields": ["created_at", "updated_at"]}),
    ]

    def has_add_permission(self, request):
        """Entries are only created through the API"""
        return False

    def has_change_permission(self, request, obj=None):
        return False
