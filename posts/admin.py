from django.contrib import admin
from .models import Post


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ["id", "author", "category", "response_mode", "is_anonymous", "created_at"]
    list_filter = ["category", "response_mode", "is_anonymous"]
    search_fields = ["content", "author__username"]
    readonly_fields = ["created_at", "updated_at"]
